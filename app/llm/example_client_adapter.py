"""Example LLM client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseLLMClient and register the provider in LLMClientFactory.
"""

import json
from typing import ClassVar

from app.llm.client_base import BaseLLMClient


class ExampleClientAdapter(BaseLLMClient):
    """Example adapter that returns a fixed valid analysis JSON.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "summary": "Example summary of the document.",
        "type": "Report",
        "attributes": {},
    }

    def complete(self, prompt: str) -> str:
        _ = prompt
        return json.dumps(self.DEFAULT_RESPONSE)
