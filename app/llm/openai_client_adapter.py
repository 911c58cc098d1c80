import httpx
import openai

from app.llm.client_base import BaseLLMClient
from app.llm.exceptions import LLMError, LLMNetworkError


class OpenAIClientAdapter(BaseLLMClient):
    """LLM client adapter built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        base_url: str | None = None,
        temperature: float = 0.0,
    ) -> None:
        self._model = model
        self._temperature = temperature
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def complete(self, prompt: str) -> str:
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                temperature=self._temperature,
                messages=[{"role": "user", "content": prompt}],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise LLMNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise LLMNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise LLMError("AI returned no choices")
        return response.choices[0].message.content or ""
