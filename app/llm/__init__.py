from app.llm.client_base import BaseLLMClient
from app.llm.factory import LLMClientFactory

__all__ = ["BaseLLMClient", "LLMClientFactory"]
