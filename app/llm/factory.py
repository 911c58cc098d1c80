from typing import ClassVar

from app.config.settings import Settings
from app.llm.client_base import BaseLLMClient
from app.llm.example_client_adapter import ExampleClientAdapter
from app.llm.openai_client_adapter import OpenAIClientAdapter


class LLMClientFactory:
    """Creates the configured LLM client adapter."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseLLMClient:
        """Create a configured LLM client from application settings."""
        provider = settings.llm_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        return OpenAIClientAdapter(
            api_key=settings.llm_api_key,
            model=settings.llm_model_name,
            timeout_seconds=settings.llm_timeout_seconds or 30,
            base_url=cls._resolve_base_url(provider, settings),
            temperature=settings.llm_temperature,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        configured = (settings.llm_base_url or "").strip()
        if provider == "openai":
            return configured or None
        if provider == "openai_compatible":
            if not configured:
                raise ValueError(
                    "llm_base_url is required for llm_provider=openai_compatible"
                )
            return configured
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return configured or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown LLM provider '{provider}'. Choose from: {supported}")
