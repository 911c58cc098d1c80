from abc import ABC, abstractmethod


class BaseLLMClient(ABC):
    """Contract for provider-specific single-turn text completion clients."""

    @abstractmethod
    def complete(self, prompt: str) -> str:
        """Return the provider's reply to a single user prompt as plain text.

        Raises:
            LLMError: on any provider, transport or timeout failure.
        """
