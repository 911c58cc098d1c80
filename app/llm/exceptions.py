class LLMError(Exception):
    """Raised when the LLM provider call fails."""


class LLMNetworkError(LLMError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
