# src/novelizer/errors.py


class NovelizerError(Exception):
    """Base class for all novelizer errors."""


class ConfigurationError(NovelizerError):
    """Raised before generation when settings or input make a run impossible."""


class ProviderError(NovelizerError):
    """Raised when a provider request fails.

    `status_code` is None when no HTTP response was received.
    """

    def __init__(
        self,
        provider: str,
        *,
        status_code: int | None = None,
        reason: str = "",
    ) -> None:
        self.provider = provider
        self.status_code = status_code
        self.reason = reason
        if status_code is None:
            message = f"{provider} API error: {reason}"
        else:
            message = f"{provider} API error: {status_code} {reason}".rstrip()
        super().__init__(message)


class UnsupportedProviderError(NovelizerError, ValueError):
    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Unknown LLM provider: {provider}")
