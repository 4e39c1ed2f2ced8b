"""Custom exceptions for the news application."""


class NewsAppError(Exception):
    """Base exception for the news application."""

    pass


class ConfigurationError(NewsAppError):
    """Exception raised for configuration errors."""

    pass


class ProviderError(NewsAppError):
    """Exception raised when an upstream news provider cannot be used."""

    def __init__(self, provider: str, message: str, status_code: int | None = None):
        self.provider = provider
        self.message = message
        self.status_code = status_code
        prefix = f"{provider} error"
        if status_code is not None:
            prefix = f"{provider} error {status_code}"
        super().__init__(f"{prefix}: {message}")


class TransientProviderError(ProviderError):
    """Network failure, timeout or non-success HTTP status from a provider."""

    pass


class MalformedResponseError(ProviderError):
    """Provider answered but the payload could not be decoded or mapped."""

    pass


class TotalExhaustionError(NewsAppError):
    """Every configured provider failed for a single fetch."""

    def __init__(self, errors: list[ProviderError]):
        self.errors = errors
        summary = "; ".join(str(e) for e in errors) or "no providers configured"
        super().__init__(f"All news providers failed: {summary}")
