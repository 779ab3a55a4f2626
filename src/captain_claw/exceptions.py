"""Exception hierarchy for captain_claw.

Extraction errors are recovered on the upload path; provider and
configuration errors propagate to the caller unchanged.
"""

__all__ = [
    "CaptainClawError",
    "UnsupportedTypeError",
    "ExtractionError",
    "ConfigurationError",
    "ValidationError",
    "NotFoundError",
    "ProviderError",
    "AuthError",
    "RateLimitError",
    "UnavailableError",
]


class CaptainClawError(Exception):
    """Base exception for captain_claw errors."""


class UnsupportedTypeError(CaptainClawError):
    """Raised when a file type has no registered extractor."""

    def __init__(self, extension: str) -> None:
        self.extension = extension
        super().__init__(f"Unsupported file type: {extension}")


class ExtractionError(CaptainClawError):
    """Raised when a supported file cannot be read."""

    def __init__(self, path: str, declared_type: str, reason: str) -> None:
        self.path = path
        self.declared_type = declared_type
        self.reason = reason
        super().__init__(f"Failed to extract {declared_type} from {path}: {reason}")


class ConfigurationError(CaptainClawError):
    """Raised when a model id or provider setup cannot be resolved."""


class ValidationError(CaptainClawError):
    """Raised when request input is missing or malformed."""


class NotFoundError(CaptainClawError):
    """Raised when a referenced project or conversation does not exist."""

    def __init__(self, kind: str, record_id: str) -> None:
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind.capitalize()} not found: {record_id}")


class ProviderError(CaptainClawError):
    """Raised when an LLM provider call fails."""

    def __init__(
        self,
        message: str,
        *,
        provider: str,
        status_code: int | None = None,
    ) -> None:
        self.provider = provider
        self.status_code = status_code
        super().__init__(message)


class AuthError(ProviderError):
    """Raised when a provider credential is missing or rejected."""


class RateLimitError(ProviderError):
    """Raised when a provider answers with HTTP 429."""


class UnavailableError(ProviderError):
    """Raised when the local model runtime cannot be reached."""
