"""Error taxonomy shared by the generation pipeline and the HTTP layer."""

from __future__ import annotations

from typing import Any, Dict


class HireBotError(RuntimeError):
    """Base error rendered to clients as ``{"message": ...}``."""

    status_code = 500

    def __init__(self, message: str, **extra: Any) -> None:
        super().__init__(message)
        self.message = message
        self.extra = extra

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"message": self.message}
        payload.update(self.extra)
        return payload


class ValidationError(HireBotError):
    """Request is missing required fields."""

    status_code = 400


class ConfigurationError(HireBotError):
    """No provider credential is configured."""

    status_code = 500


class TransportError(HireBotError):
    """The provider could not be reached."""

    status_code = 500


class MalformedResponseError(HireBotError):
    """Provider answered 2xx but the envelope had no generated text."""

    status_code = 500


class UpstreamStatusError(HireBotError):
    """Provider answered with a non-2xx status."""

    status_code = 500

    def __init__(self, message: str, provider_status: int, **extra: Any) -> None:
        super().__init__(message, **extra)
        self.provider_status = provider_status


class ModelNotFoundError(UpstreamStatusError):
    status_code = 404


class RateLimitedError(UpstreamStatusError):
    status_code = 429

    def __init__(self, retry_after: int, provider_status: int = 429) -> None:
        super().__init__(
            f"Rate limit exceeded. Please wait {retry_after} seconds before trying again.",
            provider_status,
            retryAfter=retry_after,
        )
        self.retry_after = retry_after


class CredentialError(UpstreamStatusError):
    status_code = 402


class UpstreamFailureError(UpstreamStatusError):
    status_code = 500
