"""Provider exceptions and the HTTP-facing ApiError they are mapped to."""
from typing import Any


class ProviderError(Exception):
    """Base class for errors raised by upstream providers."""


class ResourceNotFoundError(ProviderError, ValueError):
    """The upstream answered but has no data for the requested resource."""


class UnexpectedPayloadError(ProviderError):
    """The upstream body is empty or does not have the expected shape."""


class MissingCredentialError(ProviderError):
    """A required API key is not configured."""

    def __init__(self, variable: str, api_name: str) -> None:
        super().__init__(f"Please set {variable} in your environment")
        self.variable = variable
        self.api_name = api_name


class ApiError(Exception):
    """Error surfaced to API clients as a JSON body.

    Rendered by the app exception handler as
    ``{"error": error, "message": message, **extra}`` with ``status_code``.
    """

    def __init__(
        self,
        status_code: int,
        error: str,
        message: str,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error = error
        self.message = message
        self.extra = extra or {}

    def to_body(self) -> dict[str, Any]:
        """JSON body for the response."""
        return {"error": self.error, "message": self.message, **self.extra}
