"""Domain concept for mapping provider exceptions to API error bodies."""
import logging
from dataclasses import dataclass

import httpx

from profile_data_agg.providers.core.exceptions import (ApiError,
                                                        MissingCredentialError,
                                                        ResourceNotFoundError)
from profile_data_agg.utils import NOT_AVAILABLE

logger = logging.getLogger(__name__)


def upstream_message(exc: httpx.HTTPStatusError) -> str:
    """Prefer the upstream's own ``message`` field over the httpx description."""
    try:
        body = exc.response.json()
    except ValueError:
        return str(exc)
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return str(exc)


@dataclass(frozen=True)
class ProviderErrorMapper:
    """Maps provider/backend exceptions to an ApiError.

    One mapper per endpoint domain (user, country, exchange, news) holds the
    error labels for that domain and which body fields stay populated with
    the "N/A" sentinel on failure.
    """

    api_name: str = "API"
    error: str = "Request failed"
    not_found_error: str | None = None
    config_error: str | None = None
    propagate_upstream_status: bool = False
    sentinel_fields: tuple[str, ...] = ()

    def to_api_error(self, exc: Exception) -> ApiError:
        """Map a provider exception to an ApiError (status, error, message).

        Args:
            exc: The exception raised by the provider or service.

        Returns:
            ApiError suitable for the app exception handler.
        """
        extra = {name: NOT_AVAILABLE for name in self.sentinel_fields}
        if isinstance(exc, MissingCredentialError):
            error = self.config_error or f"{self.api_name} API key not configured"
            return ApiError(500, error, str(exc), extra)
        if isinstance(exc, ResourceNotFoundError) and self.not_found_error:
            return ApiError(404, self.not_found_error, str(exc), extra)
        if isinstance(exc, httpx.HTTPStatusError):
            status = exc.response.status_code
            message = upstream_message(exc)
            if status == 404 and self.not_found_error:
                return ApiError(404, self.not_found_error, message, extra)
            if self.propagate_upstream_status:
                return ApiError(status, self.error, message, extra)
            return ApiError(500, self.error, message, extra)
        return ApiError(500, self.error, str(exc) or f"{self.api_name} error", extra)

    def raise_api_error(self, exc: Exception, subject: str | None = None) -> None:
        """Map provider exception to ApiError, log it and raise. Never returns."""
        api_error = self.to_api_error(exc)
        logger.warning(
            "%s API error%s: %s",
            self.api_name,
            f" for '{subject}'" if subject else "",
            api_error.message,
        )
        raise api_error from exc
