"""Error types and status mapping."""

from __future__ import annotations


class ListApiError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.cause = cause


class ListTransportError(ListApiError):
    """Network/transport-level failure."""


class ListClientClosedError(ListApiError):
    """Raised when client is used after close."""


class ListValidationError(ListApiError):
    """Invalid input / request rejected."""


class ListServerError(ListApiError):
    """Server-side unexpected error."""


class ListUnavailableError(ListApiError):
    """Server unavailable or rate limited."""


class ListProtocolError(ListApiError):
    """Response shape or pagination inconsistency."""


def classify_http_status(
    http_status: int | None,
    *,
    message: str = "list API request failed",
) -> ListApiError | None:
    """Map an HTTP status to a domain exception, or None on success."""

    if http_status is None:
        return ListProtocolError("Missing HTTP status")
    if 200 <= http_status < 300:
        return None
    if http_status in (429, 503):
        return ListUnavailableError(
            message,
            http_status=http_status,
            cause="server_transient",
        )
    if http_status >= 500:
        return ListServerError(
            message,
            http_status=http_status,
            cause="server_transient",
        )
    if http_status >= 400:
        return ListValidationError(message, http_status=http_status)
    return ListProtocolError(
        "Unexpected HTTP status in list API response",
        http_status=http_status,
    )


__all__ = [
    "ListApiError",
    "ListTransportError",
    "ListClientClosedError",
    "ListValidationError",
    "ListServerError",
    "ListUnavailableError",
    "ListProtocolError",
    "classify_http_status",
]
