"""Shared response parsing helpers for sync/async transports."""

from __future__ import annotations

from typing import Protocol

from .errors import (
    ListApiError,
    ListProtocolError,
    ListServerError,
    ListUnavailableError,
    ListValidationError,
    classify_http_status,
)


class JsonPayloadResponse(Protocol):
    def json(self) -> object: ...


def parse_json_payload(
    response: JsonPayloadResponse,
    *,
    http_status: int | None,
) -> dict[str, object]:
    """Parse response JSON payload and map parse failures to domain errors."""

    try:
        payload = response.json()
    except Exception as exc:
        raise _json_parse_error(http_status=http_status) from exc

    if not isinstance(payload, dict):
        raise ListProtocolError(
            "response JSON root must be an object",
            http_status=http_status,
        )
    if any(not isinstance(key, str) for key in payload):
        raise ListProtocolError(
            "response JSON object keys must be strings",
            http_status=http_status,
        )
    return payload


def classify_response_outcome(*, http_status: int | None) -> ListApiError | None:
    """Classify a parsed response by its HTTP status."""

    return classify_http_status(http_status)


def _json_parse_error(*, http_status: int | None) -> ListApiError:
    message = "response body is not valid JSON"
    if http_status in (429, 503):
        return ListUnavailableError(
            message,
            http_status=http_status,
            cause="server_transient",
        )
    if http_status is not None and http_status >= 500:
        return ListServerError(
            message,
            http_status=http_status,
            cause="server_transient",
        )
    if http_status is not None and http_status >= 400:
        return ListValidationError(
            message,
            http_status=http_status,
        )
    return ListProtocolError(
        message,
        http_status=http_status,
    )


__all__ = [
    "parse_json_payload",
    "classify_response_outcome",
]
