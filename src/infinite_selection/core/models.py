"""Core page models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class PageRecord:
    name: str
    url: str


@dataclass(slots=True, frozen=True)
class Page:
    records: tuple[PageRecord, ...] | list[PageRecord]
    next_cursor: str | None
    previous_cursor: str | None = None
    count: int | None = None

    def __post_init__(self) -> None:
        if isinstance(self.records, tuple):
            return
        object.__setattr__(self, "records", tuple(self.records))

    @property
    def is_last(self) -> bool:
        return self.next_cursor is None


@dataclass(slots=True, frozen=True)
class FetchFailure:
    """A page fetch that produced no records.

    Network errors, HTTP errors and malformed payloads all collapse into this
    one value; ``error_type`` keeps the originating exception name for logs.
    """

    message: str
    cause: str | None = None
    error_type: str | None = None
    http_status: int | None = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> "FetchFailure":
        return cls(
            message=str(exc) or exc.__class__.__name__,
            cause=getattr(exc, "cause", None),
            error_type=exc.__class__.__name__,
            http_status=getattr(exc, "http_status", None),
        )


__all__ = [
    "PageRecord",
    "Page",
    "FetchFailure",
]
