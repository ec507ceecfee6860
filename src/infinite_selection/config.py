"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_MIN_CONTENT_HEIGHT = 576.0


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class RetryConfig:
    """Retry-related settings.

    A single attempt by default: a failed page is surfaced to the session and
    only retried by the next qualifying scroll.
    """

    max_attempts: int = 1
    max_backoff_seconds: float = 30.0
    total_retry_budget_seconds: float = 120.0

    def validate(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("retry.max_attempts must be >= 1")
        if self.max_backoff_seconds < 0:
            raise ValueError("retry.max_backoff_seconds must be >= 0")
        if self.total_retry_budget_seconds < 0:
            raise ValueError("retry.total_retry_budget_seconds must be >= 0")


@dataclass(slots=True, frozen=True)
class ThrottlingConfig:
    """Throttling-related settings."""

    min_wait_interval_seconds: float = 0.0

    def validate(self) -> None:
        if self.min_wait_interval_seconds < 0:
            raise ValueError("throttling.min_wait_interval_seconds must be >= 0")


@dataclass(slots=True, frozen=True)
class PaginationConfig:
    """Page cursor and scroll-trigger settings."""

    resource: str = "pokemon"
    page_limit: int = 10
    initial_url: str | None = None
    min_content_height: float = DEFAULT_MIN_CONTENT_HEIGHT
    max_pages: int = 10_000

    def validate(self) -> None:
        if not self.resource and not self.initial_url:
            raise ValueError("pagination.resource must not be empty")
        if self.page_limit < 1:
            raise ValueError("pagination.page_limit must be >= 1")
        if self.initial_url is not None and not self.initial_url.strip():
            raise ValueError("pagination.initial_url must not be blank")
        if self.min_content_height < 0:
            raise ValueError("pagination.min_content_height must be >= 0")
        if self.max_pages < 1:
            raise ValueError("pagination.max_pages must be >= 1")


@dataclass(slots=True, frozen=True)
class SelectionConfig:
    """Selection behaviour settings."""

    allow_unknown_names: bool = False

    def validate(self) -> None:
        if not isinstance(self.allow_unknown_names, bool):
            raise ValueError("selection.allow_unknown_names must be bool")


@dataclass(slots=True, frozen=True)
class InfiniteListConfig:
    """Runtime configuration for the infinite list client."""

    base_url: str = "https://pokeapi.co/api/v2"
    user_agent: str = "infinite-selection/0.1.0"

    transport: TransportConfig = field(default_factory=TransportConfig)
    retry: RetryConfig = field(default_factory=RetryConfig)
    throttling: ThrottlingConfig = field(default_factory=ThrottlingConfig)
    pagination: PaginationConfig = field(default_factory=PaginationConfig)
    selection: SelectionConfig = field(default_factory=SelectionConfig)

    def initial_cursor(self) -> str:
        """First-page cursor handed to new sessions."""

        if self.pagination.initial_url is not None:
            return self.pagination.initial_url
        resource = self.pagination.resource.strip("/")
        return f"{self.base_url.rstrip('/')}/{resource}?limit={self.pagination.page_limit}"

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        self.transport.validate()
        self.retry.validate()
        self.throttling.validate()
        self.pagination.validate()
        self.selection.validate()


__all__ = [
    "DEFAULT_MIN_CONTENT_HEIGHT",
    "TransportConfig",
    "RetryConfig",
    "ThrottlingConfig",
    "PaginationConfig",
    "SelectionConfig",
    "InfiniteListConfig",
]
