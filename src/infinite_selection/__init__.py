"""Public package exports for the infinite list selection client."""

from .async_client import AsyncInfiniteListClient
from .client import InfiniteListClient
from .config import InfiniteListConfig

__all__ = ["InfiniteListClient", "AsyncInfiniteListClient", "InfiniteListConfig"]
