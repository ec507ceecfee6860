from __future__ import annotations

import pytest

from infinite_selection.async_client import AsyncInfiniteListClient
from infinite_selection.client import InfiniteListClient
from infinite_selection.config import InfiniteListConfig, PaginationConfig
from infinite_selection.core.async_transport import AsyncTransport
from infinite_selection.core.transport import SyncTransport
from infinite_selection.selection.models import ScrollSample
from tests.shared.payloads import make_page_payload
from tests.shared.transport import (
    AsyncSequencedClient,
    Response,
    SyncSequencedClient,
    build_config,
)

BOTTOM = ScrollSample(scroll_top=424, client_height=576, scroll_height=1000)


def _steps():
    return [
        Response(200, make_page_payload(["a", "b"], next_cursor="p2")),
        RuntimeError("flaky"),
        Response(200, make_page_payload(["b", "c"], next_cursor="p3")),
        Response(200, make_page_payload(["d"], next_cursor=None)),
    ]


def _config() -> InfiniteListConfig:
    base = build_config()
    return InfiniteListConfig(
        throttling=base.throttling,
        retry=base.retry,
        pagination=PaginationConfig(initial_url="p1"),
    )


async def _no_sleep(_: float) -> None:
    return None


@pytest.mark.asyncio
async def test_sync_and_async_sessions_reach_same_snapshot():
    config = _config()

    sync_http = SyncSequencedClient(_steps())
    sync_client = InfiniteListClient(
        config=config,
        transport=SyncTransport(config, client=sync_http, sleeper=lambda _: None),
    )
    with sync_client, sync_client.open_session() as session:
        session.toggle("b")
        for _ in range(4):
            session.on_scroll(BOTTOM)
        session.toggle("d")
        sync_snapshot = session.snapshot()

    async_http = AsyncSequencedClient(_steps())
    async_client = AsyncInfiniteListClient(
        config=config,
        transport=AsyncTransport(config, client=async_http, sleeper=_no_sleep),
    )
    async with async_client:
        async with async_client.open_session() as async_session:
            async_session.toggle("b")
            for _ in range(4):
                await async_session.on_scroll(BOTTOM)
            async_session.toggle("d")
            async_snapshot = async_session.snapshot()

    assert sync_snapshot == async_snapshot
    assert [item.name for item in sync_snapshot.catalog] == ["a", "b", "c", "d"]
    assert [entry.name for entry in sync_snapshot.selection] == ["b", "d"]
    assert sync_http.urls == async_http.urls == ["p1", "p2", "p2", "p3"]
