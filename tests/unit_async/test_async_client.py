from __future__ import annotations

import pytest

from infinite_selection.async_client import AsyncInfiniteListClient
from infinite_selection.config import InfiniteListConfig, PaginationConfig
from infinite_selection.core.errors import ListClientClosedError, ListTransportError
from infinite_selection.core.models import FetchFailure
from tests.shared.payloads import make_page_payload

CONFIG = InfiniteListConfig(pagination=PaginationConfig(initial_url="p1"))


class DummyAsyncTransport:
    def __init__(self, pages: dict[str, dict[str, object]] | None = None):
        self.pages = pages or {}
        self.closed = False

    async def close(self):
        self.closed = True

    async def request(self, url: str):
        payload = self.pages.get(url)
        if payload is None:
            raise ListTransportError("network/transport error", cause="network")
        return payload


def _paged_transport() -> DummyAsyncTransport:
    return DummyAsyncTransport(
        {
            "p1": make_page_payload(["a"], next_cursor="p2"),
            "p2": make_page_payload(["b"], next_cursor=None),
        }
    )


@pytest.mark.asyncio
async def test_async_client_context_manager_closes_transport():
    transport = DummyAsyncTransport()
    async with AsyncInfiniteListClient(transport=transport) as client:
        assert client is not None
    assert transport.closed is True


@pytest.mark.asyncio
async def test_async_client_raises_when_used_after_close():
    client = AsyncInfiniteListClient(config=CONFIG, transport=_paged_transport())
    await client.close()
    with pytest.raises(ListClientClosedError):
        await client.fetch_page()
    with pytest.raises(ListClientClosedError):
        client.open_session()
    with pytest.raises(ListClientClosedError):
        client.iter_pages()


@pytest.mark.asyncio
async def test_async_client_iterates_pages():
    async with AsyncInfiniteListClient(config=CONFIG, transport=_paged_transport()) as client:
        names = [page.records[0].name async for page in client.iter_pages()]
        failure = await client.try_fetch_page("missing")
    assert names == ["a", "b"]
    assert isinstance(failure, FetchFailure)


@pytest.mark.asyncio
async def test_async_client_iter_raises_when_closed_mid_iteration():
    client = AsyncInfiniteListClient(config=CONFIG, transport=_paged_transport())
    iterator = client.iter_pages().__aiter__()
    first = await anext(iterator)
    assert first.records[0].name == "a"
    await client.close()
    with pytest.raises(ListClientClosedError):
        await anext(iterator)


@pytest.mark.asyncio
async def test_async_client_session_loads_and_selects():
    async with AsyncInfiniteListClient(config=CONFIG, transport=_paged_transport()) as client:
        async with client.open_session() as session:
            assert session.state.store.names == ("a",)
            assert session.toggle("a") is True
            assert await session.advance() is True
            snapshot = session.snapshot()
    assert [item.name for item in snapshot.catalog] == ["a", "b"]
    assert [entry.name for entry in snapshot.selection] == ["a"]
    assert snapshot.status.exhausted is True
