from __future__ import annotations

import pytest

from infinite_selection.client import InfiniteListClient
from infinite_selection.config import InfiniteListConfig, PaginationConfig, SelectionConfig
from infinite_selection.core.errors import (
    ListClientClosedError,
    ListTransportError,
    ListValidationError,
)
from infinite_selection.core.models import FetchFailure
from tests.shared.payloads import make_page_payload


class DummyTransport:
    def __init__(self, pages: dict[str, dict[str, object]] | None = None):
        self.pages = pages or {}
        self.closed = False
        self.urls: list[str] = []

    def close(self):
        self.closed = True

    def request(self, url: str):
        self.urls.append(url)
        payload = self.pages.get(url)
        if payload is None:
            raise ListTransportError("network/transport error", cause="network")
        return payload


CONFIG = InfiniteListConfig(pagination=PaginationConfig(initial_url="p1"))


def test_client_context_manager_closes_transport():
    transport = DummyTransport()
    with InfiniteListClient(transport=transport) as client:
        assert client is not None
    assert transport.closed is True


def test_client_rejects_invalid_config():
    with pytest.raises(ListValidationError):
        InfiniteListClient(config=InfiniteListConfig(base_url=""), transport=DummyTransport())


def test_fetch_page_defaults_to_initial_cursor():
    transport = DummyTransport({"p1": make_page_payload(["a"], next_cursor="p2")})
    with InfiniteListClient(config=CONFIG, transport=transport) as client:
        page = client.fetch_page()
    assert page.next_cursor == "p2"
    assert transport.urls == ["p1"]


def test_fetch_page_raises_while_try_fetch_page_returns_failure():
    with InfiniteListClient(config=CONFIG, transport=DummyTransport()) as client:
        with pytest.raises(ListTransportError):
            client.fetch_page("missing")
        assert isinstance(client.try_fetch_page("missing"), FetchFailure)


def test_iter_pages_walks_every_page():
    transport = DummyTransport(
        {
            "p1": make_page_payload(["a"], next_cursor="p2"),
            "p2": make_page_payload(["b"], next_cursor=None),
        }
    )
    with InfiniteListClient(config=CONFIG, transport=transport) as client:
        names = [page.records[0].name for page in client.iter_pages()]
    assert names == ["a", "b"]


def test_iter_pages_raises_when_closed_mid_iteration():
    transport = DummyTransport(
        {
            "p1": make_page_payload(["a"], next_cursor="p2"),
            "p2": make_page_payload(["b"], next_cursor=None),
        }
    )
    client = InfiniteListClient(config=CONFIG, transport=transport)
    iterator = client.iter_pages()
    next(iterator)
    client.close()
    with pytest.raises(ListClientClosedError):
        next(iterator)


def test_client_raises_when_used_after_close():
    client = InfiniteListClient(transport=DummyTransport())
    client.close()
    with pytest.raises(ListClientClosedError):
        client.open_session()
    with pytest.raises(ListClientClosedError):
        client.fetch_page()


def test_open_session_uses_client_fetcher_and_config():
    transport = DummyTransport({"p1": make_page_payload(["a", "b"], next_cursor=None)})
    config = InfiniteListConfig(
        pagination=PaginationConfig(initial_url="p1"),
        selection=SelectionConfig(allow_unknown_names=True),
    )
    with InfiniteListClient(config=config, transport=transport) as client:
        with client.open_session() as session:
            assert session.state.store.names == ("a", "b")
            assert session.status.exhausted is True
            assert session.select("unknown") is True


def test_open_session_rejects_blank_start_cursor():
    with InfiniteListClient(transport=DummyTransport()) as client:
        with pytest.raises(ListValidationError):
            client.open_session(start_cursor=" ")


def test_session_fetch_after_client_close_raises_closed_error():
    transport = DummyTransport({"p1": make_page_payload(["a"], next_cursor="p2")})
    client = InfiniteListClient(config=CONFIG, transport=transport)
    session = client.open_session()
    session.start()
    client.close()
    with pytest.raises(ListClientClosedError):
        session.advance()
