"""Tests for the signed AtomPub client and feed page source."""

import httpx
import pytest

from hatena_blog.errors import RemoteRequestError, TransportError
from hatena_blog.fetch.client import AtomPubClient
from hatena_blog.fetch.pages import FeedPageSource

from conftest import (
    API_KEY,
    BLOG_ID,
    ENDPOINT,
    HATENA_ID,
    RecordingTransport,
    atom_response,
    feed_entry_xml,
    feed_xml,
)


def _client(transport: httpx.MockTransport) -> AtomPubClient:
    return AtomPubClient(HATENA_ID, API_KEY, transport=transport, user_agent="test-agent")


def test_get_sends_fresh_wsse_header_and_accept():
    transport = RecordingTransport({("GET", ENDPOINT): atom_response(feed_xml([]))})
    client = _client(transport)

    client.get(ENDPOINT)
    client.get(ENDPOINT)

    first, second = transport.requests
    assert first.headers["Accept"] == "application/atom+xml"
    assert first.headers["User-Agent"] == "test-agent"
    assert first.headers["X-WSSE"].startswith(f'UsernameToken Username="{HATENA_ID}"')
    assert first.headers["X-WSSE"] != second.headers["X-WSSE"]
    assert "Content-Type" not in first.headers


def test_put_sends_atom_body():
    url = f"{ENDPOINT}/123"
    transport = RecordingTransport({("PUT", url): atom_response("<entry/>")})

    _client(transport).put(url, "<entry>本文</entry>")

    request = transport.requests[0]
    assert request.headers["Content-Type"] == "application/atom+xml"
    assert request.content == "<entry>本文</entry>".encode("utf-8")


@pytest.mark.parametrize("status", [401, 404, 500])
def test_error_status_raises_with_code_and_body(status):
    transport = RecordingTransport({("GET", ENDPOINT): httpx.Response(status, text="failure details")})

    with pytest.raises(RemoteRequestError) as exc_info:
        _client(transport).get(ENDPOINT)

    error = exc_info.value
    assert error.status_code == status
    assert error.body == "failure details"
    assert error.url == ENDPOINT
    assert str(status) in str(error)


def test_post_requires_created_status():
    transport = RecordingTransport({("POST", ENDPOINT): atom_response("<entry/>", status_code=200)})
    with pytest.raises(RemoteRequestError):
        _client(transport).post(ENDPOINT, "<entry/>")


def test_network_failure_raises_transport_error():
    transport = RecordingTransport({("GET", ENDPOINT): httpx.ConnectError("connection refused")})

    with pytest.raises(TransportError) as exc_info:
        _client(transport).get(ENDPOINT)
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


def test_feed_page_source_follows_explicit_urls():
    page_two = f"{ENDPOINT}?page=2"
    transport = RecordingTransport(
        {
            ("GET", ENDPOINT): atom_response(
                feed_xml([feed_entry_xml("1", "2024-01-01T00:00:00+09:00")], next_url=page_two)
            ),
            ("GET", page_two): atom_response(feed_xml([feed_entry_xml("2")])),
        }
    )
    source = FeedPageSource(_client(transport), ENDPOINT, f"https://{BLOG_ID}")

    first = source.fetch_first_page()
    second = source.fetch_page(first.next_page_url)

    assert [e.entry_id for e in first.entries] == ["1"]
    assert first.next_page_url == page_two
    assert second.entries[0].alternate_url == f"https://{BLOG_ID}/entry/2"
    assert second.next_page_url is None
    assert [str(r.url) for r in transport.requests] == [ENDPOINT, page_two]
