"""Tests for the Gmail connector against a mocked HTTP transport."""

from unittest.mock import patch

import httpx
import pytest

from opportunity_scanner.connectors import TransportError
from opportunity_scanner.connectors.gmail import GmailConnector

from conftest import make_gmail_payload


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def _mailbox_handler(pages: list[dict], messages: dict[str, dict], seen: list[httpx.Request]):
    """Serve list pages in order (by pageToken) and message payloads by ID."""

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        path = request.url.path
        if path.endswith("/messages"):
            token = request.url.params.get("pageToken")
            index = int(token) if token else 0
            return httpx.Response(200, json=pages[index])
        message_id = path.rsplit("/", 1)[-1]
        if message_id in messages:
            return httpx.Response(200, json=messages[message_id])
        return httpx.Response(404, json={"error": "not found"})

    return handler


class TestGmailConnectorInit:
    """Tests for constructor."""

    @pytest.mark.parametrize("token", [None, "", "   "])
    def test_requires_token(self, token) -> None:
        with pytest.raises(ValueError, match="access token"):
            GmailConnector(access_token=token)


class TestGmailConnectorListIds:
    """Tests for list_message_ids."""

    def test_sends_bearer_token_and_query(self) -> None:
        seen: list[httpx.Request] = []
        handler = _mailbox_handler([{"messages": [{"id": "a"}], "resultSizeEstimate": 1}], {}, seen)
        connector = GmailConnector(access_token="tok-123", client=_client(handler))

        ids = connector.list_message_ids(max_results=50)

        assert ids == ["a"]
        request = seen[0]
        assert request.headers["Authorization"] == "Bearer tok-123"
        assert request.url.params["q"] == "newer_than:30d"
        assert request.url.params["maxResults"] == "50"
        assert str(request.url).startswith("https://gmail.googleapis.com/gmail/v1/users/me/messages")

    def test_follows_next_page_token(self) -> None:
        seen: list[httpx.Request] = []
        pages = [
            {"messages": [{"id": "a"}, {"id": "b"}], "nextPageToken": "1"},
            {"messages": [{"id": "c"}]},
        ]
        connector = GmailConnector(access_token="t", client=_client(_mailbox_handler(pages, {}, seen)))

        assert connector.list_message_ids(max_results=10) == ["a", "b", "c"]
        assert len(seen) == 2
        assert seen[1].url.params["maxResults"] == "8"

    def test_stops_at_max_results(self) -> None:
        seen: list[httpx.Request] = []
        pages = [{"messages": [{"id": "a"}, {"id": "b"}], "nextPageToken": "1"}]
        connector = GmailConnector(access_token="t", client=_client(_mailbox_handler(pages, {}, seen)))

        assert connector.list_message_ids(max_results=2) == ["a", "b"]
        assert len(seen) == 1

    def test_empty_mailbox(self) -> None:
        seen: list[httpx.Request] = []
        connector = GmailConnector(
            access_token="t",
            client=_client(_mailbox_handler([{"resultSizeEstimate": 0}], {}, seen)),
        )
        assert connector.list_message_ids() == []

    def test_http_error_raises_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"error": "invalid credentials"})

        connector = GmailConnector(access_token="expired", client=_client(handler))
        with pytest.raises(TransportError, match="401"):
            connector.list_message_ids()

    def test_network_error_raises_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        connector = GmailConnector(access_token="t", client=_client(handler))
        with pytest.raises(TransportError, match="request failed"):
            connector.list_message_ids()


class TestGmailConnectorFetchRecent:
    """Tests for fetch_recent (list + bounded fetch + map)."""

    def test_fetch_limit_bounds_message_fetches(self) -> None:
        seen: list[httpx.Request] = []
        ids = [f"m{i}" for i in range(5)]
        pages = [{"messages": [{"id": i} for i in ids]}]
        messages = {i: make_gmail_payload(i) for i in ids}
        connector = GmailConnector(access_token="t", client=_client(_mailbox_handler(pages, messages, seen)))

        raw = connector.fetch_recent(max_results=5, fetch_limit=3)

        assert [r.id for r in raw] == ["m0", "m1", "m2"]
        assert len(seen) == 4

    def test_unmappable_payload_skipped(self) -> None:
        seen: list[httpx.Request] = []
        pages = [{"messages": [{"id": "good"}, {"id": "bad"}]}]
        messages = {
            "good": make_gmail_payload("good"),
            "bad": make_gmail_payload("bad", internal_date=None),
        }
        connector = GmailConnector(access_token="t", client=_client(_mailbox_handler(pages, messages, seen)))

        raw = connector.fetch_recent()
        assert [r.id for r in raw] == ["good"]

    def test_missing_message_raises(self) -> None:
        seen: list[httpx.Request] = []
        pages = [{"messages": [{"id": "gone"}]}]
        connector = GmailConnector(access_token="t", client=_client(_mailbox_handler(pages, {}, seen)))
        with pytest.raises(TransportError, match="404"):
            connector.fetch_recent()

    @patch.object(GmailConnector, "fetch_message")
    @patch.object(GmailConnector, "list_message_ids")
    def test_passes_query_through(self, mock_list: object, mock_fetch: object) -> None:
        mock_list.return_value = ["x"]
        mock_fetch.return_value = make_gmail_payload("x")
        connector = GmailConnector(access_token="t")

        raw = connector.fetch_recent(max_results=7, fetch_limit=1, query="label:jobs")

        mock_list.assert_called_once_with(max_results=7, query="label:jobs")
        mock_fetch.assert_called_once_with("x")
        assert raw[0].id == "x"
