"""Gmail connector using the Gmail REST API with a bearer access token.

Flow:
1. GET messages?maxResults=N&q=newer_than:30d (following nextPageToken)
2. GET messages/{id} for at most fetch_limit of the listed IDs
3. Map each payload to RawMessage (headers + snippet + internalDate)

The access token comes from an OAuth exchange done elsewhere; it is passed
in explicitly and never stored globally.
"""

import logging
from typing import Any, Optional

import httpx

from opportunity_scanner.connectors.base import DEFAULT_QUERY, BaseConnector, TransportError
from opportunity_scanner.models.message import RawMessage

from .parsers import raw_message_from_payload

logger = logging.getLogger(__name__)


class GmailConnector(BaseConnector):
    """
    Connector for a Gmail mailbox ("users/me").
    """

    source_id = "gmail"

    BASE_URL = "https://gmail.googleapis.com/gmail/v1/users/me/"
    PAGE_SIZE_LIMIT = 500

    def __init__(
        self,
        access_token: Optional[str] = None,
        client: Optional[httpx.Client] = None,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
    ):
        """
        Args:
            access_token: OAuth bearer token with gmail.readonly scope
            client: Optional httpx client (headers/base_url are still applied per request)
            base_url: Override API root (tests, proxies)
            timeout: Request timeout in seconds when no client is given
        """
        if not access_token or not access_token.strip():
            raise ValueError("Gmail connector requires an access token")
        self._base_url = (base_url or self.BASE_URL).rstrip("/") + "/"
        self._headers = {
            "Authorization": f"Bearer {access_token.strip()}",
            "Content-Type": "application/json",
        }
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)

    def _get(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """GET an endpoint relative to users/me and return the JSON body."""
        url = self._base_url + endpoint
        try:
            resp = self._client.get(url, params=params, headers=self._headers)
        except httpx.HTTPError as e:
            logger.warning("Gmail request failed for %s: %s", endpoint, e)
            raise TransportError(f"Gmail API request failed: {e}") from e

        if resp.is_error:
            logger.warning("Gmail API returned %s for %s", resp.status_code, endpoint)
            raise TransportError(f"Gmail API error: {resp.status_code} {resp.reason_phrase}")
        return resp.json()

    def list_message_ids(self, max_results: int = 50, query: Optional[str] = DEFAULT_QUERY) -> list[str]:
        """Collect up to max_results message IDs, following nextPageToken."""
        ids: list[str] = []
        page_token: Optional[str] = None

        while len(ids) < max_results:
            params: dict[str, Any] = {
                "maxResults": min(max_results - len(ids), self.PAGE_SIZE_LIMIT),
            }
            if query:
                params["q"] = query
            if page_token:
                params["pageToken"] = page_token

            payload = self._get("messages", params=params)
            for item in payload.get("messages") or []:
                if item.get("id"):
                    ids.append(item["id"])

            page_token = payload.get("nextPageToken")
            if not page_token or not payload.get("messages"):
                break

        return ids[:max_results]

    def fetch_message(self, message_id: str) -> dict[str, Any]:
        """Fetch one full message payload by ID."""
        return self._get(f"messages/{message_id}")

    def to_raw_message(self, payload: dict[str, Any]) -> RawMessage:
        """Convert Gmail message payload to RawMessage."""
        return raw_message_from_payload(payload)
