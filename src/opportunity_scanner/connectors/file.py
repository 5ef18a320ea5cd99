"""File connector: Gmail-shaped message payloads saved as a JSON array."""

import json
from pathlib import Path
from typing import Any, Optional

from opportunity_scanner.connectors.base import DEFAULT_QUERY, BaseConnector
from opportunity_scanner.models.message import RawMessage

from .gmail.parsers import raw_message_from_payload


class FileConnector(BaseConnector):
    """
    Reads exported messages (as returned by Gmail messages.get) from disk.
    Useful for offline runs and replaying a fetched batch.
    """

    source_id = "file"

    def __init__(self, path: Optional[str | Path] = None):
        if path is None:
            raise ValueError("File connector requires a path to a JSON file")
        self._path = Path(path)
        self._payloads: Optional[dict[str, dict[str, Any]]] = None

    def _load(self) -> dict[str, dict[str, Any]]:
        """Load payloads keyed by ID, keeping file order."""
        if self._payloads is None:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            if isinstance(data, dict):
                data = data.get("messages") or []
            if not isinstance(data, list):
                raise ValueError(f"Expected a JSON array of messages in {self._path}")
            self._payloads = {str(p.get("id")): p for p in data if isinstance(p, dict) and p.get("id")}
        return self._payloads

    def list_message_ids(self, max_results: int = 50, query: Optional[str] = DEFAULT_QUERY) -> list[str]:
        """IDs in file order. The Gmail search query does not apply to files."""
        return list(self._load().keys())[:max_results]

    def fetch_message(self, message_id: str) -> dict[str, Any]:
        payloads = self._load()
        if message_id not in payloads:
            raise ValueError(f"Message not found: {message_id}")
        return payloads[message_id]

    def to_raw_message(self, payload: dict[str, Any]) -> RawMessage:
        return raw_message_from_payload(payload)
