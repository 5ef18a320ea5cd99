"""Parsing utilities for Gmail API message payloads."""

from typing import Any, Optional

from opportunity_scanner.models.message import RawMessage


def header_value(payload: dict[str, Any], name: str) -> Optional[str]:
    """Value of the first header called `name` (case-insensitive), or None."""
    headers = (payload.get("payload") or {}).get("headers") or []
    wanted = name.lower()
    for header in headers:
        if (header.get("name") or "").lower() == wanted:
            return header.get("value")
    return None


def parse_internal_date(value: Any) -> int:
    """
    Gmail sends internalDate as a string of epoch milliseconds.
    Raises ValueError when it is missing or not an integer.
    """
    if value is None or str(value).strip() == "":
        raise ValueError("Message has no internalDate")
    try:
        return int(str(value).strip())
    except ValueError as e:
        raise ValueError(f"Invalid internalDate: {value!r}") from e


def raw_message_from_payload(payload: dict[str, Any]) -> RawMessage:
    """Map a messages.get response (format=full or metadata) to RawMessage."""
    message_id = (payload.get("id") or "").strip()
    if not message_id:
        raise ValueError("Message payload has no id")
    return RawMessage(
        id=message_id,
        sender=header_value(payload, "From"),
        subject_line=header_value(payload, "Subject"),
        received_at_epoch_millis=parse_internal_date(payload.get("internalDate")),
        snippet_text=payload.get("snippet") or "",
    )
