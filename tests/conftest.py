"""Pytest fixtures for opportunity-scanner tests."""

import json
from pathlib import Path
from typing import Any

import pytest

from opportunity_scanner.models.message import RawMessage

# 2023-11-14T22:13:20Z
RECEIVED_MILLIS = 1700000000000


def make_gmail_payload(
    message_id: str,
    *,
    subject: str | None = "Summer Internship 2024",
    sender: str | None = "Acme Careers <careers@acme.com>",
    snippet: str = "Apply by 03/15/2024. Location: Berlin, Germany.",
    internal_date: Any = str(RECEIVED_MILLIS),
) -> dict[str, Any]:
    """Gmail messages.get response (subset of fields)."""
    headers = []
    if subject is not None:
        headers.append({"name": "Subject", "value": subject})
    if sender is not None:
        headers.append({"name": "From", "value": sender})
    return {
        "id": message_id,
        "threadId": f"t-{message_id}",
        "labelIds": ["INBOX"],
        "snippet": snippet,
        "payload": {"headers": headers, "body": {}},
        "internalDate": internal_date,
    }


@pytest.fixture
def sample_gmail_payload() -> dict[str, Any]:
    """One Gmail message payload for an internship announcement."""
    return make_gmail_payload("m-1")


@pytest.fixture
def sample_raw_message() -> RawMessage:
    """The end-to-end example message."""
    return RawMessage(
        id="42",
        sender="Hiring Team <hiring@stripe.com>",
        subject_line="Remote Frontend Role",
        snippet_text="Apply by 2024-03-15. Remote position, $120k-$180k. • React required",
        received_at_epoch_millis=RECEIVED_MILLIS,
    )


@pytest.fixture
def messages_file(tmp_path: Path) -> Path:
    """JSON file with three Gmail payloads, one of them malformed."""
    payloads = [
        make_gmail_payload("m-1"),
        make_gmail_payload(
            "m-2",
            subject="Global AI Hackathon",
            sender="Devpost <noreply@devpost.com>",
            snippet="Join the hackathon this weekend. Prizes for the top teams!",
        ),
        make_gmail_payload("m-3", internal_date="yesterday"),
    ]
    path = tmp_path / "messages.json"
    path.write_text(json.dumps(payloads), encoding="utf-8")
    return path
