"""Record assembly: one raw message in, at most one opportunity out."""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date, datetime, timezone
from typing import Any, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, Field

from opportunity_scanner.matching import combined_text
from opportunity_scanner.models.message import RawMessage
from opportunity_scanner.models.opportunity import OpportunityRecord

from .extractors import (
    categorize,
    extract_application_url,
    extract_deadline,
    extract_location,
    extract_priority,
    extract_requirements,
    extract_salary,
    extract_tags,
)
from .sender import extract_company_name

logger = logging.getLogger(__name__)

DEFAULT_SUBJECT = "No Subject"
DEFAULT_DESCRIPTION = "No description available"

MessageInput = Union[RawMessage, Mapping[str, Any]]


class SkippedMessage(BaseModel):
    """A message that could not be turned into a record."""

    message_id: Optional[str] = None
    reason: str


class ClassificationOutcome(BaseModel):
    """Either a record or a skip marker, never both."""

    record: Optional[OpportunityRecord] = None
    skipped: Optional[SkippedMessage] = None

    @property
    def ok(self) -> bool:
        return self.record is not None


class BatchResult(BaseModel):
    """Records in input order plus the messages that were dropped."""

    records: list[OpportunityRecord] = Field(default_factory=list)
    skipped: list[SkippedMessage] = Field(default_factory=list)

    @property
    def failure_count(self) -> int:
        return len(self.skipped)


def received_date(epoch_millis: int) -> date:
    """UTC calendar day of a millisecond timestamp."""
    return datetime.fromtimestamp(epoch_millis / 1000, tz=timezone.utc).date()


def _build_record(raw: RawMessage) -> OpportunityRecord:
    subject = raw.subject_line or DEFAULT_SUBJECT
    snippet = raw.snippet_text or ""
    text = combined_text(subject, snippet)

    return OpportunityRecord(
        id=raw.id,
        subject=subject,
        company=extract_company_name(raw.sender),
        category=categorize(text),
        priority=extract_priority(text),
        date=received_date(raw.received_at_epoch_millis),
        deadline=extract_deadline(snippet),
        location=extract_location(snippet),
        description=snippet or DEFAULT_DESCRIPTION,
        tags=tuple(extract_tags(text)),
        salary=extract_salary(snippet),
        requirements=tuple(extract_requirements(snippet)),
        application_url=extract_application_url(snippet),
    )


def _message_id(message: MessageInput) -> Optional[str]:
    if isinstance(message, RawMessage):
        return message.id
    if isinstance(message, Mapping):
        value = message.get("id")
        return str(value) if value is not None else None
    return None


def classify_message(message: MessageInput) -> ClassificationOutcome:
    """
    Classify one message. Never raises: any failure while reading the
    message becomes a skipped outcome so the rest of a batch proceeds.
    """
    try:
        raw = message if isinstance(message, RawMessage) else RawMessage.model_validate(message)
        return ClassificationOutcome(record=_build_record(raw))
    except Exception as e:
        message_id = _message_id(message)
        logger.warning("Skipping message %s: %s", message_id or "<no id>", e)
        return ClassificationOutcome(
            skipped=SkippedMessage(message_id=message_id, reason=f"{type(e).__name__}: {e}"),
        )


def classify(message: MessageInput) -> Optional[OpportunityRecord]:
    """Opportunity record for the message, or None when it cannot be parsed."""
    return classify_message(message).record


def classify_batch(
    messages: Sequence[MessageInput],
    max_workers: Optional[int] = None,
) -> BatchResult:
    """
    Classify many messages. With max_workers > 1 the work is spread over a
    thread pool; output order always follows input order.
    """
    if max_workers is not None and max_workers > 1 and len(messages) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            outcomes = list(pool.map(classify_message, messages))
    else:
        outcomes = [classify_message(m) for m in messages]

    result = BatchResult()
    for outcome in outcomes:
        if outcome.record is not None:
            result.records.append(outcome.record)
        elif outcome.skipped is not None:
            result.skipped.append(outcome.skipped)
    if result.skipped:
        logger.info(
            "Classified %d of %d messages (%d skipped)",
            len(result.records),
            len(messages),
            result.failure_count,
        )
    return result
