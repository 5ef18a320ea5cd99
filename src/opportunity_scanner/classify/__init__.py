"""Heuristic classification of messages into opportunity records."""

from .engine import (
    BatchResult,
    ClassificationOutcome,
    SkippedMessage,
    classify,
    classify_batch,
    classify_message,
)
from .sender import UNKNOWN_COMPANY, extract_company_name

__all__ = [
    "BatchResult",
    "ClassificationOutcome",
    "SkippedMessage",
    "UNKNOWN_COMPANY",
    "classify",
    "classify_batch",
    "classify_message",
    "extract_company_name",
]
