"""Data models for raw messages, opportunity records and filter state."""

from opportunity_scanner.models.filters import FilterState
from opportunity_scanner.models.message import RawMessage
from opportunity_scanner.models.opportunity import (
    CATEGORIES,
    PRIORITIES,
    Category,
    OpportunityRecord,
    Priority,
)

__all__ = [
    "CATEGORIES",
    "PRIORITIES",
    "Category",
    "FilterState",
    "OpportunityRecord",
    "Priority",
    "RawMessage",
]
