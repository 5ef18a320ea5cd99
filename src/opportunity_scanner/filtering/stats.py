"""Per-category counts for dashboards."""

from datetime import date, timedelta
from typing import Iterable

from pydantic import BaseModel

from opportunity_scanner.models.opportunity import CATEGORIES, OpportunityRecord

URGENT_WITHIN_DAYS = 7


class CategoryStats(BaseModel):
    total: int = 0
    new: int = 0
    urgent: int = 0


def is_new(record: OpportunityRecord, today: date) -> bool:
    """Received today."""
    return record.date == today


def is_urgent(record: OpportunityRecord, today: date) -> bool:
    """Has a deadline no more than a week away (overdue counts as urgent)."""
    return record.deadline is not None and record.deadline <= today + timedelta(days=URGENT_WITHIN_DAYS)


def compute_stats(records: Iterable[OpportunityRecord], today: date) -> dict[str, CategoryStats]:
    """Counts keyed by 'all' and every category (zeros included)."""
    stats = {key: CategoryStats() for key in ("all", *CATEGORIES)}
    for record in records:
        new = is_new(record, today)
        urgent = is_urgent(record, today)
        for key in ("all", record.category):
            bucket = stats[key]
            bucket.total += 1
            bucket.new += int(new)
            bucket.urgent += int(urgent)
    return stats
