"""Unit tests for category stats."""

from datetime import date, timedelta

from opportunity_scanner.filtering import compute_stats
from opportunity_scanner.models.opportunity import CATEGORIES, OpportunityRecord

TODAY = date(2024, 6, 15)


def _make_record(**kwargs) -> OpportunityRecord:
    defaults = {
        "id": "m-1",
        "subject": "S",
        "company": "C",
        "date": TODAY - timedelta(days=3),
        "description": "D",
    }
    defaults.update(kwargs)
    return OpportunityRecord(**defaults)


class TestComputeStats:
    """Tests for compute_stats."""

    def test_all_categories_present(self) -> None:
        stats = compute_stats([], TODAY)
        assert set(stats) == {"all", *CATEGORIES}
        assert all(s.total == 0 for s in stats.values())

    def test_counts(self) -> None:
        records = [
            _make_record(id="1", category="internship", date=TODAY),
            _make_record(id="2", category="internship", deadline=TODAY + timedelta(days=7)),
            _make_record(id="3", category="event", deadline=TODAY + timedelta(days=8)),
            _make_record(id="4", category="event", deadline=TODAY - timedelta(days=1)),
        ]
        stats = compute_stats(records, TODAY)

        assert stats["all"].total == 4
        assert stats["all"].new == 1
        assert stats["all"].urgent == 2
        assert stats["internship"].total == 2
        assert stats["internship"].new == 1
        assert stats["internship"].urgent == 1
        assert stats["event"].urgent == 1
        assert stats["job"].total == 0
