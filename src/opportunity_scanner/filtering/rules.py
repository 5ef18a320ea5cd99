"""Filter rules: each returns (passed, explanation, rule_id)."""

from datetime import date, timedelta

from opportunity_scanner.models.filters import FilterState
from opportunity_scanner.models.opportunity import OpportunityRecord

# date_range -> how many days back a record may be
_RANGE_DAYS: dict[str, int] = {
    "today": 0,
    "week": 7,
    "month": 30,
}


def apply_category_rule(
    record: OpportunityRecord, state: FilterState, today: date
) -> tuple[bool, str, str]:
    if state.category == "all":
        return True, "Category filter not set", "category"
    if record.category == state.category:
        return True, f"Matches category: {record.category}", "category"
    return False, f"Excluded: category {record.category} is not {state.category}", "category"


def apply_query_rule(
    record: OpportunityRecord, state: FilterState, today: date
) -> tuple[bool, str, str]:
    """Free-text search over subject, company, description and tags."""
    q = state.query.strip().lower()
    if not q:
        return True, "Search query not set", "query"

    fields = [record.subject, record.company, record.description, *record.tags]
    for value in fields:
        if q in value.lower():
            return True, f"Matches search: {state.query}", "query"
    return False, f"Excluded: no field contains '{state.query}'", "query"


def apply_priority_rule(
    record: OpportunityRecord, state: FilterState, today: date
) -> tuple[bool, str, str]:
    if state.priority == "all":
        return True, "Priority filter not set", "priority"
    if record.priority == state.priority:
        return True, f"Matches priority: {record.priority}", "priority"
    return False, f"Excluded: priority {record.priority} is not {state.priority}", "priority"


def apply_company_rule(
    record: OpportunityRecord, state: FilterState, today: date
) -> tuple[bool, str, str]:
    needle = state.company.strip().lower()
    if not needle:
        return True, "Company filter not set", "company"
    if needle in record.company.lower():
        return True, f"Matches company: {record.company}", "company"
    return False, f"Excluded: company {record.company} does not contain '{state.company}'", "company"


def apply_date_range_rule(
    record: OpportunityRecord, state: FilterState, today: date
) -> tuple[bool, str, str]:
    """
    today: received on `today`. week/month: received within the last 7/30 days.
    Dates in the future pass (clock skew between mailbox and caller).
    """
    if state.date_range == "all":
        return True, "Date range filter not set", "date_range"

    earliest = today - timedelta(days=_RANGE_DAYS[state.date_range])
    if state.date_range == "today" and record.date != today:
        return False, f"Excluded: received {record.date}, not today", "date_range"
    if record.date < earliest:
        return False, f"Excluded: received {record.date}, before {earliest}", "date_range"
    return True, f"Received {record.date} (within {state.date_range})", "date_range"
