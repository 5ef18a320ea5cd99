"""Filter engine with explanation trail."""

from datetime import date
from typing import Callable, Optional

from pydantic import BaseModel, Field

from opportunity_scanner.models.filters import FilterState
from opportunity_scanner.models.opportunity import OpportunityRecord

from .rules import (
    apply_category_rule,
    apply_company_rule,
    apply_date_range_rule,
    apply_priority_rule,
    apply_query_rule,
)


class FilterResult(BaseModel):
    """Result of filtering an opportunity against the filter state."""

    passed: bool = Field(..., description="All rules passed")
    explanations: list[str] = Field(default_factory=list)
    record: OpportunityRecord = Field(..., description="The record that was filtered")
    excluded_by_rule: Optional[str] = Field(
        default=None,
        description="First rule that excluded (category|query|priority|company|date_range)",
    )


RuleFn = Callable[[OpportunityRecord, FilterState, date], tuple[bool, str, str]]


class FilterEngine:
    """
    Applies filter state to opportunity records.
    Every rule runs so the explanation trail is complete; the first failing
    rule is reported as excluded_by_rule.
    """

    def __init__(self, state: Optional[FilterState] = None, today: Optional[date] = None):
        self.state = state or FilterState()
        self.today = today or date.today()
        self._rules: list[RuleFn] = [
            apply_category_rule,
            apply_query_rule,
            apply_priority_rule,
            apply_company_rule,
            apply_date_range_rule,
        ]

    def filter(self, record: OpportunityRecord) -> FilterResult:
        """Apply all rules and return FilterResult with explanation trail."""
        explanations: list[str] = []
        all_passed = True
        excluded_by: Optional[str] = None

        for rule_fn in self._rules:
            passed, explanation, rule_id = rule_fn(record, self.state, self.today)
            explanations.append(explanation)
            if not passed:
                all_passed = False
                if excluded_by is None:
                    excluded_by = rule_id

        return FilterResult(
            passed=all_passed,
            explanations=explanations,
            record=record,
            excluded_by_rule=excluded_by,
        )

    def filter_many(self, records: list[OpportunityRecord]) -> list[FilterResult]:
        """Filter multiple records; returns all with full results."""
        return [self.filter(r) for r in records]

    def filter_passed(self, records: list[OpportunityRecord]) -> list[FilterResult]:
        """Filter and return only results that passed."""
        return [r for r in self.filter_many(records) if r.passed]
