"""Pipeline orchestration: fetch → classify → filter."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from opportunity_scanner.classify import SkippedMessage, classify_batch
from opportunity_scanner.connectors.base import BaseConnector
from opportunity_scanner.config import ScannerSettings
from opportunity_scanner.filtering import FilterEngine, FilterResult
from opportunity_scanner.models.message import RawMessage
from opportunity_scanner.models.opportunity import OpportunityRecord


class PipelineResult(BaseModel):
    """Outcome of one scan."""

    fetched: int = 0
    records: list[OpportunityRecord] = Field(default_factory=list, description="All classified records")
    filter_results: list[FilterResult] = Field(default_factory=list)
    skipped: list[SkippedMessage] = Field(default_factory=list)

    @property
    def passed(self) -> list[OpportunityRecord]:
        """Records that passed the filters, in input order."""
        return [r.record for r in self.filter_results if r.passed]


def classify_and_filter(
    messages: list[RawMessage],
    settings: ScannerSettings,
    *,
    today: Optional[date] = None,
) -> PipelineResult:
    """Classify an already-fetched batch and apply the settings' filters."""
    batch = classify_batch(messages, max_workers=settings.workers)
    engine = FilterEngine(settings.filters, today=today)
    return PipelineResult(
        fetched=len(messages),
        records=batch.records,
        filter_results=engine.filter_many(batch.records),
        skipped=batch.skipped,
    )


def run_pipeline(
    connector: BaseConnector,
    *,
    settings: Optional[ScannerSettings] = None,
    today: Optional[date] = None,
) -> PipelineResult:
    """
    Run the full pipeline: fetch recent messages → classify → filter.
    Transport errors propagate; per-message failures are reported in `skipped`.
    """
    settings = settings or ScannerSettings()
    messages = connector.fetch_recent(
        max_results=settings.max_results,
        fetch_limit=settings.fetch_limit,
        query=settings.query,
    )
    return classify_and_filter(messages, settings, today=today)
