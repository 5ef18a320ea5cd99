"""Opportunity record produced by the classifier."""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Category = Literal["internship", "job", "hackathon", "scholarship", "event", "competition"]
Priority = Literal["high", "medium", "low"]

CATEGORIES: tuple[Category, ...] = (
    "internship",
    "job",
    "hackathon",
    "scholarship",
    "event",
    "competition",
)
PRIORITIES: tuple[Priority, ...] = ("high", "medium", "low")


class OpportunityRecord(BaseModel):
    """Structured opportunity derived from exactly one message."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: str = Field(..., min_length=1, description="Same as the source message ID")
    subject: str
    company: str
    category: Category = "job"
    priority: Priority = "low"
    date: datetime.date = Field(..., description="Day the message was received (UTC)")
    deadline: Optional[datetime.date] = None
    location: Optional[str] = Field(default=None, min_length=1)
    description: str
    tags: tuple[str, ...] = ()
    salary: Optional[str] = Field(default=None, min_length=1)
    requirements: tuple[str, ...] = Field(default=(), max_length=3)
    application_url: Optional[str] = Field(default=None, min_length=1)
