"""Filter state applied to classified opportunities."""

from typing import Literal, Union

from pydantic import BaseModel, Field

from opportunity_scanner.models.opportunity import Category, Priority

DateRange = Literal["all", "today", "week", "month"]


class FilterState(BaseModel):
    """What the user wants to see. 'all' disables a dimension."""

    category: Union[Category, Literal["all"]] = "all"
    priority: Union[Priority, Literal["all"]] = "all"
    date_range: DateRange = "all"
    company: str = Field(default="", description="Case-insensitive substring")
    query: str = Field(default="", description="Search over subject/company/description/tags")
