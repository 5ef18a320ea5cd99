"""Raw message representation handed over by a transport connector."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RawMessage(BaseModel):
    """
    One fetched message, before classification.
    Sender and subject are unparsed header values and may be missing;
    the classifier supplies the defaults.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: str = Field(..., min_length=1, description="Provider message ID")
    sender: Optional[str] = Field(default=None, description='e.g. "Name <a@b.com>"')
    subject_line: Optional[str] = None
    received_at_epoch_millis: int
    snippet_text: str = ""
