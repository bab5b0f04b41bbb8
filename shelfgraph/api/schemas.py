from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CollectionRequest(BaseModel):
    """A raw book collection; records are normalized by the engine, not by the API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    records: list[Any] = Field(..., description="Ordered list of raw book records")
    seed: Optional[int] = Field(
        default=None, description="Seed for the resonance draw; random when omitted"
    )


class RemapRequest(CollectionRequest):
    active_filter_tags: list[str] = Field(
        default_factory=list, description="Tags restricting the book population"
    )
    focus_tag: Optional[str] = Field(default=None, description="Tag to strengthen")


class ExplainRequest(RemapRequest):
    node_id: str = Field(..., description="The book to explain")
