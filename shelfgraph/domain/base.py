"""Shared base model for engine entities."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EngineModel(BaseModel):
    """Immutable model serialised with camelCase keys (``fromId``, ``healthScore``)."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)
