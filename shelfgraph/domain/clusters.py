"""Cluster and bridge domain models."""

from typing import Literal

from pydantic import Field

from shelfgraph.domain.base import EngineModel
from shelfgraph.domain.book import BookNode

GrowthKind = Literal["expanding", "stable", "dormant"]
BridgeType = Literal["thematic", "temporal", "stylistic", "philosophical"]


class Cluster(EngineModel):
    """Books grouped by one shared tag, with derived health metrics.

    Attributes:
        tag: The tag every member carries
        node_ids: Member book IDs in collection order
        diversity: Distinct authors relative to member count
        recency: Share of members added inside the recency window
        growth: Whether additions are speeding up, steady, or drying up
        health_score: Weighted mean of diversity and recency
        central_themes: The tag followed by the tags its members most often also carry
        bridge_books: Members tagged widely enough to reach into other clusters
    """

    tag: str
    node_ids: list[str] = Field(min_length=1)
    diversity: float = Field(ge=0.0, le=1.0)
    recency: float = Field(ge=0.0, le=1.0)
    growth: GrowthKind
    health_score: float = Field(ge=0.0, le=1.0)
    central_themes: list[str] = []
    bridge_books: list[str] = []


class Bridge(EngineModel):
    """An explainable connection between two books in different clusters."""

    from_book: BookNode
    to_book: BookNode
    bridge_type: BridgeType
    strength: float = Field(ge=0.0, le=1.0)
    shared_concepts: list[str] = []
    explanation: str


class Constellation(EngineModel):
    """A frequent core theme together with the satellite tags read alongside it.

    Attributes:
        theme: The core tag
        satellites: Tags co-occurring with the core theme, most frequent first
        node_ids: Books carrying the core theme or any satellite
        density: Share of the collection inside the constellation
        uniqueness: Share of satellites that are not themselves core themes
    """

    theme: str
    satellites: list[str] = []
    node_ids: list[str] = []
    density: float = Field(ge=0.0, le=1.0)
    uniqueness: float = Field(ge=0.0, le=1.0)
