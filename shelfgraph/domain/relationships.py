"""Relationship domain models."""

from typing import Literal

from pydantic import Field

from shelfgraph.domain.base import EngineModel
from shelfgraph.domain.book import BookNode, RejectedRecord

EdgeType = Literal["tag_shared", "author_shared", "title_similarity", "resonance"]


class Edge(EngineModel):
    """Represents a typed, weighted relationship between two books.

    The pair is logically unordered; ``from_id``/``to_id`` only fix a drawing direction.
    """

    from_id: str
    to_id: str
    type: EdgeType
    strength: float = Field(ge=0.0)
    shared_attributes: list[str] = []  # matched tags or title words
    reason: str = ""

    @property
    def pair(self) -> frozenset[str]:
        return frozenset((self.from_id, self.to_id))

    def touches(self, node_id: str) -> bool:
        return node_id in (self.from_id, self.to_id)

    def other(self, node_id: str) -> str:
        return self.to_id if self.from_id == node_id else self.from_id


class BookGraph(EngineModel):
    """Represents the complete relationship graph for one collection."""

    nodes: list[BookNode] = []
    edges: list[Edge] = []
    rejected: list[RejectedRecord] = []
