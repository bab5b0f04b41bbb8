"""Author influence models."""

from pydantic import Field

from shelfgraph.domain.base import EngineModel


class AuthorInfluence(EngineModel):
    """Another author whose books share themes with the mapped author.

    ``strength`` is the number of that author's theme-sharing books per book of the
    mapped author, so it can exceed 1.
    """

    author: str
    strength: float = Field(ge=0.0)
    evidence: list[str] = []  # shared tags


class InfluenceMap(EngineModel):
    author_id: str
    author: str
    influences: list[AuthorInfluence] = []
