"""Collection-wide reading metrics."""

from typing import Literal

from pydantic import Field

from shelfgraph.domain.base import EngineModel

TemporalPreference = Literal["classic", "modern", "contemporary", "mixed"]
VelocityTrend = Literal["accelerating", "decelerating", "steady"]
PatternType = Literal["chronological", "thematic_deep_dive", "author_exploration"]


class GenreShare(EngineModel):
    genre: str
    percentage: int


class ReadingVelocity(EngineModel):
    """Pace of additions to the collection.

    Attributes:
        books_per_month: Timed books divided by the months between first and last addition
        trend: Recent pace compared with the overall pace
        average_time_between_books: Mean gap between consecutive additions, in days
        momentum: How fresh the latest addition is relative to the usual gap
    """

    books_per_month: float = 0.0
    trend: VelocityTrend = "steady"
    average_time_between_books: float = 0.0
    momentum: float = Field(default=0.0, ge=0.0, le=1.0)


class ReadingPattern(EngineModel):
    type: PatternType
    confidence: float = Field(ge=0.0, le=1.0)
    description: str
    evidence: list[str] = []


class MetricsBundle(EngineModel):
    """Aggregate "reading DNA" of a collection."""

    genre_profile: list[GenreShare] = []
    temporal_preference: TemporalPreference = "mixed"
    diversity_score: float = Field(default=0.0, ge=0.0, le=1.0)
    exploration_score: float = Field(default=0.0, ge=0.0, le=1.0)
    consistency_score: float = Field(default=0.0, ge=0.0, le=1.0)
    reading_velocity: ReadingVelocity = ReadingVelocity()
    signature: str = ""
    reading_patterns: list[ReadingPattern] = []
