"""Book domain models."""

from datetime import datetime

from pydantic import field_validator

from shelfgraph.clock import as_utc
from shelfgraph.config import settings
from shelfgraph.domain.base import EngineModel


class BookNode(EngineModel):
    """Represents one book in the collection graph.

    Attributes:
        id: Unique, stable identifier of the book record
        title: Book title, empty when the record had none
        author: Author name, or the unknown-author sentinel
        tags: Unique conceptual tags; order carries no meaning
        publication_year: Year of first publication, if known
        created_at: When the book was added to the collection (timezone aware)
        notes: Free-text notes written by the reader
    """

    id: str
    title: str = ""
    author: str = settings.unknown_author
    tags: list[str] = []
    publication_year: int | None = None
    created_at: datetime | None = None
    notes: str = ""

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        return as_utc(value) if value is not None else None

    @property
    def has_known_author(self) -> bool:
        return bool(self.author) and self.author != settings.unknown_author


class RejectedRecord(EngineModel):
    """A raw record dropped during normalization."""

    index: int
    reason: str
