from typing import Any

from shelfgraph.domain.book import BookNode


def make_book(book_id: str, **fields: Any) -> BookNode:
    """Build a book whose default title is its id, so titles never overlap by accident."""
    fields.setdefault("title", book_id)
    return BookNode(id=book_id, **fields)
