"""Author-to-author influence mapping from shared themes."""

import re

from loguru import logger

from shelfgraph.config import settings
from shelfgraph.domain.book import BookNode
from shelfgraph.domain.influences import AuthorInfluence, InfluenceMap


def author_slug(author: str) -> str:
    return re.sub(r"\s+", "-", author.strip().lower())


def group_by_author(nodes: list[BookNode]) -> dict[str, list[BookNode]]:
    """Group books by known author, keeping authors in first-appearance order."""
    groups: dict[str, list[BookNode]] = {}
    for node in nodes:
        if node.has_known_author:
            groups.setdefault(node.author, []).append(node)
    return groups


def map_author_influences(nodes: list[BookNode]) -> list[InfluenceMap]:
    """Map each known author to the other authors writing on the same themes.

    Args:
        nodes: Books in collection order; unknown-author books are ignored

    Returns:
        One InfluenceMap per author with at least one influence, in author order
    """
    by_author = group_by_author(nodes)

    maps = []
    for author, books in by_author.items():
        influences = detect_influences(author, books, by_author)
        if influences:
            maps.append(
                InfluenceMap(author_id=author_slug(author), author=author, influences=influences)
            )

    logger.debug(f"Mapped influences for {len(maps)} of {len(by_author)} authors")
    return maps


def detect_influences(
    author: str, books: list[BookNode], by_author: dict[str, list[BookNode]]
) -> list[AuthorInfluence]:
    """Score every other author by how many of their books share a theme with ``author``.

    Args:
        author: The mapped author
        books: The mapped author's books
        by_author: Every known author's books

    Returns:
        Influences above ``settings.influence_min_strength``, strongest first
    """
    themes = {tag for book in books for tag in book.tags}

    influences = []
    for other, other_books in by_author.items():
        if other == author:
            continue

        matching = 0
        evidence: list[str] = []
        for book in other_books:
            shared = [tag for tag in book.tags if tag in themes]
            if not shared:
                continue
            matching += 1
            for tag in shared:
                if tag not in evidence:
                    evidence.append(tag)

        strength = matching / len(books)
        if matching and strength > settings.influence_min_strength:
            influences.append(
                AuthorInfluence(
                    author=other,
                    strength=strength,
                    evidence=evidence[: settings.influence_evidence_limit],
                )
            )

    return sorted(influences, key=lambda influence: influence.strength, reverse=True)
