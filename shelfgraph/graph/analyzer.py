"""Pairwise comparison functions used to derive edges between books."""

from shelfgraph.config import settings
from shelfgraph.domain.book import BookNode
from shelfgraph.domain.relationships import Edge


def shared_tags(a: BookNode, b: BookNode) -> list[str]:
    """Tags carried by both books, in the order of the first book."""
    other = set(b.tags)
    return [tag for tag in a.tags if tag in other]


def title_tokens(title: str) -> list[str]:
    """Lowercased whitespace tokens longer than the minimum length, deduplicated.

    Args:
        title: Book title

    Returns:
        Tokens in title order; short words act as a crude stop-word filter
    """
    tokens = []
    for token in title.lower().split():
        if len(token) > settings.title_min_token_length and token not in tokens:
            tokens.append(token)
    return tokens


def shared_title_words(a: BookNode, b: BookNode) -> list[str]:
    other = set(title_tokens(b.title))
    return [token for token in title_tokens(a.title) if token in other]


def compare_pair(a: BookNode, b: BookNode) -> list[Edge]:
    """Build every attribute edge (tag, author, title) between two books.

    Args:
        a: First book
        b: Second book, distinct from the first

    Returns:
        Zero to three edges, at most one per edge type
    """
    edges = []

    tags = shared_tags(a, b)
    if tags:
        edges.append(
            Edge(
                from_id=a.id,
                to_id=b.id,
                type="tag_shared",
                strength=settings.tag_shared_weight * len(tags),
                shared_attributes=tags,
                reason=f"Shared themes: {', '.join(tags)}",
            )
        )

    if a.has_known_author and a.author == b.author:
        edges.append(
            Edge(
                from_id=a.id,
                to_id=b.id,
                type="author_shared",
                strength=settings.author_shared_strength,
                reason=f"Same author: {a.author}",
            )
        )

    words = shared_title_words(a, b)
    if words:
        edges.append(
            Edge(
                from_id=a.id,
                to_id=b.id,
                type="title_similarity",
                strength=settings.title_similarity_weight * len(words),
                shared_attributes=words,
                reason=f"Similar titles: {', '.join(words)}",
            )
        )

    return edges


def resonance_edge(a: BookNode, b: BookNode) -> Edge:
    return Edge(
        from_id=a.id,
        to_id=b.id,
        type="resonance",
        strength=settings.resonance_strength,
        reason="Thematic resonance",
    )
