"""Detection of reading habits from the order books were added."""

from collections import Counter
from datetime import datetime, timezone

from shelfgraph.domain.book import BookNode
from shelfgraph.domain.metrics import ReadingPattern

CHRONOLOGICAL_THRESHOLD = 0.3
THEMATIC_THRESHOLD = 0.4
AUTHOR_THRESHOLD = 0.3
EVIDENCE_LIMIT = 3

_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


def chronological_order(nodes: list[BookNode]) -> list[BookNode]:
    """Books in the order they were added; untimed books follow in collection order."""
    return sorted(nodes, key=lambda node: (node.created_at is None, node.created_at or _EARLIEST))


def detect_reading_patterns(nodes: list[BookNode]) -> list[ReadingPattern]:
    """Detect the reading habits a collection shows, most confident first."""
    patterns = []

    chronological = chronological_score(nodes)
    if chronological > CHRONOLOGICAL_THRESHOLD:
        dated = sorted(
            (node for node in nodes if node.publication_year is not None),
            key=lambda node: node.publication_year,
        )
        patterns.append(
            ReadingPattern(
                type="chronological",
                confidence=chronological,
                description=(
                    "You tend to read books in publication order, following historical progression"
                ),
                evidence=[
                    f"{node.title} ({node.publication_year})" for node in dated[:EVIDENCE_LIMIT]
                ],
            )
        )

    thematic = thematic_score(nodes)
    if thematic > THEMATIC_THRESHOLD:
        tag_counts = Counter(tag for node in nodes for tag in node.tags)
        patterns.append(
            ReadingPattern(
                type="thematic_deep_dive",
                confidence=thematic,
                description="You explore themes deeply, reading multiple books on similar topics",
                evidence=[f"{tag}: {count} books" for tag, count in tag_counts.most_common(2)],
            )
        )

    author = author_score(nodes)
    if author > AUTHOR_THRESHOLD:
        author_counts = Counter(node.author for node in nodes if node.has_known_author)
        patterns.append(
            ReadingPattern(
                type="author_exploration",
                confidence=author,
                description="You tend to explore multiple works by the same authors",
                evidence=[
                    f"{name}: {count} books"
                    for name, count in author_counts.most_common(EVIDENCE_LIMIT)
                    if count > 1
                ],
            )
        )

    return sorted(patterns, key=lambda pattern: pattern.confidence, reverse=True)


def chronological_score(nodes: list[BookNode]) -> float:
    """Share of consecutive additions that move forward (or stay) in publication year."""
    dated = [node for node in chronological_order(nodes) if node.publication_year is not None]
    if len(dated) < 3:
        return 0.0
    forward = sum(
        1
        for earlier, later in zip(dated, dated[1:])
        if (later.publication_year or 0) >= (earlier.publication_year or 0)
    )
    return forward / (len(dated) - 1)


def thematic_score(nodes: list[BookNode]) -> float:
    """Share of books belonging to at least one tag shared by two or more books."""
    if not nodes:
        return 0.0
    tag_counts = Counter(tag for node in nodes for tag in node.tags)
    in_clusters = [node for node in nodes if any(tag_counts[tag] >= 2 for tag in node.tags)]
    return len(in_clusters) / len(nodes)


def author_score(nodes: list[BookNode]) -> float:
    """Share of known authors with more than one book in the collection."""
    author_counts = Counter(node.author for node in nodes if node.has_known_author)
    if not author_counts:
        return 0.0
    repeated = [count for count in author_counts.values() if count > 1]
    return len(repeated) / len(author_counts)
