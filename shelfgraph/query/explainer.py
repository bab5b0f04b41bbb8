"""Explaining why a selected book connects to its neighbours."""

from collections import defaultdict

from shelfgraph.analysis.genres import genre_for_tag
from shelfgraph.config import settings
from shelfgraph.domain.book import BookNode
from shelfgraph.domain.breakdown import ConnectionBreakdown, NeighborLabel, RankedNeighbor
from shelfgraph.domain.relationships import Edge, EdgeType

EDGE_LABELS: dict[EdgeType, str] = {
    "tag_shared": "Shared themes",
    "author_shared": "Same author",
    "title_similarity": "Similar titles",
    "resonance": "Thematic resonance",
}


def explain_connections(
    node_id: str, nodes: list[BookNode], edges: list[Edge]
) -> ConnectionBreakdown:
    """Summarize the edges touching one book.

    Args:
        node_id: The selected book
        nodes: Books in collection order
        edges: Current edge set

    Returns:
        ConnectionBreakdown; empty when the book is unknown or has no edges
    """
    books = {node.id: node for node in nodes}
    selected = books.get(node_id)
    if selected is None:
        return ConnectionBreakdown(node_id=node_id)

    by_neighbor: dict[str, list[Edge]] = defaultdict(list)
    for edge in edges:
        if edge.touches(node_id) and edge.from_id != edge.to_id:
            neighbor_id = edge.other(node_id)
            if neighbor_id in books:
                by_neighbor[neighbor_id].append(edge)

    if not by_neighbor:
        return ConnectionBreakdown(node_id=node_id)

    limit = settings.explain_list_limit
    themes: list[str] = []
    subgenres: list[str] = []
    eras: list[str] = []
    same_author = 0

    for neighbor_id, neighbor_edges in by_neighbor.items():
        for edge in neighbor_edges:
            if edge.type == "author_shared":
                same_author += 1
            elif edge.type == "tag_shared":
                for tag in edge.shared_attributes:
                    target = subgenres if genre_for_tag(tag) is not None else themes
                    _add_unique(target, tag, limit)

        era = shared_decade(selected, books[neighbor_id])
        if era is not None:
            _add_unique(eras, era, limit)

    ranked = sorted(
        (
            RankedNeighbor(
                node_id=neighbor_id,
                title=books[neighbor_id].title,
                total_strength=sum(edge.strength for edge in neighbor_edges),
                edge_count=len(neighbor_edges),
            )
            for neighbor_id, neighbor_edges in by_neighbor.items()
        ),
        key=lambda neighbor: (-neighbor.total_strength, neighbor.node_id),
    )

    connections = [
        NeighborLabel(
            neighbor_id=neighbor.node_id,
            label=EDGE_LABELS[max(by_neighbor[neighbor.node_id], key=lambda e: e.strength).type],
            neighbor_title=neighbor.title,
        )
        for neighbor in ranked
    ]

    return ConnectionBreakdown(
        node_id=node_id,
        same_author=same_author,
        shared_themes=themes,
        shared_subgenres=subgenres,
        shared_eras=eras,
        total=len(by_neighbor),
        most_connected=ranked,
        connections=connections,
    )


def shared_decade(a: BookNode, b: BookNode) -> str | None:
    if a.publication_year is None or b.publication_year is None:
        return None
    if a.publication_year // 10 != b.publication_year // 10:
        return None
    return f"{a.publication_year // 10 * 10}s"


def _add_unique(values: list[str], value: str, limit: int) -> None:
    if value not in values and len(values) < limit:
        values.append(value)
