"""Compact graph summaries and the plain-text context handed to the chat collaborator."""

from collections import Counter

from shelfgraph.domain.book import BookNode
from shelfgraph.domain.relationships import Edge
from shelfgraph.domain.summary import (
    AuthorCount,
    ConnectedBook,
    GraphSummary,
    TagCount,
    ThemeCluster,
)

TOP_TAGS = 10
TOP_AUTHORS = 8
TOP_CONNECTED = 8
TOP_THEMES = 5

CONTEXT_TEMPLATE = """Collection overview: {total_nodes} books, {total_edges} connections (\
{density:.1f}% of book pairs connected).

Top themes:
{tags}

Top authors:
{authors}

Most connected books:
{books}

Connection types:
{types}
"""


def summarize_graph(nodes: list[BookNode], edges: list[Edge]) -> GraphSummary:
    """Build the summary of a graph.

    Args:
        nodes: Books in collection order
        edges: Current edge set

    Returns:
        GraphSummary with tag, author, connectivity and theme aggregates
    """
    possible_pairs = len(nodes) * (len(nodes) - 1) / 2
    connected_pairs = {edge.pair for edge in edges if edge.from_id != edge.to_id}
    density = len(connected_pairs) / possible_pairs * 100 if possible_pairs > 0 else 0.0

    tag_counts = Counter(tag for node in nodes for tag in node.tags)
    author_counts = Counter(node.author for node in nodes if node.has_known_author)

    degree: Counter[str] = Counter()
    for edge in edges:
        degree[edge.from_id] += 1
        degree[edge.to_id] += 1

    most_connected = sorted(
        (
            ConnectedBook(id=node.id, title=node.title, connections=degree[node.id])
            for node in nodes
        ),
        key=lambda book: book.connections,
        reverse=True,
    )[:TOP_CONNECTED]

    top_tags = [TagCount(tag=tag, count=count) for tag, count in tag_counts.most_common(TOP_TAGS)]

    return GraphSummary(
        total_nodes=len(nodes),
        total_edges=len(edges),
        connection_density=density,
        top_tags=top_tags,
        top_authors=[
            AuthorCount(author=author, count=count)
            for author, count in author_counts.most_common(TOP_AUTHORS)
        ],
        most_connected_books=most_connected,
        connection_types=dict(Counter(edge.type for edge in edges)),
        cluster_analysis=[
            _theme_cluster(tag_count.tag, nodes, edges) for tag_count in top_tags[:TOP_THEMES]
        ],
    )


def _theme_cluster(tag: str, nodes: list[BookNode], edges: list[Edge]) -> ThemeCluster:
    """Members of a theme and the summed strength of edges inside it."""
    member_ids = [node.id for node in nodes if tag in node.tags]
    members = set(member_ids)
    strength = sum(
        edge.strength for edge in edges if edge.from_id in members and edge.to_id in members
    )
    return ThemeCluster(theme=tag, node_ids=member_ids, strength=strength)


def render_summary_context(summary: GraphSummary) -> str:
    """Render a summary as prompt context for the chat collaborator."""
    tags = "\n".join(f"- {item.tag} ({item.count})" for item in summary.top_tags) or "- none"
    authors = (
        "\n".join(f"- {item.author} ({item.count})" for item in summary.top_authors) or "- none"
    )
    books = (
        "\n".join(
            f"- {book.title} [{book.id}]: {book.connections} connections"
            for book in summary.most_connected_books
        )
        or "- none"
    )
    types = (
        "\n".join(f"- {kind}: {count}" for kind, count in summary.connection_types.items())
        or "- none"
    )
    return CONTEXT_TEMPLATE.format(
        total_nodes=summary.total_nodes,
        total_edges=summary.total_edges,
        density=summary.connection_density,
        tags=tags,
        authors=authors,
        books=books,
        types=types,
    )
