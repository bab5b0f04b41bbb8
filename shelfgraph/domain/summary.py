"""Compact graph summary handed to the chat collaborator."""

from shelfgraph.domain.base import EngineModel


class TagCount(EngineModel):
    tag: str
    count: int


class AuthorCount(EngineModel):
    author: str
    count: int


class ConnectedBook(EngineModel):
    id: str
    title: str
    connections: int


class ThemeCluster(EngineModel):
    theme: str
    node_ids: list[str] = []
    strength: float = 0.0


class GraphSummary(EngineModel):
    """Aggregate view of the graph used to ground chat answers."""

    total_nodes: int = 0
    total_edges: int = 0
    connection_density: float = 0.0  # percent of possible pairs connected
    top_tags: list[TagCount] = []
    top_authors: list[AuthorCount] = []
    most_connected_books: list[ConnectedBook] = []
    connection_types: dict[str, int] = {}
    cluster_analysis: list[ThemeCluster] = []
