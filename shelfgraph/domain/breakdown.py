"""Connection breakdown models returned for a selected book."""

from shelfgraph.domain.base import EngineModel


class RankedNeighbor(EngineModel):
    node_id: str
    title: str
    total_strength: float
    edge_count: int


class NeighborLabel(EngineModel):
    neighbor_id: str
    label: str
    neighbor_title: str


class ConnectionBreakdown(EngineModel):
    """Why a book connects to its neighbours.

    Attributes:
        node_id: The selected book
        same_author: Number of same-author edges touching the book
        shared_themes: Deduplicated shared tags that are not recognised subgenres
        shared_subgenres: Deduplicated shared tags recognised as genres
        shared_eras: Publication decades shared with neighbours
        total: Number of distinct neighbours
        most_connected: Neighbours ranked by summed edge strength
        connections: Flat display list, one entry per neighbour
    """

    node_id: str
    same_author: int = 0
    shared_themes: list[str] = []
    shared_subgenres: list[str] = []
    shared_eras: list[str] = []
    total: int = 0
    most_connected: list[RankedNeighbor] = []
    connections: list[NeighborLabel] = []
