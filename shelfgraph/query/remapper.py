"""Re-scoping the relationship graph under tag filters and a focus tag."""

from collections.abc import Iterable

from loguru import logger

from shelfgraph.config import settings
from shelfgraph.domain.book import BookNode
from shelfgraph.domain.relationships import Edge
from shelfgraph.graph.builder import GraphBuilder
from shelfgraph.graph.random_source import RandomSource


def filter_population(nodes: list[BookNode], active_filter_tags: Iterable[str]) -> list[BookNode]:
    """Books carrying at least one filter tag; every book when no filter is active."""
    filters = set(active_filter_tags)
    if not filters:
        return list(nodes)
    return [node for node in nodes if filters.intersection(node.tags)]


def remap(
    nodes: list[BookNode],
    active_filter_tags: Iterable[str] | None = None,
    focus_tag: str | None = None,
    rng: RandomSource | None = None,
) -> list[Edge]:
    """Rebuild the edge set for the filtered population and strengthen the focus group.

    Args:
        nodes: Books in collection order
        active_filter_tags: Tags restricting the population; empty keeps every book
        focus_tag: Tag whose books get boosted or newly connected edges
        rng: Source for the resonance draw of the rebuild

    Returns:
        New edge list; with no filters and no focus it equals a fresh graph build
    """
    population = filter_population(nodes, active_filter_tags or [])
    edges = GraphBuilder(rng).build_edges(population)

    if focus_tag:
        edges = apply_focus(population, edges, focus_tag)

    logger.debug(
        f"Remapped {len(population)}/{len(nodes)} nodes into {len(edges)} edges"
        f" (focus: {focus_tag or 'none'})"
    )
    return edges


def apply_focus(population: list[BookNode], edges: list[Edge], focus_tag: str) -> list[Edge]:
    """Boost edges inside the focus group and connect focus pairs that have none.

    Args:
        population: Books the edges were built from
        edges: Edge set of the population
        focus_tag: Tag defining the focus group

    Returns:
        New edge list; boosted edges keep their position, new edges are appended
    """
    focused = [node for node in population if focus_tag in node.tags]
    focus_pairs = {
        frozenset((a.id, b.id)) for i, a in enumerate(focused) for b in focused[i + 1 :]
    }
    if not focus_pairs:
        return edges

    remapped = []
    connected_pairs = set()
    for edge in edges:
        if edge.pair in focus_pairs:
            connected_pairs.add(edge.pair)
            edge = edge.model_copy(
                update={
                    "strength": edge.strength + settings.focus_boost,
                    "reason": f"{edge.reason} | Enhanced by {focus_tag} filter",
                }
            )
        remapped.append(edge)

    for i, a in enumerate(focused):
        for b in focused[i + 1 :]:
            if frozenset((a.id, b.id)) in connected_pairs:
                continue
            remapped.append(
                Edge(
                    from_id=a.id,
                    to_id=b.id,
                    type="resonance",
                    strength=settings.focus_strength,
                    shared_attributes=[focus_tag],
                    reason=f"Connected by {focus_tag}",
                )
            )

    return remapped
