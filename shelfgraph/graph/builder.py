"""Building relationship graphs from normalized books."""

from collections import Counter
from typing import Any

from loguru import logger

from shelfgraph.config import settings
from shelfgraph.domain.book import BookNode
from shelfgraph.domain.relationships import BookGraph, Edge

from . import analyzer
from .index import iter_all_pairs, iter_candidate_pairs
from .normalizer import AttributeNormalizer
from .random_source import RandomSource, default_random_source


class GraphBuilder:
    """Builds the base edge set by comparing books pairwise."""

    def __init__(self, rng: RandomSource | None = None) -> None:
        """Initialize the builder.

        Args:
            rng: Source for the resonance draw. Defaults to an unseeded generator.
        """
        self.rng = rng if rng is not None else default_random_source()
        self.normalizer = AttributeNormalizer()

    def build_graph(self, records: Any) -> BookGraph:
        """Normalize raw records and build their relationship graph.

        Args:
            records: Ordered list of raw book records

        Returns:
            BookGraph with nodes, edges and rejected records
        """
        nodes, rejected = self.normalizer.normalize_records(records)
        edges = self.build_edges(nodes)

        logger.debug(
            f"Built graph: {len(nodes)} nodes, {len(edges)} edges, {len(rejected)} rejected"
        )
        return BookGraph(nodes=nodes, edges=edges, rejected=rejected)

    def build_edges(self, nodes: list[BookNode]) -> list[Edge]:
        """Build typed, weighted edges for every related pair of books.

        Args:
            nodes: Books to compare, in collection order

        Returns:
            List of edges; a pair may carry several edges, never two of one type
        """
        if len(nodes) > settings.large_graph_threshold:
            logger.debug(f"Using indexed candidate pairs for {len(nodes)} nodes")
            pairs = iter_candidate_pairs(nodes)
        else:
            pairs = iter_all_pairs(nodes)

        edges = []
        incident: Counter[str] = Counter()

        for i, j in pairs:
            a, b = nodes[i], nodes[j]
            pair_edges = analyzer.compare_pair(a, b)
            if self._should_add_resonance(a, b, incident, len(pair_edges)):
                pair_edges.append(analyzer.resonance_edge(a, b))

            for edge in pair_edges:
                incident[edge.from_id] += 1
                incident[edge.to_id] += 1
            edges.extend(pair_edges)

        return edges

    def _should_add_resonance(
        self, a: BookNode, b: BookNode, incident: Counter[str], pending: int
    ) -> bool:
        """Draw a resonance edge only for pairs whose books are both sparsely connected.

        Args:
            a: First book
            b: Second book
            incident: Edge counts per book so far in this pass
            pending: Attribute edges just produced for this pair
        """
        limit = settings.resonance_max_incident
        if incident[a.id] + pending >= limit or incident[b.id] + pending >= limit:
            return False
        return self.rng.random() < settings.resonance_probability


def build_graph(records: Any, rng: RandomSource | None = None) -> BookGraph:
    return GraphBuilder(rng).build_graph(records)


def build_edges(nodes: list[BookNode], rng: RandomSource | None = None) -> list[Edge]:
    return GraphBuilder(rng).build_edges(nodes)
