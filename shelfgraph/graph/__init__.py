"""Graph construction: record normalization and pairwise edge building."""

from shelfgraph.graph.builder import GraphBuilder, build_edges, build_graph
from shelfgraph.graph.normalizer import AttributeNormalizer
from shelfgraph.graph.random_source import RandomSource, default_random_source

__all__ = [
    "AttributeNormalizer",
    "GraphBuilder",
    "RandomSource",
    "build_edges",
    "build_graph",
    "default_random_source",
]
