"""Orchestration of a complete analysis pass over a book collection."""

from collections.abc import Iterable
from typing import Any

from loguru import logger

from shelfgraph.analysis.bridges import detect_bridges
from shelfgraph.analysis.clusters import analyze_clusters
from shelfgraph.analysis.constellations import map_constellations
from shelfgraph.analysis.influences import map_author_influences
from shelfgraph.analysis.metrics import compute_metrics
from shelfgraph.clock import Clock, utc_now
from shelfgraph.domain.book import BookNode
from shelfgraph.domain.breakdown import ConnectionBreakdown
from shelfgraph.domain.clusters import Bridge, Cluster, Constellation
from shelfgraph.domain.influences import InfluenceMap
from shelfgraph.domain.metrics import MetricsBundle
from shelfgraph.domain.relationships import BookGraph, Edge
from shelfgraph.domain.report import AnalysisReport
from shelfgraph.domain.summary import GraphSummary
from shelfgraph.graph.builder import GraphBuilder
from shelfgraph.graph.random_source import RandomSource, default_random_source
from shelfgraph.query.explainer import explain_connections
from shelfgraph.query.remapper import remap
from shelfgraph.summary import summarize_graph


class AnalysisEngine:
    """Runs every graph operation with one injected random source and clock.

    The engine holds no collection state; each call is a full pass over its arguments.
    """

    def __init__(self, *, rng: RandomSource | None = None, clock: Clock = utc_now) -> None:
        """Initialize the engine.

        Args:
            rng: Source for resonance draws; unseeded when omitted
            clock: Returns the reference time for recency and momentum
        """
        self.rng = rng if rng is not None else default_random_source()
        self.clock = clock

    @classmethod
    def seeded(cls, seed: int | None, *, clock: Clock = utc_now) -> "AnalysisEngine":
        return cls(rng=default_random_source(seed), clock=clock)

    def build_graph(self, records: Any) -> BookGraph:
        return GraphBuilder(self.rng).build_graph(records)

    def analyze_clusters(self, nodes: list[BookNode], edges: list[Edge]) -> list[Cluster]:
        return analyze_clusters(nodes, edges, now=self.clock())

    def detect_bridges(self, nodes: list[BookNode], edges: list[Edge]) -> list[Bridge]:
        return detect_bridges(nodes, edges)

    def map_author_influences(self, nodes: list[BookNode]) -> list[InfluenceMap]:
        return map_author_influences(nodes)

    def map_constellations(self, nodes: list[BookNode]) -> list[Constellation]:
        return map_constellations(nodes)

    def compute_metrics(self, nodes: list[BookNode]) -> MetricsBundle:
        return compute_metrics(nodes, now=self.clock())

    def remap(
        self,
        nodes: list[BookNode],
        active_filter_tags: Iterable[str] | None = None,
        focus_tag: str | None = None,
    ) -> list[Edge]:
        return remap(nodes, active_filter_tags, focus_tag, rng=self.rng)

    def explain_connections(
        self, node_id: str, nodes: list[BookNode], edges: list[Edge]
    ) -> ConnectionBreakdown:
        return explain_connections(node_id, nodes, edges)

    def summarize(self, nodes: list[BookNode], edges: list[Edge]) -> GraphSummary:
        return summarize_graph(nodes, edges)

    def analyze(
        self,
        records: Any,
        *,
        active_filter_tags: Iterable[str] | None = None,
        focus_tag: str | None = None,
        node_id: str | None = None,
    ) -> AnalysisReport:
        """Run a complete pass: build, derive read-only views, then re-scope if asked.

        Args:
            records: Ordered list of raw book records
            active_filter_tags: Tags restricting the edge population
            focus_tag: Tag whose group gets strengthened edges
            node_id: Book to explain against the current edge set

        Returns:
            AnalysisReport for the collection
        """
        graph = self.build_graph(records)
        edges = graph.edges
        filter_tags = list(active_filter_tags or [])
        if filter_tags or focus_tag:
            edges = self.remap(graph.nodes, filter_tags, focus_tag)

        report = AnalysisReport(
            graph=graph,
            edges=edges,
            clusters=self.analyze_clusters(graph.nodes, graph.edges),
            bridges=self.detect_bridges(graph.nodes, graph.edges),
            influences=self.map_author_influences(graph.nodes),
            constellations=self.map_constellations(graph.nodes),
            metrics=self.compute_metrics(graph.nodes),
            summary=self.summarize(graph.nodes, edges),
            breakdown=(
                self.explain_connections(node_id, graph.nodes, edges)
                if node_id is not None
                else None
            ),
        )

        logger.info(
            f"Analysis complete: {len(graph.nodes)} books, {len(edges)} edges, "
            f"{len(report.clusters)} clusters, {len(report.bridges)} bridges"
        )
        return report
