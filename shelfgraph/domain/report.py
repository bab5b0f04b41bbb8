"""Full analysis report for one collection pass."""

from shelfgraph.domain.base import EngineModel
from shelfgraph.domain.breakdown import ConnectionBreakdown
from shelfgraph.domain.clusters import Bridge, Cluster, Constellation
from shelfgraph.domain.influences import InfluenceMap
from shelfgraph.domain.metrics import MetricsBundle
from shelfgraph.domain.relationships import BookGraph, Edge
from shelfgraph.domain.summary import GraphSummary


class AnalysisReport(EngineModel):
    """Everything derived from one collection; ``edges`` reflects any active filter or focus."""

    graph: BookGraph
    edges: list[Edge] = []
    clusters: list[Cluster] = []
    bridges: list[Bridge] = []
    influences: list[InfluenceMap] = []
    constellations: list[Constellation] = []
    metrics: MetricsBundle = MetricsBundle()
    summary: GraphSummary = GraphSummary()
    breakdown: ConnectionBreakdown | None = None
