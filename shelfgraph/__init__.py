"""Conceptual relationship graph engine for personal book collections."""

from shelfgraph.analysis.bridges import detect_bridges
from shelfgraph.analysis.clusters import analyze_clusters
from shelfgraph.analysis.constellations import map_constellations
from shelfgraph.analysis.genres import infer_genre
from shelfgraph.analysis.influences import map_author_influences
from shelfgraph.analysis.metrics import compute_metrics
from shelfgraph.analysis.patterns import detect_reading_patterns
from shelfgraph.engine import AnalysisEngine
from shelfgraph.graph.builder import build_graph
from shelfgraph.query.explainer import explain_connections
from shelfgraph.query.remapper import remap
from shelfgraph.summary import render_summary_context, summarize_graph

__all__ = [
    "AnalysisEngine",
    "analyze_clusters",
    "build_graph",
    "compute_metrics",
    "detect_bridges",
    "detect_reading_patterns",
    "explain_connections",
    "infer_genre",
    "map_author_influences",
    "map_constellations",
    "remap",
    "render_summary_context",
    "summarize_graph",
]
