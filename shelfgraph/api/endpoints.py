from fastapi import APIRouter, HTTPException
from loguru import logger

from shelfgraph.api.schemas import CollectionRequest, ExplainRequest, RemapRequest
from shelfgraph.domain.breakdown import ConnectionBreakdown
from shelfgraph.domain.clusters import Bridge, Cluster, Constellation
from shelfgraph.domain.influences import InfluenceMap
from shelfgraph.domain.metrics import MetricsBundle
from shelfgraph.domain.relationships import BookGraph, Edge
from shelfgraph.domain.summary import GraphSummary
from shelfgraph.engine import AnalysisEngine


def _engine_for(engine: AnalysisEngine, seed: int | None) -> AnalysisEngine:
    """Use a seeded engine when the request pins the resonance draw."""
    if seed is None:
        return engine
    return AnalysisEngine.seeded(seed, clock=engine.clock)


def _create_graph_endpoint(engine: AnalysisEngine):
    """Create the graph build endpoint handler."""

    def build_graph(request: CollectionRequest) -> BookGraph:
        try:
            return _engine_for(engine, request.seed).build_graph(request.records)
        except Exception as e:
            logger.error(f"Error building graph: {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

    return build_graph


def _create_clusters_endpoint(engine: AnalysisEngine):
    """Create the cluster health endpoint handler."""

    def analyze_clusters(request: CollectionRequest) -> list[Cluster]:
        try:
            current = _engine_for(engine, request.seed)
            graph = current.build_graph(request.records)
            return current.analyze_clusters(graph.nodes, graph.edges)
        except Exception as e:
            logger.error(f"Error analyzing clusters: {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

    return analyze_clusters


def _create_bridges_endpoint(engine: AnalysisEngine):
    """Create the conceptual bridges endpoint handler."""

    def detect_bridges(request: CollectionRequest) -> list[Bridge]:
        try:
            current = _engine_for(engine, request.seed)
            graph = current.build_graph(request.records)
            return current.detect_bridges(graph.nodes, graph.edges)
        except Exception as e:
            logger.error(f"Error detecting bridges: {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

    return detect_bridges


def _create_influences_endpoint(engine: AnalysisEngine):
    """Create the author influence endpoint handler."""

    def map_author_influences(request: CollectionRequest) -> list[InfluenceMap]:
        try:
            current = _engine_for(engine, request.seed)
            graph = current.build_graph(request.records)
            return current.map_author_influences(graph.nodes)
        except Exception as e:
            logger.error(f"Error mapping author influences: {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

    return map_author_influences


def _create_constellations_endpoint(engine: AnalysisEngine):
    """Create the thematic constellation endpoint handler."""

    def map_constellations(request: CollectionRequest) -> list[Constellation]:
        try:
            current = _engine_for(engine, request.seed)
            graph = current.build_graph(request.records)
            return current.map_constellations(graph.nodes)
        except Exception as e:
            logger.error(f"Error mapping constellations: {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

    return map_constellations


def _create_metrics_endpoint(engine: AnalysisEngine):
    """Create the reading metrics endpoint handler."""

    def compute_metrics(request: CollectionRequest) -> MetricsBundle:
        try:
            current = _engine_for(engine, request.seed)
            graph = current.build_graph(request.records)
            return current.compute_metrics(graph.nodes)
        except Exception as e:
            logger.error(f"Error computing metrics: {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

    return compute_metrics


def _create_remap_endpoint(engine: AnalysisEngine):
    """Create the filter/focus remap endpoint handler."""

    def remap(request: RemapRequest) -> list[Edge]:
        try:
            current = _engine_for(engine, request.seed)
            graph = current.build_graph(request.records)
            return current.remap(graph.nodes, request.active_filter_tags, request.focus_tag)
        except Exception as e:
            logger.error(f"Error remapping graph: {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

    return remap


def _create_explain_endpoint(engine: AnalysisEngine):
    """Create the connection breakdown endpoint handler."""

    def explain_connections(request: ExplainRequest) -> ConnectionBreakdown:
        try:
            current = _engine_for(engine, request.seed)
            graph = current.build_graph(request.records)
            edges = graph.edges
            if request.active_filter_tags or request.focus_tag:
                edges = current.remap(graph.nodes, request.active_filter_tags, request.focus_tag)
            breakdown = current.explain_connections(request.node_id, graph.nodes, edges)
        except Exception as e:
            logger.error(f"Error explaining connections for '{request.node_id}': {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

        if not any(node.id == request.node_id for node in graph.nodes):
            logger.warning(f"Book not found: {request.node_id}")
            raise HTTPException(status_code=404, detail="Book not found")
        return breakdown

    return explain_connections


def _create_summary_endpoint(engine: AnalysisEngine):
    """Create the chat summary endpoint handler."""

    def summarize(request: CollectionRequest) -> GraphSummary:
        try:
            current = _engine_for(engine, request.seed)
            graph = current.build_graph(request.records)
            return current.summarize(graph.nodes, graph.edges)
        except Exception as e:
            logger.error(f"Error summarizing graph: {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

    return summarize


def get_endpoints_router(*, engine: AnalysisEngine) -> APIRouter:
    router = APIRouter()

    @router.get("/health")
    async def health_check():
        return {"status": "healthy"}

    router.post("/api/graph", response_model=BookGraph)(_create_graph_endpoint(engine))
    router.post("/api/clusters", response_model=list[Cluster])(_create_clusters_endpoint(engine))
    router.post("/api/bridges", response_model=list[Bridge])(_create_bridges_endpoint(engine))
    router.post("/api/influences", response_model=list[InfluenceMap])(
        _create_influences_endpoint(engine)
    )
    router.post("/api/constellations", response_model=list[Constellation])(
        _create_constellations_endpoint(engine)
    )
    router.post("/api/metrics", response_model=MetricsBundle)(_create_metrics_endpoint(engine))
    router.post("/api/remap", response_model=list[Edge])(_create_remap_endpoint(engine))
    router.post("/api/explain", response_model=ConnectionBreakdown)(
        _create_explain_endpoint(engine)
    )
    router.post("/api/summary", response_model=GraphSummary)(_create_summary_endpoint(engine))

    return router
