import pytest

from shelfgraph.domain.book import BookNode
from shelfgraph.domain.summary import GraphSummary
from shelfgraph.graph import build_edges
from shelfgraph.summary import render_summary_context, summarize_graph
from tests.fakes import FakeRandomSource, make_book


@pytest.fixture
def summary(sample_nodes: list[BookNode]) -> GraphSummary:
    return summarize_graph(sample_nodes, build_edges(sample_nodes, rng=FakeRandomSource([0.99])))


def test_summary_counts(summary: GraphSummary) -> None:
    assert summary.total_nodes == 5
    assert summary.total_edges == 5
    assert summary.connection_density == pytest.approx(40.0)
    assert summary.connection_types == {
        "tag_shared": 2,
        "author_shared": 2,
        "title_similarity": 1,
    }


def test_summary_rankings(summary: GraphSummary) -> None:
    """Test that tags, known authors and connected books are ranked by count."""
    assert [(item.tag, item.count) for item in summary.top_tags[:3]] == [
        ("Cyberpunk", 2),
        ("Artificial Intelligence", 2),
        ("Identity", 2),
    ]
    authors = {item.author for item in summary.top_authors}
    assert authors == {"William Gibson", "Ursula K. Le Guin"}
    assert [(book.id, book.connections) for book in summary.most_connected_books[:3]] == [
        ("neuromancer", 3),
        ("left-hand", 3),
        ("count-zero", 2),
    ]


def test_theme_clusters(summary: GraphSummary) -> None:
    clusters = {cluster.theme: cluster for cluster in summary.cluster_analysis}

    assert len(summary.cluster_analysis) == 5
    assert clusters["Cyberpunk"].node_ids == ["neuromancer", "count-zero"]
    assert clusters["Cyberpunk"].strength == pytest.approx(5.5)
    assert clusters["Identity"].strength == pytest.approx(2.0)


def test_empty_graph_summary() -> None:
    summary = summarize_graph([], [])

    assert summary.total_nodes == 0
    assert summary.connection_density == 0.0
    assert "- none" in render_summary_context(summary)


def test_render_summary_context(summary: GraphSummary) -> None:
    context = render_summary_context(summary)

    assert "5 books, 5 connections (40.0% of book pairs connected)" in context
    assert "- Neuromancer [neuromancer]: 3 connections" in context
    assert "- tag_shared: 2" in context


def test_density_counts_pairs_not_edges() -> None:
    """Test that a pair joined by several edge types counts once toward density."""
    nodes = [
        make_book("b1", title="Darkness Falls", author="Pat Cadigan", tags=["Noir"]),
        make_book("b2", title="Darkness Rises", author="Pat Cadigan", tags=["Noir"]),
    ]
    edges = build_edges(nodes, rng=FakeRandomSource([0.99]))

    summary = summarize_graph(nodes, edges)

    assert summary.total_edges == 3
    assert summary.connection_density == pytest.approx(100.0)
