from shelfgraph.domain.book import BookNode
from shelfgraph.domain.breakdown import ConnectionBreakdown
from shelfgraph.domain.relationships import Edge
from shelfgraph.graph import build_edges
from shelfgraph.query.explainer import explain_connections
from tests.fakes import FakeRandomSource, make_book


def _edges(nodes: list[BookNode]) -> list[Edge]:
    return build_edges(nodes, rng=FakeRandomSource([0.99]))


def test_breakdown_for_connected_book(sample_nodes: list[BookNode]) -> None:
    """Test that themes, subgenres, eras and neighbours are summarized."""
    breakdown = explain_connections("neuromancer", sample_nodes, _edges(sample_nodes))

    assert breakdown.same_author == 1
    assert breakdown.shared_subgenres == ["Cyberpunk"]
    assert breakdown.shared_themes == ["Artificial Intelligence", "Identity"]
    assert breakdown.shared_eras == ["1980s"]
    assert breakdown.total == 2

    assert [neighbor.node_id for neighbor in breakdown.most_connected] == [
        "count-zero",
        "left-hand",
    ]
    assert breakdown.most_connected[0].total_strength == 5.5
    assert breakdown.most_connected[0].edge_count == 2
    assert [(item.neighbor_id, item.label) for item in breakdown.connections] == [
        ("count-zero", "Shared themes"),
        ("left-hand", "Shared themes"),
    ]
    assert breakdown.connections[1].neighbor_title == "The Left Hand of Darkness"


def test_isolated_book_has_empty_breakdown() -> None:
    nodes = [make_book("alone", tags=["A"]), make_book("other", tags=["B"])]

    breakdown = explain_connections("alone", nodes, _edges(nodes))

    assert breakdown == ConnectionBreakdown(node_id="alone")


def test_unknown_book_has_empty_breakdown(sample_nodes: list[BookNode]) -> None:
    breakdown = explain_connections("missing", sample_nodes, _edges(sample_nodes))

    assert breakdown == ConnectionBreakdown(node_id="missing")


def test_ties_ranked_by_id() -> None:
    nodes = [
        make_book("s", tags=["A", "B"]),
        make_book("n2", tags=["B"]),
        make_book("n1", tags=["A"]),
    ]

    breakdown = explain_connections("s", nodes, _edges(nodes))

    assert [neighbor.node_id for neighbor in breakdown.most_connected] == ["n1", "n2"]


def test_label_follows_strongest_edge() -> None:
    nodes = [make_book("s", author="Pat Cadigan"), make_book("m", author="Pat Cadigan")]

    breakdown = explain_connections("s", nodes, _edges(nodes))

    assert breakdown.connections[0].label == "Same author"
    assert breakdown.shared_themes == []


def test_lists_are_capped() -> None:
    tags = [f"Theme {i}" for i in range(6)]
    nodes = [make_book("s", tags=tags), make_book("n", tags=tags)]

    breakdown = explain_connections("s", nodes, _edges(nodes))

    assert breakdown.shared_themes == tags[:4]


def test_edges_to_unknown_books_are_ignored() -> None:
    nodes = [make_book("s")]
    edges = [Edge(from_id="s", to_id="ghost", type="resonance", strength=0.5)]

    assert explain_connections("s", nodes, edges).total == 0
