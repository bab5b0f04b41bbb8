import pytest

from shelfgraph.analysis.bridges import detect_bridges, dominant_clusters, score_signals
from shelfgraph.config import settings
from shelfgraph.domain.book import BookNode
from shelfgraph.domain.clusters import Bridge
from shelfgraph.graph import build_edges
from tests.fakes import FakeRandomSource, make_book


@pytest.fixture
def bridged_nodes() -> list[BookNode]:
    return [
        make_book("a", author="A", tags=["Cyberpunk", "Identity"], publication_year=1984),
        make_book("b", author="B", tags=["Cyberpunk"], publication_year=1992),
        make_book("c", author="C", tags=["Space Opera", "Identity"], publication_year=2001),
        make_book("d", author="D", tags=["Space Opera"], publication_year=1980),
    ]


def _bridges(nodes: list[BookNode]) -> list[Bridge]:
    return detect_bridges(nodes, build_edges(nodes, rng=FakeRandomSource([0.99])))


def test_dominant_cluster_prefers_earlier_tag_on_ties(bridged_nodes: list[BookNode]) -> None:
    dominant = dominant_clusters(bridged_nodes + [make_book("e")])

    assert dominant == {
        "a": "Cyberpunk",
        "b": "Cyberpunk",
        "c": "Space Opera",
        "d": "Space Opera",
        "e": None,
    }


def test_bridges_ranked_and_normalized(bridged_nodes: list[BookNode]) -> None:
    """Test that bridges cross clusters and are scaled against the strongest candidate."""
    bridges = _bridges(bridged_nodes)

    assert len(bridges) == 2

    philosophical, temporal = bridges
    assert (philosophical.from_book.id, philosophical.to_book.id) == ("a", "c")
    assert philosophical.bridge_type == "philosophical"
    assert philosophical.strength == pytest.approx(1.0)
    assert philosophical.shared_concepts == ["Identity"]
    assert philosophical.explanation == "Explore related ideas: Identity"

    assert (temporal.from_book.id, temporal.to_book.id) == ("a", "d")
    assert temporal.bridge_type == "temporal"
    assert temporal.strength == pytest.approx(0.2 / 0.75)
    assert temporal.shared_concepts == []
    assert temporal.explanation == "Contemporary works from a similar era (1980s)"


def test_same_cluster_pairs_are_skipped(bridged_nodes: list[BookNode]) -> None:
    bridges = _bridges(bridged_nodes)
    pairs = {frozenset((bridge.from_book.id, bridge.to_book.id)) for bridge in bridges}

    assert frozenset({"a", "b"}) not in pairs
    assert frozenset({"c", "d"}) not in pairs


def test_thematic_bridge() -> None:
    nodes = [
        make_book("x", tags=["Cyberpunk", "Heists"]),
        make_book("x2", tags=["Cyberpunk"]),
        make_book("y", tags=["Space Opera", "Heists"]),
        make_book("y2", tags=["Space Opera"]),
    ]

    (bridge,) = _bridges(nodes)

    assert bridge.bridge_type == "thematic"
    assert bridge.strength == pytest.approx(1.0)
    assert bridge.explanation == "Connected through Heists"


def test_stylistic_signal_gets_narrative_bonus() -> None:
    a = make_book("a", tags=["Noir Fiction", "Heists"])
    b = make_book("b", tags=["Noir Fiction", "Cyberpunk"])

    signals = score_signals(a, b, ["Noir Fiction"])

    assert signals["thematic"] == pytest.approx(0.5)
    assert signals["stylistic"] == pytest.approx(0.75)
    assert signals["philosophical"] == 0.0
    assert signals["temporal"] == 0.0


def test_bridge_limit(monkeypatch: pytest.MonkeyPatch, bridged_nodes: list[BookNode]) -> None:
    monkeypatch.setattr(settings, "bridge_limit", 1)

    bridges = _bridges(bridged_nodes)

    assert len(bridges) == 1
    assert bridges[0].bridge_type == "philosophical"


def test_duplicate_edges_do_not_change_bridges(bridged_nodes: list[BookNode]) -> None:
    edges = build_edges(bridged_nodes, rng=FakeRandomSource([0.99]))

    assert detect_bridges(bridged_nodes, edges + edges) == detect_bridges(bridged_nodes, edges)


def test_bridges_bounded_and_sorted(sample_nodes: list[BookNode]) -> None:
    bridges = _bridges(sample_nodes)

    assert len(bridges) <= settings.bridge_limit
    strengths = [bridge.strength for bridge in bridges]
    assert strengths == sorted(strengths, reverse=True)
    assert all(0.0 <= strength <= 1.0 for strength in strengths)


def test_no_books_no_bridges() -> None:
    assert detect_bridges([], []) == []
