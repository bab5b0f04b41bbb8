import pytest

from shelfgraph.analysis.influences import author_slug, map_author_influences
from shelfgraph.domain.book import BookNode
from tests.fakes import make_book


def test_influences_from_shared_themes(sample_nodes: list[BookNode]) -> None:
    """Test that authors sharing a theme map onto each other with evidence."""
    maps = {item.author: item for item in map_author_influences(sample_nodes)}

    assert set(maps) == {"William Gibson", "Ursula K. Le Guin"}

    gibson = maps["William Gibson"]
    assert gibson.author_id == "william-gibson"
    (influence,) = gibson.influences
    assert influence.author == "Ursula K. Le Guin"
    assert influence.strength == pytest.approx(0.5)
    assert influence.evidence == ["Identity"]


def test_weak_influences_are_dropped() -> None:
    """Test that an influence at the minimum strength is not reported."""
    nodes = [make_book(f"a{i}", author="Prolific", tags=["Robots"]) for i in range(5)]
    nodes.append(make_book("b1", author="Newcomer", tags=["Robots", "Oceans"]))

    maps = {item.author: item for item in map_author_influences(nodes)}

    assert "Prolific" not in maps
    (influence,) = maps["Newcomer"].influences
    assert influence.author == "Prolific"
    assert influence.strength == pytest.approx(5.0)
    assert influence.evidence == ["Robots"]


def test_unknown_authors_are_ignored() -> None:
    nodes = [
        make_book("b1", tags=["Robots"]),
        make_book("b2", author="Known", tags=["Robots"]),
    ]

    assert map_author_influences(nodes) == []


def test_influences_sorted_and_evidence_capped() -> None:
    nodes = [
        make_book("t1", author="Target", tags=["A", "B", "C", "D"]),
        make_book("s1", author="Strong", tags=["A", "B", "C", "D"]),
        make_book("s2", author="Strong", tags=["A"]),
        make_book("w1", author="Weak", tags=["D"]),
    ]

    target = next(item for item in map_author_influences(nodes) if item.author == "Target")

    assert [influence.author for influence in target.influences] == ["Strong", "Weak"]
    assert target.influences[0].evidence == ["A", "B", "C"]


def test_author_slug() -> None:
    assert author_slug("  Ursula K.  Le Guin ") == "ursula-k.-le-guin"
