import pytest

from shelfgraph.analysis.constellations import core_themes, map_constellations
from shelfgraph.config import settings
from shelfgraph.domain.book import BookNode
from tests.fakes import make_book


@pytest.fixture
def starfield() -> list[BookNode]:
    return [
        make_book("c1", tags=["Space", "Robots"]),
        make_book("c2", tags=["Space", "Robots"]),
        make_book("c3", tags=["Space", "Empire"]),
        make_book("c4", tags=["Robots"]),
        make_book("c5", tags=["Gardening"]),
    ]


def test_core_themes_need_three_books(starfield: list[BookNode]) -> None:
    assert core_themes(starfield) == ["Space", "Robots"]


def test_constellations(starfield: list[BookNode]) -> None:
    """Test that satellites, density and uniqueness are derived per core theme."""
    space, robots = map_constellations(starfield)

    assert space.theme == "Space"
    assert space.satellites == ["Robots", "Empire"]
    assert space.node_ids == ["c1", "c2", "c3", "c4"]
    assert space.density == 0.8
    assert space.uniqueness == 0.5

    assert robots.theme == "Robots"
    assert robots.satellites == ["Space"]
    assert robots.uniqueness == 0.0


def test_lonely_core_theme() -> None:
    nodes = [make_book(f"b{i}", tags=["Solo"]) for i in range(3)]

    (constellation,) = map_constellations(nodes)

    assert constellation.satellites == []
    assert constellation.density == 1.0
    assert constellation.uniqueness == 1.0


def test_no_frequent_themes(sample_nodes: list[BookNode]) -> None:
    assert map_constellations(sample_nodes) == []
    assert map_constellations([]) == []


def test_constellation_limit(
    monkeypatch: pytest.MonkeyPatch, starfield: list[BookNode]
) -> None:
    monkeypatch.setattr(settings, "constellation_limit", 1)

    assert [item.theme for item in map_constellations(starfield)] == ["Space"]
