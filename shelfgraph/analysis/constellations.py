"""Thematic constellations: frequent core themes and their satellite tags."""

from collections import Counter

from shelfgraph.config import settings
from shelfgraph.domain.book import BookNode
from shelfgraph.domain.clusters import Constellation

from .clusters import related_tags


def core_themes(nodes: list[BookNode]) -> list[str]:
    """Tags carried by enough books to anchor a constellation, most frequent first."""
    counts = Counter(tag for node in nodes for tag in node.tags)
    frequent = [
        tag for tag, count in counts.most_common() if count >= settings.constellation_min_books
    ]
    return frequent[: settings.constellation_limit]


def map_constellations(nodes: list[BookNode]) -> list[Constellation]:
    """Build one constellation per core theme.

    Args:
        nodes: Books in collection order

    Returns:
        Constellations with the most books first; equal sizes keep theme order
    """
    cores = core_themes(nodes)

    constellations = []
    for theme in cores:
        core_books = [node for node in nodes if theme in node.tags]
        satellites = related_tags(theme, core_books, settings.constellation_satellites)
        reach = {theme, *satellites}
        members = [node for node in nodes if reach.intersection(node.tags)]

        if satellites:
            uniqueness = 1 - sum(1 for tag in satellites if tag in cores) / len(satellites)
        else:
            uniqueness = 1.0

        constellations.append(
            Constellation(
                theme=theme,
                satellites=satellites,
                node_ids=[node.id for node in members],
                density=round(len(members) / len(nodes), 2),
                uniqueness=round(uniqueness, 2),
            )
        )

    return sorted(constellations, key=lambda item: len(item.node_ids), reverse=True)
