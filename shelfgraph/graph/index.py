"""Inverted indices for candidate pair generation on large collections."""

from collections import defaultdict
from collections.abc import Iterator

from shelfgraph.domain.book import BookNode

from .analyzer import title_tokens


def build_attribute_index(nodes: list[BookNode]) -> dict[str, list[int]]:
    """Map each tag, known author and title token to the positions of books carrying it.

    Keys are prefixed by kind so a tag and an author with the same text stay separate.
    """
    index: dict[str, list[int]] = defaultdict(list)

    for position, node in enumerate(nodes):
        for tag in node.tags:
            index[f"tag:{tag}"].append(position)
        if node.has_known_author:
            index[f"author:{node.author}"].append(position)
        for token in title_tokens(node.title):
            index[f"title:{token}"].append(position)

    return index


def iter_candidate_pairs(nodes: list[BookNode]) -> Iterator[tuple[int, int]]:
    """Yield position pairs (i < j) that share at least one index bucket, in pairwise order."""
    candidates: set[tuple[int, int]] = set()
    for positions in build_attribute_index(nodes).values():
        for offset, i in enumerate(positions):
            for j in positions[offset + 1 :]:
                candidates.add((i, j))

    yield from sorted(candidates)


def iter_all_pairs(nodes: list[BookNode]) -> Iterator[tuple[int, int]]:
    for i in range(len(nodes)):
        for j in range(i + 1, len(nodes)):
            yield i, j
