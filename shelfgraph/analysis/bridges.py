"""Detection of explainable bridges between books in different clusters."""

from loguru import logger

from shelfgraph.config import settings
from shelfgraph.domain.book import BookNode
from shelfgraph.domain.clusters import Bridge, BridgeType
from shelfgraph.domain.relationships import Edge

from .clusters import group_by_tag

# Narrative vocabularies for stylistic and philosophical bridges, matched as substrings of tags.
STYLISTIC_KEYWORDS = (
    "experimental",
    "literary",
    "noir",
    "satire",
    "epistolary",
    "nonlinear",
    "stream of consciousness",
    "unreliable narrator",
    "prose",
    "style",
)
PHILOSOPHICAL_KEYWORDS = (
    "philosoph",
    "existential",
    "ethic",
    "moral",
    "metaphysic",
    "consciousness",
    "identity",
    "free will",
    "meaning",
    "mortality",
)

# Tie-break order when two signals score the same.
SIGNAL_ORDER: tuple[BridgeType, ...] = ("thematic", "temporal", "stylistic", "philosophical")


def detect_bridges(nodes: list[BookNode], edges: list[Edge]) -> list[Bridge]:
    """Find the strongest connections between books whose dominant clusters differ.

    Args:
        nodes: Books in collection order
        edges: Current edge set; tag overlap is read from its tag_shared edges

    Returns:
        At most ``settings.bridge_limit`` bridges, strongest first
    """
    dominant = dominant_clusters(nodes)
    shared_by_pair = _shared_tags_by_pair(edges)

    candidates: list[tuple[BookNode, BookNode, BridgeType, float, list[str]]] = []
    for i, a in enumerate(nodes):
        for b in nodes[i + 1 :]:
            if dominant[a.id] is not None and dominant[a.id] == dominant[b.id]:
                continue
            shared = shared_by_pair.get(frozenset((a.id, b.id)), [])
            signals = score_signals(a, b, shared)
            bridge_type = max(SIGNAL_ORDER, key=lambda kind: signals[kind])
            raw = signals[bridge_type]
            if raw > 0:
                candidates.append((a, b, bridge_type, raw, shared))

    if not candidates:
        return []

    max_raw = max(raw for _, _, _, raw, _ in candidates)
    bridges = [
        Bridge(
            from_book=a,
            to_book=b,
            bridge_type=bridge_type,
            strength=raw / max_raw,
            shared_concepts=shared,
            explanation=explain_bridge(bridge_type, a, b, shared),
        )
        for a, b, bridge_type, raw, shared in candidates
    ]
    bridges.sort(key=lambda bridge: bridge.strength, reverse=True)

    logger.debug(f"Found {len(bridges)} bridge candidates, keeping {settings.bridge_limit}")
    return bridges[: settings.bridge_limit]


def dominant_clusters(nodes: list[BookNode]) -> dict[str, str | None]:
    """Map each book to its tag with the largest cluster; earlier tags win ties."""
    sizes = {tag: len(members) for tag, members in group_by_tag(nodes).items()}
    dominant: dict[str, str | None] = {}
    for node in nodes:
        best = None
        for tag in node.tags:
            if best is None or sizes[tag] > sizes[best]:
                best = tag
        dominant[node.id] = best
    return dominant


def score_signals(a: BookNode, b: BookNode, shared: list[str]) -> dict[BridgeType, float]:
    """Score each bridge signal for a pair of books.

    Args:
        a: First book
        b: Second book
        shared: Tags the pair shares

    Returns:
        Raw score per bridge type; zero when the signal is absent
    """
    largest = max(len(a.tags), len(b.tags))
    signals: dict[BridgeType, float] = {kind: 0.0 for kind in SIGNAL_ORDER}

    if shared and largest:
        signals["thematic"] = len(shared) / largest
        for kind, keywords in (
            ("stylistic", STYLISTIC_KEYWORDS),
            ("philosophical", PHILOSOPHICAL_KEYWORDS),
        ):
            matches = _narrative_matches(shared, keywords)
            if matches:
                signals[kind] = len(matches) / largest + settings.bridge_narrative_bonus

    if a.publication_year is not None and b.publication_year is not None:
        gap = abs(a.publication_year - b.publication_year)
        if gap < settings.bridge_year_window:
            signals["temporal"] = 1.0 - gap / settings.bridge_year_window

    return signals


def explain_bridge(bridge_type: BridgeType, a: BookNode, b: BookNode, shared: list[str]) -> str:
    if bridge_type == "temporal":
        decade = min(a.publication_year or 0, b.publication_year or 0) // 10 * 10
        return f"Contemporary works from a similar era ({decade}s)"
    if bridge_type == "stylistic":
        matches = _narrative_matches(shared, STYLISTIC_KEYWORDS)
        return f"Shared narrative style: {', '.join(matches)}"
    if bridge_type == "philosophical":
        matches = _narrative_matches(shared, PHILOSOPHICAL_KEYWORDS)
        return f"Explore related ideas: {', '.join(matches)}"
    return f"Connected through {', '.join(shared)}"


def _narrative_matches(tags: list[str], keywords: tuple[str, ...]) -> list[str]:
    return [tag for tag in tags if any(keyword in tag.lower() for keyword in keywords)]


def _shared_tags_by_pair(edges: list[Edge]) -> dict[frozenset[str], list[str]]:
    shared: dict[frozenset[str], list[str]] = {}
    for edge in edges:
        if edge.type != "tag_shared" or edge.from_id == edge.to_id:
            continue
        tags = shared.setdefault(edge.pair, [])
        for tag in edge.shared_attributes:
            if tag not in tags:
                tags.append(tag)
    return shared
