"""Tag clusters and their health scores."""

from collections import Counter
from datetime import datetime, timedelta

from loguru import logger

from shelfgraph.clock import resolve_now
from shelfgraph.config import settings
from shelfgraph.domain.book import BookNode
from shelfgraph.domain.clusters import Cluster, GrowthKind
from shelfgraph.domain.relationships import Edge


def group_by_tag(nodes: list[BookNode]) -> dict[str, list[BookNode]]:
    """Group books by tag, keeping tags in first-appearance order."""
    groups: dict[str, list[BookNode]] = {}
    for node in nodes:
        for tag in node.tags:
            groups.setdefault(tag, []).append(node)
    return groups


def related_tags(tag: str, members: list[BookNode], limit: int) -> list[str]:
    """Tags most often carried alongside ``tag``; earlier tags win ties."""
    counts = Counter(other for member in members for other in member.tags if other != tag)
    return [other for other, _ in counts.most_common(limit)]


def analyze_clusters(
    nodes: list[BookNode],
    edges: list[Edge] | None = None,  # noqa: ARG001
    now: datetime | None = None,
) -> list[Cluster]:
    """Build one cluster per tag and score its health.

    Args:
        nodes: Books in collection order
        edges: Current edge set; cluster membership depends on tags only
        now: Reference time for recency; defaults to the current UTC time

    Returns:
        Clusters sorted by health score, highest first; equal scores keep tag order
    """
    now = resolve_now(now)
    window = timedelta(days=settings.cluster_recency_window_days)

    clusters = []
    for tag, members in group_by_tag(nodes).items():
        diversity = calculate_diversity(members)
        recency = calculate_recency(members, now, window)
        health = calculate_health(diversity, recency)
        clusters.append(
            Cluster(
                tag=tag,
                node_ids=[member.id for member in members],
                diversity=diversity,
                recency=recency,
                growth=classify_growth(members, now, window),
                health_score=health,
                central_themes=[tag] + related_tags(tag, members, settings.cluster_related_tags),
                bridge_books=[
                    member.id
                    for member in members
                    if len(member.tags) >= settings.bridge_book_min_tags
                ],
            )
        )

    logger.debug(f"Analyzed {len(clusters)} clusters over {len(nodes)} nodes")
    return sorted(clusters, key=lambda cluster: cluster.health_score, reverse=True)


def calculate_diversity(members: list[BookNode]) -> float:
    """Distinct authors per member; each unknown-author book counts as its own author."""
    if not members:
        return 0.0
    authors = {
        member.author if member.has_known_author else f"unknown:{member.id}" for member in members
    }
    return min(len(authors) / len(members), 1.0)


def calculate_recency(members: list[BookNode], now: datetime, window: timedelta) -> float:
    """Share of members added within the recency window; untimed books are never recent."""
    if not members:
        return 0.0
    recent = [m for m in members if m.created_at is not None and now - m.created_at <= window]
    return len(recent) / len(members)


def classify_growth(members: list[BookNode], now: datetime, window: timedelta) -> GrowthKind:
    """Compare the recent addition rate with the cluster's historical rate.

    The historical span is at least one window long, so a cluster whose whole
    history sits inside the window compares equal and reads as stable.
    """
    added = [m.created_at for m in members if m.created_at is not None]
    if not added or window.total_seconds() <= 0:
        return "stable"

    history = max(now - min(added), window)
    recent_count = sum(1 for created in added if now - created <= window)

    recent_rate = recent_count / window.total_seconds()
    historical_rate = len(added) / history.total_seconds()
    ratio = recent_rate / historical_rate

    if ratio > settings.cluster_expanding_ratio:
        return "expanding"
    if ratio < settings.cluster_dormant_ratio:
        return "dormant"
    return "stable"


def calculate_health(diversity: float, recency: float) -> float:
    total_weight = settings.health_diversity_weight + settings.health_recency_weight
    if total_weight <= 0:
        return 0.0
    score = (
        diversity * settings.health_diversity_weight + recency * settings.health_recency_weight
    ) / total_weight
    return min(max(score, 0.0), 1.0)
