"""Collection-wide reading metrics: genre spread, era preference, pacing and habits."""

import re
from collections import Counter
from datetime import datetime

import numpy as np
from loguru import logger

from shelfgraph.clock import resolve_now
from shelfgraph.config import settings
from shelfgraph.domain.book import BookNode
from shelfgraph.domain.metrics import (
    GenreShare,
    MetricsBundle,
    ReadingVelocity,
    TemporalPreference,
    VelocityTrend,
)

from .genres import infer_genre
from .patterns import chronological_order, detect_reading_patterns

SECONDS_PER_DAY = 24 * 60 * 60
DAYS_PER_MONTH = 30


def compute_metrics(nodes: list[BookNode], now: datetime | None = None) -> MetricsBundle:
    """Compute the metrics bundle for a collection.

    Args:
        nodes: Books in collection order
        now: Reference time for momentum; defaults to the current UTC time

    Returns:
        MetricsBundle; collections with fewer than two books get the neutral bundle
    """
    if len(nodes) < 2:
        return MetricsBundle()

    genre_profile = build_genre_profile(nodes)
    temporal_preference = classify_temporal_preference(nodes)

    bundle = MetricsBundle(
        genre_profile=genre_profile,
        temporal_preference=temporal_preference,
        diversity_score=calculate_diversity_score(nodes),
        exploration_score=calculate_exploration_score(nodes),
        consistency_score=calculate_consistency_score(nodes),
        reading_velocity=calculate_reading_velocity(nodes, resolve_now(now)),
        signature=build_signature(temporal_preference, genre_profile),
        reading_patterns=detect_reading_patterns(nodes),
    )
    logger.debug(f"Computed metrics for {len(nodes)} nodes: {bundle.signature}")
    return bundle


def build_genre_profile(nodes: list[BookNode]) -> list[GenreShare]:
    """Integer genre percentages summing to exactly 100.

    Shares are floored, then the leftover points go one each to the genres with the
    largest fractional parts (earlier genres win ties), so no share is negative.
    """
    if not nodes:
        return []

    counts = Counter(infer_genre(node) for node in nodes)
    total = sum(counts.values())
    percentages = {genre: count * 100 // total for genre, count in counts.items()}

    leftover = 100 - sum(percentages.values())
    by_remainder = sorted(counts, key=lambda genre: counts[genre] * 100 % total, reverse=True)
    for genre in by_remainder[:leftover]:
        percentages[genre] += 1

    shares = [GenreShare(genre=genre, percentage=pct) for genre, pct in percentages.items()]
    return sorted(shares, key=lambda share: share.percentage, reverse=True)


def era_of(year: int) -> TemporalPreference:
    if year < settings.classic_era_end:
        return "classic"
    if year < settings.modern_era_end:
        return "modern"
    return "contemporary"


def classify_temporal_preference(nodes: list[BookNode]) -> TemporalPreference:
    """An era holding a clear majority of dated books wins; otherwise ``mixed``."""
    years = [node.publication_year for node in nodes if node.publication_year is not None]
    if len(years) < 2:
        return "mixed"

    era, count = Counter(era_of(year) for year in years).most_common(1)[0]
    if count / len(years) > settings.era_majority:
        return era
    return "mixed"


def normalized_entropy(counts: list[int]) -> float:
    """Shannon entropy of a distribution scaled to [0, 1] by its maximum."""
    counts = [count for count in counts if count > 0]
    if len(counts) < 2:
        return 0.0
    probabilities = np.array(counts, dtype=float)
    probabilities /= probabilities.sum()
    entropy = float(-(probabilities * np.log(probabilities)).sum())
    return min(max(entropy / float(np.log(len(counts))), 0.0), 1.0)


def calculate_diversity_score(nodes: list[BookNode]) -> float:
    """Spread across tags, or across inferred genres when no book is tagged."""
    tag_counts = Counter(tag for node in nodes for tag in node.tags)
    if tag_counts:
        return normalized_entropy(list(tag_counts.values()))
    return normalized_entropy(list(Counter(infer_genre(node) for node in nodes).values()))


def calculate_exploration_score(nodes: list[BookNode]) -> float:
    """Share of tagged books, after the first, that introduced a tag not seen before."""
    tagged = [node for node in chronological_order(nodes) if node.tags]
    if len(tagged) < 2:
        return 0.0

    seen = set(tagged[0].tags)
    novel = 0
    for node in tagged[1:]:
        if not seen.issuperset(node.tags):
            novel += 1
        seen.update(node.tags)
    return novel / (len(tagged) - 1)


def calculate_consistency_score(nodes: list[BookNode]) -> float:
    """Share of tagged books carrying the single most frequent tag."""
    tagged = [node for node in nodes if node.tags]
    if len(tagged) < 2:
        return 0.0
    top_count = Counter(tag for node in tagged for tag in node.tags).most_common(1)[0][1]
    return min(top_count / len(tagged), 1.0)


def calculate_reading_velocity(nodes: list[BookNode], now: datetime) -> ReadingVelocity:
    """Pace of additions from the ``created_at`` timeline.

    Args:
        nodes: Books; untimed books count toward the pace but not the timeline
        now: Reference time for momentum

    Returns:
        ReadingVelocity, neutral when fewer than two books are timed
    """
    added = sorted(node.created_at for node in nodes if node.created_at is not None)
    if len(added) < 2:
        return ReadingVelocity()

    gaps = [
        (later - earlier).total_seconds() / SECONDS_PER_DAY
        for earlier, later in zip(added, added[1:])
    ]
    span_days = sum(gaps)
    months = max(span_days / DAYS_PER_MONTH, settings.min_months_span)
    average_gap = span_days / len(gaps)

    recent_gaps = gaps[len(gaps) // 2 :]
    recent_average_gap = sum(recent_gaps) / len(recent_gaps)

    days_since_last = max((now - added[-1]).total_seconds() / SECONDS_PER_DAY, 0.0)
    if average_gap + days_since_last == 0:
        momentum = 1.0
    else:
        momentum = average_gap / (average_gap + days_since_last)

    return ReadingVelocity(
        books_per_month=round(len(nodes) / months, 2),
        trend=classify_trend(average_gap, recent_average_gap),
        average_time_between_books=round(average_gap, 1),
        momentum=round(min(max(momentum, 0.0), 1.0), 2),
    )


def classify_trend(average_gap: float, recent_average_gap: float) -> VelocityTrend:
    """Compare the recent addition rate with the overall rate (rate is the inverse of the gap)."""
    if recent_average_gap == 0:
        return "accelerating" if average_gap > 0 else "steady"

    ratio = average_gap / recent_average_gap
    if ratio > settings.velocity_trend_ratio:
        return "accelerating"
    if ratio < 1 / settings.velocity_trend_ratio:
        return "decelerating"
    return "steady"


def build_signature(temporal_preference: str, genre_profile: list[GenreShare]) -> str:
    parts = [temporal_preference] + [share.genre for share in genre_profile[:3]]
    slug = re.sub(r"[^a-z0-9]+", "-", "-".join(parts).lower())
    return slug.strip("-")
