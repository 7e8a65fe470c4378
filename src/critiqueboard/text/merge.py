"""Merging of near-duplicate critique points.

Two strategies coexist; callers choose one:

- ``WeightedSimilarityMerge`` buckets points by their normalized stem key, then
  greedily clusters the bucket representatives using the weighted
  stem/word/sequence score (threshold 0.6), repeating the greedy pass until
  no two representatives score above the threshold.
- ``JaccardMerge`` is a single greedy pass over the raw strings using plain
  word-level Jaccard similarity (threshold 0.7).

Both keep the shortest string of each cluster.
"""

import logging
from typing import Iterable

from ..errors import InvalidInput
from ..models import ProcessedPoint
from .normalize import process_suggestion
from .similarity import get_similarity, jaccard_similarity

logger = logging.getLogger(__name__)


def _validate(points: Iterable) -> list[str]:
    points = list(points)
    for i, point in enumerate(points):
        if not isinstance(point, str):
            raise InvalidInput(f"Point {i} is {type(point).__name__}, expected str")
    return points


class WeightedSimilarityMerge:
    """Two-pass clustering on normalized keys and weighted similarity."""

    name = "weighted"

    def __init__(self, threshold: float = 0.6):
        self.threshold = threshold

    def merge(self, points: Iterable[str]) -> list[str]:
        points = _validate(points)
        if not points:
            return []

        # Pass 1: exact key buckets, shortest original wins (first seen on ties)
        buckets: dict[str, ProcessedPoint] = {}
        for point in points:
            processed = process_suggestion(point)
            current = buckets.get(processed.key)
            if current is None or len(processed.original) < len(current.original):
                buckets[processed.key] = processed

        # Pass 2: greedy clustering of bucket representatives. A cluster that
        # swaps in a shorter representative may now sit above the threshold
        # against an earlier cluster, so regroup until nothing merges.
        clusters = self._cluster(list(buckets.values()))
        while True:
            regrouped = self._cluster(clusters)
            if len(regrouped) == len(clusters):
                break
            clusters = regrouped

        logger.debug(f"Weighted merge: {len(points)} points -> {len(buckets)} buckets -> {len(clusters)} clusters")
        return sorted((c.original for c in clusters), key=len)

    def _cluster(self, candidates: list[ProcessedPoint]) -> list[ProcessedPoint]:
        """One greedy pass: join the best-scoring cluster above the threshold, keep the shorter original."""
        clusters: list[ProcessedPoint] = []
        for candidate in candidates:
            best_index, best_score = -1, 0.0
            for i, accepted in enumerate(clusters):
                score = get_similarity(candidate.simplified, accepted.simplified)
                if score > best_score:
                    best_index, best_score = i, score

            if best_index >= 0 and best_score > self.threshold:
                if len(candidate.original) < len(clusters[best_index].original):
                    clusters[best_index] = candidate
            else:
                clusters.append(candidate)
        return clusters


class JaccardMerge:
    """Single-pass greedy grouping on word-level Jaccard similarity."""

    name = "jaccard"

    def __init__(self, threshold: float = 0.7):
        self.threshold = threshold

    def merge(self, points: Iterable[str]) -> list[str]:
        points = _validate(points)
        if not points:
            return []

        groups: list[list[str]] = []
        used: set[str] = set()
        for point in points:
            if point in used:
                continue
            group = [point]
            used.add(point)
            for other in points:
                if other not in used and jaccard_similarity(point, other) > self.threshold:
                    group.append(other)
                    used.add(other)
            groups.append(group)

        logger.debug(f"Jaccard merge: {len(points)} points -> {len(groups)} groups")
        return [min(group, key=len) for group in groups]


MERGE_STRATEGIES = {
    WeightedSimilarityMerge.name: WeightedSimilarityMerge,
    JaccardMerge.name: JaccardMerge,
}


def get_merge_strategy(name: str = "weighted", threshold: float | None = None):
    """Return a merge strategy instance by name."""
    try:
        strategy_cls = MERGE_STRATEGIES[name]
    except KeyError:
        raise ValueError(f"Unknown merge strategy: {name!r} (choose from {', '.join(MERGE_STRATEGIES)})") from None
    if threshold is None:
        return strategy_cls()
    return strategy_cls(threshold=threshold)


def merge_similar_points(
    points: Iterable[str],
    strategy: str = "weighted",
    threshold: float | None = None,
) -> list[str]:
    """Deduplicate near-identical points with the named strategy."""
    return get_merge_strategy(strategy, threshold).merge(points)


def _topic_key(point: str) -> str:
    words = [w for w in point.lower().split() if len(w) > 3]
    return " ".join(words[:3])


def aggressive_merge_points(points: Iterable[str], strategy=None, max_points: int = 10) -> list[str]:
    """Merge points, then collapse by topic if more than ``max_points`` remain.

    The topic of a point is its first three words longer than three
    characters; each topic keeps its shortest point.
    """
    points = list(points)
    strategy = strategy or JaccardMerge()
    merged = strategy.merge(points)
    logger.info(f"Merged {len(points)} points into {len(merged)}")

    if len(merged) <= max_points:
        return merged

    topics: dict[str, list[str]] = {}
    for point in merged:
        topics.setdefault(_topic_key(point), []).append(point)

    merged = sorted((min(group, key=len) for group in topics.values()), key=len)[:max_points]
    logger.info(f"Topic merging reduced points to {len(merged)}")
    return merged
