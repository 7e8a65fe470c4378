"""Tests for the point merging strategies."""

from itertools import combinations

import pytest

from critiqueboard.errors import InvalidInput
from critiqueboard.text.merge import (
    JaccardMerge,
    WeightedSimilarityMerge,
    aggressive_merge_points,
    get_merge_strategy,
    merge_similar_points,
)
from critiqueboard.text.normalize import process_suggestion
from critiqueboard.text.similarity import get_similarity

CONTRAST_POINTS = [
    "The UI lacks contrast for visually impaired users.",
    "Low contrast makes the UI hard to see for visually impaired users.",
    "The onboarding flow has too many steps.",
]


def test_weighted_merge_clusters_similar_points():
    merged = merge_similar_points(CONTRAST_POINTS)
    assert merged == [
        "The onboarding flow has too many steps.",
        "The UI lacks contrast for visually impaired users.",
    ]


def test_weighted_merge_is_idempotent():
    once = merge_similar_points(CONTRAST_POINTS)
    assert set(merge_similar_points(once)) == set(once)


# Point 4 scores above the threshold against both the first and the third
# cluster; it replaces the first representative, which then matches the third.
CHAINED_POINTS = [
    "the many lacks onboarding lacks is",
    "steps steps contrast the onboarding low",
    "too hard lacks lacks many many",
    "see lacks hard many the is",
    "lacks too hard many hard users",
]


@pytest.mark.parametrize("points", [
    CHAINED_POINTS,
    list(reversed(CHAINED_POINTS)),
    CONTRAST_POINTS + CHAINED_POINTS,
])
def test_weighted_merge_leaves_no_similar_pair(points):
    once = merge_similar_points(points)

    assert set(merge_similar_points(once)) == set(once)
    simplified = [process_suggestion(p).simplified for p in once]
    for a, b in combinations(simplified, 2):
        assert get_similarity(a, b) <= 0.6


def test_weighted_merge_key_bucket_keeps_shortest():
    assert merge_similar_points(["contrast needed by users", "users need contrast"]) == ["users need contrast"]


def test_weighted_merge_tie_keeps_first_seen():
    assert merge_similar_points(["red blue", "blue red"]) == ["red blue"]


def test_weighted_merge_threshold_is_configurable():
    merged = WeightedSimilarityMerge(threshold=0.99).merge(CONTRAST_POINTS)
    assert len(merged) == 3


def test_jaccard_merge():
    merged = JaccardMerge().merge(["the ui is slow", "the ui is very slow", "onboarding needs work"])
    assert merged == ["the ui is slow", "onboarding needs work"]


def test_jaccard_merge_differs_from_weighted():
    # Word-level Jaccard of the two contrast points is about 0.54, below 0.7
    assert len(JaccardMerge().merge(CONTRAST_POINTS)) == 3


def test_jaccard_merge_exact_duplicates():
    assert JaccardMerge().merge(["same", "same", "other"]) == ["same", "other"]


def test_merge_empty():
    assert merge_similar_points([]) == []
    assert merge_similar_points([], strategy="jaccard") == []


def test_merge_rejects_non_strings():
    with pytest.raises(InvalidInput):
        merge_similar_points(["ok", 3])
    with pytest.raises(ValueError):
        JaccardMerge().merge([None])


def test_get_merge_strategy():
    assert isinstance(get_merge_strategy("jaccard"), JaccardMerge)
    assert get_merge_strategy("weighted", 0.8).threshold == 0.8
    assert get_merge_strategy("weighted").threshold == 0.6
    with pytest.raises(ValueError):
        get_merge_strategy("cosine")


def test_aggressive_merge_under_limit_is_plain_merge():
    points = ["the ui is slow", "the ui is very slow", "onboarding needs work"]
    assert aggressive_merge_points(points) == ["the ui is slow", "onboarding needs work"]


def test_aggressive_merge_groups_by_topic():
    points = [f"alpha beta gamma item{i}" for i in range(12)]
    assert aggressive_merge_points(points) == ["alpha beta gamma item0"]


def test_aggressive_merge_caps_point_count():
    points = [f"topic{i} words here" for i in range(12)]
    merged = aggressive_merge_points(points, max_points=10)
    assert merged == [f"topic{i} words here" for i in range(10)]
