"""Text normalization, similarity scoring and point merging."""

from .merge import (
    JaccardMerge,
    WeightedSimilarityMerge,
    aggressive_merge_points,
    get_merge_strategy,
    merge_similar_points,
)
from .normalize import get_normalized_key, process_suggestion
from .similarity import get_similarity, jaccard_similarity
from .split import split_response
from .tokenize import stem, tokenize

__all__ = [
    "JaccardMerge",
    "WeightedSimilarityMerge",
    "aggressive_merge_points",
    "get_merge_strategy",
    "get_normalized_key",
    "get_similarity",
    "jaccard_similarity",
    "merge_similar_points",
    "process_suggestion",
    "split_response",
    "stem",
    "tokenize",
]
