"""Similarity scores between critique strings."""

from difflib import SequenceMatcher

from .tokenize import stem, tokenize

STEM_WEIGHT = 0.4
WORD_WEIGHT = 0.4
SEQUENCE_WEIGHT = 0.2


def sequence_similarity(text1: str, text2: str) -> float:
    """Character-block match ratio of the lowercased strings.

    SequenceMatcher is not symmetric in general, so the pair is compared in
    sorted order.
    """
    first, second = sorted((text1.lower(), text2.lower()))
    return SequenceMatcher(None, first, second).ratio()


def dice(set1: set[str], set2: set[str]) -> float:
    """Dice coefficient of two sets; 0.0 when both are empty."""
    total = len(set1) + len(set2)
    if total == 0:
        return 0.0
    return 2.0 * len(set1 & set2) / total


def similarity_components(text1: str, text2: str) -> dict[str, float]:
    """Return the stem, word and sequence components of the weighted score."""
    words1 = set(tokenize(text1))
    words2 = set(tokenize(text2))
    stems1 = {stem(w) for w in words1}
    stems2 = {stem(w) for w in words2}
    return {
        "stem": dice(stems1, stems2),
        "word": dice(words1, words2),
        "sequence": sequence_similarity(text1, text2),
    }


def get_similarity(text1: str, text2: str) -> float:
    """Weighted similarity in [0, 1] favouring stem and word overlap."""
    if text1 == text2:
        return 1.0
    parts = similarity_components(text1, text2)
    score = (
        parts["stem"] * STEM_WEIGHT
        + parts["word"] * WORD_WEIGHT
        + parts["sequence"] * SEQUENCE_WEIGHT
    )
    return min(score, 1.0)


def jaccard_similarity(text1: str, text2: str) -> float:
    """Jaccard index over lowercased whitespace-separated words."""
    words1 = set(text1.lower().split())
    words2 = set(text2.lower().split())
    union = words1 | words2
    if not union:
        return 1.0 if text1 == text2 else 0.0
    return len(words1 & words2) / len(union)
