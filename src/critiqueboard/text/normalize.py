"""Simplification of critique points before comparison."""

import re

from ..models import ProcessedPoint
from .tokenize import stem, tokenize

STOPWORDS = [
    "the", "a", "an", "in", "on", "at", "to", "for", "of", "with", "by",
    "this", "that", "these", "those", "such", "as", "and", "or", "but",
    "if", "when", "where", "how", "what", "which", "who", "whom", "whose",
    "why", "whether", "while", "though", "although", "however", "therefore",
    "thus", "hence", "so", "because", "since", "unless", "until", "despite",
]

FILLER_PHRASES = [
    "in terms of", "in order to", "in addition to", "in relation to",
    "with respect to", "due to the fact that", "in the event that",
    "in the case of",
]

_STOPWORD_RE = re.compile(r"\b(" + "|".join(STOPWORDS) + r")\b", re.IGNORECASE)
_PARENTHETICAL_RE = re.compile(r"\([^)]*\)")
_FILLER_RE = re.compile(r"\b(" + "|".join(FILLER_PHRASES) + r")\b", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")
_QUOTES_RE = re.compile(r"[\"“”'‘’]")


def simplify(text: str) -> str:
    """Strip stopwords, parentheticals, filler phrases and quotes."""
    text = _STOPWORD_RE.sub("", text)
    text = _PARENTHETICAL_RE.sub("", text)
    text = _FILLER_RE.sub("", text)
    text = _WHITESPACE_RE.sub(" ", text)
    text = _QUOTES_RE.sub("", text)
    return text.strip()


def get_normalized_key(text: str) -> str:
    """Order-insensitive key: the sorted stems of the text's tokens."""
    return " ".join(sorted(stem(token) for token in tokenize(text)))


def process_suggestion(text: str) -> ProcessedPoint:
    """Build the ProcessedPoint for one raw critique string."""
    simplified = simplify(text)
    return ProcessedPoint(
        original=text,
        simplified=simplified,
        stems=[stem(token) for token in tokenize(text)],
        key=get_normalized_key(simplified),
    )
