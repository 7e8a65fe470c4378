"""Word tokenization and rule-based stemming."""

import re

IRREGULARS = {
    "are": "be", "were": "be", "is": "be", "am": "be",
    "has": "have", "have": "have", "had": "have",
    "does": "do", "did": "do",
    "would": "will", "should": "shall",
    "could": "can", "might": "may",
    "better": "good", "best": "good",
    "worse": "bad", "worst": "bad",
    "larger": "large", "largest": "large",
    "smaller": "small", "smallest": "small",
    "more": "many", "most": "many",
    "less": "few", "least": "few",
}

# Most specific suffix first; only the first rule that applies is used.
SUFFIX_RULES = [
    ("ational", "ate"),
    ("tional", "tion"),
    ("ization", "ize"),
    ("fulness", "ful"),
    ("ousness", "ous"),
    ("alities", "al"),
    ("iveness", "ive"),
    ("ements", "e"),
    ("ments", ""),
    ("ities", "ity"),
    ("ingly", ""),
    ("fully", "ful"),
    ("ation", "ate"),
    ("ness", ""),
    ("ings", ""),
    ("able", ""),
    ("ible", ""),
    ("edly", "e"),
    ("ally", "al"),
    ("ing", ""),
    ("ion", ""),
    ("ies", "y"),
    ("ive", ""),
    ("ize", ""),
    ("ed", ""),
    ("es", ""),
    ("ly", ""),
    ("s", ""),
]

_WHITESPACE_RE = re.compile(r"\s+")
_POSSESSIVE_RE = re.compile(r"['’]s\b")
_PUNCTUATION_RE = re.compile(r"[^\w\s']")


def tokenize(text: str) -> list[str]:
    """Split text into lowercase word tokens, keeping contractions intact."""
    text = _WHITESPACE_RE.sub(" ", text.lower())
    text = _POSSESSIVE_RE.sub("", text)
    text = _PUNCTUATION_RE.sub(" ", text)
    return [token for token in text.split() if token]


def stem(word: str) -> str:
    """Reduce a word to an approximate root form."""
    result = word.lower()
    if len(result) <= 3:
        return result

    if result in IRREGULARS:
        return IRREGULARS[result]

    for suffix, replacement in SUFFIX_RULES:
        if result.endswith(suffix):
            candidate = result[: -len(suffix)] + replacement
            if len(candidate) > 2:
                return candidate

    return result
