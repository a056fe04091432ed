"""offline_qa.matching.text

Text normalization and tokenization shared by queries and bank questions.
"""

from __future__ import annotations
import re

from .weights import MIN_TOKEN_LENGTH

# Anything that is not a letter, digit or whitespace ("_" counts as punctuation)
_PUNCT_RE = re.compile(r"[^\w\s]|_")
_SPACE_RE = re.compile(r"\s+")


def normalize(text: str | None) -> str:
    """Lowercase, strip punctuation, collapse whitespace and trim."""
    if not text:
        return ""
    t = _PUNCT_RE.sub("", text.lower())
    return _SPACE_RE.sub(" ", t).strip()


def tokenize(normalized: str) -> list[str]:
    """Split on spaces, dropping tokens of 2 characters or fewer."""
    if not normalized:
        return []
    return [w for w in normalized.split(" ") if len(w) >= MIN_TOKEN_LENGTH]
