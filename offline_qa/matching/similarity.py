"""offline_qa.matching.similarity

Similarity signals between a query and one bank question:
- edit similarity: Levenshtein distance scaled by the longer string
- keyword score: overlap with the question's words and the entry's curated keywords
"""

from __future__ import annotations
from typing import Sequence

from .weights import DEFAULT_WEIGHTS, ScoringWeights


def levenshtein_distance(a: str, b: str) -> int:
    """Classic edit distance (insert/delete/substitute cost 1).

    Keeps two rolling rows sized to the shorter string, so memory is
    O(min(len(a), len(b))) while time stays O(len(a) * len(b)).
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    current = [0] * (len(b) + 1)
    for i, ca in enumerate(a, start=1):
        current[0] = i
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            current[j] = min(
                current[j - 1] + 1,     # insertion
                previous[j] + 1,        # deletion
                previous[j - 1] + cost,  # substitution
            )
        previous, current = current, previous
    return previous[len(b)]


def edit_similarity(a: str, b: str) -> float:
    """1 - distance / longest length; 1.0 for identical strings, 0.0 if only one is empty."""
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0
    return 1.0 - levenshtein_distance(a, b) / max(len(a), len(b))


def keyword_score(
    query_tokens: Sequence[str],
    question_tokens: Sequence[str],
    keywords: Sequence[str],
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> float:
    """Blend of plain word overlap and curated keyword overlap.

    Every query token occurrence is counted, so repeated query words count repeatedly.
    Keyword hits are boosted relative to question-word hits; the boost is applied to the
    denominator too, keeping a full keyword hit rate at 1.0.
    """
    if not query_tokens:
        return 0.0

    question_set = set(question_tokens)
    keyword_set = set(keywords)
    word_hits = sum(1 for t in query_tokens if t in question_set)
    keyword_hits = sum(weights.keyword_hit_boost for t in query_tokens if t in keyword_set)

    word_ratio = word_hits / len(query_tokens)
    keyword_ratio = keyword_hits / (len(keywords) * weights.keyword_hit_boost) if keywords else 0.0
    return weights.word_overlap_weight * word_ratio + weights.keyword_overlap_weight * keyword_ratio


def combined_similarity(edit: float, keyword: float, weights: ScoringWeights = DEFAULT_WEIGHTS) -> float:
    return weights.edit_weight * edit + weights.keyword_weight * keyword

