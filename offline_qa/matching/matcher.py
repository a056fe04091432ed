"""offline_qa.matching.matcher

Matches a user question to a QA bank entry using a dependency-light heuristic:
edit similarity + keyword overlap, boosted by the entry priority, gated by a threshold.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from offline_qa.contracts.models import MatchResult, QABankEntry
from offline_qa.tracing import TraceCollector

from .similarity import combined_similarity, edit_similarity, keyword_score
from .text import normalize, tokenize
from .weights import DEFAULT_WEIGHTS, ScoringWeights


@dataclass(frozen=True)
class Candidate:
    """Bank entry with its question and keywords normalized once at load time."""
    entry: QABankEntry
    normalized_question: str
    question_tokens: tuple[str, ...]
    keywords: tuple[str, ...]


@dataclass(frozen=True)
class CandidateScore:
    edit_similarity: float
    keyword_score: float
    combined: float
    weighted: float


def prepare_candidate(entry: QABankEntry) -> Candidate:
    nq = normalize(entry.question)
    keywords = tuple(dict.fromkeys(normalize(k) for k in entry.keywords))
    return Candidate(entry=entry, normalized_question=nq, question_tokens=tuple(tokenize(nq)), keywords=keywords)


def prepare_candidates(entries: Iterable[QABankEntry]) -> list[Candidate]:
    return [prepare_candidate(e) for e in entries]


def score_candidate(
    normalized_query: str,
    query_tokens: Sequence[str],
    cand: Candidate,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> CandidateScore:
    edit = edit_similarity(normalized_query, cand.normalized_question)
    kw = keyword_score(query_tokens, cand.question_tokens, cand.keywords, weights)
    combined = combined_similarity(edit, kw, weights)
    return CandidateScore(edit_similarity=edit, keyword_score=kw, combined=combined, weighted=combined * cand.entry.priority)


def find_best_match(
    query: str,
    candidates: Sequence[Candidate],
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    tracer: Optional[TraceCollector] = None,
) -> Optional[MatchResult]:
    """Scan every candidate and return the best one if it clears the threshold.

    Strict `>` keeps the first-seen maximum, so ties go to the earlier bank entry.
    """
    nq = normalize(query)
    tokens = tokenize(nq)

    best: Optional[Candidate] = None
    best_score: Optional[CandidateScore] = None
    best_weighted = 0.0
    for cand in candidates:
        s = score_candidate(nq, tokens, cand, weights)
        if tracer is not None:
            tracer.add("candidate", {
                "id": cand.entry.id,
                "edit_similarity": round(s.edit_similarity, 4),
                "keyword_score": round(s.keyword_score, 4),
                "weighted": round(s.weighted, 4),
            })
        if s.weighted > best_weighted:
            best, best_score, best_weighted = cand, s, s.weighted

    matched = best_score is not None and best_weighted >= weights.confidence_threshold
    if tracer is not None:
        tracer.add("decision", {
            "query": nq,
            "best_id": best.entry.id if best else None,
            "weighted": round(best_weighted, 4),
            "threshold": weights.confidence_threshold,
            "matched": matched,
        })
    if best is None or best_score is None or not matched:
        return None

    return MatchResult(
        entry=best.entry,
        confidence=max(0.0, min(1.0, best_weighted)),
        weighted_score=best_weighted,
        edit_similarity=best_score.edit_similarity,
        keyword_score=best_score.keyword_score,
    )
