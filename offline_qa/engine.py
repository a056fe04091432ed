"""offline_qa.engine

Query API consumed by the chat layer: answer common questions without network access.

The engine is an explicitly constructed object that owns its QA bank; build as many
independently configured engines as needed (e.g. one per test).
"""

from __future__ import annotations

import logging
from typing import Optional

from offline_qa.bank.store import QABankStore
from offline_qa.config import NO_OFFLINE_ANSWER
from offline_qa.contracts.models import LoadReport, MatchResult, QABankEntry
from offline_qa.logging_utils import get_logger
from offline_qa.matching.matcher import find_best_match
from offline_qa.matching.weights import DEFAULT_WEIGHTS, ScoringWeights
from offline_qa.tracing import TraceCollector


class OfflineQAEngine:
    """Matches free-text queries against a static QA bank."""

    def __init__(
        self,
        store: QABankStore,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
        logger: Optional[logging.Logger] = None,
        no_answer_message: str = NO_OFFLINE_ANSWER,
    ):
        self.store = store
        self.weights = weights
        self.logger = logger or get_logger()
        self.no_answer_message = no_answer_message

    def load(self) -> LoadReport:
        return self.store.load()

    def find_answer(self, query: str, tracer: Optional[TraceCollector] = None) -> Optional[MatchResult]:
        """Best confident match for `query`, or None.

        `MatchResult.weighted_score` may exceed 1.0 for boosted entries; the threshold
        check is the authoritative gate, not a probability.
        """
        result = find_best_match(query, self.store.candidates(), self.weights, tracer=tracer)
        if result:
            self.logger.debug(
                f"Offline match id={result.entry.id} weighted={result.weighted_score:.3f} "
                f"edit={result.edit_similarity:.3f} keyword={result.keyword_score:.3f}"
            )
        else:
            self.logger.debug(f"No confident offline match for query={query!r}")
        return result

    def has_answer(self, query: str) -> bool:
        return self.find_answer(query) is not None

    def get_answer_or_fallback(self, query: str) -> str:
        result = self.find_answer(query)
        return result.entry.answer if result else self.no_answer_message

    def search_by_category(self, category: str) -> list[QABankEntry]:
        return self.store.by_category(category)

    def random_from_category(self, category: str) -> Optional[QABankEntry]:
        return self.store.random_from_category(category)

    def categories(self) -> set[str]:
        return self.store.categories()

    def entry_count(self) -> int:
        return self.store.count()
