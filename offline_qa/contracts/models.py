"""offline_qa.contracts.models

Shared models for the QA bank, the matcher and the query API.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Any, Literal, Mapping, Optional

from offline_qa.errors import InvalidEntryError
from offline_qa.matching.weights import CONFIDENCE_THRESHOLD

Category = Literal[
    "app_usage",
    "agent_creation",
    "agent_customization",
    "troubleshooting",
    "features",
    "api_setup",
    "privacy",
    "voice",
    "face_recognition",
]

CATEGORIES: tuple[str, ...] = (
    "app_usage",
    "agent_creation",
    "agent_customization",
    "troubleshooting",
    "features",
    "api_setup",
    "privacy",
    "voice",
    "face_recognition",
)

_DISPLAY_NAMES = {
    "app_usage": "App Usage",
    "agent_creation": "Agent Creation",
    "agent_customization": "Customization",
    "troubleshooting": "Troubleshooting",
    "features": "Features",
    "api_setup": "API Setup",
    "privacy": "Privacy & Security",
    "voice": "Voice Features",
    "face_recognition": "Face Recognition",
}


def category_display_name(category: str) -> str:
    return _DISPLAY_NAMES.get(category, "General")


def _dedupe(values) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for v in values:
        seen.setdefault(str(v), None)
    return tuple(seen)


@dataclass(frozen=True)
class QABankEntry:
    """One pre-authored question/answer pair. Keywords have set semantics."""
    id: str
    question: str
    answer: str
    category: Category
    keywords: tuple[str, ...] = field(default_factory=tuple)
    priority: float = 1.0  # multiplicative boost for common questions

    def __post_init__(self) -> None:
        object.__setattr__(self, "keywords", _dedupe(self.keywords))
        if not str(self.id).strip():
            raise InvalidEntryError("Entry id must be a non-empty string")
        if self.category not in CATEGORIES:
            raise InvalidEntryError(f"Entry {self.id}: unknown category {self.category!r}")
        if not (math.isfinite(self.priority) and self.priority > 0):
            raise InvalidEntryError(f"Entry {self.id}: priority must be a finite number > 0, got {self.priority}")

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "QABankEntry":
        """Build an entry from a dataset record (`priority` defaults to 1.0)."""
        missing = [k for k in ("id", "question", "answer", "category") if record.get(k) is None]
        if missing:
            raise InvalidEntryError(f"Record {record.get('id')!r} is missing fields: {missing}")

        keywords = record.get("keywords")
        if keywords is None:
            keywords = []
        if not isinstance(keywords, (list, tuple)) or not all(isinstance(k, str) for k in keywords):
            raise InvalidEntryError(f"Entry {record['id']}: keywords must be a list of strings")

        priority = record.get("priority")
        try:
            priority = 1.0 if priority is None else float(priority)
        except (TypeError, ValueError) as e:
            raise InvalidEntryError(f"Entry {record['id']}: invalid priority {priority!r}") from e

        return cls(
            id=str(record["id"]),
            question=str(record["question"]),
            answer=str(record["answer"]),
            category=str(record["category"]),  # type: ignore[arg-type]
            keywords=tuple(keywords),
            priority=priority,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "question": self.question,
            "answer": self.answer,
            "category": self.category,
            "keywords": list(self.keywords),
            "priority": self.priority,
        }


@dataclass(frozen=True)
class MatchResult:
    """Winning entry for a query plus the scores that selected it.

    `weighted_score` is combined similarity times the entry priority and can exceed 1.0;
    it is not a probability. `confidence` is the same value clamped to [0.0, 1.0].
    """
    entry: QABankEntry
    confidence: float
    weighted_score: float
    edit_similarity: float
    keyword_score: float

    def is_match(self, threshold: float = CONFIDENCE_THRESHOLD) -> bool:
        return self.weighted_score >= threshold


@dataclass(frozen=True)
class LoadReport:
    """Outcome of the one-time bank load."""
    source: Literal["dataset", "fallback"]
    count: int
    path: Optional[str] = None
    error: Optional[str] = None
