"""offline_qa.config

Centralized configuration for the offline QA engine.

Uses environment variables (optionally from a .env file) so scoring can be tuned
without code changes.
"""

from __future__ import annotations
from dataclasses import dataclass
import os

from offline_qa.matching import weights as w
from offline_qa.paths import default_bank_path

NO_OFFLINE_ANSWER = (
    "I don't have information about that in my offline knowledge base. "
    "Please connect to the internet and set up an API key for more help."
)


def _env(name: str, default: str | None = None) -> str | None:
    val = os.getenv(name)
    return val if val is not None else default


def _env_bool(name: str, default: bool = False) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in ("1", "true", "yes", "y", "on")


def _env_int(name: str, default: int | None) -> int | None:
    v = os.getenv(name)
    if v is None:
        return default
    try:
        return int(v)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    v = os.getenv(name)
    if v is None:
        return default
    try:
        return float(v)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """Engine settings loaded from environment variables."""

    # QA bank
    qa_bank_path: str | None  # None/empty -> built-in bank only
    no_answer_message: str
    random_seed: int | None

    # Scoring
    confidence_threshold: float
    edit_weight: float
    keyword_weight: float
    word_overlap_weight: float
    keyword_overlap_weight: float
    keyword_hit_boost: float

    # Logging
    log_dir: str
    log_level: str
    debug: bool

    def scoring_weights(self) -> w.ScoringWeights:
        return w.ScoringWeights(
            edit_weight=self.edit_weight,
            keyword_weight=self.keyword_weight,
            word_overlap_weight=self.word_overlap_weight,
            keyword_overlap_weight=self.keyword_overlap_weight,
            keyword_hit_boost=self.keyword_hit_boost,
            confidence_threshold=self.confidence_threshold,
        )

    @staticmethod
    def load() -> "Settings":
        return Settings(
            qa_bank_path=_env("QA_BANK_PATH", str(default_bank_path())) or None,
            no_answer_message=_env("QA_NO_ANSWER_MESSAGE", NO_OFFLINE_ANSWER) or NO_OFFLINE_ANSWER,
            random_seed=_env_int("QA_RANDOM_SEED", None),
            confidence_threshold=_env_float("QA_CONFIDENCE_THRESHOLD", w.CONFIDENCE_THRESHOLD),
            edit_weight=_env_float("QA_EDIT_WEIGHT", w.EDIT_SIMILARITY_WEIGHT),
            keyword_weight=_env_float("QA_KEYWORD_WEIGHT", w.KEYWORD_SIMILARITY_WEIGHT),
            word_overlap_weight=_env_float("QA_WORD_OVERLAP_WEIGHT", w.WORD_OVERLAP_WEIGHT),
            keyword_overlap_weight=_env_float("QA_KEYWORD_OVERLAP_WEIGHT", w.KEYWORD_OVERLAP_WEIGHT),
            keyword_hit_boost=_env_float("QA_KEYWORD_HIT_BOOST", w.KEYWORD_HIT_BOOST),
            log_dir=_env("LOG_DIR", "logs") or "logs",
            log_level=(_env("LOG_LEVEL", "INFO") or "INFO").strip().upper(),
            debug=_env_bool("QA_DEBUG", False),
        )
