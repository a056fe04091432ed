"""offline_qa.matching.weights

Tunable scoring constants for the offline matcher.

Fusion:
    combined = EDIT_SIMILARITY_WEIGHT * edit + KEYWORD_SIMILARITY_WEIGHT * keyword
    keyword  = WORD_OVERLAP_WEIGHT * word_ratio + KEYWORD_OVERLAP_WEIGHT * keyword_ratio
    weighted = combined * entry.priority   (gated by CONFIDENCE_THRESHOLD)
"""

from __future__ import annotations
from dataclasses import dataclass

from offline_qa.errors import ConfigError

EDIT_SIMILARITY_WEIGHT = 0.6
KEYWORD_SIMILARITY_WEIGHT = 0.4
WORD_OVERLAP_WEIGHT = 0.4
KEYWORD_OVERLAP_WEIGHT = 0.6
KEYWORD_HIT_BOOST = 2.0
CONFIDENCE_THRESHOLD = 0.75

# Tokens shorter than this are dropped ("a", "is", "of", ...)
MIN_TOKEN_LENGTH = 3


@dataclass(frozen=True)
class ScoringWeights:
    edit_weight: float = EDIT_SIMILARITY_WEIGHT
    keyword_weight: float = KEYWORD_SIMILARITY_WEIGHT
    word_overlap_weight: float = WORD_OVERLAP_WEIGHT
    keyword_overlap_weight: float = KEYWORD_OVERLAP_WEIGHT
    keyword_hit_boost: float = KEYWORD_HIT_BOOST
    confidence_threshold: float = CONFIDENCE_THRESHOLD

    def __post_init__(self) -> None:
        for name in ("edit_weight", "keyword_weight", "word_overlap_weight", "keyword_overlap_weight"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must be >= 0, got {getattr(self, name)}")
        if self.keyword_hit_boost <= 0:
            raise ConfigError(f"keyword_hit_boost must be > 0, got {self.keyword_hit_boost}")
        if self.confidence_threshold <= 0:
            raise ConfigError(f"confidence_threshold must be > 0, got {self.confidence_threshold}")


DEFAULT_WEIGHTS = ScoringWeights()
