import pytest

from offline_qa.config import NO_OFFLINE_ANSWER, Settings
from offline_qa.errors import ConfigError
from offline_qa.matching.weights import DEFAULT_WEIGHTS, ScoringWeights
from offline_qa.paths import default_bank_path

_VARS = [
    "QA_BANK_PATH", "QA_CONFIDENCE_THRESHOLD", "QA_EDIT_WEIGHT", "QA_KEYWORD_WEIGHT",
    "QA_WORD_OVERLAP_WEIGHT", "QA_KEYWORD_OVERLAP_WEIGHT", "QA_KEYWORD_HIT_BOOST",
    "QA_NO_ANSWER_MESSAGE", "QA_RANDOM_SEED", "LOG_DIR", "LOG_LEVEL", "QA_DEBUG",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    s = Settings.load()
    assert s.qa_bank_path == str(default_bank_path())
    assert s.no_answer_message == NO_OFFLINE_ANSWER
    assert s.random_seed is None
    assert s.scoring_weights() == DEFAULT_WEIGHTS
    assert s.log_level == "INFO"
    assert s.debug is False

def test_env_overrides(clean_env):
    clean_env.setenv("QA_CONFIDENCE_THRESHOLD", "0.9")
    clean_env.setenv("QA_EDIT_WEIGHT", "0.5")
    clean_env.setenv("QA_RANDOM_SEED", "42")
    clean_env.setenv("QA_DEBUG", "yes")
    clean_env.setenv("LOG_LEVEL", "debug")
    s = Settings.load()
    w = s.scoring_weights()
    assert w.confidence_threshold == 0.9
    assert w.edit_weight == 0.5
    assert s.random_seed == 42
    assert s.debug is True
    assert s.log_level == "DEBUG"

def test_unparsable_numbers_use_defaults(clean_env):
    clean_env.setenv("QA_CONFIDENCE_THRESHOLD", "high")
    clean_env.setenv("QA_RANDOM_SEED", "abc")
    s = Settings.load()
    assert s.confidence_threshold == 0.75
    assert s.random_seed is None

def test_empty_bank_path_disables_dataset(clean_env):
    clean_env.setenv("QA_BANK_PATH", "")
    assert Settings.load().qa_bank_path is None

def test_invalid_weights_rejected():
    with pytest.raises(ConfigError):
        ScoringWeights(edit_weight=-0.1)
    with pytest.raises(ConfigError):
        ScoringWeights(confidence_threshold=0)
    with pytest.raises(ConfigError):
        ScoringWeights(keyword_hit_boost=0)
