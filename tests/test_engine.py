import json
import random
from pathlib import Path

from offline_qa.bank.defaults import default_bank
from offline_qa.bank.store import QABankStore
from offline_qa.config import NO_OFFLINE_ANSWER, Settings
from offline_qa.engine import OfflineQAEngine
from offline_qa.env_loader import load_env
from offline_qa.main import build_engine
from offline_qa.paths import default_bank_path


def test_find_answer_loads_bank_lazily():
    engine = OfflineQAEngine(QABankStore(None))
    assert engine.store.state == "unloaded"
    r = engine.find_answer("How do I create a new agent?")
    assert engine.store.state == "loaded"
    assert r.entry.id == "2"
    assert r.weighted_score > 0.75

def test_has_answer():
    engine = OfflineQAEngine(QABankStore(None))
    assert engine.has_answer("What is OpenRouter?")
    assert not engine.has_answer("What's the weather today?")
    assert not engine.has_answer("")

def test_answer_or_fallback_text():
    engine = OfflineQAEngine(QABankStore(None))
    assert engine.get_answer_or_fallback("Is my data private?").startswith("Yes! All your data")
    assert engine.get_answer_or_fallback("What's the weather today?") == NO_OFFLINE_ANSWER

def test_custom_no_answer_message():
    engine = OfflineQAEngine(QABankStore(None), no_answer_message="offline only")
    assert engine.get_answer_or_fallback("tell me a joke please") == "offline only"

def test_unavailable_dataset_still_answers_builtin_questions(tmp_path):
    engine = OfflineQAEngine(QABankStore(tmp_path / "missing.json"))
    assert engine.entry_count() > 0
    for entry in default_bank():
        assert engine.find_answer(entry.question).entry.id == entry.id

def test_category_helpers():
    engine = OfflineQAEngine(QABankStore(None, rng=random.Random(1)))
    assert "api_setup" in engine.categories()
    assert [e.id for e in engine.search_by_category("api_setup")] == ["3", "4", "15"]
    assert engine.random_from_category("voice").id == "8"
    assert engine.random_from_category("unknown") is None

def test_engines_are_independent(tmp_path):
    p = tmp_path / "bank.json"
    p.write_text(json.dumps([{"id": "only", "question": "Where is the manual?", "answer": "In Settings.",
                              "category": "app_usage", "keywords": ["manual"]}]), encoding="utf-8")
    custom = OfflineQAEngine(QABankStore(p))
    builtin = OfflineQAEngine(QABankStore(None))
    assert custom.entry_count() == 1
    assert builtin.entry_count() == len(default_bank())
    assert custom.find_answer("Where is the manual?").entry.id == "only"
    assert builtin.find_answer("Where is the manual?") is None

def test_shipped_dataset_loads():
    engine = OfflineQAEngine(QABankStore(default_bank_path()))
    assert engine.load().source == "dataset"
    assert engine.entry_count() >= len(default_bank())
    assert engine.find_answer("How do I create a new agent?").entry.id == "2"

def test_build_engine_from_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("QA_BANK_PATH", "")
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("QA_NO_ANSWER_MESSAGE", "nothing offline")
    engine = build_engine(Settings.load())
    assert engine.load().source == "fallback"
    assert engine.get_answer_or_fallback("What's the weather today?") == "nothing offline"
    assert (tmp_path / "logs" / "qa.log").exists()

def test_build_engine_reads_dotenv(tmp_path, monkeypatch):
    # setenv first so teardown removes whatever load_dotenv writes
    for name in ("QA_CONFIDENCE_THRESHOLD", "QA_NO_ANSWER_MESSAGE"):
        monkeypatch.setenv(name, "unset")
        monkeypatch.delenv(name)
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    (tmp_path / ".env").write_text(
        "QA_CONFIDENCE_THRESHOLD=0.9\nQA_NO_ANSWER_MESSAGE=from dotenv\n", encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)

    engine = build_engine()
    assert engine.weights.confidence_threshold == 0.9
    assert engine.no_answer_message == "from dotenv"

def test_load_env_keeps_existing_values(tmp_path, monkeypatch):
    monkeypatch.setenv("QA_CONFIDENCE_THRESHOLD", "0.8")
    (tmp_path / ".env").write_text("QA_CONFIDENCE_THRESHOLD=0.9\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert Path(load_env()).resolve() == (tmp_path / ".env").resolve()
    assert Settings.load().confidence_threshold == 0.8

def test_load_env_missing_explicit_path(tmp_path):
    assert load_env(str(tmp_path / "nope.env")) is None
