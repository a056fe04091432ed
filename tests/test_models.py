import pytest

from offline_qa.contracts.models import QABankEntry, category_display_name
from offline_qa.errors import InvalidEntryError


def test_from_dict_defaults_and_coercion():
    e = QABankEntry.from_dict({"id": 7, "question": "Q?", "answer": "A.", "category": "voice",
                               "keywords": ["voice", "voice", "audio"]})
    assert e.id == "7"
    assert e.priority == 1.0
    assert e.keywords == ("voice", "audio")

def test_to_dict_round_trips_fields():
    rec = {"id": "9", "question": "Q?", "answer": "A.", "category": "privacy",
           "keywords": ["data"], "priority": 1.5}
    assert QABankEntry.from_dict(rec).to_dict() == rec

def test_missing_keywords_means_none():
    e = QABankEntry.from_dict({"id": "1", "question": "Q?", "answer": "A.", "category": "features"})
    assert e.keywords == ()

@pytest.mark.parametrize("patch", [
    {"priority": 0},
    {"priority": -1.0},
    {"priority": "lots"},
    {"priority": "1e309"},
    {"priority": float("nan")},
    {"category": "weather"},
    {"keywords": "voice"},
    {"keywords": [["x"]]},
    {"keywords": ["voice", 3]},
    {"question": None},
])
def test_invalid_records(patch):
    rec = {"id": "1", "question": "Q?", "answer": "A.", "category": "voice", "keywords": []}
    rec.update(patch)
    with pytest.raises(InvalidEntryError):
        QABankEntry.from_dict(rec)

def test_category_display_name():
    assert category_display_name("api_setup") == "API Setup"
    assert category_display_name("privacy") == "Privacy & Security"
    assert category_display_name("something_else") == "General"
