"""offline_qa.bank.loader

Reads the QA bank dataset from a local file and validates it into entries.

- Supports JSON Lines (.jsonl) and JSON array (.json) files.
- Field contract per record: id, question, answer, category, keywords, priority (default 1.0).
- Raises BankLoadError / InvalidEntryError; falling back is the store's job.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable

import pandas as pd

from offline_qa.contracts.models import QABankEntry
from offline_qa.errors import BankLoadError

_FORMATS = {".jsonl": "jsonl", ".json": "json"}


def _clean(value: Any) -> Any:
    # pandas fills fields absent from some records with NaN/None
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None
    return value


def read_records(path: str | Path) -> list[dict[str, Any]]:
    p = Path(path).expanduser()
    fmt = _FORMATS.get(p.suffix.lower())
    if fmt is None:
        raise BankLoadError(f"Unsupported QA bank format: {p.suffix or '(none)'}")
    if not p.exists():
        raise BankLoadError(f"QA bank not found: {p}")

    try:
        # dtype/convert_dates off: ids like "1" must stay strings
        df = pd.read_json(p, lines=(fmt == "jsonl"), dtype=False, convert_dates=False)
    except (ValueError, TypeError) as e:
        raise BankLoadError(f"QA bank is not valid {fmt}: {p}: {e}") from e

    if not isinstance(df, pd.DataFrame):
        raise BankLoadError(f"QA bank must be a list of records: {p}")
    return [{k: _clean(v) for k, v in rec.items()} for rec in df.to_dict(orient="records")]


def parse_entries(records: Iterable[dict[str, Any]]) -> list[QABankEntry]:
    entries: list[QABankEntry] = []
    seen: set[str] = set()
    for rec in records:
        entry = QABankEntry.from_dict(rec)
        if entry.id in seen:
            raise BankLoadError(f"Duplicate QA entry id: {entry.id}")
        seen.add(entry.id)
        entries.append(entry)
    if not entries:
        raise BankLoadError("QA bank contains no entries")
    return entries


def load_entries(path: str | Path) -> list[QABankEntry]:
    return parse_entries(read_records(path))
