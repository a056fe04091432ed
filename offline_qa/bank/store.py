"""offline_qa.bank.store

In-memory QA bank, loaded once from a local dataset file.

- Two states: "unloaded" -> "loaded". Every accessor calls ensure_loaded() first,
  so the first query loads the bank transparently.
- A missing or broken dataset never leaves the bank empty: the built-in
  default bank is used instead and the problem is logged.
- Entries and their precomputed candidates are read-only once loaded and can be
  shared across threads.
"""

from __future__ import annotations

import logging
import random
import threading
from pathlib import Path
from typing import Literal, Optional

from offline_qa.bank.defaults import default_bank
from offline_qa.bank.loader import load_entries
from offline_qa.contracts.models import LoadReport, QABankEntry
from offline_qa.errors import BankLoadError
from offline_qa.logging_utils import get_logger
from offline_qa.matching.matcher import Candidate, prepare_candidates

BankState = Literal["unloaded", "loaded"]


class QABankStore:
    """QA bank with lazy one-time loading and built-in fallback."""

    def __init__(
        self,
        source: Optional[str | Path] = None,
        logger: Optional[logging.Logger] = None,
        rng: Optional[random.Random] = None,
    ):
        self.source = Path(source).expanduser() if source else None
        self.logger = logger or get_logger()
        self.rng = rng or random.Random()
        self.state: BankState = "unloaded"
        self._entries: list[QABankEntry] = []
        self._candidates: list[Candidate] = []
        self._report: Optional[LoadReport] = None
        self._lock = threading.Lock()

    def load(self) -> LoadReport:
        with self._lock:
            if self.state == "loaded" and self._report is not None:
                return self._report
            self._report = self._load_once()
            self.state = "loaded"
            return self._report

    def ensure_loaded(self) -> None:
        if self.state != "loaded":
            self.load()

    def _load_once(self) -> LoadReport:
        error: Optional[str] = None
        if self.source is not None:
            try:
                entries = load_entries(self.source)
            except (BankLoadError, OSError) as e:
                error = str(e)
                self.logger.warning(f"QA bank load failed, using built-in bank: {e}")
            else:
                self._set_entries(entries)
                self.logger.info(f"Loaded {len(entries)} QA entries from {self.source}")
                return LoadReport(source="dataset", count=len(entries), path=str(self.source))

        entries = default_bank()
        self._set_entries(entries)
        self.logger.info(f"Loaded {len(entries)} built-in QA entries")
        return LoadReport(
            source="fallback",
            count=len(entries),
            path=str(self.source) if self.source else None,
            error=error,
        )

    def _set_entries(self, entries: list[QABankEntry]) -> None:
        self._entries = list(entries)
        self._candidates = prepare_candidates(self._entries)

    def entries(self) -> list[QABankEntry]:
        self.ensure_loaded()
        return list(self._entries)

    def candidates(self) -> list[Candidate]:
        self.ensure_loaded()
        return self._candidates

    def count(self) -> int:
        self.ensure_loaded()
        return len(self._entries)

    def categories(self) -> set[str]:
        self.ensure_loaded()
        return {e.category for e in self._entries}

    def by_category(self, category: str) -> list[QABankEntry]:
        self.ensure_loaded()
        return [e for e in self._entries if e.category == category]

    def random_from_category(self, category: str) -> Optional[QABankEntry]:
        entries = self.by_category(category)
        if not entries:
            return None
        return self.rng.choice(entries)
