"""offline_qa.main

Wiring for settings + logging + QA bank + engine.
"""

from __future__ import annotations

import random

from offline_qa.env_loader import load_env
from offline_qa.config import Settings
from offline_qa.logging_utils import build_logger
from offline_qa.bank.store import QABankStore
from offline_qa.engine import OfflineQAEngine


def build_engine(settings: Settings | None = None) -> OfflineQAEngine:
    if settings is None:
        load_env()  # load .env if present
        settings = Settings.load()
    logger = build_logger(settings.log_dir, level="DEBUG" if settings.debug else settings.log_level)

    rng = random.Random(settings.random_seed) if settings.random_seed is not None else None
    store = QABankStore(settings.qa_bank_path, logger=logger, rng=rng)

    return OfflineQAEngine(
        store=store,
        weights=settings.scoring_weights(),
        logger=logger,
        no_answer_message=settings.no_answer_message,
    )


def handle_query(text: str) -> str:
    engine = build_engine()
    return engine.get_answer_or_fallback(text)
