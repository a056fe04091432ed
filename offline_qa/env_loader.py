"""offline_qa.env_loader

Pre-populates QA_* / LOG_* variables from a .env file before Settings.load().

Already-set environment variables win unless override=True, so a device or CI
environment can always pin values explicitly.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import find_dotenv, load_dotenv


def load_env(dotenv_path: str | None = None, override: bool = False) -> str | None:
    """Load a .env file and return its path, or None when there is nothing to load.

    Without an explicit path the nearest .env from the current working directory
    upwards is used (scripts run from the repo root or any subfolder).
    """
    if dotenv_path:
        path = str(Path(dotenv_path).expanduser())
        if not Path(path).exists():
            return None
    else:
        path = find_dotenv(usecwd=True)
        if not path:
            return None

    load_dotenv(dotenv_path=path, override=override)
    return path
