"""scripts.validate_qa_bank

Validates a QA bank dataset strictly (no built-in fallback).

Usage:
  python scripts/validate_qa_bank.py --bank data/qa_bank.json
"""

from __future__ import annotations

import argparse
from collections import Counter

from offline_qa.env_loader import load_env
from offline_qa.bank.loader import load_entries
from offline_qa.errors import BankLoadError


def main() -> int:
    load_env()  # load .env if present
    ap = argparse.ArgumentParser()
    ap.add_argument("--bank", required=True, help="Path to qa_bank.json or .jsonl")
    args = ap.parse_args()
    try:
        entries = load_entries(args.bank)
    except BankLoadError as e:
        print(f"INVALID: {e}")
        return 1
    per_category = Counter(e.category for e in entries)
    for category, n in sorted(per_category.items()):
        print(f"  {category}: {n}")
    print(f"OK ({len(entries)} entries)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
