"""scripts.ask_offline

Ask the offline QA engine a question from the command line.

Usage:
  python scripts/ask_offline.py "How do I create a new agent?"
  python scripts/ask_offline.py "What is OpenRouter?" --bank data/qa_bank.json --debug
"""

from __future__ import annotations
import argparse
import json
from dataclasses import replace

from offline_qa.env_loader import load_env
from offline_qa.config import Settings
from offline_qa.main import build_engine
from offline_qa.tracing import TraceCollector


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("query", help="Free-text question")
    ap.add_argument("--bank", help="Override QA_BANK_PATH")
    ap.add_argument("--debug", action="store_true", help="Print per-candidate scores")
    args = ap.parse_args()

    load_env()
    settings = Settings.load()
    if args.bank:
        settings = replace(settings, qa_bank_path=args.bank)
    if args.debug:
        settings = replace(settings, debug=True)
    engine = build_engine(settings)

    report = engine.load()
    engine.logger.info(f"QA bank source={report.source} entries={report.count}")

    tracer = TraceCollector()
    result = engine.find_answer(args.query, tracer=tracer)
    if result:
        print(result.entry.answer)
        print(
            f"[id={result.entry.id} confidence={result.confidence:.2f} weighted={result.weighted_score:.3f} "
            f"edit={result.edit_similarity:.3f} keyword={result.keyword_score:.3f}]"
        )
    else:
        print(engine.no_answer_message)

    if args.debug:
        print(json.dumps(tracer.traces, indent=2, ensure_ascii=False))
    return 0 if result else 2


if __name__ == "__main__":
    raise SystemExit(main())
