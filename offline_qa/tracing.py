"""offline_qa.tracing

Trace collection for debug mode.
The ranker appends one payload per scored candidate plus the final decision.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any


@dataclass
class TraceCollector:
    """Collects per-step traces for a single query."""
    traces: list[dict[str, Any]] = field(default_factory=list)

    def add(self, step_name: str, payload: dict[str, Any]) -> None:
        self.traces.append({"step": step_name, "payload": payload})

    def steps(self, step_name: str) -> list[dict[str, Any]]:
        return [t["payload"] for t in self.traces if t["step"] == step_name]
