"""Data models for demo runs.

RunStatus, DemoResult and RunSummary: the typed structures that flow
through runner → report → CLI.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class RunStatus(str, Enum):
    """Outcome of a single demo run."""

    PASSED = "passed"
    FAILED = "failed"
    UNKNOWN = "unknown"


@dataclass
class DemoResult:
    """Result of running one demo."""

    name: str
    status: RunStatus = RunStatus.UNKNOWN
    wall_clock_s: float = 0.0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == RunStatus.PASSED

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "name": self.name,
            "status": self.status.value,
            "wall_clock_s": self.wall_clock_s,
            "error": self.error,
        }

    @classmethod
    def from_dict(cls, d: dict) -> DemoResult:
        return cls(
            name=d.get("name", ""),
            status=RunStatus(d.get("status", RunStatus.UNKNOWN.value)),
            wall_clock_s=d.get("wall_clock_s", 0.0),
            error=d.get("error"),
        )


@dataclass
class RunSummary:
    """Results of one CLI invocation, in execution order."""

    results: list[DemoResult] = field(default_factory=list)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failed(self) -> int:
        return len(self.results) - self.passed

    @property
    def total_wall_clock_s(self) -> float:
        return round(sum(r.wall_clock_s for r in self.results), 3)

    @property
    def verdict(self) -> str:
        if not self.results:
            return "no-demos"
        if self.failed == 0:
            return "pass"
        if self.passed > 0:
            return "partial"
        return "fail"

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "verdict": self.verdict,
            "passed": self.passed,
            "failed": self.failed,
            "total_wall_clock_s": self.total_wall_clock_s,
            "results": [r.to_dict() for r in self.results],
        }

    @classmethod
    def from_dict(cls, d: dict) -> RunSummary:
        return cls(results=[DemoResult.from_dict(r) for r in d.get("results", [])])

    def save(self, path: Path) -> None:
        """Write the summary as JSON, creating parent directories."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")

    @classmethod
    def load(cls, path: Path) -> Optional[RunSummary]:
        if not path.exists():
            return None
        try:
            return cls.from_dict(json.loads(path.read_text(encoding="utf-8")))
        except (json.JSONDecodeError, OSError):
            return None
