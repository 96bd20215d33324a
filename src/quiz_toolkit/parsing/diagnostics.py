"""
Module: parsing.diagnostics

Captures non-fatal parse issues (dropped questions, ambiguous rows,
unrecognized keys) and generates diagnostic reports for the caller.

Structure:
- Each issue is a frozen Diagnostic with kind, severity and the 1-based
  record index it came from
- The collector keeps issues in the order they were raised and mirrors
  each one to the module logger
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value

    @property
    def log_level(self) -> int:
        return _LOG_LEVELS[self]


_LOG_LEVELS = {
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


class DiagnosticKind(str, Enum):
    """What went wrong. Structural, referential and completeness issues."""
    UNKNOWN_QUESTION_TYPE = "unknown_question_type"
    WRONG_QUESTION_TYPE = "wrong_question_type"
    INVALID_NUMBER = "invalid_number"
    INVALID_CHOICE_NUMBER = "invalid_choice_number"
    PLACEHOLDER_CHOICE = "placeholder_choice"
    UNRECOGNIZED_KEY = "unrecognized_key"
    DROPPED_QUESTION = "dropped_question"
    ROW_ERROR = "row_error"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Diagnostic:
    """
    A single parse issue.

    Fields:
    - record_index: 1-based logical record number, None for issues raised
      at end of input
    - title: Title of the question being built, when known
    """
    kind: DiagnosticKind
    severity: Severity
    message: str
    record_index: Optional[int] = None
    title: Optional[str] = None

    def __str__(self) -> str:
        where = f"[Record {self.record_index}] " if self.record_index is not None else ""
        return f"{where}{self.message}"

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "kind": self.kind.value,
            "severity": self.severity.value,
            "message": self.message,
        }
        if self.record_index is not None:
            d["record_index"] = self.record_index
        if self.title:
            d["title"] = self.title
        return d


class DiagnosticsCollector:
    """
    Ordered collector for parse diagnostics.

    One collector belongs to one parse call; nothing is shared between
    calls.
    """

    def __init__(self, source: Optional[str] = None):
        self.source = source
        self._items: List[Diagnostic] = []

    def add(
        self,
        kind: DiagnosticKind,
        severity: Severity,
        message: str,
        *,
        record_index: Optional[int] = None,
        title: Optional[str] = None,
    ) -> Diagnostic:
        """Record a diagnostic and log it at the matching level."""
        diagnostic = Diagnostic(
            kind=kind,
            severity=severity,
            message=message,
            record_index=record_index,
            title=title,
        )
        self._items.append(diagnostic)
        logger.log(severity.log_level, str(diagnostic))
        return diagnostic

    def info(self, kind: DiagnosticKind, message: str, **kwargs: Any) -> Diagnostic:
        return self.add(kind, Severity.INFO, message, **kwargs)

    def warning(self, kind: DiagnosticKind, message: str, **kwargs: Any) -> Diagnostic:
        return self.add(kind, Severity.WARNING, message, **kwargs)

    def error(self, kind: DiagnosticKind, message: str, **kwargs: Any) -> Diagnostic:
        return self.add(kind, Severity.ERROR, message, **kwargs)

    @property
    def items(self) -> Tuple[Diagnostic, ...]:
        return tuple(self._items)

    @property
    def issue_count(self) -> int:
        return len(self._items)

    def count_by_kind(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for item in self._items:
            counts[item.kind.value] = counts.get(item.kind.value, 0) + 1
        return counts

    def generate_report(self) -> "DiagnosticsReport":
        return DiagnosticsReport.from_diagnostics(self.items, self.source)


@dataclass
class DiagnosticsReport:
    """Complete diagnostics report for one parsed file."""
    generated_at: str
    source: Optional[str]
    total_issues: int
    summary_by_kind: Dict[str, int]
    diagnostics: List[Diagnostic]

    @classmethod
    def from_diagnostics(
        cls,
        diagnostics: Tuple[Diagnostic, ...],
        source: Optional[str] = None,
    ) -> "DiagnosticsReport":
        summary_by_kind: Dict[str, int] = {}
        for diagnostic in diagnostics:
            key = diagnostic.kind.value
            summary_by_kind[key] = summary_by_kind.get(key, 0) + 1

        return cls(
            generated_at=datetime.now(timezone.utc).isoformat(),
            source=source,
            total_issues=len(diagnostics),
            summary_by_kind=summary_by_kind,
            diagnostics=list(diagnostics),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generated_at": self.generated_at,
            "source": self.source,
            "total_issues": self.total_issues,
            "summary_by_kind": self.summary_by_kind,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json(), encoding="utf-8")
        logger.info(f"Parse diagnostics saved: {path}")
