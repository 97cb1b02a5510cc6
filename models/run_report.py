# -*- coding: utf-8 -*-
"""
LocForge Run Report Model

Per-group and per-run outcome records. Every output file the orchestrator
considers ends up here with its WriteOutcome, so a run always reports a
per-item result even when individual steps fail.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from locforge_enums import OutputKind, WriteOutcome


@dataclass
class OutputRecord:
    """One output catalog and what happened to it."""
    path: Path
    kind: OutputKind
    outcome: WriteOutcome
    entry_count: int = 0


@dataclass
class GroupReport:
    """Outcome of processing one i18n folder."""
    directory: Path
    language_code: str = ""
    source_entry_count: int = 0
    outputs: List[OutputRecord] = field(default_factory=list)
    translation_failures: int = 0
    skipped_reason: Optional[str] = None
    error: Optional[str] = None

    def add_output(self, path: Path, kind: OutputKind, outcome: WriteOutcome, entry_count: int = 0) -> OutputRecord:
        record = OutputRecord(path=path, kind=kind, outcome=outcome, entry_count=entry_count)
        self.outputs.append(record)
        return record

    @property
    def skipped(self) -> bool:
        return self.skipped_reason is not None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def outcome_for(self, file_name: str) -> Optional[WriteOutcome]:
        """Look up the outcome recorded for an output file name (e.g. 'fr-CA.js')."""
        for record in self.outputs:
            if record.path.name == file_name:
                return record.outcome
        return None


@dataclass
class RunReport:
    """Aggregated outcome of a whole run."""
    root: Path
    groups: List[GroupReport] = field(default_factory=list)

    @property
    def written_files(self) -> List[Path]:
        return [
            record.path
            for group in self.groups
            for record in group.outputs
            if record.outcome == WriteOutcome.WRITTEN
        ]

    @property
    def translation_failures(self) -> int:
        return sum(group.translation_failures for group in self.groups)

    @property
    def failed_groups(self) -> List[GroupReport]:
        return [group for group in self.groups if group.failed]

    def summary_lines(self) -> List[str]:
        """Human-readable summary, one line per group plus a total."""
        lines = []
        for group in self.groups:
            if group.failed:
                lines.append(f"{group.directory}: FAILED ({group.error})")
                continue
            if group.skipped:
                lines.append(f"{group.directory}: skipped ({group.skipped_reason})")
                continue
            parts = [f"{record.path.name}={record.outcome.value}" for record in group.outputs]
            lines.append(f"{group.directory}: {', '.join(parts) if parts else 'no output'}")
        lines.append(
            f"Groups: {len(self.groups)}, files written: {len(self.written_files)}, "
            f"translation errors: {self.translation_failures}"
        )
        return lines
