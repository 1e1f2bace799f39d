"""Run report: per-decision entries and final counters."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class RenameStatus(Enum):
    """Outcome tag printed in front of each report line."""

    SKIP = "SKIP"
    OK = "OK"
    PREVIEW = "PREVIEW"
    RENAMED = "RENAMED"


@dataclass(frozen=True)
class ReportEntry:
    """One line of the run report."""

    status: RenameStatus
    message: str
    key: Optional[str] = None
    no_pattern: bool = False


@dataclass
class RenameReport:
    """
    Accumulated result of a run.

    Attributes:
        entries: Report lines in the order they were produced.
        renamed: Files renamed (or previewed in dry-run).
        skipped: Files skipped for a missing match, ambiguity or conflict.
        unrecognized: Files whose name matched no episode pattern.
        dry_run: Whether the run was a preview.
    """

    entries: List[ReportEntry] = field(default_factory=list)
    renamed: int = 0
    skipped: int = 0
    unrecognized: int = 0
    dry_run: bool = False

    def add_unrecognized(self, filename: str) -> ReportEntry:
        """Record a file whose name carries no episode key."""
        self.unrecognized += 1
        return self._add(ReportEntry(RenameStatus.SKIP, filename, no_pattern=True))

    def add_skip(self, key: str, message: str, count: int = 0) -> ReportEntry:
        """Record a skipped group; ``count`` files are added to the skip total."""
        self.skipped += count
        return self._add(ReportEntry(RenameStatus.SKIP, message, key))

    def add_ok(self, key: str, message: str) -> ReportEntry:
        return self._add(ReportEntry(RenameStatus.OK, message, key))

    def add_rename(self, key: str, message: str) -> ReportEntry:
        """Record a rename, or a preview when the run is a dry-run."""
        self.renamed += 1
        status = RenameStatus.PREVIEW if self.dry_run else RenameStatus.RENAMED
        return self._add(ReportEntry(status, message, key))

    def by_status(self, status: RenameStatus) -> List[ReportEntry]:
        return [entry for entry in self.entries if entry.status is status]

    def _add(self, entry: ReportEntry) -> ReportEntry:
        self.entries.append(entry)
        return entry
