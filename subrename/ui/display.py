"""Display functions for rename progress and summary."""

from typing import Dict, Optional

from rich.markup import escape

from subrename.config.settings import MODE_FORWARD, MODE_REVERSE
from subrename.models.report import RenameReport, RenameStatus, ReportEntry
from subrename.ui.console import ConsoleUI, console as default_console

STATUS_STYLES: Dict[RenameStatus, str] = {
    RenameStatus.SKIP: "yellow",
    RenameStatus.OK: "green",
    RenameStatus.PREVIEW: "cyan",
    RenameStatus.RENAMED: "bold green",
}


def format_entry(entry: ReportEntry) -> str:
    """
    Format a report entry as one output line.

    Examples:
        ``  SKIP (no pattern): Movie.mkv``
        ``  OK   [S01E02]: Already named correctly - Show.S01E02.srt``
        ``  RENAMED [S01E05]: a.srt → b.srt``
    """
    if entry.no_pattern:
        return f"  SKIP (no pattern): {entry.message}"

    tag = entry.status.value
    if entry.status is RenameStatus.OK:
        tag = tag.ljust(4)
    if entry.key:
        return f"  {tag} [{entry.key}]: {entry.message}"
    return f"  {tag}: {entry.message}"


def display_entry(entry: ReportEntry, ui: Optional[ConsoleUI] = None) -> None:
    """Print one report entry with its status colour."""
    ui = ui or default_console
    ui.print_line(format_entry(entry), STATUS_STYLES[entry.status])


def display_mode(reverse: bool, dry_run: bool, ui: Optional[ConsoleUI] = None) -> None:
    """
    Print the rename direction, and a notice in dry-run mode.

    Args:
        reverse: Whether videos are renamed after subtitles.
        dry_run: Whether this is a preview run.
        ui: Console to print to.
    """
    ui = ui or default_console
    ui.print_line(MODE_REVERSE if reverse else MODE_FORWARD, "bold")
    if dry_run:
        ui.print_warning("Dry run: no file will be renamed")
    ui.print()


def format_summary(report: RenameReport) -> str:
    """
    Format the final summary line.

    Examples:
        >>> format_summary(RenameReport(renamed=2, skipped=1))
        'Done. Renamed: 2, Skipped: 1'
    """
    verb = "Would rename" if report.dry_run else "Renamed"
    summary = f"Done. {verb}: {report.renamed}, Skipped: {report.skipped}"
    if report.unrecognized:
        summary += f", Unrecognized: {report.unrecognized}"
    return summary


def display_summary(report: RenameReport, ui: Optional[ConsoleUI] = None) -> None:
    """Print the final summary line after a blank line."""
    ui = ui or default_console
    ui.print()
    ui.print(f"[bold]{escape(format_summary(report))}[/bold]")
