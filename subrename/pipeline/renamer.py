"""Subtitle/video matching and renaming."""

from pathlib import Path
from typing import List, Optional, Set

from loguru import logger

from subrename.config.context import get_context
from subrename.filesystem.discovery import list_files, split_media_files
from subrename.filesystem.file_ops import move_file, name_taken
from subrename.models.media import MediaFile, RenameDecision
from subrename.models.report import RenameReport, ReportEntry
from subrename.pipeline.grouping import group_by_key, join_names
from subrename.ui.console import ConsoleUI
from subrename.ui.display import display_entry


class SubtitleRenamer:
    """
    Pairs subtitles with videos of the same episode and renames one side.

    The directory is listed once when the run starts. For every subtitle
    key there must be exactly one video and one subtitle, otherwise the
    group is skipped. Renames never overwrite an existing file, and a
    failed move aborts the run without undoing earlier renames.
    """

    def __init__(
        self,
        directory: Optional[Path] = None,
        dry_run: Optional[bool] = None,
        reverse: Optional[bool] = None,
        ui: Optional[ConsoleUI] = None,
    ):
        """
        Initialize the renamer.

        Options left to None are taken from the current ExecutionContext.

        Args:
            directory: Directory to process.
            dry_run: Report renames without performing them.
            reverse: Rename videos to match subtitles.
            ui: Console receiving one line per decision (silent if None).
        """
        ctx = get_context()
        self.directory = Path(directory) if directory is not None else ctx.directory
        if self.directory is None:
            raise ValueError("No directory to process")
        self.dry_run = ctx.dry_run if dry_run is None else dry_run
        self.reverse = ctx.reverse if reverse is None else reverse
        self.ui = ui
        self._names: Set[str] = set()

    def run(self) -> RenameReport:
        """
        Process the directory.

        Returns:
            RenameReport with one entry per decision and the final counts.

        Raises:
            RenameFailedError: If a filesystem move fails.
        """
        report = RenameReport(dry_run=self.dry_run)
        logger.info(
            f"Processing {self.directory} "
            f"({'reverse' if self.reverse else 'forward'}{', dry run' if self.dry_run else ''})"
        )

        paths = list_files(self.directory)
        self._names = {path.name for path in paths}
        videos, subtitles = split_media_files(paths)

        videos_by_key, unkeyed_videos = group_by_key(videos)
        subtitles_by_key, unkeyed_subtitles = group_by_key(subtitles)

        for media in unkeyed_videos + unkeyed_subtitles:
            self._emit(report.add_unrecognized(media.name))

        for key in sorted(subtitles_by_key):
            self._process_key(key, subtitles_by_key[key], videos_by_key.get(key), report)

        logger.info(
            f"Run complete: {report.renamed} renamed, {report.skipped} skipped, "
            f"{report.unrecognized} unrecognized"
        )
        return report

    def _process_key(
        self,
        key: str,
        subtitles: List[MediaFile],
        videos: Optional[List[MediaFile]],
        report: RenameReport,
    ) -> None:
        """Check one subtitle group against its video group and rename if unambiguous."""
        if not videos:
            self._emit(report.add_skip(
                key,
                f"No matching video found for {join_names(subtitles)}",
                len(subtitles),
            ))
            return

        ambiguous = False
        if len(videos) > 1:
            self._emit(report.add_skip(
                key, f"Ambiguous, multiple videos match: {join_names(videos)}"
            ))
            ambiguous = True
        if len(subtitles) > 1:
            self._emit(report.add_skip(
                key, f"Ambiguous, multiple subtitles match: {join_names(subtitles)}"
            ))
            ambiguous = True
        if ambiguous:
            report.skipped += len(subtitles)
            return

        decision = RenameDecision.for_pair(key, videos[0], subtitles[0], self.reverse)
        self._apply(decision, report)

    def _apply(self, decision: RenameDecision, report: RenameReport) -> None:
        """Execute or preview a rename decision."""
        key = decision.key
        old_name = decision.target.name
        new_name = decision.new_path.name

        if decision.is_noop:
            self._emit(report.add_ok(key, f"Already named correctly - {old_name}"))
            return

        if name_taken(new_name, self._names) or decision.new_path.exists():
            logger.warning(f"[{key}] {new_name} already exists, not overwriting")
            self._emit(report.add_skip(key, f"Target already exists - {new_name}", 1))
            return

        move_file(decision.target.path, decision.new_path, dry_run=self.dry_run)
        self._names.discard(old_name)
        self._names.add(new_name)
        self._emit(report.add_rename(key, f"{old_name} → {new_name}"))

    def _emit(self, entry: ReportEntry) -> None:
        if self.ui is not None:
            display_entry(entry, self.ui)


def rename_subtitles(
    directory: Path,
    dry_run: bool = False,
    reverse: bool = False,
    ui: Optional[ConsoleUI] = None,
) -> RenameReport:
    """
    Match and rename the subtitles (or videos, with reverse) of a directory.

    Args:
        directory: Directory to process.
        dry_run: Report renames without performing them.
        reverse: Rename videos to match subtitles.
        ui: Console receiving progress lines.

    Returns:
        RenameReport of the run.
    """
    return SubtitleRenamer(directory, dry_run=dry_run, reverse=reverse, ui=ui).run()
