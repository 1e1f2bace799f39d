"""Matching and renaming pipeline."""

from subrename.pipeline.grouping import group_by_key, join_names
from subrename.pipeline.renamer import SubtitleRenamer, rename_subtitles

__all__ = [
    "group_by_key",
    "join_names",
    "SubtitleRenamer",
    "rename_subtitles",
]
