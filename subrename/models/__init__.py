"""Data models for subtitle renaming."""

from subrename.models.media import MediaKind, MediaFile, RenameDecision
from subrename.models.report import RenameStatus, ReportEntry, RenameReport

__all__ = [
    "MediaKind",
    "MediaFile",
    "RenameDecision",
    "RenameStatus",
    "ReportEntry",
    "RenameReport",
]
