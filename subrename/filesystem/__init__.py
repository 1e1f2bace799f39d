"""Filesystem operations for subtitle renaming."""

from subrename.filesystem.discovery import (
    classify_file,
    list_files,
    split_media_files,
    list_media_files,
)
from subrename.filesystem.file_ops import (
    name_taken,
    move_file,
)

__all__ = [
    "classify_file",
    "list_files",
    "split_media_files",
    "list_media_files",
    "name_taken",
    "move_file",
]
