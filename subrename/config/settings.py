"""Configuration settings and constants for the subrename package."""

from typing import Set

# Video file extensions (lower-case, with leading dot)
VIDEO_EXTENSIONS: Set[str] = {
    ".mkv", ".mp4", ".avi", ".mov", ".wmv", ".flv", ".webm", ".m4v"
}

SUBTITLE_EXTENSIONS: Set[str] = {".srt"}

PROG_NAME = "subrename"

USAGE_TEXT = (
    f"Usage: {PROG_NAME} <directory> [--dry-run] [--reverse]\n"
    "\n"
    "Options:\n"
    "  --dry-run   Preview renames without making changes.\n"
    "  --reverse   Rename video files to match subtitle filenames."
)

MODE_FORWARD = "Mode: Rename subtitle files to match video filenames."
MODE_REVERSE = "Mode: Rename video files to match subtitle filenames."

# Logging
LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"
LOG_ROTATION = "10 MB"
LOG_RETENTION = "7 days"

# Exit codes
EXIT_OK: int = 0
EXIT_USAGE: int = 1
EXIT_FILESYSTEM_FAILURE: int = 2
