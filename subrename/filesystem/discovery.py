"""File discovery: list a directory and classify its files."""

from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from loguru import logger

from subrename.config.settings import VIDEO_EXTENSIONS, SUBTITLE_EXTENSIONS
from subrename.models.media import MediaFile, MediaKind


def classify_file(path: Path) -> Optional[MediaKind]:
    """
    Classify a file by its extension, ignoring case.

    Args:
        path: File path.

    Returns:
        MediaKind.VIDEO, MediaKind.SUBTITLE, or None for anything else.
    """
    suffix = path.suffix.lower()
    if suffix in VIDEO_EXTENSIONS:
        return MediaKind.VIDEO
    if suffix in SUBTITLE_EXTENSIONS:
        return MediaKind.SUBTITLE
    return None


def list_files(directory: Path) -> List[Path]:
    """
    List the regular files directly inside directory, sorted by name.

    Subdirectories are not entered.
    """
    return sorted(entry for entry in directory.iterdir() if entry.is_file())


def split_media_files(paths: Iterable[Path]) -> Tuple[List[MediaFile], List[MediaFile]]:
    """
    Split file paths into videos and subtitles.

    Files of any other type are ignored.

    Args:
        paths: File paths.

    Returns:
        Tuple of (videos, subtitles).
    """
    videos: List[MediaFile] = []
    subtitles: List[MediaFile] = []

    for path in paths:
        kind = classify_file(path)
        if kind is MediaKind.VIDEO:
            videos.append(MediaFile(path, kind))
        elif kind is MediaKind.SUBTITLE:
            subtitles.append(MediaFile(path, kind))

    logger.debug(f"{len(videos)} videos, {len(subtitles)} subtitles")
    return videos, subtitles


def list_media_files(directory: Path) -> Tuple[List[MediaFile], List[MediaFile]]:
    """
    Collect the video and subtitle files of a directory (not recursive).

    Returns:
        Tuple of (videos, subtitles).
    """
    return split_media_files(list_files(directory))
