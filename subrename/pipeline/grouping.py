"""Grouping of media files by episode key."""

from typing import Dict, Iterable, List, Tuple

from loguru import logger

from subrename.models.media import MediaFile


def group_by_key(
    files: Iterable[MediaFile]
) -> Tuple[Dict[str, List[MediaFile]], List[MediaFile]]:
    """
    Group files by their episode key.

    Keys are upper-cased so ``s01e02`` and ``S01E02`` land in one group.
    Groups keep the order in which files were given.

    Args:
        files: Files of a single kind.

    Returns:
        Tuple of (key -> files mapping, files without a key).
    """
    groups: Dict[str, List[MediaFile]] = {}
    unrecognized: List[MediaFile] = []

    for media in files:
        if not media.episode_key:
            unrecognized.append(media)
            continue
        groups.setdefault(media.episode_key.upper(), []).append(media)

    logger.debug(f"{len(groups)} episode groups, {len(unrecognized)} without key")
    return groups, unrecognized


def join_names(files: Iterable[MediaFile]) -> str:
    """Comma-separated filenames, for report messages."""
    return ", ".join(media.name for media in files)
