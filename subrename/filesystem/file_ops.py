"""File operations for renaming files in place."""

import shutil
from pathlib import Path
from typing import Iterable

from loguru import logger

from subrename.exceptions import RenameFailedError, TargetExistsError


def name_taken(name: str, existing_names: Iterable[str]) -> bool:
    """
    Check whether a filename is already used, ignoring case.

    Args:
        name: Candidate filename.
        existing_names: Filenames present in the directory.

    Returns:
        True if a file with that name (in any case) exists.
    """
    wanted = name.lower()
    return any(existing.lower() == wanted for existing in existing_names)


def move_file(source: Path, destination: Path, dry_run: bool = False) -> Path:
    """
    Move a file to destination, never overwriting.

    Args:
        source: Source file path.
        destination: Destination file path.
        dry_run: If True, only log the operation.

    Returns:
        The destination path.

    Raises:
        TargetExistsError: If destination already exists.
        RenameFailedError: If the filesystem move fails.
    """
    if dry_run:
        logger.info(f'SIMULATION - Rename: {source.name} -> {destination.name}')
        return destination

    if destination.exists():
        logger.warning(f'Destination file exists: {destination}')
        raise TargetExistsError(destination)

    try:
        shutil.move(str(source), str(destination))
    except OSError as e:
        logger.error(f'Error moving {source}: {e}')
        raise RenameFailedError(source, destination, e) from e

    logger.info(f'File renamed: {source.name} -> {destination.name}')
    return destination
