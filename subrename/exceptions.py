"""Exceptions raised by subrename."""

from pathlib import Path
from typing import Optional


class SubRenameError(Exception):
    """Base class for all subrename errors."""

    pass


class UsageError(SubRenameError):
    """Command line is missing a required argument."""

    pass


class DirectoryNotFoundError(SubRenameError):
    """The directory to process does not exist."""

    def __init__(self, directory: Path):
        super().__init__(f"Directory not found: {directory}")
        self.directory = directory


class TargetExistsError(SubRenameError):
    """A file already exists at the rename destination."""

    def __init__(self, destination: Path):
        super().__init__(f"Target already exists: {destination}")
        self.destination = destination


class RenameFailedError(SubRenameError):
    """A filesystem move failed mid-run."""

    def __init__(self, source: Path, destination: Path, cause: Optional[OSError] = None):
        message = f"Failed to rename {source.name} -> {destination.name}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.source = source
        self.destination = destination
        self.cause = cause
