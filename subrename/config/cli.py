"""Command-line interface argument parsing."""

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from loguru import logger

from subrename import __version__
from subrename.config.settings import PROG_NAME, USAGE_TEXT
from subrename.exceptions import DirectoryNotFoundError, UsageError


@dataclass
class CLIArgs:
    """
    Parsed command-line arguments.

    Attributes:
        directory: Directory holding the videos and subtitles.
        dry_run: If True, preview renames without making changes.
        reverse: If True, rename videos to match subtitles.
        debug: If True, enable debug logging.
        log_file: Optional path of a log file sink.
    """

    directory: Optional[Path] = None
    dry_run: bool = False
    reverse: bool = False
    debug: bool = False
    log_file: Optional[Path] = None


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message: str) -> None:
        raise UsageError(message)


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = _ArgumentParser(
        prog=PROG_NAME,
        allow_abbrev=False,
        add_help=False,
        usage=f"{PROG_NAME} <directory> [--dry-run] [--reverse]",
        description="""
        Renames subtitle files to match the video file of the same
        episode (or the other way around with --reverse).
        """
    )

    parser.add_argument(
        'directory',
        nargs='?',
        help="directory containing the video and subtitle files"
    )

    parser.add_argument(
        '--dry-run',
        action='store_true',
        help="preview renames without making changes"
    )

    parser.add_argument(
        '--reverse',
        action='store_true',
        help="rename video files to match subtitle filenames"
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help="enable debug logging"
    )

    parser.add_argument(
        '--log-file',
        default=None,
        help="also write the log to this file"
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f"%(prog)s {__version__}"
    )

    return parser


def normalize_flags(args: List[str]) -> List[str]:
    """
    Lower-case long option names so flag matching ignores case.

    Only the option name is touched: positional arguments and the
    value part of ``--opt=value`` keep their case.

    Args:
        args: Raw argument strings.

    Returns:
        New list with normalized option names.
    """
    normalized = []
    for arg in args:
        if arg.startswith('--'):
            name, sep, value = arg.partition('=')
            arg = name.lower() + sep + value
        normalized.append(arg)
    return normalized


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Unknown arguments are ignored with a warning.

    Args:
        args: List of argument strings (None for sys.argv).

    Returns:
        Parsed Namespace object.

    Raises:
        UsageError: If the directory argument is missing.
    """
    if args is None:
        args = sys.argv[1:]

    parser = create_parser()
    namespace, unknown = parser.parse_known_args(normalize_flags(args))

    if unknown:
        logger.warning(f"Ignoring unrecognized arguments: {' '.join(unknown)}")

    if not namespace.directory:
        raise UsageError(USAGE_TEXT)

    return namespace


def validate_directory(directory: Path) -> Path:
    """
    Check that the directory to process exists.

    Args:
        directory: Directory given on the command line.

    Returns:
        The same directory.

    Raises:
        DirectoryNotFoundError: If it does not exist or is not a directory.
    """
    if not directory.is_dir():
        logger.debug(f"Directory {directory} does not exist")
        raise DirectoryNotFoundError(directory)
    return directory


def args_to_cli_args(namespace: argparse.Namespace) -> CLIArgs:
    """
    Convert argparse Namespace to CLIArgs dataclass.

    Args:
        namespace: Parsed argparse Namespace.

    Returns:
        CLIArgs instance.
    """
    return CLIArgs(
        directory=Path(namespace.directory),
        dry_run=namespace.dry_run,
        reverse=namespace.reverse,
        debug=namespace.debug,
        log_file=Path(namespace.log_file) if namespace.log_file else None,
    )
