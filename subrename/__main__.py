"""Entry point for the subrename package.

This module provides the command-line entry point for the subtitle renamer.
Run with: python -m subrename <directory> [--dry-run] [--reverse]
"""

import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from subrename.config import (
    EXIT_FILESYSTEM_FAILURE,
    EXIT_OK,
    EXIT_USAGE,
    USAGE_TEXT,
    CLIArgs,
    args_to_cli_args,
    execution_context,
    parse_arguments,
    validate_directory,
)
from subrename.config.settings import LOG_FORMAT, LOG_RETENTION, LOG_ROTATION
from subrename.exceptions import (
    DirectoryNotFoundError,
    RenameFailedError,
    TargetExistsError,
    UsageError,
)
from subrename.pipeline import SubtitleRenamer
from subrename.ui import ConsoleUI, display_mode, display_summary


def setup_logging(debug: bool = False, log_file: Optional[Path] = None) -> None:
    """
    Configure loguru logging.

    Args:
        debug: If True, log debug messages on stderr (warnings only otherwise).
        log_file: If set, also log everything at debug level to this file.
    """
    logger.remove()
    level = "DEBUG" if debug else "WARNING"
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    if log_file is not None:
        logger.add(
            str(log_file),
            rotation=LOG_ROTATION,
            retention=LOG_RETENTION,
            level="DEBUG",
        )


def run(cli_args: CLIArgs, console: ConsoleUI) -> int:
    """
    Run the renamer for parsed arguments.

    Args:
        cli_args: Parsed CLI arguments.
        console: Console UI instance.

    Returns:
        Exit code.
    """
    try:
        directory = validate_directory(cli_args.directory)
    except DirectoryNotFoundError as e:
        console.print_error(f"Error: {e}")
        return EXIT_USAGE

    display_mode(cli_args.reverse, cli_args.dry_run, console)

    with execution_context(
        dry_run=cli_args.dry_run,
        reverse=cli_args.reverse,
        directory=directory,
    ):
        try:
            report = SubtitleRenamer(ui=console).run()
        except (RenameFailedError, TargetExistsError) as e:
            logger.error(f"Run aborted: {e}")
            console.print_error(f"Error: {e}")
            console.print_error("Files renamed before the failure keep their new names.")
            return EXIT_FILESYSTEM_FAILURE

    display_summary(report, console)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the subtitle renamer.

    Args:
        argv: Argument strings (None for sys.argv).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    console = ConsoleUI()

    try:
        namespace = parse_arguments(argv)
    except UsageError as e:
        message = str(e)
        console.print_line(message if message == USAGE_TEXT else f"Error: {message}\n\n{USAGE_TEXT}")
        return EXIT_USAGE

    cli_args = args_to_cli_args(namespace)
    setup_logging(cli_args.debug, cli_args.log_file)

    return run(cli_args, console)


if __name__ == "__main__":
    sys.exit(main())
