"""Configuration and CLI handling."""

from subrename.config.settings import (
    VIDEO_EXTENSIONS,
    SUBTITLE_EXTENSIONS,
    USAGE_TEXT,
    MODE_FORWARD,
    MODE_REVERSE,
    EXIT_OK,
    EXIT_USAGE,
    EXIT_FILESYSTEM_FAILURE,
)
from subrename.config.context import (
    ExecutionContext,
    get_context,
    execution_context,
)
from subrename.config.cli import (
    CLIArgs,
    create_parser,
    normalize_flags,
    parse_arguments,
    validate_directory,
    args_to_cli_args,
)

__all__ = [
    "VIDEO_EXTENSIONS",
    "SUBTITLE_EXTENSIONS",
    "USAGE_TEXT",
    "MODE_FORWARD",
    "MODE_REVERSE",
    "EXIT_OK",
    "EXIT_USAGE",
    "EXIT_FILESYSTEM_FAILURE",
    "ExecutionContext",
    "get_context",
    "execution_context",
    "CLIArgs",
    "create_parser",
    "normalize_flags",
    "parse_arguments",
    "validate_directory",
    "args_to_cli_args",
]
