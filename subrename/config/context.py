"""Execution context for rename operations."""

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Generator

# Global context storage
_current_context: Optional["ExecutionContext"] = None


@dataclass
class ExecutionContext:
    """
    Execution context containing runtime configuration.

    Centralizes the run options so the renamer can pick them up
    without parameter threading.

    Attributes:
        dry_run: If True, report renames without performing them.
        reverse: If True, rename videos to match subtitles.
        directory: Directory being processed.
    """

    dry_run: bool = False
    reverse: bool = False
    directory: Optional[Path] = None


def get_context() -> ExecutionContext:
    """
    Get the current execution context.

    Returns:
        Current ExecutionContext, or a default one if not set.
    """
    if _current_context is None:
        return ExecutionContext()
    return _current_context


@contextmanager
def execution_context(**kwargs) -> Generator[ExecutionContext, None, None]:
    """
    Context manager for temporarily setting execution context.

    Args:
        **kwargs: Arguments to pass to ExecutionContext constructor.

    Yields:
        The created ExecutionContext.

    Example:
        with execution_context(dry_run=True) as ctx:
            SubtitleRenamer(directory).run()
        # Previous context restored
    """
    global _current_context
    previous = _current_context

    ctx = ExecutionContext(**kwargs)
    _current_context = ctx

    try:
        yield ctx
    finally:
        _current_context = previous
