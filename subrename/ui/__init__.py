"""User interface components."""

from subrename.ui.console import ConsoleUI, console
from subrename.ui.display import (
    STATUS_STYLES,
    format_entry,
    display_entry,
    display_mode,
    format_summary,
    display_summary,
)

__all__ = [
    "ConsoleUI",
    "console",
    "STATUS_STYLES",
    "format_entry",
    "display_entry",
    "display_mode",
    "format_summary",
    "display_summary",
]
