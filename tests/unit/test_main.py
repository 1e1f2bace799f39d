"""Tests for the subrename package entry point."""

from pathlib import Path
from unittest.mock import patch, MagicMock

import pytest

from subrename.__main__ import setup_logging, run, main
from subrename.config import CLIArgs
from subrename.exceptions import RenameFailedError


@pytest.fixture
def quiet_logging():
    """Keep main() from reconfiguring the real logger."""
    with patch("subrename.__main__.setup_logging") as mock_setup:
        yield mock_setup


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self):
        """Sets up a single stderr sink by default."""
        with patch("subrename.__main__.logger") as mock_logger:
            setup_logging(debug=False)
            mock_logger.remove.assert_called_once()
            assert mock_logger.add.call_count == 1
            assert mock_logger.add.call_args.kwargs["level"] == "WARNING"

    def test_setup_logging_debug(self):
        """Debug mode lowers the stderr level."""
        with patch("subrename.__main__.logger") as mock_logger:
            setup_logging(debug=True)
            assert mock_logger.add.call_args.kwargs["level"] == "DEBUG"

    def test_setup_logging_file(self, tmp_path):
        """A log file adds a rotating file sink."""
        with patch("subrename.__main__.logger") as mock_logger:
            setup_logging(log_file=tmp_path / "run.log")
            assert mock_logger.add.call_count == 2
            file_call = mock_logger.add.call_args_list[1]
            assert file_call.args[0] == str(tmp_path / "run.log")
            assert file_call.kwargs["rotation"] == "10 MB"


class TestRun:
    """Tests for run function."""

    def test_missing_directory(self, tmp_path):
        """Missing directory prints an error and returns 1."""
        console = MagicMock()

        result = run(CLIArgs(directory=tmp_path / "nonexistent"), console)

        assert result == 1
        console.print_error.assert_called_once()
        assert "Directory not found" in console.print_error.call_args[0][0]

    def test_successful_run(self, tmp_path, captured_ui):
        """A normal run returns 0 and prints the summary."""
        ui, buffer = captured_ui
        (tmp_path / "Show.S01E01.mkv").touch()
        (tmp_path / "x.S01E01.srt").touch()

        result = run(CLIArgs(directory=tmp_path), ui)

        assert result == 0
        output = buffer.getvalue()
        assert "Mode: Rename subtitle files to match video filenames." in output
        assert "RENAMED [S01E01]: x.S01E01.srt → Show.S01E01.srt" in output
        assert "Done. Renamed: 1, Skipped: 0" in output
        assert (tmp_path / "Show.S01E01.srt").exists()

    def test_all_skipped_is_success(self, tmp_path, captured_ui):
        """A run where everything is skipped still returns 0."""
        ui, buffer = captured_ui
        (tmp_path / "a.S01E01.srt").touch()

        assert run(CLIArgs(directory=tmp_path), ui) == 0
        assert "Done. Renamed: 0, Skipped: 1" in buffer.getvalue()

    def test_rename_failure_returns_2(self, tmp_path):
        """A filesystem failure aborts the run with status 2."""
        console = MagicMock()
        error = RenameFailedError(Path("a.srt"), Path("b.srt"), PermissionError("denied"))

        with patch("subrename.__main__.SubtitleRenamer") as mock_renamer:
            mock_renamer.return_value.run.side_effect = error
            result = run(CLIArgs(directory=tmp_path), console)

        assert result == 2
        assert "denied" in console.print_error.call_args_list[0][0][0]

    def test_target_appearing_mid_run_returns_2(self, tmp_path):
        """A destination created after the conflict check aborts with status 2."""
        console = MagicMock()
        (tmp_path / "Show.S01E01.mkv").touch()
        (tmp_path / "x.S01E01.srt").touch()
        target = tmp_path / "Show.S01E01.srt"
        checks = []
        real_exists = Path.exists

        def exists_after_check(path, *args, **kwargs):
            if path == target:
                checks.append(path)
                # free during the renamer check, taken when the move happens
                return len(checks) > 1
            return real_exists(path, *args, **kwargs)

        with patch.object(Path, "exists", exists_after_check):
            result = run(CLIArgs(directory=tmp_path), console)

        assert result == 2
        assert "Target already exists" in console.print_error.call_args_list[0][0][0]
        assert (tmp_path / "x.S01E01.srt").exists()


class TestMain:
    """Tests for main function."""

    def test_no_arguments_prints_usage(self, quiet_logging):
        """No arguments prints usage and returns 1."""
        with patch("subrename.__main__.ConsoleUI") as mock_ui:
            result = main([])

        assert result == 1
        printed = mock_ui.return_value.print_line.call_args[0][0]
        assert printed.startswith("Usage: subrename <directory>")
        quiet_logging.assert_not_called()

    def test_bad_option_value_prints_usage(self, quiet_logging):
        """A malformed option prints the error and usage."""
        with patch("subrename.__main__.ConsoleUI") as mock_ui:
            result = main(["/tv", "--log-file"])

        assert result == 1
        printed = mock_ui.return_value.print_line.call_args[0][0]
        assert printed.startswith("Error:")
        assert "Usage:" in printed

    def test_abbreviated_reverse_runs_forward(self, tmp_path, quiet_logging):
        """A truncated --reverse is ignored, so the subtitle is renamed."""
        (tmp_path / "Show.S01E01.mkv").touch()
        (tmp_path / "x.S01E01.srt").touch()

        assert main([str(tmp_path), "--rev"]) == 0
        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "Show.S01E01.mkv", "Show.S01E01.srt"
        ]

    def test_abbreviated_dry_run_renames(self, tmp_path, quiet_logging):
        """A truncated --dry-run does not turn on dry-run mode."""
        (tmp_path / "Show.S01E01.mkv").touch()
        (tmp_path / "x.S01E01.srt").touch()

        assert main([str(tmp_path), "--dry"]) == 0
        assert (tmp_path / "Show.S01E01.srt").exists()

    def test_help_flag_exits_1(self, quiet_logging):
        """-h is not a help request and gives the usage error."""
        with patch("subrename.__main__.ConsoleUI") as mock_ui:
            assert main(["-h"]) == 1
        printed = mock_ui.return_value.print_line.call_args[0][0]
        assert printed.startswith("Usage: subrename <directory>")

    def test_missing_directory(self, tmp_path, quiet_logging):
        """Missing directory returns 1 without touching anything."""
        assert main([str(tmp_path / "nonexistent")]) == 1

    def test_dry_run_end_to_end(self, tmp_path, quiet_logging):
        """Dry run returns 0 and leaves files alone."""
        (tmp_path / "Show.S01E01.mkv").touch()
        (tmp_path / "x.S01E01.srt").touch()

        result = main([str(tmp_path), "--DRY-RUN"])

        assert result == 0
        assert (tmp_path / "x.S01E01.srt").exists()
        assert not (tmp_path / "Show.S01E01.srt").exists()
        quiet_logging.assert_called_once_with(False, None)

    def test_reverse(self, tmp_path, quiet_logging):
        """--reverse renames the video."""
        (tmp_path / "Show.S01E01.mkv").touch()
        (tmp_path / "x.S01E01.srt").touch()

        assert main(["--reverse", str(tmp_path)]) == 0
        assert (tmp_path / "x.S01E01.mkv").exists()
        assert not (tmp_path / "Show.S01E01.mkv").exists()
