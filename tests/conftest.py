"""Pytest configuration and fixtures."""

import io

import pytest
from rich.console import Console

from subrename.config import context
from subrename.ui.console import ConsoleUI


@pytest.fixture(autouse=True)
def reset_context():
    """Make sure no execution context leaks between tests."""
    context._current_context = None
    yield
    context._current_context = None


@pytest.fixture
def sample_episode_names():
    """Episode filenames with the key they should produce."""
    return {
        "Breaking.Bad.S01E01.720p.WEB-DL.x265.mkv": "S01E01",
        "game.of.thrones.s8e6.vostfr.srt": "S08E06",
        "Show.S02E03E04.1080p.mkv": "S02E03",
        "Show.1x05.HDTV.avi": "S01E05",
        "show 12X101.mp4": "S12E101",
        "Show Season 3 Episode 7.mkv": "S03E07",
        "show.season_04-episode.11.srt": "S04E11",
        "Show.Season2Episode9.webm": "S02E09",
    }


@pytest.fixture
def make_files(tmp_path):
    """Factory creating empty files in tmp_path and returning the directory."""
    def _make(*names):
        for name in names:
            (tmp_path / name).write_text(name)
        return tmp_path
    return _make


@pytest.fixture
def captured_ui():
    """ConsoleUI writing to an in-memory buffer; returns (ui, buffer)."""
    buffer = io.StringIO()
    ui = ConsoleUI(Console(
        file=buffer,
        width=200,
        highlight=False,
        emoji=False,
        color_system=None,
        soft_wrap=True,
    ))
    return ui, buffer

