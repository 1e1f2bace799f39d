"""Tests for file discovery functions."""

from pathlib import Path

import pytest

from subrename.filesystem.discovery import (
    classify_file,
    list_files,
    split_media_files,
    list_media_files,
)
from subrename.models.media import MediaKind


class TestClassifyFile:
    """Tests for classify_file function."""

    @pytest.mark.parametrize("ext", [
        ".mkv", ".mp4", ".avi", ".mov", ".wmv", ".flv", ".webm", ".m4v"
    ])
    def test_video_extensions(self, ext):
        """Recognizes every supported video extension."""
        assert classify_file(Path(f"a{ext}")) is MediaKind.VIDEO

    def test_extension_case_ignored(self):
        """Upper-case extensions are recognized."""
        assert classify_file(Path("a.MKV")) is MediaKind.VIDEO
        assert classify_file(Path("a.SrT")) is MediaKind.SUBTITLE

    def test_subtitle_extension(self):
        """Only .srt is a subtitle."""
        assert classify_file(Path("a.srt")) is MediaKind.SUBTITLE
        assert classify_file(Path("a.ass")) is None

    @pytest.mark.parametrize("name", ["a.txt", "a.nfo", "a.ts", "README", "a.srt.bak"])
    def test_other_files(self, name):
        """Anything else is not classified."""
        assert classify_file(Path(name)) is None


class TestListFiles:
    """Tests for list_files function."""

    def test_lists_sorted_regular_files(self, make_files):
        """Returns regular files sorted by name."""
        directory = make_files("b.mkv", "a.srt")
        assert [p.name for p in list_files(directory)] == ["a.srt", "b.mkv"]

    def test_does_not_recurse(self, make_files):
        """Subdirectories and their content are ignored."""
        directory = make_files("a.S01E01.mkv")
        sub = directory / "Extras.S01E01.srt"
        sub.mkdir()
        (sub / "inner.S01E01.srt").touch()

        assert [p.name for p in list_files(directory)] == ["a.S01E01.mkv"]


class TestSplitMediaFiles:
    """Tests for split_media_files function."""

    def test_splits_by_kind(self):
        """Videos and subtitles are separated, others dropped."""
        paths = [Path("a.S01E01.mkv"), Path("a.S01E01.srt"), Path("notes.txt")]

        videos, subtitles = split_media_files(paths)

        assert [v.name for v in videos] == ["a.S01E01.mkv"]
        assert [s.name for s in subtitles] == ["a.S01E01.srt"]
        assert all(v.is_video() for v in videos)


class TestListMediaFiles:
    """Tests for list_media_files function."""

    def test_collects_media(self, make_files):
        """Returns videos and subtitles found in the directory."""
        directory = make_files("Show.S01E01.mkv", "Show.S01E01.srt", "cover.jpg")

        videos, subtitles = list_media_files(directory)

        assert [v.name for v in videos] == ["Show.S01E01.mkv"]
        assert [s.name for s in subtitles] == ["Show.S01E01.srt"]

    def test_empty_directory(self, tmp_path):
        """Empty directory gives empty lists."""
        assert list_media_files(tmp_path) == ([], [])
