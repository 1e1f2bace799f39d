"""Episode key extraction from video and subtitle filenames."""

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Tuple


@dataclass(frozen=True)
class EpisodePattern:
    """
    A named filename pattern capturing season and episode digits.

    The regex must expose the season as group 1 and the episode as group 2.
    """

    name: str
    regex: Pattern[str]

    def match(self, filename: str) -> Optional[Tuple[str, str]]:
        """
        Search the filename for this pattern.

        Args:
            filename: Bare filename (no directory part).

        Returns:
            (season digits, episode digits), or None if no match.
        """
        found = self.regex.search(filename)
        if not found:
            return None
        return found.group(1), found.group(2)


_SEPARATORS = r'[.\s_-]*'

# Tried in order, first match wins
EPISODE_PATTERNS: List[EpisodePattern] = [
    # Show.S01E02.mkv, show.s1e2e3.srt
    EpisodePattern(
        'sxxexx',
        re.compile(r'S(\d{1,2})E(\d{1,3})(?:E\d{1,3})*', re.IGNORECASE),
    ),
    # Show.1x05.mkv
    EpisodePattern(
        'nxnn',
        re.compile(r'(\d{1,2})x(\d{1,3})', re.IGNORECASE),
    ),
    # Show Season 1 Episode 5.mkv, show.season_01-episode.05.srt
    EpisodePattern(
        'season_episode',
        re.compile(
            rf'Season{_SEPARATORS}(\d{{1,2}}){_SEPARATORS}Episode{_SEPARATORS}(\d{{1,3}})',
            re.IGNORECASE,
        ),
    ),
]


def format_episode_key(season: str, episode: str) -> str:
    """
    Build the normalized episode key.

    Digits are left-padded to two characters; longer numbers are kept whole.

    Examples:
        >>> format_episode_key("1", "5")
        'S01E05'
        >>> format_episode_key("3", "112")
        'S03E112'
    """
    return f"S{season.zfill(2)}E{episode.zfill(2)}"


def parse_season_episode(
    filename: str,
    patterns: Optional[List[EpisodePattern]] = None
) -> Optional[Tuple[str, str]]:
    """
    Return the raw season and episode digits of the first matching pattern.

    Args:
        filename: Bare filename.
        patterns: Patterns to try (defaults to EPISODE_PATTERNS).

    Returns:
        (season, episode) digit strings, or None.
    """
    for pattern in patterns if patterns is not None else EPISODE_PATTERNS:
        result = pattern.match(filename)
        if result is not None:
            return result
    return None


def extract_episode_key(
    filename: str,
    patterns: Optional[List[EpisodePattern]] = None
) -> Optional[str]:
    """
    Extract the normalized episode key from a filename.

    No plausibility check is made on the numbers: the first pattern that
    matches decides, even for strings like ``1920x1080``.

    Args:
        filename: Bare filename (not a full path).
        patterns: Patterns to try (defaults to EPISODE_PATTERNS).

    Returns:
        Key like ``S01E05``, or None when no pattern matches.

    Examples:
        >>> extract_episode_key("Show.S1E5.720p.mkv")
        'S01E05'
        >>> extract_episode_key("Show.2x10.srt")
        'S02E10'
        >>> extract_episode_key("Movie.2010.mkv") is None
        True
    """
    result = parse_season_episode(filename, patterns)
    if result is None:
        return None
    return format_episode_key(*result)
