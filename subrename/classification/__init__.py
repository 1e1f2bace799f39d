"""Filename classification."""

from subrename.classification.episode_key import (
    EpisodePattern,
    EPISODE_PATTERNS,
    format_episode_key,
    parse_season_episode,
    extract_episode_key,
)

__all__ = [
    "EpisodePattern",
    "EPISODE_PATTERNS",
    "format_episode_key",
    "parse_season_episode",
    "extract_episode_key",
]
