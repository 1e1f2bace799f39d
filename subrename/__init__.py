"""
Subrename - Subtitle/video filename matcher.

Pairs subtitle files with video files in a directory by:
- Extracting a season/episode key from each filename
- Grouping videos and subtitles by that key
- Renaming one side of each unambiguous pair to the other's base name
"""

__version__ = "0.1.0"
