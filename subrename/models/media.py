"""Media file data models."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from subrename.classification.episode_key import extract_episode_key


class MediaKind(Enum):
    """Classification of a file by its extension."""

    VIDEO = "video"
    SUBTITLE = "subtitle"


@dataclass
class MediaFile:
    """
    A video or subtitle file found in the processed directory.

    The episode key is computed from the filename when the object is built.
    """

    path: Path
    kind: MediaKind
    episode_key: Optional[str] = field(default=None, init=False)

    def __post_init__(self) -> None:
        key = extract_episode_key(self.path.name)
        self.episode_key = key.upper() if key else None

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def base_name(self) -> str:
        """Filename without its last extension."""
        return self.path.stem

    @property
    def extension(self) -> str:
        """Last extension, with its original case."""
        return self.path.suffix

    def is_video(self) -> bool:
        return self.kind is MediaKind.VIDEO

    def is_subtitle(self) -> bool:
        return self.kind is MediaKind.SUBTITLE


@dataclass(frozen=True)
class RenameDecision:
    """
    Planned rename for one episode key.

    Attributes:
        key: Episode key shared by source and target.
        source: File whose base name is adopted.
        target: File being renamed.
        new_path: Destination path of the target.
    """

    key: str
    source: MediaFile
    target: MediaFile
    new_path: Path

    @classmethod
    def for_pair(
        cls,
        key: str,
        video: MediaFile,
        subtitle: MediaFile,
        reverse: bool = False
    ) -> "RenameDecision":
        """
        Build the decision for a video/subtitle pair.

        Forward renames the subtitle after the video, reverse renames the
        video after the subtitle. The target keeps its own extension.
        """
        source, target = (subtitle, video) if reverse else (video, subtitle)
        new_path = target.path.parent / f"{source.base_name}{target.extension}"
        return cls(key=key, source=source, target=target, new_path=new_path)

    @property
    def is_noop(self) -> bool:
        """True when the target already carries the wanted name (ignoring case)."""
        return str(self.new_path).lower() == str(self.target.path).lower()
