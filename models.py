"""Immutable result types for YouTube URL normalization."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from typing import Optional, Union


class UrlShape(enum.Enum):
    WATCH = "watch"
    SHORTS = "shorts"
    PASSTHROUGH = "passthrough"


class RejectReason(enum.Enum):
    EMPTY = "empty"
    MALFORMED = "malformed"
    MISSING_HOST = "missing_host"
    NOT_YOUTUBE = "not_youtube"
    MISSING_VIDEO_ID = "missing_video_id"
    NOT_A_VIDEO_ID = "not_a_video_id"


@dataclass(frozen=True)
class Accepted:
    """Input was recognized; ``url`` is the canonical HTTPS form."""

    url: str
    shape: UrlShape
    video_id: Optional[str] = None

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> dict:
        """Convert to plain dictionary."""
        data = dataclasses.asdict(self)
        data["shape"] = self.shape.value
        return data


@dataclass(frozen=True)
class Rejected:
    """Input could not be turned into a playable YouTube URL."""

    reason: RejectReason
    message: str

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> dict:
        """Convert to plain dictionary."""
        return {"reason": self.reason.value, "message": self.message}


NormalizeResult = Union[Accepted, Rejected]
