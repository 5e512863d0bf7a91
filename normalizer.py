"""Normalize user-entered YouTube references into one canonical playable URL."""

from __future__ import annotations

import logging
import re
from typing import Optional
from urllib.parse import parse_qs, quote, unquote, urlsplit

from hosts import HostKind, HostPolicy, classify_host
from models import Accepted, NormalizeResult, Rejected, RejectReason, UrlShape

logger = logging.getLogger(__name__)


class InvalidURLError(Exception):
    """Raised when input cannot be normalized to a YouTube URL."""

    def __init__(self, rejection: Rejected) -> None:
        super().__init__(rejection.message)
        self.rejection = rejection


_SCHEME_RE = re.compile(r"^https?://", flags=re.IGNORECASE)

BARE_ID_MIN_LENGTH = 8
BARE_ID_MAX_LENGTH = 20


def _encode_id(video_id: str) -> str:
    return quote(video_id, safe="-_.~")


def watch_url(video_id: str) -> str:
    return f"https://www.youtube.com/watch?v={_encode_id(video_id)}"


def shorts_url(video_id: str) -> str:
    return f"https://www.youtube.com/shorts/{_encode_id(video_id)}"


def _reject(reason: RejectReason, message: str) -> Rejected:
    logger.debug("Rejected input (%s): %s", reason.value, message)
    return Rejected(reason=reason, message=message)


def _path_segments(path: str) -> list[str]:
    """Split a URL path into its non-empty, percent-decoded segments."""
    return [unquote(seg) for seg in path.split("/") if seg]


def _query_param(query: str, name: str) -> Optional[str]:
    values = parse_qs(query, keep_blank_values=True).get(name)
    return values[0] if values else None


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def looks_like_video_id(text: str) -> bool:
    """Permissive check for a bare video id typed without a URL."""
    if not BARE_ID_MIN_LENGTH <= len(text) <= BARE_ID_MAX_LENGTH:
        return False
    return all(ch.isalpha() or ch.isdecimal() or ch in "_-" for ch in text)


def _normalize_url(text: str, host_policy: HostPolicy) -> NormalizeResult:
    try:
        parts = urlsplit(text)
        host = parts.hostname
    except ValueError as exc:
        return _reject(RejectReason.MALFORMED, f"Malformed URL: {exc}")
    if not host:
        return _reject(RejectReason.MISSING_HOST, f"URL has no host: {text}")

    kind = classify_host(host, host_policy)
    segments = _path_segments(parts.path)
    first = segments[0] if segments else None

    if kind is HostKind.SHORT_LINK:
        if _is_blank(first):
            return _reject(RejectReason.MISSING_VIDEO_ID, f"Short link has no video id: {text}")
        return Accepted(url=watch_url(first), shape=UrlShape.WATCH, video_id=first)

    if kind is HostKind.YOUTUBE:
        if first == "watch":
            video_id = _query_param(parts.query, "v")
            if _is_blank(video_id):
                return _reject(RejectReason.MISSING_VIDEO_ID, f"Watch URL has no 'v' parameter: {text}")
            return Accepted(url=watch_url(video_id), shape=UrlShape.WATCH, video_id=video_id)
        if first == "shorts":
            video_id = segments[1] if len(segments) > 1 else None
            if _is_blank(video_id):
                return _reject(RejectReason.MISSING_VIDEO_ID, f"Shorts URL has no video id: {text}")
            return Accepted(url=shorts_url(video_id), shape=UrlShape.SHORTS, video_id=video_id)
        # Other paths (/live/<id>, /embed/<id>, ...) are opened as entered.
        return Accepted(url=text, shape=UrlShape.PASSTHROUGH)

    return _reject(RejectReason.NOT_YOUTUBE, f"Not a YouTube host: {host}")


def normalize(
    raw: str, host_policy: HostPolicy = HostPolicy.CONTAINS
) -> NormalizeResult:
    """Convert user input into a canonical YouTube URL.

    Accepts full ``http(s)://`` URLs on youtu.be or youtube.com hosts, or a
    bare video id. Never raises for bad input; returns ``Rejected`` instead.
    """
    if not isinstance(raw, str):
        return _reject(RejectReason.EMPTY, "Input must be a string")
    text = raw.strip()
    if not text:
        return _reject(RejectReason.EMPTY, "Input is empty")

    if _SCHEME_RE.match(text):
        return _normalize_url(text, host_policy)

    if looks_like_video_id(text):
        return Accepted(url=watch_url(text), shape=UrlShape.WATCH, video_id=text)
    return _reject(RejectReason.NOT_A_VIDEO_ID, f"Not a URL or video id: {text}")


def normalize_youtube_url(
    raw: str, host_policy: HostPolicy = HostPolicy.CONTAINS
) -> Optional[str]:
    """Return the canonical URL, or None if the input is rejected."""
    result = normalize(raw, host_policy)
    return result.url if isinstance(result, Accepted) else None


def require_canonical_url(
    raw: str, host_policy: HostPolicy = HostPolicy.CONTAINS
) -> str:
    """Return the canonical URL.

    Raises:
        InvalidURLError: If the input is rejected.
    """
    result = normalize(raw, host_policy)
    if isinstance(result, Rejected):
        raise InvalidURLError(result)
    return result.url
