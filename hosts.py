"""Host classification for YouTube URLs."""

from __future__ import annotations

import enum
from typing import Optional


class HostKind(enum.Enum):
    SHORT_LINK = "youtu.be"
    YOUTUBE = "youtube.com"


class HostPolicy(enum.Enum):
    """How strictly a URL host must match a YouTube domain.

    CONTAINS accepts any host containing ``youtu.be`` or ``youtube.com``
    anywhere in it, look-alike hosts included. ALLOW_LIST only accepts the
    real domains and their subdomains.
    """

    CONTAINS = "contains"
    ALLOW_LIST = "allow_list"


_SHORT_LINK_HOSTS = frozenset({"youtu.be", "www.youtu.be"})
_YOUTUBE_DOMAIN = "youtube.com"


def _matches_allow_list(host: str, kind: HostKind) -> bool:
    if kind is HostKind.SHORT_LINK:
        return host in _SHORT_LINK_HOSTS
    return host == _YOUTUBE_DOMAIN or host.endswith("." + _YOUTUBE_DOMAIN)


def classify_host(
    host: Optional[str], policy: HostPolicy = HostPolicy.CONTAINS
) -> Optional[HostKind]:
    """Return the kind of YouTube host, or None for anything else.

    The short-link domain is checked first, so a host containing both
    substrings is treated as a short link.
    """
    if not host:
        return None
    host = host.lower()
    for kind in (HostKind.SHORT_LINK, HostKind.YOUTUBE):
        if policy is HostPolicy.CONTAINS:
            if kind.value in host:
                return kind
        elif _matches_allow_list(host, kind):
            return kind
    return None
