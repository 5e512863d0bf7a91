"""Configuration loader — reads normalizer and launcher settings from environment variables.

Supports per-surface overrides with global fallback:
    YTLAUNCH_{SURFACE}_{SUFFIX} → YTLAUNCH_{SUFFIX} → default
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from hosts import HostPolicy

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"

_POLICY_ALIASES: dict[str, HostPolicy] = {
    "contains": HostPolicy.CONTAINS,
    "loose": HostPolicy.CONTAINS,
    "allow_list": HostPolicy.ALLOW_LIST,
    "allowlist": HostPolicy.ALLOW_LIST,
    "strict": HostPolicy.ALLOW_LIST,
}


@dataclass(frozen=True)
class LauncherConfig:
    host_policy: HostPolicy = HostPolicy.CONTAINS
    handlers: tuple[str, ...] = ()
    log_level: str = DEFAULT_LOG_LEVEL


def _env(key: str, surface_key: Optional[str] = None) -> str:
    """Resolve an env var with optional surface-specific override.

    Checks YTLAUNCH_{SURFACE}_{SUFFIX} first, then YTLAUNCH_{SUFFIX}.
    """
    if surface_key:
        val = os.environ.get(f"YTLAUNCH_{surface_key}_{key}", "").strip()
        if val:
            return val
    return os.environ.get(f"YTLAUNCH_{key}", "").strip()


def _parse_host_policy(value: str) -> HostPolicy:
    if not value:
        return HostPolicy.CONTAINS
    policy = _POLICY_ALIASES.get(value.lower().replace("-", "_"))
    if policy is None:
        logger.warning("Unknown host policy %r, using %s", value, HostPolicy.CONTAINS.value)
        return HostPolicy.CONTAINS
    return policy


def load_config(surface_key: Optional[str] = None) -> LauncherConfig:
    """Build a LauncherConfig from environment variables.

    Args:
        surface_key: Optional surface identifier (e.g. "CLI", "MCP").
                     When set, surface-specific env vars take priority over global ones.

    Environment variables (global):
        YTLAUNCH_HOST_POLICY: "contains" (default) or "allow_list" / "strict"
        YTLAUNCH_HANDLERS: comma-separated browser names tried in order
                           before the system default (e.g. "firefox,chrome")
        YTLAUNCH_LOG_LEVEL: logging level name (default WARNING)

    Surface-specific (e.g. for MCP):
        YTLAUNCH_MCP_HOST_POLICY
        YTLAUNCH_MCP_HANDLERS
        YTLAUNCH_MCP_LOG_LEVEL
    """
    handlers = tuple(
        name.strip() for name in _env("HANDLERS", surface_key).split(",") if name.strip()
    )
    return LauncherConfig(
        host_policy=_parse_host_policy(_env("HOST_POLICY", surface_key)),
        handlers=handlers,
        log_level=(_env("LOG_LEVEL", surface_key) or DEFAULT_LOG_LEVEL).upper(),
    )


def configure_logging(config: LauncherConfig) -> None:
    """Set up root logging for an entry point."""
    level = logging.getLevelName(config.log_level)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
