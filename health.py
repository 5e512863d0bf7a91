"""Environment health checks for URL handler availability."""

from __future__ import annotations

import webbrowser
from dataclasses import dataclass
from typing import Optional

from config import LauncherConfig, load_config


@dataclass(frozen=True)
class HealthStatus:
    host_policy: str
    handlers_available: tuple[str, ...]
    handlers_missing: tuple[str, ...]
    default_browser_available: bool
    default_browser_message: str


def _resolves(browser: Optional[str]) -> bool:
    try:
        webbrowser.get(browser)
    except webbrowser.Error:
        return False
    return True


def check_health(config: Optional[LauncherConfig] = None) -> HealthStatus:
    """Check environment health. Never raises."""
    if config is None:
        config = load_config()

    available = tuple(name for name in config.handlers if _resolves(name))
    missing = tuple(name for name in config.handlers if name not in available)

    default_ok = _resolves(None)
    if default_ok:
        default_message = "A default browser is available"
    else:
        default_message = (
            "No default browser found. URLs can be normalized but not opened. "
            "Set BROWSER or YTLAUNCH_HANDLERS to a browser on this machine."
        )

    return HealthStatus(
        host_policy=config.host_policy.value,
        handlers_available=available,
        handlers_missing=missing,
        default_browser_available=default_ok,
        default_browser_message=default_message,
    )
