"""Open canonical YouTube URLs through an ordered list of handlers.

Handlers are tried in preference order; the first one that resolves to a
usable browser controller is used. The last handler is normally the system
default, mirroring a "preferred apps, then any browser" fallback.
"""

from __future__ import annotations

import logging
import webbrowser
from dataclasses import dataclass
from typing import Optional, Sequence

from config import LauncherConfig, load_config
from normalizer import require_canonical_url

logger = logging.getLogger(__name__)


class LaunchError(Exception):
    """Opening a URL failed."""


class NoHandlerError(LaunchError):
    """No configured handler can open the URL."""


@dataclass(frozen=True)
class UrlHandler:
    """A named way of opening a URL.

    ``browser`` is a name registered with :mod:`webbrowser`; ``None`` means
    the system default handler.
    """

    name: str
    browser: Optional[str] = None


SYSTEM_DEFAULT = UrlHandler(name="default")


def default_handlers(config: Optional[LauncherConfig] = None) -> list[UrlHandler]:
    """Configured browsers in order, followed by the system default."""
    if config is None:
        config = load_config()
    handlers = [UrlHandler(name=name, browser=name) for name in config.handlers]
    handlers.append(SYSTEM_DEFAULT)
    return handlers


def _controller(handler: UrlHandler) -> Optional[webbrowser.BaseBrowser]:
    try:
        return webbrowser.get(handler.browser)
    except webbrowser.Error:
        return None


def resolve_handler(
    handlers: Sequence[UrlHandler],
) -> tuple[UrlHandler, webbrowser.BaseBrowser]:
    """Return the first handler that resolves, with its controller.

    Raises:
        NoHandlerError: If none of the handlers can be resolved.
    """
    for handler in handlers:
        controller = _controller(handler)
        if controller is not None:
            return handler, controller
        logger.debug("Handler %s is not available", handler.name)
    tried = ", ".join(h.name for h in handlers) or "none"
    raise NoHandlerError(f"No app can handle YouTube URLs (tried: {tried})")


def open_url(url: str, handlers: Optional[Sequence[UrlHandler]] = None) -> UrlHandler:
    """Open *url* with the first available handler and return that handler.

    Raises:
        NoHandlerError: If no handler is available.
        LaunchError: If the chosen handler reports that it could not open the URL.
    """
    if handlers is None:
        handlers = default_handlers()
    handler, controller = resolve_handler(handlers)
    logger.info("Opening %s with %s", url, handler.name)
    if not controller.open(url):
        raise LaunchError(f"Handler {handler.name} failed to open {url}")
    return handler


def launch(
    raw: str, config: Optional[LauncherConfig] = None
) -> tuple[str, UrlHandler]:
    """Normalize user input and open it.

    Raises:
        InvalidURLError: If the input is not a YouTube reference.
        LaunchError: If the URL could not be opened.
    """
    if config is None:
        config = load_config()
    url = require_canonical_url(raw, config.host_policy)
    handler = open_url(url, default_handlers(config))
    return url, handler
