"""ytlaunch MCP Server — YouTube URL normalization and launching."""

from __future__ import annotations

import dataclasses
import json

from mcp.server.fastmcp import FastMCP

from config import configure_logging, load_config
from health import check_health
from launcher import LaunchError, NoHandlerError, launch
from models import Rejected
from normalizer import InvalidURLError, normalize

_config = load_config("MCP")
configure_logging(_config)

mcp = FastMCP("ytlaunch")


@mcp.tool()
async def normalize_url(url: str) -> str:
    """Convert a YouTube link or bare video ID into a canonical URL.

    Args:
        url: User-entered text. Supported forms:
             - youtu.be/<id>
             - youtube.com/watch?v=<id>
             - youtube.com/shorts/<id>
             - other youtube.com paths (returned unchanged)
             - a bare video ID (8-20 letters, digits, "_" or "-")

    Returns:
        JSON string with the canonical URL or rejection details.
    """
    try:
        result = normalize(url, _config.host_policy)
        if isinstance(result, Rejected):
            return json.dumps({"error": "InvalidURL", **result.to_dict()})
        return json.dumps(result.to_dict(), ensure_ascii=False, indent=2)
    except Exception as exc:
        return json.dumps({"error": "UnexpectedError", "message": str(exc)})


@mcp.tool()
async def open_youtube_url(url: str) -> str:
    """Normalize a YouTube reference and open it on this machine.

    Handlers configured in YTLAUNCH_HANDLERS are tried first, then the
    system default browser.

    Args:
        url: User-entered text, as accepted by normalize_url.

    Returns:
        JSON string with the opened URL and handler name, or error details.
    """
    try:
        canonical, handler = launch(url, _config)
        return json.dumps({"url": canonical, "handler": handler.name}, indent=2)
    except InvalidURLError as exc:
        return json.dumps({"error": "InvalidURL", **exc.rejection.to_dict()})
    except NoHandlerError as exc:
        return json.dumps({"error": "NoHandler", "message": str(exc)})
    except LaunchError as exc:
        return json.dumps({"error": "LaunchError", "message": str(exc)})
    except Exception as exc:
        return json.dumps({"error": "UnexpectedError", "message": str(exc)})


@mcp.tool()
async def health_check() -> str:
    """Check ytlaunch environment health (browser handler availability).

    Returns:
        JSON string with health status details.
    """
    return json.dumps(dataclasses.asdict(check_health(_config)), ensure_ascii=False, indent=2)


if __name__ == "__main__":
    mcp.run()
