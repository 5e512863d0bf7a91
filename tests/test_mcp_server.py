"""Tests for the MCP tool functions."""

from __future__ import annotations

import asyncio
import json
from unittest.mock import patch

import ytlaunch_mcp_server as server
from health import HealthStatus
from launcher import LaunchError, NoHandlerError, SYSTEM_DEFAULT


class TestNormalizeUrlTool:

    def test_accepted(self) -> None:
        data = json.loads(asyncio.run(server.normalize_url("https://youtu.be/abc123")))
        assert data["url"] == "https://www.youtube.com/watch?v=abc123"
        assert data["shape"] == "watch"

    def test_rejected(self) -> None:
        data = json.loads(asyncio.run(server.normalize_url("https://example.com/")))
        assert data["error"] == "InvalidURL"
        assert data["reason"] == "not_youtube"

    def test_unexpected_error(self) -> None:
        with patch("ytlaunch_mcp_server.normalize", side_effect=RuntimeError("boom")):
            data = json.loads(asyncio.run(server.normalize_url("dQw4w9WgXcQ")))
        assert data == {"error": "UnexpectedError", "message": "boom"}


class TestOpenYoutubeUrlTool:

    def test_opened(self) -> None:
        with patch("launcher.open_url", return_value=SYSTEM_DEFAULT):
            data = json.loads(asyncio.run(server.open_youtube_url("dQw4w9WgXcQ")))
        assert data == {
            "url": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "handler": "default",
        }

    def test_rejected_is_not_opened(self) -> None:
        with patch("launcher.open_url") as open_url:
            data = json.loads(asyncio.run(server.open_youtube_url("nope")))
        assert data["error"] == "InvalidURL"
        assert data["reason"] == "not_a_video_id"
        open_url.assert_not_called()

    def test_no_handler(self) -> None:
        with patch("launcher.open_url", side_effect=NoHandlerError("none")):
            data = json.loads(asyncio.run(server.open_youtube_url("dQw4w9WgXcQ")))
        assert data["error"] == "NoHandler"

    def test_launch_error(self) -> None:
        with patch("launcher.open_url", side_effect=LaunchError("failed")):
            data = json.loads(asyncio.run(server.open_youtube_url("dQw4w9WgXcQ")))
        assert data == {"error": "LaunchError", "message": "failed"}


class TestHealthCheckTool:

    def test_returns_status(self) -> None:
        status = HealthStatus(
            host_policy="contains",
            handlers_available=(),
            handlers_missing=(),
            default_browser_available=True,
            default_browser_message="A default browser is available",
        )
        with patch("ytlaunch_mcp_server.check_health", return_value=status):
            data = json.loads(asyncio.run(server.health_check()))
        assert data["default_browser_available"] is True
        assert data["host_policy"] == "contains"
