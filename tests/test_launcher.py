"""Tests for launcher module (mocked webbrowser)."""

from __future__ import annotations

import webbrowser
from unittest.mock import MagicMock, patch

import pytest

from config import LauncherConfig
from hosts import HostPolicy
from launcher import (
    SYSTEM_DEFAULT,
    LaunchError,
    NoHandlerError,
    UrlHandler,
    default_handlers,
    launch,
    open_url,
    resolve_handler,
)
from normalizer import InvalidURLError

URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


def _browsers(**controllers):
    """Build a webbrowser.get replacement from name -> controller."""
    def fake_get(using=None):
        key = using or "default"
        if key in controllers:
            return controllers[key]
        raise webbrowser.Error(f"could not locate runnable browser {using}")
    return fake_get


class TestDefaultHandlers:

    def test_system_default_only(self) -> None:
        assert default_handlers(LauncherConfig()) == [SYSTEM_DEFAULT]

    def test_configured_browsers_come_first(self) -> None:
        handlers = default_handlers(LauncherConfig(handlers=("firefox", "chrome")))
        assert [h.name for h in handlers] == ["firefox", "chrome", "default"]
        assert handlers[0].browser == "firefox"
        assert handlers[-1].browser is None


class TestResolveHandler:

    def test_first_available_wins(self) -> None:
        chrome = MagicMock()
        handlers = [UrlHandler("firefox", "firefox"), UrlHandler("chrome", "chrome"), SYSTEM_DEFAULT]
        with patch("launcher.webbrowser.get", side_effect=_browsers(chrome=chrome, default=MagicMock())):
            handler, controller = resolve_handler(handlers)
        assert handler.name == "chrome"
        assert controller is chrome

    def test_falls_back_to_system_default(self) -> None:
        default = MagicMock()
        handlers = [UrlHandler("firefox", "firefox"), SYSTEM_DEFAULT]
        with patch("launcher.webbrowser.get", side_effect=_browsers(default=default)):
            handler, controller = resolve_handler(handlers)
        assert handler is SYSTEM_DEFAULT
        assert controller is default

    def test_none_available_raises(self) -> None:
        handlers = [UrlHandler("firefox", "firefox"), SYSTEM_DEFAULT]
        with patch("launcher.webbrowser.get", side_effect=_browsers()):
            with pytest.raises(NoHandlerError, match="firefox, default"):
                resolve_handler(handlers)

    def test_empty_list_raises(self) -> None:
        with pytest.raises(NoHandlerError):
            resolve_handler([])


class TestOpenUrl:

    def test_opens_with_resolved_controller(self) -> None:
        controller = MagicMock()
        controller.open.return_value = True
        with patch("launcher.webbrowser.get", side_effect=_browsers(default=controller)):
            handler = open_url(URL, [SYSTEM_DEFAULT])
        assert handler is SYSTEM_DEFAULT
        controller.open.assert_called_once_with(URL)

    def test_controller_failure_raises(self) -> None:
        controller = MagicMock()
        controller.open.return_value = False
        with patch("launcher.webbrowser.get", side_effect=_browsers(default=controller)):
            with pytest.raises(LaunchError):
                open_url(URL, [SYSTEM_DEFAULT])

    def test_no_handler_is_a_launch_error(self) -> None:
        with patch("launcher.webbrowser.get", side_effect=_browsers()):
            with pytest.raises(LaunchError):
                open_url(URL, [SYSTEM_DEFAULT])


class TestLaunch:

    def test_normalizes_then_opens(self) -> None:
        controller = MagicMock()
        controller.open.return_value = True
        with patch("launcher.webbrowser.get", side_effect=_browsers(default=controller)):
            url, handler = launch("https://youtu.be/dQw4w9WgXcQ", LauncherConfig())
        assert url == URL
        assert handler is SYSTEM_DEFAULT
        controller.open.assert_called_once_with(URL)

    def test_invalid_input_never_opens(self) -> None:
        with patch("launcher.webbrowser.get") as get:
            with pytest.raises(InvalidURLError):
                launch("https://example.com/watch?v=xyz", LauncherConfig())
        get.assert_not_called()

    def test_uses_configured_host_policy(self) -> None:
        config = LauncherConfig(host_policy=HostPolicy.ALLOW_LIST)
        with pytest.raises(InvalidURLError):
            launch("https://notyoutube.com/watch?v=abc12345", config)
