"""
Python client for the Smooth Operator Agent Tools server.

The server is a locally installed executable that performs desktop
automation (screenshots, mouse, keyboard, Windows UI automation, Chrome,
C# execution). This package starts it, discovers the port it bound to,
waits until it answers, and forwards calls to it over HTTP.

Usage:
    from smooth_operator import SmoothOperatorClient

    async with SmoothOperatorClient(api_key="...") as client:
        await client.start_server()
        await client.mouse.click(100, 200)
"""

from .client import SmoothOperatorClient
from .session import ClientSession
from .api import (
    AutomationApi,
    ChromeApi,
    CodeApi,
    KeyboardApi,
    MouseApi,
    ScreenshotApi,
    SystemApi,
)
from .errors import (
    SmoothOperatorError,
    AlreadyConfiguredError,
    StartInProgressError,
    InstallationMissingError,
    InstallationError,
    SpawnError,
    HandshakeTimeoutError,
    PortFileError,
    ServerUnresponsiveError,
    BaseUrlNotSetError,
    HttpStatusError,
    ResponseParseError,
)
from .models import *  # noqa: F401,F403
from . import models as _models

__all__ = [
    "SmoothOperatorClient",
    "ClientSession",
    "AutomationApi",
    "ChromeApi",
    "CodeApi",
    "KeyboardApi",
    "MouseApi",
    "ScreenshotApi",
    "SystemApi",
    "SmoothOperatorError",
    "AlreadyConfiguredError",
    "StartInProgressError",
    "InstallationMissingError",
    "InstallationError",
    "SpawnError",
    "HandshakeTimeoutError",
    "PortFileError",
    "ServerUnresponsiveError",
    "BaseUrlNotSetError",
    "HttpStatusError",
    "ResponseParseError",
    *_models.__all__,
]
