"""
Endpoint facades. Each one is a thin mapping from a method call to a fixed
path and request body on the client's dispatcher.
"""

from .automation import AutomationApi
from .chrome import ChromeApi
from .code import CodeApi
from .keyboard import KeyboardApi
from .mouse import MouseApi
from .screenshot import ScreenshotApi
from .system import SystemApi

__all__ = [
    "AutomationApi",
    "ChromeApi",
    "CodeApi",
    "KeyboardApi",
    "MouseApi",
    "ScreenshotApi",
    "SystemApi",
]
