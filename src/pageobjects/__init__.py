"""
Page Object Model helpers for Selenium WebDriver.

Public API:
- Browser: window, navigation and session operations.
- Page: page-level queries; root scope for Components.
- Component: a handle to one element with actions, queries and wait_until_* helpers.
"""

from .core import Browser, Component, ConfigLoader, Page, Scope
from .core.component import Locator
from .data_models import Rect, WaitSettings, WindowRect, WindowSize
from .exceptions import InvalidConstruction, PageObjectError, TimeoutExceeded
from .utils import setup_logger, wait_until

__all__ = [
    "Browser",
    "Component",
    "ConfigLoader",
    "InvalidConstruction",
    "Locator",
    "Page",
    "PageObjectError",
    "Rect",
    "Scope",
    "TimeoutExceeded",
    "WaitSettings",
    "WindowRect",
    "WindowSize",
    "setup_logger",
    "wait_until",
]
