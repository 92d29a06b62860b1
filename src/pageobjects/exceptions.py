"""Exceptions raised by the page object layer.

Driver faults (NoSuchElementException, StaleElementReferenceException, ...)
are never wrapped; they reach the caller exactly as Selenium raised them.
"""

from typing import Optional

from selenium.common.exceptions import TimeoutException


class PageObjectError(Exception):
    """Base exception for errors originating in this library."""


class InvalidConstruction(PageObjectError, ValueError):
    """A Component was built without exactly one of a locator or an element."""


class TimeoutExceeded(PageObjectError, TimeoutException):
    """A wait-until condition did not become true within its time budget."""

    def __init__(self, timeout_ms: float, description: Optional[str] = None):
        self.timeout_ms = timeout_ms
        self.description = description
        what = description or "condition"
        TimeoutException.__init__(self, f"Timed out after {timeout_ms}ms waiting for {what}")
