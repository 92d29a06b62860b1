"""
Shared fixtures.

Selenium collaborators are replaced by unittest.mock doubles; no browser is started.
"""

from unittest.mock import MagicMock

import pytest
from selenium.webdriver.common.by import By

from pageobjects import WaitSettings


def make_mock_element(name: str = "element") -> MagicMock:
    """A WebElement double; child lookups return further doubles."""
    element = MagicMock(name=name)
    element.find_elements.return_value = []
    return element


@pytest.fixture
def element() -> MagicMock:
    return make_mock_element()


@pytest.fixture
def driver(element: MagicMock) -> MagicMock:
    """A WebDriver double whose find_element returns the `element` fixture."""
    driver = MagicMock(name="driver")
    driver.find_element.return_value = element
    driver.find_elements.return_value = [element]
    return driver


@pytest.fixture
def locator():
    return (By.CSS_SELECTOR, ".target-class")


@pytest.fixture
def fast_waits() -> WaitSettings:
    """Short budgets so timeout tests stay quick."""
    return WaitSettings(default_timeout_ms=200, poll_interval_ms=10)
