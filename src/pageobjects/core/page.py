import logging
from typing import List, Optional, Type

from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from ..data_models import WaitSettings
from .component import Component, Locator, T, build_component, build_components

logger = logging.getLogger(__name__)


class Page:
    """
    Represents a web page. Acts as the root scope for the Components on it.

    Example:
        class LoginPage(Page):
            @property
            def username(self) -> Component:
                return self.create_component((By.ID, "username"))
    """

    def __init__(self, driver: WebDriver, wait_settings: Optional[WaitSettings] = None):
        self._driver = driver
        self.wait_settings: WaitSettings = wait_settings or WaitSettings()

    @property
    def driver(self) -> WebDriver:
        return self._driver

    def get_title(self) -> str:
        return self._driver.title

    def find_element(self, by: str = By.ID, value: Optional[str] = None) -> WebElement:
        return self._driver.find_element(by, value)

    def find_elements(self, by: str = By.ID, value: Optional[str] = None) -> List[WebElement]:
        return self._driver.find_elements(by, value)

    def create_component(self, locator: Locator, component_class: Optional[Type[T]] = None) -> T:
        """Creates a Component (or `component_class` instance) located anywhere on this page."""
        return build_component(self._driver, locator, self._driver, component_class, self.wait_settings)

    def create_components(self, locator: Locator, component_class: Optional[Type[T]] = None) -> List[T]:
        """Creates one Component per element on this page matching `locator`."""
        return build_components(self._driver, locator, self._driver, component_class, self.wait_settings)
