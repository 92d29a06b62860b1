import logging
from typing import Any, Dict, Union

from selenium.webdriver.remote.webdriver import WebDriver

from ..data_models import Rect, WindowRect, WindowSize

logger = logging.getLogger(__name__)


class Browser:
    """Browser window and session level operations for a WebDriver session."""

    def __init__(self, driver: WebDriver):
        self._driver = driver

    @property
    def driver(self) -> WebDriver:
        return self._driver

    def close(self) -> None:
        """Closes the browser window and ends the WebDriver session."""
        logger.info("Closing WebDriver session.")
        self._driver.quit()

    def get_url(self) -> str:
        return self._driver.current_url

    def go_back(self) -> None:
        logger.info("Navigating back.")
        self._driver.back()

    def go_forward(self) -> None:
        logger.info("Navigating forward.")
        self._driver.forward()

    def go_to(self, url: str) -> None:
        logger.info(f"Navigating to {url}")
        self._driver.get(url)

    def refresh(self) -> None:
        logger.info("Refreshing current page.")
        self._driver.refresh()

    def take_screenshot(self) -> str:
        """Returns a base-64 encoded PNG of the current page."""
        return self._driver.get_screenshot_as_base64()

    def get_size(self) -> Rect:
        """Current window position and size."""
        return Rect(**self._driver.get_window_rect())

    def set_size(self, size: Union[WindowSize, WindowRect, Rect, Dict[str, Any]]) -> None:
        """
        Sizes the browser window.

        Args:
            size: one of the WindowSize states, or a (partial) rectangle given as a
                  WindowRect, a Rect (e.g. from get_size) or a dict with any of
                  x, y, width, height. Only the given fields are sent to the driver.

        Raises:
            pydantic.ValidationError: for unknown keys or non-integer values.
        """
        if size is WindowSize.FULLSCREEN:
            logger.info("Setting window to fullscreen.")
            self._driver.fullscreen_window()
        elif size is WindowSize.MAXIMIZED:
            logger.info("Maximizing window.")
            self._driver.maximize_window()
        elif size is WindowSize.MINIMIZED:
            logger.info("Minimizing window.")
            self._driver.minimize_window()
        else:
            if isinstance(size, WindowRect):
                rect = size
            elif isinstance(size, Rect):
                rect = WindowRect(**size.model_dump(exclude_none=True))
            else:
                rect = WindowRect(**size)
            kwargs = rect.to_window_rect_kwargs()
            logger.info(f"Setting window rect to {kwargs}")
            self._driver.set_window_rect(**kwargs)
