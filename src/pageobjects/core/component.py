import logging
from typing import Callable, List, Optional, Protocol, Tuple, Type, TypeVar, Union

from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from ..data_models import Rect, WaitSettings
from ..exceptions import InvalidConstruction
from ..utils.selenium_waits import wait_until

logger = logging.getLogger(__name__)

# (By.<strategy>, value), e.g. (By.CSS_SELECTOR, "button.submit")
Locator = Tuple[str, str]

T = TypeVar("T", bound="Component")


class Scope(Protocol):
    """Anything a Locator can be resolved within: a WebDriver, a WebElement, a Page or a Component."""

    def find_element(self, by: str = By.ID, value: Optional[str] = None) -> WebElement: ...

    def find_elements(self, by: str = By.ID, value: Optional[str] = None) -> List[WebElement]: ...


class Component:
    """
    Page Object Component: a handle to one element on the page plus convenience operations.

    A Component is built in exactly one of two ways:

    * ``Component.from_locator(driver, locator, scope)``: the element is looked up
      through ``scope`` every time it is needed and never cached, so the Component
      always reflects the current DOM.
    * ``Component.from_element(driver, element)``: wraps an already resolved
      WebElement, which is kept for the Component's whole life.

    Example:
        class SearchBox(Component):
            def search(self, text: str) -> None:
                self.create_component((By.CSS_SELECTOR, "input")).send_keys(text, Keys.ENTER)

        box = page.create_component((By.ID, "search"), component_class=SearchBox)
        box.wait_until_displayed()
        box.search("selenium")
    """

    def __init__(self,
                 driver: WebDriver,
                 *,
                 locator: Optional[Locator] = None,
                 scope: Optional[Scope] = None,
                 element: Optional[WebElement] = None,
                 wait_settings: Optional[WaitSettings] = None):
        if driver is None:
            raise InvalidConstruction("A driver must be provided to create a Component.")
        if element is None and locator is None:
            raise InvalidConstruction("Either 'locator' or 'element' must be provided to create a Component.")
        if element is not None and locator is not None:
            raise InvalidConstruction("Only one of 'locator' or 'element' may be provided to create a Component.")
        if element is not None and scope is not None:
            raise InvalidConstruction("'scope' only applies to Components built from a locator.")

        self._driver = driver
        self._locator: Optional[Locator] = (locator[0], locator[1]) if locator is not None else None
        self._scope: Optional[Scope] = (scope if scope is not None else driver) if locator is not None else None
        self._element: Optional[WebElement] = element
        self.wait_settings: WaitSettings = wait_settings or WaitSettings()

    @classmethod
    def from_locator(cls: Type[T],
                     driver: WebDriver,
                     locator: Locator,
                     scope: Optional[Scope] = None,
                     wait_settings: Optional[WaitSettings] = None) -> T:
        """Builds a Component resolved through `scope` (the whole page when omitted) on every use."""
        return cls(driver, locator=locator, scope=scope, wait_settings=wait_settings)

    @classmethod
    def from_element(cls: Type[T],
                     driver: WebDriver,
                     element: WebElement,
                     wait_settings: Optional[WaitSettings] = None) -> T:
        """Builds a Component around an already resolved WebElement."""
        return cls(driver, element=element, wait_settings=wait_settings)

    def __repr__(self) -> str:
        if self._locator is not None:
            return f"{type(self).__name__}(locator={self._locator!r})"
        return f"{type(self).__name__}(element={self._element!r})"

    # --- Properties ---

    @property
    def driver(self) -> WebDriver:
        return self._driver

    @property
    def locator(self) -> Optional[Locator]:
        return self._locator

    @property
    def scope(self) -> Optional[Scope]:
        return self._scope

    # --- Element resolution ---

    def get_element(self) -> WebElement:
        """
        Returns the WebElement this Component represents.

        Element-built Components return their cached element. Locator-built
        Components perform a fresh find_element through their scope on every call;
        NoSuchElementException propagates unchanged.
        """
        if self._element is not None:
            return self._element
        by, value = self._locator  # type: ignore[misc]
        return self._scope.find_element(by, value)  # type: ignore[union-attr]

    def find_element(self, by: str = By.ID, value: Optional[str] = None) -> WebElement:
        """Finds a WebElement within this Component."""
        return self.get_element().find_element(by, value)

    def find_elements(self, by: str = By.ID, value: Optional[str] = None) -> List[WebElement]:
        """Finds all WebElements within this Component."""
        return self.get_element().find_elements(by, value)

    # --- Factories ---

    def create_component(self, locator: Locator, component_class: Optional[Type[T]] = None) -> T:
        """
        Convenience method for instantiating a Component within the scope of this Component.

        Args:
            locator: Locator of the child, resolved relative to this Component.
            component_class: Component subclass to instantiate. Defaults to Component.
        """
        return build_component(self._driver, locator, self, component_class, self.wait_settings)

    def create_components(self, locator: Locator, component_class: Optional[Type[T]] = None) -> List[T]:
        """
        Creates one element-built Component per match of `locator` within this Component,
        in document order.
        """
        return build_components(self._driver, locator, self, component_class, self.wait_settings)

    # --- Actions ---

    def _actions(self) -> ActionChains:
        return ActionChains(self._driver)

    def clear(self) -> None:
        """Clears the value if this Component is an INPUT or TEXTAREA element."""
        self.get_element().clear()

    def click(self) -> None:
        self.get_element().click()

    def context_click(self) -> None:
        """Performs a context/right click on this Component."""
        element = self.get_element()
        self._actions().context_click(element).perform()

    def double_click(self) -> None:
        element = self.get_element()
        self._actions().double_click(element).perform()

    def drag_and_drop_onto(self, target: "Component") -> None:
        """Drags this Component and drops it on `target`."""
        element = self.get_element()
        target_element = target.get_element()
        self._actions().drag_and_drop(element, target_element).perform()

    def hover_click(self) -> None:
        """
        Moves the mouse over this Component and left-clicks it. Useful for elements
        that only become interactable while hovered.
        """
        element = self.get_element()
        self._actions().click(element).perform()

    def send_keys(self, *keys: Union[str, int]) -> None:
        """Types the given key sequence into this Component (all arguments form one sequence)."""
        self.get_element().send_keys(*keys)

    def submit(self) -> None:
        """Submits the form this Component belongs to, or the form itself."""
        self.get_element().submit()

    def take_screenshot(self, scroll: bool = False) -> str:
        """
        Takes a screenshot of the visible area of this Component.

        Args:
            scroll: scroll the Component into view before taking the screenshot.

        Returns:
            The base-64 encoded PNG.
        """
        element = self.get_element()
        if scroll:
            self._driver.execute_script("arguments[0].scrollIntoView(true);", element)
        return element.screenshot_as_base64

    # --- Queries ---

    def get_attribute(self, name: str) -> Optional[str]:
        return self.get_element().get_attribute(name)

    def get_css_value(self, name: str) -> str:
        return self.get_element().value_of_css_property(name)

    def get_geometry(self) -> Rect:
        """Location and size of this Component's bounding rectangle."""
        return Rect(**self.get_element().rect)

    def get_tag_name(self) -> str:
        return self.get_element().tag_name

    def get_text(self, raw: bool = False) -> str:
        """
        Gets the text of this Component as it is rendered to the user, or, with
        `raw=True`, the element's `textContent` as present in the HTML.
        """
        element = self.get_element()
        if raw:
            return element.get_attribute('textContent')
        return element.text

    def is_displayed(self) -> bool:
        return self.get_element().is_displayed()

    def is_enabled(self) -> bool:
        """True unless the element's `disabled` attribute is the string "true"."""
        return self.get_element().get_attribute('disabled') != 'true'

    def is_present(self) -> bool:
        """
        True if this Component can currently be found in its scope.

        Element-built Components are always present. Locator-built Components
        query their scope on every call; an empty result is False, not an error.
        """
        if self._element is not None:
            return True
        by, value = self._locator  # type: ignore[misc]
        return len(self._scope.find_elements(by, value)) > 0  # type: ignore[union-attr]

    def is_selected(self) -> bool:
        return self.get_element().is_selected()

    # --- Waits ---

    def _wait_until(self, condition: Callable[[], bool], timeout_ms: Optional[float], description: str) -> None:
        if timeout_ms is None:
            timeout_ms = self.wait_settings.default_timeout_ms
        wait_until(
            condition,
            timeout_ms=timeout_ms,
            poll_interval_ms=self.wait_settings.poll_interval_ms,
            description=f"{self!r} to be {description}",
        )

    def wait_until_displayed(self, timeout_ms: Optional[float] = None) -> None:
        self._wait_until(lambda: self.is_displayed(), timeout_ms, "displayed")

    def wait_until_enabled(self, timeout_ms: Optional[float] = None) -> None:
        self._wait_until(lambda: self.is_enabled(), timeout_ms, "enabled")

    def wait_until_present(self, timeout_ms: Optional[float] = None) -> None:
        self._wait_until(lambda: self.is_present(), timeout_ms, "present")

    def wait_until_selected(self, timeout_ms: Optional[float] = None) -> None:
        self._wait_until(lambda: self.is_selected(), timeout_ms, "selected")


def build_component(driver: WebDriver,
                    locator: Locator,
                    scope: Scope,
                    component_class: Optional[Type[T]] = None,
                    wait_settings: Optional[WaitSettings] = None) -> T:
    """Instantiates `component_class` (default Component) from `locator` within `scope`."""
    cls = component_class or Component
    logger.debug(f"Creating {cls.__name__} for {locator!r}.")
    return cls.from_locator(driver, locator, scope=scope, wait_settings=wait_settings)  # type: ignore[return-value]


def build_components(driver: WebDriver,
                     locator: Locator,
                     scope: Scope,
                     component_class: Optional[Type[T]] = None,
                     wait_settings: Optional[WaitSettings] = None) -> List[T]:
    """Instantiates one element-built `component_class` per match of `locator` within `scope`."""
    cls = component_class or Component
    by, value = locator
    elements = scope.find_elements(by, value)
    logger.debug(f"Found {len(elements)} element(s) for {locator!r}; creating {cls.__name__} instances.")
    return [cls.from_element(driver, element, wait_settings=wait_settings) for element in elements]  # type: ignore[misc]
