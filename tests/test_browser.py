"""Browser tests."""

from unittest.mock import call

import pytest
from pydantic import ValidationError

from pageobjects import Browser, Rect, WindowRect, WindowSize


class TestNavigation:

    def test_close_quits_session(self, driver) -> None:
        Browser(driver).close()
        driver.quit.assert_called_once_with()

    def test_get_url(self, driver) -> None:
        driver.current_url = "https://example.org/home"
        assert Browser(driver).get_url() == "https://example.org/home"

    def test_go_back(self, driver) -> None:
        Browser(driver).go_back()
        driver.back.assert_called_once_with()

    def test_go_forward(self, driver) -> None:
        Browser(driver).go_forward()
        driver.forward.assert_called_once_with()

    def test_go_to(self, driver) -> None:
        Browser(driver).go_to("https://example.org/login")
        driver.get.assert_called_once_with("https://example.org/login")

    def test_refresh(self, driver) -> None:
        Browser(driver).refresh()
        driver.refresh.assert_called_once_with()

    def test_take_screenshot(self, driver) -> None:
        driver.get_screenshot_as_base64.return_value = "iVBORw0KGgo="
        assert Browser(driver).take_screenshot() == "iVBORw0KGgo="


class TestWindowSize:

    @pytest.mark.parametrize("size, expected", [
        (WindowSize.FULLSCREEN, call.fullscreen_window()),
        (WindowSize.MAXIMIZED, call.maximize_window()),
        (WindowSize.MINIMIZED, call.minimize_window()),
    ])
    def test_named_states_call_only_their_operation(self, driver, size, expected) -> None:
        Browser(driver).set_size(size)

        assert driver.method_calls == [expected]

    def test_partial_rect_dict(self, driver) -> None:
        Browser(driver).set_size({"x": 120})

        assert driver.method_calls == [call.set_window_rect(x=120)]
        assert type(driver.set_window_rect.call_args.kwargs["x"]) is int

    def test_window_rect_model(self, driver) -> None:
        Browser(driver).set_size(WindowRect(x=0, y=0))

        assert driver.method_calls == [call.set_window_rect(x=0, y=0)]

    def test_rect_from_get_size_is_sent_as_ints(self, driver) -> None:
        Browser(driver).set_size(Rect(x=10.0, width=1280.0))

        kwargs = driver.set_window_rect.call_args.kwargs
        assert kwargs == {"x": 10, "width": 1280}
        assert all(type(v) is int for v in kwargs.values())

    def test_unknown_keys_are_rejected(self, driver) -> None:
        with pytest.raises(ValidationError):
            Browser(driver).set_size({"w": 100})

        driver.set_window_rect.assert_not_called()

    def test_fractional_values_are_rejected(self, driver) -> None:
        with pytest.raises(ValidationError):
            Browser(driver).set_size({"width": 100.5})

        driver.set_window_rect.assert_not_called()

    def test_rect_model(self, driver) -> None:
        Browser(driver).set_size(Rect(width=1280, height=800))

        assert driver.method_calls == [call.set_window_rect(width=1280, height=800)]

    def test_get_size(self, driver) -> None:
        driver.get_window_rect.return_value = {"x": 0, "y": 0, "width": 1024, "height": 768}

        assert Browser(driver).get_size() == Rect(x=0, y=0, width=1024, height=768)
