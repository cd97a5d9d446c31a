# vwo_e2e/utils/wait_helpers.py

import asyncio
import logging
import re
from typing import Callable, Optional, Pattern, Union

from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.common.by import By
from selenium.webdriver.support.ui import WebDriverWait
from selenium.webdriver.support import expected_conditions as EC
from selenium.common.exceptions import TimeoutException

from vwo_e2e.config.config import DEFAULT_TIMEOUT, POLL_INTERVAL
from .exceptions import E2EError
from .retry import ConditionPoller, DEFAULT_FAILURE_MESSAGE

default_logger = logging.getLogger(__name__)


class WaitHelper:
    """Custom wait conditions for a WebDriver session. All timeouts are in milliseconds."""

    context = "WaitHelper"

    def __init__(
        self,
        driver: WebDriver,
        default_timeout: int = DEFAULT_TIMEOUT,
        logger: Optional[logging.Logger] = None,
        poller: Optional[ConditionPoller] = None,
    ):
        self.driver = driver
        self.default_timeout = default_timeout
        self.logger = logger or default_logger
        self.poller = poller or ConditionPoller(logger=self.logger)

    def _debug(self, message: str):
        self.logger.debug(message, extra={"context": self.context})

    def _until(self, condition, timeout: Optional[int], description: str):
        """Runs a WebDriverWait and logs before re-raising on timeout."""
        seconds = (self.default_timeout if timeout is None else timeout) / 1000
        try:
            return WebDriverWait(self.driver, seconds).until(condition)
        except TimeoutException:
            self.logger.error(f"Timeout waiting for {description}", extra={"context": self.context})
            raise  # Re-raise the exception

    def wait_for_visible(self, locator: tuple, timeout: Optional[int] = None):
        """Wait for element to be visible"""
        self._debug(f"Waiting for element to be visible: {locator}")
        return self._until(EC.visibility_of_element_located(locator), timeout, f"element located by {locator} to be visible")

    def wait_for_clickable(self, locator: tuple, timeout: Optional[int] = None):
        self._debug(f"Waiting for element to be clickable: {locator}")
        return self._until(EC.element_to_be_clickable(locator), timeout, f"element located by {locator} to be clickable")

    def wait_for_hidden(self, locator: tuple, timeout: Optional[int] = None):
        """Wait for element to be hidden (or gone from the DOM)"""
        self._debug(f"Waiting for element to be hidden: {locator}")
        self._until(EC.invisibility_of_element_located(locator), timeout, f"element located by {locator} to become invisible")

    def wait_for_text(self, text: str, timeout: Optional[int] = None):
        """Wait for text to appear on page"""
        self._debug(f'Waiting for text: "{text}"')
        self._until(lambda driver: text in driver.find_element(By.TAG_NAME, "body").text, timeout, f"text '{text}'")

    def wait_for_text_in_element(self, locator: tuple, text: str, timeout: Optional[int] = None):
        self._debug(f"Waiting for text '{text}' in element: {locator}")
        self._until(EC.text_to_be_present_in_element(locator, text), timeout, f"text '{text}' in element located by {locator}")

    def wait_for_url(self, url_pattern: Union[str, Pattern], timeout: Optional[int] = None):
        """Wait for URL to contain a path or match a compiled pattern"""
        self._debug(f"Waiting for URL pattern: {url_pattern}")
        if isinstance(url_pattern, re.Pattern):
            condition = EC.url_matches(url_pattern.pattern)
        else:
            condition = EC.url_contains(url_pattern)
        self._until(condition, timeout, f"URL pattern {url_pattern}")

    def wait_for_dom_content_loaded(self, timeout: Optional[int] = None):
        self._debug("Waiting for DOM content loaded")
        self._until(
            lambda driver: driver.execute_script("return document.readyState") in ("interactive", "complete"),
            timeout,
            "DOM content loaded",
        )

    def wait_for_condition(
        self,
        condition: Callable,
        timeout: Optional[int] = None,
        interval: int = POLL_INTERVAL,
        message: str = DEFAULT_FAILURE_MESSAGE,
    ):
        """Custom wait with polling for synchronous callers. `condition` may be a plain or an async callable."""
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            pass
        else:
            raise E2EError("wait_for_condition cannot run inside an event loop, await wait_for_condition_async instead")

        # WebDriver calls are blocking, the poll loop gets its own event loop
        asyncio.run(self.wait_for_condition_async(condition, timeout, interval, message))

    async def wait_for_condition_async(
        self,
        condition: Callable,
        timeout: Optional[int] = None,
        interval: int = POLL_INTERVAL,
        message: str = DEFAULT_FAILURE_MESSAGE,
    ):
        """Custom wait with polling, for callers already running an event loop."""
        timeout = self.default_timeout if timeout is None else timeout
        await self.poller.wait_until(condition, timeout, interval, message)
