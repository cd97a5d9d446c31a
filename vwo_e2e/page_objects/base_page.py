# vwo_e2e/page_objects/base_page.py

import logging
import os

from selenium.webdriver.remote.webdriver import WebDriver

from vwo_e2e.config.config import DEFAULT_TIMEOUT, SCREENSHOT_DIR
from vwo_e2e.core.logging_config import log_page_action
from vwo_e2e.utils.wait_helpers import WaitHelper

default_logger = logging.getLogger(__name__)


class BasePage:
    """Base class for all Page Objects."""

    context = "BasePage"

    def __init__(self, driver: WebDriver, logger: logging.Logger = None):
        self.driver = driver
        self.logger = logger or default_logger
        self.waits = WaitHelper(driver, DEFAULT_TIMEOUT, logger=self.logger)  # Common wait object

    def _action(self, action: str, element: str):
        log_page_action(self.logger, action, element, context=self.context)

    def open(self, url: str):
        """Navigates to a given URL."""
        self._action("Navigate", url)
        self.driver.get(url)

    def find_element(self, locator: tuple):
        """Finds an element using a locator."""
        return self.driver.find_element(*locator)

    def find_elements(self, locator: tuple):
        """Finds multiple elements using a locator."""
        return self.driver.find_elements(*locator)

    @property
    def title(self) -> str:
        return self.driver.title

    @property
    def current_url(self) -> str:
        return self.driver.current_url

    def is_visible(self, locator: tuple) -> bool:
        """True when at least one element matches the locator and is displayed."""
        elements = self.find_elements(locator)
        return bool(elements) and elements[0].is_displayed()

    def take_screenshot(self, name: str) -> str:
        """Saves a PNG screenshot under the results directory and returns its path."""
        os.makedirs(SCREENSHOT_DIR, exist_ok=True)
        path = os.path.join(SCREENSHOT_DIR, f"{name}.png")
        self.driver.save_screenshot(path)
        self.logger.info(f"Screenshot saved: {path}", extra={"context": self.context})
        return path
