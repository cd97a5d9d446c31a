# vwo_e2e/modules/login_module.py

import logging
import time

from selenium.webdriver.remote.webdriver import WebDriver

from vwo_e2e.config.config import ERROR_MESSAGES, POLL_INTERVAL
from vwo_e2e.core.logging_config import log_step
from vwo_e2e.page_objects.login_page import LoginPage
from vwo_e2e.testdata.types import LoginCredentials

default_logger = logging.getLogger(__name__)

# Time for the login page to show an error after a rejected sign-in (ms)
ERROR_RESPONSE_TIMEOUT = 10000

# Client-side validation gives no signal to wait for, the form just gets a moment to react (s)
FORM_SETTLE_SECONDS = 2


class LoginModule:
    """Business-flow layer for login: orchestrates LoginPage actions and checks."""

    context = "LoginModule"

    def __init__(self, driver: WebDriver, logger: logging.Logger = None):
        self.driver = driver
        self.logger = logger or default_logger
        self.login_page = LoginPage(driver, logger=self.logger)

    def _step(self, number: int, description: str):
        log_step(self.logger, number, description, context=self.context)

    def navigate_to_login(self):
        """Navigate to login page and verify it loaded"""
        self._step(1, "Navigate to VWO login page")
        self.login_page.navigate()
        assert "Login - VWO" in self.login_page.title, f"Unexpected page title: {self.login_page.title!r}"

    def login(self, email: str, password: str):
        self._step(2, "Enter credentials")
        self.login_page.enter_email(email)
        self.login_page.enter_password(password)

        self._step(3, "Click Sign In button")
        self.login_page.click_sign_in()

    def login_as(self, credentials: LoginCredentials):
        """Enter a credentials pair and sign in"""
        self.login(credentials.email, credentials.password)

    def login_with_invalid_credentials(self, email: str, password: str):
        """Attempt login with invalid credentials and wait until the page reacts"""
        self.navigate_to_login()
        self.login(email, password)

        self._step(4, "Wait for error response")
        self.login_page.waits.wait_for_condition(
            self.login_page.is_error_message_visible,
            timeout=ERROR_RESPONSE_TIMEOUT,
            interval=POLL_INTERVAL,
            message="invalid login error message to be displayed",
        )

    def verify_invalid_login_error(self):
        self._step(5, "Verify error message is displayed")
        assert self.login_page.is_error_message_visible(), "Invalid login error message is not visible"

        error_text = self.login_page.get_error_message_text()
        assert ERROR_MESSAGES["invalid_login"] in error_text, f"Unexpected error message: {error_text!r}"
        self.logger.info(f'Error message verified: "{error_text}"', extra={"context": self.context})

    def submit_with_empty_email(self, password: str):
        self.navigate_to_login()

        self._step(2, "Enter password only (empty email)")
        self.login_page.enter_password(password)

        self._step(3, "Click Sign In button")
        self.login_page.click_sign_in()

        time.sleep(FORM_SETTLE_SECONDS)

    def submit_with_empty_password(self, email: str):
        self.navigate_to_login()

        self._step(2, "Enter email only (empty password)")
        self.login_page.enter_email(email)

        self._step(3, "Click Sign In button")
        self.login_page.click_sign_in()

        time.sleep(FORM_SETTLE_SECONDS)

    def verify_still_on_login_page(self):
        self._step(4, "Verify user stays on login page")
        assert "login" in self.login_page.current_url, f"Left the login page: {self.login_page.current_url}"

    def capture_evidence(self, name: str) -> str:
        """Take screenshot for evidence"""
        self.logger.info(f"Capturing screenshot: {name}", extra={"context": self.context})
        return self.login_page.take_screenshot(name)

    def perform_negative_login_test(self, email: str, password: str):
        """Complete negative login test flow"""
        self.login_with_invalid_credentials(email, password)
        self.verify_invalid_login_error()
        self.capture_evidence("vwo-negative-login-error")
