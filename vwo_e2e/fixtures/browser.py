# vwo_e2e/fixtures/browser.py

import logging
import re

import pytest
from selenium import webdriver
# From webdriver_manager for easier driver handling
from selenium.webdriver.chrome.service import Service as ChromeService
from webdriver_manager.chrome import ChromeDriverManager
from selenium.webdriver.firefox.service import Service as FirefoxService
from webdriver_manager.firefox import GeckoDriverManager

from vwo_e2e.config.config import (
    BROWSER,
    HEADLESS,
    NAVIGATION_TIMEOUT,
    RUN_E2E,
    SCREENSHOT,
    VIEWPORT,
)
from vwo_e2e.core.logging_config import get_logger, setup_logging
from vwo_e2e.modules.login_module import LoginModule
from vwo_e2e.page_objects.base_page import BasePage
from vwo_e2e.page_objects.login_page import LoginPage
from vwo_e2e.testdata.types import default_credentials, load_users_data
from vwo_e2e.utils.exceptions import ConfigurationError
from vwo_e2e.utils.wait_helpers import WaitHelper

logger = logging.getLogger(__name__)


def build_driver(browser: str = BROWSER, headless: bool = HEADLESS):
    """Creates a local WebDriver for the configured browser."""
    if browser == "chrome":
        options = webdriver.ChromeOptions()
        if headless:
            options.add_argument("--headless=new")
        options.add_argument("--ignore-certificate-errors")
        service = ChromeService(ChromeDriverManager().install())
        driver = webdriver.Chrome(service=service, options=options)
    elif browser == "firefox":
        options = webdriver.FirefoxOptions()
        if headless:
            options.add_argument("-headless")
        options.accept_insecure_certs = True
        service = FirefoxService(GeckoDriverManager().install())
        driver = webdriver.Firefox(service=service, options=options)
    else:
        raise ConfigurationError(f"Unsupported browser: {browser}")

    driver.set_window_size(VIEWPORT["width"], VIEWPORT["height"])
    driver.set_page_load_timeout(NAVIGATION_TIMEOUT / 1000)
    return driver


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    setup_logging()


@pytest.fixture(scope="session")  # Driver is created once per test session
def driver():
    """Provides a WebDriver instance for browser tests."""
    if not RUN_E2E:
        pytest.skip("Browser tests are disabled, set RUN_E2E=true to run them.")

    logger.info(f"Setting up WebDriver for browser: {BROWSER}")
    driver = build_driver()

    yield driver  # Provide the driver instance to the test

    # Teardown: runs after the test session is finished
    logger.info("Quitting WebDriver.")
    driver.quit()


@pytest.fixture
def clean_driver(driver):
    """Session driver with cookies cleared before each test."""
    driver.delete_all_cookies()
    return driver


@pytest.fixture
def login_page(clean_driver):
    return LoginPage(clean_driver, logger=get_logger("pages"))


@pytest.fixture
def login_module(clean_driver):
    return LoginModule(clean_driver, logger=get_logger("modules"))


@pytest.fixture
def wait_helper(clean_driver):
    return WaitHelper(clean_driver, logger=get_logger("waits"))


@pytest.fixture(scope="session")
def users_data():
    return load_users_data()


@pytest.fixture(scope="session")
def test_user():
    """Valid account from TEST_USERNAME / TEST_PASSWORD."""
    return default_credentials()


def should_capture_screenshot(mode: str, failed: bool) -> bool:
    """`on` captures after every test, `only-on-failure` after failed ones, anything else never."""
    if mode == "on":
        return True
    return mode == "only-on-failure" and failed


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when != "call" or not should_capture_screenshot(SCREENSHOT, report.failed):
        return

    driver = item.funcargs.get("clean_driver")
    if driver is None:
        return
    # Parametrized ids carry brackets and spaces
    name = re.sub(r"[^\w.-]+", "_", item.name)
    BasePage(driver, logger=get_logger("evidence")).take_screenshot(name)
