# vwo_e2e/config/config.py

import os

from dotenv import load_dotenv

# Values from a local .env file; real environment variables take precedence
load_dotenv()


def _env_int(name: str, default: int) -> int:
    """Reads an integer environment variable, falling back to the default when unset or malformed."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# --- General Configuration ---
# The URL of the application under test
BASE_URL = os.getenv("BASE_URL", "https://app.vwo.com")

# Browser type to use for testing (chrome, firefox)
BROWSER = os.getenv("BROWSER", "chrome").lower()

# Browser tests need a real browser and network access, they only run when enabled
RUN_E2E = _env_bool("RUN_E2E", False)


# --- Timeouts (milliseconds) ---
DEFAULT_TIMEOUT = _env_int("DEFAULT_TIMEOUT", 30000)
API_TIMEOUT = _env_int("API_TIMEOUT", 30000)
NAVIGATION_TIMEOUT = _env_int("NAVIGATION_TIMEOUT", 60000)

# Interval between evaluations of a polled condition
POLL_INTERVAL = _env_int("POLL_INTERVAL", 500)


# --- Credentials (for development only - use env vars in CI) ---
# Valid account for flows that need a signed-in user
TEST_USER = {
    "email": os.getenv("TEST_USERNAME", "testuser@example.com"),
    "password": os.getenv("TEST_PASSWORD", "testpass123"),
}


# --- API Configuration ---
API_BASE_URL = os.getenv("API_BASE_URL", "https://api.vwo.com")
API_RETRIES = _env_int("API_RETRIES", 3)
API_RETRY_DELAY = _env_int("API_RETRY_DELAY", 1000)


# --- Browser Configuration ---
HEADLESS = os.getenv("HEADLESS", "true").lower() != "false"
VIEWPORT = {
    "width": _env_int("VIEWPORT_WIDTH", 1280),
    "height": _env_int("VIEWPORT_HEIGHT", 720),
}


# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")


# --- Evidence ---
# Screenshot capture after each browser test: on, off or only-on-failure
SCREENSHOT = os.getenv("SCREENSHOT", "only-on-failure")
SCREENSHOT_DIR = os.getenv("SCREENSHOT_DIR", "test-results")


# --- Test Data Constants ---
TEST_DATA = {
    "invalid_credentials": {
        "email": "dummyuser@test.com",
        "password": "dummypassword123",
    },
    "invalid_email_formats": [
        "no-at-sign.com",
        "@no-local-part.com",
        "multiple@@at.com",
        "no.domain@",
        "spaces in@email.com",
    ],
}

# --- Error Messages shown by the login page ---
ERROR_MESSAGES = {
    "invalid_login": "Your email, password, IP address or location did not match",
    "required_field": "This field is required",
    "invalid_email": "Please enter a valid email address",
}
