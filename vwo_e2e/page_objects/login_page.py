# vwo_e2e/page_objects/login_page.py

from selenium.webdriver.common.by import By

from vwo_e2e.config.config import BASE_URL, ERROR_MESSAGES
from .base_page import BasePage


class LoginPage(BasePage):
    """Page Object for the VWO login page. Locators and simple UI actions only."""

    context = "LoginPage"

    # --- Locators ---
    # Accessible names first, CSS only where the page exposes nothing better
    EMAIL_INPUT = (By.CSS_SELECTOR, 'input[aria-label="Email address"], input#login-username')
    PASSWORD_INPUT = (By.CSS_SELECTOR, 'input[aria-label="Password"], input#login-password')
    SIGN_IN_BUTTON = (By.XPATH, '//button[normalize-space(.)="Sign in"]')
    FORGOT_PASSWORD_LINK = (By.XPATH, '//button[contains(., "Forgot Password?")]')
    REMEMBER_ME_CHECKBOX = (By.CSS_SELECTOR, '[class*="remember"]')
    GOOGLE_SIGN_IN_BUTTON = (By.XPATH, '//button[contains(., "Sign in with Google")]')
    SSO_SIGN_IN_BUTTON = (By.XPATH, '//button[contains(., "Sign in using SSO")]')
    PASSKEY_SIGN_IN_BUTTON = (By.XPATH, '//button[contains(., "Sign in with Passkey")]')
    ERROR_MESSAGE = (By.XPATH, f'//*[contains(text(), "{ERROR_MESSAGES["invalid_login"]}")]')
    START_FREE_TRIAL_LINK = (By.XPATH, '//a[contains(., "Start a free trial")]')
    TOGGLE_PASSWORD_VISIBILITY = (By.CSS_SELECTOR, 'button[aria-label="Toggle password visibility"]')

    # --- Simple UI actions ---

    def navigate(self):
        self.open(BASE_URL)
        self.waits.wait_for_dom_content_loaded()

    def enter_email(self, email: str):
        self._action("Fill", f"Email: {email}")
        field = self.waits.wait_for_visible(self.EMAIL_INPUT)
        field.clear()
        field.send_keys(email)

    def enter_password(self, password: str):
        # Never log the password itself
        self._action("Fill", "Password: ****")
        field = self.waits.wait_for_visible(self.PASSWORD_INPUT)
        field.clear()
        field.send_keys(password)

    def click_sign_in(self):
        self._action("Click", "Sign In Button")
        self.waits.wait_for_clickable(self.SIGN_IN_BUTTON).click()

    def click_forgot_password(self):
        self._action("Click", "Forgot Password Link")
        self.waits.wait_for_clickable(self.FORGOT_PASSWORD_LINK).click()

    def click_google_sign_in(self):
        self._action("Click", "Google Sign In Button")
        self.waits.wait_for_clickable(self.GOOGLE_SIGN_IN_BUTTON).click()

    def toggle_password_visibility(self):
        self._action("Click", "Toggle Password Visibility")
        self.waits.wait_for_clickable(self.TOGGLE_PASSWORD_VISIBILITY).click()

    def is_error_message_visible(self) -> bool:
        return self.is_visible(self.ERROR_MESSAGE)

    def get_error_message_text(self) -> str:
        elements = self.find_elements(self.ERROR_MESSAGE)
        return elements[0].text if elements else ""
