# vwo_e2e/utils/exceptions.py


class E2EError(Exception):
    """Base class for errors raised by the suite itself."""


class ConfigurationError(E2EError):
    """Raised when the run configuration cannot be honoured (e.g. unsupported browser)."""


class PollTimeoutError(E2EError, TimeoutError):
    """Raised when a polled condition never became true within its budget."""

    def __init__(self, failure_message: str, timeout_ms: int | None = None):
        self.failure_message = failure_message
        self.timeout_ms = timeout_ms
        super().__init__(f"Timeout: {failure_message}")
