# vwo_e2e/utils/retry.py

"""
Bounded retry and bounded polling primitives.

Both helpers are stateless per call: every call builds its own policy and
timing state, so concurrent calls on one instance never interfere. The only
suspension points are the inter-attempt delay and the inter-poll interval.
"""

import asyncio
import inspect
import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, TypeVar, Union

from .exceptions import PollTimeoutError

default_logger = logging.getLogger(__name__)

T = TypeVar("T")

Operation = Callable[[], Awaitable[T]]
Predicate = Callable[[], Union[bool, Awaitable[bool]]]

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_RETRY_DELAY_MS = 1000
DEFAULT_POLL_INTERVAL_MS = 500
DEFAULT_FAILURE_MESSAGE = "Condition not met"


@dataclass(frozen=True)
class RetryPolicy:
    """Total attempts and the fixed delay between them."""
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    retry_delay_ms: int = DEFAULT_RETRY_DELAY_MS

    def __post_init__(self):
        if self.retry_delay_ms < 0:
            raise ValueError(f"retry_delay_ms must be non-negative, got {self.retry_delay_ms}")

    @property
    def attempts(self) -> int:
        # A non-positive attempt count still runs the operation once
        return max(1, self.max_attempts)


@dataclass(frozen=True)
class PollPolicy:
    """Polling budget, interval and the message used for the timeout error."""
    timeout_ms: int
    interval_ms: int = DEFAULT_POLL_INTERVAL_MS
    failure_message: str = DEFAULT_FAILURE_MESSAGE

    def __post_init__(self):
        if self.timeout_ms < 0:
            raise ValueError(f"timeout_ms must be non-negative, got {self.timeout_ms}")
        if self.interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {self.interval_ms}")


class RetryableRequestExecutor:
    """Re-attempts a failing async operation a bounded number of times with a fixed delay."""

    context = "ApiHelper"

    def __init__(self, logger: Optional[logging.Logger] = None, sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep):
        self.logger = logger or default_logger
        self._sleep = sleep

    async def execute(self, operation: Operation, max_attempts: int = DEFAULT_MAX_ATTEMPTS, retry_delay_ms: int = DEFAULT_RETRY_DELAY_MS):
        """Runs `operation` until it succeeds or attempts run out, re-raising the last error."""
        return await self.execute_with_policy(operation, RetryPolicy(max_attempts, retry_delay_ms))

    async def execute_with_policy(self, operation: Operation, policy: RetryPolicy):
        attempts = policy.attempts
        last_error: Optional[Exception] = None

        for attempt in range(1, attempts + 1):
            try:
                return await operation()
            except Exception as e:
                # Every failure is retried the same way, whatever its type
                last_error = e
                self.logger.warning(f"Attempt {attempt}/{attempts} failed: {e}", extra={"context": self.context})

                if attempt < attempts:
                    await self._sleep(policy.retry_delay_ms / 1000)

        raise last_error


class ConditionPoller:
    """Re-evaluates a predicate at a fixed interval until it holds or the deadline passes."""

    context = "WaitHelper"

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.logger = logger or default_logger
        self._sleep = sleep
        self._clock = clock

    async def wait_until(
        self,
        predicate: Predicate,
        timeout_ms: int,
        interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
        failure_message: str = DEFAULT_FAILURE_MESSAGE,
    ) -> None:
        """Returns once `predicate` is true, raises PollTimeoutError when the budget is spent."""
        await self.wait_until_policy(predicate, PollPolicy(timeout_ms, interval_ms, failure_message))

    async def wait_until_policy(self, predicate: Predicate, policy: PollPolicy) -> None:
        self.logger.debug(f"Waiting for condition: {policy.failure_message}", extra={"context": self.context})
        start = self._clock()

        # First evaluation is unconditional; later ones re-check the deadline first
        while True:
            result = predicate()
            if inspect.isawaitable(result):
                result = await result
            if result:
                return

            await self._sleep(policy.interval_ms / 1000)
            if (self._clock() - start) * 1000 >= policy.timeout_ms:
                break

        raise PollTimeoutError(policy.failure_message, policy.timeout_ms)
