# vwo_e2e/utils/api_helper.py

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx

from vwo_e2e.config.config import API_RETRIES, API_RETRY_DELAY, API_TIMEOUT
from .retry import RetryableRequestExecutor

default_logger = logging.getLogger(__name__)


@dataclass
class ApiRequestOptions:
    """Per-request options. `timeout` and `retry_delay` are in milliseconds."""
    headers: Dict[str, str] = field(default_factory=dict)
    data: Any = None
    params: Optional[Dict[str, str]] = None
    timeout: Optional[int] = API_TIMEOUT
    retries: int = API_RETRIES
    retry_delay: int = API_RETRY_DELAY


class ApiHelper:
    """HTTP request helper with retry logic."""

    context = "ApiHelper"

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str = "",
        default_headers: Optional[Dict[str, str]] = None,
        logger: Optional[logging.Logger] = None,
        executor: Optional[RetryableRequestExecutor] = None,
    ):
        self.client = client
        self.base_url = base_url
        self.logger = logger or default_logger
        self.executor = executor or RetryableRequestExecutor(logger=self.logger)
        self.default_headers = {
            "Content-Type": "application/json",
            **(default_headers or {}),
        }

    async def _request(self, method: str, endpoint: str, options: Optional[ApiRequestOptions], send_body: bool) -> httpx.Response:
        options = options or ApiRequestOptions()
        url = f"{self.base_url}{endpoint}"
        self.logger.debug(f"{method} {url}", extra={"context": self.context})

        kwargs: Dict[str, Any] = {
            "headers": {**self.default_headers, **options.headers},
        }
        if options.params is not None:
            kwargs["params"] = options.params
        if send_body and options.data is not None:
            kwargs["json"] = options.data
        if options.timeout is not None:
            kwargs["timeout"] = options.timeout / 1000

        # Status codes are returned to the caller as-is, only transport errors are retried
        return await self.executor.execute(
            lambda: self.client.request(method, url, **kwargs),
            options.retries,
            options.retry_delay,
        )

    async def get(self, endpoint: str, options: Optional[ApiRequestOptions] = None) -> httpx.Response:
        """Make GET request"""
        return await self._request("GET", endpoint, options, send_body=False)

    async def post(self, endpoint: str, options: Optional[ApiRequestOptions] = None) -> httpx.Response:
        """Make POST request"""
        return await self._request("POST", endpoint, options, send_body=True)

    async def put(self, endpoint: str, options: Optional[ApiRequestOptions] = None) -> httpx.Response:
        """Make PUT request"""
        return await self._request("PUT", endpoint, options, send_body=True)

    async def patch(self, endpoint: str, options: Optional[ApiRequestOptions] = None) -> httpx.Response:
        """Make PATCH request"""
        return await self._request("PATCH", endpoint, options, send_body=True)

    async def delete(self, endpoint: str, options: Optional[ApiRequestOptions] = None) -> httpx.Response:
        """Make DELETE request"""
        return await self._request("DELETE", endpoint, options, send_body=False)

    def set_auth_token(self, token: str):
        self.default_headers["Authorization"] = f"Bearer {token}"

    def clear_auth_token(self):
        self.default_headers.pop("Authorization", None)
