# vwo_e2e/api/auth_api.py

import logging
from typing import Any, Dict, Optional

import httpx

from vwo_e2e.config.config import API_BASE_URL
from vwo_e2e.utils.api_helper import ApiHelper, ApiRequestOptions

default_logger = logging.getLogger(__name__)


class AuthApi:
    """Authentication API methods."""

    context = "AuthApi"

    def __init__(self, client: httpx.AsyncClient, base_url: str = API_BASE_URL, logger: Optional[logging.Logger] = None):
        self.logger = logger or default_logger
        self.api = ApiHelper(client, base_url, logger=self.logger)

    async def login(self, email: str, password: str) -> Dict[str, Any]:
        """Logs in and keeps the returned bearer token for subsequent calls."""
        self.logger.info(f"API Login: {email}", extra={"context": self.context})
        response = await self.api.post("/auth/login", ApiRequestOptions(data={"email": email, "password": password}))

        data = response.json()

        token = data.get("token") if response.is_success else None
        if token:
            self.api.set_auth_token(token)

        return data

    async def logout(self):
        self.logger.info("API Logout", extra={"context": self.context})
        await self.api.post("/auth/logout")
        self.api.clear_auth_token()

    async def get_current_user(self) -> Any:
        self.logger.info("Get current user", extra={"context": self.context})
        response = await self.api.get("/auth/me")
        return response.json()

    async def refresh_token(self, refresh_token: str) -> Dict[str, Any]:
        self.logger.info("Refresh token", extra={"context": self.context})
        response = await self.api.post("/auth/refresh", ApiRequestOptions(data={"refreshToken": refresh_token}))
        return response.json()

    async def register(self, user_data: Dict[str, str]) -> Any:
        """Registers a new user (`email`, `password`, `name`)."""
        self.logger.info(f"API Register: {user_data.get('email')}", extra={"context": self.context})
        response = await self.api.post("/auth/register", ApiRequestOptions(data=user_data))
        return response.json()
