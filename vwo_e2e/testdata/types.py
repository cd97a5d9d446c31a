# vwo_e2e/testdata/types.py

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Generic, List, Optional, TypeVar

from vwo_e2e.config.config import TEST_USER

T = TypeVar("T")

USERS_DATA_PATH = Path(__file__).with_name("users.json")


@dataclass(frozen=True)
class User:
    email: str
    password: str


# Same shape as User, kept separate for call sites that only deal with a form submission
LoginCredentials = User


@dataclass(frozen=True)
class InvalidEmailTestCase:
    email: str
    password: str
    description: str


@dataclass(frozen=True)
class UsersTestData:
    valid_user: User
    invalid_user: User
    empty_credentials: User
    invalid_email_formats: List[InvalidEmailTestCase]
    special_character_passwords: List[InvalidEmailTestCase]
    sql_injection: User
    xss_attempt: User

    @classmethod
    def from_dict(cls, raw: dict) -> "UsersTestData":
        """Builds the test data from the camelCase JSON layout of users.json."""
        return cls(
            valid_user=User(**raw["validUser"]),
            invalid_user=User(**raw["invalidUser"]),
            empty_credentials=User(**raw["emptyCredentials"]),
            invalid_email_formats=[InvalidEmailTestCase(**case) for case in raw["invalidEmailFormats"]],
            special_character_passwords=[InvalidEmailTestCase(**case) for case in raw["specialCharacterPasswords"]],
            sql_injection=User(**raw["sqlInjection"]),
            xss_attempt=User(**raw["xssAttempt"]),
        )


@dataclass
class ApiResponse(Generic[T]):
    success: bool
    status_code: int
    data: Optional[T] = None
    error: Optional[str] = None
    headers: dict = field(default_factory=dict)

    @classmethod
    def from_httpx(cls, response: Any) -> "ApiResponse":
        """Wraps an httpx.Response; the body is parsed as JSON when possible."""
        try:
            body = response.json()
        except ValueError:
            body = None
        return cls(
            success=response.is_success,
            status_code=response.status_code,
            data=body if response.is_success else None,
            error=None if response.is_success else (response.text or response.reason_phrase),
            headers=dict(response.headers),
        )


def load_users_data(path: Path = USERS_DATA_PATH) -> UsersTestData:
    with open(path, encoding="utf-8") as f:
        return UsersTestData.from_dict(json.load(f))


def default_credentials() -> LoginCredentials:
    """Credentials of the configured test account."""
    return LoginCredentials(email=TEST_USER["email"], password=TEST_USER["password"])
