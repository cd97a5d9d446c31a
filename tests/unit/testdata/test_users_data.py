# tests/unit/testdata/test_users_data.py

import httpx

from vwo_e2e.testdata import types as types_mod
from vwo_e2e.testdata.types import (
    ApiResponse,
    InvalidEmailTestCase,
    LoginCredentials,
    User,
    default_credentials,
    load_users_data,
)


def test_load_users_data():
    data = load_users_data()

    assert data.invalid_user == User("dummyuser@test.com", "dummypassword123")
    assert data.empty_credentials == User("", "")
    assert len(data.invalid_email_formats) == 5
    assert all(isinstance(case, InvalidEmailTestCase) for case in data.invalid_email_formats)
    assert "OR" in data.sql_injection.email
    assert "<script>" in data.xss_attempt.email


def test_api_response_success():
    response = ApiResponse.from_httpx(httpx.Response(200, json={"token": "abc"}))

    assert response.success is True
    assert response.status_code == 200
    assert response.data == {"token": "abc"}
    assert response.error is None


def test_api_response_failure_keeps_body_text():
    response = ApiResponse.from_httpx(httpx.Response(401, text="Unauthorized"))

    assert response.success is False
    assert response.data is None
    assert response.error == "Unauthorized"


def test_default_credentials_come_from_config(mocker):
    mocker.patch.dict(types_mod.TEST_USER, {"email": "qa@example.com", "password": "pw-from-env"})

    credentials = default_credentials()

    assert isinstance(credentials, LoginCredentials)
    assert credentials == LoginCredentials("qa@example.com", "pw-from-env")
