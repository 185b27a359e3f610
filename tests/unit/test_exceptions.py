from __future__ import annotations

import httpx
import pytest

from requestsmith.exceptions import (
    InvalidMethodError,
    MethodMissingError,
    RequestBuildError,
    SerializationError,
    TransportError,
    URLParseError,
)

TEST_URL = "https://api.example.com/data"


@pytest.mark.parametrize(
    "error",
    [
        MethodMissingError(),
        InvalidMethodError("FETCH"),
        URLParseError(url="http://bad", message="Invalid URL"),
        SerializationError("Cannot serialize"),
        TransportError(method="GET", url=TEST_URL, message="failed"),
    ],
)
def test_errors_share_base_class(error: RequestBuildError) -> None:
    assert isinstance(error, RequestBuildError)
    assert isinstance(error, Exception)
    assert str(error) == error.message


def test_method_missing_error_message() -> None:
    assert MethodMissingError().message == "Please provide a request method"


def test_invalid_method_error() -> None:
    error = InvalidMethodError("get")
    assert error.method == "get"
    assert str(error) == "Provided method is invalid: 'get'"


def test_invalid_method_error_custom_message() -> None:
    assert InvalidMethodError("get", message="nope").message == "nope"


def test_url_parse_error() -> None:
    error = URLParseError(url="http://bad:port", message="Invalid URL 'http://bad:port'")
    assert error.url == "http://bad:port"
    assert str(error) == "Invalid URL 'http://bad:port'"


def test_transport_error() -> None:
    cause = httpx.ConnectError("Connection refused")
    error = TransportError(method="POST", url=TEST_URL, message="POST failed", cause=cause)
    assert error.method == "POST"
    assert error.url == TEST_URL
    assert error.cause is cause


def test_transport_error_repr() -> None:
    error = TransportError(method="GET", url=TEST_URL, message="failed")
    assert repr(error) == f"TransportError(method='GET', url='{TEST_URL}')"
