r"""Unit tests for the request resolution pipeline."""

from __future__ import annotations

from unittest.mock import Mock

import httpx
import pytest

from requestsmith.core import RequestConfig, ResolvedRequest, resolve_request
from requestsmith.exceptions import (
    InvalidMethodError,
    MethodMissingError,
    SerializationError,
    URLParseError,
)

#####################################
#     Tests for resolve_request     #
#####################################


def test_resolve_request_full(defaults: RequestConfig) -> None:
    resolved = resolve_request(
        defaults,
        RequestConfig(
            method="POST",
            url="users",
            headers={"X-Request-Id": "42"},
            params={"page": "2"},
            body={"name": "Ada"},
        ),
    )
    assert resolved == ResolvedRequest(
        method="POST",
        url=httpx.URL("http://api.example.com/v1/users?format=json&page=2"),
        headers={
            "X-Api-Key": "secret",
            "X-Request-Id": "42",
            "Content-Type": "application/json",
        },
        params={"format": "json", "page": "2"},
        content=b'{"name":"Ada"}',
    )


def test_resolve_request_none_config() -> None:
    resolved = resolve_request(RequestConfig(method="GET", url="http://api.example.com/ping"))
    assert resolved.method == "GET"
    assert str(resolved.url) == "http://api.example.com/ping"
    assert resolved.headers == {"Content-Type": "application/json"}
    assert resolved.params == {}
    assert resolved.content is None


def test_resolve_request_method_missing(defaults: RequestConfig) -> None:
    with pytest.raises(MethodMissingError):
        resolve_request(defaults, RequestConfig(url="users"))


def test_resolve_request_invalid_method(defaults: RequestConfig) -> None:
    with pytest.raises(InvalidMethodError):
        resolve_request(defaults, RequestConfig(method="FETCH", url="users"))


def test_resolve_request_method_checked_before_url() -> None:
    """Test that resolution stops at the first failing stage."""
    with pytest.raises(MethodMissingError):
        resolve_request(RequestConfig(), RequestConfig(url="http://bad.com:port"))


def test_resolve_request_url_checked_before_body() -> None:
    serializer = Mock(return_value=b"{}")
    with pytest.raises(URLParseError):
        resolve_request(
            RequestConfig(),
            RequestConfig(method="POST", url="http://bad.com:port", body={"a": 1}),
            serializer=serializer,
        )
    serializer.assert_not_called()


def test_resolve_request_serialization_error(defaults: RequestConfig) -> None:
    with pytest.raises(SerializationError):
        resolve_request(defaults, RequestConfig(method="POST", url="x", body={"a": object()}))


def test_resolve_request_get_ignores_unserializable_body(defaults: RequestConfig) -> None:
    resolved = resolve_request(
        defaults, RequestConfig(method="GET", url="users", body={"a": object()})
    )
    assert resolved.content is None


def test_resolve_request_default_body() -> None:
    defaults = RequestConfig(base_url="http://api.example.com", body={"a": 1})
    resolved = resolve_request(defaults, RequestConfig(method="POST", url="items"))
    assert resolved.content == b'{"a":1}'


def test_resolve_request_default_method() -> None:
    defaults = RequestConfig(base_url="http://api.example.com", method="PUT")
    assert resolve_request(defaults, RequestConfig(url="items")).method == "PUT"


def test_resolve_request_query_merge() -> None:
    defaults = RequestConfig(base_url="http://api.example.com", params={"a": "1"})
    resolved = resolve_request(
        defaults, RequestConfig(method="GET", url="search", params={"a": "2", "b": "3"})
    )
    assert resolved.params == {"a": "2", "b": "3"}
    assert resolved.url.params == httpx.QueryParams({"a": "2", "b": "3"})


def test_resolve_request_query_merge_keeps_url_query() -> None:
    resolved = resolve_request(
        RequestConfig(params={"a": "1"}),
        RequestConfig(method="GET", url="http://api.example.com/search?q=x&a=0"),
    )
    assert resolved.url.params == httpx.QueryParams({"q": "x", "a": "1"})


def test_resolve_request_header_merge() -> None:
    defaults = RequestConfig(
        base_url="http://api.example.com", headers={"X": "1", "Content-Type": "text/plain"}
    )
    resolved = resolve_request(defaults, RequestConfig(method="GET", headers={"X": "2"}))
    assert resolved.headers == {"X": "2", "Content-Type": "text/plain"}


def test_resolve_request_is_idempotent(defaults: RequestConfig) -> None:
    config = RequestConfig(method="PATCH", url="users/1", body={"name": "Ada"}, params={"v": "2"})
    first = resolve_request(defaults, config)
    second = resolve_request(defaults, config)
    assert first == second
    assert str(first.url) == str(second.url)
    assert first.content == second.content


def test_resolve_request_does_not_mutate_inputs(defaults: RequestConfig) -> None:
    config = RequestConfig(method="GET", url="users", headers={"X": "1"}, params={"p": "1"})
    snapshot = (defaults.to_dict(), config.to_dict())
    resolved = resolve_request(defaults, config)
    resolved.headers["Y"] = "2"
    resolved.params["q"] = "2"
    assert (defaults.to_dict(), config.to_dict()) == snapshot


#####################################
#     Tests for ResolvedRequest     #
#####################################


def test_resolved_request_to_httpx() -> None:
    resolved = ResolvedRequest(
        method="POST",
        url=httpx.URL("http://api.example.com/users?page=1"),
        headers={"Content-Type": "application/json", "X": "1"},
        params={"page": "1"},
        content=b'{"a":1}',
    )
    with httpx.Client() as client:
        request = resolved.to_httpx(client)
    assert request.method == "POST"
    assert request.url == httpx.URL("http://api.example.com/users?page=1")
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["X"] == "1"
    assert request.content == b'{"a":1}'


def test_resolved_request_to_httpx_without_body() -> None:
    resolved = ResolvedRequest(
        method="GET",
        url=httpx.URL("http://api.example.com/users"),
        headers={"Content-Type": "application/json"},
        params={},
    )
    with httpx.Client() as client:
        request = resolved.to_httpx(client)
    assert request.content == b""
