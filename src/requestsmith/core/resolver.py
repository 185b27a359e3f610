r"""Assemble a fully specified request from the default and per-call
configurations.

Resolution runs the method, URL, body, query and header stages in this
order and stops at the first error. It only reads the configurations and
allocates a new ``ResolvedRequest``, so the same defaults can be shared by
concurrent calls.
"""

from __future__ import annotations

__all__ = ["ResolvedRequest", "resolve_request"]

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from requestsmith.core.body import resolve_body, serialize_json
from requestsmith.core.config import RequestConfig
from requestsmith.core.merge import encode_params, merge_headers, merge_params
from requestsmith.core.method import resolve_method
from requestsmith.core.url import resolve_url

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    import httpx


@dataclass(frozen=True)
class ResolvedRequest:
    """A request ready to be sent.

    Args:
        method: The HTTP method.
        url: The absolute URL, query parameters included.
        headers: The merged headers.
        params: The merged query parameters.
        content: The serialized body, or ``None``.
    """

    method: str
    url: httpx.URL
    headers: dict[str, str]
    params: dict[str, str]
    content: bytes | None = None

    def to_httpx(self, client: httpx.Client | httpx.AsyncClient) -> httpx.Request:
        """Build the ``httpx.Request`` for this request.

        Args:
            client: The client that will send the request. Its own
                settings (timeout, extensions) are applied by
                ``build_request``.

        Returns:
            The request to send.
        """
        return client.build_request(
            method=self.method,
            url=self.url,
            headers=self.headers,
            content=self.content,
        )


def resolve_request(
    defaults: RequestConfig,
    config: RequestConfig | None = None,
    *,
    serializer: Callable[[Mapping[str, Any]], bytes] = serialize_json,
) -> ResolvedRequest:
    """Resolve a request from the client defaults and a per-call config.

    Args:
        defaults: The client defaults.
        config: The per-call configuration. ``None`` means an empty
            configuration.
        serializer: The function used to encode the body.

    Returns:
        The resolved request.

    Raises:
        MethodMissingError: If no method is configured.
        InvalidMethodError: If the method is not supported.
        URLParseError: If a URL is malformed or cannot be made absolute.
        SerializationError: If the body cannot be encoded.

    Example:
        ```pycon
        >>> from requestsmith.core import RequestConfig, resolve_request
        >>> defaults = RequestConfig(base_url="http://api.example.com/v1", params={"a": "1"})
        >>> resolved = resolve_request(defaults, RequestConfig(method="GET", url="users"))
        >>> str(resolved.url)
        'http://api.example.com/v1/users?a=1'
        >>> resolved.headers
        {'Content-Type': 'application/json'}

        ```
    """
    config = config if config is not None else RequestConfig()
    method = resolve_method(config.method, defaults.method)
    url = resolve_url(config.url, config.base_url, defaults.url, defaults.base_url)
    content = resolve_body(config.body, defaults.body, method, serializer=serializer)
    params = merge_params(defaults.params, config.params)
    headers = merge_headers(defaults.headers, config.headers)
    return ResolvedRequest(
        method=method,
        url=encode_params(url, params),
        headers=headers,
        params=params,
        content=content,
    )
