r"""Synchronous request client with layered configuration.

This module provides the ``RequestClient`` class. A client holds a default
``RequestConfig`` set at construction time; every request merges its own
configuration over these defaults before being sent through an
``httpx.Client``.
"""

from __future__ import annotations

__all__ = ["RequestClient"]

from typing import TYPE_CHECKING, Any

import httpx

from requestsmith.core.body import serialize_json
from requestsmith.core.config import DEFAULT_TIMEOUT, RequestConfig
from requestsmith.core.resolver import ResolvedRequest, resolve_request
from requestsmith.core.transport import send_request
from requestsmith.core.validation import validate_timeout

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from types import TracebackType
    from typing import Self


class RequestClient:
    r"""Synchronous HTTP client with default request settings.

    The defaults are defined once and never modified afterwards. Each call
    provides a ``RequestConfig`` whose non-empty fields take precedence
    over the defaults; headers and query parameters are merged key by key.

    The client can be used as a context manager. An ``httpx.Client``
    created by ``RequestClient`` is closed on exit (or by ``close()``),
    while a client passed by the caller is left open.

    Args:
        defaults: The default request configuration. If ``None``, the
            defaults are empty.
        client: Optional ``httpx.Client`` used to send the requests.
            If ``None``, a new client is created with ``timeout``.
        timeout: Maximum seconds to wait for the server response.
            Only used if ``client`` is ``None``. Must be > 0.
        serializer: Optional function encoding request bodies. If ``None``,
            bodies are encoded as compact JSON.

    Example:
        ```pycon
        >>> from requestsmith import RequestClient, RequestConfig
        >>> defaults = RequestConfig(
        ...     base_url="https://api.example.com/v1",
        ...     headers={"Authorization": "Bearer token"},
        ... )
        >>> with RequestClient(defaults) as client:  # doctest: +SKIP
        ...     users = client.get("users", RequestConfig(params={"page": "2"}))
        ...     created = client.post("users", RequestConfig(body={"name": "Ada"}))
        ...

        ```
    """

    def __init__(
        self,
        defaults: RequestConfig | None = None,
        *,
        client: httpx.Client | None = None,
        timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
        serializer: Callable[[Mapping[str, Any]], bytes] | None = None,
    ) -> None:
        validate_timeout(timeout)
        self._defaults: RequestConfig = defaults if defaults is not None else RequestConfig()
        self._owns_client = client is None
        self._client: httpx.Client = client or httpx.Client(timeout=timeout)
        self._serializer = serializer or serialize_json

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(defaults={self._defaults!r})"

    def __enter__(self) -> Self:
        if self._owns_client:
            self._client.__enter__()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._owns_client:
            self._client.__exit__(exc_type, exc_val, exc_tb)

    @property
    def defaults(self) -> RequestConfig:
        r"""The default request configuration."""
        return self._defaults

    def close(self) -> None:
        r"""Close the underlying ``httpx.Client`` if this client created
        it."""
        if self._owns_client:
            self._client.close()

    def resolve(self, config: RequestConfig | None = None) -> ResolvedRequest:
        r"""Resolve a request without sending it.

        Args:
            config: The per-call configuration. ``None`` means an empty
                configuration.

        Returns:
            The request that ``request(config)`` would send.

        Raises:
            MethodMissingError: If no method is configured.
            InvalidMethodError: If the method is not supported.
            URLParseError: If a URL is malformed or cannot be made absolute.
            SerializationError: If the body cannot be encoded.

        Example:
            ```pycon
            >>> from requestsmith import RequestClient, RequestConfig
            >>> client = RequestClient(RequestConfig(base_url="http://api.example.com/v1"))
            >>> resolved = client.resolve(RequestConfig(method="GET", url="users"))
            >>> str(resolved.url)
            'http://api.example.com/v1/users'
            >>> client.close()

            ```
        """
        return resolve_request(self._defaults, config, serializer=self._serializer)

    def request(self, config: RequestConfig | None = None) -> httpx.Response:
        r"""Resolve a request and send it.

        Args:
            config: The per-call configuration. ``None`` means an empty
                configuration.

        Returns:
            An httpx.Response object containing the server's HTTP response.

        Raises:
            MethodMissingError: If no method is configured.
            InvalidMethodError: If the method is not supported.
            URLParseError: If a URL is malformed or cannot be made absolute.
            SerializationError: If the body cannot be encoded.
            TransportError: If httpx fails to send the request.
        """
        return send_request(self._client, self.resolve(config))

    def get(self, url: str, config: RequestConfig | None = None) -> httpx.Response:
        r"""Send an HTTP GET request.

        Args:
            url: The target URL, absolute or relative to the base URL.
            config: Optional per-call configuration. Its ``url`` and
                ``method`` are replaced; the object itself is not modified.

        Returns:
            An httpx.Response object containing the server's HTTP response.
        """
        return self._request_with_method("GET", url, config)

    def post(self, url: str, config: RequestConfig | None = None) -> httpx.Response:
        r"""Send an HTTP POST request.

        See ``get()`` for the arguments.
        """
        return self._request_with_method("POST", url, config)

    def put(self, url: str, config: RequestConfig | None = None) -> httpx.Response:
        r"""Send an HTTP PUT request.

        See ``get()`` for the arguments.
        """
        return self._request_with_method("PUT", url, config)

    def delete(self, url: str, config: RequestConfig | None = None) -> httpx.Response:
        r"""Send an HTTP DELETE request.

        See ``get()`` for the arguments.
        """
        return self._request_with_method("DELETE", url, config)

    def patch(self, url: str, config: RequestConfig | None = None) -> httpx.Response:
        r"""Send an HTTP PATCH request.

        See ``get()`` for the arguments.
        """
        return self._request_with_method("PATCH", url, config)

    def head(self, url: str, config: RequestConfig | None = None) -> httpx.Response:
        r"""Send an HTTP HEAD request.

        See ``get()`` for the arguments.
        """
        return self._request_with_method("HEAD", url, config)

    def options(self, url: str, config: RequestConfig | None = None) -> httpx.Response:
        r"""Send an HTTP OPTIONS request.

        See ``get()`` for the arguments.
        """
        return self._request_with_method("OPTIONS", url, config)

    def _request_with_method(
        self, method: str, url: str, config: RequestConfig | None
    ) -> httpx.Response:
        config = config if config is not None else RequestConfig()
        return self.request(config.merge(url=url, method=method))
