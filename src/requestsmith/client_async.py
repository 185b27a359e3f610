r"""Asynchronous request client with layered configuration.

This module provides the ``AsyncRequestClient`` class, the asyncio
counterpart of ``RequestClient``. Request resolution is identical; only the
dispatch goes through an ``httpx.AsyncClient``.
"""

from __future__ import annotations

__all__ = ["AsyncRequestClient"]

from typing import TYPE_CHECKING, Any

import httpx

from requestsmith.core.body import serialize_json
from requestsmith.core.config import DEFAULT_TIMEOUT, RequestConfig
from requestsmith.core.resolver import ResolvedRequest, resolve_request
from requestsmith.core.transport import send_request_async
from requestsmith.core.validation import validate_timeout

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from types import TracebackType
    from typing import Self


class AsyncRequestClient:
    r"""Asynchronous HTTP client with default request settings.

    The defaults are read-only, so a single client can serve concurrent
    tasks. An ``httpx.AsyncClient`` created by ``AsyncRequestClient`` is
    closed on exit of the ``async with`` block (or by ``aclose()``), while
    a client passed by the caller is left open.

    Args:
        defaults: The default request configuration. If ``None``, the
            defaults are empty.
        client: Optional ``httpx.AsyncClient`` used to send the requests.
            If ``None``, a new client is created with ``timeout``.
        timeout: Maximum seconds to wait for the server response.
            Only used if ``client`` is ``None``. Must be > 0.
        serializer: Optional function encoding request bodies. If ``None``,
            bodies are encoded as compact JSON.

    Example:
        ```pycon
        >>> import asyncio
        >>> from requestsmith import AsyncRequestClient, RequestConfig
        >>> async def example():
        ...     defaults = RequestConfig(base_url="https://api.example.com/v1")
        ...     async with AsyncRequestClient(defaults) as client:
        ...         return await client.get("users")
        ...
        >>> asyncio.run(example())  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        defaults: RequestConfig | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
        serializer: Callable[[Mapping[str, Any]], bytes] | None = None,
    ) -> None:
        validate_timeout(timeout)
        self._defaults: RequestConfig = defaults if defaults is not None else RequestConfig()
        self._owns_client = client is None
        self._client: httpx.AsyncClient = client or httpx.AsyncClient(timeout=timeout)
        self._serializer = serializer or serialize_json

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(defaults={self._defaults!r})"

    async def __aenter__(self) -> Self:
        if self._owns_client:
            await self._client.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._owns_client:
            await self._client.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def defaults(self) -> RequestConfig:
        r"""The default request configuration."""
        return self._defaults

    async def aclose(self) -> None:
        r"""Close the underlying ``httpx.AsyncClient`` if this client
        created it."""
        if self._owns_client:
            await self._client.aclose()

    def resolve(self, config: RequestConfig | None = None) -> ResolvedRequest:
        r"""Resolve a request without sending it.

        Resolution does no I/O, so this method is synchronous.

        Args:
            config: The per-call configuration. ``None`` means an empty
                configuration.

        Returns:
            The request that ``request(config)`` would send.
        """
        return resolve_request(self._defaults, config, serializer=self._serializer)

    async def request(self, config: RequestConfig | None = None) -> httpx.Response:
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
        return await send_request_async(self._client, self.resolve(config))

    async def get(self, url: str, config: RequestConfig | None = None) -> httpx.Response:
        r"""Send an HTTP GET request.

        Args:
            url: The target URL, absolute or relative to the base URL.
            config: Optional per-call configuration. Its ``url`` and
                ``method`` are replaced; the object itself is not modified.

        Returns:
            An httpx.Response object containing the server's HTTP response.
        """
        return await self._request_with_method("GET", url, config)

    async def post(self, url: str, config: RequestConfig | None = None) -> httpx.Response:
        r"""Send an HTTP POST request."""
        return await self._request_with_method("POST", url, config)

    async def put(self, url: str, config: RequestConfig | None = None) -> httpx.Response:
        r"""Send an HTTP PUT request."""
        return await self._request_with_method("PUT", url, config)

    async def delete(self, url: str, config: RequestConfig | None = None) -> httpx.Response:
        r"""Send an HTTP DELETE request."""
        return await self._request_with_method("DELETE", url, config)

    async def patch(self, url: str, config: RequestConfig | None = None) -> httpx.Response:
        r"""Send an HTTP PATCH request."""
        return await self._request_with_method("PATCH", url, config)

    async def head(self, url: str, config: RequestConfig | None = None) -> httpx.Response:
        r"""Send an HTTP HEAD request."""
        return await self._request_with_method("HEAD", url, config)

    async def options(self, url: str, config: RequestConfig | None = None) -> httpx.Response:
        r"""Send an HTTP OPTIONS request."""
        return await self._request_with_method("OPTIONS", url, config)

    async def _request_with_method(
        self, method: str, url: str, config: RequestConfig | None
    ) -> httpx.Response:
        config = config if config is not None else RequestConfig()
        return await self.request(config.merge(url=url, method=method))
