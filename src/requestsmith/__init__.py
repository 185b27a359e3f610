r"""requestsmith - HTTP request builder with layered configuration.

This package lets you define default request settings once (base URL,
method, headers, query parameters, JSON body) and send individual requests
that only specify what differs. The two layers are merged deterministically
into a fully specified request, which is then sent with httpx.

Key Features:
    - Per-call settings take precedence over client defaults
    - Headers and query parameters merged key by key
    - Absolute URLs or URLs relative to a base URL
    - JSON bodies, dropped for GET, HEAD and OPTIONS requests
    - ``Content-Type: application/json`` unless set explicitly
    - Fail-fast validation before any network interaction
    - Sync and async clients with a context manager API

Example:
    ```pycon
    >>> from requestsmith import RequestClient, RequestConfig
    >>> defaults = RequestConfig(
    ...     base_url="https://api.example.com/v1", headers={"X-Api-Key": "secret"}
    ... )
    >>> with RequestClient(defaults) as client:  # doctest: +SKIP
    ...     response = client.get("users", RequestConfig(params={"page": "1"}))
    ...     response = client.post("users", RequestConfig(body={"name": "Ada"}))
    ...

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncRequestClient",
    "InvalidMethodError",
    "MethodMissingError",
    "RequestBuildError",
    "RequestClient",
    "RequestConfig",
    "ResolvedRequest",
    "SerializationError",
    "TransportError",
    "URLParseError",
    "__version__",
    "resolve_request",
]

from importlib.metadata import PackageNotFoundError, version

from requestsmith.client import RequestClient
from requestsmith.client_async import AsyncRequestClient
from requestsmith.core.config import RequestConfig
from requestsmith.core.resolver import ResolvedRequest, resolve_request
from requestsmith.exceptions import (
    InvalidMethodError,
    MethodMissingError,
    RequestBuildError,
    SerializationError,
    TransportError,
    URLParseError,
)

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
