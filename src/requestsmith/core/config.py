r"""Configuration dataclass and constants for request building.

This module provides the ``RequestConfig`` dataclass used both for the
client-wide defaults and for the per-call configuration, together with the
constants that drive request resolution.
"""

from __future__ import annotations

__all__ = [
    "CONTENT_TYPE_HEADER",
    "DEFAULT_CONTENT_TYPE",
    "DEFAULT_TIMEOUT",
    "METHODS_WITHOUT_BODY",
    "SUPPORTED_METHODS",
    "RequestConfig",
]

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any


# Default timeout in seconds for the httpx clients created by requestsmith
DEFAULT_TIMEOUT = 10.0

# HTTP methods accepted by the request resolver (exact, case-sensitive match)
SUPPORTED_METHODS = frozenset({"GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"})

# HTTP methods that never carry a request body
METHODS_WITHOUT_BODY = frozenset({"GET", "HEAD", "OPTIONS"})

CONTENT_TYPE_HEADER = "Content-Type"
DEFAULT_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class RequestConfig:
    """Layered request configuration.

    The same dataclass describes the defaults of a client and the
    configuration of a single call. When a request is resolved, every
    non-empty per-call field takes precedence over the default one.
    ``headers`` and ``params`` are merged key by key, all the other fields
    are replaced as a whole.

    The mappings are copied on construction and stored read-only, so
    neither mutating a dictionary after passing it to ``RequestConfig``
    nor writing to ``config.headers`` alters the configuration.

    Args:
        base_url: Base URL used to resolve a relative ``url``.
        url: Absolute URL, or URL relative to ``base_url``.
        method: HTTP method, one of ``SUPPORTED_METHODS``.
        headers: Request headers.
        params: Query parameters.
        body: JSON-serializable request body.

    Example:
        ```pycon
        >>> from requestsmith.core.config import RequestConfig
        >>> defaults = RequestConfig(base_url="https://api.example.com/v1", method="GET")
        >>> defaults.method
        'GET'
        >>> config = defaults.merge(method="POST", body={"name": "Ada"})
        >>> config.method
        'POST'
        >>> defaults.method  # Original unchanged
        'GET'

        ```
    """

    base_url: str = ""
    url: str = ""
    method: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)
    params: Mapping[str, str] = field(default_factory=dict)
    body: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only copies of the caller's mappings
        for name in ("headers", "params", "body"):
            value = MappingProxyType(dict(getattr(self, name) or {}))
            object.__setattr__(self, name, value)

    def merge(self, **overrides: Any) -> RequestConfig:
        """Create a new config with specified fields replaced.

        Only non-None override values are applied. Unlike request
        resolution, mappings given here replace the current ones as a
        whole.

        Args:
            **overrides: Keyword arguments for the fields to replace.

        Returns:
            A new ``RequestConfig`` instance with overrides applied.

        Example:
            ```pycon
            >>> from requestsmith.core.config import RequestConfig
            >>> config = RequestConfig(url="users")
            >>> config.merge(url="teams", method=None).url
            'teams'

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary with one entry per field. Mappings are copied.

        Example:
            ```pycon
            >>> from requestsmith.core.config import RequestConfig
            >>> RequestConfig(method="GET").to_dict()["method"]
            'GET'

            ```
        """
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            data[f.name] = dict(value) if isinstance(value, Mapping) else value
        return data
