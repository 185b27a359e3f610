r"""Core request resolution logic.

This package contains the configuration dataclass, the resolution stages
(method, URL, body, headers and query parameters), the orchestration that
assembles them into a ``ResolvedRequest``, and the dispatch to httpx.
"""

from __future__ import annotations

__all__ = [
    "CONTENT_TYPE_HEADER",
    "DEFAULT_CONTENT_TYPE",
    "DEFAULT_TIMEOUT",
    "METHODS_WITHOUT_BODY",
    "SUPPORTED_METHODS",
    "RequestConfig",
    "ResolvedRequest",
    "encode_params",
    "join_url_path",
    "merge_headers",
    "merge_mappings",
    "merge_params",
    "method_accepts_body",
    "resolve_body",
    "resolve_method",
    "resolve_request",
    "resolve_url",
    "send_request",
    "send_request_async",
    "serialize_json",
    "validate_timeout",
]

from requestsmith.core.body import resolve_body, serialize_json
from requestsmith.core.config import (
    CONTENT_TYPE_HEADER,
    DEFAULT_CONTENT_TYPE,
    DEFAULT_TIMEOUT,
    METHODS_WITHOUT_BODY,
    SUPPORTED_METHODS,
    RequestConfig,
)
from requestsmith.core.merge import encode_params, merge_headers, merge_mappings, merge_params
from requestsmith.core.method import method_accepts_body, resolve_method
from requestsmith.core.resolver import ResolvedRequest, resolve_request
from requestsmith.core.transport import send_request, send_request_async
from requestsmith.core.url import join_url_path, resolve_url
from requestsmith.core.validation import validate_timeout
