r"""Resolve and serialize the body of a request."""

from __future__ import annotations

__all__ = ["resolve_body", "serialize_json"]

import json
import logging
from typing import TYPE_CHECKING, Any

from requestsmith.core.method import method_accepts_body
from requestsmith.exceptions import SerializationError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

logger: logging.Logger = logging.getLogger(__name__)


def serialize_json(value: Mapping[str, Any]) -> bytes:
    """Serialize a value to compact UTF-8 JSON.

    NaN and infinite floats are rejected, like cyclic structures and
    objects JSON cannot represent.

    Raises:
        TypeError: If the value contains an unsupported type.
        ValueError: If the value is cyclic or contains NaN/infinity.

    Example:
        ```pycon
        >>> from requestsmith.core.body import serialize_json
        >>> serialize_json({"a": 1, "b": [True, None]})
        b'{"a":1,"b":[true,null]}'

        ```
    """
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False).encode(
        "utf-8"
    )


def resolve_body(
    body: Mapping[str, Any],
    default_body: Mapping[str, Any],
    method: str,
    serializer: Callable[[Mapping[str, Any]], bytes] = serialize_json,
) -> bytes | None:
    """Return the serialized body of a request, if any.

    The per-call body replaces the default body as a whole when it has at
    least one key.

    Args:
        body: The per-call body.
        default_body: The body of the client defaults.
        method: The resolved HTTP method.
        serializer: The function used to encode the body.

    Returns:
        The encoded body, or ``None`` if there is no body or if the method
        does not accept one. In the latter case the body is not
        serialized at all.

    Raises:
        SerializationError: If the serializer fails with ``TypeError``,
            ``ValueError`` or ``RecursionError`` (body nested too deeply).

    Example:
        ```pycon
        >>> from requestsmith.core.body import resolve_body
        >>> resolve_body({}, {"a": 1}, "POST")
        b'{"a":1}'
        >>> resolve_body({"a": 1}, {}, "GET") is None
        True

        ```
    """
    body = body or default_body
    if not body:
        return None
    if not method_accepts_body(method):
        logger.debug(f"Ignoring request body because {method} requests do not accept a body")
        return None

    try:
        return serializer(dict(body))
    except (TypeError, ValueError, RecursionError) as exc:
        msg = f"Cannot serialize the {method} request body: {exc}"
        raise SerializationError(msg) from exc
