r"""Merge the default and per-call headers and query parameters."""

from __future__ import annotations

__all__ = ["encode_params", "merge_headers", "merge_mappings", "merge_params"]

from typing import TYPE_CHECKING, TypeVar

from requestsmith.core.config import CONTENT_TYPE_HEADER, DEFAULT_CONTENT_TYPE

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable, Mapping

    import httpx

K = TypeVar("K")
V = TypeVar("V")


def merge_mappings(
    defaults: Mapping[K, V],
    overrides: Mapping[K, V],
    key: Callable[[K], Hashable] | None = None,
) -> dict[K, V]:
    """Overlay ``overrides`` on a copy of ``defaults``.

    Keys of both mappings are kept, and the value of ``overrides`` wins
    when a key is in both. The input mappings are not modified.

    Args:
        defaults: The default mapping.
        overrides: The mapping whose values take precedence.
        key: An optional function applied to the keys before they are
            compared. Two keys with the same normalized form are the
            same entry, and the spelling of the winning key is kept.

    Returns:
        The merged mapping.

    Example:
        ```pycon
        >>> from requestsmith.core.merge import merge_mappings
        >>> merge_mappings({"a": "1", "b": "2"}, {"a": "3"})
        {'a': '3', 'b': '2'}
        >>> merge_mappings({"A": "1"}, {"a": "2"}, key=str.lower)
        {'a': '2'}

        ```
    """
    if key is None:
        return {**defaults, **overrides}
    merged: dict[K, V] = {}
    seen: dict[Hashable, K] = {}
    for mapping in (defaults, overrides):
        for name, value in mapping.items():
            normalized = key(name)
            if normalized in seen:
                del merged[seen[normalized]]
            seen[normalized] = name
            merged[name] = value
    return merged


def merge_headers(defaults: Mapping[str, str], overrides: Mapping[str, str]) -> dict[str, str]:
    """Merge request headers.

    Header names are compared case-insensitively, so a per-call
    ``x-api-key`` replaces a default ``X-Api-Key``. ``Content-Type`` is
    set to ``application/json`` unless one of the layers provides it
    under any letter case.

    Example:
        ```pycon
        >>> from requestsmith.core.merge import merge_headers
        >>> merge_headers({"X": "1", "Content-Type": "text/plain"}, {"x": "2"})
        {'Content-Type': 'text/plain', 'x': '2'}
        >>> merge_headers({}, {"content-type": "text/csv"})
        {'content-type': 'text/csv'}
        >>> merge_headers({}, {})
        {'Content-Type': 'application/json'}

        ```
    """
    headers = merge_mappings(defaults, overrides, key=str.lower)
    if not any(name.lower() == CONTENT_TYPE_HEADER.lower() for name in headers):
        headers[CONTENT_TYPE_HEADER] = DEFAULT_CONTENT_TYPE
    return headers


def merge_params(defaults: Mapping[str, str], overrides: Mapping[str, str]) -> dict[str, str]:
    """Merge query parameters.

    Example:
        ```pycon
        >>> from requestsmith.core.merge import merge_params
        >>> merge_params({"a": "1"}, {"a": "2", "b": "3"})
        {'a': '2', 'b': '3'}

        ```
    """
    return merge_mappings(defaults, overrides)


def encode_params(url: httpx.URL, params: Mapping[str, str]) -> httpx.URL:
    """Encode query parameters onto a URL.

    The parameters are merged into the existing query string of the URL:
    a parameter replaces a query key of the same name, and the other keys
    already in the URL are kept.

    Example:
        ```pycon
        >>> import httpx
        >>> from requestsmith.core.merge import encode_params
        >>> str(encode_params(httpx.URL("https://example.com/?a=1&c=4"), {"a": "2", "b": "3"}))
        'https://example.com/?a=2&c=4&b=3'

        ```
    """
    if not params:
        return url
    return url.copy_merge_params(params)
