r"""Resolve the target URL of a request.

A per-call URL can be absolute, in which case it is used as is, or relative
to a base URL. Both the URL and the base URL fall back to the client
defaults when they are not provided for the call.
"""

from __future__ import annotations

__all__ = ["join_url_path", "parse_url", "resolve_url"]

import httpx

from requestsmith.exceptions import URLParseError


def parse_url(url: str) -> httpx.URL:
    """Parse a URL string.

    Args:
        url: The URL to parse. It can be relative.

    Returns:
        The parsed URL.

    Raises:
        URLParseError: If the URL is malformed.

    Example:
        ```pycon
        >>> from requestsmith.core.url import parse_url
        >>> parse_url("https://api.example.com/v1").host
        'api.example.com'

        ```
    """
    try:
        return httpx.URL(url)
    except httpx.InvalidURL as exc:
        msg = f"Invalid URL {url!r}: {exc}"
        raise URLParseError(url=url, message=msg) from exc


def join_url_path(base_path: str, path: str) -> str:
    """Append a path to a base path.

    Segments are concatenated and empty segments dropped, so duplicate
    slashes collapse. The result always starts with ``/`` and never ends
    with one.

    Args:
        base_path: The path of the base URL.
        path: The path to append.

    Returns:
        The joined path.

    Example:
        ```pycon
        >>> from requestsmith.core.url import join_url_path
        >>> join_url_path("/v1", "users")
        '/v1/users'
        >>> join_url_path("/v1/", "/users//42/")
        '/v1/users/42'

        ```
    """
    segments = [segment for segment in f"{base_path}/{path}".split("/") if segment]
    return "/" + "/".join(segments)


def _encoded_path(url: httpx.URL) -> str:
    """Return the path of a URL with its percent-escapes kept."""
    return url.raw_path.split(b"?", 1)[0].decode("ascii")


def resolve_url(url: str, base_url: str, default_url: str, default_base_url: str) -> httpx.URL:
    """Return the effective absolute URL of a request.

    Args:
        url: The per-call URL, absolute or relative. Empty means "not set".
        base_url: The per-call base URL. Empty means "not set".
        default_url: The URL of the client defaults.
        default_base_url: The base URL of the client defaults.

    Returns:
        The absolute URL. An absolute effective URL is returned as is and
        the base URL is ignored. Otherwise the path of the effective URL is
        appended to the path of the base URL. Both paths are joined in
        their encoded form, so an escaped ``%2F`` or ``%3F`` stays part of
        its segment. The query and fragment of the effective URL replace
        those of the base URL when present.

    Raises:
        URLParseError: If a URL is malformed or if the result is not an
            absolute URL.

    Example:
        ```pycon
        >>> from requestsmith.core.url import resolve_url
        >>> str(resolve_url("users", "", "", "http://api.example.com/v1"))
        'http://api.example.com/v1/users'
        >>> str(resolve_url("http://other.com/x", "http://api.example.com", "", ""))
        'http://other.com/x'

        ```
    """
    url = url or default_url
    base_url = base_url or default_base_url

    parsed_url = parse_url(url)
    if parsed_url.is_absolute_url:
        return parsed_url

    parsed_base_url = parse_url(base_url)
    changes: dict[str, str | bytes] = {}
    if parsed_url.path:
        changes["path"] = join_url_path(
            _encoded_path(parsed_base_url), _encoded_path(parsed_url)
        )
    if parsed_url.query:
        changes["query"] = parsed_url.query
    if parsed_url.fragment:
        changes["fragment"] = parsed_url.fragment
    try:
        resolved = parsed_base_url.copy_with(**changes) if changes else parsed_base_url
    except httpx.InvalidURL as exc:
        msg = f"Cannot join {url!r} onto {base_url!r}: {exc}"
        raise URLParseError(url=url, message=msg) from exc

    if not resolved.is_absolute_url:
        msg = f"Cannot resolve {url!r} to an absolute URL (base URL: {base_url!r})"
        raise URLParseError(url=url, message=msg)
    return resolved
