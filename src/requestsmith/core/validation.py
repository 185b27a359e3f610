r"""Check the settings of the httpx clients that requestsmith creates.

``RequestClient`` and ``AsyncRequestClient`` create their own httpx client
when none is given. The settings of that client are checked here, before
it is created, so a bad value fails at construction rather than on the
first request.
"""

from __future__ import annotations

__all__ = ["validate_timeout"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


def validate_timeout(timeout: float | httpx.Timeout) -> None:
    """Check the timeout given to a request client.

    A number is the timeout in seconds for every phase of a request and
    must be positive. An ``httpx.Timeout`` is passed on unchanged, since
    httpx validates its fields itself.

    Args:
        timeout: The timeout of the httpx client owned by a request
            client.

    Raises:
        ValueError: If ``timeout`` is a boolean, or a number that is
            not positive.

    Example:
        ```pycon
        >>> import httpx
        >>> from requestsmith.core.validation import validate_timeout
        >>> validate_timeout(2.5)
        >>> validate_timeout(httpx.Timeout(10.0, connect=2.0))
        >>> validate_timeout(-1)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got -1

        ```
    """
    if isinstance(timeout, bool):
        msg = f"timeout must be a number of seconds, got {timeout}"
        raise ValueError(msg)
    if isinstance(timeout, (int, float)) and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)
