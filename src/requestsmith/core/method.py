r"""Resolve and validate the HTTP method of a request."""

from __future__ import annotations

__all__ = ["method_accepts_body", "resolve_method"]

from requestsmith.core.config import METHODS_WITHOUT_BODY, SUPPORTED_METHODS
from requestsmith.exceptions import InvalidMethodError, MethodMissingError


def resolve_method(method: str, default_method: str) -> str:
    """Return the effective HTTP method of a request.

    Args:
        method: The per-call method. Empty means "not set".
        default_method: The method of the client defaults.

    Returns:
        The validated method.

    Raises:
        MethodMissingError: If neither layer provides a method.
        InvalidMethodError: If the method is not one of
            ``SUPPORTED_METHODS``.

    Example:
        ```pycon
        >>> from requestsmith.core.method import resolve_method
        >>> resolve_method("", "GET")
        'GET'
        >>> resolve_method("POST", "GET")
        'POST'

        ```
    """
    method = method or default_method
    if not method:
        raise MethodMissingError
    if method not in SUPPORTED_METHODS:
        raise InvalidMethodError(method)
    return method


def method_accepts_body(method: str) -> bool:
    """Indicate if a request with the given method may carry a body.

    Example:
        ```pycon
        >>> from requestsmith.core.method import method_accepts_body
        >>> method_accepts_body("POST")
        True
        >>> method_accepts_body("HEAD")
        False

        ```
    """
    return method not in METHODS_WITHOUT_BODY
