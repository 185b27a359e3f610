r"""Define the exceptions raised while building and sending requests."""

from __future__ import annotations

__all__ = [
    "InvalidMethodError",
    "MethodMissingError",
    "RequestBuildError",
    "SerializationError",
    "TransportError",
    "URLParseError",
]


class RequestBuildError(Exception):
    r"""Base class of all the errors raised by ``requestsmith``.

    Args:
        message: A human-readable description of the error.

    Example:
        ```pycon
        >>> from requestsmith.exceptions import RequestBuildError
        >>> error = RequestBuildError("something went wrong")
        >>> error.message
        'something went wrong'

        ```
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MethodMissingError(RequestBuildError):
    r"""Raised when neither the request nor the defaults provide a
    method."""

    def __init__(self, message: str = "Please provide a request method") -> None:
        super().__init__(message)


class InvalidMethodError(RequestBuildError):
    r"""Raised when the resolved method is not a supported HTTP verb.

    Args:
        method: The rejected method.
        message: Optional custom message.

    Example:
        ```pycon
        >>> from requestsmith.exceptions import InvalidMethodError
        >>> error = InvalidMethodError("FETCH")
        >>> error.method
        'FETCH'
        >>> error.message
        "Provided method is invalid: 'FETCH'"

        ```
    """

    def __init__(self, method: str, message: str | None = None) -> None:
        super().__init__(message or f"Provided method is invalid: {method!r}")
        self.method = method


class URLParseError(RequestBuildError):
    r"""Raised when a URL or base URL is malformed or cannot be resolved
    to an absolute URL.

    Args:
        url: The offending URL string.
        message: A human-readable description of the error.
    """

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class SerializationError(RequestBuildError):
    r"""Raised when the request body cannot be serialized."""


class TransportError(RequestBuildError):
    r"""Raised when the underlying HTTP transport fails to deliver a
    request.

    The original transport exception is kept in ``cause`` and chained as
    ``__cause__``.

    Args:
        method: The HTTP method of the failed request.
        url: The URL of the failed request.
        message: A human-readable description of the error.
        cause: The exception raised by the transport.

    Example:
        ```pycon
        >>> from requestsmith.exceptions import TransportError
        >>> error = TransportError(
        ...     method="GET",
        ...     url="https://api.example.com/users",
        ...     message="GET request to https://api.example.com/users failed",
        ... )
        >>> error.method
        'GET'
        >>> error.cause is None
        True

        ```
    """

    def __init__(
        self,
        method: str,
        url: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url
        self.cause = cause

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(method={self.method!r}, url={self.url!r})"
