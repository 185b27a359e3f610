r"""Send resolved requests through an httpx client.

This module contains the dispatch logic shared by the synchronous and
asynchronous clients. Transport failures are re-raised as
``TransportError`` with the original exception chained. HTTP error status
codes are returned as regular responses.
"""

from __future__ import annotations

__all__ = ["send_request", "send_request_async"]

import logging
from typing import TYPE_CHECKING, NoReturn

import httpx

from requestsmith.exceptions import TransportError
from requestsmith.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from requestsmith.core.resolver import ResolvedRequest

logger: logging.Logger = logging.getLogger(__name__)


def send_request(client: httpx.Client, resolved: ResolvedRequest) -> httpx.Response:
    """Send a resolved request (synchronous).

    Args:
        client: The httpx client used to send the request.
        resolved: The request to send.

    Returns:
        The server response, whatever its status code.

    Raises:
        TransportError: If httpx fails to send the request or to receive
            the response.
    """
    request = resolved.to_httpx(client)
    _log_dispatch(resolved)
    try:
        response = client.send(request)
    except httpx.HTTPError as exc:
        _raise_transport_error(resolved, exc)
    _log_response(resolved, response)
    return response


async def send_request_async(
    client: httpx.AsyncClient, resolved: ResolvedRequest
) -> httpx.Response:
    """Send a resolved request (asynchronous).

    Args:
        client: The httpx async client used to send the request.
        resolved: The request to send.

    Returns:
        The server response, whatever its status code.

    Raises:
        TransportError: If httpx fails to send the request or to receive
            the response.
    """
    request = resolved.to_httpx(client)
    _log_dispatch(resolved)
    try:
        response = await client.send(request)
    except httpx.HTTPError as exc:
        _raise_transport_error(resolved, exc)
    _log_response(resolved, response)
    return response


def _log_dispatch(resolved: ResolvedRequest) -> None:
    log_structured(
        logger,
        logging.DEBUG,
        f"Sending {resolved.method} request to {resolved.url}",
        method=resolved.method,
        url=str(resolved.url),
        has_body=resolved.content is not None,
    )


def _log_response(resolved: ResolvedRequest, response: httpx.Response) -> None:
    log_structured(
        logger,
        logging.DEBUG,
        f"{resolved.method} request to {resolved.url} returned status {response.status_code}",
        method=resolved.method,
        url=str(resolved.url),
        status_code=response.status_code,
    )


def _raise_transport_error(resolved: ResolvedRequest, exc: httpx.HTTPError) -> NoReturn:
    raise TransportError(
        method=resolved.method,
        url=str(resolved.url),
        message=f"{resolved.method} request to {resolved.url} failed: {exc}",
        cause=exc,
    ) from exc
