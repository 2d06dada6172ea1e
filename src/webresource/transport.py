from __future__ import annotations

from typing import Any

import requests

from .exceptions import TransportUnavailableError
from .resource import WebResource
from .structures import HttpMethod

try:
    import httpx
except ImportError:  # pragma: no cover - depends on installed extra
    httpx = None  # type: ignore[assignment]


def _method(resource: WebResource) -> str:
    resource.validate_request_properties()
    method = resource.method
    return method.value if isinstance(method, HttpMethod) else str(method)


def _content(resource: WebResource) -> Any:
    # Stream bodies may be given as a factory returning the stream.
    return resource.body() if callable(resource.body) else resource.body


def to_httpx_request(resource: WebResource) -> "httpx.Request":
    """Build an ``httpx.Request`` from a prepared descriptor."""

    if httpx is None:
        raise TransportUnavailableError("httpx is not installed. Install webresource[httpx].")
    return httpx.Request(
        _method(resource),
        resource.url,
        headers=resource.headers.to_dict(),
        content=_content(resource),
    )


def to_requests_request(resource: WebResource) -> requests.Request:
    """Build an unprepared ``requests.Request`` from a prepared descriptor."""

    return requests.Request(
        method=_method(resource),
        url=resource.url,
        headers=resource.headers.to_dict(),
        data=_content(resource),
    )


def to_transport_request(resource: WebResource) -> Any:
    """Build a request for httpx when installed, otherwise for requests."""

    if httpx is not None:
        return to_httpx_request(resource)
    return to_requests_request(resource)


__all__ = ["to_httpx_request", "to_requests_request", "to_transport_request", "httpx", "requests"]
