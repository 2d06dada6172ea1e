from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Mapping, Optional
from uuid import uuid4

from .structures import Serializer

DEFAULT_BASE_URL = "https://management.azure.com"
DEFAULT_ACCEPT_LANGUAGE = "en-US"
DEFAULT_CLIENT_REQUEST_ID_HEADER = "x-ms-client-request-id"
DEFAULT_CONTENT_TYPE = "application/json; charset=utf-8"


def generate_request_id() -> str:
    return str(uuid4())


@dataclass(frozen=True)
class RequestSettings:
    """Defaults applied while preparing a request.

    Pass a modified copy to ``WebResource.prepare`` to target another
    environment; ``DEFAULT_SETTINGS`` itself is never mutated.
    """

    base_url: str = DEFAULT_BASE_URL
    accept_language: str = DEFAULT_ACCEPT_LANGUAGE
    client_request_id_header: str = DEFAULT_CLIENT_REQUEST_ID_HEADER
    default_content_type: str = DEFAULT_CONTENT_TYPE
    request_id_factory: Callable[[], str] = generate_request_id
    serializer_factory: Optional[Callable[[Optional[Mapping[str, Any]]], Serializer]] = None

    def replace(self, **changes: Any) -> "RequestSettings":
        return replace(self, **changes)


DEFAULT_SETTINGS = RequestSettings()


__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_ACCEPT_LANGUAGE",
    "DEFAULT_CLIENT_REQUEST_ID_HEADER",
    "DEFAULT_CONTENT_TYPE",
    "DEFAULT_SETTINGS",
    "RequestSettings",
    "generate_request_id",
]
