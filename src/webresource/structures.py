from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Protocol

from .exceptions import InvalidMethodError


class HttpMethod(str, Enum):
    """Supported HTTP verbs."""

    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"

    @classmethod
    def parse(cls, method: Any) -> "HttpMethod":
        """Return the member for ``method`` in any letter case."""

        if isinstance(method, cls):
            return method
        if not isinstance(method, str):
            raise InvalidMethodError(method, tuple(m.value for m in cls))
        try:
            return cls(method.upper())
        except ValueError:
            raise InvalidMethodError(method, tuple(m.value for m in cls)) from None


@dataclass(frozen=True)
class ParameterValue:
    """Explicit path or query parameter value.

    ``skip_url_encoding`` substitutes ``value`` verbatim, for values the caller
    has already made URL safe. Anything else attached to the parameter goes to
    ``extras`` and is not interpreted.
    """

    value: Any
    skip_url_encoding: bool = False
    extras: Dict[str, Any] = field(default_factory=dict, hash=False)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ParameterValue":
        extras = {k: v for k, v in data.items() if k not in ("value", "skip_url_encoding")}
        return cls(data.get("value"), bool(data.get("skip_url_encoding")), extras)


class Serializer(Protocol):
    """Schema-driven body serializer."""

    def serialize(self, schema: Any, value: Any, root_name: str) -> Any:
        ...


class RequestPrepareOptions(dict):
    """Options accepted by ``WebResource.prepare``; only given keys are stored."""

    def __init__(
        self,
        *,
        method: str,
        url: Optional[str] = None,
        path_template: Optional[str] = None,
        base_url: Optional[str] = None,
        path_parameters: Optional[Mapping[str, Any]] = None,
        query_parameters: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, Any]] = None,
        disable_client_request_id: bool = False,
        body: Any = None,
        serialization_schema: Any = None,
        schema_registry: Optional[Mapping[str, Any]] = None,
        serializer: Optional[Serializer] = None,
        disable_json_text_encoding: bool = False,
        body_is_stream: bool = False,
        form_data: Any = None,
        raw_response: bool = False,
        operation_spec: Any = None,
        abort_signal: Any = None,
        on_upload_progress: Optional[Callable[..., Any]] = None,
        on_download_progress: Optional[Callable[..., Any]] = None,
    ) -> None:
        if headers is not None and not isinstance(headers, Mapping):
            raise TypeError("headers must be a mapping or None")
        super().__init__(method=method)
        optional = {
            "url": url,
            "path_template": path_template,
            "base_url": base_url,
            "path_parameters": path_parameters,
            "query_parameters": query_parameters,
            "headers": headers,
            "body": body,
            "serialization_schema": serialization_schema,
            "schema_registry": schema_registry,
            "serializer": serializer,
            "form_data": form_data,
            "operation_spec": operation_spec,
            "abort_signal": abort_signal,
            "on_upload_progress": on_upload_progress,
            "on_download_progress": on_download_progress,
        }
        self.update({k: v for k, v in optional.items() if v is not None})
        flags = {
            "disable_client_request_id": disable_client_request_id,
            "disable_json_text_encoding": disable_json_text_encoding,
            "body_is_stream": body_is_stream,
            "raw_response": raw_response,
        }
        self.update({k: v for k, v in flags.items() if v})


__all__ = ["HttpMethod", "ParameterValue", "Serializer", "RequestPrepareOptions"]
