from __future__ import annotations

import logging

from .config import DEFAULT_BASE_URL, DEFAULT_SETTINGS, RequestSettings, generate_request_id
from .exceptions import (
    ConflictingUrlSpecError,
    InvalidMethodError,
    InvalidOptionsError,
    InvalidParameterTypeError,
    InvalidQueryParametersError,
    MissingFieldError,
    MissingParameterValueError,
    MissingPathParameterError,
    MissingUrlSpecError,
    ParameterError,
    TransportUnavailableError,
    WebResourceError,
)
from .headers import HttpHeaders
from .resource import WebResource
from .structures import HttpMethod, ParameterValue, RequestPrepareOptions, Serializer
from .transport import httpx, requests, to_httpx_request, to_requests_request, to_transport_request
from .utils import (
    compose_query,
    encode_uri_component,
    join_url,
    resolve_parameter_value,
    resolve_path_template,
    to_json_text,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "WebResource",
    "HttpHeaders",
    "HttpMethod",
    "ParameterValue",
    "RequestPrepareOptions",
    "Serializer",
    "RequestSettings",
    "DEFAULT_SETTINGS",
    "DEFAULT_BASE_URL",
    "generate_request_id",
    "compose_query",
    "encode_uri_component",
    "join_url",
    "resolve_parameter_value",
    "resolve_path_template",
    "to_json_text",
    "to_httpx_request",
    "to_requests_request",
    "to_transport_request",
    "httpx",
    "requests",
    "WebResourceError",
    "MissingFieldError",
    "ConflictingUrlSpecError",
    "MissingUrlSpecError",
    "InvalidMethodError",
    "ParameterError",
    "MissingPathParameterError",
    "InvalidParameterTypeError",
    "MissingParameterValueError",
    "InvalidQueryParametersError",
    "InvalidOptionsError",
    "TransportUnavailableError",
]
