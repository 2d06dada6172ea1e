from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Union

from .config import DEFAULT_SETTINGS, RequestSettings
from .exceptions import (
    ConflictingUrlSpecError,
    InvalidOptionsError,
    MissingFieldError,
    MissingUrlSpecError,
)
from .headers import HttpHeaders
from .structures import HttpMethod, Serializer
from .utils import compose_query, join_url, resolve_path_template, to_json_text

logger = logging.getLogger(__name__)

STREAM_CONTENT_TYPE = "application/octet-stream"


@dataclass
class WebResource:
    """Transport-agnostic description of a single HTTP request.

    Build one directly, or call ``prepare`` to populate it from request
    options. ``prepare`` runs its stages in a fixed order: url, query,
    headers, body, then the passthrough fields. A descriptor whose ``prepare``
    raised is left partially updated and should be discarded.
    """

    url: str = ""
    method: Union[HttpMethod, str, None] = HttpMethod.GET
    body: Any = None
    query: Optional[Dict[str, str]] = None
    headers: HttpHeaders = field(default_factory=HttpHeaders)
    raw_response: bool = False
    abort_signal: Any = None
    on_upload_progress: Optional[Callable[..., Any]] = None
    on_download_progress: Optional[Callable[..., Any]] = None
    form_data: Any = None
    operation_spec: Any = None

    def __post_init__(self) -> None:
        if self.method:
            self.method = HttpMethod.parse(self.method)
        if not isinstance(self.headers, HttpHeaders):
            self.headers = HttpHeaders(self.headers)
        self.url = self.url or ""

    def validate_request_properties(self) -> None:
        """Raise ``MissingFieldError`` unless method and url are set."""

        if not self.method:
            raise MissingFieldError("method")
        if not self.url:
            raise MissingFieldError("url")

    def prepare(self, options: Mapping[str, Any], settings: Optional[RequestSettings] = None) -> "WebResource":
        """Populate this descriptor from ``options`` and return it.

        See ``RequestPrepareOptions`` for the recognized keys. ``settings``
        supplies the base url, default headers and collaborators; it defaults
        to ``DEFAULT_SETTINGS``.
        """

        if not isinstance(options, Mapping):
            raise InvalidOptionsError("options must be a mapping")
        settings = settings or DEFAULT_SETTINGS

        self.method = HttpMethod.parse(options.get("method"))
        self._apply_url(options, settings)
        if options.get("query_parameters") is not None:
            self.url, self.query = compose_query(self.url, options["query_parameters"])
        self._apply_headers(options, settings)
        self._apply_body(options, settings)

        self.form_data = options.get("form_data")
        self.raw_response = bool(options.get("raw_response", False))
        self.operation_spec = options.get("operation_spec")
        self.abort_signal = options.get("abort_signal")
        self.on_upload_progress = options.get("on_upload_progress")
        self.on_download_progress = options.get("on_download_progress")

        logger.debug("Prepared %s request for %s", self.method.value, self.url)
        return self

    def _apply_url(self, options: Mapping[str, Any], settings: RequestSettings) -> None:
        url = options.get("url")
        path_template = options.get("path_template")
        if url and path_template:
            raise ConflictingUrlSpecError()
        if not url and not path_template:
            raise MissingUrlSpecError()

        if url:
            if not isinstance(url, str):
                raise InvalidOptionsError('options.url must be of type "str".')
            self.url = url
            return

        if not isinstance(path_template, str):
            raise InvalidOptionsError('options.path_template must be of type "str".')
        base_url = options.get("base_url") or settings.base_url
        self.url = resolve_path_template(
            join_url(base_url, path_template),
            options.get("path_parameters"),
            path_template,
        )

    def _apply_headers(self, options: Mapping[str, Any], settings: RequestSettings) -> None:
        headers = options.get("headers") or {}
        if not isinstance(headers, Mapping):
            raise InvalidOptionsError("options.headers must be a mapping.")
        for name, value in headers.items():
            self.headers.set(name, value)

        if not self.headers.get("accept-language"):
            self.headers.set("accept-language", settings.accept_language)
        if not self.headers.get(settings.client_request_id_header) and not options.get("disable_client_request_id"):
            self.headers.set(settings.client_request_id_header, settings.request_id_factory())
        if not self.headers.get("Content-Type"):
            self.headers.set("Content-Type", settings.default_content_type)

    def _apply_body(self, options: Mapping[str, Any], settings: RequestSettings) -> None:
        self.body = options.get("body")
        if self.body is None:
            return

        if options.get("body_is_stream"):
            if not self.headers.get("Transfer-Encoding"):
                self.headers.set("Transfer-Encoding", "chunked")
            self.headers.set("Content-Type", STREAM_CONTENT_TYPE)
            return

        schema = options.get("serialization_schema")
        if schema is not None:
            serializer = self._serializer(options, settings)
            self.body = serializer.serialize(schema, self.body, "requestBody")
        if not options.get("disable_json_text_encoding"):
            self.body = to_json_text(self.body)

    @staticmethod
    def _serializer(options: Mapping[str, Any], settings: RequestSettings) -> Serializer:
        serializer = options.get("serializer")
        if serializer is not None:
            return serializer
        if settings.serializer_factory is None:
            raise InvalidOptionsError(
                "options.serialization_schema was given but no serializer is configured. "
                "Pass options.serializer or set RequestSettings.serializer_factory."
            )
        return settings.serializer_factory(options.get("schema_registry"))

    def clone(self) -> "WebResource":
        """Copy with independent headers; every other field is shared."""

        result = copy.copy(self)
        result.headers = self.headers.clone()
        return result

    def to_dict(self) -> Dict[str, Any]:
        method = self.method.value if isinstance(self.method, HttpMethod) else self.method
        return {
            "url": self.url,
            "method": method,
            "headers": self.headers.to_dict(),
            "body": self.body,
            "query": dict(self.query) if self.query is not None else None,
            "raw_response": self.raw_response,
        }


__all__ = ["WebResource", "STREAM_CONTENT_TYPE"]
