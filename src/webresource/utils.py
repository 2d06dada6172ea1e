from __future__ import annotations

import json
import math
import re
from typing import Any, Dict, Mapping, Optional, Tuple
from urllib.parse import quote

from .exceptions import (
    InvalidParameterTypeError,
    InvalidQueryParametersError,
    MissingParameterValueError,
    MissingPathParameterError,
)
from .structures import ParameterValue

PLACEHOLDER_PATTERN = re.compile(r"\{\w*\s*\w*\}", re.IGNORECASE)

# Characters encodeURIComponent leaves untouched besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: Any) -> str:
    """Percent-encode everything except unreserved URI characters."""

    return quote(str(value), safe=_URI_COMPONENT_SAFE)


def join_url(base_url: str, path_template: str) -> str:
    """Join base and template with exactly one slash between them."""

    separator = "" if base_url.endswith("/") else "/"
    relative = path_template[1:] if path_template.startswith("/") else path_template
    return f"{base_url}{separator}{relative}"


def _parameter_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def resolve_parameter_value(name: str, raw: Any, template: Optional[str] = None) -> str:
    """Normalize a path or query parameter into its final URL text.

    A ``str`` is always percent-encoded. A ``ParameterValue`` or a mapping with
    a ``value`` key is encoded unless ``skip_url_encoding`` is set.
    """

    if isinstance(raw, str):
        return encode_uri_component(raw)
    if isinstance(raw, Mapping):
        raw = ParameterValue.from_mapping(raw)
    if not isinstance(raw, ParameterValue):
        raise InvalidParameterTypeError(name, raw, template)
    if raw.value is None:
        raise MissingParameterValueError(name, template)
    text = _parameter_text(raw.value)
    if raw.skip_url_encoding:
        return text
    return encode_uri_component(text)


def resolve_path_template(url: str, path_parameters: Optional[Mapping[str, Any]], path_template: str) -> str:
    """Substitute every ``{name}`` placeholder in ``url``.

    Repeated placeholders all receive the same value. Substituted text is not
    scanned again, so values may themselves contain braces.
    """

    resolved: Dict[str, str] = {}

    def _substitute(match: "re.Match[str]") -> str:
        token = match.group(0)
        if token not in resolved:
            name = token[1:-1]
            if path_parameters is None or name not in path_parameters:
                raise MissingPathParameterError(name, path_template)
            resolved[token] = resolve_parameter_value(name, path_parameters[name], path_template)
        return resolved[token]

    return PLACEHOLDER_PATTERN.sub(_substitute, url)


def compose_query(url: str, query_parameters: Any) -> Tuple[str, Dict[str, str]]:
    """Append query parameters to ``url``.

    Returns the new url and the name to encoded value map of the appended
    pairs. Falsy values are skipped.
    """

    if not isinstance(query_parameters, Mapping):
        raise InvalidQueryParametersError(query_parameters)

    query: Dict[str, str] = {}
    for name, raw in query_parameters.items():
        if not raw:
            continue
        query[name] = resolve_parameter_value(name, raw)

    if "?" not in url:
        url += "?"
    elif query and not url.endswith(("?", "&")):
        url += "&"
    return url + "&".join(f"{name}={value}" for name, value in query.items()), query


def _finite(value: Any) -> Any:
    # NaN and infinities have no JSON spelling; they are written as null.
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, Mapping):
        return {k: _finite(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(v) for v in value]
    return value


def to_json_text(body: Any) -> str:
    """Render ``body`` as compact JSON text."""

    return json.dumps(_finite(body), separators=(",", ":"), ensure_ascii=False, allow_nan=False)


__all__ = [
    "PLACEHOLDER_PATTERN",
    "encode_uri_component",
    "join_url",
    "resolve_parameter_value",
    "resolve_path_template",
    "compose_query",
    "to_json_text",
]
