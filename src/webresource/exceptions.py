from __future__ import annotations

from typing import Optional


class WebResourceError(Exception):
    """Base error for request preparation failures."""


class MissingFieldError(WebResourceError, ValueError):
    """Raised when a required descriptor field is empty."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"WebResource.{field} is required.")


class ConflictingUrlSpecError(WebResourceError, ValueError):
    """Raised when both url and path_template are given."""

    def __init__(self) -> None:
        super().__init__(
            "options.url and options.path_template are mutually exclusive. Please provide exactly one of them."
        )


class MissingUrlSpecError(WebResourceError, ValueError):
    """Raised when neither url nor path_template is given."""

    def __init__(self) -> None:
        super().__init__("Please provide exactly one of options.path_template or options.url.")


class InvalidMethodError(WebResourceError, ValueError):
    """Raised for a method outside the supported verb set."""

    def __init__(self, method: object, supported: tuple) -> None:
        self.method = method
        super().__init__(f'The provided method "{method}" is invalid. Supported HTTP methods are: {list(supported)}')


class ParameterError(WebResourceError):
    """Base error for path and query parameter resolution."""

    def __init__(self, name: str, message: str, template: Optional[str] = None) -> None:
        self.name = name
        self.template = template
        super().__init__(message)


class MissingPathParameterError(ParameterError, LookupError):
    """Raised when a template placeholder has no matching path parameter."""

    def __init__(self, name: str, template: str) -> None:
        super().__init__(
            name,
            f"path_template: {template} contains the path parameter {name} "
            "however, it is not present in options.path_parameters.",
            template,
        )


class InvalidParameterTypeError(ParameterError, TypeError):
    """Raised when a parameter value is neither a string nor an explicit value."""

    def __init__(self, name: str, value: object, template: Optional[str] = None) -> None:
        where = f"path_template: {template}, parameter {name}" if template else f"parameter {name}"
        super().__init__(
            name,
            f"{where} has unsupported type {type(value).__name__}. "
            f'Use a "str" or an explicit value of the form {{"value": ..., "skip_url_encoding": True}}.',
            template,
        )


class MissingParameterValueError(ParameterError, ValueError):
    """Raised when an explicit parameter value carries no value."""

    def __init__(self, name: str, template: Optional[str] = None) -> None:
        super().__init__(name, f'parameter {name} is an explicit value but it does not contain a "value".', template)


class InvalidQueryParametersError(WebResourceError, TypeError):
    """Raised when query parameters are not a mapping."""

    def __init__(self, query_parameters: object) -> None:
        super().__init__(
            "options.query_parameters must be a mapping of query-parameter name to value, "
            f"got {type(query_parameters).__name__}."
        )


class InvalidOptionsError(WebResourceError, TypeError):
    """Raised when prepare options are malformed."""


class TransportUnavailableError(WebResourceError, RuntimeError):
    """Raised when a transport adapter is used without its client library installed."""


__all__ = [
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
