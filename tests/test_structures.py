from __future__ import annotations

import pytest

from webresource.exceptions import InvalidMethodError
from webresource.structures import HttpMethod, ParameterValue, RequestPrepareOptions


def test_request_prepare_options_stores_only_given_keys():
    result = RequestPrepareOptions(method="GET", url="http://example.com")

    assert result == {"method": "GET", "url": "http://example.com"}


def test_request_prepare_options_keeps_flags_and_empty_mappings():
    result = RequestPrepareOptions(
        method="POST",
        path_template="/items/{id}",
        path_parameters={"id": "1"},
        query_parameters={},
        body={"a": 1},
        body_is_stream=True,
        disable_client_request_id=True,
    )

    assert result == {
        "method": "POST",
        "path_template": "/items/{id}",
        "path_parameters": {"id": "1"},
        "query_parameters": {},
        "body": {"a": 1},
        "body_is_stream": True,
        "disable_client_request_id": True,
    }
    assert "disable_json_text_encoding" not in result


def test_request_prepare_options_validates_headers_type():
    with pytest.raises(TypeError, match="headers must be a mapping or None"):
        RequestPrepareOptions(method="GET", url="http://example.com", headers="not-a-dict")  # type: ignore[arg-type]


def test_request_prepare_options_rejects_unknown_keys():
    with pytest.raises(TypeError):
        RequestPrepareOptions(method="GET", url="http://example.com", timeout=3)  # type: ignore[call-arg]


@pytest.mark.parametrize("method", ["get", "Get", "GET", "pAtCh", "options", "trace"])
def test_http_method_parse_any_case(method):
    assert HttpMethod.parse(method) == method.upper()
    assert HttpMethod.parse(method).value == method.upper()


@pytest.mark.parametrize("method", ["FETCH", "", "GET ", None, 1])
def test_http_method_parse_rejects_unknown(method):
    with pytest.raises(InvalidMethodError) as exc:
        HttpMethod.parse(method)

    assert exc.value.method == method
    assert isinstance(exc.value, ValueError)


def test_parameter_value_from_mapping_keeps_extras():
    result = ParameterValue.from_mapping({"value": "a b", "skip_url_encoding": 1, "collection_format": "csv"})

    assert result == ParameterValue("a b", True, {"collection_format": "csv"})


def test_parameter_value_defaults_to_encoding():
    assert ParameterValue("x").skip_url_encoding is False


def test_parameter_value_is_hashable():
    value = ParameterValue("x", extras={"collection_format": "csv"})

    assert hash(value) == hash(ParameterValue("x"))
    assert {value: 1}[ParameterValue("x", extras={"collection_format": "csv"})] == 1
