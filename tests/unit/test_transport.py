import io

import httpx
import pytest
import requests

import webresource
from webresource import WebResource
from webresource import transport as webresource_transport


def test_to_httpx_request(prepare):
    resource = prepare(method="post", url="http://example.com/items", query_parameters={"q": "a&b"}, body={"a": 1})

    request = webresource.to_httpx_request(resource)

    assert isinstance(request, httpx.Request)
    assert request.method == "POST"
    assert request.url.path == "/items"
    assert request.url.params["q"] == "a&b"
    assert request.headers["content-type"] == "application/json; charset=utf-8"
    assert request.headers["x-ms-client-request-id"] == "req-1"
    assert request.content == b'{"a":1}'


def test_to_httpx_request_calls_stream_factory(prepare):
    resource = prepare(method="PUT", url="http://example.com/blob", body=lambda: b"chunk", body_is_stream=True)

    request = webresource.to_httpx_request(resource)

    assert request.headers["content-type"] == "application/octet-stream"
    assert request.headers["transfer-encoding"] == "chunked"
    assert request.content == b"chunk"


def test_to_requests_request(prepare):
    stream = io.BytesIO(b"data")
    resource = prepare(method="put", url="http://example.com/blob", body=stream, body_is_stream=True)

    request = webresource.to_requests_request(resource)

    assert isinstance(request, requests.Request)
    assert request.method == "PUT"
    assert request.url == "http://example.com/blob"
    assert request.headers["Content-Type"] == "application/octet-stream"
    assert request.data is stream


def test_transport_requests_validate_descriptor():
    with pytest.raises(webresource.MissingFieldError):
        webresource.to_requests_request(WebResource())
    with pytest.raises(webresource.MissingFieldError):
        webresource.to_httpx_request(WebResource(method=None, url="http://example.com"))


def test_to_transport_request_prefers_httpx(prepare):
    resource = prepare(method="GET", url="http://example.com")

    assert isinstance(webresource.to_transport_request(resource), httpx.Request)


def test_to_transport_request_falls_back_to_requests(monkeypatch, prepare):
    monkeypatch.setattr(webresource_transport, "httpx", None)
    resource = prepare(method="GET", url="http://example.com")

    assert isinstance(webresource_transport.to_transport_request(resource), requests.Request)


def test_to_httpx_request_raises_without_httpx(monkeypatch, prepare):
    monkeypatch.setattr(webresource_transport, "httpx", None)
    resource = prepare(method="GET", url="http://example.com")

    with pytest.raises(webresource.TransportUnavailableError):
        webresource_transport.to_httpx_request(resource)
