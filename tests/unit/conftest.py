import pytest

from webresource import RequestSettings, WebResource


class SerializerStub:
    def __init__(self, calls, error=None):
        self.calls = calls
        self.error = error

    def serialize(self, schema, value, root_name):
        self.calls.append({"schema": schema, "value": value, "root_name": root_name})
        if self.error is not None:
            raise self.error
        return {"wire": value}


@pytest.fixture
def settings():
    return RequestSettings(request_id_factory=lambda: "req-1")


@pytest.fixture
def serializer_factory():
    def _factory(error=None):
        calls = []
        return SerializerStub(calls, error), calls

    return _factory


@pytest.fixture
def prepare(settings):
    def _prepare(**options):
        return WebResource().prepare(options, settings)

    return _prepare
