"""Tests for the service layer."""

import json
from dataclasses import dataclass, field
from typing import Any

import pytest

from hydrator import Resource, resource
from hydrator.service import (
    BaseService,
    InvalidPayloadError,
    MockTransporter,
    ResourceService,
    Transporter,
    TransportError,
    sort_criteria,
)


@resource
@dataclass
class Line(Resource):
    position: int = 0
    sku: str = ""

    @classmethod
    def __sort_parameters__(cls) -> tuple[Any, ...]:
        return ("position", "asc")


@resource
@dataclass
class Shipment(Resource):
    id: str = ""
    carrier: str = ""
    lines: list[Line] = field(default_factory=list)

    @classmethod
    def __primary_key__(cls) -> str:
        return "id"

    @classmethod
    def __resource_collections__(cls) -> dict[str, Any]:
        return {"lines": Line}

    @classmethod
    def __sortable_resources__(cls) -> dict[str, Any]:
        return {"lines": Line}


class ShipmentService(ResourceService[Shipment]):
    resource_type = Shipment
    query_endpoint = "shipments.query"
    create_endpoint = "shipments.create"
    update_endpoint = "shipments.update"
    submit_endpoint = "shipments.submit"


@pytest.fixture
def transporter():
    return MockTransporter()


@pytest.fixture
def service(transporter):
    return ShipmentService(transporter)


def test_mock_transporter_is_a_transporter(transporter):
    assert isinstance(transporter, Transporter)


def test_mock_transporter_routes_and_records(transporter):
    transporter.route("fixed", '{"a": 1}')
    transporter.route("echo", lambda payload: json.dumps(payload))

    assert transporter.execute("fixed") == '{"a": 1}'
    assert transporter.execute("echo", {"b": 2}) == '{"b": 2}'
    assert transporter.calls == [("fixed", None), ("echo", {"b": 2})]


def test_mock_transporter_unknown_endpoint(transporter):
    with pytest.raises(TransportError, match="nowhere"):
        transporter.execute("nowhere")


def test_decode_json(transporter):
    base = BaseService(transporter)

    assert base.decode_json("") == {}
    assert base.decode_json(None) == {}
    assert base.decode_json("[1, 2]") == [1, 2]


def test_decode_invalid_json(transporter, log_messages):
    with pytest.raises(InvalidPayloadError, match="invalid json"):
        BaseService(transporter).decode_json("{not json")

    assert any("BaseService" in message for message in log_messages)


def test_sort_criteria():
    assert sort_criteria(Shipment) == {"lines": ["position", "asc"]}
    assert sort_criteria(Line) == {}


def test_key_name(service):
    assert service.key_name == "id"


def test_query_list_response(service, transporter):
    transporter.route(
        "shipments.query",
        '[{"id": "s1", "lines": [{"position": 1, "sku": "A"}]}, {"id": "s2"}]',
    )

    results = service.query({"carrier": "ups"})

    assert [shipment.id for shipment in results] == ["s1", "s2"]
    assert isinstance(results[0].lines[0], Line)
    assert transporter.calls == [
        ("shipments.query", {"carrier": "ups", "sort": {"lines": ["position", "asc"]}})
    ]


def test_query_keeps_caller_sort(service, transporter):
    transporter.route("shipments.query", "[]")

    service.query({"sort": "newest"})

    assert transporter.calls[0][1] == {"sort": "newest"}


def test_query_mapping_response(service, transporter):
    transporter.route("shipments.query", '{"x": {"id": "s1"}, "y": {"id": "s2"}}')

    assert [shipment.id for shipment in service.query({})] == ["s1", "s2"]


@pytest.mark.parametrize("text", ['"just text"', "{broken", None])
def test_query_failures_return_empty(service, transporter, text):
    transporter.route("shipments.query", text)

    assert service.query({}) == []


def test_query_transport_failure_returns_empty(service):
    assert service.query({}) == []


def test_find_is_cached(service, transporter):
    transporter.route("shipments.query", '[{"id": "s1", "carrier": "dhl"}]')

    first = service.find("s1")
    second = service.find("s1")

    assert first is second
    assert first.carrier == "dhl"
    assert len(transporter.calls) == 1
    assert transporter.calls[0][1]["id"] == "s1"


def test_find_missing_cached_as_none(service, transporter):
    transporter.route("shipments.query", "[]")

    assert service.find("nope") is None
    assert service.find("nope") is None
    assert len(transporter.calls) == 1


def test_create_returns_assigned_key(service, transporter):
    transporter.route("shipments.create", '{"id": "new-1"}')

    assert service.create(Shipment(carrier="ups")) == "new-1"
    endpoint, body = transporter.calls[0]
    assert endpoint == "shipments.create"
    assert body["carrier"] == "ups"


@pytest.mark.parametrize("text", ["", "{}", "{broken"])
def test_create_failure_returns_empty_string(service, transporter, text):
    transporter.route("shipments.create", text)

    assert service.create(Shipment()) == ""


def test_update(service, transporter):
    transporter.route("shipments.update", '{"status": "ok"}')

    assert service.update(Shipment(id="s1")) is True


def test_update_failure(service):
    assert service.update(Shipment(id="s1")) is False


def test_submit_sends_only_key(service, transporter):
    transporter.route("shipments.submit", '{"status": "queued"}')

    result = service.submit(Shipment(id="s1", carrier="ups"))

    assert result == {"status": "queued"}
    assert transporter.calls == [("shipments.submit", {"id": "s1"})]


def test_submit_wraps_non_mapping_response(service, transporter):
    transporter.route("shipments.submit", "[1, 2]")

    assert service.submit(Shipment(id="s1")) == {"status": "ok", "data": [1, 2]}


def test_submit_failure_reports_error(service):
    result = service.submit(Shipment(id="s1"))

    assert result["status"] == "error"
    assert "shipments.submit" in result["error"]
