# tests/unit/schemas/test_carrier_schemas.py
import json
import pytest
from pydantic import ValidationError

from shopify_carriers.schemas.carrier import CarrierResource, ListCarrierResource, SingleCarrierResource


def test_single_envelope_round_trip(carrier_data):
    envelope = SingleCarrierResource.from_json(json.dumps({"carrier_service": carrier_data}))

    assert envelope.to_payload() == {"carrier_service": carrier_data}
    assert SingleCarrierResource.from_json(envelope.to_json()) == envelope


def test_list_envelope_round_trip(carrier_data):
    second = {**carrier_data, "id": 2, "active": False, "service_discovery": False}
    envelope = ListCarrierResource.from_json({"carrier_services": [carrier_data, second]})

    assert envelope.to_payload() == {"carrier_services": [carrier_data, second]}


def test_unset_fields_are_omitted():
    envelope = SingleCarrierResource(carrier_service=CarrierResource(name="Rates"))

    assert envelope.to_payload() == {"carrier_service": {"name": "Rates"}}


def test_false_flags_are_sent():
    carrier = CarrierResource(id=5, active=False, service_discovery=False)

    assert carrier.to_payload() == {"id": 5, "active": False, "service_discovery": False}


def test_carrier_resource_is_immutable():
    carrier = CarrierResource(id=1)

    with pytest.raises(ValidationError):
        carrier.name = "changed"


def test_missing_list_key_defaults_to_empty():
    assert ListCarrierResource.from_json("{}").carrier_services == []
