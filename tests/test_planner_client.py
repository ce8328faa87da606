import json

import httpx
import pytest

from farm_setup.services.planner_client import FarmSetupClient, FarmSetupError


def test_calculate_against_the_app(api):
    client = FarmSetupClient(http=api)
    plan = client.calculate(40, ["goat", "fish"])

    assert plan.land_size == 40
    assert plan.calculated_capacity.goat.count > 0
    assert plan.calculated_capacity.fish.estimated_fish_count > 0


def test_server_message_is_surfaced(api):
    client = FarmSetupClient(http=api)
    with pytest.raises(FarmSetupError) as exc:
        client.calculate(40, [])
    assert exc.value.message == "Please select at least one farming type"
    assert exc.value.status_code == 400


def test_validation_error_falls_back_to_generic_message(api):
    client = FarmSetupClient(http=api)
    with pytest.raises(FarmSetupError) as exc:
        client.calculate(5, ["hen"])
    assert exc.value.message == "Calculation failed"
    assert exc.value.status_code == 422


def test_message_field_is_preferred():
    def handler(request):
        return httpx.Response(503, json={"message": "Planner is down for maintenance"})

    http = httpx.Client(base_url="http://planner", transport=httpx.MockTransport(handler))
    with FarmSetupClient(http=http) as client:
        with pytest.raises(FarmSetupError) as exc:
            client.calculate(40, ["hen"])
    assert exc.value.message == "Planner is down for maintenance"


def test_transport_error_becomes_farm_setup_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    http = httpx.Client(base_url="http://planner", transport=httpx.MockTransport(handler))
    client = FarmSetupClient(http=http)
    with pytest.raises(FarmSetupError) as exc:
        client.calculate(40, ["hen"])
    assert exc.value.message == "Calculation failed"
    assert exc.value.status_code is None


def test_unreadable_body_becomes_farm_setup_error():
    def handler(request):
        return httpx.Response(200, json={"unexpected": True})

    http = httpx.Client(base_url="http://planner", transport=httpx.MockTransport(handler))
    with pytest.raises(FarmSetupError):
        FarmSetupClient(http=http).calculate(40, ["hen"])


def test_request_body_uses_wire_names():
    seen = {}

    def handler(request):
        seen.update(json.loads(request.content))
        return httpx.Response(400, json={"detail": "nope"})

    http = httpx.Client(base_url="http://planner", transport=httpx.MockTransport(handler))
    with pytest.raises(FarmSetupError):
        FarmSetupClient(http=http).calculate(25, ("cow",))
    assert seen == {"landSize": 25, "farmingTypes": ["cow"]}
