"""Tests for the endpoint descriptor table and field validation."""

import pytest

from niu_cloud_client.endpoints import (
    ENDPOINTS,
    LOGIN_FIELDS,
    FieldSpec,
    PayloadStyle,
    validate_fields,
)
from niu_cloud_client.errors import InputValidationError


@pytest.mark.unit
def test_table_covers_every_endpoint():
    assert set(ENDPOINTS) == {
        "get_vehicles",
        "get_vehicle_position",
        "get_overall_tally",
        "get_track_detail",
        "get_battery_info",
        "get_battery_health",
        "get_motor_info",
        "get_tracks",
        "get_firmware_version",
        "get_update_info",
    }


@pytest.mark.unit
def test_every_table_endpoint_requires_auth():
    assert all(descriptor.requires_auth for descriptor in ENDPOINTS.values())


@pytest.mark.unit
@pytest.mark.parametrize("name", ["get_battery_info", "get_battery_health", "get_motor_info"])
def test_query_style_endpoints(name):
    assert ENDPOINTS[name].payload is PayloadStyle.QUERY


@pytest.mark.unit
def test_wire_names():
    keys = [spec.key for spec in ENDPOINTS["get_track_detail"].fields]

    assert keys == ["sn", "trackId", "date"]
    assert [spec.key for spec in ENDPOINTS["get_tracks"].fields] == ["sn", "index", "pagesize"]


@pytest.mark.unit
def test_validate_maps_to_wire_keys():
    values = ENDPOINTS["get_tracks"].validate({"sn": "N1", "index": 0, "page_size": 10})

    assert values == {"sn": "N1", "index": 0, "pagesize": 10}


@pytest.mark.unit
def test_validate_reports_first_missing_field_in_order():
    """Test that validation stops at the first failing field in declaration order."""
    with pytest.raises(InputValidationError) as exc_info:
        ENDPOINTS["get_track_detail"].validate({"sn": "N1"})

    assert exc_info.value.field == "track_id"
    assert str(exc_info.value) == "Track ID is missing."
    assert exc_info.value.debug.operation == "get_track_detail()"


@pytest.mark.unit
@pytest.mark.parametrize(
    ("options", "field"),
    [
        ({"sn": 12345, "index": 0, "page_size": 10}, "sn"),
        ({"sn": "N1", "index": "0", "page_size": 10}, "index"),
        ({"sn": "N1", "index": True, "page_size": 10}, "index"),
        ({"sn": "N1", "index": 0, "page_size": None}, "page_size"),
    ],
)
def test_validate_rejects_wrong_types(options, field):
    with pytest.raises(InputValidationError) as exc_info:
        ENDPOINTS["get_tracks"].validate(options)

    assert exc_info.value.field == field


@pytest.mark.unit
def test_login_field_messages():
    with pytest.raises(InputValidationError) as exc_info:
        validate_fields(LOGIN_FIELDS, {"account": "a@b.com", "password": "p"}, operation="create_session_token()")

    assert str(exc_info.value) == "Country code is missing."
    assert exc_info.value.field == "country_code"


@pytest.mark.unit
def test_field_spec_accepts():
    assert FieldSpec("index", int, "Index").accepts(3)
    assert not FieldSpec("index", int, "Index").accepts(False)
    assert FieldSpec("flag", bool, "Flag").accepts(False)
    assert not FieldSpec("sn", str, "Serial").accepts(None)
