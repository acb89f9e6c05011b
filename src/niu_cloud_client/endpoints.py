"""Endpoint descriptor table for the NIU app API.

Each remote operation is described once here: its path, how its input is
sent, which fields it requires and which model its ``data`` parses into.
NiuCloudClient generates one method per entry.
"""

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from niu_cloud_client import models
from niu_cloud_client.errors.exceptions import InputValidationError


class PayloadStyle(enum.Enum):
    FORM = "form"  # POST, fields as form body
    QUERY = "query"  # GET, fields as query parameters
    NONE = "none"  # GET, no input


@dataclass(frozen=True)
class FieldSpec:
    """A required input field.

    Attributes:
        name: Keyword argument name on the Python side.
        type: Expected type; ``bool`` is never accepted for ``int``.
        label: Human-readable name used in validation messages.
        wire_name: Form or query key sent to the server. Defaults to ``name``.
    """

    name: str
    type: type
    label: str
    wire_name: str | None = None

    @property
    def key(self) -> str:
        return self.wire_name or self.name

    def accepts(self, value: Any) -> bool:
        if isinstance(value, bool) and self.type is not bool:
            return False
        return isinstance(value, self.type)


@dataclass(frozen=True)
class EndpointDescriptor:
    name: str
    path: str
    payload: PayloadStyle
    fields: tuple[FieldSpec, ...] = ()
    model: type | None = None
    many: bool = False
    requires_auth: bool = True
    doc: str = ""

    @property
    def operation(self) -> str:
        return f"{self.name}()"

    def validate(self, options: Mapping[str, Any], *, client: Any = None) -> dict[str, Any]:
        """Check required fields in declaration order and map them to wire keys.

        Raises:
            InputValidationError: For the first missing or mistyped field.
        """
        return validate_fields(self.fields, options, operation=self.operation, client=client)


def validate_fields(
    specs: tuple[FieldSpec, ...],
    options: Mapping[str, Any],
    *,
    operation: str,
    client: Any = None,
) -> dict[str, Any]:
    values = {}
    for spec in specs:
        value = options.get(spec.name)
        if not spec.accepts(value):
            raise InputValidationError(
                f"{spec.label} is missing.",
                field=spec.name,
                operation=operation,
                client=client,
            )
        values[spec.key] = value
    return values


SERIAL_NUMBER = FieldSpec("sn", str, "Vehicle serial number")

LOGIN_FIELDS = (
    FieldSpec("account", str, "Account"),
    FieldSpec("password", str, "Password"),
    FieldSpec("country_code", str, "Country code", wire_name="countryCode"),
)

TOKEN_FIELDS = (FieldSpec("token", str, "Token"),)


ENDPOINTS: dict[str, EndpointDescriptor] = {
    descriptor.name: descriptor
    for descriptor in (
        EndpointDescriptor(
            name="get_vehicles",
            path="/motoinfo/list",
            payload=PayloadStyle.FORM,
            model=models.Vehicle,
            many=True,
            doc="List the vehicles bound to the account.",
        ),
        EndpointDescriptor(
            name="get_vehicle_position",
            path="/motoinfo/currentpos",
            payload=PayloadStyle.FORM,
            fields=(SERIAL_NUMBER,),
            model=models.VehiclePosition,
            doc="Current GPS position of a vehicle.",
        ),
        EndpointDescriptor(
            name="get_overall_tally",
            path="/motoinfo/overallTally",
            payload=PayloadStyle.FORM,
            fields=(SERIAL_NUMBER,),
            model=models.OverallTally,
            doc="Total mileage and days since the vehicle was bound.",
        ),
        EndpointDescriptor(
            name="get_track_detail",
            path="/motoinfo/track/detail",
            payload=PayloadStyle.FORM,
            fields=(
                SERIAL_NUMBER,
                FieldSpec("track_id", str, "Track ID", wire_name="trackId"),
                FieldSpec("track_date", str, "Track date", wire_name="date"),
            ),
            model=models.TrackDetail,
            doc="Recorded points of one track. ``track_date`` is ``yyyymmdd``.",
        ),
        EndpointDescriptor(
            name="get_battery_info",
            path="/v3/motor_data/battery_info",
            payload=PayloadStyle.QUERY,
            fields=(SERIAL_NUMBER,),
            model=models.BatteryInfo,
            doc="Charge state and temperature of the batteries.",
        ),
        EndpointDescriptor(
            name="get_battery_health",
            path="/v3/motor_data/battery_info/health",
            payload=PayloadStyle.QUERY,
            fields=(SERIAL_NUMBER,),
            model=models.BatteryHealth,
            doc="Battery grade and health history.",
        ),
        EndpointDescriptor(
            name="get_motor_info",
            path="/v3/motor_data/index_info",
            payload=PayloadStyle.QUERY,
            fields=(SERIAL_NUMBER,),
            model=models.MotorData,
            doc="Live motor data: speed, position, lock state, last track.",
        ),
        EndpointDescriptor(
            name="get_tracks",
            path="/v3/motor_data/track",
            payload=PayloadStyle.FORM,
            fields=(
                SERIAL_NUMBER,
                FieldSpec("index", int, "Index"),
                FieldSpec("page_size", int, "Page size", wire_name="pagesize"),
            ),
            model=models.Track,
            many=True,
            doc="Page through recorded tracks, starting at ``index``.",
        ),
        EndpointDescriptor(
            name="get_firmware_version",
            path="/motorota/getfirmwareversion",
            payload=PayloadStyle.FORM,
            fields=(SERIAL_NUMBER,),
            model=models.FirmwareVersion,
            doc="Installed firmware and whether an update is available.",
        ),
        EndpointDescriptor(
            name="get_update_info",
            path="/motorota/getupdateinfo",
            payload=PayloadStyle.FORM,
            fields=(SERIAL_NUMBER,),
            model=models.UpdateInfo,
            doc="Over-the-air update information.",
        ),
    )
}
