"""Result envelope and typed views of NIU cloud response payloads.

The vendor does not publish a schema. Fields below follow the documented
shape; every field is optional and undocumented keys are kept in
``extensions``. Fields whose meaning is unknown are typed ``Any`` and passed
through unchanged.
"""

from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from niu_cloud_client.endpoints import EndpointDescriptor


def wire(key: str, model: type | None = None, many: bool = False) -> Any:
    """Declare a field read from wire key ``key``, optionally as a nested model."""
    return field(default=None, metadata={"key": key, "model": model, "many": many})


def nested(model: type, many: bool = False) -> Any:
    return field(default=None, metadata={"model": model, "many": many})


class ResponseModel:
    """Mixin for dataclasses built from a response ``data`` object."""

    @classmethod
    def from_dict(cls, data: dict[str, Any]):
        kwargs: dict[str, Any] = {}
        consumed = set()

        for f in fields(cls):
            if f.name == "extensions":
                continue
            key = f.metadata.get("key", f.name)
            consumed.add(key)
            if key not in data:
                continue
            kwargs[f.name] = _convert(data[key], f.metadata.get("model"), f.metadata.get("many", False))

        extensions = {k: v for k, v in data.items() if k not in consumed}
        return cls(**kwargs, extensions=extensions if extensions else None)


def _convert(value: Any, model: type | None, many: bool) -> Any:
    if model is None or value is None:
        return value
    if many and isinstance(value, list):
        return [model.from_dict(item) if isinstance(item, dict) else item for item in value]
    if isinstance(value, dict):
        return model.from_dict(value)
    return value


@dataclass
class ApiResult:
    """Successful outcome of a client operation.

    Attributes:
        client: The client that produced the result, for chaining calls.
        data: The parsed response body. For login this is the token string,
            for token injection it is None.
        endpoint: Descriptor of the endpoint that was called, if any.
    """

    client: Any
    data: Any
    endpoint: "EndpointDescriptor | None" = None

    def parsed(self) -> Any:
        """Convert the body's ``data`` member into the endpoint's result model.

        Returns a list for list endpoints, a model instance otherwise, or
        None when the body has no usable ``data``.
        """
        if self.endpoint is None or self.endpoint.model is None:
            raise ValueError("Result has no endpoint model to parse into")
        payload = self.data.get("data") if isinstance(self.data, dict) else None
        return _convert(payload, self.endpoint.model, self.endpoint.many)


# /motoinfo


@dataclass
class VehicleFeature(ResponseModel):
    feature_name: str | None = wire("featureName")
    is_support: Any = wire("isSupport")
    switch_status: Any = None
    extensions: dict[str, Any] | None = None


@dataclass
class Vehicle(ResponseModel):
    """One entry of the vehicle list."""

    sn: str | None = None
    name: str | None = None
    type: str | None = None
    frame_no: str | None = wire("frameNo")
    engine_no: str | None = wire("engineNo")
    vehicle_type_id: str | None = wire("vehicleTypeId")
    product_type: str | None = wire("productType")
    is_double_battery: bool | None = wire("isDoubleBattery")
    gps_timestamp: int | None = wire("gpsTimestamp")
    info_timestamp: int | None = wire("infoTimestamp")
    vehicle_color_img: str | None = wire("vehicleColorImg")
    vehicle_logo_img: str | None = wire("vehicleLogoImg")
    index_header_bg: str | None = wire("indexHeaderBg")
    scooter_img: str | None = wire("scootorImg")
    battery_info_bg: str | None = wire("batteryInfoBg")
    my_page_header_bg: str | None = wire("myPageHeaderBg")
    list_scooter_img: str | None = wire("listScooterImg")
    features: list[VehicleFeature] | None = nested(VehicleFeature, many=True)
    special_edition: Any = wire("specialEdition")
    is_selected: Any = wire("isSelected")
    is_master: Any = wire("isMaster")
    bind_num: Any = wire("bindNum")
    bind_date: Any = wire("bindDate")
    renovated: Any = None
    is_show: Any = wire("isShow")
    is_lite: Any = wire("isLite")
    process: Any = None
    brand: Any = None
    extensions: dict[str, Any] | None = None


@dataclass
class VehiclePosition(ResponseModel):
    lat: float | None = None
    lng: float | None = None
    timestamp: int | None = None
    gps_precision: float | None = wire("gpsPrecision")
    gps: Any = None
    extensions: dict[str, Any] | None = None


@dataclass
class OverallTally(ResponseModel):
    bind_days_count: int | None = wire("bindDaysCount")
    total_mileage: float | None = wire("totalMileage")
    extensions: dict[str, Any] | None = None


@dataclass
class Coordinate(ResponseModel):
    lat: Any = None
    lng: Any = None
    extensions: dict[str, Any] | None = None


@dataclass
class TrackItem(ResponseModel):
    lat: float | None = None
    lng: float | None = None
    date: int | None = None
    extensions: dict[str, Any] | None = None


@dataclass
class TrackDetail(ResponseModel):
    """Recorded points of one ride; ``track_items[0]`` is the end point."""

    track_items: list[TrackItem] | None = wire("trackItems", TrackItem, many=True)
    start_point: Coordinate | None = wire("startPoint", Coordinate)
    last_point: Coordinate | None = wire("lastPoint", Coordinate)
    start_time: Any = wire("startTime")
    last_date: Any = wire("lastDate")
    extensions: dict[str, Any] | None = None


# /v3/motor_data


@dataclass
class CompartmentBatteryInfo(ResponseModel):
    bms_id: str | None = wire("bmsId")
    is_connected: bool | None = wire("isConnected")
    battery_charging: int | None = wire("batteryCharging")
    charged_times: str | None = wire("chargedTimes")
    temperature: float | None = None
    temperature_desc: str | None = wire("temperatureDesc")
    energy_consumed_today: float | None = wire("energyConsumedTody")
    grade_battery: str | None = wire("gradeBattery")
    total_point: int | None = wire("totalPoint")
    items: Any = None
    extensions: dict[str, Any] | None = None


@dataclass
class BatteryInfoCompartments(ResponseModel):
    compartment_a: CompartmentBatteryInfo | None = wire("compartmentA", CompartmentBatteryInfo)
    compartment_b: CompartmentBatteryInfo | None = wire("compartmentB", CompartmentBatteryInfo)
    extensions: dict[str, Any] | None = None


@dataclass
class BatteryInfo(ResponseModel):
    batteries: BatteryInfoCompartments | None = nested(BatteryInfoCompartments)
    is_charging: int | None = wire("isCharging")
    centre_ctrl_battery: Any = wire("centreCtrlBattery")
    battery_detail: bool | None = wire("batteryDetail")
    estimated_mileage: float | None = wire("estimatedMileage")
    extensions: dict[str, Any] | None = None


@dataclass
class HealthRecord(ResponseModel):
    result: str | None = None
    charge_count: str | None = wire("chargeCount")
    color: str | None = None
    time: int | None = None
    name: str | None = None
    extensions: dict[str, Any] | None = None


@dataclass
class CompartmentBatteryHealth(ResponseModel):
    bms_id: str | None = wire("bmsId")
    is_connected: bool | None = wire("isConnected")
    grade_battery: str | None = wire("gradeBattery")
    faults: list[Any] | None = None
    health_records: list[HealthRecord] | None = wire("healthRecords", HealthRecord, many=True)
    extensions: dict[str, Any] | None = None


@dataclass
class BatteryHealthCompartments(ResponseModel):
    compartment_a: CompartmentBatteryHealth | None = wire("compartmentA", CompartmentBatteryHealth)
    compartment_b: CompartmentBatteryHealth | None = wire("compartmentB", CompartmentBatteryHealth)
    extensions: dict[str, Any] | None = None


@dataclass
class BatteryHealth(ResponseModel):
    batteries: BatteryHealthCompartments | None = nested(BatteryHealthCompartments)
    is_double_battery: bool | None = wire("isDoubleBattery")
    extensions: dict[str, Any] | None = None


@dataclass
class CompartmentMotorData(ResponseModel):
    bms_id: str | None = wire("bmsId")
    is_connected: bool | None = wire("isConnected")
    battery_charging: int | None = wire("batteryCharging")
    grade_battery: str | None = wire("gradeBattery")
    extensions: dict[str, Any] | None = None


@dataclass
class MotorDataCompartments(ResponseModel):
    compartment_a: CompartmentMotorData | None = wire("compartmentA", CompartmentMotorData)
    compartment_b: CompartmentMotorData | None = wire("compartmentB", CompartmentMotorData)
    extensions: dict[str, Any] | None = None


@dataclass
class LastTrack(ResponseModel):
    riding_time: int | None = wire("ridingTime")
    distance: int | None = None
    time: int | None = None
    extensions: dict[str, Any] | None = None


@dataclass
class MotorData(ResponseModel):
    """Live state of the scooter."""

    is_charging: int | None = wire("isCharging")
    lock_status: int | None = wire("lockStatus")
    is_acc_on: int | None = wire("isAccOn")
    is_fortification_on: Any = wire("isFortificationOn")
    is_connected: bool | None = wire("isConnected")
    # the vendor spells this key "postion"
    position: Coordinate | None = wire("postion", Coordinate)
    hdop: float | None = None
    time: int | None = None
    batteries: MotorDataCompartments | None = nested(MotorDataCompartments)
    left_time: Any = wire("leftTime")
    estimated_mileage: float | None = wire("estimatedMileage")
    gps_timestamp: int | None = wire("gpsTimestamp")
    info_timestamp: int | None = wire("infoTimestamp")
    now_speed: float | None = wire("nowSpeed")
    battery_detail: bool | None = wire("batteryDetail")
    centre_ctrl_battery: Any = wire("centreCtrlBattery")
    ss_protocol_ver: Any = None
    ss_online_sta: Any = None
    gps: int | None = None
    gsm: int | None = None
    last_track: LastTrack | None = wire("lastTrack", LastTrack)
    extensions: dict[str, Any] | None = None


@dataclass
class TrackPoint(ResponseModel):
    lat: Any = None
    lng: Any = None
    speed: Any = None
    battery: Any = None
    mileage: Any = None
    date: Any = None
    extensions: dict[str, Any] | None = None


@dataclass
class Track(ResponseModel):
    """Summary of one recorded ride."""

    id: str | None = None
    track_id: str | None = wire("trackId")
    start_time: int | None = wire("startTime")
    end_time: int | None = wire("endTime")
    distance: int | None = None
    average_speed: float | None = wire("avespeed")
    riding_time: int | None = wire("ridingtime")
    type: str | None = None
    date: str | None = None
    start_point: TrackPoint | None = wire("startPoint", TrackPoint)
    last_point: TrackPoint | None = wire("lastPoint", TrackPoint)
    extensions: dict[str, Any] | None = None


# /motorota


@dataclass
class FirmwareVersion(ResponseModel):
    now_version: str | None = wire("nowVersion")
    version: str | None = None
    hard_version: str | None = wire("hardVersion")
    byte_size: str | None = wire("byteSize")
    date: int | None = None
    is_support_update: bool | None = wire("isSupportUpdate")
    need_update: bool | None = wire("needUpdate")
    ota_describe: str | None = wire("otaDescribe")
    ss_protocol_ver: Any = None
    extensions: dict[str, Any] | None = None


@dataclass
class UpdateInfo(ResponseModel):
    centre_ctrl_battery: Any = wire("centreCtrlBattery")
    date: int | None = None
    csq: Any = None
    extensions: dict[str, Any] | None = None
