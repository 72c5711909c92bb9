"""Data models for the Nature Remo API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class User:
    """Represents the authenticated Nature Remo user."""

    id: str
    nickname: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> User:
        return cls(id=data["id"], nickname=data["nickname"])


@dataclass(frozen=True)
class SensorValue:
    """A single sensor reading reported by a Remo hub."""

    value: float
    created_at: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SensorValue:
        return cls(value=data["value"], created_at=data["created_at"])


@dataclass(frozen=True)
class NewestEvents:
    """Latest sensor readings of a hub.

    Attributes:
        te: Temperature reading, or None if the hub has no such sensor.
        hu: Humidity reading, or None if the hub has no such sensor.

    """

    te: SensorValue | None = None
    hu: SensorValue | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> NewestEvents:
        data = data or {}
        return cls(
            te=_optional(SensorValue, data.get("te")),
            hu=_optional(SensorValue, data.get("hu")),
        )


@dataclass(frozen=True)
class DeviceCore:
    """Represents a physical Remo hub without its sensor readings.

    Attributes:
        id: Unique device identifier.
        name: Human-readable device name.
        temperature_offset: Offset applied to the temperature sensor.
        humidity_offset: Offset applied to the humidity sensor.
        created_at: Creation timestamp (ISO 8601).
        updated_at: Last update timestamp (ISO 8601).
        firmware_version: Firmware version string.

    """

    id: str
    name: str
    temperature_offset: float
    humidity_offset: float
    created_at: str
    updated_at: str
    firmware_version: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DeviceCore:
        return cls(**_device_core_fields(data))


@dataclass(frozen=True)
class Device(DeviceCore):
    """Represents a Remo hub with its latest sensor readings."""

    newest_events: NewestEvents

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Device:
        return cls(
            **_device_core_fields(data),
            newest_events=NewestEvents.from_dict(data.get("newest_events")),
        )


def _device_core_fields(data: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": data["id"],
        "name": data["name"],
        "temperature_offset": data.get("temperature_offset", 0),
        "humidity_offset": data.get("humidity_offset", 0),
        "created_at": data.get("created_at", ""),
        "updated_at": data.get("updated_at", ""),
        "firmware_version": data.get("firmware_version", ""),
    }


@dataclass(frozen=True)
class ApplianceModel:
    """Represents a known appliance model (manufacturer and remote)."""

    id: str
    manufacturer: str
    remote_name: str
    name: str
    image: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ApplianceModel:
        return cls(
            id=data.get("id", ""),
            manufacturer=data.get("manufacturer", ""),
            remote_name=data.get("remote_name", ""),
            name=data.get("name", ""),
            image=data.get("image", ""),
        )


@dataclass(frozen=True)
class AirConRangeMode:
    """Allowed values of an air conditioner operation mode."""

    temp: list[str]
    vol: list[str]
    dir: list[str]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AirConRangeMode:
        return cls(
            temp=data.get("temp", []),
            vol=data.get("vol", []),
            dir=data.get("dir", []),
        )


@dataclass(frozen=True)
class AirConRange:
    """Operation modes and fixed buttons supported by an air conditioner.

    Attributes:
        modes: Allowed values keyed by operation mode (cool, warm, dry,
            blow, auto).
        fixed_buttons: Buttons that are not part of any mode.

    """

    modes: dict[str, AirConRangeMode]
    fixed_buttons: list[str]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AirConRange:
        modes = data.get("modes") or {}
        return cls(
            modes={name: AirConRangeMode.from_dict(mode) for name, mode in modes.items()},
            fixed_buttons=list(data.get("fixedButtons") or []),
        )


@dataclass(frozen=True)
class AirCon:
    """Capabilities of an air conditioner appliance."""

    range: AirConRange
    temp_unit: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AirCon:
        return cls(
            range=AirConRange.from_dict(data.get("range") or {}),
            temp_unit=data.get("tempUnit", ""),
        )


@dataclass(frozen=True)
class AirConParams:
    """Current settings of an air conditioner appliance."""

    temp: str
    vol: str
    dir: str
    mode: str
    button: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AirConParams:
        return cls(
            temp=data.get("temp", ""),
            vol=data.get("vol", ""),
            dir=data.get("dir", ""),
            mode=data.get("mode", ""),
            button=data.get("button", ""),
        )


@dataclass(frozen=True)
class ApplianceModelAndParam:
    """An appliance model matched by a detected infrared signal."""

    model: ApplianceModel
    params: AirConParams

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ApplianceModelAndParam:
        return cls(
            model=ApplianceModel.from_dict(data["model"]),
            params=AirConParams.from_dict(data["params"]),
        )


@dataclass(frozen=True)
class Signal:
    """A stored infrared signal of an appliance."""

    id: str
    name: str
    image: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Signal:
        return cls(id=data["id"], name=data.get("name", ""), image=data.get("image", ""))


@dataclass(frozen=True)
class Appliance:
    """Represents a controllable appliance tied to a Remo hub.

    Attributes:
        id: Unique appliance identifier.
        device: Hub that controls this appliance.
        model: Recognised appliance model, or None for custom IR appliances.
        nickname: Human-readable appliance name.
        image: Icon name.
        type: Appliance type (e.g. "AC", "TV", "IR").
        settings: Current air conditioner settings, or None.
        aircon: Air conditioner capabilities, or None.
        signals: Stored infrared signals.

    """

    id: str
    device: DeviceCore
    model: ApplianceModel | None
    nickname: str
    image: str
    type: str
    settings: AirConParams | None
    aircon: AirCon | None
    signals: list[Signal]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Appliance:
        return cls(
            id=data["id"],
            device=DeviceCore.from_dict(data["device"]),
            model=_optional(ApplianceModel, data.get("model")),
            nickname=data.get("nickname", ""),
            image=data.get("image", ""),
            type=data.get("type", ""),
            settings=_optional(AirConParams, data.get("settings")),
            aircon=_optional(AirCon, data.get("aircon")),
            signals=[Signal.from_dict(s) for s in data.get("signals") or []],
        )


@dataclass(frozen=True)
class InfraredSignal:
    """A raw infrared waveform.

    Attributes:
        format: Encoding of the data, "us" for microsecond durations.
        freq: Carrier frequency in kHz.
        data: Alternating on/off durations.

    """

    format: str
    freq: int
    data: list[int]

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation of the signal."""
        return {"format": self.format, "freq": self.freq, "data": list(self.data)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InfraredSignal:
        return cls(format=data["format"], freq=data["freq"], data=list(data["data"]))


def _optional(model: Any, data: dict[str, Any] | None) -> Any:
    """Build a model from data, or return None when data is null or absent."""
    if data is None:
        return None
    return model.from_dict(data)
