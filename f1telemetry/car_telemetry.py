"""Car telemetry packet: speed, inputs and temperatures for every car in the race."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Type, TypeVar

from .base import (
    CAR_TELEMETRY_PACKET_SIZE,
    HEADER_SIZE,
    NUMBER_CARS,
    PacketHeader,
    UnpackError,
    WheelData,
    assert_packet_size,
)

E = TypeVar("E", bound=Enum)

_CAR_TELEMETRY_STRUCT = struct.Struct("<H3fBbHBBH4H4B4BH4f4B")
_TRAILER_STRUCT = struct.Struct("<BBb")


class SurfaceType(Enum):
    TARMAC = 0
    RUMBLE_STRIP = 1
    CONCRETE = 2
    ROCK = 3
    GRAVEL = 4
    MUD = 5
    SAND = 6
    GRASS = 7
    WATER = 8
    COBBLESTONE = 9
    METAL = 10
    RIDGED = 11


class MFDPanel(Enum):
    CAR_SETUP = 0
    PITS = 1
    DAMAGE = 2
    ENGINE = 3
    TEMPERATURES = 4
    CLOSED = 255


@dataclass(frozen=True)
class CarTelemetryData:
    """Telemetry for a single car; speed in km/h, temperatures in celsius, pressures in PSI."""

    speed: int
    throttle: float
    steer: float
    brake: float
    clutch: int
    gear: int
    engine_rpm: int
    drs: bool
    rev_lights_percent: int
    rev_lights_bit_value: int
    brakes_temperature: WheelData[int]
    tyres_surface_temperature: WheelData[int]
    tyres_inner_temperature: WheelData[int]
    engine_temperature: int
    tyre_pressures: WheelData[float]
    surface_types: WheelData[SurfaceType]


@dataclass(frozen=True)
class PacketCarTelemetryData:
    """A decoded car telemetry packet."""

    header: PacketHeader
    car_telemetry_data: List[CarTelemetryData]
    mfd_panel: MFDPanel
    secondary_player_mfd_panel: MFDPanel
    suggested_gear: int
    button_status: Optional[int] = None


def _unpack(enum_cls: Type[E], value: int, label: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        raise UnpackError(f"Invalid {label} value: {value}") from None


def _as_bool(value: int) -> bool:
    if value not in (0, 1):
        raise UnpackError(f"Invalid bool value: {value}")
    return value == 1


def unpack_surface_type(value: int) -> SurfaceType:
    """Decode a driving surface byte."""
    return _unpack(SurfaceType, value, "SurfaceType")


def unpack_mfd_panel(value: int) -> MFDPanel:
    """Decode an MFD panel index; 255 means the panel is closed."""
    return _unpack(MFDPanel, value, "MFDPanel")


def _car_telemetry(fields: tuple) -> CarTelemetryData:
    (
        speed,
        throttle,
        steer,
        brake,
        clutch,
        gear,
        engine_rpm,
        drs,
        rev_lights_percent,
        rev_lights_bit_value,
    ) = fields[:10]
    return CarTelemetryData(
        speed=speed,
        throttle=throttle,
        steer=steer,
        brake=brake,
        clutch=clutch,
        gear=gear,
        engine_rpm=engine_rpm,
        drs=_as_bool(drs),
        rev_lights_percent=rev_lights_percent,
        rev_lights_bit_value=rev_lights_bit_value,
        brakes_temperature=WheelData(*fields[10:14]),
        tyres_surface_temperature=WheelData(*fields[14:18]),
        tyres_inner_temperature=WheelData(*fields[18:22]),
        engine_temperature=fields[22],
        tyre_pressures=WheelData(*fields[23:27]),
        surface_types=WheelData(*fields[27:31]).map(unpack_surface_type),
    )


def parse_car_telemetry_data(data: bytes, header: PacketHeader) -> PacketCarTelemetryData:
    """Decode a whole car telemetry packet (header bytes included)."""
    assert_packet_size(len(data), CAR_TELEMETRY_PACKET_SIZE)

    end = HEADER_SIZE + _CAR_TELEMETRY_STRUCT.size * NUMBER_CARS
    car_telemetry_data = [
        _car_telemetry(fields)
        for fields in _CAR_TELEMETRY_STRUCT.iter_unpack(data[HEADER_SIZE:end])
    ]
    mfd_panel, secondary_mfd_panel, suggested_gear = _TRAILER_STRUCT.unpack_from(data, end)

    return PacketCarTelemetryData(
        header=header,
        car_telemetry_data=car_telemetry_data,
        mfd_panel=unpack_mfd_panel(mfd_panel),
        secondary_player_mfd_panel=unpack_mfd_panel(secondary_mfd_panel),
        suggested_gear=suggested_gear,
        button_status=None,
    )