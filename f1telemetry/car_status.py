"""Car status packet: the status of every car in the race."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum
from typing import List, Type, TypeVar

from .base import (
    CAR_STATUS_PACKET_SIZE,
    HEADER_SIZE,
    NUMBER_CARS,
    PacketHeader,
    UnpackError,
    assert_packet_size,
)
from .generic import (
    Flag,
    TyreCompound,
    TyreCompoundVisual,
    unpack_flag,
    unpack_tyre_compound,
    unpack_tyre_compound_visual,
)

E = TypeVar("E", bound=Enum)

_CAR_STATUS_STRUCT = struct.Struct("<5B3f2HBbH3BbfB3fB")


class TractionControl(Enum):
    OFF = 0
    LOW = 1
    HIGH = 2


class FuelMix(Enum):
    LEAN = 0
    STANDARD = 1
    RICH = 2
    MAX = 3


class DRS(Enum):
    NOT_ALLOWED = 0
    ALLOWED = 1
    UNKNOWN = -1


class ERSDeployMode(Enum):
    NONE = 0
    MEDIUM = 1
    HOTLAP = 2
    OVERTAKE = 3


@dataclass(frozen=True)
class CarStatusData:
    """Status of a single car."""

    traction_control: TractionControl
    anti_lock_brakes: bool
    fuel_mix: FuelMix
    front_brake_bias: int
    pit_limiter: bool
    fuel_in_tank: float
    fuel_capacity: float
    fuel_remaining_laps: float
    max_rpm: int
    idle_rpm: int
    max_gears: int
    drs_status: DRS
    drs_activation_distance: int
    actual_tyre_compound: TyreCompound
    visual_tyre_compound: TyreCompoundVisual
    tyre_age_laps: int
    vehicle_fia_flag: Flag
    ers_store_energy: float
    ers_deploy_mode: ERSDeployMode
    ers_harvested_this_lap_mguk: float
    ers_harvested_this_lap_mguh: float
    ers_deployed_this_lap: float
    network_paused: bool


@dataclass(frozen=True)
class PacketCarStatusData:
    """A decoded car status packet."""

    header: PacketHeader
    car_status_data: List[CarStatusData]


def _unpack(enum_cls: Type[E], value: int, label: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        raise UnpackError(f"Invalid {label} value: {value}") from None


def _as_bool(value: int) -> bool:
    if value not in (0, 1):
        raise UnpackError(f"Invalid bool value: {value}")
    return value == 1


def unpack_traction_control(value: int) -> TractionControl:
    """Decode a traction control byte."""
    return _unpack(TractionControl, value, "TractionControl")


def unpack_fuel_mix(value: int) -> FuelMix:
    """Decode a fuel mix byte."""
    return _unpack(FuelMix, value, "FuelMix")


def unpack_drs(value: int) -> DRS:
    """Decode a signed DRS availability byte."""
    return _unpack(DRS, value, "DRS")


def unpack_ers_deploy_mode(value: int) -> ERSDeployMode:
    """Decode an ERS deployment mode byte."""
    return _unpack(ERSDeployMode, value, "ERSDeployMode")


def _car_status(fields: tuple) -> CarStatusData:
    (
        traction_control,
        anti_lock_brakes,
        fuel_mix,
        front_brake_bias,
        pit_limiter,
        fuel_in_tank,
        fuel_capacity,
        fuel_remaining_laps,
        max_rpm,
        idle_rpm,
        max_gears,
        drs_allowed,
        drs_activation_distance,
        actual_tyre_compound,
        visual_tyre_compound,
        tyres_age_laps,
        vehicle_fia_flags,
        ers_store_energy,
        ers_deploy_mode,
        ers_harvested_this_lap_mguk,
        ers_harvested_this_lap_mguh,
        ers_deployed_this_lap,
        network_paused,
    ) = fields
    return CarStatusData(
        traction_control=unpack_traction_control(traction_control),
        anti_lock_brakes=_as_bool(anti_lock_brakes),
        fuel_mix=unpack_fuel_mix(fuel_mix),
        front_brake_bias=front_brake_bias,
        pit_limiter=_as_bool(pit_limiter),
        fuel_in_tank=fuel_in_tank,
        fuel_capacity=fuel_capacity,
        fuel_remaining_laps=fuel_remaining_laps,
        max_rpm=max_rpm,
        idle_rpm=idle_rpm,
        max_gears=max_gears,
        drs_status=unpack_drs(drs_allowed),
        drs_activation_distance=drs_activation_distance,
        actual_tyre_compound=unpack_tyre_compound(actual_tyre_compound),
        visual_tyre_compound=unpack_tyre_compound_visual(visual_tyre_compound),
        tyre_age_laps=tyres_age_laps,
        vehicle_fia_flag=unpack_flag(vehicle_fia_flags),
        ers_store_energy=ers_store_energy,
        ers_deploy_mode=unpack_ers_deploy_mode(ers_deploy_mode),
        ers_harvested_this_lap_mguk=ers_harvested_this_lap_mguk,
        ers_harvested_this_lap_mguh=ers_harvested_this_lap_mguh,
        ers_deployed_this_lap=ers_deployed_this_lap,
        network_paused=_as_bool(network_paused),
    )


def parse_car_status_data(data: bytes, header: PacketHeader) -> PacketCarStatusData:
    """Decode a whole car status packet (header bytes included)."""
    assert_packet_size(len(data), CAR_STATUS_PACKET_SIZE)

    end = HEADER_SIZE + _CAR_STATUS_STRUCT.size * NUMBER_CARS
    car_status_data = [
        _car_status(fields)
        for fields in _CAR_STATUS_STRUCT.iter_unpack(data[HEADER_SIZE:end])
    ]
    return PacketCarStatusData(header=header, car_status_data=car_status_data)