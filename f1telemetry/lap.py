"""Lap data packet: lap timing and race state for every car in the session."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Type, TypeVar

from .base import (
    HEADER_SIZE,
    LAP_DATA_PACKET_SIZE,
    NUMBER_CARS,
    PacketHeader,
    UnpackError,
    assert_packet_size,
)
from .generic import ResultStatus, unpack_result_status

E = TypeVar("E", bound=Enum)

_LAP_STRUCT = struct.Struct("<2I2H3f14B2HB")
_TRAILER_STRUCT = struct.Struct("<2B")


class PitStatus(Enum):
    NONE = 0
    PITTING = 1
    PIT_LANE = 2


class Sector(Enum):
    SECTOR1 = 0
    SECTOR2 = 1
    SECTOR3 = 2


class DriverStatus(Enum):
    GARAGE = 0
    FLYING_LAP = 1
    IN_LAP = 2
    OUT_LAP = 3
    ON_TRACK = 4


@dataclass(frozen=True)
class LapData:
    """Lap timing for a single car; times are in milliseconds, distances in metres."""

    last_lap_time: int
    current_lap_time: int
    sector_1_time: int
    sector_2_time: int
    lap_distance: float
    total_distance: float
    safety_car_delta: float
    car_position: int
    current_lap_num: int
    pit_status: PitStatus
    number_pit_stops: int
    sector: Sector
    current_lap_invalid: bool
    penalties: int
    warnings: int
    number_unserved_drive_through: int
    number_unserved_stop_go: int
    grid_position: int
    driver_status: DriverStatus
    result_status: ResultStatus
    pit_lane_timer_active: bool
    pit_lane_time_in_lane: int
    pit_stop_time: int
    pit_stop_should_serve_penalty: bool


@dataclass(frozen=True)
class PacketLapData:
    """A decoded lap data packet."""

    header: PacketHeader
    lap_data: List[LapData]
    time_trial_personal_best_car_idx: Optional[int]
    time_trial_rival_car_idx: Optional[int]


def _unpack(enum_cls: Type[E], value: int, label: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        raise UnpackError(f"Invalid {label} value: {value}") from None


def _as_bool(value: int) -> bool:
    if value not in (0, 1):
        raise UnpackError(f"Invalid bool value: {value}")
    return value == 1


def _optional_index(value: int) -> Optional[int]:
    return None if value == 255 else value


def unpack_pit_status(value: int) -> PitStatus:
    """Decode a pit status byte."""
    return _unpack(PitStatus, value, "PitStatus")


def unpack_sector(value: int) -> Sector:
    """Decode a sector byte."""
    return _unpack(Sector, value, "Sector")


def unpack_driver_status(value: int) -> DriverStatus:
    """Decode a driver status byte."""
    return _unpack(DriverStatus, value, "DriverStatus")


def _lap_data(fields: tuple) -> LapData:
    (
        last_lap_time,
        current_lap_time,
        sector_1_time,
        sector_2_time,
        lap_distance,
        total_distance,
        safety_car_delta,
        car_position,
        current_lap_num,
        pit_status,
        number_pit_stops,
        sector,
        current_lap_invalid,
        penalties,
        warnings,
        number_unserved_drive_through,
        number_unserved_stop_go,
        grid_position,
        driver_status,
        result_status,
        pit_lane_timer_active,
        pit_lane_time_in_lane,
        pit_stop_time,
        pit_stop_should_serve_penalty,
    ) = fields
    return LapData(
        last_lap_time=last_lap_time,
        current_lap_time=current_lap_time,
        sector_1_time=sector_1_time,
        sector_2_time=sector_2_time,
        lap_distance=lap_distance,
        total_distance=total_distance,
        safety_car_delta=safety_car_delta,
        car_position=car_position,
        current_lap_num=current_lap_num,
        pit_status=unpack_pit_status(pit_status),
        number_pit_stops=number_pit_stops,
        sector=unpack_sector(sector),
        current_lap_invalid=_as_bool(current_lap_invalid),
        penalties=penalties,
        warnings=warnings,
        number_unserved_drive_through=number_unserved_drive_through,
        number_unserved_stop_go=number_unserved_stop_go,
        grid_position=grid_position,
        driver_status=unpack_driver_status(driver_status),
        result_status=unpack_result_status(result_status),
        pit_lane_timer_active=_as_bool(pit_lane_timer_active),
        pit_lane_time_in_lane=pit_lane_time_in_lane,
        pit_stop_time=pit_stop_time,
        pit_stop_should_serve_penalty=_as_bool(pit_stop_should_serve_penalty),
    )


def parse_lap_data(data: bytes, header: PacketHeader) -> PacketLapData:
    """Decode a whole lap data packet (header bytes included)."""
    assert_packet_size(len(data), LAP_DATA_PACKET_SIZE)

    end = HEADER_SIZE + _LAP_STRUCT.size * NUMBER_CARS
    lap_data = [_lap_data(fields) for fields in _LAP_STRUCT.iter_unpack(data[HEADER_SIZE:end])]
    personal_best, rival = _TRAILER_STRUCT.unpack_from(data, end)

    return PacketLapData(
        header=header,
        lap_data=lap_data,
        time_trial_personal_best_car_idx=_optional_index(personal_best),
        time_trial_rival_car_idx=_optional_index(rival),
    )