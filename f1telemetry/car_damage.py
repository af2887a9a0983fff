"""Car damage packet: damage and wear readings for every car in the race."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import List

from .base import (
    CAR_DAMAGE_PACKET_SIZE,
    HEADER_SIZE,
    NUMBER_CARS,
    PacketHeader,
    UnpackError,
    WheelData,
    assert_packet_size,
)

_CAR_DAMAGE_STRUCT = struct.Struct("<4f26B")


@dataclass(frozen=True)
class CarDamageData:
    """Damage readings for a single car; values are percentages unless boolean."""

    tyres_wear: WheelData[float]
    tyres_damage: WheelData[int]
    brakes_damage: WheelData[int]
    front_left_wing_damage: int
    front_right_wing_damage: int
    rear_wing_damage: int
    floor_damage: int
    diffuser_damage: int
    sidepod_damage: int
    drs_fault: bool
    ers_fault: bool
    gear_box_damage: int
    engine_damage: int
    engine_mguh_wear: int
    engine_es_wear: int
    engine_ce_wear: int
    engine_ice_wear: int
    engine_mguk_wear: int
    engine_tc_wear: int
    engine_blown: bool
    engine_seized: bool


@dataclass(frozen=True)
class PacketCarDamageData:
    """A decoded car damage packet."""

    header: PacketHeader
    car_damage_data: List[CarDamageData]


def _as_bool(value: int) -> bool:
    if value not in (0, 1):
        raise UnpackError(f"Invalid bool value: {value}")
    return value == 1


def _car_damage(fields: tuple) -> CarDamageData:
    tyres_wear = WheelData(*fields[0:4])
    tyres_damage = WheelData(*fields[4:8])
    brakes_damage = WheelData(*fields[8:12])
    (
        front_left_wing_damage,
        front_right_wing_damage,
        rear_wing_damage,
        floor_damage,
        diffuser_damage,
        sidepod_damage,
        drs_fault,
        ers_fault,
        gear_box_damage,
        engine_damage,
        engine_mguh_wear,
        engine_es_wear,
        engine_ce_wear,
        engine_ice_wear,
        engine_mguk_wear,
        engine_tc_wear,
        engine_blown,
        engine_seized,
    ) = fields[12:]
    return CarDamageData(
        tyres_wear=tyres_wear,
        tyres_damage=tyres_damage,
        brakes_damage=brakes_damage,
        front_left_wing_damage=front_left_wing_damage,
        front_right_wing_damage=front_right_wing_damage,
        rear_wing_damage=rear_wing_damage,
        floor_damage=floor_damage,
        diffuser_damage=diffuser_damage,
        sidepod_damage=sidepod_damage,
        drs_fault=_as_bool(drs_fault),
        ers_fault=_as_bool(ers_fault),
        gear_box_damage=gear_box_damage,
        engine_damage=engine_damage,
        engine_mguh_wear=engine_mguh_wear,
        engine_es_wear=engine_es_wear,
        engine_ce_wear=engine_ce_wear,
        engine_ice_wear=engine_ice_wear,
        engine_mguk_wear=engine_mguk_wear,
        engine_tc_wear=engine_tc_wear,
        engine_blown=_as_bool(engine_blown),
        engine_seized=_as_bool(engine_seized),
    )


def parse_car_damage_data(data: bytes, header: PacketHeader) -> PacketCarDamageData:
    """Decode a whole car damage packet (header bytes included)."""
    assert_packet_size(len(data), CAR_DAMAGE_PACKET_SIZE)

    end = HEADER_SIZE + _CAR_DAMAGE_STRUCT.size * NUMBER_CARS
    car_damage_data = [
        _car_damage(fields)
        for fields in _CAR_DAMAGE_STRUCT.iter_unpack(data[HEADER_SIZE:end])
    ]
    return PacketCarDamageData(header=header, car_damage_data=car_damage_data)