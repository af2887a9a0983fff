"""Car setups packet: the setup of every car in the session."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import List

from .base import (
    CAR_SETUPS_PACKET_SIZE,
    HEADER_SIZE,
    NUMBER_CARS,
    PacketHeader,
    WheelData,
    assert_packet_size,
)

_CAR_SETUP_STRUCT = struct.Struct("<4B4f8B4fBf")


@dataclass(frozen=True)
class CarSetupData:
    """Setup of a single car; tyre pressures are in PSI."""

    front_wing: int
    rear_wing: int
    on_throttle: int
    off_throttle: int
    front_camber: float
    rear_camber: float
    front_toe: float
    rear_toe: float
    front_suspension: int
    rear_suspension: int
    front_anti_roll_bar: int
    rear_anti_roll_bar: int
    front_suspension_height: int
    rear_suspension_height: int
    brake_pressure: int
    brake_bias: int
    tyres_pressure: WheelData[float]
    ballast: int
    fuel_load: float


@dataclass(frozen=True)
class PacketCarSetupData:
    """A decoded car setups packet."""

    header: PacketHeader
    car_setups: List[CarSetupData]


def _car_setup(fields: tuple) -> CarSetupData:
    (
        front_wing,
        rear_wing,
        on_throttle,
        off_throttle,
        front_camber,
        rear_camber,
        front_toe,
        rear_toe,
        front_suspension,
        rear_suspension,
        front_anti_roll_bar,
        rear_anti_roll_bar,
        front_suspension_height,
        rear_suspension_height,
        brake_pressure,
        brake_bias,
        rear_left_pressure,
        rear_right_pressure,
        front_left_pressure,
        front_right_pressure,
        ballast,
        fuel_load,
    ) = fields
    return CarSetupData(
        front_wing=front_wing,
        rear_wing=rear_wing,
        on_throttle=on_throttle,
        off_throttle=off_throttle,
        front_camber=front_camber,
        rear_camber=rear_camber,
        front_toe=front_toe,
        rear_toe=rear_toe,
        front_suspension=front_suspension,
        rear_suspension=rear_suspension,
        front_anti_roll_bar=front_anti_roll_bar,
        rear_anti_roll_bar=rear_anti_roll_bar,
        front_suspension_height=front_suspension_height,
        rear_suspension_height=rear_suspension_height,
        brake_pressure=brake_pressure,
        brake_bias=brake_bias,
        tyres_pressure=WheelData(
            rear_left=rear_left_pressure,
            rear_right=rear_right_pressure,
            front_left=front_left_pressure,
            front_right=front_right_pressure,
        ),
        ballast=ballast,
        fuel_load=fuel_load,
    )


def parse_car_setup_data(data: bytes, header: PacketHeader) -> PacketCarSetupData:
    """Decode a whole car setups packet (header bytes included)."""
    assert_packet_size(len(data), CAR_SETUPS_PACKET_SIZE)

    end = HEADER_SIZE + _CAR_SETUP_STRUCT.size * NUMBER_CARS
    car_setups = [
        _car_setup(fields)
        for fields in _CAR_SETUP_STRUCT.iter_unpack(data[HEADER_SIZE:end])
    ]
    return PacketCarSetupData(header=header, car_setups=car_setups)