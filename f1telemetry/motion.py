"""Motion packet: physics data for every car, plus extra data for the player's car."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import List

from .base import (
    HEADER_SIZE,
    MOTION_PACKET_SIZE,
    NUMBER_CARS,
    PacketHeader,
    WheelData,
    assert_packet_size,
)

_CAR_MOTION_STRUCT = struct.Struct("<6f6h6f")
_PLAYER_CAR_STRUCT = struct.Struct("<30f")


@dataclass(frozen=True)
class CarMotionData:
    """Physics data for a single car.

    Forward and right directions are normalised vectors encoded as signed
    16-bit integers, as sent on the wire.
    """

    world_position_x: float
    world_position_y: float
    world_position_z: float
    world_velocity_x: float
    world_velocity_y: float
    world_velocity_z: float
    world_forward_dir_x: int
    world_forward_dir_y: int
    world_forward_dir_z: int
    world_right_dir_x: int
    world_right_dir_y: int
    world_right_dir_z: int
    g_force_lateral: float
    g_force_longitudinal: float
    g_force_vertical: float
    yaw: float
    pitch: float
    roll: float


@dataclass(frozen=True)
class PlayerCarData:
    """Extra physics data sent only for the player's car."""

    suspension_position: WheelData[float]
    suspension_velocity: WheelData[float]
    suspension_acceleration: WheelData[float]
    wheel_speed: WheelData[float]
    wheel_slip: WheelData[float]
    local_velocity_x: float
    local_velocity_y: float
    local_velocity_z: float
    angular_velocity_x: float
    angular_velocity_y: float
    angular_velocity_z: float
    angular_acceleration_x: float
    angular_acceleration_y: float
    angular_acceleration_z: float
    front_wheels_angle: float


@dataclass(frozen=True)
class PacketMotionData:
    """A decoded motion packet."""

    header: PacketHeader
    motion_data: List[CarMotionData]
    player_car_data: PlayerCarData


def parse_motion_data(data: bytes, header: PacketHeader) -> PacketMotionData:
    """Decode a whole motion packet (header bytes included) into PacketMotionData."""
    assert_packet_size(len(data), MOTION_PACKET_SIZE)

    cars_end = HEADER_SIZE + _CAR_MOTION_STRUCT.size * NUMBER_CARS
    motion_data = [
        CarMotionData(*fields)
        for fields in _CAR_MOTION_STRUCT.iter_unpack(data[HEADER_SIZE:cars_end])
    ]

    values = _PLAYER_CAR_STRUCT.unpack_from(data, cars_end)
    wheels = [WheelData(*values[start : start + 4]) for start in range(0, 20, 4)]
    player_car_data = PlayerCarData(*wheels, *values[20:])

    return PacketMotionData(
        header=header,
        motion_data=motion_data,
        player_car_data=player_car_data,
    )