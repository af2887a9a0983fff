"""Shared building blocks: errors, packet header, wheel data and size checks."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")

NUMBER_CARS = 22
NUMBER_MARSHAL_ZONES = 21

HEADER_SIZE = 24

CAR_DAMAGE_PACKET_SIZE = 948
CAR_SETUPS_PACKET_SIZE = 1102
CAR_STATUS_PACKET_SIZE = 1058
CAR_TELEMETRY_PACKET_SIZE = 1347
EVENT_PACKET_SIZE = 40
FINAL_CLASSIFICATION_PACKET_SIZE = 1015
LAP_DATA_PACKET_SIZE = 972
LOBBY_INFO_PACKET_SIZE = 1191
MOTION_PACKET_SIZE = 1464
PARTICIPANTS_PACKET_SIZE = 1257
SESSION_HISTORY_PACKET_SIZE = 1155
SESSION_PACKET_SIZE = 632

_HEADER_STRUCT = struct.Struct("<HBBBBQfIBB")


class UnpackError(Exception):
    """Raised when a telemetry packet cannot be decoded."""


class PacketType(Enum):
    """Kind of telemetry packet, valued by its wire identifier."""

    MOTION = 0
    SESSION = 1
    LAP_DATA = 2
    EVENT = 3
    PARTICIPANTS = 4
    CAR_SETUPS = 5
    CAR_TELEMETRY = 6
    CAR_STATUS = 7
    FINAL_CLASSIFICATION = 8
    LOBBY_INFO = 9
    CAR_DAMAGE = 10
    SESSION_HISTORY = 11


@dataclass(frozen=True)
class PacketHeader:
    """Header common to every telemetry packet."""

    packet_format: int
    game_major_version: int
    game_minor_version: int
    packet_version: int
    packet_type: PacketType
    session_uid: int
    session_time: int
    frame_identifier: int
    player_car_index: int
    secondary_player_car_index: Optional[int]


@dataclass(frozen=True)
class WheelData(Generic[T]):
    """One value per wheel, in wire order: RL, RR, FL, FR."""

    rear_left: T
    rear_right: T
    front_left: T
    front_right: T

    def map(self, func: Callable[[T], U]) -> "WheelData[U]":
        """Apply ``func`` to each wheel's value."""
        return WheelData(
            func(self.rear_left),
            func(self.rear_right),
            func(self.front_left),
            func(self.front_right),
        )

    def __iter__(self) -> Iterator[T]:
        yield self.rear_left
        yield self.rear_right
        yield self.front_left
        yield self.front_right


def assert_packet_size(size: int, expected: int) -> None:
    """Raise UnpackError unless ``size`` equals ``expected``."""
    if size != expected:
        raise UnpackError(
            f"Invalid packet: size is {size} bytes, expected {expected} bytes"
        )


def assert_packet_at_least_size(size: int, expected: int) -> None:
    """Raise UnpackError if ``size`` is smaller than ``expected``."""
    if size < expected:
        raise UnpackError(
            f"Invalid packet: size is {size} bytes, expected at least {expected} bytes"
        )


def seconds_to_millis(seconds: float) -> int:
    """Convert a duration in seconds to whole milliseconds."""
    return int(round(seconds * 1000.0))


def unpack_string(raw: bytes) -> str:
    """Decode a NUL-terminated UTF-8 byte field."""
    text = bytes(raw).split(b"\x00", 1)[0]
    try:
        return text.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise UnpackError(f"Invalid UTF-8 string: {exc}") from exc


def parse_packet_type(value: int) -> PacketType:
    """Map a wire packet identifier to its PacketType."""
    try:
        return PacketType(value)
    except ValueError:
        raise UnpackError(f"Invalid PacketType: {value}") from None


def parse_header(data: bytes) -> PacketHeader:
    """Decode the header at the start of a packet."""
    assert_packet_at_least_size(len(data), HEADER_SIZE)
    (
        packet_format,
        game_major_version,
        game_minor_version,
        packet_version,
        packet_id,
        session_uid,
        session_time,
        frame_identifier,
        player_car_index,
        secondary_player_car_index,
    ) = _HEADER_STRUCT.unpack_from(data)

    return PacketHeader(
        packet_format=packet_format,
        game_major_version=game_major_version,
        game_minor_version=game_minor_version,
        packet_version=packet_version,
        packet_type=parse_packet_type(packet_id),
        session_uid=session_uid,
        session_time=seconds_to_millis(session_time),
        frame_identifier=frame_identifier,
        player_car_index=player_car_index,
        secondary_player_car_index=(
            None if secondary_player_car_index == 255 else secondary_player_car_index
        ),
    )