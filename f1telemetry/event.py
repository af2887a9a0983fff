"""Event packet: notable events that happen during a session."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Type, TypeVar, Union

from .base import (
    EVENT_PACKET_SIZE,
    HEADER_SIZE,
    PacketHeader,
    UnpackError,
    assert_packet_size,
    seconds_to_millis,
    unpack_string,
)

E = TypeVar("E", bound=Enum)

_CODE_SIZE = 4
_DETAILS_OFFSET = HEADER_SIZE + _CODE_SIZE

_FASTEST_LAP_STRUCT = struct.Struct("<Bf")
_VEHICLE_STRUCT = struct.Struct("<B")
_PENALTY_STRUCT = struct.Struct("<7B")
_SPEED_TRAP_STRUCT = struct.Struct("<BfBBBf")
_FLASHBACK_STRUCT = struct.Struct("<If")
_BUTTONS_STRUCT = struct.Struct("<I")


class EventCode(Enum):
    """Four-letter code identifying an event."""

    SESSION_STARTED = "SSTA"
    SESSION_ENDED = "SEND"
    FASTEST_LAP = "FTLP"
    RETIREMENT = "RTMT"
    DRS_ENABLED = "DRSE"
    DRS_DISABLED = "DRSD"
    TEAM_MATE_IN_PITS = "TMPT"
    CHEQUERED_FLAG = "CHQF"
    RACE_WINNER = "RCWN"
    PENALTY = "PENA"
    SPEED_TRAP = "SPTP"
    START_LIGHTS = "STLG"
    LIGHTS_OUT = "LGOT"
    DRIVE_THROUGH_SERVED = "DTSV"
    STOP_GO_SERVED = "SGSV"
    FLASHBACK = "FLBK"
    BUTTONS = "BUTN"


class PenaltyType(Enum):
    DRIVE_THROUGH = 0
    STOP_GO = 1
    GRID_PENALTY = 2
    PENALTY_REMINDER = 3
    TIME_PENALTY = 4
    WARNING = 5
    DISQUALIFIED = 6
    REMOVED_FROM_FORMATION_LAP = 7
    PARKED_TOO_LONG_TIMER = 8
    TYRE_REGULATIONS = 9
    THIS_LAP_INVALIDATED = 10
    THIS_AND_NEXT_LAP_INVALIDATED = 11
    THIS_LAP_INVALIDATED_WITHOUT_REASON = 12
    THIS_AND_NEXT_LAP_INVALIDATED_WITHOUT_REASON = 13
    THIS_AND_PREVIOUS_LAP_INVALIDATED = 14
    THIS_AND_PREVIOUS_LAP_INVALIDATED_WITHOUT_REASON = 15
    RETIRED = 16
    BLACK_FLAG_TIMER = 17


class InfringementType(Enum):
    BLOCKING_BY_SLOW_DRIVING = 0
    BLOCKING_BY_WRONG_WAY_DRIVING = 1
    REVERSING_OFF_THE_START_LINE = 2
    BIG_COLLISION = 3
    SMALL_COLLISION = 4
    COLLISION_FAILED_TO_HAND_BACK_POSITION_SINGLE = 5
    COLLISION_FAILED_TO_HAND_BACK_POSITION_MULTIPLE = 6
    CORNER_CUTTING_GAINED_TIME = 7
    CORNER_CUTTING_OVERTAKE_SINGLE = 8
    CORNER_CUTTING_OVERTAKE_MULTIPLE = 9
    CROSSED_PIT_EXIT_LANE = 10
    IGNORING_BLUE_FLAGS = 11
    IGNORING_YELLOW_FLAGS = 12
    IGNORING_DRIVE_THROUGH = 13
    TOO_MANY_DRIVE_THROUGHS = 14
    DRIVE_THROUGH_REMINDER_SERVE_WITHIN_N_LAPS = 15
    DRIVE_THROUGH_REMINDER_SERVE_THIS_LAP = 16
    PIT_LANE_SPEEDING = 17
    PARKED_FOR_TOO_LONG = 18
    IGNORING_TYRE_REGULATIONS = 19
    TOO_MANY_PENALTIES = 20
    MULTIPLE_WARNINGS = 21
    APPROACHING_DISQUALIFICATION = 22
    TYRE_REGULATIONS_SELECT_SINGLE = 23
    TYRE_REGULATIONS_SELECT_MULTIPLE = 24
    LAP_INVALIDATED_CORNER_CUTTING = 25
    LAP_INVALIDATED_RUNNING_WIDE = 26
    CORNER_CUTTING_RAN_WIDE_GAINED_TIME_MINOR = 27
    CORNER_CUTTING_RAN_WIDE_GAINED_TIME_SIGNIFICANT = 28
    CORNER_CUTTING_RAN_WIDE_GAINED_TIME_EXTREME = 29
    LAP_INVALIDATED_WALL_RIDING = 30
    LAP_INVALIDATED_FLASHBACK_USED = 31
    LAP_INVALIDATED_RESET_TO_TRACK = 32
    BLOCKING_THE_PITLANE = 33
    JUMP_START = 34
    SAFETY_CAR_TO_CAR_COLLISION = 35
    SAFETY_CAR_ILLEGAL_OVERTAKE = 36
    SAFETY_CAR_EXCEEDING_ALLOWED_PACE = 37
    VIRTUAL_SAFETY_CAR_EXCEEDING_ALLOWED_PACE = 38
    FORMATION_LAP_BELOW_ALLOWED_SPEED = 39
    FORMATION_LAP_PARKING = 40
    RETIRED_MECHANICAL_FAILURE = 41
    RETIRED_TERMINALLY_DAMAGED = 42
    SAFETY_CAR_FALLING_TOO_FAR_BACK = 43
    BLACK_FLAG_TIMER = 44
    UNSERVED_STOP_GO_PENALTY = 45
    UNSERVED_DRIVE_THROUGH_PENALTY = 46
    ENGINE_COMPONENT_CHANGE = 47
    GEARBOX_CHANGE = 48
    PARC_FERME_CHANGE = 49
    LEAGUE_GRID_PENALTY = 50
    RETRY_PENALTY = 51
    ILLEGAL_TIME_GAIN = 52
    MANDATORY_PITSTOP = 53
    ATTRIBUTE_ASSIGNED = 54


@dataclass(frozen=True)
class FastestLap:
    """A driver set the fastest lap; lap time in milliseconds."""

    vehicle_idx: int
    lap_time: int


@dataclass(frozen=True)
class Retirement:
    vehicle_idx: int


@dataclass(frozen=True)
class TeamMateInPits:
    vehicle_idx: int


@dataclass(frozen=True)
class RaceWinner:
    vehicle_idx: int


@dataclass(frozen=True)
class Penalty:
    """A penalty was issued; time is in seconds."""

    vehicle_idx: int
    penalty_type: PenaltyType
    infringement_type: InfringementType
    other_vehicle_idx: int
    time: int
    lap_num: int
    places_gained: int


@dataclass(frozen=True)
class SpeedTrap:
    """A speed trap was triggered; speeds in km/h."""

    vehicle_idx: int
    speed: float
    is_overall_fastest_in_session: bool
    is_personal_fastest_in_session: bool
    fastest_vehicle_idx_in_session: int
    fastest_speed_in_session: float


@dataclass(frozen=True)
class StartLights:
    number_of_lights: int


@dataclass(frozen=True)
class DriveThroughPenaltyServed:
    vehicle_idx: int


@dataclass(frozen=True)
class StopGoPenaltyServed:
    vehicle_idx: int


@dataclass(frozen=True)
class Flashback:
    frame_identifier: int
    session_time: float


@dataclass(frozen=True)
class Buttons:
    """Bit flags of the buttons currently pressed."""

    button_status: int


EventDetails = Union[
    FastestLap,
    Retirement,
    TeamMateInPits,
    RaceWinner,
    Penalty,
    SpeedTrap,
    StartLights,
    DriveThroughPenaltyServed,
    StopGoPenaltyServed,
    Flashback,
    Buttons,
]


@dataclass(frozen=True)
class PacketEventData:
    """A decoded event packet; ``details`` is None for events that carry none."""

    header: PacketHeader
    event: EventCode
    details: Optional[EventDetails] = None


def _unpack(enum_cls: Type[E], value: int, label: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        raise UnpackError(f"Invalid {label} value: {value}") from None


def _as_bool(value: int) -> bool:
    if value not in (0, 1):
        raise UnpackError(f"Invalid bool value: {value}")
    return value == 1


def unpack_penalty_type(value: int) -> PenaltyType:
    """Decode a penalty type byte."""
    return _unpack(PenaltyType, value, "PenaltyType")


def unpack_infringement_type(value: int) -> InfringementType:
    """Decode an infringement type byte."""
    return _unpack(InfringementType, value, "InfringementType")


def _fastest_lap(data: bytes) -> FastestLap:
    vehicle_idx, lap_time = _FASTEST_LAP_STRUCT.unpack_from(data, _DETAILS_OFFSET)
    return FastestLap(vehicle_idx=vehicle_idx, lap_time=seconds_to_millis(lap_time))


def _vehicle_idx(data: bytes) -> int:
    (vehicle_idx,) = _VEHICLE_STRUCT.unpack_from(data, _DETAILS_OFFSET)
    return vehicle_idx


def _penalty(data: bytes) -> Penalty:
    (
        penalty_type,
        infringement_type,
        vehicle_idx,
        other_vehicle_idx,
        time,
        lap_num,
        places_gained,
    ) = _PENALTY_STRUCT.unpack_from(data, _DETAILS_OFFSET)
    return Penalty(
        vehicle_idx=vehicle_idx,
        penalty_type=unpack_penalty_type(penalty_type),
        infringement_type=unpack_infringement_type(infringement_type),
        other_vehicle_idx=other_vehicle_idx,
        time=time,
        lap_num=lap_num,
        places_gained=places_gained,
    )


def _speed_trap(data: bytes) -> SpeedTrap:
    (
        vehicle_idx,
        speed,
        overall_fastest,
        personal_fastest,
        fastest_vehicle_idx,
        fastest_speed,
    ) = _SPEED_TRAP_STRUCT.unpack_from(data, _DETAILS_OFFSET)
    return SpeedTrap(
        vehicle_idx=vehicle_idx,
        speed=speed,
        is_overall_fastest_in_session=_as_bool(overall_fastest),
        is_personal_fastest_in_session=_as_bool(personal_fastest),
        fastest_vehicle_idx_in_session=fastest_vehicle_idx,
        fastest_speed_in_session=fastest_speed,
    )


def _flashback(data: bytes) -> Flashback:
    frame_identifier, session_time = _FLASHBACK_STRUCT.unpack_from(data, _DETAILS_OFFSET)
    return Flashback(frame_identifier=frame_identifier, session_time=session_time)


def _buttons(data: bytes) -> Buttons:
    (button_status,) = _BUTTONS_STRUCT.unpack_from(data, _DETAILS_OFFSET)
    return Buttons(button_status=button_status)


_DETAIL_DECODERS: Dict[EventCode, Callable[[bytes], EventDetails]] = {
    EventCode.FASTEST_LAP: _fastest_lap,
    EventCode.RETIREMENT: lambda data: Retirement(_vehicle_idx(data)),
    EventCode.TEAM_MATE_IN_PITS: lambda data: TeamMateInPits(_vehicle_idx(data)),
    EventCode.RACE_WINNER: lambda data: RaceWinner(_vehicle_idx(data)),
    EventCode.PENALTY: _penalty,
    EventCode.SPEED_TRAP: _speed_trap,
    EventCode.START_LIGHTS: lambda data: StartLights(_vehicle_idx(data)),
    EventCode.DRIVE_THROUGH_SERVED: lambda data: DriveThroughPenaltyServed(_vehicle_idx(data)),
    EventCode.STOP_GO_SERVED: lambda data: StopGoPenaltyServed(_vehicle_idx(data)),
    EventCode.FLASHBACK: _flashback,
    EventCode.BUTTONS: _buttons,
}


def parse_event_data(data: bytes, header: PacketHeader) -> PacketEventData:
    """Decode a whole event packet (header bytes included)."""
    assert_packet_size(len(data), EVENT_PACKET_SIZE)

    code = unpack_string(data[HEADER_SIZE:_DETAILS_OFFSET])
    try:
        event = EventCode(code)
    except ValueError:
        raise UnpackError(f"Invalid Event Code: {code}") from None

    decoder = _DETAIL_DECODERS.get(event)
    details = decoder(data) if decoder is not None else None
    return PacketEventData(header=header, event=event, details=details)