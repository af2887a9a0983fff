import struct

import pytest

from f1telemetry.base import CAR_STATUS_PACKET_SIZE, PacketHeader, PacketType, UnpackError
from f1telemetry.car_status import (
    DRS,
    ERSDeployMode,
    FuelMix,
    TractionControl,
    parse_car_status_data,
    unpack_drs,
    unpack_ers_deploy_mode,
    unpack_fuel_mix,
    unpack_traction_control,
)
from f1telemetry.generic import Flag, TyreCompound, TyreCompoundVisual

STATUS_FORMAT = "<5B3f2HBbH3BbfB3fB"

BASE_FIELDS = {
    "traction_control": 2,
    "anti_lock_brakes": 1,
    "fuel_mix": 3,
    "front_brake_bias": 56,
    "pit_limiter": 0,
    "fuel_in_tank": 20.5,
    "fuel_capacity": 110.0,
    "fuel_remaining_laps": 3.25,
    "max_rpm": 13000,
    "idle_rpm": 4000,
    "max_gears": 8,
    "drs_allowed": -1,
    "drs_activation_distance": 150,
    "actual_tyre_compound": 18,
    "visual_tyre_compound": 17,
    "tyres_age_laps": 6,
    "vehicle_fia_flags": 3,
    "ers_store_energy": 2000000.0,
    "ers_deploy_mode": 2,
    "ers_harvested_this_lap_mguk": 1024.0,
    "ers_harvested_this_lap_mguh": 512.0,
    "ers_deployed_this_lap": 256.0,
    "network_paused": 1,
}


@pytest.fixture
def header():
    return PacketHeader(
        packet_format=2022,
        game_major_version=1,
        game_minor_version=0,
        packet_version=1,
        packet_type=PacketType.CAR_STATUS,
        session_uid=7,
        session_time=500,
        frame_identifier=3,
        player_car_index=1,
        secondary_player_car_index=None,
    )


def build_packet(fields=None):
    fields = dict(BASE_FIELDS, **(fields or {}))
    car = struct.pack(STATUS_FORMAT, *fields.values())
    return b"\x00" * 24 + car * 22


def test_packet_size_matches_format(header):
    data = build_packet()
    assert len(data) == CAR_STATUS_PACKET_SIZE
    packet = parse_car_status_data(data, header)
    assert packet.car_status_data[0].idle_rpm == BASE_FIELDS["idle_rpm"]


def test_parse_round_trip(header):
    packet = parse_car_status_data(build_packet(), header)
    assert packet.header == header
    assert len(packet.car_status_data) == 22
    status = packet.car_status_data[21]
    assert status.traction_control is TractionControl.HIGH
    assert status.anti_lock_brakes is True
    assert status.fuel_mix is FuelMix.MAX
    assert status.pit_limiter is False
    assert status.fuel_in_tank == BASE_FIELDS["fuel_in_tank"]
    assert status.fuel_remaining_laps == BASE_FIELDS["fuel_remaining_laps"]
    assert status.max_rpm == BASE_FIELDS["max_rpm"]
    assert status.drs_status is DRS.UNKNOWN
    assert status.drs_activation_distance == BASE_FIELDS["drs_activation_distance"]
    assert status.actual_tyre_compound is TyreCompound.C3
    assert status.visual_tyre_compound is TyreCompoundVisual.MEDIUM
    assert status.tyre_age_laps == BASE_FIELDS["tyres_age_laps"]
    assert status.vehicle_fia_flag is Flag.YELLOW
    assert status.ers_deploy_mode is ERSDeployMode.HOTLAP
    assert status.ers_deployed_this_lap == BASE_FIELDS["ers_deployed_this_lap"]
    assert status.network_paused is True


def test_all_zero_packet_is_valid(header):
    packet = parse_car_status_data(b"\x00" * CAR_STATUS_PACKET_SIZE, header)
    status = packet.car_status_data[0]
    assert status.actual_tyre_compound is TyreCompound.INVALID
    assert status.visual_tyre_compound is TyreCompoundVisual.INVALID
    assert status.drs_status is DRS.NOT_ALLOWED
    assert status.vehicle_fia_flag is Flag.NONE


@pytest.mark.parametrize("size", [CAR_STATUS_PACKET_SIZE - 1, CAR_STATUS_PACKET_SIZE + 1])
def test_wrong_size_rejected(header, size):
    with pytest.raises(UnpackError):
        parse_car_status_data(b"\x00" * size, header)


@pytest.mark.parametrize(
    "field, value",
    [
        ("traction_control", 3),
        ("fuel_mix", 4),
        ("drs_allowed", 2),
        ("actual_tyre_compound", 21),
        ("visual_tyre_compound", 23),
        ("vehicle_fia_flags", 5),
        ("ers_deploy_mode", 4),
        ("network_paused", 2),
    ],
)
def test_invalid_field_rejected(header, field, value):
    with pytest.raises(UnpackError):
        parse_car_status_data(build_packet({field: value}), header)


def test_unpack_helpers():
    assert unpack_traction_control(0) is TractionControl.OFF
    assert unpack_fuel_mix(1) is FuelMix.STANDARD
    assert unpack_drs(1) is DRS.ALLOWED
    assert unpack_drs(-1) is DRS.UNKNOWN
    assert unpack_ers_deploy_mode(3) is ERSDeployMode.OVERTAKE


def test_unpack_error_messages():
    with pytest.raises(UnpackError, match="Invalid TractionControl value: 5"):
        unpack_traction_control(5)
    with pytest.raises(UnpackError, match="Invalid DRS value: -2"):
        unpack_drs(-2)