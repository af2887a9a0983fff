import struct

import pytest

from f1telemetry.base import (
    HEADER_SIZE,
    MOTION_PACKET_SIZE,
    NUMBER_CARS,
    PacketHeader,
    PacketType,
    UnpackError,
    WheelData,
)
from f1telemetry.motion import parse_motion_data

CAR_FORMAT = "<6f6h6f"
PLAYER_FORMAT = "<30f"


@pytest.fixture
def header():
    return PacketHeader(
        packet_format=2022,
        game_major_version=1,
        game_minor_version=5,
        packet_version=1,
        packet_type=PacketType.MOTION,
        session_uid=42,
        session_time=1500,
        frame_identifier=7,
        player_car_index=3,
        secondary_player_car_index=None,
    )


def car_values(index):
    floats_a = [index + 0.5, -index - 0.25, 2.0, 1.5, -3.0, 0.75]
    shorts = [index, -index, 32767, -32768, 100, -100]
    floats_b = [0.5, -1.25, 2.5, index * 0.5, -0.5, 4.0]
    return floats_a + shorts + floats_b


def player_values():
    return [i * 0.5 for i in range(30)]


def build_packet():
    body = b"".join(struct.pack(CAR_FORMAT, *car_values(i)) for i in range(NUMBER_CARS))
    body += struct.pack(PLAYER_FORMAT, *player_values())
    return bytes(HEADER_SIZE) + body


def test_built_packet_has_documented_size(header):
    data = build_packet()
    assert len(data) == MOTION_PACKET_SIZE
    packet = parse_motion_data(data, header)
    assert packet.player_car_data.front_wheels_angle == player_values()[-1]


def test_parses_all_cars(header):
    packet = parse_motion_data(build_packet(), header)
    assert len(packet.motion_data) == NUMBER_CARS
    assert packet.header is header


def test_car_fields_round_trip(header):
    packet = parse_motion_data(build_packet(), header)
    for index, car in enumerate(packet.motion_data):
        expected = car_values(index)
        got = [
            car.world_position_x,
            car.world_position_y,
            car.world_position_z,
            car.world_velocity_x,
            car.world_velocity_y,
            car.world_velocity_z,
            car.world_forward_dir_x,
            car.world_forward_dir_y,
            car.world_forward_dir_z,
            car.world_right_dir_x,
            car.world_right_dir_y,
            car.world_right_dir_z,
            car.g_force_lateral,
            car.g_force_longitudinal,
            car.g_force_vertical,
            car.yaw,
            car.pitch,
            car.roll,
        ]
        assert got == expected


def test_player_car_data_round_trip(header):
    values = player_values()
    player = parse_motion_data(build_packet(), header).player_car_data
    assert player.suspension_position == WheelData(*values[0:4])
    assert player.suspension_velocity == WheelData(*values[4:8])
    assert player.suspension_acceleration == WheelData(*values[8:12])
    assert player.wheel_speed == WheelData(*values[12:16])
    assert player.wheel_slip == WheelData(*values[16:20])
    assert [
        player.local_velocity_x,
        player.local_velocity_y,
        player.local_velocity_z,
        player.angular_velocity_x,
        player.angular_velocity_y,
        player.angular_velocity_z,
        player.angular_acceleration_x,
        player.angular_acceleration_y,
        player.angular_acceleration_z,
        player.front_wheels_angle,
    ] == values[20:]


def test_wheel_order_is_rear_left_first(header):
    player = parse_motion_data(build_packet(), header).player_car_data
    assert player.wheel_speed.rear_left == player_values()[12]
    assert player.wheel_speed.front_right == player_values()[15]


@pytest.mark.parametrize("delta", [-1, 1, -MOTION_PACKET_SIZE + HEADER_SIZE])
def test_wrong_size_is_rejected(header, delta):
    data = build_packet()
    data = data[:delta] if delta < 0 else data + bytes(delta)
    with pytest.raises(UnpackError):
        parse_motion_data(data, header)