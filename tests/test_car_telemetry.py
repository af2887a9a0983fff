import struct

import pytest

from f1telemetry.base import (
    CAR_TELEMETRY_PACKET_SIZE,
    PacketHeader,
    PacketType,
    UnpackError,
    WheelData,
)
from f1telemetry.car_telemetry import (
    MFDPanel,
    SurfaceType,
    parse_car_telemetry_data,
    unpack_mfd_panel,
    unpack_surface_type,
)

TELEMETRY_FORMAT = "<H3fBbHBBH4H4B4BH4f4B"

SCALARS = [287, 1.0, -0.5, 0.25, 0, -1, 11500, 1, 80, 0x3FFF]
BRAKES = [500, 510, 620, 630]
SURFACE_TEMPS = [95, 96, 97, 98]
INNER_TEMPS = [100, 101, 102, 103]
ENGINE_TEMP = 110
PRESSURES = [21.5, 21.5, 23.0, 23.0]
SURFACES = [0, 1, 7, 4]


@pytest.fixture
def header():
    return PacketHeader(
        packet_format=2022,
        game_major_version=1,
        game_minor_version=0,
        packet_version=1,
        packet_type=PacketType.CAR_TELEMETRY,
        session_uid=99,
        session_time=2000,
        frame_identifier=20,
        player_car_index=0,
        secondary_player_car_index=None,
    )


def build_packet(scalars=None, surfaces=None, trailer=(255, 1, 5)):
    values = (
        (scalars or SCALARS)
        + BRAKES
        + SURFACE_TEMPS
        + INNER_TEMPS
        + [ENGINE_TEMP]
        + PRESSURES
        + (surfaces or SURFACES)
    )
    car = struct.pack(TELEMETRY_FORMAT, *values)
    return b"\x00" * 24 + car * 22 + struct.pack("<BBb", *trailer)


def test_packet_size_matches_format(header):
    data = build_packet()
    assert len(data) == CAR_TELEMETRY_PACKET_SIZE
    packet = parse_car_telemetry_data(data, header)
    assert packet.suggested_gear == 5


def test_parse_round_trip(header):
    packet = parse_car_telemetry_data(build_packet(), header)
    assert packet.header == header
    assert len(packet.car_telemetry_data) == 22
    car = packet.car_telemetry_data[0]
    assert car.speed == SCALARS[0]
    assert car.steer == SCALARS[2]
    assert car.gear == SCALARS[5]
    assert car.drs is True
    assert car.rev_lights_bit_value == SCALARS[9]
    assert list(car.brakes_temperature) == BRAKES
    assert list(car.tyres_surface_temperature) == SURFACE_TEMPS
    assert list(car.tyres_inner_temperature) == INNER_TEMPS
    assert car.engine_temperature == ENGINE_TEMP
    assert list(car.tyre_pressures) == PRESSURES
    assert car.surface_types == WheelData(
        SurfaceType.TARMAC, SurfaceType.RUMBLE_STRIP, SurfaceType.GRASS, SurfaceType.GRAVEL
    )


def test_trailer_fields(header):
    packet = parse_car_telemetry_data(build_packet(trailer=(255, 4, -1)), header)
    assert packet.mfd_panel is MFDPanel.CLOSED
    assert packet.secondary_player_mfd_panel is MFDPanel.TEMPERATURES
    assert packet.suggested_gear == -1
    assert packet.button_status is None


def test_all_zero_packet_is_valid(header):
    packet = parse_car_telemetry_data(b"\x00" * CAR_TELEMETRY_PACKET_SIZE, header)
    assert packet.mfd_panel is MFDPanel.CAR_SETUP
    assert set(packet.car_telemetry_data[3].surface_types) == {SurfaceType.TARMAC}


@pytest.mark.parametrize("size", [CAR_TELEMETRY_PACKET_SIZE - 1, CAR_TELEMETRY_PACKET_SIZE + 1])
def test_wrong_size_rejected(header, size):
    with pytest.raises(UnpackError):
        parse_car_telemetry_data(b"\x00" * size, header)


def test_invalid_surface_on_one_wheel_rejected(header):
    with pytest.raises(UnpackError, match="Invalid SurfaceType value: 12"):
        parse_car_telemetry_data(build_packet(surfaces=[0, 0, 0, 12]), header)


def test_invalid_mfd_panel_rejected(header):
    with pytest.raises(UnpackError, match="Invalid MFDPanel value: 5"):
        parse_car_telemetry_data(build_packet(trailer=(5, 0, 0)), header)


def test_invalid_drs_bool_rejected(header):
    scalars = list(SCALARS)
    scalars[7] = 2
    with pytest.raises(UnpackError):
        parse_car_telemetry_data(build_packet(scalars=scalars), header)


def test_unpack_helpers():
    assert unpack_surface_type(11) is SurfaceType.RIDGED
    assert unpack_surface_type(9) is SurfaceType.COBBLESTONE
    assert unpack_mfd_panel(1) is MFDPanel.PITS
    assert unpack_mfd_panel(255) is MFDPanel.CLOSED
    with pytest.raises(UnpackError):
        unpack_mfd_panel(254)