# f1telemetry

Decode the UDP telemetry packets sent by the F1 22 game into Python
dataclasses and enums. The package uses only the standard library.

## Installation

```
pip install .
```

## Decoding a datagram

Every packet starts with a 24-byte header. Decode it with
`f1telemetry.base.parse_header`, then hand the whole datagram (header bytes
included) to the parser for its packet type:

```python
from f1telemetry.base import PacketType, parse_header
from f1telemetry.car_damage import parse_car_damage_data
from f1telemetry.car_setup import parse_car_setup_data
from f1telemetry.car_status import parse_car_status_data
from f1telemetry.car_telemetry import parse_car_telemetry_data
from f1telemetry.event import parse_event_data
from f1telemetry.lap import parse_lap_data
from f1telemetry.motion import parse_motion_data

PARSERS = {
    PacketType.MOTION: parse_motion_data,
    PacketType.LAP_DATA: parse_lap_data,
    PacketType.EVENT: parse_event_data,
    PacketType.CAR_SETUPS: parse_car_setup_data,
    PacketType.CAR_TELEMETRY: parse_car_telemetry_data,
    PacketType.CAR_STATUS: parse_car_status_data,
    PacketType.CAR_DAMAGE: parse_car_damage_data,
}

header = parse_header(datagram)
parser = PARSERS.get(header.packet_type)
if parser is not None:
    packet = parser(datagram, header)
```

Each parser first checks that the datagram has exactly the size its packet
type requires, and returns a frozen dataclass with a `header` attribute:

| Module                        | Parser                       | Result                   |
|-------------------------------|------------------------------|--------------------------|
| `f1telemetry.motion`          | `parse_motion_data`          | `PacketMotionData`       |
| `f1telemetry.lap`             | `parse_lap_data`             | `PacketLapData`          |
| `f1telemetry.event`           | `parse_event_data`           | `PacketEventData`        |
| `f1telemetry.car_setup`       | `parse_car_setup_data`       | `PacketCarSetupData`     |
| `f1telemetry.car_telemetry`   | `parse_car_telemetry_data`   | `PacketCarTelemetryData` |
| `f1telemetry.car_status`      | `parse_car_status_data`      | `PacketCarStatusData`    |
| `f1telemetry.car_damage`      | `parse_car_damage_data`      | `PacketCarDamageData`    |

Per-car lists hold one entry for each of the 22 car slots.

## Events

`PacketEventData.event` is an `EventCode` (for example
`EventCode.FASTEST_LAP`). `details` holds the matching dataclass
(`FastestLap`, `Retirement`, `TeamMateInPits`, `RaceWinner`, `Penalty`,
`SpeedTrap`, `StartLights`, `DriveThroughPenaltyServed`,
`StopGoPenaltyServed`, `Flashback` or `Buttons`), or `None` for events that
carry no details, such as session start and end, DRS enabled or disabled,
chequered flag and lights out.

## Errors

Anything that cannot be decoded raises `f1telemetry.base.UnpackError`: a
datagram of the wrong size, an unknown packet type, an unknown event code, a
boolean byte other than 0 or 1, or an enumerated field whose value is outside
its documented range (for example `unpack_team(5000)` or
`unpack_surface_type(12)`).

## Conventions

- The header's session time and a fastest lap's time, sent in seconds, are
  converted to integer milliseconds. A flashback's session time is kept as
  sent, in seconds.
- Per-wheel values are `WheelData` objects with `rear_left`, `rear_right`,
  `front_left` and `front_right` fields; they iterate in that order and
  `WheelData.map(func)` applies a function to each.
- Indices the game marks as "none" with 255 (the secondary player's car, the
  time-trial personal best and rival cars) are `None`.
- Shared enumerations (`Flag`, `Nationality`, `Team`, `ResultStatus`,
  `TyreCompound`, `TyreCompoundVisual`) and their `unpack_*` decoders live in
  `f1telemetry.generic`.

## What the package does not do

- It does not open or read a UDP socket; receive the datagrams yourself and
  pass the bytes to the parsers.
- It has no single function that picks the parser from the header; dispatch
  on `header.packet_type` as shown above.
- It decodes motion, lap, event, car setup, car telemetry, car status and car
  damage packets only. Session, participants, lobby info, final
  classification and session history packets are not decoded.
- It reads the F1 22 packet layout only and does not check the header's
  `packet_format`.