"""Decoders for F1 22 UDP telemetry packets: header, motion, lap, event, car setup, telemetry, status and damage."""

__version__ = "0.1.0"