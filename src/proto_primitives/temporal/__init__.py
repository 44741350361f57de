"""Временные domain primitives."""

from proto_primitives.temporal.clock import SYSTEM_CLOCK, Clock, FixedClock, SystemClock
from proto_primitives.temporal.timestamps import FutureTimestamp, PastOrPresentTimestamp

__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "SYSTEM_CLOCK",
    "FutureTimestamp",
    "PastOrPresentTimestamp",
]
