"""Decoding of the 56-byte frames streamed by the UT325F thermometer."""

from __future__ import annotations

import enum
import math
import struct
import time
from dataclasses import dataclass
from typing import ClassVar

SYNC = bytes((0xAA, 0x55, 0x00, 0x34, 0x01))
N_SYNC_BYTES = len(SYNC)
N_BYTES = 56

# sync, 4 current temps, 4 error flags, 4 held temps, 4 error flags,
# meter temperature, unknown word, hold type, trailing word (checksum?)
_LAYOUT = struct.Struct(f"<{N_SYNC_BYTES}s4f4B4f4BfIBH")


class ReadingError(ValueError):
    """Raised when a frame cannot be decoded."""


class HoldType(enum.IntEnum):
    """Which value the meter is holding for the held temperatures."""

    CURRENT = 0
    MAXIMUM = 1
    MINIMUM = 2
    AVERAGE = 3

    def __str__(self) -> str:
        return self.name.capitalize()


def _mask_errors(temps: tuple[float, ...], errors: tuple[int, ...]) -> tuple[float, ...]:
    return tuple(math.nan if error else temp for temp, error in zip(temps, errors))


def _format_temp(temp: float) -> str:
    if math.isnan(temp):
        return f"{'NaN':>7}"
    return f"{temp:7.3f}"


@dataclass(frozen=True)
class Reading:
    """One reading of the four thermocouple channels."""

    timestamp: float
    current_temps_c: tuple[float, float, float, float]
    held_temps_c: tuple[float, float, float, float]
    hold_type: HoldType
    meter_temp_c: float

    N_BYTES: ClassVar[int] = N_BYTES
    SYNC: ClassVar[bytes] = SYNC
    N_SYNC_BYTES: ClassVar[int] = N_SYNC_BYTES

    @classmethod
    def parse(cls, buf) -> Reading:
        """Decode one complete frame, stamping it with the current time."""
        data = bytes(buf)
        if len(data) != N_BYTES:
            raise ReadingError("Incorrect buffer size")
        if data[:N_SYNC_BYTES] != SYNC:
            raise ReadingError("Bad sync header")

        timestamp = time.time()
        fields = _LAYOUT.unpack(data)
        current = _mask_errors(fields[1:5], fields[5:9])
        held = _mask_errors(fields[9:13], fields[13:17])
        meter_temp = fields[17]
        hold_raw = fields[19]
        try:
            hold_type = HoldType(hold_raw)
        except ValueError:
            raise ReadingError("Invalid HoldType") from None

        return cls(
            timestamp=timestamp,
            current_temps_c=current,
            held_temps_c=held,
            hold_type=hold_type,
            meter_temp_c=meter_temp,
        )

    def format_current_temps(self) -> str:
        """Timestamp followed by the four current temperatures."""
        parts = [f"{self.timestamp:.3f}"]
        parts.extend(_format_temp(t) for t in self.current_temps_c)
        return " ".join(parts)

    def format_all_temps(self) -> str:
        """Timestamp, current temperatures, hold type and held temperatures."""
        parts = [f"{self.timestamp:.3f}"]
        parts.extend(_format_temp(t) for t in self.current_temps_c)
        parts.append(str(self.hold_type))
        parts.extend(_format_temp(t) for t in self.held_temps_c)
        return " ".join(parts)

    def print_current_temps(self) -> None:
        print(self.format_current_temps())

    def print_all_temps(self) -> None:
        print(self.format_all_temps())