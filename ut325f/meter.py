"""Serial connection to a UT325F thermometer."""

from __future__ import annotations

import sys
import time

import serial

from ut325f.reading import N_BYTES, N_SYNC_BYTES, SYNC, Reading, ReadingError

BAUD_RATE = 115200
_CLEAR_READS = 10
_CLEAR_PAUSE = 0.1


class MeterError(Exception):
    """Raised when the meter cannot be opened or read."""

    def __init__(self, message: str, *, timed_out: bool = False) -> None:
        super().__init__(message)
        self.timed_out = timed_out


class Meter:
    """A UT325F attached to a serial port."""

    def __init__(self, port: str) -> None:
        self.port = port
        self.sync_timeout = 5.0
        self._serial = None

    def open(self) -> None:
        """Open the port and discard any frames already buffered."""
        try:
            self._serial = serial.Serial(
                port=self.port,
                baudrate=BAUD_RATE,
                bytesize=serial.EIGHTBITS,
                parity=serial.PARITY_NONE,
                stopbits=serial.STOPBITS_ONE,
                xonxoff=False,
                rtscts=False,
                timeout=1.0,
            )
        except (serial.SerialException, ValueError) as exc:
            raise MeterError(f"Failed to open serial port '{self.port}': {exc}") from exc
        self._clear_buffer()

    def _clear_buffer(self) -> None:
        for _ in range(_CLEAR_READS):
            try:
                self.read()
            except MeterError as exc:
                if not exc.timed_out:
                    print(f"Warning: Initial read error: {exc}", file=sys.stderr)
            except ReadingError as exc:
                print(f"Warning: Initial read error: {exc}", file=sys.stderr)
            time.sleep(_CLEAR_PAUSE)

    def _read_exact(self, size: int, what: str) -> bytes:
        deadline = time.monotonic() + self.sync_timeout
        data = bytearray()
        while len(data) < size:
            if time.monotonic() >= deadline:
                raise MeterError(f"Timeout reading {what}", timed_out=True)
            try:
                data += self._serial.read(size - len(data))
            except serial.SerialException as exc:
                raise MeterError(f"Error reading {what}: {exc}") from exc
        return bytes(data)

    def read(self) -> Reading:
        """Wait for the next frame and decode it."""
        if self._serial is None:
            raise MeterError("Serial port is not open")
        while True:
            header = self._read_exact(N_SYNC_BYTES, "sync header")
            if header == SYNC:
                break
        body = self._read_exact(N_BYTES - N_SYNC_BYTES, "data")
        return Reading.parse(header + body)

    def close(self) -> None:
        port, self._serial = self._serial, None
        if port is not None:
            port.close()

    def __enter__(self) -> Meter:
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()