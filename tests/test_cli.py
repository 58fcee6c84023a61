from unittest.mock import patch

import pytest
import serial

from ut325f.cli import build_parser, main

FRAME = bytes([
    0xaa, 0x55, 0x00, 0x34, 0x01,
    0x98, 0x94, 0xd5, 0x41,
    0x00, 0x00, 0x00, 0x00,
    0x2d, 0x02, 0xd5, 0x41,
    0x6c, 0x25, 0x85, 0x42,
    0x00, 0x30, 0x30, 0x30,
    0x98, 0x94, 0xd5, 0x41,
    0x00, 0x00, 0x00, 0x00,
    0x2d, 0x02, 0xd5, 0x41,
    0x6c, 0x25, 0x85, 0x42,
    0x00, 0x00, 0x00, 0x00,
    0x00, 0x80, 0xd2, 0x41,
    0x00, 0x00, 0x00, 0x00,
    0x00,
    0x0d, 0x15,
])


class ScriptedPort:
    """Fails the start-up reads, serves data, then raises queued errors and stops."""

    def __init__(self, data, errors=()):
        self.startup_failures = 10
        self.buffer = bytearray(data)
        self.errors = list(errors)
        self.closed = False

    def read(self, size=1):
        if self.startup_failures:
            self.startup_failures -= 1
            raise serial.SerialException("warming up")
        if self.buffer:
            chunk = bytes(self.buffer[:size])
            del self.buffer[:size]
            return chunk
        if self.errors:
            raise self.errors.pop(0)
        raise KeyboardInterrupt

    def close(self):
        self.closed = True


def _run(argv, port):
    with patch("ut325f.meter.serial.Serial", return_value=port), patch("ut325f.meter.time.sleep"):
        return main(argv)


def test_parser_arguments():
    args = build_parser().parse_args(["/dev/ttyFAKE0", "-H"])
    assert args.port == "/dev/ttyFAKE0"
    assert args.held_temps is True
    assert build_parser().parse_args(["/dev/ttyFAKE0"]).held_temps is False


def test_parser_requires_port():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_main_prints_current_temps(capsys):
    port = ScriptedPort(FRAME)
    assert _run(["/dev/ttyFAKE0"], port) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    fields = lines[0].split()
    assert len(fields) == 5
    assert fields[2:] == ["NaN", "NaN", "NaN"]
    assert port.closed


def test_main_prints_held_temps(capsys):
    assert _run(["/dev/ttyFAKE0", "--held-temps"], ScriptedPort(FRAME)) == 0
    fields = capsys.readouterr().out.split()
    assert len(fields) == 10
    assert fields[5] == "Current"


def test_main_reports_read_errors_and_continues(capsys):
    port = ScriptedPort(FRAME, errors=[serial.SerialException("glitch")])
    assert _run(["/dev/ttyFAKE0"], port) == 0
    captured = capsys.readouterr()
    assert "Error reading data: Error reading sync header: glitch" in captured.err
    assert len(captured.out.splitlines()) == 1


def test_main_open_failure(capsys):
    with patch("ut325f.meter.serial.Serial", side_effect=serial.SerialException("missing")):
        assert main(["/dev/ttyFAKE0"]) == 1
    assert "Failed to open serial port '/dev/ttyFAKE0'" in capsys.readouterr().err