# ut325f

Read live temperatures from a Uni-T UT325F four-channel thermocouple meter
that is connected over its USB serial link.

The meter streams 56-byte frames at 115200 baud. This package finds each
frame by its sync header and decodes it. A frame holds:

- the four current channel temperatures,
- the four held temperatures,
- the hold mode (current, maximum, minimum or average),
- the meter's own internal temperature.

A channel that reports an error, for example because no probe is plugged in,
comes back as NaN.

## Installation

```
pip install .
```

## Command line

```
ut325f /dev/ttyUSB0
```

This prints one line per reading. Each line starts with a Unix timestamp and
is followed by the four current temperatures in °C:

```
1712345678.123  26.698     NaN     NaN     NaN
```

Add `-H` or `--held-temps` to also print the hold mode (`Current`,
`Maximum`, `Minimum` or `Average`) and the four held temperatures:

```
ut325f --held-temps /dev/ttyUSB0
```

`ut325f --version` prints the version.

A read error is reported on standard error, and reading goes on. If the port
cannot be opened, the command reports it and exits with status 1. Stop the
command with Ctrl-C.

## Library use

```python
from ut325f.meter import Meter

with Meter("/dev/ttyUSB0") as meter:
    reading = meter.read()
    print(reading.current_temps_c, reading.hold_type, reading.meter_temp_c)
```

`Meter.open()` opens the port and reads and throws away the first ten frames,
so that reading starts cleanly. `Meter.read()` blocks until it has a complete
frame. It raises `MeterError` if the port is not open, if the port reports an
error, or if the sync header or the rest of the frame does not arrive within
five seconds; a frame that arrives but cannot be decoded raises
`ReadingError`. `Meter.close()` closes the port; using `Meter` as a context
manager opens and closes it for you.

You can also decode a raw frame without a meter attached:

```python
from ut325f.reading import Reading, ReadingError

reading = Reading.parse(frame_bytes)   # raises ReadingError on a bad frame
print(reading.format_all_temps())
```

A `Reading` carries `timestamp` (Unix seconds at the time of decoding),
`current_temps_c`, `held_temps_c`, `hold_type` (a `HoldType`) and
`meter_temp_c`. `format_current_temps()` and `format_all_temps()` return the
lines the command prints; `print_current_temps()` and `print_all_temps()`
print them.

## Tests

```
pip install .[test]
pytest
```