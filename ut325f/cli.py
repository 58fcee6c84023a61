"""Command line: stream temperatures from a UT325F to standard output."""

from __future__ import annotations

import argparse
import sys

from ut325f.meter import Meter, MeterError
from ut325f.reading import ReadingError

_VERSION = "0.9.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ut325f", description="Read temperatures from a UT325F thermometer."
    )
    parser.add_argument("port", help="The serial port to use")
    parser.add_argument(
        "-H",
        "--held-temps",
        action="store_true",
        help="Print the held temperatures as well.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    meter = Meter(args.port)
    try:
        meter.open()
        while True:
            try:
                reading = meter.read()
            except (MeterError, ReadingError) as exc:
                print(f"Error reading data: {exc}", file=sys.stderr)
                continue
            if args.held_temps:
                reading.print_all_temps()
            else:
                reading.print_current_temps()
            sys.stdout.flush()
    except MeterError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    finally:
        meter.close()


if __name__ == "__main__":
    sys.exit(main())