"""Read temperatures from the Uni-T UT325F thermocouple meter over a serial port."""

__version__ = "0.9.0"
__all__ = ["cli", "meter", "reading"]