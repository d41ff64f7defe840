"""6502 support library: ld65 map files, single-step test scenarios and RAM/ROM devices."""

__version__ = "0.1.0"