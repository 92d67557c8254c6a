"""Embedded-style helpers: integer arithmetic, float and CRC codecs, NMEA parsing, buffers, containers, record files and a Unix-socket summing service."""

__version__ = "0.1.0"