"""Conversions between IEEE-754 single precision floats and raw bytes."""

from __future__ import annotations

import struct


def float_to_hex(value: float) -> int:
    """Return the 32-bit pattern of ``value`` as a single precision float."""
    (bits,) = struct.unpack(">I", struct.pack(">f", value))
    return bits


def hex_to_float(data: bytes) -> float:
    """Interpret the first four bytes of ``data`` as a big-endian float."""
    raw = bytes(data)
    if len(raw) < 4:
        raise ValueError("need at least four bytes to decode a float")
    (value,) = struct.unpack(">f", raw[:4])
    return value


def hex_string(data: bytes) -> str:
    """Return ``data`` as upper-case hexadecimal text, two digits per byte."""
    return bytes(data).hex().upper()