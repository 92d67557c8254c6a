"""Field extraction from NMEA 0183 GGA and RMC sentences."""

from __future__ import annotations

from dataclasses import dataclass

_TIME_DIGITS = 6


@dataclass(frozen=True)
class GgaFix:
    """Fields taken from a GGA (fix data) sentence; missing fields are ``None``."""

    sentence: str | None = None
    time: str | None = None
    latitude: str | None = None
    lat_dir: str | None = None
    longitude: str | None = None
    lng_dir: str | None = None
    fix: str | None = None
    satellites: str | None = None
    altitude: str | None = None


@dataclass(frozen=True)
class RmcFix:
    """Fields taken from an RMC (recommended minimum) sentence; missing fields are ``None``."""

    sentence: str | None = None
    time: str | None = None
    valid: str | None = None
    latitude: str | None = None
    lat_dir: str | None = None
    longitude: str | None = None
    lng_dir: str | None = None
    speed: str | None = None
    track: str | None = None
    date: str | None = None


def _fields(sentence: str, kind: str) -> list[str | None]:
    """Split ``sentence`` on commas and check its type.

    Only fields followed by a comma are returned, so the trailing field that
    carries the checksum is never used. Empty fields become ``None``.
    """
    parts = sentence.split(",")
    ident = parts[0].lstrip("$")
    if not ident.endswith(kind):
        raise ValueError(f"not a {kind} sentence: {parts[0]!r}")
    return [part or None for part in parts[:-1]]


def _field(fields: list[str | None], index: int) -> str | None:
    return fields[index] if index < len(fields) else None


def _char(value: str | None) -> str | None:
    return value[0] if value else None


def _time(value: str | None) -> str | None:
    return value[:_TIME_DIGITS] if value else None


def parse_gga(sentence: str) -> GgaFix:
    """Parse a GGA sentence such as ``$GPGGA,181908.00,3404.7041778,N,...``."""
    fields = _fields(sentence, "GGA")
    return GgaFix(
        sentence=_field(fields, 0),
        time=_time(_field(fields, 1)),
        latitude=_field(fields, 2),
        lat_dir=_char(_field(fields, 3)),
        longitude=_field(fields, 4),
        lng_dir=_char(_field(fields, 5)),
        fix=_char(_field(fields, 6)),
        satellites=_field(fields, 7),
        altitude=_field(fields, 9),
    )


def parse_rmc(sentence: str) -> RmcFix:
    """Parse an RMC sentence, with or without the leading ``$``."""
    fields = _fields(sentence, "RMC")
    return RmcFix(
        sentence=_field(fields, 0),
        time=_time(_field(fields, 1)),
        valid=_char(_field(fields, 2)),
        latitude=_field(fields, 3),
        lat_dir=_char(_field(fields, 4)),
        longitude=_field(fields, 5),
        lng_dir=_char(_field(fields, 6)),
        speed=_field(fields, 7),
        track=_field(fields, 8),
        date=_field(fields, 9),
    )