from __future__ import annotations

import dataclasses
import logging
import math
import typing as T
from pathlib import Path

from . import exceptions


LOG = logging.getLogger(__name__)


# Field order follows dataformat.txt of the KITTI raw devkit
@dataclasses.dataclass
class OxtsPacket:
    """One OXTS record as raw text. Fields without a token are None."""

    # latitude and longitude in degrees, altitude in meters
    lat: str | None = None
    lon: str | None = None
    alt: str | None = None
    # orientation in radians
    roll: str | None = None
    pitch: str | None = None
    yaw: str | None = None
    # velocity in m/s: north, east, forward, left, up
    vn: str | None = None
    ve: str | None = None
    vf: str | None = None
    vl: str | None = None
    vu: str | None = None
    # acceleration in m/s^2: x, y, z, forward, left, up
    ax: str | None = None
    ay: str | None = None
    az: str | None = None
    af: str | None = None
    al: str | None = None
    au: str | None = None
    # angular rate in rad/s: x, y, z, forward, left, up
    wx: str | None = None
    wy: str | None = None
    wz: str | None = None
    wf: str | None = None
    wl: str | None = None
    wu: str | None = None
    pos_accuracy: str | None = None
    vel_accuracy: str | None = None
    navstat: str | None = None
    numsats: str | None = None
    posmode: str | None = None
    velmode: str | None = None
    orimode: str | None = None


OXTS_FIELDS: tuple[str, ...] = tuple(f.name for f in dataclasses.fields(OxtsPacket))


@dataclasses.dataclass
class Pose:
    time: float | None
    latitude: float
    longitude: float
    altitude: float
    roll: float
    pitch: float
    yaw: float


@dataclasses.dataclass
class Velocity:
    timestamp: float | None
    velocity_north: float
    velocity_east: float
    velocity_forward: float
    velocity_left: float
    velocity_upward: float
    angular_rate_x: float
    angular_rate_y: float
    angular_rate_z: float
    angular_rate_forward: float
    angular_rate_left: float
    angular_rate_upward: float


@dataclasses.dataclass
class Acceleration:
    timestamp: float | None
    acceleration_x: float
    acceleration_y: float
    acceleration_z: float
    acceleration_forward: float
    acceleration_left: float
    acceleration_upward: float


@dataclasses.dataclass
class GPSFrame:
    pose: Pose
    velocity: Velocity
    acceleration: Acceleration


def parse_oxts_line(line: str) -> OxtsPacket:
    """
    Zip the OXTS fields against the whitespace-separated tokens of the line.

    >>> parse_oxts_line("49.0 8.4").lon
    '8.4'
    >>> parse_oxts_line("49.0 8.4").alt is None
    True
    """
    tokens = line.split()
    if len(tokens) != len(OXTS_FIELDS):
        LOG.debug(
            "Expect %d OXTS values but got %d", len(OXTS_FIELDS), len(tokens)
        )
    # zip() stops at the shorter one: extra tokens are dropped
    # and missing tokens leave the trailing fields as None
    return OxtsPacket(**dict(zip(OXTS_FIELDS, tokens)))


def parse_oxts_content(content: str) -> OxtsPacket:
    # An OXTS file has a single record; anything after the first line is ignored
    first_line = content.split("\n", 1)[0]
    return parse_oxts_line(first_line)


def read_oxts_packet(path: Path) -> OxtsPacket:
    # Undecodable bytes become U+FFFD so the affected token turns into NaN
    with path.open("r", encoding="utf-8", errors="replace") as fp:
        content = fp.read()
    return parse_oxts_content(content)


def to_float(value: str | None, field: str = "", strict: bool = False) -> float:
    """
    Convert the raw text to float. Missing or malformed values become NaN
    unless strict is set. Strict mode also rejects nan and infinity.

    >>> to_float("1.5")
    1.5
    >>> math.isnan(to_float("NaN_text"))
    True
    >>> math.isnan(to_float("1_0"))
    True
    >>> math.isnan(to_float(None))
    True
    """
    if value is None:
        if strict:
            raise exceptions.KittiOxtsParseError(
                f"Missing OXTS value for field {field}", field, value
            )
        return math.nan

    try:
        # float() accepts digit separators ("1_0") which are not numbers here
        if "_" in value:
            raise ValueError(f"could not convert string to float: {value!r}")
        result = float(value)
    except ValueError:
        if strict:
            raise exceptions.KittiOxtsParseError(
                f"Invalid OXTS value for field {field}: {value!r}", field, value
            )
        return math.nan

    if strict and not math.isfinite(result):
        raise exceptions.KittiOxtsParseError(
            f"Non-finite OXTS value for field {field}: {value!r}", field, value
        )

    return result


def _extract(packet: OxtsPacket, fields: T.Sequence[str], strict: bool) -> list[float]:
    return [to_float(getattr(packet, f), field=f, strict=strict) for f in fields]


def extract_pose(
    packet: OxtsPacket, timestamp: float | None, strict: bool = False
) -> Pose:
    return Pose(
        timestamp,
        *_extract(packet, ["lat", "lon", "alt", "roll", "pitch", "yaw"], strict),
    )


def extract_velocity(
    packet: OxtsPacket, timestamp: float | None, strict: bool = False
) -> Velocity:
    return Velocity(
        timestamp,
        *_extract(
            packet,
            ["vn", "ve", "vf", "vl", "vu", "wx", "wy", "wz", "wf", "wl", "wu"],
            strict,
        ),
    )


def extract_acceleration(
    packet: OxtsPacket, timestamp: float | None, strict: bool = False
) -> Acceleration:
    return Acceleration(
        timestamp,
        *_extract(packet, ["ax", "ay", "az", "af", "al", "au"], strict),
    )


def to_gps_frame(
    packet: OxtsPacket, timestamp: float | None, strict: bool = False
) -> GPSFrame:
    return GPSFrame(
        pose=extract_pose(packet, timestamp, strict=strict),
        velocity=extract_velocity(packet, timestamp, strict=strict),
        acceleration=extract_acceleration(packet, timestamp, strict=strict),
    )
