from __future__ import annotations

import datetime
import logging
from pathlib import Path

from . import exceptions


LOG = logging.getLogger(__name__)


_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_timestamp(text: str) -> float:
    """
    Parse a KITTI timestamp (UTC, nanosecond precision) to unix time in seconds.
    Digits beyond microseconds are truncated.

    >>> parse_timestamp("1970-01-01 00:00:01.500000000")
    1.5
    >>> parse_timestamp("1970-01-01 00:01:00")
    60.0
    """
    text = text.strip()
    whole, _, fraction = text.partition(".")

    try:
        dt = datetime.datetime.strptime(whole, _DATETIME_FORMAT)
    except ValueError as ex:
        raise exceptions.KittiTimestampError(
            f"Invalid timestamp {text!r}: {ex}"
        ) from ex

    if fraction:
        if not fraction.isdigit():
            raise exceptions.KittiTimestampError(
                f"Invalid fractional seconds in timestamp {text!r}"
            )
        dt = dt.replace(microsecond=int(fraction[:6].ljust(6, "0")))

    return dt.replace(tzinfo=datetime.timezone.utc).timestamp()


def load_timestamps(path: Path) -> list[float]:
    with path.open("r", encoding="utf-8") as fp:
        lines = [line.strip() for line in fp]

    timestamps = [parse_timestamp(line) for line in lines if line]
    LOG.debug("Loaded %d timestamps from %s", len(timestamps), path)

    return timestamps
