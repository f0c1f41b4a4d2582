from pathlib import Path

import py.path
import pytest

from kitti_tools import exceptions, timestamps


def test_parse_timestamp():
    assert timestamps.parse_timestamp("2011-09-26 13:02:25.964389445") == 1317042145.964389
    assert timestamps.parse_timestamp("1970-01-01 00:00:00.000000000") == 0.0
    assert timestamps.parse_timestamp("1970-01-01 00:00:10.5") == 10.5
    assert timestamps.parse_timestamp("1970-01-01 00:00:10") == 10.0
    assert timestamps.parse_timestamp("  1970-01-01 00:00:10.25\n") == 10.25


@pytest.mark.parametrize(
    "text",
    [
        "",
        "hello",
        "2011-09-26",
        "2011-13-26 13:02:25.964389445",
        "2011-09-26 13:02:25.abc",
    ],
)
def test_parse_invalid_timestamp(text: str):
    with pytest.raises(exceptions.KittiTimestampError):
        timestamps.parse_timestamp(text)


def test_load_timestamps(tmpdir: py.path.local):
    p = tmpdir.join("timestamps.txt")
    p.write(
        "2011-09-26 13:02:25.964389445\n"
        "2011-09-26 13:02:26.074318254\n"
        "\n"
        "2011-09-26 13:02:26.184211658\n"
    )
    x = timestamps.load_timestamps(Path(p))
    assert x == [1317042145.964389, 1317042146.074318, 1317042146.184211]


def test_load_empty_timestamps(tmpdir: py.path.local):
    p = tmpdir.join("timestamps.txt")
    p.write("")
    assert timestamps.load_timestamps(Path(p)) == []


def test_load_timestamps_not_found(tmpdir: py.path.local):
    with pytest.raises(FileNotFoundError):
        timestamps.load_timestamps(Path(tmpdir.join("timestamps.txt")))
