from __future__ import annotations

import json
import os
import shlex
import subprocess
from pathlib import Path

import py.path
import pytest

from kitti_tools.serializer import gps_data

EXECUTABLE = os.getenv(
    "KITTI_TOOLS__TESTS_EXECUTABLE", "python3 -m kitti_tools.commands"
)

OXTS_LINES = [
    "49.015003823272 8.4342971002335 116.43032836914 0.035752 0.00903 -2.6087069803847 -7.2624610463949 -9.1345434982438 11.668940212317 -0.016112043128053 0.013656525378742 0.1124451528405 -0.10049889211491 9.7749977783775 -0.35398069761848 -0.0083998044562271 9.781698103049 -0.014305802809848 -0.0087210289522041 0.0057211224521826 -0.0083183339238071 -0.0053567709291041 0.0062244779001226 0.20879676269136 0.078498375521233 4 11 6 6 6",
    "49.015009581323 8.4342832614128 116.42781829834 0.035838 0.009116 -2.6096169803847 -7.3065459095471 -9.1581645016268 11.713806016281 -0.019766131638573 0.013540357519005 0.12627826332426 -0.098543346906617 9.7856213381733 -0.34014155410229 -0.0074346924498566 9.7886628014628 -0.01385282092658 -0.0086749810543873 0.0045837766326442 -0.0079897451046318 -0.0048902845542744 0.0052813521046034 0.20879676269136 0.078498375521233 4 11 6 6 6",
    "49.015015336801 8.434269501022 116.42581176758 0.035803 0.008964 -2.6099969803847 -7.3513150049638 -9.1829138498648 11.760751924416 -0.020497048838376 0.01251405663262 0.2234601058471 -0.065837316447419 9.7943186707306 -0.24305001208961 0.00035025891829103 9.7987838232303 -0.0092598693002071 -0.0075106812096052 0.0012049869574006 -0.0076104008867085 -0.0022648839580152 0.0017044316009289 0.20879676269136 0.078498375521233 4 11 6 6 6",
]

TIMESTAMPS = [
    "2011-09-26 13:02:25.964389445",
    "2011-09-26 13:02:26.074318254",
    "2011-09-26 13:02:26.184211658",
]


@pytest.fixture
def setup_data(tmpdir: py.path.local):
    data_path = tmpdir.mkdir("2011_09_26_drive_0001_sync")
    oxts_dir = data_path.mkdir("oxts")
    oxts_dir.join("timestamps.txt").write("".join(f"{t}\n" for t in TIMESTAMPS))
    data_dir = oxts_dir.mkdir("data")
    for idx, line in enumerate(OXTS_LINES):
        data_dir.join(f"{idx:010d}.txt").write(line + "\n")
    yield data_path
    if tmpdir.check():
        tmpdir.remove(ignore_errors=True)


def run_command(params: list[str], command: str, **kwargs):
    return subprocess.run(
        [*shlex.split(EXECUTABLE), command, *params], check=True, **kwargs
    )


def load_gps_data(output_dir: Path) -> list[dict]:
    descs = []
    for frame_dir in sorted(output_dir.iterdir()):
        with frame_dir.joinpath("gps-data.json").open() as fp:
            desc = json.load(fp)
        gps_data.validate_gps_data(desc)
        descs.append(desc)
    return descs
