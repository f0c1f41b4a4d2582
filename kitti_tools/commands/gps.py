from __future__ import annotations

import argparse
import functools
import inspect
from pathlib import Path

from .. import constants, exceptions
from ..process_gps_data import frame_output_dir, process_gps_data


def bold_text(text: str) -> str:
    ANSI_BOLD = "\033[1m"
    ANSI_RESET_ALL = "\033[0m"
    return f"{ANSI_BOLD}{text}{ANSI_RESET_ALL}"


class Command:
    name = "gps"
    help = "convert OXTS GPS/IMU records to per-frame JSON files"

    def add_basic_arguments(self, parser: argparse.ArgumentParser):
        group = parser.add_argument_group(bold_text("GPS DATA OPTIONS"))
        group.add_argument(
            "--strict",
            help="Fail on missing or non-numeric OXTS values instead of writing null. [default: %(default)s]",
            action="store_true",
            default=constants.STRICT_OXTS,
            required=False,
        )
        group.add_argument(
            "--check_frame_count",
            help="Fail if the number of OXTS files differs from the number of timestamps. [default: %(default)s]",
            action="store_true",
            default=constants.CHECK_FRAME_COUNT,
            required=False,
        )
        group.add_argument(
            "--num_processes",
            help="The number of processes for converting frames concurrently. A non-positive number (N<=0) will disable multiprocessing. [default: %(default)s]",
            type=int,
            default=0,
            required=False,
        )

    def run(self, vars_args: dict):
        input_dir: Path = vars_args["input_dir"]
        output_dir: Path | None = vars_args.get("output_dir")

        if not input_dir.is_dir():
            raise exceptions.KittiFileNotFoundError(
                f"Input directory not found: {input_dir}"
            )

        if output_dir is None:
            output_dir = input_dir.joinpath(constants.OUTPUT_DIRNAME)

        if output_dir.exists() and not output_dir.is_dir():
            raise exceptions.KittiBadParameterError(
                f"Output path exists but is not a directory: {output_dir}"
            )

        # OSError from the dataset files is mapped to exit codes in __main__
        process_gps_data(
            get_output_dir=functools.partial(frame_output_dir, output_dir),
            **(
                {
                    k: v
                    for k, v in vars_args.items()
                    if k in inspect.getfullargspec(process_gps_data).args
                }
            ),
        )
