from __future__ import annotations

import dataclasses
import logging
import typing as T
from pathlib import Path

from tqdm import tqdm

from . import constants, exceptions, oxts, utils
from .serializer.gps_data import write_gps_data
from .timestamps import load_timestamps


LOG = logging.getLogger(__name__)


@dataclasses.dataclass
class _FrameTask:
    index: int
    source: Path
    destination: Path
    timestamp: float | None
    strict: bool


def frame_output_dir(output_root: Path, index: int, create: bool = True) -> Path:
    """
    The default frame directory: OUTPUT_ROOT/0000000042 for frame 42.
    """
    frame_dir = output_root.joinpath(f"{index:0{constants.FRAME_DIRNAME_WIDTH}d}")
    if create:
        frame_dir.mkdir(parents=True, exist_ok=True)
    return frame_dir


def oxts_data_dir(input_dir: Path) -> Path:
    return input_dir.joinpath(constants.OXTS_DIRNAME, constants.OXTS_DATA_DIRNAME)


def oxts_timestamps_path(input_dir: Path) -> Path:
    return input_dir.joinpath(constants.OXTS_DIRNAME, constants.TIMESTAMPS_FILENAME)


# This function is passed to multiprocessing so it has to be a module-level function
def process_single_frame(task: _FrameTask) -> Path:
    packet = oxts.read_oxts_packet(task.source)
    frame = oxts.to_gps_frame(packet, task.timestamp, strict=task.strict)
    write_gps_data(task.destination, frame)
    return task.destination


def _generate_tasks(
    data_files: T.Sequence[Path],
    timestamps: T.Sequence[float],
    get_output_dir: T.Callable[[int], Path],
    strict: bool,
) -> T.Generator[_FrameTask, None, None]:
    for idx, source in enumerate(data_files):
        # Frames beyond the timestamp list are written without a timestamp
        timestamp = timestamps[idx] if idx < len(timestamps) else None
        yield _FrameTask(
            index=idx,
            source=source,
            destination=Path(get_output_dir(idx)).joinpath(
                constants.GPS_DATA_FILENAME
            ),
            timestamp=timestamp,
            strict=strict,
        )


def process_gps_data(
    input_dir: Path,
    get_output_dir: T.Callable[[int], Path],
    strict: bool = False,
    check_frame_count: bool = False,
    num_processes: int | None = 0,
) -> list[Path]:
    """
    Convert every OXTS file under INPUT_DIR/oxts/data to a gps-data.json file
    in the directory returned by get_output_dir(frame_index).

    Files are paired with timestamps by their position in the sorted file listing.
    Returns the written files in frame order.
    """
    timestamps = load_timestamps(oxts_timestamps_path(input_dir))
    data_files = utils.list_sorted_files(oxts_data_dir(input_dir))

    if len(data_files) != len(timestamps):
        message = f"Found {len(data_files)} OXTS files but {len(timestamps)} timestamps in {input_dir}"
        if check_frame_count:
            raise exceptions.KittiFrameCountMismatchError(
                message, len(data_files), len(timestamps)
            )
        LOG.warning(message)

    tasks = _generate_tasks(data_files, timestamps, get_output_dir, strict)

    written: list[Path] = []
    disable_tqdm = LOG.getEffectiveLevel() <= logging.DEBUG
    with tqdm(
        total=len(data_files),
        desc="Converting GPS data",
        unit="frames",
        disable=disable_tqdm,
    ) as pbar:
        for idx, path in enumerate(
            utils.map_in_order(
                process_single_frame, tasks, num_processes=num_processes
            )
        ):
            LOG.debug("processing gps data frame %d/%d: %s", idx, len(timestamps), path)
            written.append(path)
            pbar.update(1)

    LOG.info("Converted %d GPS data frames from %s", len(written), input_dir)

    return written
