from __future__ import annotations

import logging
import os
import typing as T
from multiprocessing import Pool
from pathlib import Path


def get_app_name() -> str:
    return "kitti_tools"


def configure_logger(logger: logging.Logger, level: int, stream=None) -> None:
    """Configure the given logger."""
    formatter = logging.Formatter("%(asctime)s - %(levelname)-6s - %(message)s")
    handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(level)


def list_sorted_files(root: Path) -> list[Path]:
    """
    List the directory entries sorted by name. Unlike a directory walk,
    the frame index of each file is its position in this list.
    """
    return [root.joinpath(name) for name in sorted(os.listdir(root))]


TTask = T.TypeVar("TTask")
TResult = T.TypeVar("TResult")


def map_in_order(
    func: T.Callable[[TTask], TResult],
    tasks: T.Iterable[TTask],
    num_processes: int | None = 0,
) -> T.Generator[TResult, None, None]:
    """
    Map func over tasks and yield the results in task order.

    num_processes <= 0 runs in the calling process, None uses one process per CPU.
    func and the tasks must be picklable when a pool is used.
    """
    if num_processes is not None and num_processes <= 0:
        yield from map(func, tasks)
        return

    with Pool(processes=num_processes) as pool:
        yield from pool.imap(func, tasks)
