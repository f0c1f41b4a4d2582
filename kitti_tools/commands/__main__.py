import argparse
import enum
import logging
import sys
from pathlib import Path

from .. import constants, exceptions, VERSION
from ..utils import configure_logger, get_app_name
from . import gps

kitti_tools_commands = [
    gps,
]


# Root logger of kitti_tools (not including third-party libraries)
LOG = logging.getLogger(get_app_name())


# Handle shared arguments/options here
def add_general_arguments(parser, command):
    if command in ["gps"]:
        parser.add_argument(
            "input_dir",
            help=f"Path to a KITTI drive directory that contains {constants.OXTS_DIRNAME}/{constants.TIMESTAMPS_FILENAME} and {constants.OXTS_DIRNAME}/{constants.OXTS_DATA_DIRNAME}/.",
            type=Path,
        )
        parser.add_argument(
            "output_dir",
            help=f"Path to where the per-frame directories will be written. [default: {{INPUT_DIR}}/{constants.OUTPUT_DIRNAME}]",
            nargs="?",
            type=Path,
        )


def _log_params(argvars: dict) -> None:
    for k, v in argvars.items():
        if v is None or callable(v):
            continue
        if isinstance(v, enum.Enum):
            v = v.value
        LOG.debug("CLI param: %s: %s", k, v)


def as_user_error(ex: OSError) -> exceptions.KittiUserError:
    """
    Convert a file-system error raised while reading the dataset or writing
    the frames into the user error that decides the exit code.
    """
    path = ex.filename if ex.filename is not None else "unknown path"
    reason = ex.strerror or str(ex)

    user_error: exceptions.KittiUserError
    if isinstance(ex, FileNotFoundError):
        user_error = exceptions.KittiFileNotFoundError(f"{reason}: {path}")
    else:
        user_error = exceptions.KittiFileAccessError(f"{reason}: {path}")
    user_error.__cause__ = ex
    return user_error


def log_exception(ex: Exception) -> None:
    # Tracebacks only with --verbose
    exc_info = ex if LOG.isEnabledFor(logging.DEBUG) else None
    LOG.error("%s: %s", ex.__class__.__name__, ex, exc_info=exc_info)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        "kitti_tools",
        description="Convert KITTI OXTS GPS/IMU records to per-frame JSON files",
    )
    parser.add_argument(
        "--version",
        help="show the version of kitti tools and exit",
        action="version",
        version=f"kitti_tools version {VERSION}",
    )
    parser.add_argument(
        "--verbose",
        help="show debug logs, per-frame progress and tracebacks",
        action="store_true",
        default=False,
        required=False,
    )
    parser.set_defaults(func=lambda _: parser.print_help())

    subparsers = parser.add_subparsers(
        description="please choose one of the available subcommands",
    )
    for module in kitti_tools_commands:
        command = module.Command()
        cmd_parser = subparsers.add_parser(
            command.name, help=command.help, conflict_handler="resolve"
        )
        add_general_arguments(cmd_parser, command.name)
        command.add_basic_arguments(cmd_parser)
        cmd_parser.set_defaults(func=command.run)

    return parser


def main():
    args = build_parser().parse_args()

    configure_logger(LOG, level=logging.DEBUG if args.verbose else logging.INFO)

    LOG.debug("kitti_tools version %s", VERSION)
    argvars = vars(args)
    _log_params(argvars)

    try:
        args.func(argvars)
    except exceptions.KittiUserError as ex:
        log_exception(ex)
        sys.exit(ex.exit_code)

    except OSError as ex:
        user_error = as_user_error(ex)
        log_exception(user_error)
        sys.exit(user_error.exit_code)

    except KeyboardInterrupt:
        LOG.info("Interrupted by user...")
        sys.exit(130)


if __name__ == "__main__":
    main()
