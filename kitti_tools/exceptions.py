from __future__ import annotations


class KittiUserError(Exception):
    exit_code: int


class KittiBadParameterError(KittiUserError):
    exit_code = 2


class KittiFileNotFoundError(KittiUserError):
    exit_code = 3


class KittiTimestampError(KittiUserError):
    exit_code = 4


class KittiFrameCountMismatchError(KittiUserError):
    exit_code = 5

    def __init__(self, message: str, num_files: int, num_timestamps: int) -> None:
        super().__init__(message)
        self.num_files = num_files
        self.num_timestamps = num_timestamps


class KittiOxtsParseError(KittiUserError):
    """
    Raised in strict mode only, for OXTS values that are missing or not numeric
    """

    exit_code = 6

    def __init__(self, message: str, field: str, value: str | None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value

    # Raised inside worker processes, so it must survive pickling
    def __reduce__(self):
        return (self.__class__, (str(self), self.field, self.value))


class KittiGPSDataValidationError(KittiUserError):
    exit_code = 7


class KittiFileAccessError(KittiUserError):
    """
    A dataset path exists but cannot be read or written, e.g. permission
    denied or a directory where a file is expected
    """

    exit_code = 8
