from __future__ import annotations

import os

_ENV_PREFIX = "KITTI_TOOLS_"


def _yes_or_no(val: str) -> bool:
    return val.strip().upper() in ["1", "TRUE", "YES"]


###################
##### DATASET #####
###################
# Layout of a KITTI raw drive relative to its root directory:
#   {OXTS_DIRNAME}/{TIMESTAMPS_FILENAME}
#   {OXTS_DIRNAME}/{OXTS_DATA_DIRNAME}/0000000000.txt ...
OXTS_DIRNAME: str = os.getenv(_ENV_PREFIX + "OXTS_DIRNAME", "oxts")
OXTS_DATA_DIRNAME: str = os.getenv(_ENV_PREFIX + "OXTS_DATA_DIRNAME", "data")
TIMESTAMPS_FILENAME: str = os.getenv(
    _ENV_PREFIX + "TIMESTAMPS_FILENAME", "timestamps.txt"
)


##################
##### OUTPUT #####
##################
GPS_DATA_FILENAME: str = os.getenv(_ENV_PREFIX + "GPS_DATA_FILENAME", "gps-data.json")
OUTPUT_DIRNAME: str = os.getenv(_ENV_PREFIX + "OUTPUT_DIRNAME", "kitti_gps_frames")
# Frame directories are zero-padded to this width, e.g. 0000000042
FRAME_DIRNAME_WIDTH = int(os.getenv(_ENV_PREFIX + "FRAME_DIRNAME_WIDTH", 10))


#####################
##### DECODING ######
#####################
# Raise on non-numeric or missing OXTS values instead of writing NaN
STRICT_OXTS: bool = _yes_or_no(os.getenv(_ENV_PREFIX + "STRICT_OXTS", "NO"))
# Fail when the number of OXTS files differs from the number of timestamps
CHECK_FRAME_COUNT: bool = _yes_or_no(
    os.getenv(_ENV_PREFIX + "CHECK_FRAME_COUNT", "NO")
)
