from __future__ import annotations

import dataclasses
import json
import math
import typing as T
from pathlib import Path
from typing import TypedDict

import jsonschema

from .. import exceptions
from ..oxts import Acceleration, GPSFrame, Pose, Velocity


# JSON keys are the dataclass field names with "_" replaced by "-",
# e.g. Velocity.velocity_north -> "velocity-north"
class PoseDescription(TypedDict, total=True):
    time: T.Optional[float]
    latitude: T.Optional[float]
    longitude: T.Optional[float]
    altitude: T.Optional[float]
    roll: T.Optional[float]
    pitch: T.Optional[float]
    yaw: T.Optional[float]


VelocityDescription = TypedDict(
    "VelocityDescription",
    {
        "timestamp": T.Optional[float],
        "velocity-north": T.Optional[float],
        "velocity-east": T.Optional[float],
        "velocity-forward": T.Optional[float],
        "velocity-left": T.Optional[float],
        "velocity-upward": T.Optional[float],
        "angular-rate-x": T.Optional[float],
        "angular-rate-y": T.Optional[float],
        "angular-rate-z": T.Optional[float],
        "angular-rate-forward": T.Optional[float],
        "angular-rate-left": T.Optional[float],
        "angular-rate-upward": T.Optional[float],
    },
    total=True,
)


AccelerationDescription = TypedDict(
    "AccelerationDescription",
    {
        "timestamp": T.Optional[float],
        "acceleration-x": T.Optional[float],
        "acceleration-y": T.Optional[float],
        "acceleration-z": T.Optional[float],
        "acceleration-forward": T.Optional[float],
        "acceleration-left": T.Optional[float],
        "acceleration-upward": T.Optional[float],
    },
    total=True,
)


class GPSDataDescription(TypedDict, total=True):
    pose: PoseDescription
    velocity: VelocityDescription
    acceleration: AccelerationDescription


def _json_key(field_name: str) -> str:
    return field_name.replace("_", "-")


def _group_schema(cls: type, description: str) -> dict:
    keys = [_json_key(f.name) for f in dataclasses.fields(cls)]
    return {
        "type": "object",
        "description": description,
        "properties": {
            # null stands for a missing timestamp or a value that is not a number
            key: {"type": ["number", "null"]}
            for key in keys
        },
        "required": keys,
        "additionalProperties": False,
    }


GPSDataSchema = {
    "type": "object",
    "properties": {
        "pose": _group_schema(
            Pose,
            "Vehicle position (degrees, meters) and orientation (radians)",
        ),
        "velocity": _group_schema(
            Velocity,
            "Vehicle velocity (m/s) and angular rates (rad/s)",
        ),
        "acceleration": _group_schema(
            Acceleration,
            "Vehicle acceleration (m/s^2)",
        ),
    },
    "required": ["pose", "velocity", "acceleration"],
    "additionalProperties": False,
}


GPSDataSchemaValidator = jsonschema.Draft202012Validator(GPSDataSchema)


def _encode_value(value: float | None) -> float | None:
    # NaN and infinity are not valid JSON
    if value is None or not math.isfinite(value):
        return None
    return value


def _decode_value(value: float | None) -> float:
    if value is None:
        return math.nan
    return value


class GPSDataJSONSerializer:
    @classmethod
    def serialize(cls, frame: GPSFrame) -> bytes:
        desc = cls.as_desc(frame)
        validate_gps_data(desc)
        return json.dumps(desc, indent=2, allow_nan=False).encode("utf-8")

    @classmethod
    def deserialize(cls, data: bytes) -> GPSFrame:
        return cls.from_desc(json.loads(data))

    @classmethod
    def as_desc(cls, frame: GPSFrame) -> GPSDataDescription:
        return {
            "pose": T.cast(PoseDescription, cls._as_group_desc(frame.pose)),
            "velocity": T.cast(
                VelocityDescription, cls._as_group_desc(frame.velocity)
            ),
            "acceleration": T.cast(
                AccelerationDescription, cls._as_group_desc(frame.acceleration)
            ),
        }

    @classmethod
    def _as_group_desc(cls, group: T.Any) -> dict[str, float | None]:
        return {
            _json_key(field.name): _encode_value(getattr(group, field.name))
            for field in dataclasses.fields(group)
        }

    @classmethod
    def from_desc(cls, desc: T.Any) -> GPSFrame:
        validate_gps_data(desc)

        return GPSFrame(
            pose=cls._from_group_desc(Pose, desc["pose"], "time"),
            velocity=cls._from_group_desc(Velocity, desc["velocity"], "timestamp"),
            acceleration=cls._from_group_desc(
                Acceleration, desc["acceleration"], "timestamp"
            ),
        )

    @classmethod
    def _from_group_desc(cls, group_cls: type, desc: dict, time_field: str) -> T.Any:
        kwargs: dict = {}
        for field in dataclasses.fields(group_cls):
            value = desc[_json_key(field.name)]
            if field.name == time_field:
                # A missing timestamp stays None
                kwargs[field.name] = value
            else:
                kwargs[field.name] = _decode_value(value)
        return group_cls(**kwargs)


def validate_gps_data(desc: T.Any) -> None:
    try:
        GPSDataSchemaValidator.validate(desc)
    except jsonschema.ValidationError as ex:
        # do not use str(ex) which is more verbose
        raise exceptions.KittiGPSDataValidationError(ex.message) from ex


def write_gps_data(path: Path, frame: GPSFrame) -> None:
    data = GPSDataJSONSerializer.serialize(frame)
    # "wb" truncates any previous output
    with path.open("wb") as fp:
        fp.write(data)


if __name__ == "__main__":
    print(json.dumps(GPSDataSchema, indent=4))
