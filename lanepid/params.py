"""Controller configuration read from a parameter mapping."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

__all__ = ["ParameterError", "ControlParameters"]


class ParameterError(ValueError):
    """A required parameter is missing or has the wrong type."""


def _as_str(key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ParameterError(f"parameter {key!r} must be a string")
    return value


def _as_float(key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParameterError(f"parameter {key!r} must be a number")
    return float(value)


def _as_int(key: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ParameterError(f"parameter {key!r} must be an integer")
    return value


@dataclass(frozen=True)
class ControlParameters:
    """Topic names, gains and limits the controller needs."""

    left_lane_topic: str
    right_lane_topic: str
    park_topic: str
    vehicle_cmd_topic: str
    control_flags_topic: str
    car_length: float
    kp: float
    kd: float
    ki: float
    velocity_limit: float
    ke_turn: float
    ke_steady: float
    threshold: float
    target: int
    park_target: int
    min_steering_vehicle: float
    max_steering_vehicle: float

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> ControlParameters:
        """Read every parameter by its configuration key, in a fixed order."""
        spec = (
            ("left_lane_topic", "left_lane_topic", _as_str),
            ("right_lane_topic", "right_lane_topic", _as_str),
            ("park_topic", "park_topic", _as_str),
            ("vehicle_cmd_topic", "vehicle_cmd_topic", _as_str),
            ("control_flags_topic", "control_flags_topic", _as_str),
            ("car_lenght", "car_length", _as_float),
            ("kp", "kp", _as_float),
            ("kd", "kd", _as_float),
            ("ki", "ki", _as_float),
            ("velocity_limit", "velocity_limit", _as_float),
            ("ke_stanley_param_turn", "ke_turn", _as_float),
            ("ke_stanley_param_steady", "ke_steady", _as_float),
            ("treshold", "threshold", _as_float),
            ("target", "target", _as_int),
            ("park_target", "park_target", _as_int),
            ("min_steering_vehicle", "min_steering_vehicle", _as_float),
            ("max_steering_vehicle", "max_steering_vehicle", _as_float),
        )
        values = {}
        for key, name, convert in spec:
            try:
                raw = params[key]
            except KeyError:
                raise ParameterError(f"missing parameter {key!r}") from None
            values[name] = convert(key, raw)
        return cls(**values)