"""Plain message types exchanged by the controller."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

__all__ = ["Point", "ControlFlags", "Twist", "Marker"]


@dataclass
class Point:
    """A point in the vehicle's local frame."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class ControlFlags:
    """Mode switches that select the path and how commands are sent."""

    path_choice: int = 0
    controller_method: str = ""
    stop_flag: bool = False
    blind_rush: bool = False
    park_mode: bool = False
    is_autonomous: bool = False


@dataclass
class Twist:
    """Velocity command: forward speed and steering value."""

    linear_x: float = 0.0
    angular_z: float = 0.0


@dataclass
class Marker:
    """Visualisation marker describing the chosen target waypoint."""

    frame_id: str = ""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    shape: str = "sphere"
    action: str = "add"
    marker_id: int = 0
    orientation: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)
    scale: tuple[float, float, float] = (1.0, 1.0, 1.0)
    color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    lifetime: float = 0.0
    stamp: float = field(default_factory=time.time)

    @classmethod
    def target_sphere(cls, x: float, y: float) -> Marker:
        """Red sphere marking a target waypoint in the lidar frame."""
        return cls(
            frame_id="velodyne",
            x=x,
            y=y,
            z=0.0,
            shape="sphere",
            action="add",
            marker_id=0,
            orientation=(0.0, 0.0, 0.0, 1.0),
            scale=(0.8, 0.8, 0.8),
            color=(1.0, 0.0, 0.0, 1.0),
            lifetime=0.2,
        )