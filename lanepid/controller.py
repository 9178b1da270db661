"""Lane-following PID steering controller."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from .geometry import get_distance, normalize_for_vehicle, round_to_tens
from .messages import ControlFlags, Marker, Point, Twist
from .params import ControlParameters

__all__ = ["Control"]

log = logging.getLogger(__name__)

_RIGHT_LANE = 0
_LEFT_LANE = 1
_MAX_PROBLEM_REPEATS = 10


class Control:
    """Turns incoming lane paths into steering commands."""

    dt = 0.01
    lim_min_int = -5.0
    lim_max_int = 5.0
    lim_min = -3.0
    lim_max = 3.0

    def __init__(
        self,
        params: ControlParameters | Mapping[str, Any],
        publish_command: Callable[[Twist], None],
        publish_target: Callable[[Marker], None],
    ) -> None:
        if not isinstance(params, ControlParameters):
            params = ControlParameters.from_mapping(params)
        self.params = params
        self._publish_command = publish_command
        self._publish_target = publish_target

        self.flags = ControlFlags()
        self.is_problem = False
        self.problem_counter = 0
        self._old_lane = False
        self._old_paths: dict[int, list[Point]] = {_RIGHT_LANE: [], _LEFT_LANE: []}

        self.car_point = 0.0
        self.prev_car_point = 0.0
        self.proportional = 0.0
        self.integrator = 0.0
        self.differentiator = 0.0
        self.error = 0.0
        self.prev_error = 0.0
        log.info("Controller ready.")

    def on_control_flags(self, flags: ControlFlags) -> None:
        """Store new mode flags; a lane change forgets the remembered paths."""
        self.flags = ControlFlags(
            path_choice=flags.path_choice,
            controller_method=flags.controller_method,
            stop_flag=flags.stop_flag,
            blind_rush=flags.blind_rush,
            park_mode=flags.park_mode,
            is_autonomous=flags.is_autonomous,
        )
        if int(self._old_lane) != self.flags.path_choice:
            self.is_problem = False
            for path in self._old_paths.values():
                path.clear()
        self._old_lane = bool(self.flags.path_choice)

    def on_right_lane(self, path: Iterable[Any]) -> None:
        """Handle a path for the right lane."""
        self._on_lane(_RIGHT_LANE, path)

    def on_left_lane(self, path: Iterable[Any]) -> None:
        """Handle a path for the left lane."""
        self._on_lane(_LEFT_LANE, path)

    def on_park(self, path: Iterable[Any]) -> None:
        """Handle a parking path; ignored outside park mode."""
        if not self.flags.park_mode:
            return
        self._start_controller(_copy_path(path))

    def calculate_target(self, path_size: int) -> int:
        """Index of the waypoint to steer towards in a path of this size."""
        if self.flags.park_mode:
            return self.params.park_target
        if path_size < self.params.target:
            return path_size - 1
        return self.params.target

    def _on_lane(self, lane: int, path: Iterable[Any]) -> None:
        old_path = self._old_paths[lane]
        if self.flags.path_choice != lane or self.flags.park_mode:
            old_path.clear()
            return

        new_path = _copy_path(path)

        if old_path and new_path:
            point_new = new_path[self.calculate_target(len(new_path))]
            point_old = old_path[self.calculate_target(len(old_path))]
            dist = get_distance(point_new.x, point_new.y, point_old.x, point_old.y)
            if dist > self.params.threshold:
                if self.problem_counter != _MAX_PROBLEM_REPEATS:
                    new_path = list(old_path)
                    self.is_problem = True
                    self.problem_counter += 1
                    log.warning("Path jumped; keeping the previous one.")
                else:
                    self.problem_counter = 0
                    self.is_problem = False
            else:
                self.is_problem = False
                self.problem_counter = 0

        self._start_controller(new_path)

        if new_path and not self.is_problem:
            self._old_paths[lane] = new_path

    def _start_controller(self, path: list[Point]) -> None:
        if not path:
            log.info("No path in selected option.")
            centre = (self.params.min_steering_vehicle + self.params.max_steering_vehicle) / 2
            self._send_command(centre)
            return

        target = path[self.calculate_target(len(path))]
        self._publish_target(Marker.target_sphere(target.x, target.y))

        if self.flags.controller_method == "pid":
            self._pid_controller(path)
        else:
            log.info("Control flags are not received.")

    def _pid_controller(self, path: list[Point]) -> None:
        goal = path[self.calculate_target(len(path))].y
        self.error = goal - self.car_point
        self.proportional = self.params.kp * self.error

        self.integrator += self.params.ki * (self.error + self.prev_error)
        self.integrator = min(max(self.integrator, self.lim_min_int), self.lim_max_int)

        self.differentiator = self.params.kd * (self.error - self.prev_error)

        steer = self.proportional + self.integrator + self.differentiator
        steer = min(max(steer, self.lim_min), self.lim_max)

        self.prev_error = self.error
        self.prev_car_point = self.car_point

        steer = normalize_for_vehicle(
            steer,
            self.lim_max,
            self.lim_min,
            self.params.min_steering_vehicle,
            self.params.max_steering_vehicle,
        )
        steer = round_to_tens(steer)
        log.info("Steer for CAN: %s", steer)
        self._send_command(steer)

    def _send_command(self, steer: float) -> None:
        if not self.flags.is_autonomous:
            return
        command = Twist(linear_x=self.params.velocity_limit, angular_z=steer)
        if self.flags.stop_flag:
            command.linear_x = 0.0
        if self.flags.blind_rush:
            command.angular_z = 0.0
        self._publish_command(command)


def _copy_path(path: Iterable[Any]) -> list[Point]:
    return [Point(p.x, p.y, p.z) for p in path]