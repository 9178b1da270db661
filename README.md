# lanepid

A small PID steering controller for a vehicle that follows a path. It takes
lane paths or parking paths as sequences of points in the vehicle's local frame
and picks a target waypoint. It runs a clamped PID loop on the lateral (`y`)
offset of that waypoint, scales the result to the vehicle's steering range and
hands out a velocity and steering command through a callback that you supply.

The package uses only the standard library.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Parameters

`lanepid.params.ControlParameters.from_mapping` reads a plain mapping. Every
key is required. `ParameterError`, a subclass of `ValueError`, is raised when a
key is missing or its value has the wrong type.

| key | type | meaning |
| --- | --- | --- |
| `left_lane_topic`, `right_lane_topic`, `park_topic`, `vehicle_cmd_topic`, `control_flags_topic` | str | topic names, stored for the caller's own wiring |
| `car_lenght` | number | vehicle length (`car_length`) |
| `kp`, `ki`, `kd` | number | PID gains |
| `velocity_limit` | number | forward velocity sent with each command |
| `ke_stanley_param_turn`, `ke_stanley_param_steady` | number | stored as `ke_turn` / `ke_steady`, not used by the PID loop |
| `treshold` | number | how far the target waypoint may jump between two paths before the new path is distrusted (`threshold`) |
| `target` | int | index of the target waypoint on a lane path |
| `park_target` | int | index of the target waypoint in park mode |
| `min_steering_vehicle`, `max_steering_vehicle` | number | steering range of the vehicle |

`Control` accepts either a `ControlParameters` instance or the mapping itself.

## Usage

```python
from lanepid.controller import Control
from lanepid.messages import ControlFlags, Point
from lanepid.params import ControlParameters

params = ControlParameters.from_mapping({
    "left_lane_topic": "/left_lane",
    "right_lane_topic": "/right_lane",
    "park_topic": "/park",
    "vehicle_cmd_topic": "/cmd_vel",
    "control_flags_topic": "/control_flags",
    "car_lenght": 2.5,
    "kp": 1.0, "ki": 0.0, "kd": 0.0,
    "velocity_limit": 5.0,
    "ke_stanley_param_turn": 1.0,
    "ke_stanley_param_steady": 1.0,
    "treshold": 2.0,
    "target": 5,
    "park_target": 3,
    "min_steering_vehicle": -500.0,
    "max_steering_vehicle": 500.0,
})

control = Control(params, publish_command=print, publish_target=print)
control.on_control_flags(ControlFlags(path_choice=0, controller_method="pid", is_autonomous=True))
control.on_right_lane([Point(float(i), 0.5) for i in range(10)])
```

Paths may be any iterable of objects with `x`, `y` and `z` attributes. They are
copied into `Point` values.

## Behaviour

- `ControlFlags.path_choice` 0 selects the right lane (`on_right_lane`) and 1
  selects the left lane (`on_left_lane`). A path for the lane that is not
  selected is ignored, and the path remembered for that lane is cleared.
  Changing `path_choice` clears the remembered paths of both lanes.
- With `park_mode` set, lane paths are ignored and only paths passed to
  `on_park` are followed.
- `calculate_target(path_size)` returns `park_target` in park mode. Otherwise
  it returns `target`, or the last index when the path is shorter than
  `target`.
- When the target waypoint of a new lane path is farther than `threshold` from
  that of the previous accepted path, the previous path is used instead. After
  ten such substitutions in a row, the next jumping path is accepted.
- For each non-empty path, a red sphere `Marker` at the target waypoint goes to
  `publish_target`. The PID loop runs only when `controller_method` is `"pid"`.
- The PID integrator is clamped to [-5, 5] and the output to [-3, 3]. The
  output is mapped onto the steering range, with +3 going to
  `min_steering_vehicle` and -3 to `max_steering_vehicle`. It is then truncated
  toward zero to a multiple of ten.
- An empty path sends the middle of the steering range.
- Commands (`Twist`) reach `publish_command` only while `is_autonomous` is set.
  `stop_flag` sets `linear_x` to zero, and `blind_rush` sets `angular_z` to
  zero.

Progress and warnings go to the standard `logging` logger
`lanepid.controller`.

The arithmetic helpers are in `lanepid.geometry`: `normalize_angle`,
`get_distance`, `normalize_for_vehicle` and `round_to_tens`.

## What it does not do

The package has no message transport, no node and no command-line program. It
does not subscribe to the configured topics or publish on them. The topic names
are only read and stored. You deliver flags and paths by calling the `on_*`
methods, and you send the results on through the two callables given to
`Control`.