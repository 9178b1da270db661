import pytest

from lanepid.params import ControlParameters, ParameterError


def _mapping():
    return {
        "left_lane_topic": "/lane/left",
        "right_lane_topic": "/lane/right",
        "park_topic": "/park",
        "vehicle_cmd_topic": "/cmd",
        "control_flags_topic": "/flags",
        "car_lenght": 2,
        "kp": 1.5,
        "kd": 0.25,
        "ki": 0.125,
        "velocity_limit": 4.0,
        "ke_stanley_param_turn": 0.5,
        "ke_stanley_param_steady": 0.75,
        "treshold": 1.0,
        "target": 5,
        "park_target": 3,
        "min_steering_vehicle": -100.0,
        "max_steering_vehicle": 100.0,
    }


def test_from_mapping_reads_all_values():
    params = ControlParameters.from_mapping(_mapping())
    assert params.left_lane_topic == "/lane/left"
    assert params.right_lane_topic == "/lane/right"
    assert params.park_topic == "/park"
    assert params.vehicle_cmd_topic == "/cmd"
    assert params.control_flags_topic == "/flags"
    assert params.car_length == 2.0
    assert (params.kp, params.kd, params.ki) == (1.5, 0.25, 0.125)
    assert params.velocity_limit == 4.0
    assert (params.ke_turn, params.ke_steady) == (0.5, 0.75)
    assert params.threshold == 1.0
    assert (params.target, params.park_target) == (5, 3)
    assert (params.min_steering_vehicle, params.max_steering_vehicle) == (-100.0, 100.0)


def test_integer_gain_becomes_float():
    params = ControlParameters.from_mapping(_mapping())
    assert repr(params.car_length) == "2.0"
    assert params.car_length / 4 == 0.5


@pytest.mark.parametrize("key", list(_mapping()))
def test_missing_parameter_raises(key):
    mapping = _mapping()
    del mapping[key]
    with pytest.raises(ParameterError, match=key):
        ControlParameters.from_mapping(mapping)


@pytest.mark.parametrize(
    "key, value",
    [
        ("left_lane_topic", 7),
        ("kp", "fast"),
        ("kp", True),
        ("target", 5.5),
        ("park_target", "3"),
    ],
)
def test_wrong_type_raises(key, value):
    mapping = _mapping()
    mapping[key] = value
    with pytest.raises(ParameterError, match=key):
        ControlParameters.from_mapping(mapping)


def test_parameter_error_is_value_error():
    with pytest.raises(ValueError):
        ControlParameters.from_mapping({})