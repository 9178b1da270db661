import time

from lanepid.messages import ControlFlags, Marker, Point, Twist


def test_point_defaults_to_origin():
    assert Point() == Point(0.0, 0.0, 0.0)


def test_control_flags_defaults():
    flags = ControlFlags()
    assert flags.path_choice == 0
    assert flags.controller_method == ""
    assert not flags.stop_flag
    assert not flags.blind_rush
    assert not flags.park_mode
    assert not flags.is_autonomous


def test_twist_holds_values():
    twist = Twist(linear_x=2.5, angular_z=-30.0)
    assert (twist.linear_x, twist.angular_z) == (2.5, -30.0)


def test_target_sphere_position():
    marker = Marker.target_sphere(4.5, -1.25)
    assert (marker.x, marker.y, marker.z) == (4.5, -1.25, 0.0)


def test_target_sphere_appearance():
    marker = Marker.target_sphere(1.0, 2.0)
    assert marker.frame_id == "velodyne"
    assert marker.shape == "sphere"
    assert marker.action == "add"
    assert marker.scale == (0.8, 0.8, 0.8)
    assert marker.color == (1.0, 0.0, 0.0, 1.0)
    assert marker.orientation == (0.0, 0.0, 0.0, 1.0)
    assert marker.lifetime == 0.2


def test_target_sphere_is_stamped_now():
    before = time.time()
    marker = Marker.target_sphere(0.0, 0.0)
    after = time.time()
    assert before <= marker.stamp <= after