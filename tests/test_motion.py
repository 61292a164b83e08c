import math

import pytest

from raycube.motion import (
    Key,
    Player,
    Vec,
    degree_to_radian,
    handle_key,
    handle_mouse,
    normalize_angle,
)


def make_player():
    return Player(pos=Vec(2.5, 3.5), dir=Vec(1.0, 0.0), plane=Vec(0.0, 0.66))


def test_degree_to_radian_half_turn():
    assert degree_to_radian(180) == pytest.approx(math.pi)


def test_normalize_angle_cases():
    assert normalize_angle(370) == 10
    assert normalize_angle(-90) == 270
    assert normalize_angle(90) == 90


def test_forward_then_backward_returns():
    p = make_player()
    p.forward(0.3)
    assert p.pos.x == pytest.approx(2.8)
    p.backward(0.3)
    assert (p.pos.x, p.pos.y) == pytest.approx((2.5, 3.5))


def test_strafe_is_perpendicular_and_reversible():
    p = make_player()
    p.strafe_right(0.5)
    dx, dy = p.pos.x - 2.5, p.pos.y - 3.5
    assert dx * p.dir.x + dy * p.dir.y == pytest.approx(0.0)
    assert math.hypot(dx, dy) == pytest.approx(0.5)
    p.strafe_left(0.5)
    assert (p.pos.x, p.pos.y) == pytest.approx((2.5, 3.5))


def test_rotate_preserves_lengths_and_reverses():
    p = make_player()
    p.rotate(0.4)
    assert math.hypot(p.dir.x, p.dir.y) == pytest.approx(1.0)
    assert math.hypot(p.plane.x, p.plane.y) == pytest.approx(0.66)
    p.rotate(-0.4)
    assert (p.dir.x, p.dir.y) == pytest.approx((1.0, 0.0))
    assert (p.plane.x, p.plane.y) == pytest.approx((0.0, 0.66))


def test_handle_key_moves():
    p = make_player()
    assert handle_key(p, Key.W, 0.25, 0.1) is False
    assert p.pos.x == pytest.approx(2.75)


def test_handle_key_arrows_rotate_opposite_ways():
    left, right = make_player(), make_player()
    handle_key(left, 123, 0.25, 0.2)
    handle_key(right, 124, 0.25, 0.2)
    assert left.dir.y == pytest.approx(-right.dir.y)
    assert left.dir.x == pytest.approx(right.dir.x)


def test_handle_key_escape_requests_quit():
    p = make_player()
    assert handle_key(p, 53, 0.25, 0.1) is True
    assert (p.pos.x, p.pos.y) == (2.5, 3.5)


def test_handle_key_unknown_does_nothing():
    p = make_player()
    assert handle_key(p, 99, 0.25, 0.1) is False
    assert p == make_player()


def test_handle_mouse_rotates_and_tracks_x():
    p = make_player()
    p.mouse_x = 100
    handle_mouse(p, 120, 0.1)
    assert p.mouse_x == 120
    assert p.dir.y == pytest.approx(math.sin(0.1))
    handle_mouse(p, 90, 0.1)
    assert (p.dir.x, p.dir.y) == pytest.approx((1.0, 0.0))


def test_handle_mouse_same_x_keeps_direction():
    p = make_player()
    p.mouse_x = 50
    handle_mouse(p, 50, 0.1)
    assert (p.dir.x, p.dir.y) == (1.0, 0.0)