"""Tests for edge mode resolution."""

import numpy as np
import pytest

from pixel_bleed.core.edges import EdgeMode, resolve, resolve_array


def test_clamp_pins_each_axis():
    assert resolve((-3, 2), 5, 4, EdgeMode.CLAMP) == (0, 2)
    assert resolve((7, -1), 5, 4, EdgeMode.CLAMP) == (4, 0)
    assert resolve((9, 9), 5, 4, EdgeMode.CLAMP) == (4, 3)


def test_repeat_wraps_with_non_negative_remainder():
    assert resolve((-1, -1), 5, 4, EdgeMode.REPEAT) == (4, 3)
    assert resolve((5, 4), 5, 4, EdgeMode.REPEAT) == (0, 0)
    assert resolve((-11, 9), 5, 4, EdgeMode.REPEAT) == (4, 1)


def test_zero_rejects_out_of_bounds():
    assert resolve((0, 0), 5, 4, EdgeMode.ZERO) == (0, 0)
    assert resolve((4, 3), 5, 4, EdgeMode.ZERO) == (4, 3)
    assert resolve((5, 0), 5, 4, EdgeMode.ZERO) is None
    assert resolve((0, -1), 5, 4, EdgeMode.ZERO) is None


@pytest.mark.parametrize("mode", list(EdgeMode))
def test_in_bounds_queries_are_unchanged(mode):
    for x in range(3):
        for y in range(2):
            assert resolve((x, y), 3, 2, mode) == (x, y)


@pytest.mark.parametrize("mode", list(EdgeMode))
def test_array_form_matches_scalar_form(mode):
    xs, ys = np.meshgrid(np.arange(-7, 12), np.arange(-6, 10))
    rx, ry, valid = resolve_array(xs, ys, 5, 4, mode)

    for qx, qy, ox, oy, ok in zip(xs.ravel(), ys.ravel(), rx.ravel(), ry.ravel(), valid.ravel()):
        expected = resolve((int(qx), int(qy)), 5, 4, mode)
        if expected is None:
            assert not ok
        else:
            assert ok
            assert (int(ox), int(oy)) == expected


def test_parse_accepts_names_and_members():
    assert EdgeMode.parse("Clamp") is EdgeMode.CLAMP
    assert EdgeMode.parse(" repeat ") is EdgeMode.REPEAT
    assert EdgeMode.parse(EdgeMode.ZERO) is EdgeMode.ZERO
    assert str(EdgeMode.ZERO) == "zero"


def test_parse_rejects_unknown_name():
    with pytest.raises(ValueError, match="clamp, repeat, zero"):
        EdgeMode.parse("mirror")
