from __future__ import annotations

import math

import numpy as np
import pytest

from snowflake_gen.decorations import RingDot, center_dot_radius, ring_dots
from snowflake_gen.snowflake_parameters import SnowflakeParameters


def test_ring_dots_count_and_radius():
    params = SnowflakeParameters(arms=6, base_len=180.0, stroke=2.0)
    dots = ring_dots(params)
    assert len(dots) == 12
    for d in dots:
        assert math.hypot(d.x, d.y) == pytest.approx(0.18 * 180.0)
        assert d.r == pytest.approx(0.9)


def test_ring_dots_angles_evenly_spaced():
    dots = ring_dots(SnowflakeParameters(arms=5))
    angles = np.array([math.atan2(d.y, d.x) for d in dots]) % (2 * math.pi)
    np.testing.assert_allclose(
        angles, np.arange(10) * (2 * math.pi / 10), atol=1e-12
    )
    assert dots[0] == RingDot(0.18 * 180.0, 0.0, 0.45 * 2.0)


def test_ring_dots_disabled():
    assert ring_dots(SnowflakeParameters(ring_dots=False)) == []


def test_ring_dots_ignore_seed():
    a = ring_dots(SnowflakeParameters(seed="a"))
    b = ring_dots(SnowflakeParameters(seed="b"))
    assert a == b


@pytest.mark.parametrize(
    "stroke, expected", [(2.0, 1.8), (1.0, 1.0), (0.5, 1.0), (4.0, 3.6)]
)
def test_center_dot_radius(stroke, expected):
    assert center_dot_radius(stroke) == pytest.approx(expected)
