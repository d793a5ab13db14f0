"""Decorative dot markers drawn around the snowflake center.

These depend only on the numeric parameters, never on the seeded stream.
"""

from __future__ import annotations

import math
from typing import List, NamedTuple

from .snowflake_parameters import SnowflakeParameters

RING_RADIUS_SCALE = 0.18
RING_DOT_SCALE = 0.45
CENTER_DOT_SCALE = 0.9


class RingDot(NamedTuple):
    """Circle marker centered at ``(x, y)`` with radius ``r``."""

    x: float
    y: float
    r: float


def ring_dots(params: SnowflakeParameters) -> List[RingDot]:
    """Return ``arms * 2`` dots evenly spaced on a circle of radius 0.18 * base_len.

    Empty when ``params.ring_dots`` is off.
    """
    if not params.ring_dots:
        return []
    radius = params.base_len * RING_RADIUS_SCALE
    n = params.arms * 2
    r = params.stroke * RING_DOT_SCALE
    dots = []
    for i in range(n):
        th = (i / n) * math.pi * 2
        dots.append(RingDot(radius * math.cos(th), radius * math.sin(th), r))
    return dots


def center_dot_radius(stroke: float) -> float:
    """Return the radius of the center dot, never smaller than 1."""
    return max(1.0, stroke * CENTER_DOT_SCALE)
