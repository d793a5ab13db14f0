"""Module defining the ArmBuilder class that grows one snowflake arm.

An arm is a tree of straight segments grown by recursive splitting: each
branch spawns two pairs of children at two points along its length, and,
when jitter is noticeable, an occasional straight twig near the tips. The
seeded stream drives every wobble, so the draw order is part of the contract.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from .prng import Mulberry32, seeded
from .segment import Segment
from .snowflake_parameters import SnowflakeParameters

_LOGGER = logging.getLogger(__name__)

TAU = math.pi * 2

_SPLITS = (0.38, 0.68)
_SPLIT_JITTER = 0.05
_CHILD_SCALE = 0.85
_CHILD_JITTER = 0.08
_WOBBLE_SCALE = 0.8
_TWIG_SCALE = 0.55
_TWIG_MIN_JITTER = 0.02
_TWIG_MAX_LEVEL = 2
_FRINGE_COUNT = 6


class ArmBuilder:
    """Grows the segment tree of a single arm.

    Attributes:
        params (SnowflakeParameters): Shape parameters.
        rng (Mulberry32): Stream consumed while growing.
        angle (float): Splay angle in radians.
        segments (list[Segment]): Output buffer, in generation order.
    """

    def __init__(
        self, params: SnowflakeParameters, rng: Optional[Mulberry32] = None
    ) -> None:
        """Initialize an ArmBuilder.

        Args:
            params (SnowflakeParameters): Shape parameters.
            rng (Optional[Mulberry32]): Generator to draw from; seeded from
                ``params.seed`` when omitted.
        """
        self.params = params
        self.rng = rng if rng is not None else seeded(params.seed)
        self.angle = (params.angle_deg * math.pi) / 180
        self.segments: List[Segment] = []

    def build(self) -> List[Segment]:
        """Grow the arm from the origin along +x and return its segments."""
        p = self.params
        _LOGGER.debug(
            "Building arm: depth=%d base_len=%s ratio=%s angle=%s jitter=%s",
            p.depth,
            p.base_len,
            p.ratio,
            p.angle_deg,
            p.jitter,
        )
        self.branch(0.0, 0.0, 0.0, p.base_len, p.depth)
        n_tree = len(self.segments)

        if p.tip_fringe:
            self.add_tip_fringe()

        _LOGGER.debug(
            "Arm built: tree=%d segments, fringe=%d segments",
            n_tree,
            len(self.segments) - n_tree,
        )
        return self.segments

    def branch(
        self, x: float, y: float, heading: float, length: float, level: int
    ) -> None:
        """Append one branch and recurse into its children.

        Args:
            x (float): Start x coordinate.
            y (float): Start y coordinate.
            heading (float): Direction in radians before the wobble.
            length (float): Branch length.
            level (int): Remaining recursion depth; ``<= 0`` is a leaf.
        """
        p = self.params
        rng = self.rng

        wobble = 0.0
        if p.jitter:
            wobble = rng.uniform(-p.jitter, p.jitter) * _WOBBLE_SCALE
        theta = heading + wobble
        x2 = x + length * math.cos(theta)
        y2 = y + length * math.sin(theta)
        self.segments.append(Segment(x, y, x2, y2))

        if level <= 0:
            return

        splits = [s + rng.uniform(-_SPLIT_JITTER, _SPLIT_JITTER) for s in _SPLITS]
        for t in splits:
            bx = x + (x2 - x) * t
            by = y + (y2 - y) * t
            child = length * p.ratio * (
                _CHILD_SCALE + rng.uniform(-_CHILD_JITTER, _CHILD_JITTER)
            )

            self.branch(bx, by, theta + self.angle, child, level - 1)
            self.branch(bx, by, theta - self.angle, child, level - 1)

            # The twig draw only happens for qualifying calls.
            if (
                p.jitter > _TWIG_MIN_JITTER
                and level <= _TWIG_MAX_LEVEL
                and rng() < 0.5
            ):
                self.branch(bx, by, theta, child * _TWIG_SCALE, level - 2)

    def add_tip_fringe(self) -> None:
        """Append the six-segment ornament around the arm tip on the x axis."""
        tip = 0.0
        for s in self.segments:
            tip = max(tip, math.hypot(s.x2, s.y2))

        for i in range(_FRINGE_COUNT):
            th = (i / 2) * TAU
            r1 = tip * 0.03
            r2 = tip * (0.03 + 0.015 * (0.5 * self.rng()))
            a = Segment(r1, 0.0, 0.0, 0.0).rotated(th)
            b = Segment(r2, 0.0, 0.0, 0.0).rotated(th + math.pi / _FRINGE_COUNT)
            self.segments.append(Segment(tip + a.x1, a.y1, tip + b.x1, b.y1))
        _LOGGER.debug("Tip fringe added at radius %.6g", tip)


def build_arm(
    params: SnowflakeParameters, rng: Optional[Mulberry32] = None
) -> List[Segment]:
    """Grow one arm.

    Args:
        params (SnowflakeParameters): Shape parameters.
        rng (Optional[Mulberry32]): Generator override; a fresh one seeded
            from ``params.seed`` is used when omitted.

    Returns:
        list[Segment]: The arm's segments in generation order.
    """
    return ArmBuilder(params, rng).build()


def max_arm_segments(depth: int, twigs: bool = True, tip_fringe: bool = False) -> int:
    """Upper bound on the number of segments `build_arm` can produce.

    Every call adds one segment and, above the leaves, four children plus up
    to two twigs (twigs only appear at levels 1 and 2). Without twigs the
    bound is exact: ``(4**(depth + 1) - 1) // 3``.

    Args:
        depth (int): Recursion depth.
        twigs (bool): Whether twigs can fire (jitter above 0.02).
        tip_fringe (bool): Whether the six fringe segments are added.

    Returns:
        int: Maximum segment count for one arm.
    """
    prev2, prev1 = 1, 1  # U(level - 2), U(level - 1)
    for level in range(1, depth + 1):
        twig = prev2 if twigs and level <= _TWIG_MAX_LEVEL else 0
        cur = 1 + 2 * (2 * prev1 + twig)
        prev2, prev1 = prev1, cur
    total = prev1
    if tip_fringe:
        total += _FRINGE_COUNT
    return total
