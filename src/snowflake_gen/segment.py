"""Module defining the Segment type for snowflake geometry.

This module provides the Segment class, a directed line between two points in
a plane centered at the origin, plus helpers converting segment sequences to
and from NumPy arrays for vectorized transforms.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, List, NamedTuple, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray


class Segment(NamedTuple):
    """Directed line from ``(x1, y1)`` to ``(x2, y2)``.

    Segments carry no identity beyond their endpoints and are never mutated.
    """

    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def start(self) -> Tuple[float, float]:
        return (self.x1, self.y1)

    @property
    def end(self) -> Tuple[float, float]:
        return (self.x2, self.y2)

    @property
    def length(self) -> float:
        """Euclidean length of the segment."""
        return math.hypot(self.x2 - self.x1, self.y2 - self.y1)

    def rotated(self, theta: float) -> Segment:
        """Return the segment rotated by `theta` radians about the origin."""
        c = math.cos(theta)
        s = math.sin(theta)
        return Segment(
            self.x1 * c - self.y1 * s,
            self.x1 * s + self.y1 * c,
            self.x2 * c - self.y2 * s,
            self.x2 * s + self.y2 * c,
        )


def segments_to_array(segments: Iterable[Segment]) -> NDArray[np.float64]:
    """Stack segments into an ``(N, 4)`` float64 array of ``x1, y1, x2, y2``."""
    arr = np.asarray(list(segments), dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 4), dtype=np.float64)
    return arr.reshape(-1, 4)


def array_to_segments(arr: NDArray[Any]) -> List[Segment]:
    """Convert an ``(N, 4)`` array back into a list of segments.

    Raises:
        ValueError: If the array does not have four columns.
    """
    a = np.asarray(arr, dtype=np.float64)
    if a.size == 0:
        return []
    if a.ndim != 2 or a.shape[1] != 4:
        raise ValueError(f"expected an (N, 4) array, got shape {a.shape}")
    return [Segment(*row) for row in a.tolist()]


def endpoints(segments: Sequence[Segment]) -> NDArray[np.float64]:
    """Return all segment endpoints as a ``(2N, 2)`` array (start, end, ...)."""
    return segments_to_array(segments).reshape(-1, 2)
