"""Module implementing the rotational replication of a snowflake arm.

The arm is copied once per arm index and rotated about the origin by the
exact rotation matrix, so the complete flake has rotational symmetry of the
order given by the arm count.
"""

from __future__ import annotations

import logging
import math
from typing import Any, List, Sequence

import numpy as np
from numpy.typing import NDArray
from scipy.spatial import cKDTree

from .segment import Segment, array_to_segments, segments_to_array

_LOGGER = logging.getLogger(__name__)

TAU = math.pi * 2


def _rotate_array(arr: NDArray[Any], theta: float) -> NDArray[np.float64]:
    """Rotate an ``(N, 4)`` segment array by `theta` radians."""
    c = math.cos(theta)
    s = math.sin(theta)
    out = np.empty_like(arr, dtype=np.float64)
    out[:, 0] = arr[:, 0] * c - arr[:, 1] * s
    out[:, 1] = arr[:, 0] * s + arr[:, 1] * c
    out[:, 2] = arr[:, 2] * c - arr[:, 3] * s
    out[:, 3] = arr[:, 2] * s + arr[:, 3] * c
    return out


def rotate_segments(segments: Sequence[Segment], theta: float) -> List[Segment]:
    """Rotate every segment about the origin by `theta` radians."""
    return array_to_segments(_rotate_array(segments_to_array(segments), theta))


def replicate(arm: Sequence[Segment], arms: int) -> List[Segment]:
    """Rotate one arm into a complete snowflake.

    Args:
        arm (Sequence[Segment]): Segments of a single arm.
        arms (int): Number of copies; copy ``k`` is rotated by
            ``2*pi*k/arms``.

    Returns:
        list[Segment]: All copies concatenated in index order. Empty when
        ``arms <= 0`` or the arm is empty.
    """
    base = segments_to_array(arm)
    n = int(arms)
    if n <= 0 or base.shape[0] == 0:
        _LOGGER.debug("replicate: nothing to do (arms=%d, segments=%d)", n, len(arm))
        return []

    copies = [_rotate_array(base, (k / n) * TAU) for k in range(n)]
    out = array_to_segments(np.concatenate(copies, axis=0))
    _LOGGER.debug(
        "replicate: %d arm segments x %d arms -> %d segments",
        base.shape[0],
        n,
        len(out),
    )
    return out


def symmetry_error(segments: Sequence[Segment], arms: int) -> float:
    """Measure how far a segment set is from symmetry of order `arms`.

    The set is rotated by one arm step and every rotated segment is matched to
    its nearest original segment (KD-tree over the 4-D endpoint vectors).

    Args:
        segments (Sequence[Segment]): Segment set to check.
        arms (int): Expected order of rotational symmetry.

    Returns:
        float: Largest nearest-neighbour distance; ~0 for a symmetric set.

    Raises:
        ValueError: If ``arms < 1``.
    """
    if arms < 1:
        raise ValueError(f"arms must be >= 1, got {arms}")
    base = segments_to_array(segments)
    if base.shape[0] == 0:
        return 0.0
    rotated = _rotate_array(base, TAU / arms)
    dist, _ = cKDTree(base).query(rotated, k=1)
    err = float(np.max(dist))
    _LOGGER.debug(
        "symmetry_error(order=%d) over %d segments: %.3e", arms, len(base), err
    )
    return err
