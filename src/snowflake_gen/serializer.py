"""Module converting segments into an SVG path ``d`` string.

Every segment becomes a ``M x1 y1 L x2 y2`` pair of commands with fixed-point
coordinates, so the output is deterministic text for a given segment list.
Coordinates that round to zero are written unsigned, so a path differs from
a plain `toFixed`-style rendering wherever that one would print ``-0.00``.
"""

from __future__ import annotations

from typing import Iterable

from .segment import Segment

DEFAULT_DECIMALS = 2


def format_coordinate(value: float, decimals: int = DEFAULT_DECIMALS) -> str:
    """Format a coordinate as fixed-point text.

    Values that round to zero are written without a sign (``0.00``).
    """
    text = f"{float(value):.{int(decimals)}f}"
    if text.startswith("-") and float(text) == 0.0:
        return text[1:]
    return text


def segment_to_commands(segment: Segment, decimals: int = DEFAULT_DECIMALS) -> str:
    """Return the ``M x y L x y`` commands for one segment."""
    x1, y1, x2, y2 = (format_coordinate(v, decimals) for v in segment)
    return f"M {x1} {y1} L {x2} {y2}"


def segments_to_path(
    segments: Iterable[Segment], decimals: int = DEFAULT_DECIMALS
) -> str:
    """Serialize segments into an SVG path descriptor.

    Args:
        segments (Iterable[Segment]): Segments in drawing order.
        decimals (int): Digits after the decimal point.

    Returns:
        str: Space-separated move/line commands; empty for no segments.
    """
    return " ".join(segment_to_commands(s, decimals) for s in segments)
