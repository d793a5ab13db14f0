"""Module defining the SnowflakeParameters record for configuring generation.

This module provides the immutable parameter record consumed by the
generator, its conversion from and to the external (camelCase) input record,
JSON loading, and the "randomize" helper that rolls a fresh seed and shape.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import numpy as np

_LOGGER = logging.getLogger(__name__)

SEED_WORDS = (
    "frost",
    "flake",
    "ember",
    "aurora",
    "crystal",
    "snow",
    "glacier",
    "drift",
    "ice",
    "winter",
    "fir",
    "pine",
    "hoarfrost",
)

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"

# External record name -> field name
_ALIASES = {
    "baseLen": "base_len",
    "angleDeg": "angle_deg",
    "tipFringe": "tip_fringe",
    "ringDots": "ring_dots",
}


class ParameterError(ValueError):
    """Raised when an input record cannot be turned into parameters."""


@dataclass(frozen=True)
class SnowflakeParameters:
    """Holds the settings for generating one snowflake.

    Attributes:
        arms (int): Number of rotational copies of the arm.
        depth (int): Recursion depth of the branching.
        base_len (float): Length of the root branch.
        ratio (float): Child-length scale factor.
        angle_deg (float): Branch splay angle in degrees.
        jitter (float): Randomness magnitude; 0 disables the wobble.
        stroke (float): Line thickness, also used to size the decorations.
        tip_fringe (bool): Add the small ornament around the arm tip.
        ring_dots (bool): Render the ring of dots around the center.
        animate (bool): Mark the exported drawing as slowly spinning.
        seed (str): Seed string; the same seed regrows the same snowflake.
        size (int): Width and height of the SVG view.

    Notes:
        - No range checks are applied; out-of-range values give degenerate
          but well-defined geometry.
    """

    arms: int = 6
    depth: int = 4
    base_len: float = 180.0
    ratio: float = 0.62
    angle_deg: float = 28.0
    jitter: float = 0.06
    stroke: float = 2.0
    tip_fringe: bool = True
    ring_dots: bool = True
    animate: bool = False
    seed: str = "crystal-001"
    size: int = 640

    def replace(self, **changes: Any) -> SnowflakeParameters:
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SnowflakeParameters:
        """Build parameters from a mapping, starting from the defaults.

        Both the field names and the camelCase names of the external input
        record are accepted.

        Args:
            data: Partial or complete parameter record.

        Returns:
            SnowflakeParameters: The parsed record.

        Raises:
            ParameterError: On unknown keys or values of the wrong type.
        """
        if not isinstance(data, Mapping):
            raise ParameterError(
                f"parameters must be an object, got {type(data).__name__}"
            )
        fields = {f.name: f for f in dataclasses.fields(cls)}
        values: Dict[str, Any] = {}
        for key, raw in data.items():
            name = _ALIASES.get(key, key)
            if name not in fields:
                raise ParameterError(f"unknown parameter {key!r}")
            values[name] = _coerce(name, raw, fields[name].type)
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Return the external (camelCase) input record."""
        reverse = {v: k for k, v in _ALIASES.items()}
        return {reverse.get(k, k): v for k, v in dataclasses.asdict(self).items()}


def _coerce(name: str, raw: Any, annotation: Any) -> Any:
    """Check and convert one field value."""
    kind = annotation if isinstance(annotation, str) else annotation.__name__
    if kind == "bool":
        if not isinstance(raw, bool):
            raise ParameterError(f"{name} must be a boolean, got {raw!r}")
        return raw
    if kind == "str":
        if not isinstance(raw, str):
            raise ParameterError(f"{name} must be a string, got {raw!r}")
        return raw
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ParameterError(f"{name} must be a number, got {raw!r}")
    if kind == "int":
        if isinstance(raw, float) and not raw.is_integer():
            raise ParameterError(f"{name} must be an integer, got {raw!r}")
        return int(raw)
    return float(raw)


def load_parameters(path: Union[str, Path]) -> SnowflakeParameters:
    """Read parameters from a JSON file.

    Args:
        path: Path of a JSON object holding (part of) the input record.

    Returns:
        SnowflakeParameters: Defaults overridden by the file's values.

    Raises:
        ParameterError: If the file cannot be read or parsed.
    """
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except OSError as exc:
        raise ParameterError(f"cannot read {p}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ParameterError(f"invalid JSON in {p}: {exc}") from exc
    _LOGGER.debug("Loaded parameter record from %s: %s", p, data)
    return SnowflakeParameters.from_dict(data)


def _base36(n: int) -> str:
    out = ""
    while True:
        n, rem = divmod(n, 36)
        out = _BASE36[rem] + out
        if n == 0:
            return out


def random_seed(rng: Optional[np.random.Generator] = None) -> str:
    """Roll a seed of the form ``<word>-<4 base36 chars>``."""
    gen = rng if rng is not None else np.random.default_rng()
    word = SEED_WORDS[int(gen.integers(len(SEED_WORDS)))]
    suffix = _base36(int(gen.integers(36**4))).rjust(4, "0")
    return f"{word}-{suffix}"


def randomize_parameters(
    base: Optional[SnowflakeParameters] = None,
    rng: Optional[np.random.Generator] = None,
) -> SnowflakeParameters:
    """Return `base` with a fresh seed and a re-rolled shape.

    Arms, size, and the boolean switches are kept; angle, ratio, jitter,
    depth, and stroke are drawn from their pleasant ranges.

    Args:
        base: Parameters to start from (defaults when omitted).
        rng: NumPy generator; a fresh PCG64 generator is used when omitted.

    Returns:
        SnowflakeParameters: The randomized record.
    """
    base = base if base is not None else SnowflakeParameters()
    gen = rng if rng is not None else np.random.default_rng()
    params = base.replace(
        seed=random_seed(gen),
        angle_deg=float(round(20 + gen.random() * 20)),
        ratio=round(0.55 + gen.random() * 0.14, 2),
        jitter=round(gen.random() * 0.12, 2),
        depth=int(math.floor(3 + gen.random() * 2)),
        stroke=round(1 + gen.random() * 2.5, 1),
    )
    _LOGGER.info("Randomized parameters: %s", params)
    return params
