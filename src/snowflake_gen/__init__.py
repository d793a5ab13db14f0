"""The snowflake_gen package grows deterministic, seeded snowflake drawings.

This package offers:
  - A seeded pseudo-random stream reproducible from a seed string.
  - Recursive growth of one snowflake arm as a tree of line segments.
  - Rotational replication of the arm and serialization to an SVG path.
  - Standalone SVG and VTU line-mesh export.

Submodules:
  - prng: String hash and Mulberry32 stream.
  - snowflake_parameters: Parameter record, JSON loading, randomization.
  - segment: Segment type and array helpers.
  - arm: ArmBuilder and the segment-count bound.
  - symmetry: Rotational replication and symmetry check.
  - serializer: SVG path serialization.
  - decorations: Ring-dot and center-dot markers.
  - snowflake: Snowflake pipeline facade.
  - cli: Command line interface.

Classes:
  ArmBuilder, Mulberry32, RingDot, Segment, Snowflake, SnowflakeParameters,
  StringHash

Utilities:
  SVGWriter
"""

from .config import (
    config,
    configure,
    use,
    set_log_level,
)

from snowflake_gen.prng import Mulberry32, StringHash, seeded
from snowflake_gen.snowflake_parameters import (
    ParameterError,
    SnowflakeParameters,
    load_parameters,
    randomize_parameters,
)
from snowflake_gen.segment import Segment
from snowflake_gen.arm import ArmBuilder, build_arm, max_arm_segments
from snowflake_gen.symmetry import replicate, symmetry_error
from snowflake_gen.serializer import segments_to_path
from snowflake_gen.decorations import RingDot, center_dot_radius, ring_dots
from snowflake_gen.snowflake import Snowflake, generate_path

from utils.svg_writer import SVGWriter

__all__ = [
    # Core classes
    "ArmBuilder",
    "Mulberry32",
    "RingDot",
    "Segment",
    "Snowflake",
    "SnowflakeParameters",
    "StringHash",
    "ParameterError",
    # Pipeline functions
    "seeded",
    "build_arm",
    "max_arm_segments",
    "replicate",
    "symmetry_error",
    "segments_to_path",
    "ring_dots",
    "center_dot_radius",
    "generate_path",
    "load_parameters",
    "randomize_parameters",
    # Utilities
    "SVGWriter",
    # Configuration
    "config",
    "configure",
    "use",
    "set_log_level",
]
