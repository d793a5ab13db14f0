"""Module defining the Snowflake class that runs the full generation pipeline.

Parameters flow one way: seeded stream -> one arm -> rotated copies -> path
string, with the ring dots computed alongside from the numeric parameters.
The class also hands the results to the SVG writer and to a VTU line-mesh
export.
"""

from __future__ import annotations

import logging
import os
from typing import List, Optional

import meshio
import numpy as np

from utils.svg_writer import SVGWriter

from .arm import build_arm
from .config import Config
from .config import config as _global_config
from .decorations import RingDot, center_dot_radius, ring_dots
from .segment import Segment, endpoints
from .serializer import segments_to_path
from .snowflake_parameters import SnowflakeParameters
from .symmetry import replicate

_LOGGER = logging.getLogger(__name__)


def svg_filename(seed: str) -> str:
    """Return the download file name for a seed (``snowflake-<seed>.svg``)."""
    safe = seed.replace("/", "_").replace("\\", "_")
    return f"snowflake-{safe}.svg"


def _is_directory_target(target: str) -> bool:
    if os.path.isdir(target) or target.endswith(("/", os.sep)):
        return True
    return not target.lower().endswith(".svg")


class Snowflake:
    """Seeded snowflake generator.

    Attributes:
        params (SnowflakeParameters): Parameters as given by the caller.
        arm_segments (list[Segment]): Segments of the single grown arm.
        segments (list[Segment]): All replicated segments.
        path (str): SVG path descriptor of `segments`.
        dots (list[RingDot]): Ring-dot markers (empty when disabled).
    """

    def __init__(
        self, params: SnowflakeParameters, config: Optional[Config] = None
    ) -> None:
        """Initialize the generator.

        Args:
            params: Snowflake parameters.
            config: Settings source; the package-wide config when omitted.
        """
        self.params = params
        self.config = config if config is not None else _global_config

        # Outputs populated by generate()
        self.arm_segments: List[Segment] = []
        self.segments: List[Segment] = []
        self.path: str = ""
        self.dots: List[RingDot] = []

    @property
    def generated(self) -> bool:
        return bool(self.segments)

    @property
    def effective_params(self) -> SnowflakeParameters:
        """Parameters with the depth capped at the configured maximum."""
        max_depth = self.config.max_depth
        if self.params.depth > max_depth:
            _LOGGER.warning(
                "depth=%d exceeds max_depth=%d; clamping.",
                self.params.depth,
                max_depth,
            )
            return self.params.replace(depth=max_depth)
        return self.params

    def generate(self) -> Snowflake:
        """Grow, replicate, and serialize the snowflake.

        Returns:
            Snowflake: ``self``, for chaining.
        """
        params = self.effective_params
        _LOGGER.info(
            "Generating snowflake seed=%r arms=%d depth=%d",
            params.seed,
            params.arms,
            params.depth,
        )
        self.arm_segments = build_arm(params)
        self.segments = replicate(self.arm_segments, params.arms)
        self.path = segments_to_path(self.segments, self.config.decimals)
        self.dots = ring_dots(params)
        _LOGGER.info(
            "Generated: arm=%d segments, total=%d segments, dots=%d, path=%d chars",
            len(self.arm_segments),
            len(self.segments),
            len(self.dots),
            len(self.path),
        )
        return self

    @property
    def filename(self) -> str:
        return svg_filename(self.params.seed)

    def to_svg(self) -> str:
        """Return the standalone SVG document for the generated snowflake."""
        return SVGWriter.to_string(
            self.path,
            self.dots,
            size=self.params.size,
            stroke=self.params.stroke,
            center_r=center_dot_radius(self.params.stroke),
            animate=self.params.animate,
        )

    def export_svg(self, target: str = ".") -> Optional[str]:
        """Write the SVG document.

        Args:
            target: Output file, or a directory in which ``snowflake-<seed>.svg``
                is created. A target that exists as a directory, ends with a
                path separator, or lacks the ``.svg`` suffix is a directory;
                missing directories are created.

        Returns:
            Optional[str]: The written file, or None when nothing has been
            generated yet (the export is skipped).
        """
        if not self.generated:
            _LOGGER.warning("export_svg: nothing generated; skipping export.")
            return None
        filename = target
        if _is_directory_target(target):
            os.makedirs(target, exist_ok=True)
            filename = os.path.join(target, self.filename)
        return SVGWriter.write_svg(
            self.path,
            self.dots,
            filename,
            size=self.params.size,
            stroke=self.params.stroke,
            center_r=center_dot_radius(self.params.stroke),
            animate=self.params.animate,
        )

    def save(self, filename: str) -> None:
        """Write the segments as a line mesh (VTU or any meshio format).

        Raises:
            ValueError: If no segments have been generated.
        """
        if not self.segments:
            _LOGGER.error("save: empty snowflake (segments=0).")
            raise ValueError("Cannot save: no segments in the snowflake.")

        pts2 = endpoints(self.segments)
        pts = np.zeros((pts2.shape[0], 3), dtype=float)
        pts[:, :2] = pts2
        con = np.arange(pts.shape[0], dtype=int).reshape(-1, 2)

        try:
            m = meshio.Mesh(points=pts, cells=[("line", con)])
            m.write(filename)
            _LOGGER.info(
                "save: wrote '%s' (points=%d, segments=%d).",
                filename,
                pts.shape[0],
                con.shape[0],
            )
        except Exception:
            _LOGGER.exception("save: failed to write '%s'.", filename)
            raise


def generate_path(params: SnowflakeParameters) -> str:
    """Return only the path descriptor for `params`.

    Unlike :class:`Snowflake`, no depth cap is applied.
    """
    arm = build_arm(params)
    return segments_to_path(replicate(arm, params.arms))
