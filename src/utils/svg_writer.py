"""Module defining SVGWriter for exporting snowflakes as standalone SVG files.

This module provides SVGWriter, a utility class with static methods that
assemble the rendered snowflake (path, center dot, ring dots) into a
self-contained SVG document and write it to disk.
"""

import logging
import os
import xml.etree.ElementTree as ET
from typing import Sequence, Tuple

_LOGGER = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
ICE_COLOR = "#e2f3ff"
SPIN_SECONDS = 18


def _num(value: float) -> str:
    """Format a number for an attribute without trailing zeros."""
    text = f"{float(value):.4f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


class SVGWriter:
    """Utility class for writing a snowflake drawing to SVG.

    The document is centered on the origin: its viewBox spans
    ``[-size/2, size/2]`` on both axes.
    """

    @staticmethod
    def build_document(
        path_d: str,
        dots: Sequence[Tuple[float, float, float]],
        *,
        size: float,
        stroke: float,
        center_r: float,
        animate: bool = False,
    ) -> ET.Element:
        """Assemble the SVG element tree.

        Args:
            path_d (str): Path descriptor (``M x y L x y ...``).
            dots (Sequence[Tuple[float, float, float]]): Ring dots as
                ``(x, y, r)``.
            size (float): Width and height of the view.
            stroke (float): Line thickness.
            center_r (float): Radius of the center dot.
            animate (bool): Add a slow, endless rotation of the drawing.

        Returns:
            ET.Element: The ``svg`` root element.
        """
        half = size / 2
        svg = ET.Element(
            "svg",
            {
                "xmlns": SVG_NAMESPACE,
                "width": _num(size),
                "height": _num(size),
                "viewBox": f"{_num(-half)} {_num(-half)} {_num(size)} {_num(size)}",
            },
        )

        # Glow filter
        defs = ET.SubElement(svg, "defs")
        glow = ET.SubElement(
            defs,
            "filter",
            {"id": "glow", "x": "-50%", "y": "-50%", "width": "200%", "height": "200%"},
        )
        ET.SubElement(
            glow, "feGaussianBlur", {"stdDeviation": "1.5", "result": "blur"}
        )
        merge = ET.SubElement(glow, "feMerge")
        ET.SubElement(merge, "feMergeNode", {"in": "blur"})
        ET.SubElement(merge, "feMergeNode", {"in": "SourceGraphic"})

        ET.SubElement(
            svg,
            "rect",
            {
                "x": _num(-half),
                "y": _num(-half),
                "width": _num(size),
                "height": _num(size),
                "fill": "transparent",
            },
        )

        drawing = ET.SubElement(svg, "g", {"id": "snowflake"})
        ET.SubElement(
            drawing,
            "path",
            {
                "d": path_d,
                "stroke": ICE_COLOR,
                "stroke-width": _num(stroke),
                "stroke-linecap": "round",
                "filter": "url(#glow)",
                "fill": "none",
            },
        )
        ET.SubElement(
            drawing,
            "circle",
            {
                "cx": "0",
                "cy": "0",
                "r": _num(center_r),
                "fill": ICE_COLOR,
            },
        )
        for x, y, r in dots:
            ET.SubElement(
                drawing,
                "circle",
                {"cx": _num(x), "cy": _num(y), "r": _num(r), "fill": ICE_COLOR},
            )

        if animate:
            ET.SubElement(
                drawing,
                "animateTransform",
                {
                    "attributeName": "transform",
                    "type": "rotate",
                    "from": "0 0 0",
                    "to": "360 0 0",
                    "dur": f"{SPIN_SECONDS}s",
                    "repeatCount": "indefinite",
                },
            )
        return svg

    @staticmethod
    def to_string(
        path_d: str,
        dots: Sequence[Tuple[float, float, float]],
        *,
        size: float,
        stroke: float,
        center_r: float,
        animate: bool = False,
    ) -> str:
        """Return the SVG document as text, with an XML declaration."""
        svg = SVGWriter.build_document(
            path_d,
            dots,
            size=size,
            stroke=stroke,
            center_r=center_r,
            animate=animate,
        )
        body = ET.tostring(svg, encoding="unicode")
        return '<?xml version="1.0" encoding="UTF-8"?>\n' + body + "\n"

    @staticmethod
    def write_svg(
        path_d: str,
        dots: Sequence[Tuple[float, float, float]],
        filename: str,
        *,
        size: float,
        stroke: float,
        center_r: float,
        animate: bool = False,
    ) -> str:
        """Write the SVG document to `filename`.

        Args:
            path_d (str): Path descriptor.
            dots (Sequence[Tuple[float, float, float]]): Ring dots.
            filename (str): Output path; parent directories are created.
            size (float): Width and height of the view.
            stroke (float): Line thickness.
            center_r (float): Radius of the center dot.
            animate (bool): Add the rotation animation.

        Returns:
            str: The written path.
        """
        text = SVGWriter.to_string(
            path_d,
            dots,
            size=size,
            stroke=stroke,
            center_r=center_r,
            animate=animate,
        )
        parent = os.path.dirname(filename)
        if parent:
            os.makedirs(parent, exist_ok=True)
        try:
            with open(filename, "w", encoding="utf-8", newline="\n") as fh:
                fh.write(text)
        except OSError:
            _LOGGER.exception("write_svg: failed to write '%s'.", filename)
            raise
        _LOGGER.info("write_svg: wrote '%s' (%d bytes).", filename, len(text))
        return filename
