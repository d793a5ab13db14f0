"""The utils package contains the file exporters used by snowflake_gen.

Submodules:
  - svg_writer: SVGWriter for standalone SVG documents.

Utilities:
  SVGWriter
"""

from utils.svg_writer import SVGWriter

__all__ = [
    "SVGWriter",
]
