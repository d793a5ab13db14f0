"""Command line interface for snowflake-gen.

Run:
  snowflake-gen render [OUTPUT] --seed crystal-001 --depth 4
  snowflake-gen path --seed frost-1a2b
  snowflake-gen random --rng-seed 7 --output flakes/
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

import numpy as np

from .config import set_log_level
from .snowflake import Snowflake, generate_path
from .snowflake_parameters import (
    ParameterError,
    SnowflakeParameters,
    load_parameters,
    randomize_parameters,
)

_LOGGER = logging.getLogger(__name__)

# CLI option dest -> parameter field
_PARAM_OPTIONS = {
    "arms": "arms",
    "depth": "depth",
    "base_len": "base_len",
    "ratio": "ratio",
    "angle": "angle_deg",
    "jitter": "jitter",
    "stroke": "stroke",
    "seed": "seed",
    "size": "size",
    "tip_fringe": "tip_fringe",
    "ring_dots": "ring_dots",
    "animate": "animate",
}


def _add_param_options(p: argparse.ArgumentParser) -> None:
    g = p.add_argument_group("snowflake parameters")
    g.add_argument("--params", help="JSON file with (part of) the parameter record.")
    g.add_argument("--arms", type=int, help="Rotational copies (default 6).")
    g.add_argument("--depth", type=int, help="Recursion depth (default 4).")
    g.add_argument("--base-len", type=float, help="Root branch length (default 180).")
    g.add_argument("--ratio", type=float, help="Child length factor (default 0.62).")
    g.add_argument("--angle", type=float, help="Splay angle in degrees (default 28).")
    g.add_argument("--jitter", type=float, help="Randomness, 0..0.5 (default 0.06).")
    g.add_argument("--stroke", type=float, help="Line thickness (default 2).")
    g.add_argument("--seed", help="Seed string (default crystal-001).")
    g.add_argument("--size", type=int, help="SVG view size (default 640).")
    g.add_argument(
        "--tip-fringe",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Ornament the arm tips.",
    )
    g.add_argument(
        "--ring-dots",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Draw the ring of dots around the center.",
    )
    g.add_argument(
        "--animate",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Make the exported SVG spin slowly.",
    )


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="snowflake-gen",
        description="Deterministic seeded snowflake generator with SVG output.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "--log-level",
        default=None,
        help="Package log level (DEBUG, INFO, WARNING, ...).",
    )

    sub = p.add_subparsers(dest="cmd", required=True)

    pr = sub.add_parser("render", help="Render a snowflake to an SVG file.")
    pr.add_argument(
        "output",
        nargs="?",
        default=".",
        help="SVG file or directory (default: ./snowflake-<seed>.svg).",
    )
    pr.add_argument("--vtu", help="Also write the segments as a VTU line mesh.")
    _add_param_options(pr)

    pp = sub.add_parser("path", help="Print the SVG path descriptor.")
    _add_param_options(pp)

    pg = sub.add_parser(
        "random", help="Roll a random seed and shape, print it as JSON."
    )
    pg.add_argument(
        "--rng-seed", type=int, default=None, help="Seed for repeatable rolls."
    )
    pg.add_argument("--output", help="Also render the SVG to this file/directory.")
    _add_param_options(pg)

    return p


def params_from_args(args: argparse.Namespace) -> SnowflakeParameters:
    """Merge defaults, the optional JSON file, and explicit options."""
    params = (
        load_parameters(args.params) if args.params else SnowflakeParameters()
    )
    changes = {}
    for dest, field in _PARAM_OPTIONS.items():
        value = getattr(args, dest, None)
        if value is not None:
            changes[field] = value
    if changes:
        params = params.replace(**changes)
    _LOGGER.debug("CLI parameters: %s", params)
    return params


def cmd_render(
    params: SnowflakeParameters, output: str, vtu: Optional[str] = None
) -> None:
    flake = Snowflake(params).generate()
    written = flake.export_svg(output)
    if written is not None:
        print(written)
    if vtu:
        flake.save(vtu)
        print(vtu)


def cmd_path(params: SnowflakeParameters) -> None:
    print(generate_path(params))


def cmd_random(
    params: SnowflakeParameters, rng_seed: Optional[int], output: Optional[str]
) -> None:
    rolled = randomize_parameters(params, np.random.default_rng(rng_seed))
    print(json.dumps(rolled.to_dict(), indent=2))
    if output:
        cmd_render(rolled, output)


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    if args.log_level:
        logging.basicConfig()
        set_log_level(args.log_level)

    try:
        params = params_from_args(args)
        if args.cmd == "render":
            cmd_render(params, args.output, args.vtu)
        elif args.cmd == "path":
            cmd_path(params)
        elif args.cmd == "random":
            cmd_random(params, args.rng_seed, args.output)
        else:
            raise AssertionError("unreachable")
    except ParameterError as e:
        print(f"Parameter error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"File error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
