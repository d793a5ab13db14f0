"""Render a small gallery of snowflakes from a few parameter sets.

Run:
  python examples/example_parameters.py [output_dir]
"""

import sys

import numpy as np

from snowflake_gen import Snowflake, SnowflakeParameters, randomize_parameters

PRESETS = {
    # Defaults: six arms, depth 4, seed "crystal-001"
    "reference": SnowflakeParameters(),
    "stellar": SnowflakeParameters(
        depth=5, ratio=0.55, angle_deg=60, jitter=0.02, seed="stellar-01"
    ),
    "fern": SnowflakeParameters(
        depth=4, ratio=0.7, angle_deg=22, jitter=0.12, seed="fern-02"
    ),
    "plate": SnowflakeParameters(
        depth=2, ratio=0.8, angle_deg=45, jitter=0.0, tip_fringe=False
    ),
    "eight": SnowflakeParameters(arms=8, depth=3, seed="octo"),
}


def main(out_dir: str = ".") -> None:
    for name, params in PRESETS.items():
        path = Snowflake(params).generate().export_svg(out_dir)
        print(f"{name:>10}: {path}")

    rng = np.random.default_rng(2024)
    for _ in range(3):
        params = randomize_parameters(SnowflakeParameters(), rng)
        path = Snowflake(params).generate().export_svg(out_dir)
        print(f"{'random':>10}: {path}")


if __name__ == "__main__":
    main(*sys.argv[1:2])
