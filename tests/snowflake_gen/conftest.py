from __future__ import annotations
import pytest

from snowflake_gen.snowflake_parameters import SnowflakeParameters


@pytest.fixture
def reference_params() -> SnowflakeParameters:
    """The reference configuration (all defaults, seed crystal-001)."""
    return SnowflakeParameters()


@pytest.fixture
def round_trip_params() -> SnowflakeParameters:
    """
    Six straight arms of length 100, no randomness:
        depth=0, jitter=0, tip_fringe=False
    """
    return SnowflakeParameters(
        arms=6,
        depth=0,
        base_len=100.0,
        ratio=0.62,
        angle_deg=28.0,
        jitter=0.0,
        stroke=2.0,
        tip_fringe=False,
        seed="test",
    )


@pytest.fixture
def cfg():
    import snowflake_gen as sg

    with sg.use(max_depth=8, decimals=2) as c:
        yield c
