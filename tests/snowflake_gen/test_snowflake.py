"""Unit tests for the Snowflake pipeline facade."""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

import meshio
import numpy as np
import pytest

from snowflake_gen.snowflake import Snowflake, generate_path, svg_filename
from snowflake_gen.snowflake_parameters import SnowflakeParameters

_SVG_NS = "http://www.w3.org/2000/svg"
_NS = {"svg": _SVG_NS}


def test_generate_populates_outputs(reference_params, cfg):
    flake = Snowflake(reference_params).generate()
    assert len(flake.arm_segments) == 432
    assert len(flake.segments) == 432 * 6
    assert flake.path.startswith("M 0.00 0.00 L 179.99 2.27 M 68.27 0.86")
    assert len(flake.dots) == 12
    assert flake.generated


def test_generate_path_matches_facade(reference_params, cfg):
    flake = Snowflake(reference_params).generate()
    assert generate_path(reference_params) == flake.path


def test_repeated_generation_is_identical(cfg):
    params = SnowflakeParameters(seed="winter-9x9x", depth=3)
    a = Snowflake(params).generate().path
    b = Snowflake(params).generate().path
    assert a == b


def test_depth_is_clamped_by_config(caplog):
    import snowflake_gen as sg

    params = SnowflakeParameters(depth=12, jitter=0.0, tip_fringe=False, arms=1)
    with sg.use(max_depth=2):
        with caplog.at_level(logging.WARNING, logger="snowflake_gen"):
            flake = Snowflake(params).generate()
    assert len(flake.arm_segments) == 21
    assert "clamping" in caplog.text
    # The caller's record is untouched.
    assert flake.params.depth == 12


def test_decimals_follow_config():
    import snowflake_gen as sg

    params = SnowflakeParameters(
        depth=0, jitter=0.0, tip_fringe=False, arms=2, base_len=1.0
    )
    with sg.use(decimals=3):
        flake = Snowflake(params).generate()
    assert flake.path == "M 0.000 0.000 L 1.000 0.000 M 0.000 0.000 L -1.000 0.000"


def test_svg_filename():
    assert svg_filename("crystal-001") == "snowflake-crystal-001.svg"
    assert svg_filename("a/b\\c") == "snowflake-a_b_c.svg"
    assert Snowflake(SnowflakeParameters(seed="ice")).filename == "snowflake-ice.svg"


def test_to_svg_document(cfg):
    params = SnowflakeParameters(depth=2, stroke=2.0, size=400)
    flake = Snowflake(params).generate()
    root = ET.fromstring(flake.to_svg().split("\n", 1)[1])
    assert root.tag == f"{{{_SVG_NS}}}svg"
    assert root.attrib["viewBox"] == "-200 -200 400 400"
    path = root.find(".//svg:path", _NS)
    assert path is not None
    assert path.attrib["d"] == flake.path
    circles = root.findall(".//svg:circle", _NS)
    assert len(circles) == 1 + 12
    assert circles[0].attrib["r"] == "1.8"


def test_export_svg_to_directory(tmp_path, cfg):
    flake = Snowflake(SnowflakeParameters(seed="pine-0042", depth=2)).generate()
    written = flake.export_svg(str(tmp_path))
    assert written == str(tmp_path / "snowflake-pine-0042.svg")
    text = (tmp_path / "snowflake-pine-0042.svg").read_text(encoding="utf-8")
    assert 'xmlns="http://www.w3.org/2000/svg"' in text


def test_export_svg_to_file(tmp_path, cfg):
    flake = Snowflake(SnowflakeParameters(depth=1)).generate()
    out = tmp_path / "nested" / "flake.svg"
    assert flake.export_svg(str(out)) == str(out)
    assert out.exists()


def test_export_without_generation_is_noop(tmp_path, caplog):
    flake = Snowflake(SnowflakeParameters())
    with caplog.at_level(logging.WARNING, logger="snowflake_gen"):
        assert flake.export_svg(str(tmp_path)) is None
    assert list(tmp_path.iterdir()) == []
    assert "skipping export" in caplog.text


def test_save_vtu_line_mesh(tmp_path, cfg):
    params = SnowflakeParameters(depth=1, arms=3, tip_fringe=False)
    flake = Snowflake(params).generate()
    out = tmp_path / "flake.vtu"
    flake.save(str(out))

    mesh = meshio.read(str(out))
    n = len(flake.segments)
    assert mesh.points.shape == (2 * n, 3)
    np.testing.assert_allclose(mesh.points[:, 2], 0.0)
    lines = mesh.cells_dict["line"]
    assert lines.shape == (n, 2)
    np.testing.assert_allclose(
        mesh.points[lines[0]][:, :2], np.array(flake.segments[0]).reshape(2, 2)
    )


def test_save_requires_segments(tmp_path):
    with pytest.raises(ValueError):
        Snowflake(SnowflakeParameters()).save(str(tmp_path / "empty.vtu"))


@pytest.mark.parametrize("suffix", ["/", ""])
def test_export_svg_creates_missing_directory(tmp_path, cfg, suffix):
    flake = Snowflake(SnowflakeParameters(seed="drift-7", depth=1)).generate()
    target = str(tmp_path / "new" / "flakes") + suffix
    written = flake.export_svg(target)
    expected = tmp_path / "new" / "flakes" / "snowflake-drift-7.svg"
    assert written == str(expected)
    assert expected.is_file()


def test_export_svg_reuses_missing_directory_per_seed(tmp_path, cfg):
    out = str(tmp_path / "gallery")
    for seed in ("a-1", "b-2"):
        Snowflake(SnowflakeParameters(seed=seed, depth=1)).generate().export_svg(out)
    names = sorted(p.name for p in (tmp_path / "gallery").iterdir())
    assert names == ["snowflake-a-1.svg", "snowflake-b-2.svg"]


def test_center_dot_uses_center_dot_radius(cfg):
    flake = Snowflake(SnowflakeParameters(depth=0, stroke=0.5)).generate()
    root = ET.fromstring(flake.to_svg().split("\n", 1)[1])
    assert root.find(".//svg:circle", _NS).attrib["r"] == "1"
