import os
import xml.etree.ElementTree as ET
import pytest
from tempfile import TemporaryDirectory

from utils.svg_writer import SVGWriter

_SVG_NS = "http://www.w3.org/2000/svg"
_NS = {"svg": _SVG_NS}
_STYLE = {"size": 640, "stroke": 2, "center_r": 1.8}


@pytest.fixture
def sample_data():
    path_d = "M 0.00 0.00 L 100.00 0.00 M 0.00 0.00 L -100.00 0.00"
    dots = [(32.4, 0.0, 0.9), (-32.4, 0.0, 0.9)]
    return path_d, dots


def test_file_creation_and_parsability(sample_data):
    path_d, dots = sample_data
    with TemporaryDirectory() as tmpdir:
        filename = os.path.join(tmpdir, "test.svg")
        written = SVGWriter.write_svg(path_d, dots, filename, **_STYLE)

        assert written == filename
        assert os.path.isfile(filename)

        try:
            tree = ET.parse(filename)
            root = tree.getroot()
        except ET.ParseError:
            pytest.fail("Output SVG file is not valid XML")

        assert root.tag == f"{{{_SVG_NS}}}svg"
        assert root.attrib["width"] == "640"
        assert root.attrib["height"] == "640"
        assert root.attrib["viewBox"] == "-320 -320 640 640"


def test_namespace_declared_in_text(sample_data):
    path_d, dots = sample_data
    text = SVGWriter.to_string(path_d, dots, **_STYLE)
    assert text.startswith('<?xml version="1.0" encoding="UTF-8"?>\n<svg ')
    assert 'xmlns="http://www.w3.org/2000/svg"' in text


def test_path_and_dots(sample_data):
    path_d, dots = sample_data
    root = SVGWriter.build_document(path_d, dots, **_STYLE)
    ET.fromstring(ET.tostring(root))  # serializable

    paths = root.findall(".//path")
    assert len(paths) == 1
    path = paths[0]
    assert path.attrib["d"] == path_d
    assert path.attrib["fill"] == "none"
    assert path.attrib["stroke"] == "#e2f3ff"
    assert path.attrib["stroke-width"] == "2"
    assert path.attrib["stroke-linecap"] == "round"
    assert path.attrib["filter"] == "url(#glow)"

    circles = root.findall(".//circle")
    assert len(circles) == 3
    center = circles[0]
    assert (center.attrib["cx"], center.attrib["cy"], center.attrib["r"]) == (
        "0",
        "0",
        "1.8",
    )
    assert circles[1].attrib == {
        "cx": "32.4",
        "cy": "0",
        "r": "0.9",
        "fill": "#e2f3ff",
    }
    assert circles[2].attrib["cx"] == "-32.4"


def test_center_dot_radius_is_taken_as_given():
    root = SVGWriter.build_document("", [], size=100, stroke=0.5, center_r=1.0)
    assert root.find(".//circle").attrib["r"] == "1"


def test_glow_filter():
    root = SVGWriter.build_document("", [], size=100, stroke=1, center_r=1)
    blur = root.find("./defs/filter/feGaussianBlur")
    assert blur is not None
    assert blur.attrib["stdDeviation"] == "1.5"
    merge_nodes = root.findall("./defs/filter/feMerge/feMergeNode")
    assert [n.attrib["in"] for n in merge_nodes] == ["blur", "SourceGraphic"]


def test_animation_flag(sample_data):
    path_d, dots = sample_data
    still = SVGWriter.build_document(path_d, dots, **_STYLE)
    assert still.find(".//animateTransform") is None

    spinning = SVGWriter.build_document(path_d, dots, **_STYLE, animate=True)
    anim = spinning.find("./g/animateTransform")
    assert anim is not None
    assert anim.attrib["type"] == "rotate"
    assert anim.attrib["dur"] == "18s"
    assert anim.attrib["repeatCount"] == "indefinite"


def test_write_creates_parent_directories(sample_data):
    path_d, dots = sample_data
    with TemporaryDirectory() as tmpdir:
        filename = os.path.join(tmpdir, "a", "b", "flake.svg")
        SVGWriter.write_svg(path_d, dots, filename, size=200, stroke=1, center_r=1)
        assert os.path.isfile(filename)
