import copy
import logging

import pytest
from lxml import etree

from svgturtle import config
from svgturtle.errors import ImageClosedError, OutputUnavailableError, SvgTurtleError
from svgturtle.geometry import Point2d
from svgturtle.svg import FOOTER, SvgImage

SVG_NS = {"svg": "http://www.w3.org/2000/svg"}


def test_document_structure(svg_path):
    with SvgImage(svg_path, height=300, width=400, background="navy"):
        pass
    text = svg_path.read_text()
    assert text.startswith("<html>\n<body>\n")
    assert text.endswith(FOOTER)

    tree = etree.parse(str(svg_path))
    assert tree.getroot().tag == "html"
    svg = tree.xpath("//svg:svg", namespaces=SVG_NS)[0]
    assert svg.get("viewBox") == "0 0 400 300"
    background = svg.xpath("svg:rect", namespaces=SVG_NS)[0]
    assert background.get("fill") == "navy"
    assert background.get("width") == "100%"


def test_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    image = SvgImage()
    assert image.file_name == config.FILE_NAME
    assert (image.height, image.width) == (1080, 1920)
    image.close()
    svg = etree.parse(config.FILE_NAME).xpath("//svg:svg", namespaces=SVG_NS)[0]
    assert svg.get("viewBox") == "0 0 1920 1080"
    assert svg.xpath("svg:rect", namespaces=SVG_NS)[0].get("fill") == "white"


def test_shapes_are_written_in_order(svg_path):
    with SvgImage(svg_path) as image:
        image.add_line( Point2d(0, 0), Point2d(10, 10) )
        image.add_circle( Point2d(5, 5), 3, True, "red" )
        image.add_line( Point2d(1, 2), Point2d(3, 4), "blue" )
    svg = etree.parse(str(svg_path)).xpath("//svg:svg", namespaces=SVG_NS)[0]
    tags = [ etree.QName(e).localname for e in svg ]
    assert tags == ["rect", "line", "circle", "line"]


def test_line_in_pixels(svg_path, read_shapes, coords):
    with SvgImage(svg_path) as image:
        image.add_line( Point2d(1.5, 2), Point2d(30, 40.25), "red" )
    [line] = read_shapes(svg_path, "line")
    assert coords(line, "x1", "y1", "x2", "y2") == (1.5, 2, 30, 40.25)
    assert line.get("stroke") == "red"


@pytest.mark.parametrize("width, height", [(1920, 1080), (640, 480), (101, 33)])
def test_upscaled_line_spans_the_canvas(svg_path, read_shapes, coords, width, height):
    with SvgImage(svg_path, height=height, width=width) as image:
        image.add_line( Point2d(-1, -1), Point2d(1, 1), upscale=True )
        image.add_line( Point2d(0, 0), Point2d(0.5, -0.5), upscale=True )
    first, second = read_shapes(svg_path, "line")
    assert coords(first, "x1", "y1", "x2", "y2") == (0, 0, width, height)
    x1, y1, x2, y2 = coords(second, "x1", "y1", "x2", "y2")
    assert (x1, y1) == pytest.approx((width / 2, height / 2), abs=1e-3)
    assert (x2, y2) == pytest.approx((width * 0.75, height * 0.25), abs=1e-2)


def test_circle_fill(svg_path, read_shapes, coords):
    with SvgImage(svg_path) as image:
        image.add_circle( Point2d(10, 20), 5, True, "green" )
        image.add_circle( Point2d(10, 20), 5, False, "green" )
    filled, hollow = read_shapes(svg_path, "circle")
    assert coords(filled, "cx", "cy", "r") == (10, 20, 5)
    assert filled.get("stroke") == "green"
    assert filled.get("fill") == "green"
    assert hollow.get("fill") == "none"


def test_upscaled_circle_keeps_its_radius(svg_path, read_shapes, coords):
    # Only the center is mapped on the canvas, unlike rectangle sizes.
    with SvgImage(svg_path, height=100, width=200) as image:
        image.add_circle( Point2d(0.5, 0.5), 0.25, True, upscale=True )
    [circle] = read_shapes(svg_path, "circle")
    assert coords(circle, "cx", "cy", "r") == (150, 75, 0.25)


def test_rect_is_anchored_by_its_center(svg_path, read_shapes, coords):
    with SvgImage(svg_path) as image:
        image.add_rect( Point2d(50, 40), 20, 10, "pink" )
    [rect] = read_shapes(svg_path, "rect")
    assert coords(rect, "x", "y", "width", "height") == (40, 35, 20, 10)
    assert rect.get("fill") == "pink"


def test_upscaled_rect_scales_size_and_position(svg_path, read_shapes, coords):
    with SvgImage(svg_path, height=100, width=200) as image:
        image.add_rect( Point2d(0, 0), 1, 1, upscale=True )
        image.add_rect( Point2d(0, 0), 2, 2, upscale=True )
    half, full = read_shapes(svg_path, "rect")
    assert coords(half, "x", "y", "width", "height") == (50, 25, 100, 50)
    assert coords(full, "x", "y", "width", "height") == (0, 0, 200, 100)


def test_footer_written_once(svg_path):
    image = SvgImage(svg_path)
    for i in range(50):
        image.add_line( Point2d(i, 0), Point2d(i, 10) )
    image.close()
    image.close()
    with image:
        pass
    text = svg_path.read_text()
    assert text.count("</svg>") == 1
    assert text.count("<line") == 50
    assert image.closed


def test_no_shape_after_close(svg_path):
    image = SvgImage(svg_path)
    image.close()
    with pytest.raises(ImageClosedError):
        image.add_line( Point2d(0, 0), Point2d(1, 1) )
    with pytest.raises(SvgTurtleError):
        image.add_rect( Point2d(0, 0), 1, 1 )
    assert "<rect x" not in svg_path.read_text()


def test_footer_written_when_the_block_fails(svg_path, read_shapes):
    with pytest.raises(RuntimeError):
        with SvgImage(svg_path) as image:
            image.add_line( Point2d(0, 0), Point2d(1, 1) )
            raise RuntimeError("drawing aborted")
    assert svg_path.read_text().endswith(FOOTER)
    # still well-formed
    assert len(read_shapes(svg_path, "line")) == 1


def test_unreferenced_image_is_finalized(svg_path):
    image = SvgImage(svg_path)
    image.add_line( Point2d(0, 0), Point2d(1, 1) )
    del image
    assert svg_path.read_text().endswith(FOOTER)


def test_unavailable_output(tmp_path, caplog):
    with caplog.at_level(logging.DEBUG, logger="svgturtle"):
        with pytest.raises(OutputUnavailableError) as info:
            SvgImage(tmp_path / "missing" / "image.svg")
    assert isinstance(info.value.__cause__, OSError)
    # the exception is the only report of the failure
    assert [ r for r in caplog.records if r.levelno >= logging.WARNING ] == []


@pytest.mark.parametrize("copier", [copy.copy, copy.deepcopy])
def test_image_cannot_be_copied(svg_path, copier):
    with SvgImage(svg_path) as image:
        with pytest.raises(TypeError):
            copier(image)
        image.add_line( Point2d(0, 0), Point2d(1, 1) )
    text = svg_path.read_text()
    assert text.count("</svg>") == 1
    assert text.endswith(FOOTER)


def test_colors_are_escaped(svg_path, read_shapes):
    color = "a\"b<c&d"
    with SvgImage(svg_path, background=color) as image:
        image.add_line( Point2d(0, 0), Point2d(1, 1), color )
        image.add_circle( Point2d(0, 0), 1, True, color )
        image.add_rect( Point2d(0, 0), 1, 1, color )
    tree = etree.parse(str(svg_path))
    background = tree.xpath("//svg:svg/svg:rect", namespaces=SVG_NS)[0]
    assert background.get("fill") == color
    [line] = read_shapes(svg_path, "line")
    [circle] = read_shapes(svg_path, "circle")
    [rect] = read_shapes(svg_path, "rect")
    assert line.get("stroke") == color
    assert (circle.get("stroke"), circle.get("fill")) == (color, color)
    assert rect.get("fill") == color
