import pytest
from lxml import etree

SVG_NS = {"svg": "http://www.w3.org/2000/svg"}


def _read_shapes(path, tag):
    tree = etree.parse(str(path))
    # The first <rect> is the background.
    shapes = tree.xpath("//svg:svg/svg:" + tag, namespaces=SVG_NS)
    if tag == "rect":
        shapes = shapes[1:]
    return shapes


def _coords(element, *names):
    return tuple( float(element.get(name)) for name in names )


@pytest.fixture
def svg_path(tmp_path):
    return tmp_path / "image.svg"


@pytest.fixture
def read_shapes():
    """Parse an emitted document and return the `tag` elements of the image."""
    return _read_shapes


@pytest.fixture
def coords():
    """Read numeric attributes of an element as a tuple of floats."""
    return _coords
