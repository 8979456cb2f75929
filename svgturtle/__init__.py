"""
svgturtle

2D geometry primitives, an incremental SVG writer and a turtle that
draws with it:

- Vec2d, Point2d, Segment (geometry)
- SvgImage (svg)
- Turtle (turtle)
"""

from .errors import SvgTurtleError, OutputUnavailableError, ImageClosedError
from .geometry import Vec2d, Point2d, Segment
from .svg import SvgImage
from .turtle import Turtle

__all__ = [
    "Vec2d",
    "Point2d",
    "Segment",
    "SvgImage",
    "Turtle",
    "SvgTurtleError",
    "OutputUnavailableError",
    "ImageClosedError",
]
