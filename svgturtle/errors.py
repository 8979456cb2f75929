"""Typed errors of the svgturtle package."""


class SvgTurtleError(Exception):
    """Base error of the project."""


class OutputUnavailableError(SvgTurtleError):
    """The output document could not be opened for writing."""


class ImageClosedError(SvgTurtleError):
    """A shape was added to an image that is already finalized."""
