import logging
from xml.sax.saxutils import escape

from . import config
from .errors import ImageClosedError, OutputUnavailableError
from .geometry import Point2d

log = logging.getLogger(__name__)


HEADER = (
    "<html>\n<body>\n\n"
    "<svg xmlns=\"http://www.w3.org/2000/svg\" xmlns:xlink=\"http://www.w3.org/1999/xlink\" "
    "viewBox=\"0 0 %s %s\">\n"
    "<rect width=\"100%%\" height=\"100%%\" fill=\"%s\"/>\n"
)
FOOTER = "</svg>\n\n</body>\n</html>"


def _num(value):
    """
    Write a number the short way, with six significant digits.

    >>> _num(1920.0), _num(0.5), _num(-3)
    ('1920', '0.5', '-3')
    """
    return "%g"%(value)


def _attr(value):
    """
    Escape a value written inside a double-quoted attribute.

    >>> _attr('red'), _attr('a"<b')
    ('red', 'a&quot;&lt;b')
    """
    return escape( str(value), {"\"": "&quot;"} )


class SvgImage:
    """
    An SVG document written to a file one shape at a time.

    The header is written when the image is constructed and the footer when
    it is closed. Closing happens once: explicitly with `close()`, at the end
    of a `with` block, or when the image is garbage collected.

    Every shape method takes an `upscale` flag. When it is set, positions are
    given in [-1, 1] on both axes and sizes in [0, 2]; they are mapped onto
    the canvas with `extent/2 + value * extent/2`.

    >>> import os, tempfile
    >>> path = os.path.join(tempfile.mkdtemp(), 'doc.svg')
    >>> with SvgImage(path, height=100, width=200) as image:
    ...     image.add_line( Point2d(-1,-1), Point2d(1,1), upscale=True )
    >>> print(open(path).read())
    <html>
    <body>
    <BLANKLINE>
    <svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="0 0 200 100">
    <rect width="100%" height="100%" fill="white"/>
       <line x1="0" y1="0" x2="200" y2="100" stroke="black" />
    </svg>
    <BLANKLINE>
    </body>
    </html>
    """

    def __init__(self, file_name=config.FILE_NAME, height=config.IMAGE_HEIGHT,
                 width=config.IMAGE_WIDTH, background=config.BACKGROUND_COLOR):
        self._file = None
        self._file_name = file_name
        self._height = height
        self._width = width
        self._shapes = 0
        try:
            self._file = open(file_name, "w", encoding="utf-8")
        except OSError as e:
            raise OutputUnavailableError(
                "Cannot open the output image %s"%(file_name)
            ) from e
        self._file.write( HEADER%(_num(width), _num(height), _attr(background)) )
        log.debug("Opened %s (%sx%s)", file_name, _num(width), _num(height))

    @property
    def height(self):
        return self._height

    @property
    def width(self):
        return self._width

    @property
    def file_name(self):
        return self._file_name

    @property
    def closed(self):
        return self._file is None

    def __repr__(self):
        return "svg(\"%s\", %sx%s%s)"%(
            self._file_name, _num(self._width), _num(self._height),
            ", closed" if self.closed else ""
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False

    def __copy__(self):
        raise TypeError("An image owns its file and can't be copied")

    def __deepcopy__(self, memo):
        raise TypeError("An image owns its file and can't be copied")

    def __del__(self):
        # The constructor may have failed before _file was set.
        if getattr(self, "_file", None) is not None:
            self.close()

    def close(self):
        """
        Write the footer and release the file. Closing a closed image does
        nothing.
        """
        if self._file is None:
            return
        f = self._file
        self._file = None
        try:
            f.write(FOOTER)
        finally:
            f.close()
        log.debug("Closed %s after %d shapes", self._file_name, self._shapes)

    def _write(self, element):
        if self._file is None:
            raise ImageClosedError(
                "Image %s is closed, no shape can be added"%(self._file_name)
            )
        self._file.write("   " + element + "\n")
        self._shapes += 1

    def _upscale(self, point):
        return Point2d(
            self._width / 2 + point.x * self._width / 2,
            self._height / 2 + point.y * self._height / 2
        )

    def add_line(self, a, b, color=config.DEFAULT_COLOR, upscale=False):
        """
        Add a line from `a` to `b`.

        `upscale` means the points are in [-1, 1] and are mapped on the
        canvas.
        """
        if upscale:
            a = self._upscale(a)
            b = self._upscale(b)
        self._write(
            "<line x1=\"%s\" y1=\"%s\" x2=\"%s\" y2=\"%s\" stroke=\"%s\" />"%(
                _num(a.x), _num(a.y), _num(b.x), _num(b.y), _attr(color)
            )
        )

    def add_circle(self, center, radius, fill, color=config.DEFAULT_COLOR, upscale=False):
        """
        Add a circle, filled with `color` when `fill` is set.

        Only the center is upscaled: the radius is always written as given,
        in canvas units.
        """
        if upscale:
            center = self._upscale(center)
        self._write(
            "<circle cx=\"%s\" cy=\"%s\" r=\"%s\" stroke=\"%s\" fill=\"%s\" />"%(
                _num(center.x), _num(center.y), _num(radius), _attr(color),
                _attr(color) if fill else "none"
            )
        )

    def add_rect(self, center, width, height, color=config.DEFAULT_COLOR, upscale=False):
        """
        Add a filled rectangle centered on `center`.

        With `upscale`, the center is in [-1, 1] and the width and height in
        [0, 2]; all of them are mapped on the canvas.
        """
        if upscale:
            width = width * self._width / 2
            height = height * self._height / 2
            center = self._upscale(center)
        x = center.x - width / 2
        y = center.y - height / 2
        self._write(
            "<rect x=\"%s\" y=\"%s\" width=\"%s\" height=\"%s\" fill=\"%s\" />"%(
                _num(x), _num(y), _num(width), _num(height), _attr(color)
            )
        )


if __name__ == "__main__":
    import doctest
    doctest.testmod()
