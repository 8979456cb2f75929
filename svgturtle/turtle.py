import math

from . import config
from .geometry import Point2d, Vec2d
from .svg import SvgImage


class Turtle:
    def __init__(self, file_name=config.FILE_NAME, height=config.IMAGE_HEIGHT,
                 width=config.IMAGE_WIDTH, color=config.DEFAULT_COLOR):
        """
        Construct a turtle drawing in a new image. It starts at the center
        of the canvas, heading right (0 degree), with the pen down.

        >>> import os, tempfile
        >>> t = Turtle( os.path.join(tempfile.mkdtemp(), 't.svg'), 100, 200 )
        >>> t
        turtle(pos=(100.0, 50.0), heading=0.0)
        >>> t.close()
        """
        self._image = SvgImage(file_name, height, width)
        self._position = Point2d( width / 2, height / 2 )
        self._heading = 0.0
        self._drawing = True
        self.color = color

    def __repr__(self):
        return "turtle(pos=%s, heading=%s)"%(
            str(self._position), str(self._heading)
        )

    def __copy__(self):
        raise TypeError("A turtle owns its image and can't be copied")

    def __deepcopy__(self, memo):
        raise TypeError("A turtle owns its image and can't be copied")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False

    def close(self):
        self._image.close()

    @property
    def image(self):
        return self._image

    @property
    def position(self):
        return self._position

    @property
    def heading(self):
        """Heading in degrees, counter-clockwise, never wrapped."""
        return self._heading

    @property
    def is_down(self):
        return self._drawing

    def forward(self, dist):
        """
        Move the turtle `dist` units along its heading, drawing a line if
        the pen is down. Y grows downwards on the canvas, so a heading of
        90 degrees moves up.

        >>> import os, tempfile
        >>> with Turtle( os.path.join(tempfile.mkdtemp(), 't.svg'), 100, 200 ) as t:
        ...     t.forward( 10 )
        ...     t.left( 90 )
        ...     p = t.forward( 20 )
        (110.0, 50.0)
        >>> round(p.x, 6), round(p.y, 6)
        (110.0, 30.0)
        """
        angle = math.radians(self._heading)
        new_position = self._position + Vec2d( math.cos(angle), -math.sin(angle) ) * dist
        if self._drawing:
            self._image.add_line( self._position, new_position, self.color )
        self._position = new_position
        return self._position

    def back(self, dist):
        return self.forward(-dist)

    def left(self, angle, radians=False):
        """
        Turn the turtle to the left.

        >>> import os, math, tempfile
        >>> t = Turtle( os.path.join(tempfile.mkdtemp(), 't.svg') )
        >>> t.left( 270 )
        >>> t.left( 180 )
        >>> t.heading
        450.0
        >>> t.left( math.pi, radians=True )
        >>> t.heading
        630.0
        >>> t.close()
        """
        if radians:
            angle = math.degrees(angle)
        self._heading += angle

    def right(self, angle, radians=False):
        self.left(-angle, radians)

    def pen_up(self):
        self._drawing = False

    def pen_down(self):
        self._drawing = True


if __name__ == "__main__":
    import doctest
    doctest.testmod()
