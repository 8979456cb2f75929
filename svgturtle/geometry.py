import math
import numbers

from . import config


class Vec2d:
    """
    A 2D displacement. Vectors are values: every operation returns a new
    vector and the coordinates are read-only.
    """
    __slots__ = ("_x", "_y")

    def __init__(self, x, y):
        """
        Construct a new 2D vector

        >>> v = Vec2d(3,4)
        >>> v
        [3, 4]
        >>> v.x, v.y
        (3, 4)
        """
        self._x = x
        self._y = y

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def __eq__(self, vec):
        """
        Approximate equality: each coordinate may differ by less than
        `config.VECTOR_TOLERANCE`.

        >>> Vec2d(3,4) == Vec2d(3,4)
        True
        >>> Vec2d(1,0) == Vec2d(1.0005, -0.0002)
        True
        >>> Vec2d(1,0) == Vec2d(1.002, 0)
        False
        >>> Vec2d(1,0) != Vec2d(0,1)
        True
        """
        if not isinstance(vec, Vec2d):
            return NotImplemented
        return (
            abs(self._x - vec._x) < config.VECTOR_TOLERANCE and
            abs(self._y - vec._y) < config.VECTOR_TOLERANCE
        )

    # Approximate equality is not transitive, vectors can't be dict keys.
    __hash__ = None

    def __repr__(self):
        """
        Return the string representation of a vector

        >>> Vec2d(5,1)
        [5, 1]
        """
        return "[" + str(self._x) + ", " + str(self._y) + "]"

    def __add__( self, vec ):
        """
        Addition of two vectors.

        >>> Vec2d(1,2) + Vec2d(3,4)
        [4, 6]
        """
        if not isinstance(vec, Vec2d):
            return NotImplemented
        return Vec2d( self._x + vec._x, self._y + vec._y )

    def __sub__(self, vec):
        """
        Difference of two vectors.

        >>> Vec2d(3,4) - Vec2d(1,3)
        [2, 1]
        """
        if not isinstance(vec, Vec2d):
            return NotImplemented
        return Vec2d( self._x - vec._x, self._y - vec._y )

    def __neg__(self):
        """
        Return the opposite vector.

        >>> -Vec2d(3,4)
        [-3, -4]
        """
        return Vec2d( -self._x, -self._y )

    def __mul__(self, alpha):
        """
        Return the multiplication of the vector 'self' with a scalar 'alpha'.

        >>> Vec2d(1,2) * 3
        [3, 6]
        >>> 3 * Vec2d(1,2)
        [3, 6]
        """
        if not isinstance(alpha, numbers.Real):
            return NotImplemented
        return Vec2d( self._x * alpha, self._y * alpha )

    __rmul__ = __mul__

    def __truediv__(self, alpha):
        """
        Return the division of the vector 'self' by a scalar 'alpha'.

        >>> Vec2d(3,6) / 3
        [1.0, 2.0]
        """
        if not isinstance(alpha, numbers.Real):
            return NotImplemented
        return Vec2d( self._x / alpha, self._y / alpha )

    def add(self, vec):
        return self + vec

    def subtract(self, vec):
        return self - vec

    def scale(self, alpha):
        return self * alpha

    def norm2(self):
        """
        Return the norm power two of the vector.

        >>> Vec2d(3,4).norm2()
        25
        """
        return self._x*self._x + self._y*self._y

    def norm(self):
        """
        Return the euclidean length of the vector.

        >>> Vec2d(3,4).norm()
        5.0
        """
        return math.sqrt( self.norm2() )

    def normalized(self):
        """
        Return the unit vector with the direction of `self`.

        The zero vector has no direction: normalizing it raises
        ZeroDivisionError.

        >>> v = Vec2d(3,4)
        >>> v.normalized()
        [0.6, 0.8]
        >>> v
        [3, 4]
        >>> Vec2d(0,0).normalized()  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
            ...
        ZeroDivisionError: division by zero
        """
        return self / self.norm()

    def scalar_product( self, vec ):
        """
        Return the scalar product of `self` with `vec`.

        >>> Vec2d(2,3).scalar_product( Vec2d(5,6) )
        28
        """
        return self._x * vec._x + self._y * vec._y

    def det( self, vec ):
        """
        Compute the determinant of the matrix where the first vector is
        `self` and the second vector is `vec`.

        >>> Vec2d(2,3).det( Vec2d(3,4) )
        -1
        """
        return self._x * vec._y - self._y * vec._x

    def angle( self, vec ):
        """
        Return the unsigned angle, in radians, between `self` and `vec`.

        The cosine is shrunk by `config.ANGLE_SAFETY_FACTOR` before acos so
        that rounding never leaves [-1, 1]; parallel vectors therefore give
        about 0.0141 instead of 0. A zero vector raises ZeroDivisionError.

        >>> round( Vec2d(1,0).angle( Vec2d(0,3) ), 4 )
        1.5708
        >>> Vec2d(2,1).angle( Vec2d(2,1) ) < 0.015
        True
        >>> abs( Vec2d(2,1).angle( Vec2d(-2,-1) ) - math.pi ) < 0.015
        True
        """
        cosine = self.scalar_product(vec) / ( self.norm() * vec.norm() )
        return math.acos( cosine * config.ANGLE_SAFETY_FACTOR )


class Point2d:
    """A 2D position. Points compare exactly and can be used as keys."""
    __slots__ = ("_x", "_y")

    def __init__(self, x, y):
        """
        Construct a point.

        >>> Point2d(1,2)
        (1, 2)
        """
        self._x = x
        self._y = y

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def __eq__(self, point):
        """
        >>> Point2d(1,2) == Point2d(1,2)
        True
        >>> Point2d(1,2) == Point2d(1,2.0001)
        False
        """
        if not isinstance(point, Point2d):
            return NotImplemented
        return self._x == point._x and self._y == point._y

    def __hash__(self):
        return hash( (self._x, self._y) )

    def __repr__(self):
        return "(" + str(self._x) + ", " + str(self._y) + ")"

    def __sub__(self, other):
        """
        A point minus a point is the displacement between them, a point
        minus a vector is a point.

        >>> Point2d(3,4) - Point2d(1,1)
        [2, 3]
        >>> Point2d(3,4) - Vec2d(1,1)
        (2, 3)
        """
        if isinstance(other, Point2d):
            return Vec2d( self._x - other._x, self._y - other._y )
        if isinstance(other, Vec2d):
            return Point2d( self._x - other.x, self._y - other.y )
        return NotImplemented

    def __add__(self, vec):
        """
        Translate the point by a vector.

        >>> Point2d(1,2) + Vec2d(3,4)
        (4, 6)
        """
        if not isinstance(vec, Vec2d):
            return NotImplemented
        return Point2d( self._x + vec.x, self._y + vec.y )

    def displacement(self, point):
        return self - point

    def translate(self, vec):
        return self + vec


class Segment:
    def __init__(self, point1, point2):
        """
        Construct a segment

        >>> s = Segment( Point2d(1, 2), Point2d(3, 4) )
        >>> s
        s((1, 2), (3, 4))
        """
        self._point1 = point1
        self._point2 = point2

    def __eq__(self, segment):
        """
        >>> p1, p2 = Point2d(1, 2), Point2d(3, 4)
        >>> Segment( p1, p2 ) == Segment( p1, p2 )
        True
        >>> Segment( p1, p2 ) == Segment( p2, p1 )
        False
        """
        if not isinstance(segment, Segment):
            return NotImplemented
        return self._point1 == segment._point1 and self._point2 == segment._point2

    def __hash__(self):
        return hash( (self._point1, self._point2) )

    def __repr__(self):
        return "s(%s, %s)"%(str(self._point1), str(self._point2))

    def origin(self):
        return self._point1

    def end(self):
        return self._point2

    def direction(self):
        """
        Returns the direction of the segment.

        >>> Segment( Point2d(1, 2), Point2d(3, 5) ).direction()
        [2, 3]
        """
        return self._point2 - self._point1

    def normalized_direction(self):
        """
        >>> Segment( Point2d(1, 2), Point2d(4, 6) ).normalized_direction()
        [0.6, 0.8]
        """
        return self.direction().normalized()

    def length(self):
        """
        >>> Segment( Point2d(0, 0), Point2d(3, 4) ).length()
        5.0
        """
        return self.direction().norm()

    def translate(self, vec):
        """
        Return the segment moved by `vec`.

        >>> Segment( Point2d(1, 2), Point2d(3, 4) ).translate( Vec2d(2,3) )
        s((3, 5), (5, 7))
        """
        return Segment( self._point1 + vec, self._point2 + vec )

    def is_parallel(self, segment):
        """
        True when both segments have the same or opposite directions.

        >>> s = Segment( Point2d(0, 0), Point2d(1, 0) )
        >>> s.is_parallel( Segment( Point2d(0, 1), Point2d(5, 1) ) )
        True
        >>> s.is_parallel( Segment( Point2d(0, 1), Point2d(-5, 1) ) )
        True
        >>> s.is_parallel( Segment( Point2d(0, 1), Point2d(5, 2) ) )
        False
        """
        d1 = self.normalized_direction()
        d2 = segment.normalized_direction()
        return d1 == d2 or d1 == -d2

    def _parameter(self, point):
        """
        Position of `point` along the segment, 0 at the origin and 1 at the
        end. Uses the Y span when the segment is vertical.
        """
        d = self.direction()
        if d.x != 0:
            return (point.x - self._point1.x) / d.x
        return (point.y - self._point1.y) / d.y

    def intersection(self, segment):
        """
        Compute the crossing point of `self` and `segment`.

        Returns `[point]` when they cross and `[]` otherwise. Parallel
        segments never cross, even when they overlap, and a crossing lying
        within `config.INTERSECTION_MARGIN` of an endpoint of either segment
        is ignored.

        >>> s1 = Segment( Point2d(0,0), Point2d(1,1) )
        >>> s2 = Segment( Point2d(1,0), Point2d(0,1) )
        >>> s1.intersection(s2)
        [(0.5, 0.5)]
        >>> s1 = Segment( Point2d(0,2), Point2d(4,4) )
        >>> s2 = Segment( Point2d(1,0), Point2d(3,6) )
        >>> s1.intersection(s2)
        [(2.0, 3.0)]
        >>> s1 = Segment( Point2d(0,1), Point2d(2,1) )
        >>> s2 = Segment( Point2d(1,0), Point2d(1,2) )
        >>> s1.intersection(s2)
        [(1.0, 1.0)]
        >>> s1.intersection( Segment( Point2d(0,3), Point2d(7,3) ) )
        []
        >>> s1 = Segment( Point2d(0,0), Point2d(2,0) )
        >>> s2 = Segment( Point2d(1,0), Point2d(1,2) )
        >>> s1.intersection(s2)
        []
        """
        if self.is_parallel(segment):
            return []

        x1, y1 = self._point1.x, self._point1.y
        x2, y2 = self._point2.x, self._point2.y
        x3, y3 = segment._point1.x, segment._point1.y
        x4, y4 = segment._point2.x, segment._point2.y

        a = x1*y2 - y1*x2
        b = x3*y4 - y3*x4
        denominator = (x1 - x2)*(y3 - y4) - (y1 - y2)*(x3 - x4)
        point = Point2d(
            (a*(x3 - x4) - (x1 - x2)*b) / denominator,
            (a*(y3 - y4) - (y1 - y2)*b) / denominator
        )

        low = config.INTERSECTION_MARGIN
        high = 1 - config.INTERSECTION_MARGIN
        for seg in (segment, self):
            l = seg._parameter(point)
            if l < low or l > high:
                return []
        return [point]


if __name__ == "__main__":
    import doctest
    doctest.testmod()
