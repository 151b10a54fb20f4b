import math
from collections import namedtuple


class Point(namedtuple('Point', ('x', 'y'))):
    __slots__ = ()

    def distance_squared_to(self, other):
        dx = self.x - other.x
        dy = self.y - other.y
        return dx*dx + dy*dy


    def __str__(self):
        return F'({self.x}, {self.y})'


class Rect(namedtuple('Rect', ('xmin', 'ymin', 'xmax', 'ymax'))):
    '''
    Axis-aligned rectangle. All tests are inclusive of the boundary.
    '''
    __slots__ = ()

    def __new__(cls, xmin, ymin, xmax, ymax):
        if any(map(math.isnan, (xmin, ymin, xmax, ymax))):
            raise ValueError(F'Rect coordinates must not be NaN: {xmin}, {ymin}, {xmax}, {ymax}')
        if xmin > xmax:
            raise ValueError(F'xmin > xmax: {xmin} > {xmax}')
        if ymin > ymax:
            raise ValueError(F'ymin > ymax: {ymin} > {ymax}')

        return super().__new__(cls, xmin, ymin, xmax, ymax)


    @property
    def width(self):
        return self.xmax - self.xmin


    @property
    def height(self):
        return self.ymax - self.ymin


    def contains(self, p):
        return self.xmin <= p.x <= self.xmax and self.ymin <= p.y <= self.ymax


    def intersects(self, other):
        return self.xmax >= other.xmin and self.ymax >= other.ymin \
                and other.xmax >= self.xmin and other.ymax >= self.ymin


    def distance_squared_to(self, p):
        '''
        Squared distance from `p` to the closest point of the rectangle, 0 if
        `p` lies inside or on the boundary.
        '''
        dx = 0.0
        dy = 0.0
        if p.x < self.xmin:
            dx = p.x - self.xmin
        elif p.x > self.xmax:
            dx = p.x - self.xmax
        if p.y < self.ymin:
            dy = p.y - self.ymin
        elif p.y > self.ymax:
            dy = p.y - self.ymax

        return dx*dx + dy*dy


    def __str__(self):
        return F'[{self.xmin}, {self.xmax}] x [{self.ymin}, {self.ymax}]'


def distance_squared(p, q):
    return p.distance_squared_to(q)


UNIT_SQUARE = Rect(0.0, 0.0, 1.0, 1.0)


def as_point(p, caller):
    '''
    Accept a `Point` or any (x, y) pair of finite numbers. Anything else,
    None included, is rejected with ValueError naming the calling operation.
    '''
    if p is None:
        raise ValueError(F'{caller}() called with a None point')

    try:
        if not isinstance(p, Point):
            p = Point(*p)
        finite = math.isfinite(p.x) and math.isfinite(p.y)
    except TypeError as err:
        raise ValueError(F'{caller}() needs an (x, y) pair of numbers, got {p!r}') from err

    if not finite:
        raise ValueError(F'{caller}() called with a non-finite point: {p}')
    return p
