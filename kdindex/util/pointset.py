import numpy as np

from kdindex.util.geometry import Rect, as_point


class PointSet:
    '''
    Brute-force counterpart of `KdTree`: every query is a linear scan over
    all points. Used to cross-check the tree.
    '''

    def __init__(self):
        self._points = []
        self._lookup = set()
        self._array = None


    @classmethod
    def from_points(cls, points):
        ps = cls()
        for p in points:
            ps.insert(p)
        return ps


    def is_empty(self):
        return len(self._points) == 0


    def size(self):
        return len(self._points)


    def __len__(self):
        return len(self._points)


    def __contains__(self, p):
        return self.contains(p)


    def __iter__(self):
        return iter(self._points)


    def insert(self, p):
        p = as_point(p, 'insert')
        if not (0.0 <= p.x <= 1.0 and 0.0 <= p.y <= 1.0):
            raise ValueError(F'insert() called with a point outside the unit square: {p}')

        if p in self._lookup:
            return

        self._points.append(p)
        self._lookup.add(p)
        self._array = None


    def contains(self, p):
        p = as_point(p, 'contains')
        return p in self._lookup


    def as_array(self):
        if self._array is None:
            self._array = np.array(self._points, dtype=float).reshape(-1, 2)
        return self._array


    def range(self, rect):
        if rect is None:
            raise ValueError('range() called with a None rectangle')
        if not isinstance(rect, Rect):
            rect = Rect(*rect)

        pts = self.as_array()
        mask = (pts[:,0] >= rect.xmin) & (pts[:,0] <= rect.xmax) \
                & (pts[:,1] >= rect.ymin) & (pts[:,1] <= rect.ymax)

        return [ self._points[i] for i in np.flatnonzero(mask) ]


    def nearest(self, p):
        '''
        Nearest point to `p`; of several at the same distance, the one
        inserted first.
        '''
        p = as_point(p, 'nearest')
        if self.is_empty():
            return None

        return self._points[int(np.argmin(self.distances_squared(p)))]


    def distances_squared(self, p):
        pts = self.as_array()
        dx = pts[:,0] - p.x
        dy = pts[:,1] - p.y
        return dx*dx + dy*dy
