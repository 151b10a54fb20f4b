import logging
from collections import namedtuple

from kdindex.util.geometry import Rect, UNIT_SQUARE, as_point


# even levels split on x, odd levels on y
X_AXIS = 0
Y_AXIS = 1

NodeView = namedtuple('NodeView', ('point', 'rect', 'axis'))


class Node:
    def __init__(self, point, rect):
        self.point = point
        self.rect = rect

        self.lb = None      # left/bottom subtree
        self.rt = None      # right/top subtree


    def child_rect(self, axis, lower):
        '''
        The part of this node's rectangle on one side of its splitting line.
        '''
        r = self.rect
        if axis == X_AXIS:
            if lower:
                return Rect(r.xmin, r.ymin, self.point.x, r.ymax)
            return Rect(self.point.x, r.ymin, r.xmax, r.ymax)

        if lower:
            return Rect(r.xmin, r.ymin, r.xmax, self.point.y)
        return Rect(r.xmin, self.point.y, r.xmax, r.ymax)


class KdTree:
    '''
    Set of points in the unit square, stored as a 2d-tree.

    The shape of the tree depends only on the insertion order; there is no
    rebalancing. All operations recurse once per level, so a degenerate tree
    (e.g. points inserted in sorted order) costs O(n) per operation and can
    exceed the interpreter's recursion limit.
    '''

    def __init__(self):
        self.root = None
        self._size = 0


    @classmethod
    def from_points(cls, points):
        tree = cls()
        for p in points:
            tree.insert(p)
        return tree


    def is_empty(self):
        return self._size == 0


    def size(self):
        return self._size


    def __len__(self):
        return self._size


    def __contains__(self, p):
        return self.contains(p)


    def __iter__(self):
        return iter(self.points())


    def insert(self, p):
        '''
        Add `p` to the set. Inserting a point that is already present is a
        no-op.
        '''
        p = as_point(p, 'insert')
        if not (0.0 <= p.x <= 1.0 and 0.0 <= p.y <= 1.0):
            raise ValueError(F'insert() called with a point outside the unit square: {p}')

        if self.root is None:
            self.root = Node(p, UNIT_SQUARE)
            self._size = 1
            return

        try:
            added = _insert(self.root, p, X_AXIS)
        except RecursionError:
            logging.error('Recursion error inserting %s, tree height exceeds the recursion limit (%d points).',
                    p, self._size)
            raise

        if added:
            self._size += 1
        else:
            logging.debug('Ignoring duplicate point %s', p)


    def contains(self, p):
        p = as_point(p, 'contains')
        return _contains(self.root, p, X_AXIS)


    def range(self, rect):
        '''
        All points inside `rect` or on its boundary.

        Subtrees whose rectangle does not intersect `rect` are skipped.
        '''
        if rect is None:
            raise ValueError('range() called with a None rectangle')
        if not isinstance(rect, Rect):
            rect = Rect(*rect)

        found = []
        _range(self.root, rect, found)
        return found


    def nearest(self, p):
        '''
        A nearest neighbor of `p` in the set, None if the set is empty.

        Of several points at the same distance the first one encountered
        during the search is returned.
        '''
        p = as_point(p, 'nearest')
        if self.root is None:
            return None

        return _nearest(self.root, p, self.root.point)


    def nodes(self):
        '''
        Pre-order list of `NodeView(point, rect, axis)` for every node, e.g.
        for drawing. `axis` is the axis the node splits its rectangle on.
        '''
        out = []
        _visit_node(out, self.root, X_AXIS)
        return out


    def points(self):
        return [ view.point for view in self.nodes() ]


    def height(self):
        return _height(self.root)


def _insert(node, p, axis):
    if node.point == p:
        return False

    nxt = 1 - axis
    if p[axis] < node.point[axis]:
        if node.lb is None:
            node.lb = Node(p, node.child_rect(axis, True))
            return True
        return _insert(node.lb, p, nxt)

    if node.rt is None:
        node.rt = Node(p, node.child_rect(axis, False))
        return True
    return _insert(node.rt, p, nxt)


def _contains(node, p, axis):
    if node is None:
        return False
    if node.point == p:
        return True

    if p[axis] < node.point[axis]:
        return _contains(node.lb, p, 1 - axis)
    return _contains(node.rt, p, 1 - axis)


def _range(node, rect, found):
    if node is None or not node.rect.intersects(rect):
        return

    if rect.contains(node.point):
        found.append(node.point)

    _range(node.lb, rect, found)
    _range(node.rt, rect, found)


def _nearest(node, p, best):
    if node is None:
        return best

    best_dist = p.distance_squared_to(best)
    if best_dist < node.rect.distance_squared_to(p):
        return best

    if p.distance_squared_to(node.point) < best_dist:
        best = node.point

    first, second = node.lb, node.rt
    if first is None or (second is not None
            and second.rect.distance_squared_to(p) < first.rect.distance_squared_to(p)):
        first, second = second, first

    best = _nearest(first, p, best)
    return _nearest(second, p, best)


def _visit_node(out, node, axis):
    if node is None:
        return

    out.append(NodeView(node.point, node.rect, axis))
    _visit_node(out, node.lb, 1 - axis)
    _visit_node(out, node.rt, 1 - axis)


def _height(node):
    if node is None:
        return 0
    return 1 + max(_height(node.lb), _height(node.rt))
