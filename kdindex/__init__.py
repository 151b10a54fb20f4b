from .util.geometry import Point as _Point, \
        Rect as _Rect, \
        UNIT_SQUARE as _UNIT_SQUARE, \
        distance_squared as _distance_squared
from .util.kdtree import KdTree as _KdTree, \
        NodeView as _NodeView, \
        X_AXIS as _X_AXIS, \
        Y_AXIS as _Y_AXIS
from .util.pointset import PointSet as _PointSet


# export namespace
Point = _Point
Rect = _Rect
UNIT_SQUARE = _UNIT_SQUARE
distance_squared = _distance_squared
KdTree = _KdTree
NodeView = _NodeView
X_AXIS = _X_AXIS
Y_AXIS = _Y_AXIS
PointSet = _PointSet
