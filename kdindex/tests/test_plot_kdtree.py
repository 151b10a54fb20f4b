import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from kdindex.util.geometry import Point, Rect
from kdindex.util.kdtree import KdTree
from kdindex.util.plot_kdtree import plot_kdtree


def test_plot_splitting_lines():
    tree = KdTree.from_points([Point(0.7, 0.2), Point(0.5, 0.4), Point(0.2, 0.3)])
    fig, ax = plt.subplots()

    out = plot_kdtree(tree, ax=ax, show=False)

    assert out is ax
    lines = ax.get_lines()
    assert len(lines) == 3

    # root splits on x over the whole square
    assert list(lines[0].get_xdata()) == [0.7, 0.7]
    assert list(lines[0].get_ydata()) == [0.0, 1.0]
    # second level splits on y, clipped to the left of the root
    assert list(lines[1].get_xdata()) == [0.0, 0.7]
    assert list(lines[1].get_ydata()) == [0.4, 0.4]
    assert len(ax.patches) == 3
    assert ax.get_xlim() == (0.0, 1.0)

    plt.close(fig)


def test_plot_query_overlays():
    tree = KdTree.from_points([Point(0.7, 0.2), Point(0.5, 0.4)])
    fig, ax = plt.subplots()

    plot_kdtree(tree, ax=ax, query_rect=Rect(0.1, 0.1, 0.6, 0.6), query_point=Point(0.45, 0.45), show=False)

    # two splits, query marker, line to the nearest point
    assert len(ax.get_lines()) == 4
    assert len(ax.patches) == 3

    plt.close(fig)


def test_plot_empty_tree():
    fig, ax = plt.subplots()
    plot_kdtree(KdTree(), ax=ax, show=False)
    assert len(ax.get_lines()) == 0
    plt.close(fig)
