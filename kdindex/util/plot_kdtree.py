import matplotlib.pyplot as plt
import matplotlib.patches

from kdindex.util.geometry import UNIT_SQUARE
from kdindex.util.kdtree import X_AXIS


def plot_kdtree(tree, ax=None, query_rect=None, query_point=None, show=True):
    '''
    Draw the points of `tree` and the splitting segments of its nodes:
    vertical (x) splits in red, horizontal (y) splits in blue.
    '''
    if ax is None:
        fig = plt.figure(figsize=(10,10))
        ax = fig.gca()

    ax.set_xlim((UNIT_SQUARE.xmin, UNIT_SQUARE.xmax))
    ax.set_ylim((UNIT_SQUARE.ymin, UNIT_SQUARE.ymax))
    ax.set_aspect('equal')

    for view in tree.nodes():
        _plot_node(ax, view)

    if query_rect is not None:
        r = matplotlib.patches.Rectangle((query_rect.xmin, query_rect.ymin), query_rect.width, query_rect.height,
                fill=False,
                edgecolor='green',
                linestyle='--',
                linewidth=1)
        ax.add_patch(r)

    if query_point is not None:
        ax.plot(query_point.x, query_point.y, 'gx')
        nearest = tree.nearest(query_point)
        if nearest is not None:
            ax.plot([query_point.x, nearest.x], [query_point.y, nearest.y], 'g:')

    if show:
        plt.show()

    return ax


def _plot_node(ax, view):
    p, r = view.point, view.rect
    if view.axis == X_AXIS:
        ax.plot([p.x, p.x], [r.ymin, r.ymax], 'r-', linewidth=1)
    else:
        ax.plot([r.xmin, r.xmax], [p.y, p.y], 'b-', linewidth=1)

    c = matplotlib.patches.Circle((p.x, p.y), radius=0.005, color='black', zorder=3)
    ax.add_patch(c)
