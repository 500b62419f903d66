import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon
from matplotlib.widgets import CheckButtons

from .geometry import to_array


# -------------------------
# SNOWFLAKE PATH + SUBDIVISION
# -------------------------
def plot_snowflake_path(points, path, triangles=None, title: str = "", ax=None):
    """
    Draw the sampled points, the snowflake path through them and, if given,
    the leaf triangles of the subdivision. Returns the Axes.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(7, 7))

    pts = to_array(points)
    ordered = to_array(path)

    for tri in triangles or ():
        ax.add_patch(
            Polygon(
                [[v.x, v.y] for v in tri],
                closed=True,
                facecolor="none",
                edgecolor="lightgray",
                linewidth=0.5,
            )
        )

    if len(pts):
        ax.scatter(pts[:, 0], pts[:, 1], color="red", s=20, zorder=5, label="Points")
    if len(ordered) >= 2:
        ax.plot(ordered[:, 0], ordered[:, 1], "-", color="tab:blue", lw=1.5, label="Snowflake path")
        ax.scatter([ordered[0, 0]], [ordered[0, 1]], s=80, color="gold", zorder=6, label="start")

    ax.set_title(title)
    ax.set_aspect("equal")
    if len(pts):
        ax.legend(loc="upper right")
    return ax


# -------------------------
# INTERACTIVE PLOT (CHECKBOX TOGGLE)
# -------------------------
def plot_order_comparison(points: np.ndarray, orders, labels, title: str = "", show=True):
    """
    Overlay several orderings of the same points with checkboxes to show/hide
    each one. Returns (fig, lines, check).
    """
    points = np.asarray(points, dtype=float)
    fig = plt.figure(figsize=(7, 7))
    ax = fig.add_subplot(111)

    ax.scatter(points[:, 0], points[:, 1], color="red", zorder=5, label="Points")

    lines = []
    colors = plt.cm.tab10.colors
    for idx, order in enumerate(orders):
        ordered = points[order]
        line, = ax.plot(
            ordered[:, 0], ordered[:, 1], "-o",
            color=colors[idx % len(colors)], lw=1.5, ms=4, label=labels[idx],
        )
        lines.append(line)

    ax.set_title(title)
    ax.set_aspect("equal")

    fig.subplots_adjust(left=0.25)
    height = 0.04 * len(labels)
    rax = fig.add_axes([0.02, 0.5 - height / 2, 0.18, height])
    check = CheckButtons(rax, labels, [True] * len(labels))

    def toggle_visibility(label):
        line = lines[labels.index(label)]
        line.set_visible(not line.get_visible())
        fig.canvas.draw_idle()

    check.on_clicked(toggle_visibility)

    if show:
        plt.show()
    # the caller must hold on to `check` or the toggles stop responding
    return fig, lines, check
