from .geometry import Triangle
from .zones import Empty, Leaf, Unresolved, make_zone, split


class SubdivisionDepthError(RuntimeError):
    """
    Raised when a zone still holds several points past the allowed depth.

    Coincident points always fall on the same side of a split, and so can
    distinct points in a triangle other than bounding_triangle(), so without
    a depth limit the traversal may never end on such input.
    """

    def __init__(self, depth: int, remaining: int):
        self.depth = depth
        self.remaining = remaining
        super().__init__(
            f"zone at depth {depth} still holds {remaining} points "
            f"(the split rule does not separate them)"
        )


# ============================================================
# DEPTH-FIRST TRAVERSAL
# ============================================================
def explode_zones(zone, max_depth=None) -> list:
    """
    Split `zone` until every surviving piece holds a single point and return
    the resulting Leaf zones in depth-first order.

    The worklist is a stack with its head at the end, so both children of a
    split are handled before any zone queued after their parent. With
    max_depth=None the walk is unbounded and does not terminate on
    coincident points.
    """
    leaves = []
    stack = [(zone, 0)]

    while stack:
        current, depth = stack.pop()

        if isinstance(current, Empty):
            continue
        if isinstance(current, Leaf):
            leaves.append(current)
            continue

        if max_depth is not None and depth >= max_depth:
            raise SubdivisionDepthError(depth, len(current.points))

        first, second = split(current)
        # second pushed first so that `first` is popped next
        stack.append((second, depth + 1))
        stack.append((first, depth + 1))

    return leaves


def explode(zone, max_depth=None) -> list:
    """Ordered points of the snowflake path through `zone`."""
    return [leaf.point for leaf in explode_zones(zone, max_depth=max_depth)]


def snowflake_path(triangle: Triangle, points, max_depth=None) -> list:
    """Build the root zone for `triangle` and `points` and walk it."""
    return explode(make_zone(triangle, points), max_depth=max_depth)
