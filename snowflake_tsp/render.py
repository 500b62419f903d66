from .geometry import PRECISION
from .tour import path_length


def format_point(p, precision: int = PRECISION) -> str:
    return f"({p.x:.{precision}f}, {p.y:.{precision}f})"


def render_path(path, precision: int = PRECISION) -> str:
    """
    Text listing of a path: one numbered line per point, then a summary
    with the number of stops and the open path length.
    """
    if not path:
        return "<empty path>"

    width = len(str(len(path)))
    lines = [
        f"{i:>{width}}: {format_point(p, precision)}"
        for i, p in enumerate(path, start=1)
    ]
    lines.append(f"{len(path)} points, length {path_length(path):.{precision}f}")
    return "\n".join(lines)
