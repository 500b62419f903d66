# Re-export convenient entry points for external use

from .geometry import (
    Point,
    Triangle,
    ORIGIN,
    WIDTH,
    HEIGHT,
    PRECISION,
    distance,
    average,
    midpoint,
    triangle_centroid,
    bounding_triangle,
    generate_grid_points,
    generate_random_points,
    to_points,
    to_array,
)

from .zones import (
    Unresolved,
    Leaf,
    Empty,
    make_zone,
    split,
    split_triangle,
)

from .explorer import (
    SubdivisionDepthError,
    explode,
    explode_zones,
    snowflake_path,
)

from .heuristics import (
    snowflake_order,
    hilbert_order,
    zcurve_order,
    platzman_order,
    heuristics_registry_dict,
)

from .tour import (
    compute_path_cost,
    path_length,
)

from .render import (
    format_point,
    render_path,
)

from .utils import (
    random_subsets,
    save_order_result_to_file,
    load_order_result_from_file,
)

from .experiment import (
    MAX_POINTS,
    DEFAULT_SEED,
    run_snowflake,
    compare_orders,
    find_worst_subset_randomized,
    run_experiments,
)

from .plotting import (
    plot_snowflake_path,
    plot_order_comparison,
)
