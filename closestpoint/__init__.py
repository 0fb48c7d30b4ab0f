from .geometry import (
    ShapeKind,
    Segment,
    Box,
    Sphere,
    Capsule,
    safe_normalize,
    closest_point,
    closest_points,
    closest_points_between,
    segment_parameters,
    line_box_parameter,
)
from .query import (
    QueryConfig,
    Collider,
    ClosestPair,
    ClosestPointQuery,
    closest_transform,
    is_axis,
)
from .io import Perf, setup_query_logger

__version__ = "0.1.0"

__all__ = [
    "ShapeKind", "Segment", "Box", "Sphere", "Capsule",
    "safe_normalize", "closest_point", "closest_points", "closest_points_between",
    "segment_parameters", "line_box_parameter",
    "QueryConfig", "Collider", "ClosestPair", "ClosestPointQuery",
    "closest_transform", "is_axis",
    "Perf", "setup_query_logger",
]
