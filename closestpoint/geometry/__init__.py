from .primitives import ShapeKind, Segment, Box, Sphere, Capsule
from .vecmath import safe_normalize
from .transforms import quat_wxyz_to_rotmat, axis_angle_to_rotmat, rotmat_from_axes
from .from_position import (
    closest_point,
    closest_point_on_box,
    closest_point_on_sphere,
    closest_point_on_sphere_at,
    closest_point_on_capsule,
    closest_point_on_segment,
    closest_point_on_cylinder,
)
from .box_line import AxisPermutation, fold_to_octant, line_box_parameter
from .segment_pair import PARALLEL_EPSILON, segment_parameters, closest_points_between
from .from_segment import (
    closest_points,
    closest_points_segment_box,
    closest_points_segment_sphere,
    closest_points_segment_sphere_at,
    closest_points_segment_capsule,
    closest_points_segment_segment,
)

__all__ = [
    "ShapeKind", "Segment", "Box", "Sphere", "Capsule",
    "safe_normalize", "quat_wxyz_to_rotmat", "axis_angle_to_rotmat", "rotmat_from_axes",
    "closest_point", "closest_point_on_box", "closest_point_on_sphere", "closest_point_on_sphere_at",
    "closest_point_on_capsule", "closest_point_on_segment", "closest_point_on_cylinder",
    "AxisPermutation", "fold_to_octant", "line_box_parameter",
    "PARALLEL_EPSILON", "segment_parameters", "closest_points_between",
    "closest_points", "closest_points_segment_box", "closest_points_segment_sphere",
    "closest_points_segment_sphere_at", "closest_points_segment_capsule", "closest_points_segment_segment",
]
