import numpy as np
from typing import Tuple

from .primitives import Box, Sphere, Capsule, Segment, ShapeKind
from .vecmath import safe_normalize
from .box_line import segment_box_parameter
from .segment_pair import closest_points_between
from .from_position import closest_point_on_box


ClosestPair = Tuple[np.ndarray, np.ndarray]


def closest_points_segment_sphere_at(segment: Segment, center: np.ndarray, radius: float) -> ClosestPair:
    center = np.asarray(center, float)
    direction = segment.direction
    along = max(float(np.dot(center - segment.start, direction)), 0.0)
    line_point = segment.start + direction * min(along, segment.length)
    delta = center - line_point
    # same as projecting line_point onto the sphere; zero when centers coincide
    collider_point = line_point + safe_normalize(delta) * (float(np.linalg.norm(delta)) - float(radius))
    return line_point, collider_point


def closest_points_segment_sphere(segment: Segment, sphere: Sphere) -> ClosestPair:
    return closest_points_segment_sphere_at(segment, sphere.center, sphere.radius)


def closest_points_segment_box(segment: Segment, box: Box) -> ClosestPair:
    direction = segment.direction
    half = segment.half_length
    center = segment.center
    distance = segment_box_parameter(box.center, box.rotation, box.half_extents, center, direction)
    if distance < -half:
        line_point = segment.start.copy()
    elif distance > half:
        line_point = segment.end.copy()
    else:
        line_point = center + direction * distance
    return line_point, closest_point_on_box(line_point, box)


def closest_points_segment_segment(segment: Segment, other: Segment) -> ClosestPair:
    return closest_points_between(segment, other)


def closest_points_segment_capsule(segment: Segment, capsule: Capsule) -> ClosestPair:
    line_point, axis_point = closest_points_between(segment, capsule.axis)
    collider_point = axis_point + safe_normalize(line_point - axis_point) * capsule.radius
    return line_point, collider_point


def closest_points(segment, shape) -> ClosestPair:
    """
    Closest pair between a finite segment and the surface of ``shape``.

    Returns ``(point_on_segment, point_on_shape)``. Segments that cross or
    lie inside the shape still get a surface point.
    """
    if not isinstance(segment, Segment):
        start, end = segment
        segment = Segment(start, end)
    kind = getattr(shape, "kind", None)
    if kind == ShapeKind.BOX:
        return closest_points_segment_box(segment, shape)
    if kind == ShapeKind.SPHERE:
        return closest_points_segment_sphere(segment, shape)
    if kind == ShapeKind.CAPSULE:
        return closest_points_segment_capsule(segment, shape)
    if kind == ShapeKind.SEGMENT:
        return closest_points_segment_segment(segment, shape)
    raise TypeError(f"unsupported shape: {type(shape).__name__}")
