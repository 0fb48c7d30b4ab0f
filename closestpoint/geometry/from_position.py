import numpy as np

from .primitives import Box, Sphere, Capsule, Segment, ShapeKind, as_point
from .vecmath import safe_normalize, project


def closest_point_on_sphere_at(point: np.ndarray, center: np.ndarray, radius: float) -> np.ndarray:
    center = np.asarray(center, float)
    direction = safe_normalize(np.asarray(point, float) - center)
    return center + direction * float(radius)


def closest_point_on_sphere(point: np.ndarray, sphere: Sphere) -> np.ndarray:
    return closest_point_on_sphere_at(point, sphere.center, sphere.radius)


def closest_point_on_segment(point: np.ndarray, start: np.ndarray, end: np.ndarray) -> np.ndarray:
    p = np.asarray(point, float)
    a = np.asarray(start, float)
    b = np.asarray(end, float)
    segment = b - a
    projection = project(p - a, safe_normalize(segment))
    if float(np.dot(projection, segment)) < 0.0:
        return a.copy()
    if float(np.dot(projection, projection)) > float(np.dot(segment, segment)):
        return b.copy()
    return projection + a


def closest_point_on_cylinder(point: np.ndarray, start: np.ndarray, end: np.ndarray, radius: float) -> np.ndarray:
    p = np.asarray(point, float)
    on_axis = closest_point_on_segment(p, start, end)
    return on_axis + safe_normalize(p - on_axis) * float(radius)


def closest_point_on_box(point: np.ndarray, box: Box) -> np.ndarray:
    local = box.to_local(point)
    half = box.half_extents
    if np.any(local < -half) or np.any(local > half):
        local = np.clip(local, -half, half)
    else:
        slack = half - np.abs(local)
        # first axis wins ties so points on edges and corners stay fixed
        if slack[0] <= slack[1] and slack[0] <= slack[2]:
            axis = 0
        elif slack[1] <= slack[2]:
            axis = 1
        else:
            axis = 2
        local[axis] = -half[axis] if local[axis] < 0.0 else half[axis]
    return box.to_world(local)


def closest_point_on_capsule(point: np.ndarray, capsule: Capsule) -> np.ndarray:
    p = np.asarray(point, float)
    axis = capsule.end - capsule.start
    along = float(np.dot(p - capsule.start, safe_normalize(axis)))
    if along > float(np.linalg.norm(axis)):
        return closest_point_on_sphere_at(p, capsule.end, capsule.radius)
    if along < 0.0:
        return closest_point_on_sphere_at(p, capsule.start, capsule.radius)
    return closest_point_on_cylinder(p, capsule.start, capsule.end, capsule.radius)


def closest_point(point, shape) -> np.ndarray:
    """
    Closest point on the surface of ``shape`` to ``point``.

    Points inside a box, sphere or capsule are pushed out to the nearest
    surface point rather than returned unchanged.
    """
    p = as_point(point)
    kind = getattr(shape, "kind", None)
    if kind == ShapeKind.BOX:
        return closest_point_on_box(p, shape)
    if kind == ShapeKind.SPHERE:
        return closest_point_on_sphere(p, shape)
    if kind == ShapeKind.CAPSULE:
        return closest_point_on_capsule(p, shape)
    if kind == ShapeKind.SEGMENT:
        return closest_point_on_segment(p, shape.start, shape.end)
    raise TypeError(f"unsupported shape: {type(shape).__name__}")
