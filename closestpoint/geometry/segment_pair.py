import numpy as np
from typing import Tuple

from .primitives import Segment
from .vecmath import clamp_extent


PARALLEL_EPSILON = 1e-4


def segment_parameters(a: Segment, b: Segment) -> Tuple[float, float]:
    """
    Signed offsets from the midpoints of ``a`` and ``b`` (along their unit
    directions) of the closest pair of points between the two segments.

    ``a`` is resolved before ``b`` whenever both parameters leave their range,
    which fixes the answer for ties.
    """
    half1 = a.half_length
    dir1 = a.direction
    half2 = b.half_length
    dir2 = b.direction
    center2center = a.center - b.center

    c = -float(np.dot(dir1, dir2))
    dot1 = float(np.dot(center2center, dir1))
    dot2 = -float(np.dot(center2center, dir2))
    factor = abs(1.0 - c * c)

    if factor < PARALLEL_EPSILON:
        return _parallel_parameters(half1, half2, c, dot1, dot2)

    s1 = c * dot2 - dot1
    s2 = c * dot1 - dot2
    extent1 = half1 * factor
    extent2 = half2 * factor

    def resolve1(t2):
        return clamp_extent(-(c * t2 + dot1), half1)

    def resolve2(t1):
        return clamp_extent(-(c * t1 + dot2), half2)

    if s1 >= -extent1:
        if s1 <= extent1:
            if s2 >= -extent2:
                if s2 <= extent2:
                    inv = 1.0 / factor
                    return s1 * inv, s2 * inv
                t2 = half2
                return resolve1(t2), t2
            t2 = -half2
            return resolve1(t2), t2

        # s1 above its range
        if s2 >= -extent2:
            if s2 <= extent2:
                t1 = half1
                return t1, resolve2(t1)
            t2 = half2
            t1 = -(c * t2 + dot1)
            if t1 <= half1:
                return clamp_extent(t1, half1), t2
            return half1, resolve2(half1)
        t2 = -half2
        t1 = -(c * t2 + dot1)
        if t1 <= half1:
            return clamp_extent(t1, half1), t2
        return half1, resolve2(half1)

    # s1 below its range
    if s2 >= -extent2:
        if s2 <= extent2:
            t1 = -half1
            return t1, resolve2(t1)
        t2 = half2
        t1 = -(c * t2 + dot1)
        if t1 >= -half1:
            return clamp_extent(t1, half1), t2
        return -half1, resolve2(-half1)
    t2 = -half2
    t1 = -(c * t2 + dot1)
    if t1 >= -half1:
        return clamp_extent(t1, half1), t2
    return -half1, resolve2(-half1)


def _parallel_parameters(half1: float, half2: float, c: float, dot1: float, dot2: float) -> Tuple[float, float]:
    extents = half1 + half2
    if extents <= 0.0:
        return 0.0, 0.0
    sign = -1.0 if c > 0.0 else 1.0
    average = (dot1 - sign * dot2) * 0.5
    offset = clamp_extent(-average, extents)
    t2 = -sign * offset * half2 / extents
    t1 = offset + sign * t2
    return t1, t2


def closest_points_between(a: Segment, b: Segment) -> Tuple[np.ndarray, np.ndarray]:
    t1, t2 = segment_parameters(a, b)
    return a.center + a.direction * t1, b.center + b.direction * t2
