"""
Line parameter of the point where a line meets, or passes closest to, a box.

All routines work in box-local coordinates after ``fold_to_octant`` has made
every direction component non-negative. The returned value is the signed
distance along the (unit) direction from the line point. The case analysis
follows Eberly's line/box distance: pick the face the line heads for, then
decide between that face, one of its edges or its corner.
"""
from typing import List, NamedTuple, Tuple

import numpy as np


class AxisPermutation(NamedTuple):
    i0: int
    i1: int
    i2: int


def fold_to_octant(point, direction) -> Tuple[List[float], List[float]]:
    """Mirror point and direction together on every axis where the direction is negative."""
    p = [float(v) for v in point]
    d = [float(v) for v in direction]
    for i in range(3):
        if d[i] < 0.0:
            p[i] = -p[i]
            d[i] = -d[i]
    return p, d


def line_box_parameter(extents, box_point, box_direction) -> float:
    e = [float(v) for v in extents]
    p = [float(v) for v in box_point]
    d = [float(v) for v in box_direction]
    if d[0] > 0.0:
        if d[1] > 0.0:
            if d[2] > 0.0:
                return line_distance_3(e, p, d)
            return line_distance_2(e, p, d, 0, 1)
        if d[2] > 0.0:
            return line_distance_2(e, p, d, 0, 2)
        return line_distance_1(e, p, d, 0)
    if d[1] > 0.0:
        if d[2] > 0.0:
            return line_distance_2(e, p, d, 1, 2)
        return line_distance_1(e, p, d, 1)
    if d[2] > 0.0:
        return line_distance_1(e, p, d, 2)
    return 0.0


def line_distance_3(extents, point, direction) -> float:
    pme = [point[i] - extents[i] for i in range(3)]
    d = direction
    if d[1] * pme[0] >= d[0] * pme[1]:
        if d[2] * pme[0] >= d[0] * pme[2]:
            return _face(extents, point, d, pme, AxisPermutation(0, 1, 2))
        return _face(extents, point, d, pme, AxisPermutation(2, 0, 1))
    if d[2] * pme[1] >= d[1] * pme[2]:
        return _face(extents, point, d, pme, AxisPermutation(1, 2, 0))
    return _face(extents, point, d, pme, AxisPermutation(2, 0, 1))


def _face(extents, point, d, pme, perm: AxisPermutation) -> float:
    i0, i1, i2 = perm
    ppe1 = point[i1] + extents[i1]
    ppe2 = point[i2] + extents[i2]

    if d[i0] * ppe1 >= d[i1] * pme[i0]:
        if d[i0] * ppe2 >= d[i2] * pme[i0]:
            # line crosses face i0
            return -pme[i0] / d[i0]
        return _edge_i1(extents, d, pme, ppe1, ppe2, perm, check_sign=False)

    if d[i0] * ppe2 >= d[i2] * pme[i0]:
        return _edge_i2(extents, d, pme, ppe1, ppe2, perm, check_sign=False)

    t = _edge_i1(extents, d, pme, ppe1, ppe2, perm, check_sign=True)
    if t is not None:
        return t
    t = _edge_i2(extents, d, pme, ppe1, ppe2, perm, check_sign=True)
    if t is not None:
        return t

    # corner (i1, i2)
    lsq = d[i0] * d[i0] + d[i1] * d[i1] + d[i2] * d[i2]
    delta = d[i0] * pme[i0] + d[i1] * ppe1 + d[i2] * ppe2
    return -delta / lsq


def _edge_i1(extents, d, pme, ppe1, ppe2, perm: AxisPermutation, check_sign: bool):
    i0, i1, i2 = perm
    lsq = d[i0] * d[i0] + d[i2] * d[i2]
    temp = lsq * ppe1 - d[i1] * (d[i0] * pme[i0] + d[i2] * ppe2)
    if check_sign and temp < 0.0:
        return None
    if temp <= 2.0 * lsq * extents[i1]:
        percentage = temp / lsq
        lsq += d[i1] * d[i1]
        temp = ppe1 - percentage
        delta = d[i0] * pme[i0] + d[i1] * temp + d[i2] * ppe2
        return -delta / lsq
    lsq += d[i1] * d[i1]
    delta = d[i0] * pme[i0] + d[i1] * pme[i1] + d[i2] * ppe2
    return -delta / lsq


def _edge_i2(extents, d, pme, ppe1, ppe2, perm: AxisPermutation, check_sign: bool):
    i0, i1, i2 = perm
    lsq = d[i0] * d[i0] + d[i1] * d[i1]
    temp = lsq * ppe2 - d[i2] * (d[i0] * pme[i0] + d[i1] * ppe1)
    if check_sign and temp < 0.0:
        return None
    if temp <= 2.0 * lsq * extents[i2]:
        percentage = temp / lsq
        lsq += d[i2] * d[i2]
        temp = ppe2 - percentage
        delta = d[i0] * pme[i0] + d[i1] * ppe1 + d[i2] * temp
        return -delta / lsq
    lsq += d[i2] * d[i2]
    delta = d[i0] * pme[i0] + d[i1] * ppe1 + d[i2] * pme[i2]
    return -delta / lsq


def line_distance_2(extents, point, direction, i0: int, i1: int) -> float:
    d = direction
    pme0 = point[i0] - extents[i0]
    pme1 = point[i1] - extents[i1]
    product0 = d[i1] * pme0
    product1 = d[i0] * pme1

    if product0 >= product1:
        # heads for face i0
        ppe1 = point[i1] + extents[i1]
        delta = product0 - d[i0] * ppe1
        if delta >= 0.0:
            return -(d[i0] * pme0 + d[i1] * ppe1) / (d[i0] * d[i0] + d[i1] * d[i1])
        return -pme0 / d[i0]

    ppe0 = point[i0] + extents[i0]
    delta = product1 - d[i1] * ppe0
    if delta >= 0.0:
        return -(d[i0] * ppe0 + d[i1] * pme1) / (d[i0] * d[i0] + d[i1] * d[i1])
    return -pme1 / d[i1]


def line_distance_1(extents, point, direction, i0: int) -> float:
    return (extents[i0] - point[i0]) / direction[i0]


def segment_box_parameter(box_center: np.ndarray, box_rotation: np.ndarray, extents: np.ndarray,
                          line_center: np.ndarray, line_direction: np.ndarray) -> float:
    """
    Signed distance from ``line_center`` along ``line_direction`` (world space)
    to the box point the line reaches first in the folded frame.
    """
    offset = np.asarray(line_center, float) - np.asarray(box_center, float)
    R = np.asarray(box_rotation, float)
    box_point = R.T @ offset
    box_direction = R.T @ np.asarray(line_direction, float)
    p, d = fold_to_octant(box_point, box_direction)
    return line_box_parameter(extents, p, d)
