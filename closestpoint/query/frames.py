import numpy as np
from typing import Tuple

from ..geometry.from_position import closest_point_on_segment


UP = np.array([0.0, 1.0, 0.0])


def closest_transform(v0, v1, p) -> Tuple[np.ndarray, np.ndarray]:
    """
    Anchor frame on the edge ``v0 -> v1`` nearest to ``p``.

    The rotation's columns are ``(-edge, up, -n)`` with ``n = edge x up``, so
    the frame's forward axis points away from the side the edge normal faces.
    """
    v0 = np.asarray(v0, float)
    v1 = np.asarray(v1, float)
    edge = v1 - v0
    L = float(np.linalg.norm(edge))
    if L < 1e-12:
        raise ValueError("edge has zero length")
    edge = edge / L
    n = np.cross(edge, UP)
    if float(np.linalg.norm(n)) < 1e-12:
        raise ValueError("edge is parallel to the up axis")
    position = closest_point_on_segment(p, v0, v1)
    # edge and up need not be orthogonal: orthonormalize up against the edge
    up = np.cross(n, edge)
    up = up / np.linalg.norm(up)
    n = n / np.linalg.norm(n)
    rotation = np.column_stack([-edge, up, -n])
    return position, rotation


def is_axis(collider_rotation, contact_rotation, axis, threshold: float = 0.95) -> bool:
    """True when the contact frame's z axis, seen from the collider, lines up with ``axis``."""
    R_c = np.asarray(collider_rotation, float).reshape(3, 3)
    R_k = np.asarray(contact_rotation, float).reshape(3, 3)
    local_normal = R_c.T @ R_k[:, 2]
    return abs(float(np.dot(local_normal, np.asarray(axis, float)))) >= threshold
