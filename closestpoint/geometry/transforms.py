import numpy as np


def quat_wxyz_to_rotmat(q):
    q = np.asarray(q, dtype=float).reshape(4)
    norm = np.linalg.norm(q)
    if norm == 0:
        raise ValueError("zero-norm quaternion")
    w, x, y, z = q / norm
    R = np.array([
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ], dtype=float)
    return R


def rotmat_from_axes(right, up, forward):
    return np.column_stack([
        np.asarray(right, float).reshape(3),
        np.asarray(up, float).reshape(3),
        np.asarray(forward, float).reshape(3),
    ])


def axis_angle_to_rotmat(axis, angle: float):
    a = np.asarray(axis, dtype=float).reshape(3)
    n = np.linalg.norm(a)
    if n == 0:
        raise ValueError("zero-length rotation axis")
    half = 0.5 * float(angle)
    xyz = a / n * np.sin(half)
    return quat_wxyz_to_rotmat((np.cos(half), xyz[0], xyz[1], xyz[2]))
