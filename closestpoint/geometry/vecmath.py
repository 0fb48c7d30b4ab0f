import numpy as np


TINY_LENGTH_SQ = np.finfo(float).tiny


def safe_normalize(v: np.ndarray) -> np.ndarray:
    """Unit vector along ``v``, or the zero vector when ``v`` has no length."""
    v = np.asarray(v, float)
    lsq = float(np.dot(v, v))
    if lsq > TINY_LENGTH_SQ:
        return v / np.sqrt(lsq)
    return np.zeros(3, dtype=float)


def project(v: np.ndarray, unit: np.ndarray) -> np.ndarray:
    return unit * float(np.dot(v, unit))


def clamp_extent(value: float, extent: float) -> float:
    if value < -extent:
        return -extent
    if value <= extent:
        return value
    return extent
