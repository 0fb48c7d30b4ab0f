import numpy as np
from enum import IntEnum
from dataclasses import dataclass, field
from typing import Sequence

from .transforms import quat_wxyz_to_rotmat
from .vecmath import safe_normalize


def _frozen_vec(v) -> np.ndarray:
    out = np.array(v, dtype=float).reshape(3)
    out.flags.writeable = False
    return out


class ShapeKind(IntEnum):
    BOX = 0
    SPHERE = 1
    CAPSULE = 2
    SEGMENT = 3


@dataclass(frozen=True, eq=False)
class Segment:
    start: np.ndarray
    end: np.ndarray
    kind: ShapeKind = field(default=ShapeKind.SEGMENT, init=False)

    def __post_init__(self):
        object.__setattr__(self, "start", _frozen_vec(self.start))
        object.__setattr__(self, "end", _frozen_vec(self.end))

    @property
    def vector(self) -> np.ndarray:
        return self.end - self.start

    @property
    def length(self) -> float:
        return float(np.linalg.norm(self.end - self.start))

    @property
    def half_length(self) -> float:
        return 0.5 * self.length

    @property
    def direction(self) -> np.ndarray:
        return safe_normalize(self.end - self.start)

    @property
    def center(self) -> np.ndarray:
        return self.start + self.direction * self.half_length

    def __repr__(self):
        return f"Segment(start={self.start}, end={self.end})"


@dataclass(frozen=True, eq=False)
class Box:
    """
    Oriented box. Columns of ``rotation`` are the local right/up/forward axes.
    """

    center: np.ndarray
    rotation: np.ndarray
    half_extents: np.ndarray
    kind: ShapeKind = field(default=ShapeKind.BOX, init=False)

    def __post_init__(self):
        R = np.array(self.rotation, dtype=float).reshape(3, 3)
        R.flags.writeable = False
        object.__setattr__(self, "center", _frozen_vec(self.center))
        object.__setattr__(self, "rotation", R)
        object.__setattr__(self, "half_extents", _frozen_vec(self.half_extents))

    @classmethod
    def axis_aligned(cls, center, half_extents) -> "Box":
        return cls(center, np.eye(3, dtype=float), half_extents)

    @classmethod
    def from_pose(cls, position, quat_wxyz, size, center=(0.0, 0.0, 0.0), scale=(1.0, 1.0, 1.0)) -> "Box":
        """
        Build a world-space box from a host box descriptor: full ``size`` and a
        local ``center`` offset, both scaled per axis, placed at ``position``
        with orientation ``quat_wxyz``.
        """
        R = quat_wxyz_to_rotmat(quat_wxyz)
        s = np.asarray(scale, float).reshape(3)
        local_center = np.asarray(center, float).reshape(3) * s
        world_center = R @ local_center + np.asarray(position, float).reshape(3)
        half = 0.5 * np.abs(np.asarray(size, float).reshape(3) * s)
        return cls(world_center, R, half)

    @property
    def axes(self) -> np.ndarray:
        return self.rotation.T

    def to_local(self, point) -> np.ndarray:
        return self.rotation.T @ (np.asarray(point, float) - self.center)

    def to_world(self, local) -> np.ndarray:
        return self.rotation @ np.asarray(local, float) + self.center

    def __repr__(self):
        return f"Box(center={self.center}, half_extents={self.half_extents})"


@dataclass(frozen=True, eq=False)
class Sphere:
    center: np.ndarray
    radius: float
    kind: ShapeKind = field(default=ShapeKind.SPHERE, init=False)

    def __post_init__(self):
        object.__setattr__(self, "center", _frozen_vec(self.center))
        object.__setattr__(self, "radius", float(self.radius))

    @classmethod
    def from_pose(cls, position, center, radius: float, scale: float = 1.0) -> "Sphere":
        c = np.asarray(position, float).reshape(3) + np.asarray(center, float).reshape(3)
        return cls(c, float(radius) * float(scale))

    def __repr__(self):
        return f"Sphere(center={self.center}, radius={self.radius})"


@dataclass(frozen=True, eq=False)
class Capsule:
    start: np.ndarray
    end: np.ndarray
    radius: float
    kind: ShapeKind = field(default=ShapeKind.CAPSULE, init=False)

    def __post_init__(self):
        object.__setattr__(self, "start", _frozen_vec(self.start))
        object.__setattr__(self, "end", _frozen_vec(self.end))
        object.__setattr__(self, "radius", float(self.radius))

    @classmethod
    def from_pose(cls, position, quat_wxyz, height: float, radius: float, direction: int = 1,
                  center=(0.0, 0.0, 0.0)) -> "Capsule":
        """
        Host capsule descriptor: ``height`` is measured cap to cap along the
        local axis ``direction`` (0 = x, 1 = y, 2 = z).
        """
        if direction not in (0, 1, 2):
            raise ValueError(f"capsule direction must be 0, 1 or 2, got {direction}")
        R = quat_wxyz_to_rotmat(quat_wxyz)
        p = np.asarray(position, float).reshape(3)
        c = np.asarray(center, float).reshape(3)
        offset = np.zeros(3, dtype=float)
        offset[direction] = max(0.0, 0.5 * float(height) - float(radius))
        return cls(R @ (c - offset) + p, R @ (c + offset) + p, radius)

    @classmethod
    def upright(cls, position, height: float, radius: float, center=(0.0, 0.0, 0.0)) -> "Capsule":
        # character controllers never rotate
        return cls.from_pose(position, (1.0, 0.0, 0.0, 0.0), height, radius, 1, center)

    @property
    def axis(self) -> Segment:
        return Segment(self.start, self.end)

    def __repr__(self):
        return f"Capsule(start={self.start}, end={self.end}, radius={self.radius})"


def as_point(p: Sequence[float]) -> np.ndarray:
    return np.asarray(p, dtype=float).reshape(3)
