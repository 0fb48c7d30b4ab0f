import logging
from contextlib import nullcontext
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import numpy as np

from ..geometry.primitives import Segment, ShapeKind, as_point
from ..geometry.from_position import (
    closest_point_on_box,
    closest_point_on_sphere,
    closest_point_on_capsule,
    closest_point_on_segment,
)
from ..geometry.from_segment import (
    closest_points_segment_box,
    closest_points_segment_sphere,
    closest_points_segment_capsule,
    closest_points_segment_segment,
)
from ..io.perf import Perf


logger = logging.getLogger(__name__)

ALL_LAYERS = -1

_POSITION_QUERIES = {
    ShapeKind.BOX: closest_point_on_box,
    ShapeKind.SPHERE: closest_point_on_sphere,
    ShapeKind.CAPSULE: closest_point_on_capsule,
    ShapeKind.SEGMENT: lambda p, s: closest_point_on_segment(p, s.start, s.end),
}

_SEGMENT_QUERIES = {
    ShapeKind.BOX: closest_points_segment_box,
    ShapeKind.SPHERE: closest_points_segment_sphere,
    ShapeKind.CAPSULE: closest_points_segment_capsule,
    ShapeKind.SEGMENT: closest_points_segment_segment,
}


@dataclass(frozen=True)
class QueryConfig:
    collision_layers: int = ALL_LAYERS


@dataclass(frozen=True)
class Collider:
    shape: object
    layer: int = 0


@dataclass
class ClosestPair:
    line_point: np.ndarray
    collider_point: np.ndarray

    def distance(self) -> float:
        return float(np.linalg.norm(self.collider_point - self.line_point))

    def normal(self) -> np.ndarray:
        n = self.collider_point - self.line_point
        norm = np.linalg.norm(n)
        return (n / norm) if norm > 0 else np.zeros(3)


def _kind_of(shape) -> Optional[ShapeKind]:
    kind = getattr(shape, "kind", None)
    return kind if isinstance(kind, ShapeKind) else None


class ClosestPointQuery:
    """
    Caller-facing entry point over a set of host colliders.

    Colliders whose layer is outside ``config.collision_layers`` and shapes
    that are not one of the supported primitives yield ``None`` instead of
    a point.
    """

    def __init__(self, config: Optional[QueryConfig] = None, perf: Optional[Perf] = None):
        self.config = config or QueryConfig()
        self.perf = perf

    def _section(self, label: str):
        return self.perf.section(label) if self.perf is not None else nullcontext()

    def accepts(self, collider: Collider) -> bool:
        mask = self.config.collision_layers
        if mask <= ALL_LAYERS:
            return True
        return ((1 << int(collider.layer)) & mask) != 0

    def _resolve(self, collider: Collider, table) -> Optional[Tuple[ShapeKind, object]]:
        if not self.accepts(collider):
            logger.debug(f"collider on layer {collider.layer} filtered by mask {self.config.collision_layers:#x}")
            return None
        kind = _kind_of(collider.shape)
        if kind is None or kind not in table:
            logger.debug(f"unsupported shape {type(collider.shape).__name__}")
            return None
        return kind, table[kind]

    def from_position(self, position, collider: Collider) -> Optional[np.ndarray]:
        resolved = self._resolve(collider, _POSITION_QUERIES)
        if resolved is None:
            return None
        kind, query = resolved
        with self._section(f"position.{kind.name.lower()}"):
            return query(as_point(position), collider.shape)

    def from_segment(self, start, end, collider: Collider) -> Optional[ClosestPair]:
        resolved = self._resolve(collider, _SEGMENT_QUERIES)
        if resolved is None:
            return None
        kind, query = resolved
        with self._section(f"segment.{kind.name.lower()}"):
            line_point, collider_point = query(Segment(start, end), collider.shape)
        return ClosestPair(line_point, collider_point)

    def nearest(self, position, colliders: Iterable[Collider]) -> Optional[Tuple[Collider, np.ndarray]]:
        p = as_point(position)
        best = None
        best_d2 = np.inf
        for collider in colliders:
            q = self.from_position(p, collider)
            if q is None:
                continue
            d2 = float(np.dot(q - p, q - p))
            if d2 < best_d2:
                best_d2 = d2
                best = (collider, q)
        if best is None:
            logger.debug("no accepted collider for nearest query")
        return best
