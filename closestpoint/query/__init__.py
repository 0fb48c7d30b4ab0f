from .dispatch import ALL_LAYERS, QueryConfig, Collider, ClosestPair, ClosestPointQuery
from .frames import closest_transform, is_axis

__all__ = [
    "ALL_LAYERS", "QueryConfig", "Collider", "ClosestPair", "ClosestPointQuery",
    "closest_transform", "is_axis",
]
