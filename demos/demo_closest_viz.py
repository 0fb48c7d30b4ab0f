import os
import time
import argparse
import numpy as np

from closestpoint import (
    Box, Sphere, Capsule, Segment,
    Collider, ClosestPointQuery, QueryConfig,
    Perf, setup_query_logger,
)
from closestpoint.geometry import axis_angle_to_rotmat


def make_scene(rng: np.random.Generator):
    R = axis_angle_to_rotmat(rng.normal(size=3), rng.uniform(0.0, np.pi))
    return [
        Collider(Box((0.0, 0.0, 0.0), R, (1.0, 0.5, 0.75)), layer=0),
        Collider(Sphere((3.0, 0.0, 0.0), 0.8), layer=1),
        Collider(Capsule((-3.0, -1.0, 0.0), (-3.0, 1.0, 0.0), 0.5), layer=2),
        Collider(Segment((0.0, 3.0, -1.0), (0.0, 3.0, 1.0)), layer=3),
    ]


def run_case(count: int, seed: int, layers: int, out_dir: str, show: bool):
    rng = np.random.default_rng(seed)
    logger, log_path = setup_query_logger(out_dir)
    perf = Perf()
    perf.set_meta(count=count, seed=seed, layers=layers)
    query = ClosestPointQuery(QueryConfig(collision_layers=layers), perf=perf)
    colliders = make_scene(rng)

    logger.info(f"=== {count} segment queries against {len(colliders)} colliders ===")
    segments = []
    pairs = []
    for i in range(count):
        a = rng.uniform(-5.0, 5.0, size=3)
        b = a + rng.normal(scale=2.0, size=3)
        segments.append((a, b))
        for collider in colliders:
            pair = query.from_segment(a, b, collider)
            if pair is None:
                continue
            pairs.append((pair.line_point, pair.collider_point))
            logger.debug(f"query {i} {collider.shape.kind.name}: distance={pair.distance():.6e}")
        hit = query.nearest(a, colliders)
        if hit is not None:
            logger.info(f"query {i}: nearest {hit[0].shape.kind.name} at {np.round(hit[1], 4).tolist()}")

    csv_path = os.path.join(out_dir, "perf.csv")
    perf.write_csv(csv_path)
    logger.info(f"perf written to {csv_path}")
    print(f"log: {log_path}")
    print(f"perf: {csv_path}")

    if show:
        from closestpoint.visualization.pyvista_backend import visualize_pairs
        visualize_pairs([c.shape for c in colliders], pairs, segments)


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--count', type=int, default=20)
    parser.add_argument('--seed', type=int, default=0)
    parser.add_argument('--layers', type=int, default=-1)
    parser.add_argument('--show', action='store_true')
    parser.add_argument('--name', type=str, default='closest')
    args = parser.parse_args()

    base_out = os.path.abspath(os.path.join(os.path.dirname(os.path.abspath(__file__)), '..'))
    out_dir = os.path.join(base_out, 'outputs', f"{args.name}_{time.strftime('%Y%m%d_%H%M%S')}")
    os.makedirs(out_dir, exist_ok=True)
    run_case(args.count, args.seed, args.layers, out_dir, args.show)


if __name__ == '__main__':
    main()
