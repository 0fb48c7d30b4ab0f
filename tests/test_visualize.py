import os
import unittest
import numpy as np

from closestpoint import Box, Sphere, Capsule, Segment, Collider, ClosestPointQuery


class VisualizeTests(unittest.TestCase):
    def test_pairs_and_optional_visualize(self):
        shapes = [
            Box.axis_aligned((0.0, 0.0, 0.0), (1.0, 1.0, 1.0)),
            Sphere((4.0, 0.0, 0.0), 1.0),
            Capsule((0.0, 4.0, 0.0), (0.0, 6.0, 0.0), 0.5),
        ]
        segment = ((-3.0, 3.0, 0.0), (6.0, 3.0, 0.0))
        q = ClosestPointQuery()
        pairs = []
        for shape in shapes:
            pair = q.from_segment(segment[0], segment[1], Collider(shape))
            self.assertIsNotNone(pair)
            pairs.append((pair.line_point, pair.collider_point))
        self.assertTrue(all(np.all(np.isfinite(p)) and np.all(np.isfinite(c)) for p, c in pairs))

        if os.environ.get("CLOSESTPOINT_VIZ", "0") == "1":
            from closestpoint.visualization.pyvista_backend import visualize_pairs
            visualize_pairs(shapes + [Segment(*segment)], pairs, segments=[segment])


if __name__ == "__main__":
    unittest.main()
