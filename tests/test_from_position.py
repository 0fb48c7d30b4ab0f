import unittest
import numpy as np

from closestpoint.geometry import (
    Box, Sphere, Capsule, Segment,
    axis_angle_to_rotmat,
    closest_point,
    closest_point_on_box,
    closest_point_on_sphere_at,
    closest_point_on_segment,
    closest_point_on_cylinder,
    closest_point_on_capsule,
)


def box_surface_error(box: Box, q: np.ndarray) -> float:
    local = np.abs(box.to_local(q))
    outside = float(np.max(local - box.half_extents))
    return abs(outside)


def distance_to_axis(capsule: Capsule, q: np.ndarray) -> float:
    on_axis = closest_point_on_segment(q, capsule.start, capsule.end)
    return float(np.linalg.norm(q - on_axis))


class PointOnBoxTests(unittest.TestCase):
    def setUp(self):
        self.box = Box.axis_aligned((0.0, 0.0, 0.0), (1.0, 1.0, 1.0))

    def test_exterior_point_clamps_to_face(self):
        np.testing.assert_allclose(closest_point((5.0, 0.0, 0.0), self.box), [1.0, 0.0, 0.0])

    def test_exterior_point_clamps_to_corner(self):
        np.testing.assert_allclose(closest_point((3.0, -4.0, 2.0), self.box), [1.0, -1.0, 1.0])

    def test_interior_point_snaps_to_nearest_face(self):
        np.testing.assert_allclose(closest_point((0.9, 0.0, 0.0), self.box), [1.0, 0.0, 0.0])
        np.testing.assert_allclose(closest_point((-0.8, 0.1, 0.0), self.box), [-1.0, 0.1, 0.0])
        np.testing.assert_allclose(closest_point((0.2, 0.1, -0.95), self.box), [0.2, 0.1, -1.0])

    def test_center_of_uneven_box_goes_to_thinnest_axis(self):
        box = Box.axis_aligned((0.0, 0.0, 0.0), (2.0, 0.5, 3.0))
        np.testing.assert_allclose(closest_point_on_box((0.0, 0.0, 0.0), box), [0.0, 0.5, 0.0])

    def test_edge_and_corner_points_are_fixed(self):
        for p in ([1.0, 1.0, 0.0], [1.0, 0.0, -1.0], [0.0, -1.0, 1.0], [1.0, 1.0, 1.0]):
            np.testing.assert_allclose(closest_point(p, self.box), p)

    def test_rotated_box(self):
        R = axis_angle_to_rotmat((0.0, 0.0, 1.0), np.pi / 2)
        box = Box((1.0, 1.0, 1.0), R, (2.0, 1.0, 1.0))
        np.testing.assert_allclose(closest_point((1.0, 5.0, 1.0), box), [1.0, 3.0, 1.0], atol=1e-12)

    def test_zero_extent_box_is_a_point(self):
        box = Box.axis_aligned((1.0, 2.0, 3.0), (0.0, 0.0, 0.0))
        np.testing.assert_allclose(closest_point((4.0, -1.0, 0.0), box), [1.0, 2.0, 3.0])

    def test_random_points_land_on_surface_and_are_minimal(self):
        rng = np.random.default_rng(7)
        for _ in range(50):
            R = axis_angle_to_rotmat(rng.normal(size=3), rng.uniform(0.0, np.pi))
            box = Box(rng.uniform(-2, 2, size=3), R, rng.uniform(0.2, 2.0, size=3))
            p = box.center + rng.normal(scale=2.5, size=3)
            q = closest_point(p, box)
            self.assertLess(box_surface_error(box, q), 1e-9)
            np.testing.assert_allclose(closest_point(q, box), q, atol=1e-9)

            local = box.to_local(p)
            slack = box.half_extents - np.abs(local)
            if np.all(slack >= 0.0):
                expected = float(np.min(slack))
            else:
                expected = float(np.linalg.norm(local - np.clip(local, -box.half_extents, box.half_extents)))
            self.assertAlmostEqual(float(np.linalg.norm(q - p)), expected, places=9)


class PointOnSphereTests(unittest.TestCase):
    def test_projects_along_center_direction(self):
        q = closest_point((3.0, 4.0, 0.0), Sphere((0.0, 0.0, 0.0), 1.0))
        np.testing.assert_allclose(q, [0.6, 0.8, 0.0])

    def test_interior_point_goes_outward(self):
        q = closest_point((0.0, 0.0, -0.1), Sphere((0.0, 0.0, 0.0), 2.0))
        np.testing.assert_allclose(q, [0.0, 0.0, -2.0])

    def test_point_at_center_returns_center(self):
        q = closest_point_on_sphere_at((1.0, 1.0, 1.0), (1.0, 1.0, 1.0), 3.0)
        np.testing.assert_allclose(q, [1.0, 1.0, 1.0])
        self.assertFalse(np.any(np.isnan(q)))

    def test_random_points(self):
        rng = np.random.default_rng(11)
        for _ in range(50):
            sphere = Sphere(rng.uniform(-2, 2, size=3), rng.uniform(0.1, 3.0))
            p = rng.normal(scale=3.0, size=3)
            q = closest_point(p, sphere)
            self.assertAlmostEqual(float(np.linalg.norm(q - sphere.center)), sphere.radius, places=9)
            np.testing.assert_allclose(closest_point(q, sphere), q, atol=1e-9)
            expected = abs(float(np.linalg.norm(p - sphere.center)) - sphere.radius)
            self.assertAlmostEqual(float(np.linalg.norm(q - p)), expected, places=9)


class PointOnSegmentTests(unittest.TestCase):
    def test_before_start_after_end_and_between(self):
        a = np.array([0.0, 0.0, 0.0])
        b = np.array([2.0, 0.0, 0.0])
        np.testing.assert_allclose(closest_point_on_segment((-1.0, 1.0, 0.0), a, b), a)
        np.testing.assert_allclose(closest_point_on_segment((3.0, 1.0, 0.0), a, b), b)
        np.testing.assert_allclose(closest_point_on_segment((0.5, 1.0, 7.0), a, b), [0.5, 0.0, 0.0])

    def test_degenerate_segment_returns_its_point(self):
        q = closest_point_on_segment((5.0, 5.0, 5.0), (1.0, 2.0, 3.0), (1.0, 2.0, 3.0))
        np.testing.assert_allclose(q, [1.0, 2.0, 3.0])

    def test_segment_as_shape(self):
        q = closest_point((1.0, 3.0, 0.0), Segment((0.0, 0.0, 0.0), (0.0, 2.0, 0.0)))
        np.testing.assert_allclose(q, [0.0, 2.0, 0.0])

    def test_cylinder_pushes_out_by_radius(self):
        q = closest_point_on_cylinder((1.0, 5.0, 0.0), (0.0, 0.0, 0.0), (0.0, 2.0, 0.0), 0.5)
        expected = np.array([0.0, 2.0, 0.0]) + np.array([1.0, 3.0, 0.0]) / np.sqrt(10.0) * 0.5
        np.testing.assert_allclose(q, expected)
        q = closest_point_on_cylinder((2.0, 1.0, 0.0), (0.0, 0.0, 0.0), (0.0, 2.0, 0.0), 0.5)
        np.testing.assert_allclose(q, [0.5, 1.0, 0.0])


class PointOnCapsuleTests(unittest.TestCase):
    def setUp(self):
        self.capsule = Capsule((0.0, 0.0, 0.0), (0.0, 2.0, 0.0), 0.5)

    def test_beyond_top_cap(self):
        np.testing.assert_allclose(closest_point((0.0, 3.0, 0.0), self.capsule), [0.0, 2.5, 0.0])

    def test_beyond_bottom_cap(self):
        np.testing.assert_allclose(closest_point((0.0, -4.0, 0.0), self.capsule), [0.0, -0.5, 0.0])

    def test_side(self):
        np.testing.assert_allclose(closest_point((0.0, 1.2, -3.0), self.capsule), [0.0, 1.2, -0.5])

    def test_inside_pushes_to_side(self):
        np.testing.assert_allclose(closest_point((0.1, 1.0, 0.0), self.capsule), [0.5, 1.0, 0.0])

    def test_zero_radius_is_the_axis(self):
        capsule = Capsule((0.0, 0.0, 0.0), (0.0, 2.0, 0.0), 0.0)
        np.testing.assert_allclose(closest_point_on_capsule((1.0, 1.0, 0.0), capsule), [0.0, 1.0, 0.0])

    def test_degenerate_axis_is_a_sphere(self):
        capsule = Capsule((1.0, 1.0, 1.0), (1.0, 1.0, 1.0), 2.0)
        np.testing.assert_allclose(closest_point((1.0, 1.0, 5.0), capsule), [1.0, 1.0, 3.0])

    def test_random_points(self):
        rng = np.random.default_rng(3)
        for _ in range(50):
            a = rng.uniform(-2, 2, size=3)
            capsule = Capsule(a, a + rng.normal(size=3), rng.uniform(0.1, 1.0))
            p = rng.normal(scale=2.0, size=3)
            q = closest_point(p, capsule)
            self.assertAlmostEqual(distance_to_axis(capsule, q), capsule.radius, places=9)
            np.testing.assert_allclose(closest_point(q, capsule), q, atol=1e-9)
            expected = abs(distance_to_axis(capsule, p) - capsule.radius)
            self.assertAlmostEqual(float(np.linalg.norm(q - p)), expected, places=9)


class UnsupportedShapeTests(unittest.TestCase):
    def test_raises_type_error(self):
        with self.assertRaises(TypeError):
            closest_point((0.0, 0.0, 0.0), object())


if __name__ == "__main__":
    unittest.main()
