from unittest import TestCase

from shapely.geometry import Point as ShapelyPoint

from mappyproj.constructs.point import Point


class TestPoint(TestCase):
    def test_from_lat_lon(self):
        p = Point.from_lat_lon(37.7749, -122.4194)

        self.assertEqual(p.x, -122.4194)
        self.assertEqual(p.y, 37.7749)
        self.assertFalse(p.has_z)
        self.assertEqual(p.height, 0.0)

    def test_to_tuple(self):
        self.assertEqual(Point(1, 2).to_tuple(), (1.0, 2.0))
        self.assertEqual(Point(1, 2, 3).to_tuple(), (1.0, 2.0, 3.0))

    def test_shapely_round_trip(self):
        flat = Point.from_shapely(ShapelyPoint(1.0, 2.0))
        tall = Point.from_shapely(ShapelyPoint(1.0, 2.0, 3.0))

        self.assertIsNone(flat.z)
        self.assertEqual(tall.z, 3.0)
        self.assertTrue(tall.to_shapely().has_z)
        self.assertEqual(flat.to_shapely(), ShapelyPoint(1.0, 2.0))

    def test_copy_is_independent(self):
        p = Point(1.0, 2.0, 3.0)
        q = p.copy()
        q.x = 10.0

        self.assertEqual(p, Point(1.0, 2.0, 3.0))
        self.assertNotEqual(p, q)
