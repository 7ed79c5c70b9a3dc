from itertools import permutations, product
from unittest import TestCase
from unittest.mock import Mock

from mappyproj import build_crs, transform
from mappyproj.constructs.point import Point
from mappyproj.readers.proj4_reader import is_legal_axis
from mappyproj.transform.axis import denormalize, normalize
from mappyproj.utils.exceptions import ConfigurationError


def legal_axis_codes():
    groups = ("ew", "ns", "ud")
    codes = []
    for order in permutations(range(3)):
        for signs in product((0, 1), repeat=3):
            codes.append("".join(groups[slot][sign] for slot, sign in zip(order, signs)))
    return codes


class TestAxis(TestCase):
    def test_there_are_48_legal_codes(self):
        codes = legal_axis_codes()

        self.assertEqual(len(set(codes)), 48)
        for code in codes:
            self.assertTrue(is_legal_axis(code), msg=code)

    def test_neu_swaps_x_and_y(self):
        crs = Mock(axis="neu")
        p = Point(51.5, -0.12)

        normalize(crs, p)

        self.assertEqual(p, Point(-0.12, 51.5))

    def test_negated_axes(self):
        crs = Mock(axis="wsd")
        p = Point(1.0, 2.0, 3.0)

        normalize(crs, p)
        self.assertEqual(p, Point(-1.0, -2.0, -3.0))

        denormalize(crs, p)
        self.assertEqual(p, Point(1.0, 2.0, 3.0))

    def test_enu_is_untouched(self):
        p = Point(1.0, 2.0)

        self.assertIs(normalize(Mock(axis="enu"), p), p)
        self.assertEqual(p, Point(1.0, 2.0))

    def test_vertical_axis_first(self):
        crs = Mock(axis="une")
        p = Point(100.0, 2.0, 1.0)

        normalize(crs, p)

        self.assertEqual(p, Point(1.0, 2.0, 100.0))

    def test_3d_round_trip_for_every_code(self):
        for code in legal_axis_codes():
            with self.subTest(code=code):
                crs = Mock(axis=code)
                p = Point(1.0, 2.0, 3.0)

                denormalize(crs, p)
                normalize(crs, p)

                self.assertEqual(p, Point(1.0, 2.0, 3.0))

    def test_2d_round_trip_when_vertical_is_last(self):
        for code in legal_axis_codes():
            if code[2] not in "ud":
                continue
            with self.subTest(code=code):
                crs = Mock(axis=code)
                p = Point(1.0, 2.0)

                denormalize(crs, p)
                self.assertIsNone(p.z)
                normalize(crs, p)

                self.assertEqual(p, Point(1.0, 2.0))

    def test_unknown_letter(self):
        with self.assertRaises(ConfigurationError):
            normalize(Mock(axis="enx"), Point(1.0, 2.0))

        with self.assertRaises(ConfigurationError):
            denormalize(Mock(axis="xyz"), Point(1.0, 2.0))

    def test_transform_honours_axis_order(self):
        lat_lon = build_crs("+proj=longlat +ellps=WGS84 +axis=neu")
        merc = build_crs("+proj=merc +ellps=WGS84")

        swapped = transform(lat_lon, merc, Point(45.0, 10.0))
        plain = transform(build_crs("+proj=longlat +ellps=WGS84"), merc, Point(10.0, 45.0))

        self.assertAlmostEqual(swapped.x, plain.x, places=6)
        self.assertAlmostEqual(swapped.y, plain.y, places=6)

        back = transform(merc, lat_lon, swapped)
        self.assertAlmostEqual(back.x, 45.0, places=9)
        self.assertAlmostEqual(back.y, 10.0, places=9)
