from unittest import TestCase

from pyproj import Proj

from mappyproj import build_crs, transform
from mappyproj.constructs.point import Point
from tests import get_test_dir

# definitions that PROJ evaluates with the same formulas, so both sides agree to well under a centimetre
REFERENCE_CASES = {
    "merc": ("+proj=merc +lat_ts=10 +lon_0=5 +ellps=WGS84", "WGS84", [(12.5, 41.9), (-170.0, -60.0)]),
    "tmerc": (
        "+proj=tmerc +lat_0=49 +lon_0=-2 +k=0.9996012717 +x_0=400000 +y_0=-100000 +ellps=airy",
        "airy",
        [(-1.2, 52.4), (-3.5, 56.0)],
    ),
    "utm": ("+proj=utm +zone=33 +ellps=WGS84", "WGS84", [(16.37, 48.21), (13.4, 52.52)]),
    "lcc": (
        "+proj=lcc +lat_1=33 +lat_2=45 +lat_0=39 +lon_0=-96 +x_0=0 +y_0=0 +ellps=GRS80",
        "GRS80",
        [(-104.99, 39.74), (-74.0, 40.71), (-118.24, 34.05)],
    ),
    "aea": (
        "+proj=aea +lat_1=29.5 +lat_2=45.5 +lat_0=23 +lon_0=-96 +x_0=0 +y_0=0 +ellps=GRS80",
        "GRS80",
        [(-77.0, 38.9), (-122.4, 37.8)],
    ),
    "laea": (
        "+proj=laea +lat_0=52 +lon_0=10 +x_0=4321000 +y_0=3210000 +ellps=GRS80",
        "GRS80",
        [(-3.7, 40.4), (24.9, 60.2)],
    ),
    "stere": (
        "+proj=stere +lat_0=90 +lat_ts=70 +lon_0=-45 +k=1 +x_0=0 +y_0=0 +ellps=WGS84",
        "WGS84",
        [(-40.0, 75.0), (100.0, 65.0)],
    ),
    "sterea": (
        "+proj=sterea +lat_0=52.15616055555555 +lon_0=5.38763888888889 +k=0.9999079 "
        "+x_0=155000 +y_0=463000 +ellps=bessel",
        "bessel",
        [(4.9, 52.37), (6.57, 53.22)],
    ),
    "somerc": (
        "+proj=somerc +lat_0=46.95240555555556 +lon_0=7.439583333333333 +k_0=1 "
        "+x_0=600000 +y_0=200000 +ellps=bessel",
        "bessel",
        [(8.54, 47.37), (6.14, 46.2)],
    ),
    "nzmg": (
        "+proj=nzmg +lat_0=-41 +lon_0=173 +x_0=2510000 +y_0=6023150 +ellps=intl",
        "intl",
        [(174.76, -36.85), (172.64, -43.53)],
    ),
}


class TestAgainstPyproj(TestCase):
    def assertMatchesProj(self, definition: str, ellps: str, lon: float, lat: float):
        reference = Proj(definition)
        expected_x, expected_y = reference(lon, lat)

        p = transform(build_crs(f"+proj=longlat +ellps={ellps}"), build_crs(definition), Point(lon, lat))

        self.assertAlmostEqual(p.x, expected_x, delta=0.01)
        self.assertAlmostEqual(p.y, expected_y, delta=0.01)

    def test_forward_matches_proj(self):
        for name, (definition, ellps, points) in REFERENCE_CASES.items():
            for lon, lat in points:
                with self.subTest(name=name, lon=lon, lat=lat):
                    self.assertMatchesProj(definition, ellps, lon, lat)

    def test_inverse_matches_proj(self):
        for name, (definition, ellps, points) in REFERENCE_CASES.items():
            reference = Proj(definition)
            for lon, lat in points:
                with self.subTest(name=name, lon=lon, lat=lat):
                    x, y = reference(lon, lat)
                    p = transform(build_crs(definition), build_crs(f"+proj=longlat +ellps={ellps}"), Point(x, y))
                    self.assertAlmostEqual(p.x, lon, places=7)
                    self.assertAlmostEqual(p.y, lat, places=7)

    def test_wkt_in_us_survey_feet(self):
        wkt = (get_test_dir() / "test_assets" / "colorado_central_ftus.wkt").read_text()
        colorado = build_crs(wkt)
        reference = Proj(
            "+proj=lcc +lat_1=39.75 +lat_2=38.45 +lat_0=37.83333333333334 +lon_0=-105.5 "
            "+x_0=914401.8288036576 +y_0=304800.6096012192 +ellps=GRS80 +units=m"
        )
        nad83 = build_crs("+proj=longlat +datum=NAD83")

        for lon, lat in ((-104.99, 39.74), (-106.82, 39.19)):
            with self.subTest(lon=lon, lat=lat):
                expected_x, expected_y = reference(lon, lat)
                p = transform(nad83, colorado, Point(lon, lat))
                self.assertAlmostEqual(p.x * colorado.to_meter, expected_x, delta=0.01)
                self.assertAlmostEqual(p.y * colorado.to_meter, expected_y, delta=0.01)
