import math
from unittest import TestCase

from mappyproj import build_crs, transform
from mappyproj.constructs.point import Point
from mappyproj.projections import PROJECTIONS, get_projection
from mappyproj.projections.lcc import LambertConformalConic
from mappyproj.utils.exceptions import ConfigurationError, DomainError, ParseError

# (definition, geographic ellipsoid, projected points far outside the range)
OUT_OF_RANGE = {
    "merc": ("+proj=merc +ellps=WGS84", "WGS84", [(1e10, -1e10), (-1e10, -1e10)]),
    "merc sphere": ("+proj=merc +a=6378137 +b=6378137", "WGS84", [(1e10, -1e10), (-1e10, -1e10)]),
    "mill": ("+proj=mill +lon_0=0 +ellps=sphere", "sphere", [(1e10, 1e10), (-1e10, 1e10)]),
    "tmerc sphere": (
        "+proj=tmerc +lat_0=0 +lon_0=0 +ellps=sphere",
        "sphere",
        [(1e10, 1e10), (-1e10, -1e10)],
    ),
    "omerc": (
        "+proj=omerc +lat_0=4 +lonc=115 +alpha=53.31582047222222 +k=0.99984 +ellps=WGS84",
        "WGS84",
        [(1e10, -1e10), (-1e10, 1e10)],
    ),
    "somerc": (
        "+proj=somerc +lat_0=46.95240555555556 +lon_0=7.439583333333333 +k_0=1 "
        "+x_0=600000 +y_0=200000 +ellps=bessel",
        "bessel",
        [(1e10, 1e10), (-1e10, 1e10)],
    ),
    "gstmerc": (
        "+proj=gstmerc +lat_0=-21.11666666666667 +lon_0=55.53333333333333 +k_0=1 "
        "+x_0=160000 +y_0=50000 +ellps=intl",
        "intl",
        [(1e10, 1e10), (1e10, -1e10), (-1e10, 1e10), (-1e10, -1e10)],
    ),
}

# (definition, geographic ellipsoid, lon, lat)
ROUND_TRIPS = {
    "merc": ("+proj=merc +lat_ts=10 +lon_0=5 +ellps=WGS84", "WGS84", 12.5, 41.9),
    "tmerc": (
        "+proj=tmerc +lat_0=49 +lon_0=-2 +k=0.9996012717 +x_0=400000 +y_0=-100000 +ellps=airy",
        "airy",
        -1.2,
        52.4,
    ),
    "utm": ("+proj=utm +zone=33 +ellps=WGS84", "WGS84", 16.37, 48.21),
    "utm south": ("+proj=utm +zone=56 +south +ellps=GRS80", "GRS80", 151.21, -33.87),
    "aea": (
        "+proj=aea +lat_1=29.5 +lat_2=45.5 +lat_0=23 +lon_0=-96 +ellps=GRS80",
        "GRS80",
        -77.0,
        38.9,
    ),
    "lcc": (
        "+proj=lcc +lat_1=33 +lat_2=45 +lat_0=39 +lon_0=-96 +ellps=GRS80",
        "GRS80",
        -104.99,
        39.74,
    ),
    "lcc 1sp": ("+proj=lcc +lat_1=46.8 +lat_0=46.8 +lon_0=2.3 +ellps=clrk80", "clrk80", 2.35, 48.86),
    "laea": (
        "+proj=laea +lat_0=52 +lon_0=10 +x_0=4321000 +y_0=3210000 +ellps=GRS80",
        "GRS80",
        -3.7,
        40.4,
    ),
    "laea north pole": ("+proj=laea +lat_0=90 +lon_0=0 +ellps=WGS84", "WGS84", 45.0, 70.0),
    "laea sphere": ("+proj=laea +lat_0=20 +lon_0=-40 +ellps=sphere", "sphere", -10.0, 35.0),
    "eqdc": (
        "+proj=eqdc +lat_1=20 +lat_2=60 +lat_0=40 +lon_0=-96 +ellps=GRS80",
        "GRS80",
        -120.0,
        50.0,
    ),
    "poly": ("+proj=poly +lat_0=0 +lon_0=-54 +ellps=intl", "intl", -50.0, -15.0),
    "equi": ("+proj=equi +lat_0=30 +lon_0=10 +ellps=sphere", "sphere", 25.0, 45.0),
    "eqc": ("+proj=eqc +lat_ts=30 +lon_0=0 +ellps=WGS84", "WGS84", -70.0, -20.0),
    "stere north": (
        "+proj=stere +lat_0=90 +lat_ts=70 +lon_0=-45 +k=1 +ellps=WGS84",
        "WGS84",
        -40.0,
        75.0,
    ),
    "stere south": ("+proj=stere +lat_0=-90 +lat_ts=-71 +lon_0=0 +ellps=WGS84", "WGS84", 120.0, -80.0),
    "stere polar k": ("+proj=stere +lat_0=90 +lon_0=0 +k=0.994 +ellps=WGS84", "WGS84", 10.0, 80.0),
    "stere oblique": ("+proj=stere +lat_0=40 +lon_0=-100 +ellps=clrk66", "clrk66", -90.0, 35.0),
    "stere equatorial": ("+proj=stere +lat_0=0 +lon_0=0 +ellps=WGS84", "WGS84", 20.0, 10.0),
    "stere sphere": ("+proj=stere +lat_0=40 +lon_0=-100 +ellps=sphere", "sphere", -90.0, 35.0),
    "stere sphere equatorial": ("+proj=stere +lat_0=0 +lon_0=0 +ellps=sphere", "sphere", 20.0, 10.0),
    "stere sphere polar": ("+proj=stere +lat_0=-90 +lon_0=0 +ellps=sphere", "sphere", 60.0, -70.0),
    "stere sphere north polar": ("+proj=stere +lat_0=90 +lon_0=0 +ellps=sphere", "sphere", 100.0, 80.0),
    "sterea": (
        "+proj=sterea +lat_0=52.15616055555555 +lon_0=5.38763888888889 +k=0.9999079 "
        "+x_0=155000 +y_0=463000 +ellps=bessel",
        "bessel",
        4.9,
        52.37,
    ),
    "gauss": ("+proj=gauss +lat_0=45 +lon_0=25 +ellps=krass", "krass", 26.1, 44.43),
    "ortho": ("+proj=ortho +lat_0=40 +lon_0=-100 +ellps=sphere", "sphere", -80.0, 30.0),
    "gnom": ("+proj=gnom +lat_0=90 +lon_0=0 +ellps=sphere", "sphere", 30.0, 60.0),
    "aeqd": ("+proj=aeqd +lat_0=40 +lon_0=-100 +ellps=sphere", "sphere", 20.0, -30.0),
    "moll": ("+proj=moll +lon_0=0 +ellps=sphere", "sphere", 100.0, 75.0),
    "vandg": ("+proj=vandg +lon_0=0 +ellps=sphere", "sphere", -120.0, 50.0),
    "mill": ("+proj=mill +lon_0=0 +ellps=sphere", "sphere", 150.0, -60.0),
    "sinu": ("+proj=sinu +lon_0=0 +ellps=WGS84", "WGS84", 30.0, -40.0),
    "sinu sphere": ("+proj=sinu +lon_0=0 +ellps=sphere", "sphere", 30.0, -40.0),
    "cea": ("+proj=cea +lat_ts=30 +lon_0=0 +ellps=WGS84", "WGS84", 90.0, 60.0),
    "cea sphere": ("+proj=cea +lon_0=0 +ellps=sphere", "sphere", 90.0, 60.0),
    "cass": (
        "+proj=cass +lat_0=10.44166666666667 +lon_0=-61.33333333333334 +x_0=86501.46392052001 "
        "+y_0=65379.0134283 +ellps=clrk80",
        "clrk80",
        -61.5,
        10.65,
    ),
    "cass sphere": ("+proj=cass +lat_0=0 +lon_0=0 +ellps=sphere", "sphere", 2.0, 45.0),
    "omerc": (
        "+proj=omerc +lat_0=4 +lonc=115 +alpha=53.31582047222222 +k=0.99984 "
        "+x_0=590476.87 +y_0=442857.65 +ellps=evrstSS",
        "evrstSS",
        116.07,
        5.98,
    ),
    "omerc two point": (
        "+proj=omerc +lat_0=45 +lat_1=40 +lon_1=-100 +lat_2=50 +lon_2=-90 +k=1 +ellps=WGS84",
        "WGS84",
        -95.0,
        46.0,
    ),
    "somerc": (
        "+proj=somerc +lat_0=46.95240555555556 +lon_0=7.439583333333333 +k_0=1 "
        "+x_0=600000 +y_0=200000 +ellps=bessel",
        "bessel",
        8.54,
        47.37,
    ),
    "gstmerc": (
        "+proj=gstmerc +lat_0=-21.11666666666667 +lon_0=55.53333333333333 +k_0=1 "
        "+x_0=160000 +y_0=50000 +ellps=intl",
        "intl",
        55.45,
        -20.88,
    ),
    "nzmg": ("+proj=nzmg +ellps=intl", "intl", 174.76, -36.85),
}


class TestProjectionRegistry(TestCase):
    def test_every_family_is_registered(self):
        expected = {
            "longlat", "identity", "merc", "tmerc", "utm", "aea", "lcc", "laea", "eqdc",
            "poly", "equi", "eqc", "stere", "sterea", "gauss", "ortho", "sinu", "moll",
            "gnom", "vandg", "cea", "cass", "omerc", "somerc", "gstmerc", "nzmg", "mill",
            "aeqd", "geocent",
        }

        self.assertEqual(set(PROJECTIONS), expected)

    def test_get_projection(self):
        self.assertIs(get_projection("lcc"), LambertConformalConic)

        with self.assertRaises(ParseError):
            get_projection("bonne")

    def test_crs_instantiates_its_family(self):
        for name, (definition, _, _, _) in ROUND_TRIPS.items():
            with self.subTest(name=name):
                crs = build_crs(definition)
                self.assertIsInstance(crs.projection, PROJECTIONS[crs.proj_name])


class TestProjectionRoundTrips(TestCase):
    def assertRoundTrip(self, definition: str, ellps: str, lon: float, lat: float):
        geographic = build_crs(f"+proj=longlat +ellps={ellps}")
        projected = build_crs(definition)

        p = transform(geographic, projected, Point(lon, lat))
        self.assertTrue(math.isfinite(p.x) and math.isfinite(p.y))
        self.assertFalse(
            math.isclose(p.x, lon) and math.isclose(p.y, lat),
            msg="forward left the point unchanged",
        )

        transform(projected, geographic, p)
        self.assertAlmostEqual(p.x, lon, places=6)
        self.assertAlmostEqual(p.y, lat, places=6)
        self.assertIsNone(p.z)

    def test_round_trips(self):
        for name, (definition, ellps, lon, lat) in ROUND_TRIPS.items():
            with self.subTest(name=name):
                self.assertRoundTrip(definition, ellps, lon, lat)

    def test_origin_maps_to_false_offsets(self):
        cases = [
            ("+proj=tmerc +lat_0=49 +lon_0=-2 +x_0=400000 +y_0=-100000 +ellps=airy", "airy", -2.0, 49.0),
            ("+proj=lcc +lat_1=33 +lat_2=45 +lat_0=39 +lon_0=-96 +x_0=100 +y_0=200 +ellps=GRS80", "GRS80", -96.0, 39.0),
            ("+proj=laea +lat_0=52 +lon_0=10 +x_0=4321000 +y_0=3210000 +ellps=GRS80", "GRS80", 10.0, 52.0),
            ("+proj=merc +lon_0=5 +x_0=10 +y_0=20 +ellps=WGS84", "WGS84", 5.0, 0.0),
            ("+proj=stere +lat_0=40 +lon_0=-100 +x_0=7 +y_0=8 +ellps=clrk66", "clrk66", -100.0, 40.0),
        ]
        for definition, ellps, lon, lat in cases:
            with self.subTest(definition=definition):
                crs = build_crs(definition)
                p = transform(build_crs(f"+proj=longlat +ellps={ellps}"), crs, Point(lon, lat))
                self.assertAlmostEqual(p.x, crs.x0, places=4)
                self.assertAlmostEqual(p.y, crs.y0, places=4)

    def test_gauss_outputs_conformal_sphere_radians(self):
        crs = build_crs("+proj=gauss +lat_0=45 +lon_0=25 +ellps=krass")

        p = transform(build_crs("+proj=longlat +ellps=krass"), crs, Point(25.0, 45.0))

        self.assertAlmostEqual(p.x, 0.0, places=12)
        self.assertAlmostEqual(p.y, crs.projection.phic0, places=12)
        self.assertLess(abs(p.y), math.pi / 2)

    def test_nzmg_offsets_are_fixed(self):
        crs = build_crs("+proj=nzmg +lat_0=0 +lon_0=0 +x_0=0 +y_0=0 +ellps=intl")

        self.assertEqual(crs.x0, 2510000.0)
        self.assertEqual(crs.y0, 6023150.0)
        self.assertAlmostEqual(crs.long0, math.radians(173.0))

    def test_geocent(self):
        geographic = build_crs("+proj=longlat +datum=WGS84")
        geocent = build_crs("+proj=geocent +datum=WGS84")

        p = transform(geographic, geocent, Point(0.0, 0.0, 0.0))
        self.assertAlmostEqual(p.x, 6378137.0, places=6)
        self.assertAlmostEqual(p.y, 0.0, places=6)
        self.assertAlmostEqual(p.z, 0.0, places=6)

        p = transform(geographic, geocent, Point(90.0, 0.0))
        self.assertAlmostEqual(p.y, 6378137.0, places=6)
        self.assertIsNotNone(p.z)

        transform(geocent, geographic, p)
        self.assertAlmostEqual(p.x, 90.0, places=9)
        self.assertAlmostEqual(p.y, 0.0, places=9)

    def test_identity(self):
        local = build_crs("+proj=identity")
        p = Point(123.4, -56.7)

        transform(local, local, p)

        self.assertAlmostEqual(p.x, 123.4)
        self.assertAlmostEqual(p.y, -56.7)

    def test_longlat_to_longlat(self):
        wgs84 = build_crs("+proj=longlat +ellps=WGS84")
        p = transform(wgs84, build_crs("+proj=latlong +ellps=WGS84"), Point(-122.4, 37.8))

        self.assertAlmostEqual(p.x, -122.4, places=12)
        self.assertAlmostEqual(p.y, 37.8, places=12)


class TestProjectionErrors(TestCase):
    def test_degenerate_conics(self):
        for proj in ("lcc", "aea", "eqdc"):
            with self.subTest(proj=proj):
                with self.assertRaises(ConfigurationError):
                    build_crs(f"+proj={proj} +lat_1=30 +lat_2=-30 +ellps=WGS84")

    def test_omerc_needs_a_central_line(self):
        with self.assertRaises(ConfigurationError):
            build_crs("+proj=omerc +lat_0=4 +lonc=115 +ellps=WGS84")

    def test_mercator_pole(self):
        wgs84 = build_crs("+proj=longlat +ellps=WGS84")
        merc = build_crs("+proj=merc +ellps=WGS84")

        with self.assertRaises(DomainError):
            transform(wgs84, merc, Point(0.0, 90.0))

    def test_far_side(self):
        sphere = build_crs("+proj=longlat +ellps=sphere")
        for definition in ("+proj=ortho +lat_0=0 +lon_0=0 +ellps=sphere", "+proj=gnom +lat_0=0 +lon_0=0 +ellps=sphere"):
            with self.subTest(definition=definition):
                with self.assertRaises(DomainError):
                    transform(sphere, build_crs(definition), Point(120.0, 0.0))

    def test_point_outside_mollweide_ellipse(self):
        sphere = build_crs("+proj=longlat +ellps=sphere")

        with self.assertRaises(DomainError):
            transform(build_crs("+proj=moll +ellps=sphere"), sphere, Point(0.0, 1.0e8))

    def test_somerc_pole(self):
        bessel = build_crs("+proj=longlat +ellps=bessel")
        somerc = build_crs(OUT_OF_RANGE["somerc"][0])

        for lat in (90.0, -90.0):
            with self.subTest(lat=lat):
                with self.assertRaises(DomainError):
                    transform(bessel, somerc, Point(0.0, lat))

    def test_inverse_far_outside_the_range(self):
        for name, (definition, ellps, points) in OUT_OF_RANGE.items():
            projected = build_crs(definition)
            geographic = build_crs(f"+proj=longlat +ellps={ellps}")
            for x, y in points:
                with self.subTest(name=name, x=x, y=y):
                    with self.assertRaises(DomainError):
                        transform(projected, geographic, Point(x, y))

    def test_spherical_polar_stereographic_keeps_the_hemisphere(self):
        sphere = build_crs("+proj=longlat +ellps=sphere")
        for lat_0, lat in ((90.0, 70.0), (-90.0, -70.0)):
            with self.subTest(lat_0=lat_0):
                crs = build_crs(f"+proj=stere +lat_0={lat_0} +lon_0=0 +ellps=sphere")
                p = transform(crs, sphere, transform(sphere, crs, Point(10.0, lat)))

                self.assertAlmostEqual(p.y, lat, places=9)
                self.assertAlmostEqual(p.x, 10.0, places=9)
