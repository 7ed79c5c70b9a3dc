import math
from unittest import TestCase

from pyproj import Transformer as PyprojTransformer

from mappyproj import build_crs, transform
from mappyproj.constructs.datum import Datum, DatumType
from mappyproj.constructs.ellipsoid import Ellipsoid
from mappyproj.constructs.point import Point
from mappyproj.transform.datum_transform import compare_datums, datum_transform
from mappyproj.utils.constants import SEC_TO_RAD
from mappyproj.utils.crs import LATLON_CRS
from mappyproj.utils.exceptions import ConfigurationError, DomainError, GridShiftUnsupported

OSGB36_TOWGS84 = (446.448, -125.157, 542.060, 0.1502, 0.2470, 0.8421, -20.4894)

BNG_PROJ4 = (
    "+proj=tmerc +lat_0=49 +lon_0=-2 +k=0.9996012717 +x_0=400000 +y_0=-100000 "
    "+ellps=airy +towgs84=446.448,-125.157,542.060,0.1502,0.2470,0.8421,-20.4894 "
    "+units=m +no_defs"
)


def wgs84_datum(**kwargs) -> Datum:
    e = Ellipsoid.from_name("WGS84")
    return Datum.from_params(e.a, e.b, e.es, e.ep2, **kwargs)


def airy_datum(**kwargs) -> Datum:
    e = Ellipsoid.from_name("airy")
    return Datum.from_params(e.a, e.b, e.es, e.ep2, **kwargs)


class TestDatum(TestCase):
    def test_classification(self):
        self.assertEqual(wgs84_datum().datum_type, DatumType.WGS84)
        self.assertEqual(wgs84_datum(datum_params=[0, 0, 0]).datum_type, DatumType.WGS84)
        self.assertEqual(wgs84_datum(datum_params=[1, 2, 3]).datum_type, DatumType.THREE_PARAM)
        self.assertEqual(
            airy_datum(datum_params=list(OSGB36_TOWGS84)).datum_type, DatumType.SEVEN_PARAM
        )
        self.assertEqual(wgs84_datum(datum_code="none").datum_type, DatumType.NO_DATUM)
        self.assertEqual(wgs84_datum(nadgrids="@conus").datum_type, DatumType.GRID_SHIFT)
        self.assertEqual(wgs84_datum(nadgrids="@null").datum_type, DatumType.WGS84)

    def test_towgs84_length_is_checked(self):
        for params in ([5.0], [1.0, 2.0], [1.0, 2.0, 3.0, 4.0], [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]):
            with self.subTest(params=params):
                with self.assertRaises(ConfigurationError):
                    wgs84_datum(datum_params=params)

    def test_seven_param_units(self):
        datum = airy_datum(datum_params=list(OSGB36_TOWGS84))

        dx, dy, dz, rx, ry, rz, m = datum.params
        self.assertEqual((dx, dy, dz), OSGB36_TOWGS84[:3])
        self.assertAlmostEqual(rx, 0.1502 * SEC_TO_RAD)
        self.assertAlmostEqual(ry, 0.2470 * SEC_TO_RAD)
        self.assertAlmostEqual(rz, 0.8421 * SEC_TO_RAD)
        self.assertAlmostEqual(m, 1.0 - 20.4894e-6)

    def test_geodetic_to_geocentric(self):
        datum = wgs84_datum()

        p = datum.geodetic_to_geocentric(Point(0.0, 0.0, 0.0))
        self.assertAlmostEqual(p.x, 6378137.0, places=6)
        self.assertAlmostEqual(p.y, 0.0, places=6)
        self.assertAlmostEqual(p.z, 0.0, places=6)

        p = datum.geodetic_to_geocentric(Point(0.0, math.pi / 2, 0.0))
        self.assertAlmostEqual(p.x, 0.0, places=6)
        self.assertAlmostEqual(p.z, datum.b, places=6)

    def test_geocentric_round_trip(self):
        datum = wgs84_datum()
        for lon, lat, h in ((0.3, 0.7, 120.0), (-2.5, -1.1, -30.0), (3.0, 1.5, 8000.0)):
            with self.subTest(lon=lon, lat=lat, h=h):
                p = datum.geodetic_to_geocentric(Point(lon, lat, h))
                datum.geocentric_to_geodetic(p)
                self.assertAlmostEqual(p.x, lon, places=12)
                self.assertAlmostEqual(p.y, lat, places=12)
                self.assertAlmostEqual(p.z, h, places=5)

    def test_latitude_is_clamped_just_past_the_pole(self):
        datum = wgs84_datum()

        clamped = datum.geodetic_to_geocentric(Point(0.0, math.pi / 2 * 1.0005, 0.0))
        pole = datum.geodetic_to_geocentric(Point(0.0, math.pi / 2, 0.0))
        self.assertAlmostEqual(clamped.z, pole.z, places=6)

        with self.assertRaises(DomainError):
            datum.geodetic_to_geocentric(Point(0.0, 2.0, 0.0))

    def test_earth_centre(self):
        datum = wgs84_datum()

        p = datum.geocentric_to_geodetic(Point(0.0, 0.0, 0.0))

        self.assertEqual(p.y, math.pi / 2)
        self.assertEqual(p.z, -datum.b)

    def test_helmert_round_trip(self):
        datum = airy_datum(datum_params=list(OSGB36_TOWGS84))
        start = Point(3980000.0, -8000.0, 4970000.0)

        p = datum.geocentric_to_wgs84(start.copy())
        self.assertNotAlmostEqual(p.x, start.x, places=0)
        datum.geocentric_from_wgs84(p)

        self.assertAlmostEqual(p.x, start.x, places=2)
        self.assertAlmostEqual(p.y, start.y, places=2)
        self.assertAlmostEqual(p.z, start.z, places=2)


class TestDatumTransform(TestCase):
    def test_equal_datums(self):
        self.assertTrue(compare_datums(wgs84_datum(), wgs84_datum(datum_params=[0, 0, 0])))
        self.assertTrue(compare_datums(wgs84_datum(datum_params=[1, 2, 3]), wgs84_datum(datum_params=[1, 2, 3])))
        self.assertFalse(compare_datums(wgs84_datum(datum_params=[1, 2, 3]), wgs84_datum(datum_params=[1, 2, 4])))
        self.assertFalse(compare_datums(wgs84_datum(), airy_datum()))

    def test_identity_transform_leaves_point_untouched(self):
        p = Point(0.1, 0.8)

        datum_transform(wgs84_datum(), wgs84_datum(), p)

        self.assertEqual(p, Point(0.1, 0.8))

    def test_no_datum_is_skipped(self):
        p = Point(0.1, 0.8)

        datum_transform(wgs84_datum(datum_code="none"), airy_datum(datum_params=list(OSGB36_TOWGS84)), p)

        self.assertEqual(p, Point(0.1, 0.8))

    def test_grid_shift_is_unsupported(self):
        with self.assertRaises(GridShiftUnsupported):
            datum_transform(wgs84_datum(nadgrids="@conus"), wgs84_datum(), Point(0.1, 0.8))

    def test_nad27_transform_is_unsupported(self):
        nad27 = build_crs("+proj=longlat +datum=NAD27")

        self.assertEqual(nad27.datum.datum_type, DatumType.GRID_SHIFT)
        with self.assertRaises(GridShiftUnsupported):
            transform(nad27, LATLON_CRS, Point(-100.0, 40.0))

    def test_three_param_shift_round_trip(self):
        source = wgs84_datum(datum_params=[-199.87, 74.79, 246.62])
        dest = wgs84_datum()
        p = Point(0.4, 0.65, 10.0)

        datum_transform(source, dest, p)
        self.assertNotAlmostEqual(p.y, 0.65, places=9)
        datum_transform(dest, source, p)

        self.assertAlmostEqual(p.x, 0.4, places=11)
        self.assertAlmostEqual(p.y, 0.65, places=11)
        self.assertAlmostEqual(p.z, 10.0, places=4)

    def test_osgb36_matches_pyproj(self):
        reference = PyprojTransformer.from_crs(
            "+proj=longlat +datum=WGS84 +no_defs", BNG_PROJ4, always_xy=True
        )
        bng = build_crs(BNG_PROJ4)

        for lon, lat in ((-0.1276, 51.5072), (-3.1883, 55.9533), (-4.2518, 55.8642)):
            with self.subTest(lon=lon, lat=lat):
                expected_x, expected_y = reference.transform(lon, lat)
                p = transform(LATLON_CRS, bng, Point(lon, lat))
                self.assertAlmostEqual(p.x, expected_x, delta=0.01)
                self.assertAlmostEqual(p.y, expected_y, delta=0.01)

    def test_osgb36_round_trip(self):
        bng = build_crs(BNG_PROJ4)
        p = transform(LATLON_CRS, bng, Point(-0.1276, 51.5072))

        self.assertAlmostEqual(p.x, 530000, delta=2000)
        self.assertAlmostEqual(p.y, 180000, delta=2000)

        transform(bng, LATLON_CRS, p)
        self.assertAlmostEqual(p.x, -0.1276, places=6)
        self.assertAlmostEqual(p.y, 51.5072, places=6)
        self.assertIsNone(p.z)
