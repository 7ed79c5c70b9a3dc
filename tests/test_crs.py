import math
from unittest import TestCase

from mappyproj import Crs, CrsDefinition, build_crs, parse_definition
from mappyproj.constructs.datum import DatumType
from mappyproj.projections.merc import Mercator
from mappyproj.projections.tmerc import UniversalTransverseMercator
from mappyproj.utils.crs import LATLON_CRS, XY_CRS
from mappyproj.utils.exceptions import ConfigurationError, ParseError
from mappyproj.utils.registry import CrsRegistry
from tests import get_test_dir


class TestCrs(TestCase):
    def test_builtin_wgs84(self):
        crs = build_crs("EPSG:4326")

        self.assertTrue(crs.ready)
        self.assertTrue(crs.is_geographic)
        self.assertFalse(crs.is_web_mercator)
        self.assertEqual(crs.srs_code, "EPSG:4326")
        self.assertEqual(crs.a, 6378137.0)
        self.assertAlmostEqual(crs.es, 0.0066943799901413165, places=12)
        self.assertEqual(crs.datum.datum_type, DatumType.WGS84)
        self.assertEqual(crs.axis, "enu")

    def test_builtin_code_forms(self):
        for code in (
            "epsg:4326",
            "urn:ogc:def:crs:EPSG::4326",
            "http://www.opengis.net/gml/srs/epsg.xml#4326",
        ):
            with self.subTest(code=code):
                crs = build_crs(code)
                self.assertEqual(crs.srs_code, "EPSG:4326")
                self.assertTrue(crs.is_geographic)

    def test_web_mercator_aliases(self):
        for code in ("EPSG:3785", "EPSG:3857", "GOOGLE", "EPSG:900913", "EPSG:102113"):
            with self.subTest(code=code):
                crs = build_crs(code)
                self.assertTrue(crs.is_web_mercator)
                self.assertTrue(crs.sphere)
                self.assertEqual(crs.datum.datum_type, DatumType.NO_DATUM)
                self.assertIsInstance(crs.projection, Mercator)

    def test_web_mercator_is_recognised_without_a_code(self):
        crs = build_crs("+proj=merc +a=6378137 +b=6378137 +nadgrids=@null +units=m")

        self.assertIsNone(crs.srs_code)
        self.assertTrue(crs.is_web_mercator)

    def test_web_mercator_needs_an_unshifted_datum(self):
        self.assertTrue(build_crs("+proj=merc +a=6378137 +b=6378137").is_web_mercator)
        self.assertFalse(build_crs("+proj=merc +a=6378137 +b=6378137 +towgs84=1,2,3").is_web_mercator)
        self.assertFalse(build_crs("+proj=merc +a=6371000 +b=6371000").is_web_mercator)
        self.assertFalse(build_crs("+proj=merc +ellps=WGS84").is_web_mercator)

    def test_utm_zone_derivation(self):
        crs = build_crs("+proj=utm +zone=33 +ellps=WGS84")

        self.assertIsInstance(crs.projection, UniversalTransverseMercator)
        self.assertAlmostEqual(crs.long0, math.radians(15))
        self.assertEqual(crs.lat0, 0.0)
        self.assertEqual(crs.x0, 500000.0)
        self.assertEqual(crs.y0, 0.0)
        self.assertEqual(crs.k0, 0.9996)

        south = build_crs("+proj=utm +zone=33 +south +ellps=WGS84")
        self.assertEqual(south.y0, 10000000.0)

    def test_utm_zone_errors(self):
        with self.assertRaises(ConfigurationError):
            build_crs("+proj=utm +ellps=WGS84")

        with self.assertRaises(ConfigurationError):
            build_crs("+proj=utm +zone=61 +ellps=WGS84")

    def test_named_datum_overrides_ellipsoid(self):
        crs = build_crs("+proj=longlat +ellps=WGS84 +datum=OSGB36")

        self.assertEqual(crs.a, 6377563.396)
        self.assertEqual(crs.datum.datum_type, DatumType.SEVEN_PARAM)
        self.assertEqual(crs.datum_name, "Airy 1830")

    def test_rf_derives_b(self):
        crs = build_crs("+proj=longlat +a=6378388 +rf=297")

        self.assertAlmostEqual(crs.b, 6378388.0 * (1.0 - 1.0 / 297.0), places=6)
        self.assertFalse(crs.sphere)

    def test_sphere_from_equal_axes(self):
        crs = build_crs("+proj=merc +a=6371000 +b=6371000")

        self.assertTrue(crs.sphere)
        self.assertEqual(crs.es, 0.0)
        self.assertEqual(crs.e, 0.0)

    def test_authalic_radius(self):
        crs = build_crs("+proj=laea +ellps=WGS84 +R_A")

        self.assertTrue(crs.sphere)
        self.assertEqual(crs.es, 0.0)
        self.assertAlmostEqual(crs.a, 6371007.18, delta=0.1)

    def test_defaults(self):
        crs = build_crs("+proj=merc")

        self.assertEqual(crs.k0, 1.0)
        self.assertEqual(crs.x0, 0.0)
        self.assertEqual(crs.y0, 0.0)
        self.assertEqual(crs.to_meter, 1.0)
        self.assertEqual(crs.axis, "enu")
        self.assertEqual(crs.a, 6378137.0)

    def test_units_resolve_to_meter(self):
        self.assertEqual(build_crs("+proj=merc +units=km").to_meter, 1000.0)
        self.assertAlmostEqual(build_crs("+proj=merc +units=us-ft").to_meter, 0.3048006096012192)
        self.assertEqual(build_crs("+proj=merc +units=ft +to_meter=2").to_meter, 2.0)

    def test_definition_is_not_mutated(self):
        definition = CrsDefinition(proj_name="utm", zone=10, ellps="WGS84")
        crs = Crs(definition)

        self.assertIsNone(definition.x0)
        self.assertIsNone(definition.long0)
        self.assertIs(crs.definition, definition)
        self.assertEqual(crs.x0, 500000.0)

    def test_from_wkt_file(self):
        wkt = (get_test_dir() / "test_assets" / "british_national_grid.wkt").read_text()
        crs = build_crs(wkt)

        self.assertEqual(crs.proj_name, "tmerc")
        self.assertEqual(crs.srs_code, "OSGB 1936 / British National Grid")
        self.assertEqual(crs.datum.datum_type, DatumType.SEVEN_PARAM)
        self.assertEqual(crs.x0, 400000.0)
        self.assertEqual(crs.y0, -100000.0)

    def test_google_wkt_has_no_datum(self):
        wkt = (get_test_dir() / "test_assets" / "google_mercator.wkt").read_text()
        crs = build_crs(wkt)

        self.assertTrue(crs.sphere)
        self.assertTrue(crs.is_web_mercator)
        self.assertEqual(crs.datum.datum_type, DatumType.NO_DATUM)

    def test_parse_definition_detects_format(self):
        self.assertEqual(parse_definition("+proj=merc").proj_name, "merc")
        self.assertEqual(
            parse_definition(
                'GEOGCS["WGS 84",DATUM["WGS_1984",SPHEROID["WGS 84",6378137,298.257223563]]]'
            ).proj_name,
            "longlat",
        )
        with self.assertRaises(ParseError):
            parse_definition("EPSG:4326")

    def test_user_registry(self):
        registry = CrsRegistry(
            {"EPSG:2193": "+proj=tmerc +lat_0=0 +lon_0=173 +k=0.9996 +x_0=1600000 "
                          "+y_0=10000000 +ellps=GRS80 +units=m"}
        )

        crs = build_crs("epsg:2193", registry=registry)

        self.assertEqual(crs.srs_code, "EPSG:2193")
        self.assertEqual(crs.x0, 1600000.0)

        with self.assertRaises(ParseError):
            build_crs("EPSG:2193")

    def test_parse_errors(self):
        with self.assertRaises(ParseError):
            build_crs("this is not a CRS")

        with self.assertRaises(ParseError):
            build_crs("+proj=bogus +ellps=WGS84")

        with self.assertRaises(ParseError):
            build_crs("+proj=merc +k=big")

        with self.assertRaises(ParseError):
            build_crs(CrsDefinition())

    def test_illegal_axis_in_definition(self):
        with self.assertRaises(ConfigurationError):
            build_crs(CrsDefinition(proj_name="longlat", axis="nnu"))

    def test_wrong_type(self):
        with self.assertRaises(TypeError):
            build_crs(4326)

    def test_module_constants(self):
        self.assertTrue(LATLON_CRS.is_geographic)
        self.assertTrue(XY_CRS.is_web_mercator)
        self.assertEqual(XY_CRS.srs_code, "EPSG:3857")
