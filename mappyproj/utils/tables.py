"""Read-only lookup tables: ellipsoids, datums, prime meridians, units and
the built-in CRS definitions.

These are process-wide and never mutated at runtime. User supplied
definitions belong in a :class:`mappyproj.utils.registry.CrsRegistry`.
"""

from __future__ import annotations

from typing import Dict, NamedTuple, Optional, Tuple


class EllipsoidDef(NamedTuple):
    """A named ellipsoid; exactly one of ``b`` or ``rf`` is normally set."""

    a: float
    b: Optional[float] = None
    rf: Optional[float] = None
    name: str = ""


class DatumDef(NamedTuple):
    """A named datum: Helmert parameters to WGS84 (or grid names) and its ellipsoid."""

    ellipse: str
    towgs84: Optional[Tuple[float, ...]] = None
    nadgrids: Optional[str] = None
    name: str = ""


ELLIPSOIDS: Dict[str, EllipsoidDef] = {
    "MERIT": EllipsoidDef(a=6378137.0, rf=298.257, name="MERIT 1983"),
    "SGS85": EllipsoidDef(a=6378136.0, rf=298.257, name="Soviet Geodetic System 85"),
    "GRS80": EllipsoidDef(a=6378137.0, rf=298.257222101, name="GRS 1980(IUGG, 1980)"),
    "IAU76": EllipsoidDef(a=6378140.0, rf=298.257, name="IAU 1976"),
    "airy": EllipsoidDef(a=6377563.396, b=6356256.910, name="Airy 1830"),
    "APL4.": EllipsoidDef(a=6378137, rf=298.25, name="Appl. Physics. 1965"),
    "NWL9D": EllipsoidDef(a=6378145.0, rf=298.25, name="Naval Weapons Lab., 1965"),
    "mod_airy": EllipsoidDef(a=6377340.189, b=6356034.446, name="Modified Airy"),
    "andrae": EllipsoidDef(a=6377104.43, rf=300.0, name="Andrae 1876 (Den., Iclnd.)"),
    "aust_SA": EllipsoidDef(a=6378160.0, rf=298.25, name="Australian Natl & S. Amer. 1969"),
    "GRS67": EllipsoidDef(a=6378160.0, rf=298.2471674270, name="GRS 67(IUGG 1967)"),
    "bessel": EllipsoidDef(a=6377397.155, rf=299.1528128, name="Bessel 1841"),
    "bess_nam": EllipsoidDef(a=6377483.865, rf=299.1528128, name="Bessel 1841 (Namibia)"),
    "clrk66": EllipsoidDef(a=6378206.4, b=6356583.8, name="Clarke 1866"),
    "clrk80": EllipsoidDef(a=6378249.145, rf=293.4663, name="Clarke 1880 mod."),
    "CPM": EllipsoidDef(a=6375738.7, rf=334.29, name="Comm. des Poids et Mesures 1799"),
    "delmbr": EllipsoidDef(a=6376428.0, rf=311.5, name="Delambre 1810 (Belgium)"),
    "engelis": EllipsoidDef(a=6378136.05, rf=298.2566, name="Engelis 1985"),
    "evrst30": EllipsoidDef(a=6377276.345, rf=300.8017, name="Everest 1830"),
    "evrst48": EllipsoidDef(a=6377304.063, rf=300.8017, name="Everest 1948"),
    "evrst56": EllipsoidDef(a=6377301.243, rf=300.8017, name="Everest 1956"),
    "evrst69": EllipsoidDef(a=6377295.664, rf=300.8017, name="Everest 1969"),
    "evrstSS": EllipsoidDef(a=6377298.556, rf=300.8017, name="Everest (Sabah & Sarawak)"),
    "fschr60": EllipsoidDef(a=6378166.0, rf=298.3, name="Fischer (Mercury Datum) 1960"),
    "fschr60m": EllipsoidDef(a=6378155.0, rf=298.3, name="Fischer 1960"),
    "fschr68": EllipsoidDef(a=6378150.0, rf=298.3, name="Fischer 1968"),
    "helmert": EllipsoidDef(a=6378200.0, rf=298.3, name="Helmert 1906"),
    "hough": EllipsoidDef(a=6378270.0, rf=297.0, name="Hough"),
    "intl": EllipsoidDef(a=6378388.0, rf=297.0, name="International 1909 (Hayford)"),
    "kaula": EllipsoidDef(a=6378163.0, rf=298.24, name="Kaula 1961"),
    "lerch": EllipsoidDef(a=6378139.0, rf=298.257, name="Lerch 1979"),
    "mprts": EllipsoidDef(a=6397300.0, rf=191.0, name="Maupertius 1738"),
    "new_intl": EllipsoidDef(a=6378157.5, b=6356772.2, name="New International 1967"),
    "plessis": EllipsoidDef(a=6376523.0, b=6355863.0, name="Plessis 1817 (France)"),
    "krass": EllipsoidDef(a=6378245.0, rf=298.3, name="Krassovsky, 1942"),
    "SEasia": EllipsoidDef(a=6378155.0, b=6356773.3205, name="Southeast Asia"),
    "walbeck": EllipsoidDef(a=6376896.0, b=6355834.8467, name="Walbeck"),
    "WGS60": EllipsoidDef(a=6378165.0, rf=298.3, name="WGS 60"),
    "WGS66": EllipsoidDef(a=6378145.0, rf=298.25, name="WGS 66"),
    "WGS72": EllipsoidDef(a=6378135.0, rf=298.26, name="WGS 72"),
    "WGS84": EllipsoidDef(a=6378137.0, rf=298.257223563, name="WGS 84"),
    "sphere": EllipsoidDef(a=6370997.0, b=6370997.0, name="Normal Sphere (r=6370997)"),
}

DEFAULT_ELLIPSOID = "WGS84"

DATUMS: Dict[str, DatumDef] = {
    "WGS84": DatumDef(ellipse="WGS84", towgs84=(0.0, 0.0, 0.0), name="WGS84"),
    "GGRS87": DatumDef(
        ellipse="GRS80",
        towgs84=(-199.87, 74.79, 246.62),
        name="Greek_Geodetic_Reference_System_1987",
    ),
    "NAD83": DatumDef(
        ellipse="GRS80", towgs84=(0.0, 0.0, 0.0), name="North_American_Datum_1983"
    ),
    "NAD27": DatumDef(
        ellipse="clrk66",
        nadgrids="@conus,@alaska,@ntv2_0.gsb,@ntv1_can.dat",
        name="North_American_Datum_1927",
    ),
    "potsdam": DatumDef(
        ellipse="bessel", towgs84=(606.0, 23.0, 413.0), name="Potsdam Rauenberg 1950 DHDN"
    ),
    "carthage": DatumDef(
        ellipse="clrk80", towgs84=(-263.0, 6.0, 431.0), name="Carthage 1934 Tunisia"
    ),
    "hermannskogel": DatumDef(
        ellipse="bessel", towgs84=(653.0, -212.0, 449.0), name="Hermannskogel"
    ),
    "ire65": DatumDef(
        ellipse="mod_airy",
        towgs84=(482.530, -130.596, 564.557, -1.042, -0.214, -0.631, 8.15),
        name="Ireland 1965",
    ),
    "nzgd49": DatumDef(
        ellipse="intl",
        towgs84=(59.47, -5.04, 187.44, 0.47, -0.1, 1.024, -4.5993),
        name="New Zealand Geodetic Datum 1949",
    ),
    "OSGB36": DatumDef(
        ellipse="airy",
        towgs84=(446.448, -125.157, 542.060, 0.1502, 0.2470, 0.8421, -20.4894),
        name="Airy 1830",
    ),
}

# WKT datum names mapped onto the datum table above
WKT_DATUMS: Dict[str, str] = {
    "wgs_1984": "WGS84",
    "d_wgs_1984": "WGS84",
    "world geodetic system 1984": "WGS84",
    "north_american_datum_1983": "NAD83",
    "d_north_american_1983": "NAD83",
    "north_american_datum_1927": "NAD27",
    "d_north_american_1927": "NAD27",
    "osgb_1936": "OSGB36",
    "d_osgb_1936": "OSGB36",
    "new_zealand_geodetic_datum_1949": "nzgd49",
    "deutsches_hauptdreiecksnetz": "potsdam",
}

# prime meridian longitudes in degrees east of Greenwich
PRIME_MERIDIANS: Dict[str, float] = {
    "greenwich": 0.0,
    "lisbon": -9.131906111111,
    "paris": 2.337229166667,
    "bogota": -74.080916666667,
    "madrid": -3.687938888889,
    "rome": 12.452333333333,
    "bern": 7.439583333333,
    "jakarta": 106.807719444444,
    "ferro": -17.666666666667,
    "brussels": 4.367975,
    "stockholm": 18.058277777778,
    "athens": 23.7163375,
    "oslo": 10.722916666667,
}

# linear units in meters
UNITS: Dict[str, float] = {
    "m": 1.0,
    "km": 1000.0,
    "dm": 0.1,
    "cm": 0.01,
    "mm": 0.001,
    "kmi": 1852.0,
    "in": 0.0254,
    "ft": 0.3048,
    "yd": 0.9144,
    "mi": 1609.344,
    "fath": 1.8288,
    "ch": 20.1168,
    "link": 0.201168,
    "us-in": 1.0 / 39.37,
    "us-ft": 1200.0 / 3937.0,
    "us-yd": 3600.0 / 3937.0,
    "us-ch": 79200.0 / 3937.0,
    "us-mi": 6336000.0 / 3937.0,
}

# WKT PROJECTION names (lowercase, spaces as underscores) -> projection family
WKT_PROJECTIONS: Dict[str, str] = {
    "lambert_tangential_conformal_conic_projection": "lcc",
    "lambert_conformal_conic": "lcc",
    "lambert_conformal_conic_1sp": "lcc",
    "lambert_conformal_conic_2sp": "lcc",
    "mercator": "merc",
    "mercator_1sp": "merc",
    "mercator_2sp": "merc",
    "mercator_auxiliary_sphere": "merc",
    "popular_visualisation_pseudo_mercator": "merc",
    "transverse_mercator": "tmerc",
    "gauss_kruger": "tmerc",
    "universal_transverse_mercator_system": "utm",
    "lambert_azimuthal_equal_area": "laea",
    "albers_conic_equal_area": "aea",
    "albers": "aea",
    "equidistant_conic": "eqdc",
    "polyconic": "poly",
    "equirectangular": "eqc",
    "plate_carree": "eqc",
    "equidistant_cylindrical": "eqc",
    "polar_stereographic": "stere",
    "stereographic": "stere",
    "oblique_stereographic": "sterea",
    "double_stereographic": "sterea",
    "orthographic": "ortho",
    "sinusoidal": "sinu",
    "mollweide": "moll",
    "gnomonic": "gnom",
    "van_der_grinten_i": "vandg",
    "van_der_grinten": "vandg",
    "cylindrical_equal_area": "cea",
    "lambert_cylindrical_equal_area": "cea",
    "cassini_soldner": "cass",
    "cassini": "cass",
    "hotine_oblique_mercator": "omerc",
    "hotine_oblique_mercator_azimuth_center": "omerc",
    "oblique_mercator": "omerc",
    "swiss_oblique_cylindrical": "somerc",
    "swiss_oblique_mercator": "somerc",
    "hotine_oblique_mercator_azimuth_natural_origin": "somerc",
    "new_zealand_map_grid": "nzmg",
    "miller_cylindrical": "mill",
    "azimuthal_equidistant": "aeqd",
    "gauss_schreiber_transverse_mercator": "gstmerc",
}

GOOGLE_MERCATOR_DEF = (
    "+title= Google Mercator +proj=merc +a=6378137 +b=6378137 +lat_ts=0.0 "
    "+lon_0=0.0 +x_0=0.0 +y_0=0 +k=1.0 +units=m +nadgrids=@null +no_defs"
)

# codes that name the spherical (web) Mercator definition
WEB_MERCATOR_CODES = ("EPSG:3785", "EPSG:3857", "GOOGLE", "EPSG:900913", "EPSG:102113")

BUILTIN_DEFS: Dict[str, str] = {
    "WGS84": "+title=long/lat:WGS84 +proj=longlat +ellps=WGS84 +datum=WGS84 +units=degrees",
    "EPSG:4326": (
        "+title=long/lat:WGS84 +proj=longlat +a=6378137.0 +b=6356752.31424518 "
        "+ellps=WGS84 +datum=WGS84 +units=degrees"
    ),
    "EPSG:4269": (
        "+title=long/lat:NAD83 +proj=longlat +a=6378137.0 +b=6356752.31414036 "
        "+ellps=GRS80 +datum=NAD83 +units=degrees"
    ),
    **{code: GOOGLE_MERCATOR_DEF for code in WEB_MERCATOR_CODES},
}
