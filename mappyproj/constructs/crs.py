from __future__ import annotations

import copy
import logging
import math
from typing import Callable, Optional, Union

from mappyproj.constructs.datum import Datum, DatumType
from mappyproj.constructs.definition import CrsDefinition
from mappyproj.constructs.ellipsoid import Ellipsoid
from mappyproj.projections import get_projection
from mappyproj.readers.proj4_reader import is_legal_axis, is_proj4, parse_proj4
from mappyproj.readers.wkt_reader import is_wkt, parse_wkt
from mappyproj.utils.constants import (
    CANONICAL_AXIS,
    EPSLN,
    RA4,
    RA6,
    SIXTH,
    SRS_WGS84_SEMIMAJOR,
)
from mappyproj.utils.exceptions import ConfigurationError, ParseError
from mappyproj.utils.registry import CrsRegistry
from mappyproj.utils.tables import DATUMS, UNITS, WEB_MERCATOR_CODES

log = logging.getLogger(__name__)


class Crs:
    """
    A fully derived coordinate reference system.

    A Crs is built once from a :class:`CrsDefinition` and never changes after
    construction, so it can be shared freely between threads and reused for any
    number of transforms. All dependent constants (ellipsoid eccentricities, the
    datum object and the projection family's own constants) are computed here.

    Attributes:
        proj_name: The projection family name, e.g. 'merc', 'utm' or 'longlat'
        srs_code: The code the CRS was registered under, if any
        ellipsoid: The ellipsoid as looked up or supplied
        a: The semi-major axis in meters (after any authalic sphere adjustment)
        b: The semi-minor axis in meters
        es: The squared eccentricity
        e: The eccentricity
        ep2: The squared second eccentricity
        sphere: True if the CRS is based on a sphere
        datum: The derived Datum used by the datum transform
        lat0, long0: The latitude and longitude of origin in radians
        k0: The scale factor
        x0, y0: The false easting and northing in meters
        to_meter: The linear unit in meters
        from_greenwich: The prime meridian offset in radians
        axis: The 3 letter axis order code
        local: True for a local (engineering) system with an identity projection
        projection: The instantiated projection family
        ready: True once derivation has finished

    Examples:
        >>> from mappyproj.constructs.crs import Crs, build_crs
        >>> utm = build_crs("+proj=utm +zone=33 +ellps=WGS84")
        >>> utm.x0, utm.k0
        (500000.0, 0.9996)
    """

    def __init__(self, definition: CrsDefinition):
        self.ready = False
        self.definition = definition
        d = copy.deepcopy(definition)

        self.proj_name = d.proj_name
        if not self.proj_name:
            raise ParseError("CRS definition has no projection name")
        self.title = d.title
        self.srs_code = d.srs_code
        self.units = d.units
        self.local = d.local_cs

        datum_code = d.datum_code
        datum_params = d.datum_params
        nadgrids = d.nadgrids
        ellps = d.ellps
        datum_name = d.datum_name

        if nadgrids == "@null":
            datum_code = "none"
        if datum_code and datum_code != "none":
            datum_def = DATUMS.get(datum_code)
            if datum_def is not None:
                datum_params = list(datum_def.towgs84) if datum_def.towgs84 else datum_params
                nadgrids = datum_def.nadgrids or nadgrids
                ellps = datum_def.ellipse
                datum_name = datum_def.name
            else:
                log.debug(f"unknown datum code {datum_code!r}; using the ellipsoid only")
        self.datum_code = datum_code
        self.datum_name = datum_name or datum_code
        self.datum_params = datum_params
        self.nadgrids = nadgrids

        if d.a is None:
            self.ellipsoid = Ellipsoid.from_name(ellps)
        else:
            self.ellipsoid = Ellipsoid.from_axes(d.a, b=d.b, rf=d.rf, name=ellps)

        a = self.ellipsoid.a
        b = self.ellipsoid.b
        self.sphere = d.rf == 0 or abs(a - b) < EPSLN
        if self.sphere:
            b = a

        a2 = a * a
        b2 = b * b
        es = (a2 - b2) / a2
        e = math.sqrt(es)
        if d.r_a:
            a *= 1.0 - es * (SIXTH + es * (RA4 + es * RA6))
            b = a
            a2 = a * a
            b2 = a2
            es = 0.0
            e = 0.0
            self.sphere = True
        self.a = a
        self.b = b
        self.es = es
        self.e = e
        self.ep2 = (a2 - b2) / b2

        self.lat0 = d.lat0 or 0.0
        self.lat1 = d.lat1
        self.lat2 = d.lat2
        self.lat_ts = d.lat_ts
        self.long0 = d.long0 or 0.0
        self.long1 = d.long1
        self.long2 = d.long2
        self.longc = d.longc
        self.alpha = d.alpha
        self.zone = d.zone
        self.utm_south = d.utm_south
        self.k0 = d.k0 if d.k0 else 1.0
        self.x0 = d.x0 or 0.0
        self.y0 = d.y0 or 0.0
        self.from_greenwich = d.from_greenwich or 0.0

        to_meter = d.to_meter
        if to_meter is None and d.units in UNITS:
            to_meter = UNITS[d.units]
        self.to_meter = to_meter if to_meter else 1.0

        axis = d.axis or CANONICAL_AXIS
        if not is_legal_axis(axis):
            raise ConfigurationError(f"illegal axis code {axis!r}")
        self.axis = axis

        self.datum = Datum.from_params(
            self.a,
            self.b,
            self.es,
            self.ep2,
            datum_params=self.datum_params,
            datum_code=self.datum_code,
            nadgrids=self.nadgrids,
        )

        # the family may move the origin or offsets (utm, nzmg) before it is frozen
        projection_cls = get_projection(self.proj_name)
        self.projection = projection_cls(self)

        self.ready = True

    def __repr__(self):
        code = self.srs_code or self.title or self.proj_name
        return f"Crs({code}, proj={self.proj_name}, datum={self.datum.datum_type.value})"

    @property
    def is_geographic(self) -> bool:
        return self.proj_name == "longlat"

    @property
    def is_web_mercator(self) -> bool:
        """True for the spherical Mercator used by web maps (EPSG:3857 and aliases)."""
        if self.srs_code and self.srs_code.upper() in WEB_MERCATOR_CODES:
            return True
        return (
            self.proj_name == "merc"
            and self.sphere
            and self.a == SRS_WGS84_SEMIMAJOR
            and not self.datum.is_parametric
            and self.datum.datum_type != DatumType.GRID_SHIFT
        )


DefinitionLike = Union[str, CrsDefinition]


def parse_definition(text: str) -> CrsDefinition:
    """
    Parse a definition string, detecting whether it is WKT or PROJ.4.

    Raises:
        ParseError: If the text is neither WKT nor contains a +proj= token
    """
    if is_wkt(text):
        return parse_wkt(text)
    if is_proj4(text):
        return parse_proj4(text)
    raise ParseError(f"unrecognized CRS definition: {text[:60]!r}")


def build_crs(
    definition: DefinitionLike,
    registry: Optional[CrsRegistry] = None,
    resolver: Optional[Callable[[str], Optional[str]]] = None,
) -> Crs:
    """
    Build a fully derived CRS from a definition.

    Args:
        definition: A PROJ.4 string, a WKT string, a code known to the registry
            (e.g. 'EPSG:4326' or 'GOOGLE'), or a CrsDefinition
        registry: Where to look up codes; the built-in registry if None
        resolver: An optional callback turning an unknown code into a definition
            string, consulted after the registry (see mappyproj.utils.resolvers)

    Returns:
        The derived Crs

    Raises:
        ParseError: If the definition cannot be parsed or names an unknown projection
        ConfigurationError: If the parameters are inconsistent (e.g. degenerate conic)

    Examples:
        >>> wgs84 = build_crs("EPSG:4326")
        >>> merc = build_crs("+proj=merc +a=6378137 +b=6378137 +nadgrids=@null")
        >>> wgs84.is_geographic, merc.is_geographic
        (True, False)
    """
    if isinstance(definition, CrsDefinition):
        return Crs(definition)

    if not isinstance(definition, str):
        raise TypeError(
            f"CRS definition must be a string or CrsDefinition, got {type(definition)}"
        )

    if registry is None:
        registry = CrsRegistry.default()

    text = definition.strip()
    srs_code = None
    if not is_wkt(text) and not is_proj4(text):
        resolved = registry.lookup(text, resolver=resolver)
        if resolved is None:
            raise ParseError(f"unrecognized CRS definition or unknown code: {text!r}")
        srs_code = CrsRegistry.normalize_code(text)
        text = resolved

    parsed = parse_definition(text)
    if srs_code is not None:
        parsed.srs_code = srs_code
    return Crs(parsed)
