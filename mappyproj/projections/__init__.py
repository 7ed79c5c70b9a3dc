from __future__ import annotations

from typing import Dict, Type

from mappyproj.projections.aea import AlbersEqualArea
from mappyproj.projections.aeqd import AzimuthalEquidistant
from mappyproj.projections.cass import CassiniSoldner
from mappyproj.projections.cea import CylindricalEqualArea
from mappyproj.projections.eqc import EquidistantCylindrical, Equirectangular
from mappyproj.projections.eqdc import EquidistantConic
from mappyproj.projections.gauss import GaussSphere
from mappyproj.projections.geocent import Geocentric
from mappyproj.projections.gnom import Gnomonic
from mappyproj.projections.gstmerc import GaussSchreiberTransverseMercator
from mappyproj.projections.laea import LambertAzimuthalEqualArea
from mappyproj.projections.lcc import LambertConformalConic
from mappyproj.projections.longlat import Identity, LongLat
from mappyproj.projections.merc import Mercator
from mappyproj.projections.mill import MillerCylindrical
from mappyproj.projections.moll import Mollweide
from mappyproj.projections.nzmg import NewZealandMapGrid
from mappyproj.projections.omerc import ObliqueMercator
from mappyproj.projections.ortho import Orthographic
from mappyproj.projections.poly import Polyconic
from mappyproj.projections.projection_interface import ProjectionInterface
from mappyproj.projections.sinu import Sinusoidal
from mappyproj.projections.somerc import SwissObliqueMercator
from mappyproj.projections.stere import Stereographic
from mappyproj.projections.sterea import ObliqueStereographic
from mappyproj.projections.tmerc import TransverseMercator, UniversalTransverseMercator
from mappyproj.projections.vandg import VanDerGrinten
from mappyproj.utils.exceptions import ParseError

PROJECTIONS: Dict[str, Type[ProjectionInterface]] = {
    cls.name: cls
    for cls in (
        LongLat,
        Identity,
        Mercator,
        TransverseMercator,
        UniversalTransverseMercator,
        AlbersEqualArea,
        LambertConformalConic,
        LambertAzimuthalEqualArea,
        EquidistantConic,
        Polyconic,
        Equirectangular,
        EquidistantCylindrical,
        Stereographic,
        ObliqueStereographic,
        GaussSphere,
        Orthographic,
        Sinusoidal,
        Mollweide,
        Gnomonic,
        VanDerGrinten,
        CylindricalEqualArea,
        CassiniSoldner,
        ObliqueMercator,
        SwissObliqueMercator,
        GaussSchreiberTransverseMercator,
        NewZealandMapGrid,
        MillerCylindrical,
        AzimuthalEquidistant,
        Geocentric,
    )
}


def get_projection(name: str) -> Type[ProjectionInterface]:
    """
    Look up a projection family by its registry name.

    Args:
        name: The family name as used in ``+proj=``, e.g. 'lcc'

    Returns:
        The projection class

    Raises:
        ParseError: If no family is registered under that name
    """
    try:
        return PROJECTIONS[name]
    except KeyError:
        raise ParseError(f"unknown projection: {name!r}") from None
