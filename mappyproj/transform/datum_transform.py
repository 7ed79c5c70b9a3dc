from __future__ import annotations

from mappyproj.constructs.datum import Datum, DatumType
from mappyproj.constructs.point import Point
from mappyproj.utils.constants import DATUM_ES_TOLERANCE
from mappyproj.utils.exceptions import GridShiftUnsupported


def compare_datums(source: Datum, dest: Datum) -> bool:
    """
    Decide whether two datums are the same for transformation purposes.

    Datums are equal when they have the same type, the same semi-major axis,
    squared eccentricities within 5e-11 and identical shift parameters (the
    first three for a 3-parameter datum, all seven for a 7-parameter datum, the
    grid names for a grid-shift datum).

    Args:
        source: The first datum
        dest: The second datum

    Returns:
        True if no datum shift is needed between the two
    """
    if source.datum_type != dest.datum_type:
        return False
    if source.a != dest.a or abs(source.es - dest.es) > DATUM_ES_TOLERANCE:
        return False
    if source.datum_type == DatumType.THREE_PARAM:
        return source.params[:3] == dest.params[:3]
    if source.datum_type == DatumType.SEVEN_PARAM:
        return source.params[:7] == dest.params[:7]
    if source.datum_type == DatumType.GRID_SHIFT:
        return source.nadgrids == dest.nadgrids
    return True


def datum_transform(source: Datum, dest: Datum, point: Point) -> Point:
    """
    Move a geodetic point (radians, optional height) from one datum to another.

    The point goes geodetic -> geocentric on the source ellipsoid, through the
    source shift to WGS84 and the inverse of the destination shift, and back to
    geodetic on the destination ellipsoid. Nothing happens when the datums are
    equal or either side opts out of datum transforms.

    Args:
        source: The datum the point is currently on
        dest: The datum to move the point onto
        point: A point with x=longitude and y=latitude in radians, rewritten in place

    Returns:
        The same point on the destination datum

    Raises:
        GridShiftUnsupported: If either datum needs grid-shift files
        DomainError: If the latitude is out of range for the geocentric conversion
        ConvergenceError: If the geocentric to geodetic iteration does not settle
    """
    if compare_datums(source, dest):
        return point

    if source.datum_type == DatumType.NO_DATUM or dest.datum_type == DatumType.NO_DATUM:
        return point

    if source.datum_type == DatumType.GRID_SHIFT or dest.datum_type == DatumType.GRID_SHIFT:
        raise GridShiftUnsupported(
            f"grid-shift datum transforms are not supported "
            f"(grids: {source.nadgrids or dest.nadgrids})"
        )

    if (
        source.es != dest.es
        or source.a != dest.a
        or source.is_parametric
        or dest.is_parametric
    ):
        source.geodetic_to_geocentric(point)
        if source.is_parametric:
            source.geocentric_to_wgs84(point)
        if dest.is_parametric:
            dest.geocentric_from_wgs84(point)
        dest.geocentric_to_geodetic(point)

    return point
