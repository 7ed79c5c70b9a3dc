from __future__ import annotations

import logging
import math
from typing import Callable, Optional, Tuple, Union

import numpy as np

from mappyproj.constructs.crs import Crs, DefinitionLike, build_crs
from mappyproj.constructs.point import Point
from mappyproj.transform.axis import denormalize, normalize
from mappyproj.transform.datum_transform import datum_transform
from mappyproj.utils.constants import D2R, R2D
from mappyproj.utils.crs import LATLON_CRS
from mappyproj.utils.exceptions import DomainError, NotReadyError
from mappyproj.utils.registry import CrsRegistry

log = logging.getLogger(__name__)


def _needs_wgs84_hop(source: Crs, dest: Crs) -> bool:
    """
    Web Mercator carries no datum, so a transform between it and a CRS on some
    other, unparameterised datum is routed through WGS84 geographic coordinates.
    """
    if source.is_web_mercator and dest.datum_code != "WGS84" and not dest.datum_params:
        return True
    if dest.is_web_mercator and source.datum_code != "WGS84" and not source.datum_params:
        return True
    return False


def transform(source: Crs, dest: Crs, point: Point) -> Point:
    """
    Transform a point from one CRS to another.

    The point is rewritten in place: it is brought into canonical axis order,
    unprojected (or converted from degrees), moved between datums, projected
    into the destination (or converted to degrees) and put into the
    destination's axis order.

    Args:
        source: The CRS the point is in
        dest: The CRS to transform the point into
        point: The point to transform; geographic coordinates are in degrees,
            projected coordinates in the CRS's linear unit

    Returns:
        The same point, now in the destination CRS

    Raises:
        NotReadyError: If either CRS has not finished initialising
        DomainError: If the point is outside a projection's domain or the result is not finite
        GridShiftUnsupported: If a grid-shift datum transform would be required
        ConvergenceError: If an iterative inverse does not converge
        ConfigurationError: If an axis code is invalid

    Examples:
        >>> from mappyproj import build_crs, transform
        >>> from mappyproj.constructs.point import Point
        >>> wgs84 = build_crs("EPSG:4326")
        >>> google = build_crs("GOOGLE")
        >>> transform(wgs84, google, Point(10.0, 0.0)).x
        1113194.9079327357
    """
    if not source.ready or not dest.ready:
        raise NotReadyError("source and destination CRS must both be initialised")

    if _needs_wgs84_hop(source, dest):
        log.debug(f"routing {source!r} -> {dest!r} through WGS84")
        transform(source, LATLON_CRS, point)
        source = LATLON_CRS

    had_z = point.has_z

    normalize(source, point)

    if source.is_geographic:
        point.x *= D2R
        point.y *= D2R
    else:
        point.x = point.x * source.to_meter - source.x0
        point.y = point.y * source.to_meter - source.y0
        source.projection.inverse(point)

    if source.from_greenwich:
        point.x += source.from_greenwich

    datum_transform(source.datum, dest.datum, point)
    if not had_z and dest.proj_name != "geocent":
        point.z = None

    if dest.from_greenwich:
        point.x -= dest.from_greenwich

    if dest.is_geographic:
        point.x *= R2D
        point.y *= R2D
    else:
        dest.projection.forward(point)
        point.x = (point.x + dest.x0) / dest.to_meter
        point.y = (point.y + dest.y0) / dest.to_meter

    denormalize(dest, point)

    if not (math.isfinite(point.x) and math.isfinite(point.y)) or (
        point.z is not None and not math.isfinite(point.z)
    ):
        raise DomainError(f"transform produced a non-finite result: {point!r}")

    return point


ArrayLike = Union[float, np.ndarray]


class Transformer:
    """
    A reusable transform between two CRSs.

    Builds both CRSs once and applies :func:`transform` to scalars or numpy
    arrays. Like the CRSs it holds, a Transformer is read-only and may be used
    from several threads.

    Attributes:
        source: The source CRS
        dest: The destination CRS

    Examples:
        >>> import numpy as np
        >>> t = Transformer.from_crs("EPSG:4326", "EPSG:3857")
        >>> x, y = t.transform(np.array([0.0, 10.0]), np.array([0.0, 20.0]))
    """

    def __init__(self, source: Crs, dest: Crs):
        self.source = source
        self.dest = dest

    def __repr__(self):
        return f"Transformer(source={self.source!r}, dest={self.dest!r})"

    @classmethod
    def from_crs(
        cls,
        source: Union[Crs, DefinitionLike],
        dest: Union[Crs, DefinitionLike],
        registry: Optional[CrsRegistry] = None,
        resolver: Optional[Callable[[str], Optional[str]]] = None,
    ) -> Transformer:
        """
        Create a transformer from two CRSs or their definitions.

        Args:
            source: A Crs, or anything :func:`mappyproj.build_crs` accepts
            dest: A Crs, or anything :func:`mappyproj.build_crs` accepts
            registry: Where to look up codes
            resolver: Callback for codes the registry does not know

        Returns:
            A new Transformer
        """
        if not isinstance(source, Crs):
            source = build_crs(source, registry=registry, resolver=resolver)
        if not isinstance(dest, Crs):
            dest = build_crs(dest, registry=registry, resolver=resolver)
        return cls(source, dest)

    def transform_point(self, point: Point) -> Point:
        return transform(self.source, self.dest, point)

    def transform(
        self, x: ArrayLike, y: ArrayLike, z: Optional[ArrayLike] = None
    ) -> Tuple[ArrayLike, ...]:
        """
        Transform coordinates given as scalars or array-likes.

        Args:
            x: Longitudes (degrees) or eastings
            y: Latitudes (degrees) or northings
            z: Optional heights

        Returns:
            (x, y) or (x, y, z) in the destination CRS; floats for scalar input,
            numpy arrays of the broadcast input shape otherwise
        """
        scalar = np.ndim(x) == 0 and np.ndim(y) == 0 and (z is None or np.ndim(z) == 0)

        if z is None:
            xs, ys = np.broadcast_arrays(np.asarray(x, dtype=float), np.asarray(y, dtype=float))
            zs = None
        else:
            xs, ys, zs = np.broadcast_arrays(
                np.asarray(x, dtype=float),
                np.asarray(y, dtype=float),
                np.asarray(z, dtype=float),
            )

        out_x = np.empty(xs.shape, dtype=float)
        out_y = np.empty(xs.shape, dtype=float)
        out_z = np.empty(xs.shape, dtype=float) if zs is not None else None

        for index in np.ndindex(xs.shape):
            point = Point(xs[index], ys[index], None if zs is None else zs[index])
            transform(self.source, self.dest, point)
            out_x[index] = point.x
            out_y[index] = point.y
            if out_z is not None:
                out_z[index] = point.height

        if scalar:
            if out_z is None:
                return float(out_x), float(out_y)
            return float(out_x), float(out_y), float(out_z)

        if out_z is None:
            return out_x, out_y
        return out_x, out_y, out_z
