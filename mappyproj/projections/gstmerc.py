from __future__ import annotations

import math

from mappyproj.constructs.point import Point
from mappyproj.projections.projection_interface import ProjectionInterface
from mappyproj.utils.exceptions import DomainError
from mappyproj.utils.math_utils import adjust_lon, invlatiso, latiso


class GaussSchreiberTransverseMercator(ProjectionInterface):
    """
    Gauss-Schreiber Transverse Mercator, used for the Reunion island grid.

    The ellipsoid is mapped to a conformal sphere through isometric latitudes
    and the sphere is then projected with a spherical transverse Mercator.
    """

    name = "gstmerc"

    def __init__(self, crs):
        super().__init__(crs)
        e = self.e
        es = self.es
        self.lc = self.long0
        self.rs = math.sqrt(1.0 + es * math.pow(math.cos(self.lat0), 4.0) / (1.0 - es))
        sinz = math.sin(self.lat0)
        pc = math.asin(sinz / self.rs)
        sinzpc = math.sin(pc)
        self.cp = latiso(0.0, pc, sinzpc) - self.rs * latiso(e, self.lat0, sinz)
        self.n2 = self.k0 * self.a * math.sqrt(1.0 - es) / (1.0 - es * sinz * sinz)
        self.ys = -self.n2 * pc

    def forward(self, point: Point) -> Point:
        lon = point.x
        lat = point.y

        big_l = self.rs * adjust_lon(lon - self.lc)
        ls = self.cp + (self.rs * latiso(self.e, lat, math.sin(lat)))
        lat1 = math.asin(math.sin(big_l) / math.cosh(ls))
        ls1 = latiso(0.0, lat1, math.sin(lat1))

        point.x = self.n2 * ls1
        point.y = self.ys + self.n2 * math.atan(math.sinh(ls) / math.cos(big_l))
        return point

    def inverse(self, point: Point) -> Point:
        x = point.x
        y = point.y - self.ys

        try:
            sinh_x = math.sinh(x / self.n2)
            cosh_x = math.cosh(x / self.n2)
        except OverflowError:
            raise DomainError(f"gstmerc: easting {x} is outside the projection's range") from None

        big_l = math.atan(sinh_x / math.cos(y / self.n2))
        lat1 = math.asin(math.sin(y / self.n2) / cosh_x)
        lc = latiso(0.0, lat1, math.sin(lat1))

        point.x = adjust_lon(self.lc + big_l / self.rs)
        point.y = invlatiso(self.e, (lc - self.cp) / self.rs)
        return point
