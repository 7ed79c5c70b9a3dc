from __future__ import annotations

import math

from mappyproj.constructs.point import Point
from mappyproj.projections.projection_interface import ProjectionInterface
from mappyproj.utils.constants import EPSLN, HALF_PI
from mappyproj.utils.exceptions import DomainError
from mappyproj.utils.math_utils import adjust_lon, authlat, authset, qsfnz


class CylindricalEqualArea(ProjectionInterface):
    """Lambert Cylindrical Equal-Area with an optional latitude of true scale."""

    name = "cea"

    def __init__(self, crs):
        super().__init__(crs)
        lat_ts = crs.lat_ts or 0.0
        self.k0 = math.cos(lat_ts)
        if not self.sphere:
            t = math.sin(lat_ts)
            self.k0 /= math.sqrt(1.0 - self.es * t * t)
            self.apa = authset(self.es)
            self.qp = qsfnz(self.e, 1.0)

    def forward(self, point: Point) -> Point:
        lam = adjust_lon(point.x - self.long0)
        phi = point.y

        x = self.k0 * lam
        if self.sphere:
            y = math.sin(phi) / self.k0
        else:
            y = 0.5 * qsfnz(self.e, math.sin(phi)) / self.k0

        point.x = self.a * x
        point.y = self.a * y
        return point

    def inverse(self, point: Point) -> Point:
        x = point.x / self.a
        y = point.y / self.a

        if self.sphere:
            t = abs(y * self.k0)
            if t - EPSLN > 1.0:
                raise DomainError(f"cea: northing {point.y} is beyond a pole")
            if t >= 1.0:
                phi = HALF_PI if y >= 0 else -HALF_PI
            else:
                phi = math.asin(y * self.k0)
        else:
            arg = 2.0 * y * self.k0 / self.qp
            if abs(arg) - EPSLN > 1.0:
                raise DomainError(f"cea: northing {point.y} is beyond a pole")
            phi = authlat(math.asin(max(-1.0, min(1.0, arg))), self.apa)

        point.x = adjust_lon(x / self.k0 + self.long0)
        point.y = phi
        return point
