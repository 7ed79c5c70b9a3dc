from __future__ import annotations

import math

from mappyproj.constructs.point import Point
from mappyproj.projections.projection_interface import ProjectionInterface
from mappyproj.utils.constants import EPSLN, HALF_PI
from mappyproj.utils.exceptions import DomainError
from mappyproj.utils.math_utils import adjust_lon, pj_enfn, pj_inv_mlfn, pj_mlfn


class Sinusoidal(ProjectionInterface):
    """Sinusoidal (Sanson-Flamsteed), spherical or ellipsoidal."""

    name = "sinu"

    def __init__(self, crs):
        super().__init__(crs)
        if not self.sphere:
            self.en = pj_enfn(self.es)

    def forward(self, point: Point) -> Point:
        lam = adjust_lon(point.x - self.long0)
        phi = point.y

        if self.sphere:
            x = lam * math.cos(phi)
            y = phi
        else:
            s = math.sin(phi)
            c = math.cos(phi)
            y = pj_mlfn(phi, s, c, self.en)
            x = lam * c / math.sqrt(1.0 - self.es * s * s)

        point.x = self.a * x
        point.y = self.a * y
        return point

    def inverse(self, point: Point) -> Point:
        x = point.x / self.a
        y = point.y / self.a

        if self.sphere:
            phi = y
        else:
            phi = pj_inv_mlfn(y, self.es, self.en)

        s = abs(phi)
        if s < HALF_PI - EPSLN:
            sinphi = math.sin(phi)
            lam = x * math.sqrt(1.0 - self.es * sinphi * sinphi) / math.cos(phi)
        elif s <= HALF_PI + EPSLN:
            lam = 0.0
        else:
            raise DomainError(f"sinu: northing {point.y} is beyond a pole")

        point.x = adjust_lon(lam + self.long0)
        point.y = phi
        return point
