from __future__ import annotations

import math

from mappyproj.constructs.point import Point
from mappyproj.projections.projection_interface import ProjectionInterface
from mappyproj.utils.math_utils import adjust_lon, asinz, pj_enfn, pj_inv_mlfn, pj_mlfn

C1 = 1.0 / 6.0
C2 = 1.0 / 120.0
C3 = 1.0 / 24.0
C4 = 1.0 / 3.0
C5 = 1.0 / 15.0


class CassiniSoldner(ProjectionInterface):
    """Cassini-Soldner, spherical or ellipsoidal (series form)."""

    name = "cass"

    def __init__(self, crs):
        super().__init__(crs)
        if not self.sphere:
            self.en = pj_enfn(self.es)
            self.m0 = pj_mlfn(self.lat0, math.sin(self.lat0), math.cos(self.lat0), self.en)

    def forward(self, point: Point) -> Point:
        lam = adjust_lon(point.x - self.long0)
        phi = point.y

        if self.sphere:
            x = asinz(math.cos(phi) * math.sin(lam))
            y = math.atan2(math.tan(phi), math.cos(lam)) - self.lat0
        else:
            n = math.sin(phi)
            c = math.cos(phi)
            y = pj_mlfn(phi, n, c, self.en)
            n = 1.0 / math.sqrt(1.0 - self.es * n * n)
            tn = math.tan(phi)
            t = tn * tn
            a1 = lam * c
            c *= self.es * c / (1.0 - self.es)
            a2 = a1 * a1
            x = n * a1 * (1.0 - a2 * t * (C1 - (8.0 - t + 8.0 * c) * a2 * C2))
            y -= self.m0 - n * tn * a2 * (0.5 + (5.0 - t + 6.0 * c) * a2 * C3)

        point.x = self.a * x
        point.y = self.a * y
        return point

    def inverse(self, point: Point) -> Point:
        x = point.x / self.a
        y = point.y / self.a

        if self.sphere:
            dd = y + self.lat0
            phi = asinz(math.sin(dd) * math.cos(x))
            lam = math.atan2(math.tan(x), math.cos(dd))
        else:
            ph1 = pj_inv_mlfn(self.m0 + y, self.es, self.en)
            tn = math.tan(ph1)
            t = tn * tn
            n = math.sin(ph1)
            r = 1.0 / (1.0 - self.es * n * n)
            n = math.sqrt(r)
            r *= (1.0 - self.es) * n
            dd = x / n
            d2 = dd * dd
            phi = ph1 - (n * tn / r) * d2 * (0.5 - (1.0 + 3.0 * t) * d2 * C3)
            lam = dd * (1.0 + t * d2 * (-C4 + (1.0 + 3.0 * t) * d2 * C5)) / math.cos(ph1)

        point.x = adjust_lon(lam + self.long0)
        point.y = phi
        return point
