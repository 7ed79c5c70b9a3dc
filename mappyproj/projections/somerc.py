from __future__ import annotations

import math

from mappyproj.constructs.point import Point
from mappyproj.projections.projection_interface import ProjectionInterface
from mappyproj.utils.constants import EPSLN, FORTPI, HALF_PI, MAX_ITER
from mappyproj.utils.exceptions import ConvergenceError, DomainError
from mappyproj.utils.math_utils import adjust_lon, checked_exp

TOL = 1.0e-12


class SwissObliqueMercator(ProjectionInterface):
    """
    Swiss Oblique Mercator (the CH1903 / LV03 and LV95 grids).

    The ellipsoid is mapped conformally to a sphere, which is then rotated so
    the origin lies on its equator before a Mercator projection is applied.
    """

    name = "somerc"

    def __init__(self, crs):
        super().__init__(crs)
        e = self.e
        es = self.es
        sin_phy0 = math.sin(self.lat0)

        self.r = self.k0 * self.a * math.sqrt(1.0 - es) / (1.0 - es * sin_phy0 * sin_phy0)
        self.alpha = math.sqrt(1.0 + es / (1.0 - es) * math.pow(math.cos(self.lat0), 4.0))
        self.b0 = math.asin(sin_phy0 / self.alpha)
        self.k = (
            math.log(math.tan(FORTPI + self.b0 / 2.0))
            - self.alpha * math.log(math.tan(FORTPI + self.lat0 / 2.0))
            + self.alpha
            * e
            / 2.0
            * math.log((1.0 + e * sin_phy0) / (1.0 - e * sin_phy0))
        )

    def forward(self, point: Point) -> Point:
        lon = point.x
        lat = point.y
        e = self.e

        if abs(abs(lat) - HALF_PI) <= EPSLN:
            raise DomainError(f"somerc: latitude {lat} is at a pole")

        sa1 = math.log(math.tan(FORTPI - lat / 2.0))
        sa2 = e / 2.0 * math.log((1.0 + e * math.sin(lat)) / (1.0 - e * math.sin(lat)))
        s = -self.alpha * (sa1 + sa2) + self.k

        # sphere latitude
        b = 2.0 * (math.atan(math.exp(s)) - FORTPI)

        # sphere longitude
        i = self.alpha * adjust_lon(lon - self.long0)

        # rotated sphere
        rot_i = math.atan(
            math.sin(i) / (math.sin(self.b0) * math.tan(b) + math.cos(self.b0) * math.cos(i))
        )
        rot_b = math.asin(
            math.cos(self.b0) * math.sin(b) - math.sin(self.b0) * math.cos(b) * math.cos(i)
        )

        point.y = self.r / 2.0 * math.log((1.0 + math.sin(rot_b)) / (1.0 - math.sin(rot_b)))
        point.x = self.r * rot_i
        return point

    def inverse(self, point: Point) -> Point:
        rot_i = point.x / self.r
        rot_b = 2.0 * (math.atan(checked_exp(point.y / self.r, self.name)) - FORTPI)

        b = math.asin(
            math.cos(self.b0) * math.sin(rot_b)
            + math.sin(self.b0) * math.cos(rot_b) * math.cos(rot_i)
        )
        i = math.atan(
            math.sin(rot_i)
            / (math.cos(self.b0) * math.cos(rot_i) - math.sin(self.b0) * math.tan(rot_b))
        )
        lon = self.long0 + i / self.alpha

        e = self.e
        phy = b
        for _ in range(MAX_ITER):
            s = 1.0 / self.alpha * (
                math.log(math.tan(FORTPI + b / 2.0)) - self.k
            ) + e * math.log(math.tan(FORTPI + math.asin(e * math.sin(phy)) / 2.0))
            prev_phy = phy
            phy = 2.0 * math.atan(math.exp(s)) - HALF_PI
            if abs(phy - prev_phy) <= TOL:
                break
        else:
            raise ConvergenceError(f"somerc inverse did not converge in {MAX_ITER} iterations")

        point.x = adjust_lon(lon)
        point.y = phy
        return point
