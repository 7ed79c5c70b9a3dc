from __future__ import annotations

import math

from mappyproj.constructs.point import Point
from mappyproj.projections.gauss import GaussSphere
from mappyproj.projections.projection_interface import ProjectionInterface
from mappyproj.utils.constants import EPSLN
from mappyproj.utils.exceptions import DomainError
from mappyproj.utils.math_utils import adjust_lon, asinz


class ObliqueStereographic(ProjectionInterface):
    """
    Oblique stereographic of the Gaussian conformal sphere (double stereographic).

    This is the projection of the Dutch RD and Romanian Stereo 70 grids.
    """

    name = "sterea"

    def __init__(self, crs):
        super().__init__(crs)
        self.gauss = GaussSphere(crs)
        self.sinc0 = math.sin(self.gauss.phic0)
        self.cosc0 = math.cos(self.gauss.phic0)
        self.r2 = 2.0 * self.gauss.rc

    def forward(self, point: Point) -> Point:
        lon, lat = self.gauss.to_sphere(adjust_lon(point.x - self.long0), point.y)
        sinc = math.sin(lat)
        cosc = math.cos(lat)
        cosl = math.cos(lon)
        denom = 1.0 + self.sinc0 * sinc + self.cosc0 * cosc * cosl
        if denom < EPSLN:
            raise DomainError("sterea: the antipode of the centre is unprojectable")
        k = self.k0 * self.r2 / denom

        point.x = self.a * k * cosc * math.sin(lon)
        point.y = self.a * k * (self.cosc0 * sinc - self.sinc0 * cosc * cosl)
        return point

    def inverse(self, point: Point) -> Point:
        x = point.x / (self.a * self.k0)
        y = point.y / (self.a * self.k0)

        rho = math.hypot(x, y)
        if rho:
            c = 2.0 * math.atan2(rho, self.r2)
            sinc = math.sin(c)
            cosc = math.cos(c)
            lat = asinz(cosc * self.sinc0 + y * sinc * self.cosc0 / rho)
            lon = math.atan2(x * sinc, rho * self.cosc0 * cosc - y * self.sinc0 * sinc)
        else:
            lat = self.gauss.phic0
            lon = 0.0

        lon, lat = self.gauss.from_sphere(lon, lat)
        point.x = adjust_lon(lon + self.long0)
        point.y = lat
        return point
