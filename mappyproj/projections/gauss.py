from __future__ import annotations

import math
from typing import Tuple

from mappyproj.constructs.point import Point
from mappyproj.projections.projection_interface import ProjectionInterface
from mappyproj.utils.constants import FORTPI, HALF_PI, MAX_ITER
from mappyproj.utils.exceptions import ConvergenceError, DomainError
from mappyproj.utils.math_utils import adjust_lon, srat

DEL_TOL = 1.0e-14


class GaussSphere(ProjectionInterface):
    """
    Conformal mapping of the ellipsoid onto the Gaussian sphere.

    The "projected" coordinates are the longitude and latitude on the conformal
    sphere, in radians, with the longitude measured from the central meridian.
    The oblique stereographic family builds on this mapping.
    """

    name = "gauss"

    def __init__(self, crs):
        super().__init__(crs)
        sphi = math.sin(self.lat0)
        cphi = math.cos(self.lat0)
        cphi *= cphi
        self.rc = math.sqrt(1.0 - self.es) / (1.0 - self.es * sphi * sphi)
        self.c = math.sqrt(1.0 + self.es * cphi * cphi / (1.0 - self.es))
        self.phic0 = math.asin(sphi / self.c)
        self.ratexp = 0.5 * self.c * self.e
        self.k = math.tan(0.5 * self.phic0 + FORTPI) / (
            math.pow(math.tan(0.5 * self.lat0 + FORTPI), self.c)
            * srat(self.e * sphi, self.ratexp)
        )

    def to_sphere(self, lon: float, lat: float) -> Tuple[float, float]:
        """Map a longitude offset and latitude onto the conformal sphere."""
        if abs(lat) >= HALF_PI:
            return self.c * lon, math.copysign(HALF_PI, lat)
        lat = (
            2.0
            * math.atan(
                self.k
                * math.pow(math.tan(0.5 * lat + FORTPI), self.c)
                * srat(self.e * math.sin(lat), self.ratexp)
            )
            - HALF_PI
        )
        return self.c * lon, lat

    def from_sphere(self, lon: float, lat: float) -> Tuple[float, float]:
        """Inverse of :meth:`to_sphere`."""
        lon = lon / self.c
        if abs(lat) >= HALF_PI:
            return lon, math.copysign(HALF_PI, lat)
        num = math.pow(math.tan(0.5 * lat + FORTPI) / self.k, 1.0 / self.c)
        prev = lat
        for _ in range(MAX_ITER):
            lat = (
                2.0 * math.atan(num * srat(self.e * math.sin(prev), -0.5 * self.e))
                - HALF_PI
            )
            if abs(lat - prev) < DEL_TOL:
                return lon, lat
            prev = lat
        raise ConvergenceError(f"gauss inverse did not converge in {MAX_ITER} iterations")

    def forward(self, point: Point) -> Point:
        if abs(point.y) > HALF_PI:
            raise DomainError(f"gauss: latitude {point.y} is beyond a pole")
        point.x, point.y = self.to_sphere(adjust_lon(point.x - self.long0), point.y)
        return point

    def inverse(self, point: Point) -> Point:
        lon, lat = self.from_sphere(point.x, point.y)
        point.x = adjust_lon(lon + self.long0)
        point.y = lat
        return point
