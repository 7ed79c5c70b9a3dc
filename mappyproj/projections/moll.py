from __future__ import annotations

import math

from mappyproj.constructs.point import Point
from mappyproj.projections.projection_interface import ProjectionInterface
from mappyproj.utils.constants import EPSLN, FORTPI, HALF_PI, PI
from mappyproj.utils.exceptions import ConvergenceError, DomainError
from mappyproj.utils.math_utils import adjust_lon, sign

MAX_ITER = 30
C_X = 2.0 * math.sqrt(2.0) / PI
C_Y = math.sqrt(2.0)


class Mollweide(ProjectionInterface):
    """Spherical Mollweide equal-area."""

    name = "moll"

    def _auxiliary_angle(self, lat: float) -> float:
        """Solve 2t + sin(2t) = pi * sin(lat) for t by Newton iteration."""
        if HALF_PI - abs(lat) < EPSLN:
            return sign(lat) * HALF_PI

        con = PI * math.sin(lat)
        # near the poles the equation has a near-triple root; start from its cubic approximation
        if abs(lat) > FORTPI:
            theta = sign(lat) * (PI - math.pow(6.0 * (PI - abs(con)), 1.0 / 3.0))
        else:
            theta = lat

        for _ in range(MAX_ITER):
            delta_theta = -(theta + math.sin(theta) - con) / (1.0 + math.cos(theta))
            theta += delta_theta
            if abs(delta_theta) < EPSLN:
                return theta / 2.0
        raise ConvergenceError(f"moll forward did not converge in {MAX_ITER} iterations")

    def forward(self, point: Point) -> Point:
        delta_lon = adjust_lon(point.x - self.long0)
        lat = point.y

        theta = self._auxiliary_angle(lat)
        if HALF_PI - abs(lat) < EPSLN:
            delta_lon = 0.0

        point.x = C_X * self.a * delta_lon * math.cos(theta)
        point.y = C_Y * self.a * math.sin(theta)
        return point

    def inverse(self, point: Point) -> Point:
        x = point.x
        y = point.y

        arg = y / (C_Y * self.a)
        if abs(arg) > 1.0 + EPSLN:
            raise DomainError(f"moll: northing {y} is outside the ellipse")
        arg = max(-1.0, min(1.0, arg))
        theta = math.asin(arg)

        cos_theta = math.cos(theta)
        if abs(cos_theta) < EPSLN:
            lon = self.long0
        else:
            lon = adjust_lon(self.long0 + x / (C_X * self.a * cos_theta))

        arg = (2.0 * theta + math.sin(2.0 * theta)) / PI
        arg = max(-1.0, min(1.0, arg))

        point.x = lon
        point.y = math.asin(arg)
        return point
