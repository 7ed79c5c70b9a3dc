from __future__ import annotations

import math

from mappyproj.constructs.point import Point
from mappyproj.projections.projection_interface import ProjectionInterface
from mappyproj.utils.constants import FORTPI
from mappyproj.utils.math_utils import adjust_lon, checked_exp


class MillerCylindrical(ProjectionInterface):
    """Miller Cylindrical, spherical. Unlike Mercator the poles are finite."""

    name = "mill"

    def forward(self, point: Point) -> Point:
        dlon = adjust_lon(point.x - self.long0)
        lat = point.y
        point.x = self.a * dlon
        point.y = self.a * math.log(math.tan(FORTPI + lat / 2.5)) * 1.25
        return point

    def inverse(self, point: Point) -> Point:
        x = point.x
        y = point.y
        point.x = adjust_lon(self.long0 + x / self.a)
        point.y = 2.5 * (math.atan(checked_exp(0.8 * y / self.a, self.name)) - FORTPI)
        return point
