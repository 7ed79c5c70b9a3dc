from __future__ import annotations

import math

from mappyproj.constructs.point import Point
from mappyproj.projections.projection_interface import ProjectionInterface
from mappyproj.utils.constants import EPSLN, HALF_PI
from mappyproj.utils.exceptions import DomainError
from mappyproj.utils.math_utils import adjust_lat, adjust_lon


class Equirectangular(ProjectionInterface):
    """Equirectangular with the scale taken at the latitude of origin."""

    name = "equi"

    def __init__(self, crs):
        super().__init__(crs)
        self.cos_lat0 = math.cos(self.lat0)

    def forward(self, point: Point) -> Point:
        dlon = adjust_lon(point.x - self.long0)
        point.x = self.a * dlon * self.cos_lat0
        point.y = self.a * point.y
        return point

    def inverse(self, point: Point) -> Point:
        lat = point.y / self.a
        if abs(lat) > HALF_PI + EPSLN:
            raise DomainError(f"equi: northing {point.y} is beyond a pole")
        point.x = adjust_lon(self.long0 + point.x / (self.a * self.cos_lat0))
        point.y = lat
        return point


class EquidistantCylindrical(ProjectionInterface):
    """Equidistant Cylindrical (Plate Carree) with an optional latitude of true scale."""

    name = "eqc"

    def __init__(self, crs):
        super().__init__(crs)
        self.lat_ts = crs.lat_ts or 0.0
        self.rc = math.cos(self.lat_ts)

    def forward(self, point: Point) -> Point:
        dlon = adjust_lon(point.x - self.long0)
        dlat = adjust_lat(point.y - self.lat0)
        point.x = self.a * dlon * self.rc
        point.y = self.a * dlat
        return point

    def inverse(self, point: Point) -> Point:
        x = point.x
        y = point.y
        point.x = adjust_lon(self.long0 + x / (self.a * self.rc))
        point.y = adjust_lat(self.lat0 + y / self.a)
        return point
