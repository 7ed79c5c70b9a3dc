from __future__ import annotations

import math

from mappyproj.constructs.point import Point
from mappyproj.projections.projection_interface import ProjectionInterface
from mappyproj.utils.constants import EPSLN
from mappyproj.utils.exceptions import ConfigurationError
from mappyproj.utils.math_utils import (
    adjust_lon,
    e0fn,
    e1fn,
    e2fn,
    e3fn,
    mlfn,
    msfnz,
    phi3z,
)


class EquidistantConic(ProjectionInterface):
    """Equidistant Conic with one or two standard parallels."""

    name = "eqdc"

    def __init__(self, crs):
        super().__init__(crs)
        lat1 = crs.lat1 if crs.lat1 is not None else self.lat0
        lat2 = crs.lat2 if crs.lat2 is not None else lat1
        if abs(lat1 + lat2) < EPSLN:
            raise ConfigurationError(
                "eqdc: standard parallels are equal and opposite; the cone is degenerate"
            )
        self.lat1 = lat1
        self.lat2 = lat2

        self.e0 = e0fn(self.es)
        self.e1 = e1fn(self.es)
        self.e2 = e2fn(self.es)
        self.e3 = e3fn(self.es)

        sinphi = math.sin(lat1)
        cosphi = math.cos(lat1)
        ms1 = msfnz(self.e, sinphi, cosphi)
        ml1 = mlfn(self.e0, self.e1, self.e2, self.e3, lat1)

        if abs(lat1 - lat2) < EPSLN:
            self.ns = sinphi
        else:
            sinphi = math.sin(lat2)
            cosphi = math.cos(lat2)
            ms2 = msfnz(self.e, sinphi, cosphi)
            ml2 = mlfn(self.e0, self.e1, self.e2, self.e3, lat2)
            self.ns = (ms1 - ms2) / (ml2 - ml1)

        self.g = ml1 + ms1 / self.ns
        self.ml0 = mlfn(self.e0, self.e1, self.e2, self.e3, self.lat0)
        self.rh = self.a * (self.g - self.ml0)

    def forward(self, point: Point) -> Point:
        lon = point.x
        lat = point.y

        ml = mlfn(self.e0, self.e1, self.e2, self.e3, lat)
        rh1 = self.a * (self.g - ml)
        theta = self.ns * adjust_lon(lon - self.long0)

        point.x = rh1 * math.sin(theta)
        point.y = self.rh - rh1 * math.cos(theta)
        return point

    def inverse(self, point: Point) -> Point:
        x = point.x
        y = self.rh - point.y

        if self.ns >= 0:
            rh1 = math.sqrt(x * x + y * y)
            con = 1.0
        else:
            rh1 = -math.sqrt(x * x + y * y)
            con = -1.0

        theta = 0.0
        if rh1 != 0:
            theta = math.atan2(con * x, con * y)

        ml = self.g - rh1 / self.a
        lat = phi3z(ml, self.e0, self.e1, self.e2, self.e3)

        point.x = adjust_lon(self.long0 + theta / self.ns)
        point.y = lat
        return point
