from __future__ import annotations

import math

from mappyproj.constructs.point import Point
from mappyproj.projections.projection_interface import ProjectionInterface
from mappyproj.utils.constants import EPSLN
from mappyproj.utils.exceptions import ConfigurationError, DomainError
from mappyproj.utils.math_utils import adjust_lon, msfnz, phi1z, qsfnz


class AlbersEqualArea(ProjectionInterface):
    """Albers Equal-Area Conic."""

    name = "aea"

    def __init__(self, crs):
        super().__init__(crs)
        lat1 = crs.lat1 if crs.lat1 is not None else self.lat0
        lat2 = crs.lat2 if crs.lat2 is not None else lat1
        if abs(lat1 + lat2) < EPSLN:
            raise ConfigurationError(
                "aea: standard parallels are equal and opposite; the cone is degenerate"
            )
        self.lat1 = lat1
        self.lat2 = lat2

        e3 = self.e

        sin_po = math.sin(lat1)
        cos_po = math.cos(lat1)
        con = sin_po
        ms1 = msfnz(e3, sin_po, cos_po)
        qs1 = qsfnz(e3, sin_po)

        sin_po = math.sin(lat2)
        cos_po = math.cos(lat2)
        ms2 = msfnz(e3, sin_po, cos_po)
        qs2 = qsfnz(e3, sin_po)

        qs0 = qsfnz(e3, math.sin(self.lat0))

        if abs(lat1 - lat2) > EPSLN:
            self.ns0 = (ms1 * ms1 - ms2 * ms2) / (qs2 - qs1)
        else:
            self.ns0 = con
        self.c = ms1 * ms1 + self.ns0 * qs1
        self.rh = self.a * math.sqrt(self.c - self.ns0 * qs0) / self.ns0

    def forward(self, point: Point) -> Point:
        lon = point.x
        lat = point.y

        qs = qsfnz(self.e, math.sin(lat))
        radicand = self.c - self.ns0 * qs
        if radicand < 0:
            raise DomainError(f"aea: latitude {lat} is outside the projection's range")
        rh1 = self.a * math.sqrt(radicand) / self.ns0
        theta = self.ns0 * adjust_lon(lon - self.long0)

        point.x = rh1 * math.sin(theta)
        point.y = self.rh - rh1 * math.cos(theta)
        return point

    def inverse(self, point: Point) -> Point:
        x = point.x
        y = self.rh - point.y

        if self.ns0 >= 0:
            rh1 = math.sqrt(x * x + y * y)
            con = 1.0
        else:
            rh1 = -math.sqrt(x * x + y * y)
            con = -1.0

        theta = 0.0
        if rh1 != 0.0:
            theta = math.atan2(con * x, con * y)

        con = rh1 * self.ns0 / self.a
        if self.sphere:
            arg = (self.c - con * con) / (2.0 * self.ns0)
            if abs(arg) > 1.0 + EPSLN:
                raise DomainError("aea: radius is outside the projection's range")
            lat = math.asin(max(-1.0, min(1.0, arg)))
        else:
            qs = (self.c - con * con) / self.ns0
            lat = phi1z(self.e, qs)

        point.x = adjust_lon(theta / self.ns0 + self.long0)
        point.y = lat
        return point
