from __future__ import annotations

import math

from mappyproj.constructs.point import Point
from mappyproj.projections.projection_interface import ProjectionInterface
from mappyproj.utils.constants import EPSLN, HALF_PI, PI
from mappyproj.utils.exceptions import ConfigurationError, DomainError
from mappyproj.utils.math_utils import adjust_lon, msfnz, phi2z, sign, tsfnz


class LambertConformalConic(ProjectionInterface):
    """
    Lambert Conformal Conic with one or two standard parallels.

    With a single parallel both parallels take its value; with none at all the
    latitude of origin is used, giving a cone tangent there.
    """

    name = "lcc"

    def __init__(self, crs):
        lat1 = crs.lat1
        lat2 = crs.lat2
        if lat1 is None:
            lat1 = crs.lat0
        if lat2 is None:
            lat2 = lat1
            if crs.definition.lat0 is None:
                crs.lat0 = lat1
        super().__init__(crs)

        if abs(lat1 + lat2) < EPSLN:
            raise ConfigurationError(
                "lcc: standard parallels are equal and opposite; the cone is degenerate"
            )
        self.lat1 = lat1
        self.lat2 = lat2

        e = self.e
        sin1 = math.sin(lat1)
        cos1 = math.cos(lat1)
        ms1 = msfnz(e, sin1, cos1)
        ts1 = tsfnz(e, lat1, sin1)

        sin2 = math.sin(lat2)
        cos2 = math.cos(lat2)
        ms2 = msfnz(e, sin2, cos2)
        ts2 = tsfnz(e, lat2, sin2)

        ts0 = tsfnz(e, self.lat0, math.sin(self.lat0))

        if abs(lat1 - lat2) > EPSLN:
            self.ns = math.log(ms1 / ms2) / math.log(ts1 / ts2)
        else:
            self.ns = sin1
        self.f0 = ms1 / (self.ns * math.pow(ts1, self.ns))
        self.rh = self.a * self.f0 * math.pow(ts0, self.ns)

    def forward(self, point: Point) -> Point:
        lon = point.x
        lat = point.y

        # nudge a pole latitude just inside so tsfnz stays finite
        if abs(2.0 * abs(lat) - PI) <= EPSLN:
            lat = sign(lat) * (HALF_PI - 2.0 * EPSLN)

        con = abs(abs(lat) - HALF_PI)
        if con > EPSLN:
            ts = tsfnz(self.e, lat, math.sin(lat))
            rh1 = self.a * self.f0 * math.pow(ts, self.ns)
        else:
            if lat * self.ns <= 0:
                raise DomainError("lcc: the pole opposite the cone apex is unprojectable")
            rh1 = 0.0

        theta = self.ns * adjust_lon(lon - self.long0)
        point.x = self.k0 * (rh1 * math.sin(theta))
        point.y = self.k0 * (self.rh - rh1 * math.cos(theta))
        return point

    def inverse(self, point: Point) -> Point:
        x = point.x / self.k0
        y = self.rh - point.y / self.k0

        if self.ns > 0:
            rh1 = math.sqrt(x * x + y * y)
            con = 1.0
        else:
            rh1 = -math.sqrt(x * x + y * y)
            con = -1.0

        theta = 0.0
        if rh1 != 0:
            theta = math.atan2(con * x, con * y)

        if rh1 != 0 or self.ns > 0:
            ts = math.pow(rh1 / (self.a * self.f0), 1.0 / self.ns)
            lat = phi2z(self.e, ts)
        else:
            lat = -HALF_PI

        point.x = adjust_lon(theta / self.ns + self.long0)
        point.y = lat
        return point
