from __future__ import annotations

import math

from mappyproj.constructs.point import Point
from mappyproj.projections.projection_interface import ProjectionInterface
from mappyproj.utils.constants import D2R, EPSLN, HALF_PI
from mappyproj.utils.exceptions import ConfigurationError, DomainError
from mappyproj.utils.math_utils import (
    adjust_lon,
    asinz,
    checked_exp,
    e0fn,
    e1fn,
    e2fn,
    e3fn,
    mlfn,
    phi3z,
    sign,
)


class TransverseMercator(ProjectionInterface):
    """
    Transverse Mercator using the classic series expansion about the central meridian.

    The series is accurate to well under a millimeter within a UTM zone width of
    the central meridian and degrades slowly further out.
    """

    name = "tmerc"

    def __init__(self, crs):
        super().__init__(crs)
        self.e0 = e0fn(self.es)
        self.e1 = e1fn(self.es)
        self.e2 = e2fn(self.es)
        self.e3 = e3fn(self.es)
        self.ml0 = self.a * mlfn(self.e0, self.e1, self.e2, self.e3, self.lat0)

    def forward(self, point: Point) -> Point:
        lon = point.x
        lat = point.y

        delta_lon = adjust_lon(lon - self.long0)
        sin_phi = math.sin(lat)
        cos_phi = math.cos(lat)

        if self.sphere:
            b = cos_phi * math.sin(delta_lon)
            if abs(abs(b) - 1.0) < EPSLN:
                raise DomainError("tmerc: point projects into infinity")
            x = 0.5 * self.a * self.k0 * math.log((1.0 + b) / (1.0 - b))
            con = math.acos(
                max(-1.0, min(1.0, cos_phi * math.cos(delta_lon) / math.sqrt(1.0 - b * b)))
            )
            if lat < 0:
                con = -con
            y = self.a * self.k0 * (con - self.lat0)
        else:
            al = cos_phi * delta_lon
            als = al * al
            c = self.ep2 * cos_phi * cos_phi
            tq = math.tan(lat)
            t = tq * tq
            con = 1.0 - self.es * sin_phi * sin_phi
            n = self.a / math.sqrt(con)
            ml = self.a * mlfn(self.e0, self.e1, self.e2, self.e3, lat)

            x = (
                self.k0
                * n
                * al
                * (
                    1.0
                    + als
                    / 6.0
                    * (
                        1.0
                        - t
                        + c
                        + als / 20.0 * (5.0 - 18.0 * t + t * t + 72.0 * c - 58.0 * self.ep2)
                    )
                )
            )
            y = self.k0 * (
                ml
                - self.ml0
                + n
                * tq
                * (
                    als
                    * (
                        0.5
                        + als
                        / 24.0
                        * (
                            5.0
                            - t
                            + 9.0 * c
                            + 4.0 * c * c
                            + als
                            / 30.0
                            * (61.0 - 58.0 * t + t * t + 600.0 * c - 330.0 * self.ep2)
                        )
                    )
                )
            )

        point.x = x
        point.y = y
        return point

    def inverse(self, point: Point) -> Point:
        x = point.x
        y = point.y

        if self.sphere:
            f = checked_exp(abs(x) / (self.a * self.k0), self.name)
            g = sign(x) * 0.5 * (f - 1.0 / f)
            temp = self.lat0 + y / (self.a * self.k0)
            h = math.cos(temp)
            con = math.sqrt((1.0 - h * h) / (1.0 + g * g))
            lat = asinz(con)
            if temp < 0:
                lat = -lat
            if g == 0 and h == 0:
                lon = self.long0
            else:
                lon = adjust_lon(math.atan2(g, h) + self.long0)
        else:
            con = (self.ml0 + y / self.k0) / self.a
            phi = phi3z(con, self.e0, self.e1, self.e2, self.e3)

            if abs(phi) < HALF_PI:
                sin_phi = math.sin(phi)
                cos_phi = math.cos(phi)
                tan_phi = math.tan(phi)
                c = self.ep2 * cos_phi * cos_phi
                cs = c * c
                t = tan_phi * tan_phi
                ts = t * t
                con = 1.0 - self.es * sin_phi * sin_phi
                n = self.a / math.sqrt(con)
                r = n * (1.0 - self.es) / con
                d = x / (n * self.k0)
                ds = d * d
                lat = phi - (n * tan_phi * ds / r) * (
                    0.5
                    - ds
                    / 24.0
                    * (
                        5.0
                        + 3.0 * t
                        + 10.0 * c
                        - 4.0 * cs
                        - 9.0 * self.ep2
                        - ds
                        / 30.0
                        * (61.0 + 90.0 * t + 298.0 * c + 45.0 * ts - 252.0 * self.ep2 - 3.0 * cs)
                    )
                )
                lon = adjust_lon(
                    self.long0
                    + (
                        d
                        * (
                            1.0
                            - ds
                            / 6.0
                            * (
                                1.0
                                + 2.0 * t
                                + c
                                - ds
                                / 20.0
                                * (5.0 - 2.0 * c + 28.0 * t - 3.0 * cs + 8.0 * self.ep2 + 24.0 * ts)
                            )
                        )
                        / cos_phi
                    )
                )
            else:
                lat = HALF_PI * sign(y)
                lon = self.long0

        point.x = lon
        point.y = lat
        return point


class UniversalTransverseMercator(TransverseMercator):
    """
    UTM: Transverse Mercator with the origin, offsets and scale derived from the zone.

    The derived values are written back to the CRS so the orchestrator applies
    the 500 km false easting (and 10,000 km false northing in the south).
    """

    name = "utm"

    def __init__(self, crs):
        if crs.zone is None:
            raise ConfigurationError("utm requires a +zone parameter")
        zone = abs(int(crs.zone))
        if not 1 <= zone <= 60:
            raise ConfigurationError(f"utm zone {crs.zone} is out of range 1..60")

        crs.zone = zone
        crs.lat0 = 0.0
        crs.long0 = ((6 * zone) - 183) * D2R
        crs.x0 = 500000.0
        crs.y0 = 10000000.0 if crs.utm_south else 0.0
        crs.k0 = 0.9996

        super().__init__(crs)
