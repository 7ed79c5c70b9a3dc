from __future__ import annotations

import math

from mappyproj.constructs.point import Point
from mappyproj.projections.projection_interface import ProjectionInterface
from mappyproj.utils.constants import EPSLN, HALF_PI, PI
from mappyproj.utils.math_utils import adjust_lon, asinz, sign


class VanDerGrinten(ProjectionInterface):
    """Van der Grinten I, spherical."""

    name = "vandg"

    def forward(self, point: Point) -> Point:
        lat = point.y
        dlon = adjust_lon(point.x - self.long0)
        pi_a = PI * self.a

        if abs(lat) <= EPSLN:
            point.x = self.a * dlon
            point.y = 0.0
            return point

        theta = asinz(2.0 * abs(lat / PI))
        if abs(dlon) <= EPSLN or abs(abs(lat) - HALF_PI) <= EPSLN:
            point.x = 0.0
            point.y = sign(lat) * pi_a * math.tan(0.5 * theta)
            return point

        al = 0.5 * abs((PI / dlon) - (dlon / PI))
        asq = al * al
        sinth = math.sin(theta)
        costh = math.cos(theta)

        g = costh / (sinth + costh - 1.0)
        gsq = g * g
        m = g * (2.0 / sinth - 1.0)
        msq = m * m
        radicand = asq * (g - msq) * (g - msq) - (msq + asq) * (gsq - msq)
        con = (
            pi_a * (al * (g - msq) + math.sqrt(max(0.0, radicand))) / (msq + asq)
        )
        if dlon < 0:
            con = -con
        point.x = con

        con = abs(con / pi_a)
        y = pi_a * math.sqrt(max(0.0, 1.0 - con * con - 2.0 * al * con))
        point.y = y if lat >= 0 else -y
        return point

    def inverse(self, point: Point) -> Point:
        pi_a = PI * self.a
        xx = point.x / pi_a
        yy = point.y / pi_a
        xys = xx * xx + yy * yy

        if abs(yy) <= EPSLN:
            lat = 0.0
        else:
            c1 = -abs(yy) * (1.0 + xys)
            c2 = c1 - 2.0 * yy * yy + xx * xx
            c3 = -2.0 * c1 + 1.0 + 2.0 * yy * yy + xys * xys
            d = yy * yy / c3 + (
                2.0 * c2 * c2 * c2 / c3 / c3 / c3 - 9.0 * c1 * c2 / c3 / c3
            ) / 27.0
            a1 = (c1 - c2 * c2 / 3.0 / c3) / c3
            m1 = 2.0 * math.sqrt(max(0.0, -a1 / 3.0))
            con = ((3.0 * d) / a1) / m1 if a1 and m1 else 1.0
            con = max(-1.0, min(1.0, con))
            th1 = math.acos(con) / 3.0
            lat = (-m1 * math.cos(th1 + PI / 3.0) - c2 / 3.0 / c3) * PI
            if point.y < 0:
                lat = -lat

        if abs(xx) < EPSLN:
            lon = self.long0
        else:
            lon = adjust_lon(
                self.long0
                + PI
                * (
                    xys
                    - 1.0
                    + math.sqrt(1.0 + 2.0 * (xx * xx - yy * yy) + xys * xys)
                )
                / 2.0
                / xx
            )

        point.x = lon
        point.y = lat
        return point
