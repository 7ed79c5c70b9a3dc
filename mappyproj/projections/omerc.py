from __future__ import annotations

import math

from mappyproj.constructs.point import Point
from mappyproj.projections.projection_interface import ProjectionInterface
from mappyproj.utils.constants import EPSLN, HALF_PI, PI, TWO_PI
from mappyproj.utils.exceptions import ConfigurationError, DomainError
from mappyproj.utils.math_utils import adjust_lon, asinz, checked_exp, phi2z, sign, tsfnz


class ObliqueMercator(ProjectionInterface):
    """
    Hotine Oblique Mercator with coordinates measured from the projection centre.

    The central line is given either by a centre point and azimuth
    (``+lonc`` and ``+alpha``) or by two points on it (``+lat_1 +lon_1 +lat_2 +lon_2``).
    """

    name = "omerc"

    def __init__(self, crs):
        super().__init__(crs)
        es = self.es
        e = self.e

        sin_p20 = math.sin(self.lat0)
        cos_p20 = math.cos(self.lat0)
        con = 1.0 - es * sin_p20 * sin_p20
        com = cos_p20 * cos_p20
        self.bl = math.sqrt(1.0 + es * com * com / (1.0 - es))
        self.al = self.a * self.bl * self.k0 * math.sqrt(1.0 - es) / con

        if abs(self.lat0) < EPSLN:
            d = 1.0
            self.el = 1.0
            f = 1.0
        else:
            ts = tsfnz(e, self.lat0, sin_p20)
            con = math.sqrt(con)
            d = self.bl * math.sqrt(1.0 - es) / (cos_p20 * con)
            if d * d - 1.0 > 0:
                if self.lat0 >= 0:
                    f = d + math.sqrt(d * d - 1.0)
                else:
                    f = d - math.sqrt(d * d - 1.0)
            else:
                f = d
            self.el = f * math.pow(ts, self.bl)

        self.d = d
        two_point = None not in (crs.lat1, crs.lat2, crs.long1, crs.long2)
        if two_point:
            gama = self._init_two_point(crs)
        else:
            if crs.alpha is None:
                raise ConfigurationError(
                    "omerc requires either +alpha or +lat_1 +lon_1 +lat_2 +lon_2"
                )
            con = abs(self.lat0)
            if con <= EPSLN or abs(con - HALF_PI) <= EPSLN:
                raise ConfigurationError(
                    "omerc: the azimuth form needs a centre latitude away from the equator and poles"
                )
            self.alpha = crs.alpha
            longc = crs.longc if crs.longc is not None else self.long0
            g = 0.5 * (f - 1.0 / f)
            gama = asinz(math.sin(self.alpha) / d)
            self.longc = longc - asinz(g * math.tan(gama)) / self.bl

        self.singam = math.sin(gama)
        self.cosgam = math.cos(gama)
        self.sinaz = math.sin(self.alpha)
        self.cosaz = math.cos(self.alpha)

        u = (self.al / self.bl) * math.atan(math.sqrt(max(0.0, d * d - 1.0)) / self.cosaz)
        self.u = u if self.lat0 >= 0 else -u

    def _init_two_point(self, crs) -> float:
        lat1 = crs.lat1
        lat2 = crs.lat2
        lon1 = crs.long1
        lon2 = crs.long2

        if abs(lat1 - lat2) <= EPSLN:
            raise ConfigurationError("omerc: the two points share a latitude")
        con = abs(lat1)
        if con <= EPSLN or abs(con - HALF_PI) <= EPSLN:
            raise ConfigurationError("omerc: the first point lies on the equator or a pole")
        if abs(abs(self.lat0) - HALF_PI) <= EPSLN:
            raise ConfigurationError("omerc: the centre latitude is a pole")

        ts1 = tsfnz(self.e, lat1, math.sin(lat1))
        ts2 = tsfnz(self.e, lat2, math.sin(lat2))
        h1 = math.pow(ts1, self.bl)
        h2 = math.pow(ts2, self.bl)
        f = self.el / h1
        g = 0.5 * (f - 1.0 / f)
        j = (self.el * self.el - h2 * h1) / (self.el * self.el + h2 * h1)
        p = (h2 - h1) / (h2 + h1)

        dlon = lon1 - lon2
        if dlon < -PI:
            lon2 -= TWO_PI
        if dlon > PI:
            lon2 += TWO_PI
        dlon = lon1 - lon2

        self.longc = 0.5 * (lon1 + lon2) - math.atan(
            j * math.tan(0.5 * self.bl * dlon) / p
        ) / self.bl
        dlon = adjust_lon(lon1 - self.longc)
        gama = math.atan(math.sin(self.bl * dlon) / g)
        self.alpha = asinz(self.d * math.sin(gama))
        return gama

    def forward(self, point: Point) -> Point:
        lon = point.x
        lat = point.y

        dlon = adjust_lon(lon - self.longc)
        if abs(abs(lat) - HALF_PI) > EPSLN:
            ts = tsfnz(self.e, lat, math.sin(lat))
            q = self.el / math.pow(ts, self.bl)
            s = 0.5 * (q - 1.0 / q)
            t = 0.5 * (q + 1.0 / q)
            vl = math.sin(self.bl * dlon)
            ul = (s * self.singam - vl * self.cosgam) / t
            con = math.cos(self.bl * dlon)
            if abs(con) < 1.0e-7:
                us = self.al * self.bl * dlon
            else:
                us = self.al * math.atan((s * self.cosgam + vl * self.singam) / con) / self.bl
                if con < 0:
                    us += PI * self.al / self.bl
        else:
            ul = self.singam if lat >= 0 else -self.singam
            us = self.al * lat / self.bl

        if abs(abs(ul) - 1.0) <= EPSLN:
            raise DomainError("omerc: point projects into infinity")

        vs = 0.5 * self.al * math.log((1.0 - ul) / (1.0 + ul)) / self.bl
        us -= self.u

        point.x = vs * self.cosaz + us * self.sinaz
        point.y = us * self.cosaz - vs * self.sinaz
        return point

    def inverse(self, point: Point) -> Point:
        x = point.x
        y = point.y

        vs = x * self.cosaz - y * self.sinaz
        us = y * self.cosaz + x * self.sinaz
        us += self.u

        w = self.bl * vs / self.al
        q = checked_exp(abs(w), self.name)
        s = -sign(w) * 0.5 * (q - 1.0 / q)
        t = 0.5 * (q + 1.0 / q)
        vl = math.sin(self.bl * us / self.al)
        ul = (vl * self.cosgam + s * self.singam) / t

        if abs(abs(ul) - 1.0) <= EPSLN:
            lon = self.longc
            lat = HALF_PI if ul >= 0 else -HALF_PI
        else:
            ts = math.pow(self.el / math.sqrt((1.0 + ul) / (1.0 - ul)), 1.0 / self.bl)
            lat = phi2z(self.e, ts)
            con = math.cos(self.bl * us / self.al)
            lon = adjust_lon(
                self.longc - math.atan2(s * self.cosgam - vl * self.singam, con) / self.bl
            )

        point.x = lon
        point.y = lat
        return point
