from __future__ import annotations

import math
from enum import Enum

from mappyproj.constructs.point import Point
from mappyproj.projections.projection_interface import ProjectionInterface
from mappyproj.utils.constants import EPSLN, FORTPI, HALF_PI
from mappyproj.utils.exceptions import DomainError
from mappyproj.utils.math_utils import adjust_lon, asinz, authlat, authset, qsfnz


class AzimuthalMode(Enum):
    """Where the centre of an azimuthal projection sits."""

    N_POLE = "north_pole"
    S_POLE = "south_pole"
    EQUIT = "equatorial"
    OBLIQ = "oblique"

    @classmethod
    def from_latitude(cls, lat0: float) -> AzimuthalMode:
        t = abs(lat0)
        if abs(t - HALF_PI) < EPSLN:
            return cls.S_POLE if lat0 < 0 else cls.N_POLE
        if t < EPSLN:
            return cls.EQUIT
        return cls.OBLIQ


class LambertAzimuthalEqualArea(ProjectionInterface):
    """
    Lambert Azimuthal Equal-Area in polar, equatorial and oblique aspects.

    The ellipsoidal form maps through the authalic sphere.
    """

    name = "laea"

    def __init__(self, crs):
        super().__init__(crs)
        self.mode = AzimuthalMode.from_latitude(self.lat0)

        if not self.sphere:
            self.qp = qsfnz(self.e, 1.0)
            self.apa = authset(self.es)
            if self.mode in (AzimuthalMode.N_POLE, AzimuthalMode.S_POLE):
                self.dd = 1.0
            elif self.mode == AzimuthalMode.EQUIT:
                self.rq = math.sqrt(0.5 * self.qp)
                self.dd = 1.0 / self.rq
                self.xmf = 1.0
                self.ymf = 0.5 * self.qp
            else:
                self.rq = math.sqrt(0.5 * self.qp)
                sinphi = math.sin(self.lat0)
                self.sinb1 = qsfnz(self.e, sinphi) / self.qp
                self.cosb1 = math.sqrt(1.0 - self.sinb1 * self.sinb1)
                self.dd = math.cos(self.lat0) / (
                    math.sqrt(1.0 - self.es * sinphi * sinphi) * self.rq * self.cosb1
                )
                self.xmf = self.rq * self.dd
                self.ymf = self.rq / self.dd
        elif self.mode == AzimuthalMode.OBLIQ:
            self.sinph0 = math.sin(self.lat0)
            self.cosph0 = math.cos(self.lat0)

    def forward(self, point: Point) -> Point:
        lam = adjust_lon(point.x - self.long0)
        phi = point.y
        if self.sphere:
            x, y = self._s_forward(lam, phi)
        else:
            x, y = self._e_forward(lam, phi)
        point.x = self.a * x
        point.y = self.a * y
        return point

    def inverse(self, point: Point) -> Point:
        x = point.x / self.a
        y = point.y / self.a
        if self.sphere:
            lam, phi = self._s_inverse(x, y)
        else:
            lam, phi = self._e_inverse(x, y)
        point.x = adjust_lon(lam + self.long0)
        point.y = phi
        return point

    def _e_forward(self, lam: float, phi: float):
        coslam = math.cos(lam)
        sinlam = math.sin(lam)
        q = qsfnz(self.e, math.sin(phi))
        mode = self.mode

        sinb = cosb = 0.0
        if mode in (AzimuthalMode.OBLIQ, AzimuthalMode.EQUIT):
            sinb = q / self.qp
            cosb = math.sqrt(max(0.0, 1.0 - sinb * sinb))

        if mode == AzimuthalMode.OBLIQ:
            b = 1.0 + self.sinb1 * sinb + self.cosb1 * cosb * coslam
        elif mode == AzimuthalMode.EQUIT:
            b = 1.0 + cosb * coslam
        elif mode == AzimuthalMode.N_POLE:
            b = HALF_PI + phi
            q = self.qp - q
        else:
            b = phi - HALF_PI
            q = self.qp + q

        if abs(b) < EPSLN:
            raise DomainError("laea: the antipode of the centre is unprojectable")

        if mode == AzimuthalMode.OBLIQ:
            b = math.sqrt(2.0 / b)
            y = self.ymf * b * (self.cosb1 * sinb - self.sinb1 * cosb * coslam)
            x = self.xmf * b * cosb * sinlam
        elif mode == AzimuthalMode.EQUIT:
            b = math.sqrt(2.0 / b)
            y = b * sinb * self.ymf
            x = self.xmf * b * cosb * sinlam
        else:
            if q >= 0:
                b = math.sqrt(q)
                x = b * sinlam
                y = coslam * (b if mode == AzimuthalMode.S_POLE else -b)
            else:
                x = y = 0.0
        return x, y

    def _s_forward(self, lam: float, phi: float):
        coslam = math.cos(lam)
        sinlam = math.sin(lam)
        sinphi = math.sin(phi)
        cosphi = math.cos(phi)
        mode = self.mode

        if mode in (AzimuthalMode.EQUIT, AzimuthalMode.OBLIQ):
            if mode == AzimuthalMode.EQUIT:
                y = 1.0 + cosphi * coslam
            else:
                y = 1.0 + self.sinph0 * sinphi + self.cosph0 * cosphi * coslam
            if y <= EPSLN:
                raise DomainError("laea: the antipode of the centre is unprojectable")
            y = math.sqrt(2.0 / y)
            x = y * cosphi * sinlam
            if mode == AzimuthalMode.EQUIT:
                y *= sinphi
            else:
                y *= self.cosph0 * sinphi - self.sinph0 * cosphi * coslam
            return x, y

        if mode == AzimuthalMode.N_POLE:
            coslam = -coslam
        if abs(phi + self.lat0) < EPSLN:
            raise DomainError("laea: the antipode of the centre is unprojectable")
        y = FORTPI - phi * 0.5
        y = 2.0 * (math.cos(y) if mode == AzimuthalMode.S_POLE else math.sin(y))
        x = y * sinlam
        y *= coslam
        return x, y

    def _e_inverse(self, x: float, y: float):
        mode = self.mode

        if mode in (AzimuthalMode.OBLIQ, AzimuthalMode.EQUIT):
            x /= self.dd
            y *= self.dd
            rho = math.hypot(x, y)
            if rho < EPSLN:
                return 0.0, self.lat0
            arg = 0.5 * rho / self.rq
            if arg > 1.0 + EPSLN:
                raise DomainError("laea: point lies outside the projection's disc")
            s_ce = 2.0 * asinz(arg)
            c_ce = math.cos(s_ce)
            s_ce = math.sin(s_ce)
            x *= s_ce
            if mode == AzimuthalMode.OBLIQ:
                ab = c_ce * self.sinb1 + y * s_ce * self.cosb1 / rho
                y = rho * self.cosb1 * c_ce - y * self.sinb1 * s_ce
            else:
                ab = y * s_ce / rho
                y = rho * c_ce
        else:
            if mode == AzimuthalMode.N_POLE:
                y = -y
            q = x * x + y * y
            if q == 0:
                return 0.0, self.lat0
            ab = 1.0 - q / self.qp
            if mode == AzimuthalMode.S_POLE:
                ab = -ab
            if abs(ab) > 1.0 + EPSLN:
                raise DomainError("laea: point lies outside the projection's disc")

        lam = math.atan2(x, y)
        phi = authlat(asinz(ab), self.apa)
        return lam, phi

    def _s_inverse(self, x: float, y: float):
        mode = self.mode
        rh = math.hypot(x, y)
        phi = rh * 0.5
        if phi > 1.0 + EPSLN:
            raise DomainError("laea: point lies outside the projection's disc")
        phi = 2.0 * asinz(phi)

        if mode in (AzimuthalMode.EQUIT, AzimuthalMode.OBLIQ):
            sinz = math.sin(phi)
            cosz = math.cos(phi)
            if mode == AzimuthalMode.EQUIT:
                phi = 0.0 if abs(rh) <= EPSLN else asinz(y * sinz / rh)
                x *= sinz
                y = cosz * rh
            else:
                if abs(rh) <= EPSLN:
                    phi = self.lat0
                else:
                    phi = asinz(cosz * self.sinph0 + y * sinz * self.cosph0 / rh)
                x *= sinz * self.cosph0
                y = (cosz - math.sin(phi) * self.sinph0) * rh
            lam = 0.0 if y == 0 else math.atan2(x, y)
            return lam, phi

        if mode == AzimuthalMode.N_POLE:
            y = -y
            phi = HALF_PI - phi
        else:
            phi -= HALF_PI
        lam = math.atan2(x, y)
        return lam, phi
