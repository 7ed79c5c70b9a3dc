from __future__ import annotations

import math

from mappyproj.constructs.point import Point
from mappyproj.projections.laea import AzimuthalMode
from mappyproj.projections.projection_interface import ProjectionInterface
from mappyproj.utils.constants import EPSLN, FORTPI, HALF_PI
from mappyproj.utils.exceptions import ConvergenceError, DomainError
from mappyproj.utils.math_utils import adjust_lon, asinz, tsfnz

MAX_ITER = 15
CONV = 1.0e-10


def _ssfn(phit: float, sinphi: float, eccen: float) -> float:
    sinphi *= eccen
    return math.tan(0.5 * (HALF_PI + phit)) * math.pow(
        (1.0 - sinphi) / (1.0 + sinphi), 0.5 * eccen
    )


class Stereographic(ProjectionInterface):
    """
    Stereographic in polar, equatorial and oblique aspects.

    Polar aspects honour a latitude of true scale (``+lat_ts``) which, when
    present, replaces the scale factor. The ellipsoidal oblique form works on
    the conformal latitude.
    """

    name = "stere"

    def __init__(self, crs):
        super().__init__(crs)
        self.mode = AzimuthalMode.from_latitude(self.lat0)
        phits = abs(crs.lat_ts) if crs.lat_ts is not None else HALF_PI
        polar = self.mode in (AzimuthalMode.N_POLE, AzimuthalMode.S_POLE)

        if not self.sphere:
            e = self.e
            if polar:
                if abs(phits - HALF_PI) < EPSLN:
                    self.akm1 = (
                        2.0
                        * self.k0
                        / math.sqrt(math.pow(1 + e, 1 + e) * math.pow(1 - e, 1 - e))
                    )
                else:
                    t = math.sin(phits)
                    self.akm1 = math.cos(phits) / tsfnz(e, phits, t)
                    t *= e
                    self.akm1 /= math.sqrt(1.0 - t * t)
            else:
                t = math.sin(self.lat0)
                big_x = 2.0 * math.atan(_ssfn(self.lat0, t, e)) - HALF_PI
                t *= e
                self.akm1 = 2.0 * self.k0 * math.cos(self.lat0) / math.sqrt(1.0 - t * t)
                self.sin_x1 = math.sin(big_x)
                self.cos_x1 = math.cos(big_x)
        else:
            if polar:
                if abs(phits - HALF_PI) >= EPSLN:
                    self.akm1 = math.cos(phits) / math.tan(FORTPI - 0.5 * phits)
                else:
                    self.akm1 = 2.0 * self.k0
            else:
                self.sin_x1 = math.sin(self.lat0)
                self.cos_x1 = math.cos(self.lat0)
                self.akm1 = 2.0 * self.k0

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
        sinphi = math.sin(phi)
        mode = self.mode

        if mode in (AzimuthalMode.OBLIQ, AzimuthalMode.EQUIT):
            big_x = 2.0 * math.atan(_ssfn(phi, sinphi, self.e)) - HALF_PI
            sin_x = math.sin(big_x)
            cos_x = math.cos(big_x)
            if mode == AzimuthalMode.OBLIQ:
                denom = self.cos_x1 * (
                    1.0 + self.sin_x1 * sin_x + self.cos_x1 * cos_x * coslam
                )
            else:
                denom = 1.0 + cos_x * coslam
            if abs(denom) < EPSLN:
                raise DomainError("stere: the antipode of the centre is unprojectable")
            big_a = self.akm1 / denom
            if mode == AzimuthalMode.OBLIQ:
                y = big_a * (self.cos_x1 * sin_x - self.sin_x1 * cos_x * coslam)
            else:
                y = big_a * sin_x
            x = big_a * cos_x
        else:
            if mode == AzimuthalMode.S_POLE:
                phi = -phi
                coslam = -coslam
                sinphi = -sinphi
            if abs(phi + HALF_PI) < EPSLN:
                raise DomainError("stere: the pole opposite the centre is unprojectable")
            x = self.akm1 * tsfnz(self.e, phi, sinphi)
            y = -x * coslam
        return x * sinlam, y

    def _s_forward(self, lam: float, phi: float):
        sinphi = math.sin(phi)
        cosphi = math.cos(phi)
        coslam = math.cos(lam)
        sinlam = math.sin(lam)
        mode = self.mode

        if mode in (AzimuthalMode.EQUIT, AzimuthalMode.OBLIQ):
            if mode == AzimuthalMode.EQUIT:
                y = 1.0 + cosphi * coslam
            else:
                y = 1.0 + self.sin_x1 * sinphi + self.cos_x1 * cosphi * coslam
            if y <= EPSLN:
                raise DomainError("stere: the antipode of the centre is unprojectable")
            y = self.akm1 / y
            x = y * cosphi * sinlam
            if mode == AzimuthalMode.EQUIT:
                y *= sinphi
            else:
                y *= self.cos_x1 * sinphi - self.sin_x1 * cosphi * coslam
            return x, y

        if mode == AzimuthalMode.N_POLE:
            coslam = -coslam
            phi = -phi
        if abs(phi - HALF_PI) < EPSLN:
            raise DomainError("stere: the pole opposite the centre is unprojectable")
        y = self.akm1 * math.tan(FORTPI + 0.5 * phi)
        return sinlam * y, y * coslam

    def _e_inverse(self, x: float, y: float):
        mode = self.mode
        rho = math.hypot(x, y)

        if mode in (AzimuthalMode.OBLIQ, AzimuthalMode.EQUIT):
            tp = 2.0 * math.atan2(rho * self.cos_x1, self.akm1)
            cosphi = math.cos(tp)
            sinphi = math.sin(tp)
            if rho == 0.0:
                phi_l = asinz(cosphi * self.sin_x1)
            else:
                phi_l = asinz(cosphi * self.sin_x1 + (y * sinphi * self.cos_x1 / rho))
            tp = math.tan(0.5 * (HALF_PI + phi_l))
            x *= sinphi
            y = rho * self.cos_x1 * cosphi - y * self.sin_x1 * sinphi
            halfpi = HALF_PI
            halfe = 0.5 * self.e
        else:
            if mode == AzimuthalMode.N_POLE:
                y = -y
            tp = -rho / self.akm1
            phi_l = HALF_PI - 2.0 * math.atan(tp)
            halfpi = -HALF_PI
            halfe = -0.5 * self.e

        for _ in range(MAX_ITER):
            sinphi = self.e * math.sin(phi_l)
            phi = (
                2.0 * math.atan(tp * math.pow((1.0 + sinphi) / (1.0 - sinphi), halfe))
                - halfpi
            )
            if abs(phi_l - phi) < CONV:
                if mode == AzimuthalMode.S_POLE:
                    phi = -phi
                lam = 0.0 if (x == 0.0 and y == 0.0) else math.atan2(x, y)
                return lam, phi
            phi_l = phi
        raise ConvergenceError(f"stere inverse did not converge in {MAX_ITER} iterations")

    def _s_inverse(self, x: float, y: float):
        mode = self.mode
        rh = math.hypot(x, y)
        c = 2.0 * math.atan(rh / self.akm1)
        sinc = math.sin(c)
        cosc = math.cos(c)
        lam = 0.0

        if mode == AzimuthalMode.EQUIT:
            phi = 0.0 if abs(rh) <= EPSLN else asinz(y * sinc / rh)
            if cosc != 0.0 or x != 0.0:
                lam = math.atan2(x * sinc, cosc * rh)
        elif mode == AzimuthalMode.OBLIQ:
            if abs(rh) <= EPSLN:
                phi = self.lat0
            else:
                phi = asinz(cosc * self.sin_x1 + y * sinc * self.cos_x1 / rh)
            c = cosc - self.sin_x1 * math.sin(phi)
            if c != 0.0 or x != 0.0:
                lam = math.atan2(x * sinc * self.cos_x1, c * rh)
        else:
            if mode == AzimuthalMode.N_POLE:
                y = -y
            if abs(rh) <= EPSLN:
                phi = self.lat0
            else:
                phi = asinz(-cosc if mode == AzimuthalMode.S_POLE else cosc)
            lam = 0.0 if (x == 0.0 and y == 0.0) else math.atan2(x, y)
        return lam, phi
