from __future__ import annotations

import math

from mappyproj.constructs.point import Point
from mappyproj.projections.projection_interface import ProjectionInterface
from mappyproj.utils.exceptions import ConvergenceError, DomainError
from mappyproj.utils.math_utils import adjust_lon, asinz, msfnz, pj_enfn, pj_mlfn

TOL = 1.0e-10
CONV = 1.0e-10
N_ITER = 10
I_ITER = 20
ITOL = 1.0e-12


class Polyconic(ProjectionInterface):
    """American Polyconic."""

    name = "poly"

    def __init__(self, crs):
        super().__init__(crs)
        if self.sphere:
            self.ml0 = -self.lat0
        else:
            self.en = pj_enfn(self.es)
            self.ml0 = pj_mlfn(
                self.lat0, math.sin(self.lat0), math.cos(self.lat0), self.en
            )

    def forward(self, point: Point) -> Point:
        lam = adjust_lon(point.x - self.long0)
        phi = point.y

        if self.sphere:
            if abs(phi) <= TOL:
                x = lam
                y = self.ml0
            else:
                cot = 1.0 / math.tan(phi)
                big_e = lam * math.sin(phi)
                x = math.sin(big_e) * cot
                y = phi - self.lat0 + cot * (1.0 - math.cos(big_e))
        else:
            if abs(phi) <= TOL:
                x = lam
                y = -self.ml0
            else:
                sp = math.sin(phi)
                cp = math.cos(phi)
                ms = msfnz(self.e, sp, cp) / sp if abs(cp) > TOL else 0.0
                lam *= sp
                x = ms * math.sin(lam)
                y = (pj_mlfn(phi, sp, cp, self.en) - self.ml0) + ms * (1.0 - math.cos(lam))

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

    def _s_inverse(self, x: float, y: float):
        y = self.lat0 + y
        if abs(y) <= TOL:
            return x, 0.0

        phi = y
        b = x * x + y * y
        for _ in range(N_ITER):
            tp = math.tan(phi)
            dphi = (y * (phi * tp + 1.0) - phi - 0.5 * (phi * phi + b) * tp) / (
                (phi - y) / tp - 1.0
            )
            phi -= dphi
            if abs(dphi) <= CONV:
                break
        else:
            raise ConvergenceError(f"poly inverse did not converge in {N_ITER} iterations")
        lam = asinz(x * math.tan(phi)) / math.sin(phi)
        return lam, phi

    def _e_inverse(self, x: float, y: float):
        y += self.ml0
        if abs(y) <= TOL:
            return x, 0.0

        r = y * y + x * x
        phi = y
        for _ in range(I_ITER):
            sp = math.sin(phi)
            cp = math.cos(phi)
            if abs(cp) < ITOL:
                raise DomainError("poly: inverse reached a pole")
            s2ph = sp * cp
            mlp = math.sqrt(1.0 - self.es * sp * sp)
            c = sp * mlp / cp
            ml = pj_mlfn(phi, sp, cp, self.en)
            mlb = ml * ml + r
            mlp = (1.0 - self.es) / (mlp * mlp * mlp)
            dphi = (ml + ml + c * mlb - 2.0 * y * (c * ml + 1.0)) / (
                self.es * s2ph * (mlb - 2.0 * y * ml) / c
                + 2.0 * (y - ml) * (c * mlp - 1.0 / s2ph)
                - mlp
                - mlp
            )
            phi += dphi
            if abs(dphi) <= ITOL:
                break
        else:
            raise ConvergenceError(f"poly inverse did not converge in {I_ITER} iterations")

        c = math.sin(phi)
        lam = asinz(x * math.tan(phi) * math.sqrt(1.0 - self.es * c * c)) / math.sin(phi)
        return lam, phi
