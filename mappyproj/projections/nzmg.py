from __future__ import annotations

from mappyproj.constructs.point import Point
from mappyproj.projections.projection_interface import ProjectionInterface
from mappyproj.utils.constants import D2R, EPSLN
from mappyproj.utils.exceptions import ConvergenceError
from mappyproj.utils.math_utils import adjust_lon

SEC5_TO_RAD = 0.4848136811095359935899141023
RAD_TO_SEC5 = 2.062648062470963551564733573

MAX_ITER = 20

# latitude difference (1e5 arc-seconds) to isometric latitude
TPSI = (
    0.6399175073,
    -0.1358797613,
    0.063294409,
    -0.02526853,
    0.0117879,
    -0.0055161,
    0.0026906,
    -0.001333,
    0.00067,
    -0.00034,
)

# isometric latitude back to latitude difference
TPHI = (
    1.5627014243,
    0.5185406398,
    -0.03333098,
    -0.1052906,
    -0.0368594,
    0.007317,
    0.01220,
    0.00394,
    -0.0013,
)

BF = (
    complex(0.7557853228, 0.0),
    complex(0.249204646, 0.003371507),
    complex(-0.001541739, 0.041058560),
    complex(-0.10162907, 0.01727609),
    complex(-0.26623489, -0.36249218),
    complex(-0.6870983, -1.1651967),
)


def _horner(coefficients, t):
    value = 0.0
    for c in reversed(coefficients):
        value = value * t + c
    return value


def _zpoly1(z: complex) -> complex:
    """z * (B0 + z * (B1 + ... + z * B5))"""
    return z * _horner(BF, z)


def _zpolyd1(z: complex):
    """The polynomial of :func:`_zpoly1` together with its derivative."""
    value = 0j
    derivative = 0j
    for k in range(len(BF) - 1, -1, -1):
        derivative = derivative * z + (k + 1) * BF[k]
        value = value * z + BF[k]
    return z * value, derivative


class NewZealandMapGrid(ProjectionInterface):
    """
    New Zealand Map Grid.

    The origin and false offsets are fixed by the grid's definition and are
    written onto the CRS whatever the definition string says.
    """

    name = "nzmg"

    def __init__(self, crs):
        crs.lat0 = -41.0 * D2R
        crs.long0 = 173.0 * D2R
        crs.x0 = 2510000.0
        crs.y0 = 6023150.0
        super().__init__(crs)

    def forward(self, point: Point) -> Point:
        dphi = (point.y - self.lat0) * RAD_TO_SEC5
        psi = dphi * _horner(TPSI, dphi)
        z = _zpoly1(complex(psi, adjust_lon(point.x - self.long0)))

        point.x = self.a * z.imag
        point.y = self.a * z.real
        return point

    def inverse(self, point: Point) -> Point:
        target = complex(point.y / self.a, point.x / self.a)

        z = target
        for _ in range(MAX_ITER):
            f, fp = _zpolyd1(z)
            dz = -(f - target) / fp
            z += dz
            if abs(dz.real) + abs(dz.imag) <= EPSLN:
                break
        else:
            raise ConvergenceError(f"nzmg inverse did not converge in {MAX_ITER} iterations")

        point.x = adjust_lon(z.imag + self.long0)
        point.y = self.lat0 + z.real * _horner(TPHI, z.real) * SEC5_TO_RAD
        return point
