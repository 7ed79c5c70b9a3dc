"""
Shared trigonometric and geodetic helpers used by the projection families.

Every helper works in radians. Iterative helpers take an explicit ``max_iter``
so callers (and tests) can tighten the cap; exceeding it raises
:class:`~mappyproj.utils.exceptions.ConvergenceError` rather than returning a
sentinel value.
"""

from __future__ import annotations

import math
from typing import List, Tuple

from mappyproj.utils.constants import EPSLN, HALF_PI, MAX_ITER, PI, TWO_PI
from mappyproj.utils.exceptions import ConvergenceError, DomainError


def sign(x: float) -> int:
    return -1 if x < 0 else 1


def checked_exp(x: float, name: str) -> float:
    """
    ``math.exp`` for projection inverses fed with arbitrary planar input.

    Raises:
        DomainError: If the result overflows, which means the coordinate lies
            far outside the projection's range
    """
    try:
        return math.exp(x)
    except OverflowError:
        raise DomainError(f"{name}: coordinate is outside the projection's range") from None


def adjust_lon(x: float) -> float:
    """
    Wrap a longitude difference into (-pi, pi].

    Args:
        x: A longitude (or longitude difference) in radians

    Returns:
        The wrapped longitude in radians
    """
    if abs(x) < PI:
        return x
    x -= sign(x) * TWO_PI
    if x == -PI:
        return PI
    return x


def adjust_lat(x: float) -> float:
    if abs(x) < HALF_PI:
        return x
    return x - sign(x) * PI


def asinz(x: float) -> float:
    """asin that clamps rounding noise just outside [-1, 1]."""
    if abs(x) > 1.0:
        x = 1.0 if x > 1.0 else -1.0
    return math.asin(x)


def msfnz(eccent: float, sinphi: float, cosphi: float) -> float:
    con = eccent * sinphi
    return cosphi / math.sqrt(1.0 - con * con)


def tsfnz(eccent: float, phi: float, sinphi: float) -> float:
    """Conformal co-latitude function t used by Mercator, Lambert and stereographic."""
    con = eccent * sinphi
    com = 0.5 * eccent
    con = math.pow((1.0 - con) / (1.0 + con), com)
    return math.tan(0.5 * (HALF_PI - phi)) / con


def phi2z(eccent: float, ts: float, max_iter: int = 15) -> float:
    """
    Compute latitude from the conformal function t (inverse of :func:`tsfnz`).

    Args:
        eccent: The ellipsoid eccentricity
        ts: The value of t
        max_iter: Maximum number of refinement rounds

    Returns:
        The latitude in radians

    Raises:
        ConvergenceError: If the latitude does not settle within ``max_iter`` rounds
    """
    eccnth = 0.5 * eccent
    phi = HALF_PI - 2 * math.atan(ts)
    for _ in range(max_iter):
        con = eccent * math.sin(phi)
        dphi = (
            HALF_PI
            - 2 * math.atan(ts * math.pow((1.0 - con) / (1.0 + con), eccnth))
            - phi
        )
        phi += dphi
        if abs(dphi) <= EPSLN:
            return phi
    raise ConvergenceError(f"phi2z did not converge in {max_iter} iterations")


def qsfnz(eccent: float, sinphi: float) -> float:
    """Authalic function q."""
    if eccent > 1.0e-7:
        con = eccent * sinphi
        return (1.0 - eccent * eccent) * (
            sinphi / (1.0 - con * con)
            - (0.5 / eccent) * math.log((1.0 - con) / (1.0 + con))
        )
    return 2.0 * sinphi


def phi1z(eccent: float, qs: float, max_iter: int = 25) -> float:
    """
    Latitude from the authalic function q (inverse of :func:`qsfnz`).

    Raises:
        ConvergenceError: If the latitude does not settle within ``max_iter`` rounds
    """
    phi = asinz(0.5 * qs)
    if eccent < EPSLN:
        return phi

    eccnts = eccent * eccent
    q_pole = 1.0 - (1.0 - eccnts) / (2.0 * eccent) * math.log(
        (1.0 - eccent) / (1.0 + eccent)
    )
    if abs(abs(qs) - q_pole) < 1.0e-10:
        return HALF_PI if qs > 0 else -HALF_PI

    for _ in range(max_iter):
        sinphi = math.sin(phi)
        cosphi = math.cos(phi)
        con = eccent * sinphi
        com = 1.0 - con * con
        dphi = (
            0.5
            * com
            * com
            / cosphi
            * (
                qs / (1.0 - eccnts)
                - sinphi / com
                + 0.5 / eccent * math.log((1.0 - con) / (1.0 + con))
            )
        )
        phi += dphi
        if abs(dphi) <= 1.0e-12:
            return phi
    raise ConvergenceError(f"phi1z did not converge in {max_iter} iterations")


def e0fn(x: float) -> float:
    return 1.0 - 0.25 * x * (1.0 + x / 16.0 * (3.0 + 1.25 * x))


def e1fn(x: float) -> float:
    return 0.375 * x * (1.0 + 0.25 * x * (1.0 + 0.46875 * x))


def e2fn(x: float) -> float:
    return 0.05859375 * x * x * (1.0 + 0.75 * x)


def e3fn(x: float) -> float:
    return x * x * x * (35.0 / 3072.0)


def mlfn(e0: float, e1: float, e2: float, e3: float, phi: float) -> float:
    """Meridional arc length (in units of a) from the e0..e3 coefficients."""
    return (
        e0 * phi
        - e1 * math.sin(2.0 * phi)
        + e2 * math.sin(4.0 * phi)
        - e3 * math.sin(6.0 * phi)
    )


def phi3z(
    ml: float, e0: float, e1: float, e2: float, e3: float, max_iter: int = 15
) -> float:
    """Latitude from a meridional distance computed with :func:`mlfn`."""
    phi = ml
    for _ in range(max_iter):
        dphi = (
            ml
            + e1 * math.sin(2.0 * phi)
            - e2 * math.sin(4.0 * phi)
            + e3 * math.sin(6.0 * phi)
        ) / e0 - phi
        phi += dphi
        if abs(dphi) <= EPSLN:
            return phi
    raise ConvergenceError(f"phi3z did not converge in {max_iter} iterations")


def srat(esinp: float, exp: float) -> float:
    return math.pow((1.0 - esinp) / (1.0 + esinp), exp)


# pj_enfn coefficients
_C00 = 1.0
_C02 = 0.25
_C04 = 0.046875
_C06 = 0.01953125
_C08 = 0.01068115234375
_C22 = 0.75
_C44 = 0.46875
_C46 = 0.01302083333333333333
_C48 = 0.00712076822916666666
_C66 = 0.36458333333333333333
_C68 = 0.00569661458333333333
_C88 = 0.3076171875


def pj_enfn(es: float) -> List[float]:
    """Coefficients for the meridional distance series used by :func:`pj_mlfn`."""
    en = [0.0] * 5
    en[0] = _C00 - es * (_C02 + es * (_C04 + es * (_C06 + es * _C08)))
    en[1] = es * (_C22 - es * (_C04 + es * (_C06 + es * _C08)))
    t = es * es
    en[2] = t * (_C44 - es * (_C46 + es * _C48))
    t *= es
    en[3] = t * (_C66 - es * _C68)
    en[4] = t * es * _C88
    return en


def pj_mlfn(phi: float, sphi: float, cphi: float, en: List[float]) -> float:
    cphi *= sphi
    sphi *= sphi
    return en[0] * phi - cphi * (en[1] + sphi * (en[2] + sphi * (en[3] + sphi * en[4])))


def pj_inv_mlfn(arg: float, es: float, en: List[float], max_iter: int = MAX_ITER) -> float:
    k = 1.0 / (1.0 - es)
    phi = arg
    for _ in range(max_iter):
        s = math.sin(phi)
        t = 1.0 - es * s * s
        t = (pj_mlfn(phi, s, math.cos(phi), en) - arg) * (t * math.sqrt(t)) * k
        phi -= t
        if abs(t) < EPSLN:
            return phi
    raise ConvergenceError(f"pj_inv_mlfn did not converge in {max_iter} iterations")


# authalic latitude series
_P00 = 0.33333333333333333333
_P01 = 0.17222222222222222222
_P02 = 0.10257936507936507936
_P10 = 0.06388888888888888888
_P11 = 0.06640211640211640211
_P20 = 0.01641501294219154443


def authset(es: float) -> Tuple[float, float, float]:
    t = es * es
    apa0 = es * _P00 + t * _P01
    apa1 = t * _P10
    t *= es
    apa0 += t * _P02
    apa1 += t * _P11
    apa2 = t * _P20
    return apa0, apa1, apa2


def authlat(beta: float, apa: Tuple[float, float, float]) -> float:
    t = beta + beta
    return beta + apa[0] * math.sin(t) + apa[1] * math.sin(t + t) + apa[2] * math.sin(t + t + t)


def latiso(eccent: float, phi: float, sinphi: float) -> float:
    """
    Isometric latitude.

    Raises:
        DomainError: At or beyond the poles, where the isometric latitude is infinite
    """
    if abs(phi) >= HALF_PI:
        raise DomainError(f"isometric latitude undefined at latitude {phi}")
    con = eccent * sinphi
    return math.log(math.tan((HALF_PI + phi) / 2.0)) + eccent * math.log(
        (1.0 - con) / (1.0 + con)
    ) / 2.0


def _fl(x: float, big_l: float) -> float:
    return 2.0 * math.atan(x * checked_exp(big_l, "invlatiso")) - HALF_PI


def invlatiso(eccent: float, ts: float, max_iter: int = MAX_ITER) -> float:
    """Latitude from isometric latitude (inverse of :func:`latiso`)."""
    phi = _fl(1.0, ts)
    for _ in range(max_iter):
        iphi = phi
        con = eccent * math.sin(iphi)
        phi = _fl(math.exp(eccent * math.log((1.0 + con) / (1.0 - con)) / 2.0), ts)
        if abs(phi - iphi) <= 1.0e-12:
            return phi
    raise ConvergenceError(f"invlatiso did not converge in {max_iter} iterations")
