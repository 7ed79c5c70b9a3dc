from __future__ import annotations

import math
from enum import Enum
from typing import NamedTuple, Optional, Sequence, Tuple

from mappyproj.constructs.point import Point
from mappyproj.utils.constants import (
    GEOCENTRIC_MAX_ITER,
    GEOCENTRIC_TOLERANCE,
    HALF_PI,
    PI,
    POLE_CLAMP_FACTOR,
    SEC_TO_RAD,
    TWO_PI,
)
from mappyproj.utils.exceptions import ConfigurationError, ConvergenceError, DomainError


class DatumType(Enum):
    """
    The kinds of datum the engine distinguishes.

    Values:
        NO_DATUM: Datum transforms are skipped entirely (``+datum=none`` or ``+nadgrids=@null``)
        WGS84: Equivalent to WGS84; only an ellipsoid change can apply
        THREE_PARAM: Geocentric translation to WGS84
        SEVEN_PARAM: Helmert translation, rotation and scale to WGS84
        GRID_SHIFT: Requires grid-shift files; recognised but not executable
    """

    NO_DATUM = "none"
    WGS84 = "wgs84"
    THREE_PARAM = "3param"
    SEVEN_PARAM = "7param"
    GRID_SHIFT = "gridshift"


class Datum(NamedTuple):
    """
    The anchoring of an ellipsoid to the Earth plus its shift to WGS84.

    Attributes:
        datum_type: Which variant of datum this is
        a: The semi-major axis in meters
        b: The semi-minor axis in meters
        es: The squared eccentricity
        ep2: The squared second eccentricity
        params: Helmert parameters. For SEVEN_PARAM the rotations are in radians and
            the scale is a multiplier (1 + ppm / 1e6).
        nadgrids: The grid names of a GRID_SHIFT datum
    """

    datum_type: DatumType
    a: float
    b: float
    es: float
    ep2: float
    params: Tuple[float, ...] = ()
    nadgrids: Optional[str] = None

    @classmethod
    def from_params(
        cls,
        a: float,
        b: float,
        es: float,
        ep2: float,
        datum_params: Optional[Sequence[float]] = None,
        datum_code: Optional[str] = None,
        nadgrids: Optional[str] = None,
    ) -> Datum:
        """
        Classify a datum from its raw parameter vector.

        Args:
            a: The semi-major axis
            b: The semi-minor axis
            es: The squared eccentricity
            ep2: The squared second eccentricity
            datum_params: The raw towgs84 vector (rotations in arc-seconds, scale in ppm)
            datum_code: The datum code; 'none' opts out of datum transforms
            nadgrids: Grid names; any value other than '@null' makes a grid-shift datum

        Returns:
            The classified Datum
        """
        datum_type = DatumType.WGS84
        if datum_code == "none":
            datum_type = DatumType.NO_DATUM

        params: Tuple[float, ...] = ()
        if datum_params:
            if len(datum_params) not in (3, 7):
                raise ConfigurationError(
                    f"a towgs84 vector needs 3 or 7 values, got {len(datum_params)}"
                )
            raw = [float(v) for v in datum_params]
            params = tuple(raw)
            if any(v != 0 for v in raw[:3]):
                datum_type = DatumType.THREE_PARAM
            if len(raw) > 3 and any(v != 0 for v in raw[3:7]):
                datum_type = DatumType.SEVEN_PARAM
                raw[3] *= SEC_TO_RAD
                raw[4] *= SEC_TO_RAD
                raw[5] *= SEC_TO_RAD
                raw[6] = raw[6] / 1000000.0 + 1.0
                params = tuple(raw[:7])

        if nadgrids and nadgrids != "@null":
            datum_type = DatumType.GRID_SHIFT

        return cls(
            datum_type=datum_type,
            a=a,
            b=b,
            es=es,
            ep2=ep2,
            params=params,
            nadgrids=nadgrids if datum_type == DatumType.GRID_SHIFT else None,
        )

    @property
    def is_parametric(self) -> bool:
        return self.datum_type in (DatumType.THREE_PARAM, DatumType.SEVEN_PARAM)

    def geodetic_to_geocentric(self, point: Point) -> Point:
        """
        Convert geodetic (lon, lat, height) radians to geocentric X, Y, Z in place.

        Latitudes within 0.1% beyond a pole are clamped to the pole.

        Raises:
            DomainError: If the latitude lies further outside [-pi/2, pi/2]
        """
        lon = point.x
        lat = point.y
        height = point.height

        if -POLE_CLAMP_FACTOR * HALF_PI < lat < -HALF_PI:
            lat = -HALF_PI
        elif HALF_PI < lat < POLE_CLAMP_FACTOR * HALF_PI:
            lat = HALF_PI
        elif lat < -HALF_PI or lat > HALF_PI:
            raise DomainError(f"geocentric: latitude {lat} is out of range")

        if lon > PI:
            lon -= TWO_PI

        sin_lat = math.sin(lat)
        cos_lat = math.cos(lat)
        rn = self.a / math.sqrt(1.0 - self.es * sin_lat * sin_lat)

        point.x = (rn + height) * cos_lat * math.cos(lon)
        point.y = (rn + height) * cos_lat * math.sin(lon)
        point.z = ((rn * (1 - self.es)) + height) * sin_lat
        return point

    def geocentric_to_geodetic(self, point: Point) -> Point:
        """
        Convert geocentric X, Y, Z to geodetic (lon, lat, height) radians in place.

        Uses an iterative method that refines sin/cos of the latitude and the
        height together.

        Raises:
            ConvergenceError: If the latitude has not settled after 30 rounds
        """
        genau2 = GEOCENTRIC_TOLERANCE * GEOCENTRIC_TOLERANCE
        x = point.x
        y = point.y
        z = point.height

        p = math.sqrt(x * x + y * y)
        rr = math.sqrt(x * x + y * y + z * z)

        if p / self.a < GEOCENTRIC_TOLERANCE:
            lon = 0.0
            if rr / self.a < GEOCENTRIC_TOLERANCE:
                point.x = lon
                point.y = HALF_PI
                point.z = -self.b
                return point
        else:
            lon = math.atan2(y, x)

        ct = z / rr
        st = p / rr
        rx = 1.0 / math.sqrt(1.0 - self.es * (2.0 - self.es) * st * st)
        cphi0 = st * (1.0 - self.es) * rx
        sphi0 = ct * rx

        for _ in range(GEOCENTRIC_MAX_ITER):
            rn = self.a / math.sqrt(1.0 - self.es * sphi0 * sphi0)
            height = p * cphi0 + z * sphi0 - rn * (1.0 - self.es * sphi0 * sphi0)

            rk = self.es * rn / (rn + height)
            rx = 1.0 / math.sqrt(1.0 - rk * (2.0 - rk) * st * st)
            cphi = st * (1.0 - rk) * rx
            sphi = ct * rx
            sdphi = sphi * cphi0 - cphi * sphi0
            cphi0 = cphi
            sphi0 = sphi
            if sdphi * sdphi <= genau2:
                break
        else:
            raise ConvergenceError(
                f"geocentric to geodetic did not converge in {GEOCENTRIC_MAX_ITER} iterations"
            )

        point.x = lon
        point.y = math.atan(sphi / abs(cphi))
        point.z = height
        return point

    def geocentric_to_wgs84(self, point: Point) -> Point:
        """Apply this datum's Helmert shift, taking geocentric coordinates to WGS84."""
        if self.datum_type == DatumType.THREE_PARAM:
            point.x += self.params[0]
            point.y += self.params[1]
            point.z = point.height + self.params[2]
        elif self.datum_type == DatumType.SEVEN_PARAM:
            dx, dy, dz, rx, ry, rz, m = self.params
            x, y, z = point.x, point.y, point.height
            point.x = m * (x - rz * y + ry * z) + dx
            point.y = m * (rz * x + y - rx * z) + dy
            point.z = m * (-ry * x + rx * y + z) + dz
        return point

    def geocentric_from_wgs84(self, point: Point) -> Point:
        """Reverse this datum's Helmert shift, taking WGS84 geocentric coordinates to this datum."""
        if self.datum_type == DatumType.THREE_PARAM:
            point.x -= self.params[0]
            point.y -= self.params[1]
            point.z = point.height - self.params[2]
        elif self.datum_type == DatumType.SEVEN_PARAM:
            dx, dy, dz, rx, ry, rz, m = self.params
            x_tmp = (point.x - dx) / m
            y_tmp = (point.y - dy) / m
            z_tmp = (point.height - dz) / m
            point.x = x_tmp + rz * y_tmp - ry * z_tmp
            point.y = -rz * x_tmp + y_tmp + rx * z_tmp
            point.z = ry * x_tmp - rx * y_tmp + z_tmp
        return point
