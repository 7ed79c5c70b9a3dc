from __future__ import annotations

import math
from typing import NamedTuple, Optional

from mappyproj.utils.constants import EPSLN
from mappyproj.utils.exceptions import ConfigurationError
from mappyproj.utils.tables import DEFAULT_ELLIPSOID, ELLIPSOIDS


class Ellipsoid(NamedTuple):
    """
    The reference spheroid approximating the Earth's shape.

    Attributes:
        a: The semi-major axis in meters
        b: The semi-minor axis in meters
        rf: The inverse flattening, or None if the ellipsoid was given by its axes
        name: The table name the ellipsoid was looked up under, if any
    """

    a: float
    b: float
    rf: Optional[float] = None
    name: Optional[str] = None

    @classmethod
    def from_axes(
        cls,
        a: float,
        b: Optional[float] = None,
        rf: Optional[float] = None,
        name: Optional[str] = None,
    ) -> Ellipsoid:
        """
        Build an ellipsoid from its semi-major axis and either b or rf.

        An inverse flattening of 0 (or neither b nor rf) describes a sphere.

        Raises:
            ConfigurationError: If the axes violate a >= b > 0
        """
        if a is None or a <= 0:
            raise ConfigurationError(f"semi-major axis must be positive, got {a}")
        if b is None:
            if rf:
                b = (1.0 - 1.0 / rf) * a
            else:
                b = a
        if abs(a - b) < EPSLN:
            b = a
        if b <= 0 or b > a:
            raise ConfigurationError(
                f"semi-minor axis must satisfy 0 < b <= a, got a={a} b={b}"
            )
        return cls(a=a, b=b, rf=rf, name=name)

    @classmethod
    def from_name(cls, name: Optional[str]) -> Ellipsoid:
        """
        Look up a named ellipsoid, falling back to WGS84 for unknown names.

        Args:
            name: An ellipsoid name such as 'GRS80', 'clrk66' or 'intl'

        Returns:
            The matching Ellipsoid
        """
        key = name if name in ELLIPSOIDS else DEFAULT_ELLIPSOID
        ellps = ELLIPSOIDS[key]
        return cls.from_axes(ellps.a, b=ellps.b, rf=ellps.rf, name=key)

    @property
    def sphere(self) -> bool:
        return self.a == self.b

    @property
    def es(self) -> float:
        return (self.a * self.a - self.b * self.b) / (self.a * self.a)

    @property
    def e(self) -> float:
        return math.sqrt(self.es)

    @property
    def ep2(self) -> float:
        return (self.a * self.a - self.b * self.b) / (self.b * self.b)
