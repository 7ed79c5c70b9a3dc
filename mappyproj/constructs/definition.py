from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import List, Optional


@dataclass
class CrsDefinition:
    """
    The raw parameter set of a CRS, before any derivation.

    Readers fill one of these from a PROJ.4 or WKT string; callers may also build
    one directly and hand it to :func:`mappyproj.build_crs`. Angles are radians,
    lengths are meters. Unset parameters are None so the deriver can tell "absent"
    from "zero".
    """

    proj_name: Optional[str] = None
    title: Optional[str] = None
    srs_code: Optional[str] = None
    units: Optional[str] = None

    # datum and ellipsoid
    datum_code: Optional[str] = None
    datum_name: Optional[str] = None
    datum_params: Optional[List[float]] = None
    nadgrids: Optional[str] = None
    ellps: Optional[str] = None
    a: Optional[float] = None
    b: Optional[float] = None
    rf: Optional[float] = None
    r_a: bool = False

    # projection parameters
    lat0: Optional[float] = None
    lat1: Optional[float] = None
    lat2: Optional[float] = None
    lat_ts: Optional[float] = None
    long0: Optional[float] = None
    long1: Optional[float] = None
    long2: Optional[float] = None
    longc: Optional[float] = None
    alpha: Optional[float] = None
    k0: Optional[float] = None
    x0: Optional[float] = None
    y0: Optional[float] = None
    zone: Optional[int] = None
    utm_south: bool = False

    to_meter: Optional[float] = None
    from_greenwich: Optional[float] = None
    axis: Optional[str] = None

    local_cs: bool = False
    geocs_code: Optional[str] = None

    extras: dict = field(default_factory=dict)

    def update(self, other: CrsDefinition) -> CrsDefinition:
        """Overlay every parameter that is set on ``other`` onto this definition."""
        for f in fields(self):
            value = getattr(other, f.name)
            if f.name == "extras":
                self.extras.update(value)
            elif value is not None and value is not False:
                setattr(self, f.name, value)
        return self
