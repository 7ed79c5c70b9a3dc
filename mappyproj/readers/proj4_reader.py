from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from mappyproj.constructs.definition import CrsDefinition
from mappyproj.utils.constants import D2R, LEGAL_AXIS_LETTERS
from mappyproj.utils.exceptions import ParseError
from mappyproj.utils.tables import PRIME_MERIDIANS

log = logging.getLogger(__name__)

# PROJ.4 spells geographic systems several ways
GEOGRAPHIC_ALIASES = ("longlat", "latlong", "lonlat", "latlon")


def _float(key: str, value: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ParseError(f"invalid numeric value for +{key}: {value!r}") from e


def _angle(key: str, value: str) -> float:
    return _float(key, value) * D2R


def is_legal_axis(axis: str) -> bool:
    """
    Check that an axis code has exactly three letters from 'ewnsud' and names
    each of the east/west, north/south and up/down directions once.
    """
    if len(axis) != 3 or any(c not in LEGAL_AXIS_LETTERS for c in axis):
        return False
    directions = {LEGAL_AXIS_LETTERS.index(c) // 2 for c in axis}
    return len(directions) == 3


def _set_axis(d: CrsDefinition, value: str):
    if is_legal_axis(value):
        d.axis = value
    else:
        log.warning(f"ignoring illegal axis code {value!r}")


def _set_pm(d: CrsDefinition, value: str):
    name = value.replace(" ", "")
    if name in PRIME_MERIDIANS:
        d.from_greenwich = PRIME_MERIDIANS[name] * D2R
    else:
        d.from_greenwich = _angle("pm", name)


def _set_proj(d: CrsDefinition, value: str):
    name = value.replace(" ", "")
    d.proj_name = "longlat" if name in GEOGRAPHIC_ALIASES else name


def _set_towgs84(d: CrsDefinition, value: str):
    params = [_float("towgs84", v) for v in value.split(",")]
    if len(params) not in (3, 7):
        raise ParseError(f"+towgs84 needs 3 or 7 values, got {len(params)}: {value!r}")
    d.datum_params = params


_SETTERS: Dict[str, Callable[[CrsDefinition, str], None]] = {
    "title": lambda d, v: setattr(d, "title", v),
    "proj": _set_proj,
    "units": lambda d, v: setattr(d, "units", v.replace(" ", "")),
    "datum": lambda d, v: setattr(d, "datum_code", v),
    "nadgrids": lambda d, v: setattr(d, "nadgrids", v),
    "ellps": lambda d, v: setattr(d, "ellps", v),
    "a": lambda d, v: setattr(d, "a", _float("a", v)),
    "b": lambda d, v: setattr(d, "b", _float("b", v)),
    "rf": lambda d, v: setattr(d, "rf", _float("rf", v)),
    "lat_0": lambda d, v: setattr(d, "lat0", _angle("lat_0", v)),
    "lat_1": lambda d, v: setattr(d, "lat1", _angle("lat_1", v)),
    "lat_2": lambda d, v: setattr(d, "lat2", _angle("lat_2", v)),
    "lat_ts": lambda d, v: setattr(d, "lat_ts", _angle("lat_ts", v)),
    "lon_0": lambda d, v: setattr(d, "long0", _angle("lon_0", v)),
    "lon_1": lambda d, v: setattr(d, "long1", _angle("lon_1", v)),
    "lon_2": lambda d, v: setattr(d, "long2", _angle("lon_2", v)),
    "alpha": lambda d, v: setattr(d, "alpha", _angle("alpha", v)),
    "lonc": lambda d, v: setattr(d, "longc", _angle("lonc", v)),
    "x_0": lambda d, v: setattr(d, "x0", _float("x_0", v)),
    "y_0": lambda d, v: setattr(d, "y0", _float("y_0", v)),
    "k_0": lambda d, v: setattr(d, "k0", _float("k_0", v)),
    "k": lambda d, v: setattr(d, "k0", _float("k", v)),
    "r_a": lambda d, v: setattr(d, "r_a", True),
    "zone": lambda d, v: setattr(d, "zone", int(_float("zone", v))),
    "south": lambda d, v: setattr(d, "utm_south", True),
    "towgs84": _set_towgs84,
    "to_meter": lambda d, v: setattr(d, "to_meter", _float("to_meter", v)),
    "from_greenwich": lambda d, v: setattr(d, "from_greenwich", _angle("from_greenwich", v)),
    "pm": _set_pm,
    "axis": _set_axis,
    "no_defs": lambda d, v: None,
}


def is_proj4(text: str) -> bool:
    return "+proj=" in text.lower()


def parse_proj4(
    text: str, definition: Optional[CrsDefinition] = None
) -> CrsDefinition:
    """
    Parse a PROJ.4 style definition into a CrsDefinition.

    Keys are matched case-insensitively and surrounding whitespace is trimmed.
    Unrecognised keys are ignored. Angular parameters are converted from degrees
    to radians.

    Args:
        text: A definition such as '+proj=merc +a=6378137 +b=6378137 +no_defs'
        definition: An existing definition to fill in; a new one is created if None

    Returns:
        The populated CrsDefinition

    Raises:
        ParseError: If the text has no +proj= token or a numeric value is malformed

    Examples:
        >>> d = parse_proj4("+proj=utm +zone=33 +ellps=WGS84")
        >>> d.proj_name, d.zone
        ('utm', 33)
    """
    if not is_proj4(text):
        raise ParseError(f"no +proj= token found in definition: {text!r}")

    d = definition if definition is not None else CrsDefinition()

    for token in text.split("+"):
        token = token.strip()
        if not token:
            continue
        key, _, value = token.partition("=")
        key = key.strip().lower()
        value = value.strip()

        setter = _SETTERS.get(key)
        if setter is None:
            log.debug(f"ignoring unrecognized parameter +{key}")
            d.extras[key] = value
            continue
        setter(d, value)

    return d
