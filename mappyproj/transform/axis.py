from __future__ import annotations

from typing import TYPE_CHECKING, List, Tuple

from mappyproj.constructs.point import Point
from mappyproj.utils.constants import CANONICAL_AXIS
from mappyproj.utils.exceptions import ConfigurationError

if TYPE_CHECKING:
    from mappyproj.constructs.crs import Crs

# axis letter -> (canonical slot, sign)
_AXIS_SLOTS = {
    "e": (0, 1.0),
    "w": (0, -1.0),
    "n": (1, 1.0),
    "s": (1, -1.0),
    "u": (2, 1.0),
    "d": (2, -1.0),
}


def _axis_slots(axis: str) -> List[Tuple[int, float]]:
    slots = []
    for letter in axis:
        if letter not in _AXIS_SLOTS:
            raise ConfigurationError(f"unknown axis letter {letter!r} in axis code {axis!r}")
        slots.append(_AXIS_SLOTS[letter])
    return slots


def normalize(crs: Crs, point: Point) -> Point:
    """
    Reorder and negate a point's components from the CRS axis order into east, north, up.

    Args:
        crs: The CRS whose ``axis`` code describes the point's current layout
        point: The point to rewrite in place

    Returns:
        The same point in canonical 'enu' order

    Raises:
        ConfigurationError: If the axis code contains an unknown letter
    """
    if crs.axis == CANONICAL_AXIS:
        return point

    had_z = point.has_z
    values = (point.x, point.y, point.height)
    canonical = [0.0, 0.0, 0.0]
    for value, (slot, sign) in zip(values, _axis_slots(crs.axis)):
        canonical[slot] = sign * value

    point.x, point.y = canonical[0], canonical[1]
    if had_z or canonical[2] != 0.0:
        point.z = canonical[2]
    return point


def denormalize(crs: Crs, point: Point) -> Point:
    """
    Reorder and negate a point's components from east, north, up into the CRS axis order.

    The third output slot is only written when the point carries an explicit height.

    Raises:
        ConfigurationError: If the axis code contains an unknown letter
    """
    if crs.axis == CANONICAL_AXIS:
        return point

    had_z = point.has_z
    canonical = (point.x, point.y, point.height)
    out = [point.x, point.y, point.z]
    for index, (slot, sign) in enumerate(_axis_slots(crs.axis)):
        if index == 2 and not had_z:
            continue
        out[index] = sign * canonical[slot]

    point.x, point.y = out[0], out[1]
    point.z = out[2] if had_z else None
    return point
