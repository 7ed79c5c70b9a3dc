from __future__ import annotations

from mappyproj.constructs.point import Point
from mappyproj.projections.projection_interface import ProjectionInterface


class LongLat(ProjectionInterface):
    """
    Geographic coordinates: the "projection" is the identity on (lon, lat) radians.

    The orchestrator converts degrees to radians around this family.
    """

    name = "longlat"

    def forward(self, point: Point) -> Point:
        return point

    def inverse(self, point: Point) -> Point:
        return point


class Identity(ProjectionInterface):
    """
    The identity map used by local (engineering) coordinate systems.

    Coordinates pass through untouched in both directions.
    """

    name = "identity"

    def forward(self, point: Point) -> Point:
        return point

    def inverse(self, point: Point) -> Point:
        return point
