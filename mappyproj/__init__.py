from mappyproj.constructs.crs import Crs, build_crs, parse_definition
from mappyproj.constructs.definition import CrsDefinition
from mappyproj.constructs.point import Point
from mappyproj.transform.transformer import Transformer, transform
from mappyproj.utils.exceptions import (
    ConfigurationError,
    ConvergenceError,
    DomainError,
    GridShiftUnsupported,
    NotReadyError,
    ParseError,
    ReprojectionError,
)
from mappyproj.utils.registry import CrsRegistry

__all__ = [
    "ConfigurationError",
    "ConvergenceError",
    "Crs",
    "CrsDefinition",
    "CrsRegistry",
    "DomainError",
    "GridShiftUnsupported",
    "NotReadyError",
    "ParseError",
    "Point",
    "ReprojectionError",
    "Transformer",
    "build_crs",
    "parse_definition",
    "transform",
]
