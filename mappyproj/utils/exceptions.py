"""Errors raised by the reprojection engine.

Every error is raised by the function that detects it and propagated unchanged
to the caller of :func:`mappyproj.transform`. They all share the
:class:`ReprojectionError` base so callers can catch the whole family at once.
"""


class ReprojectionError(Exception):
    """Base class for every error raised by mappyproj."""


class ParseError(ReprojectionError, ValueError):
    """
    A CRS definition could not be understood.

    This is recoverable: the caller may retry with another definition or fall
    back to a default CRS.
    """


class ConfigurationError(ReprojectionError, ValueError):
    """
    A CRS definition parsed fine but its parameters are unusable.

    Examples are degenerate standard parallels for a conic projection, an
    illegal axis code or a UTM definition without a zone.
    """


class NotReadyError(ReprojectionError, RuntimeError):
    """A transform was attempted with a CRS that was never fully derived."""


class GridShiftUnsupported(ReprojectionError, NotImplementedError):
    """The datum requires grid-shift files, which mappyproj does not apply."""


class ConvergenceError(ReprojectionError, ArithmeticError):
    """An iterative routine exceeded its iteration cap."""


class DomainError(ReprojectionError, ValueError):
    """An input or intermediate value lies outside a formula's valid domain."""
