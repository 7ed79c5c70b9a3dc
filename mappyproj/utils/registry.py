from __future__ import annotations

import logging
import re
from typing import Callable, Dict, Iterator, Optional

from mappyproj.readers.proj4_reader import is_proj4
from mappyproj.readers.wkt_reader import is_wkt
from mappyproj.utils.exceptions import ParseError
from mappyproj.utils.tables import BUILTIN_DEFS

log = logging.getLogger(__name__)

Resolver = Callable[[str], Optional[str]]

_URN_PATTERN = re.compile(r"^urn:ogc:def:crs:([a-z0-9_]+):[0-9.]*:(\w+)$", re.IGNORECASE)
_OPENGIS_PATTERN = re.compile(
    r"^https?://www\.opengis\.net/gml/srs/([a-z0-9_]+)\.xml#(\w+)$", re.IGNORECASE
)
_AUTHORITY_PATTERN = re.compile(r"^([a-z0-9_]+):(\w+)$", re.IGNORECASE)


class CrsRegistry:
    """
    A lookup of CRS definition strings by code.

    A registry starts out holding the built-in definitions (WGS84, EPSG:4326,
    EPSG:4269 and the web Mercator codes) and may be extended with user
    definitions. Codes are normalised before use, so 'epsg:4326',
    'urn:ogc:def:crs:EPSG::4326' and 'http://www.opengis.net/gml/srs/epsg.xml#4326'
    all find the same entry.

    When a code is missing, an optional resolver callback may be consulted; a
    successful answer is remembered in the registry.

    Attributes:
        resolver: The default resolver used by :meth:`lookup`, or None

    Examples:
        >>> registry = CrsRegistry()
        >>> registry.add("EPSG:27700", "+proj=tmerc +lat_0=49 +lon_0=-2 +k=0.9996012717 "
        ...              "+x_0=400000 +y_0=-100000 +datum=OSGB36 +units=m")
        >>> "epsg:27700" in registry
        True
    """

    def __init__(
        self,
        definitions: Optional[Dict[str, str]] = None,
        resolver: Optional[Resolver] = None,
    ):
        self._definitions: Dict[str, str] = dict(BUILTIN_DEFS)
        self.resolver = resolver
        if definitions:
            for code, definition in definitions.items():
                self.add(code, definition)

    @classmethod
    def default(cls) -> CrsRegistry:
        """A registry holding only the built-in definitions."""
        return cls()

    @staticmethod
    def normalize_code(code: str) -> str:
        """
        Normalise a CRS code to the 'AUTHORITY:CODE' form.

        Args:
            code: A code such as 'epsg:4326', 'urn:ogc:def:crs:EPSG::4326',
                'http://www.opengis.net/gml/srs/epsg.xml#4326' or 'GOOGLE'

        Returns:
            The normalised code, e.g. 'EPSG:4326'; bare names are upper-cased
        """
        code = code.strip()
        for pattern in (_URN_PATTERN, _OPENGIS_PATTERN, _AUTHORITY_PATTERN):
            match = pattern.match(code)
            if match:
                authority, number = match.groups()
                return f"{authority.upper()}:{number.upper()}"
        return code.upper()

    def add(self, code: str, definition: str):
        """
        Register (or replace) a definition under a code.

        Raises:
            ParseError: If the definition is neither a PROJ.4 nor a WKT string
        """
        if not (is_proj4(definition) or is_wkt(definition)):
            raise ParseError(
                f"definition for {code!r} is neither PROJ.4 nor WKT: {definition[:60]!r}"
            )
        key = self.normalize_code(code)
        log.debug(f"registering CRS definition for {key}")
        self._definitions[key] = definition

    def get(self, code: str) -> Optional[str]:
        return self._definitions.get(self.normalize_code(code))

    def lookup(self, code: str, resolver: Optional[Resolver] = None) -> Optional[str]:
        """
        Find the definition for a code, consulting a resolver if it is unknown.

        Args:
            code: The CRS code
            resolver: A callback mapping a normalised code to a definition string
                (or None); overrides the registry's own resolver for this call

        Returns:
            The definition string, or None if neither the registry nor the
            resolver knows the code
        """
        key = self.normalize_code(code)
        definition = self._definitions.get(key)
        if definition is not None:
            return definition

        resolver = resolver if resolver is not None else self.resolver
        if resolver is None:
            return None

        log.debug(f"resolving unknown CRS code {key}")
        definition = resolver(key)
        if definition:
            self.add(key, definition)
        return definition or None

    def __contains__(self, code: str) -> bool:
        return self.normalize_code(code) in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)
