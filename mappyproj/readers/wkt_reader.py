from __future__ import annotations

import logging
from typing import List, NamedTuple, Optional, Union

from mappyproj.constructs.definition import CrsDefinition
from mappyproj.readers.proj4_reader import parse_proj4
from mappyproj.utils.constants import D2R
from mappyproj.utils.exceptions import ParseError
from mappyproj.utils.tables import WKT_DATUMS, WKT_PROJECTIONS

log = logging.getLogger(__name__)

WKT_CRS_KEYWORDS = ("GEOGCS", "GEOCCS", "PROJCS", "LOCAL_CS")

_OPEN = "[("
_CLOSE = "])"

_AXIS_DIRECTIONS = {
    "EAST": "e",
    "WEST": "w",
    "NORTH": "n",
    "SOUTH": "s",
    "UP": "u",
    "DOWN": "d",
}


class WktNode(NamedTuple):
    """
    One ``KEYWORD[args...]`` element of a WKT string.

    Attributes:
        keyword: The upper-cased keyword, e.g. 'PROJCS'
        args: The arguments in order; quoted strings are unquoted, nested
            elements are WktNodes and everything else is the raw token text
    """

    keyword: str
    args: List[Union[str, WktNode]]

    @property
    def name(self) -> Optional[str]:
        if self.args and isinstance(self.args[0], str):
            return self.args[0]
        return None

    def children(self, keyword: Optional[str] = None) -> List[WktNode]:
        return [
            a
            for a in self.args
            if isinstance(a, WktNode) and (keyword is None or a.keyword == keyword)
        ]

    def values(self) -> List[str]:
        """The plain (non-node) arguments after the name."""
        return [a for a in self.args[1:] if isinstance(a, str)]


def is_wkt(text: str) -> bool:
    return text.lstrip().upper().startswith(WKT_CRS_KEYWORDS)


def _split_args(content: str) -> List[str]:
    """Split on commas at bracket depth 0, ignoring commas inside quotes."""
    parts = []
    depth = 0
    in_quote = False
    current = []
    for ch in content:
        if ch == '"':
            in_quote = not in_quote
        elif not in_quote:
            if ch in _OPEN:
                depth += 1
            elif ch in _CLOSE:
                depth -= 1
                if depth < 0:
                    raise ParseError("unbalanced brackets in WKT")
            elif ch == "," and depth == 0:
                parts.append("".join(current).strip())
                current = []
                continue
        current.append(ch)
    if depth != 0 or in_quote:
        raise ParseError("unbalanced brackets or quotes in WKT")
    tail = "".join(current).strip()
    if tail:
        parts.append(tail)
    return parts


def parse_wkt_node(text: str) -> WktNode:
    """
    Decompose a WKT element into a tree of WktNodes.

    Args:
        text: A string such as 'UNIT["metre",1]'

    Returns:
        The root WktNode

    Raises:
        ParseError: If the text is not a bracketed WKT element
    """
    text = text.strip()
    start = min((i for i in (text.find("["), text.find("(")) if i >= 0), default=-1)
    if start <= 0 or text[-1] not in _CLOSE:
        raise ParseError(f"not a WKT element: {text[:40]!r}")

    keyword = text[:start].strip().upper()
    if not keyword.replace("_", "").isalnum():
        raise ParseError(f"invalid WKT keyword: {keyword!r}")

    args: List[Union[str, WktNode]] = []
    for part in _split_args(text[start + 1 : -1]):
        if part.startswith('"') and part.endswith('"') and len(part) >= 2:
            args.append(part[1:-1])
        elif any(c in part for c in _OPEN):
            args.append(parse_wkt_node(part))
        else:
            args.append(part)
    return WktNode(keyword, args)


def _number(node: WktNode, index: int = 0) -> float:
    values = node.values()
    try:
        return float(values[index])
    except (IndexError, ValueError) as e:
        raise ParseError(f"{node.keyword}[{node.name}] is missing a numeric value") from e


def _towgs84(node: WktNode) -> List[float]:
    raw = [v for v in node.args if isinstance(v, str)]
    if len(raw) not in (3, 7):
        raise ParseError(f"TOWGS84 needs 3 or 7 values, got {len(raw)}")
    try:
        return [float(v) for v in raw]
    except ValueError as e:
        raise ParseError(f"TOWGS84 has a non-numeric value: {raw!r}") from e


def _projection_name(name: str) -> str:
    key = name.strip().lower().replace(" ", "_")
    if key not in WKT_PROJECTIONS:
        raise ParseError(f"unsupported WKT projection: {name!r}")
    return WKT_PROJECTIONS[key]


def _apply_parameter(d: CrsDefinition, node: WktNode):
    name = (node.name or "").lower()
    value = _number(node)
    if name == "false_easting":
        d.x0 = value
    elif name == "false_northing":
        d.y0 = value
    elif name in ("scale_factor", "scale_factor_at_natural_origin"):
        d.k0 = value
    elif name == "central_meridian":
        d.long0 = value * D2R
    elif name == "latitude_of_origin":
        d.lat0 = value * D2R
    elif name == "standard_parallel_1":
        d.lat1 = value * D2R
    elif name == "standard_parallel_2":
        d.lat2 = value * D2R
    elif name == "latitude_of_center":
        d.lat0 = value * D2R
    elif name == "longitude_of_center":
        d.long0 = value * D2R
        d.longc = value * D2R
    elif name == "azimuth":
        d.alpha = value * D2R
    else:
        log.warning(f"ignoring unsupported WKT parameter {node.name!r}")


def _axis_code(nodes: List[WktNode]) -> Optional[str]:
    letters = []
    for node in nodes:
        values = node.values()
        direction = values[0].upper() if values else ""
        if direction not in _AXIS_DIRECTIONS:
            log.warning(f"ignoring WKT axes with direction {direction!r}")
            return None
        letters.append(_AXIS_DIRECTIONS[direction])
    if len(letters) == 2:
        letters.append("u")
    if len(letters) != 3:
        return None
    return "".join(letters)


def _walk(node: WktNode, d: CrsDefinition, top: bool):
    keyword = node.keyword
    linear_cs = keyword in ("PROJCS", "LOCAL_CS", "GEOCCS")

    if keyword == "LOCAL_CS":
        d.proj_name = "identity"
        d.local_cs = True
        d.srs_code = node.name
    elif keyword == "GEOGCS":
        if d.proj_name is None:
            d.proj_name = "longlat"
        d.geocs_code = node.name
        if d.srs_code is None:
            d.srs_code = node.name
    elif keyword == "PROJCS":
        d.srs_code = node.name
    elif keyword == "GEOCCS":
        d.proj_name = "geocent"
        d.srs_code = node.name

    for child in node.children():
        ck = child.keyword
        if ck in WKT_CRS_KEYWORDS:
            _walk(child, d, top=False)
        elif ck == "PROJECTION":
            d.proj_name = _projection_name(child.name or "")
        elif ck == "DATUM":
            _walk_datum(child, d)
        elif ck == "PRIMEM":
            d.from_greenwich = _number(child) * D2R
        elif ck == "UNIT" and linear_cs:
            d.units = child.name
            d.to_meter = _number(child)
        elif ck == "PARAMETER":
            _apply_parameter(d, child)
        elif ck == "EXTENSION" and (child.name or "").upper() == "PROJ4":
            values = child.values()
            if values:
                d.update(parse_proj4(values[0]))

    axes = node.children("AXIS")
    if top and axes:
        axis = _axis_code(axes)
        if axis is not None:
            d.axis = axis


def _walk_datum(node: WktNode, d: CrsDefinition):
    d.datum_name = node.name
    code = WKT_DATUMS.get((node.name or "").lower())
    if code is not None:
        d.datum_code = code
    for child in node.children():
        if child.keyword in ("SPHEROID", "ELLIPSOID"):
            d.ellps = child.name
            d.a = _number(child, 0)
            d.rf = _number(child, 1)
        elif child.keyword == "TOWGS84":
            d.datum_params = _towgs84(child)


def parse_wkt(text: str, definition: Optional[CrsDefinition] = None) -> CrsDefinition:
    """
    Parse a WKT (version 1) CRS description into a CrsDefinition.

    The string is decomposed on matching brackets into a tree and the tree is
    walked from the outermost CRS element inwards, so the projected system's
    own UNIT and AXIS elements win over those of its base geographic system.

    Args:
        text: A WKT string starting with GEOGCS, GEOCCS, PROJCS or LOCAL_CS
        definition: An existing definition to fill in; a new one is created if None

    Returns:
        The populated CrsDefinition

    Raises:
        ParseError: If the text is not WKT, is malformed, or names an unsupported projection
    """
    if not is_wkt(text):
        raise ParseError(f"not a WKT CRS definition: {text[:40]!r}")

    d = definition if definition is not None else CrsDefinition()
    root = parse_wkt_node(text)
    _walk(root, d, top=True)

    # false easting/northing are given in the projected system's unit
    if root.keyword == "PROJCS" and d.to_meter and d.to_meter != 1.0:
        if d.x0 is not None:
            d.x0 *= d.to_meter
        if d.y0 is not None:
            d.y0 *= d.to_meter

    if d.proj_name == "merc" and d.lat_ts is None and d.lat1 is not None:
        d.lat_ts = d.lat1

    return d
