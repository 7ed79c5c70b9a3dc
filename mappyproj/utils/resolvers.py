from __future__ import annotations

import logging
import warnings
from typing import Optional

from pyproj import CRS
from pyproj.exceptions import CRSError

log = logging.getLogger(__name__)


def pyproj_resolver(code: str) -> Optional[str]:
    """
    Resolve an authority code to a PROJ.4 definition using pyproj's local database.

    Intended as the ``resolver`` argument of :func:`mappyproj.build_crs` or
    :class:`mappyproj.utils.registry.CrsRegistry`.

    Args:
        code: A code such as 'EPSG:27700'

    Returns:
        The PROJ.4 string, or None if pyproj does not know the code

    Examples:
        >>> from mappyproj import build_crs
        >>> bng = build_crs("EPSG:27700", resolver=pyproj_resolver)
        >>> bng.proj_name
        'tmerc'
    """
    try:
        crs = CRS.from_user_input(code)
    except CRSError as e:
        log.debug(f"pyproj could not resolve {code}: {e}")
        return None

    # pyproj warns that PROJ.4 strings can lose information; that is expected here
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", UserWarning)
        proj4 = crs.to_proj4()

    if not proj4:
        return None
    return proj4
