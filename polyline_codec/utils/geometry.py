"""Geometry interop for decoded paths.

Bridges ``(lat, lng)`` paths to the libraries callers usually hand them
to next:

- shapely ``LineString`` (x = longitude, y = latitude, as GIS tooling expects)
- numpy ``(n, 2)`` arrays of ``[lat, lng]``
- geodesic path length on the WGS 84 ellipsoid via ``pyproj.Geod``

Paths stay in ``(lat, lng)`` order everywhere in this package; the swap
to ``(lng, lat)`` happens only at the shapely boundary.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from polyline_codec.codec import decode
from polyline_codec.core.constants import DEFAULT_PRECISION
from polyline_codec.core.exceptions import InvalidCoordinateInputError

if TYPE_CHECKING:
    from collections.abc import Sequence

    import numpy as np
    from shapely.geometry import LineString

    from polyline_codec.codec import EncodedInput

logger = logging.getLogger("polyline_codec.utils.geometry")

# A LineString needs at least two vertices.
MIN_LINESTRING_POINTS = 2


# ---------------------------------------------------------------------------
# shapely
# ---------------------------------------------------------------------------


def to_linestring(path: Sequence[Sequence[float]]) -> LineString:
    """Build a shapely ``LineString`` from a ``(lat, lng)`` path.

    Raises:
        InvalidCoordinateInputError: If *path* has fewer than two points.
    """
    if len(path) < MIN_LINESTRING_POINTS:
        msg = f"A LineString needs at least {MIN_LINESTRING_POINTS} points, got {len(path)}"
        raise InvalidCoordinateInputError(msg)

    from shapely.geometry import LineString

    return LineString([(float(lng), float(lat)) for lat, lng in path])


def from_linestring(line: LineString) -> list[tuple[float, float]]:
    """Return the vertices of *line* as a ``(lat, lng)`` path.

    Z values, if present, are dropped.
    """
    return [(coord[1], coord[0]) for coord in line.coords]


# ---------------------------------------------------------------------------
# numpy
# ---------------------------------------------------------------------------


def to_array(path: Sequence[Sequence[float]]) -> np.ndarray:
    """Return *path* as a float64 array of shape ``(n, 2)``."""
    import numpy as np

    try:
        arr = np.asarray(path, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        msg = f"Path must have shape (n, 2) of real numbers: {exc}"
        raise InvalidCoordinateInputError(msg) from exc
    if arr.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        msg = f"Path must have shape (n, 2), got {arr.shape}"
        raise InvalidCoordinateInputError(msg)
    return arr


def decode_array(data: EncodedInput, *, precision: int = DEFAULT_PRECISION) -> np.ndarray:
    """Decode *data* straight into an ``(n, 2)`` ``[lat, lng]`` array."""
    return to_array(decode(data, precision=precision))


# ---------------------------------------------------------------------------
# pyproj
# ---------------------------------------------------------------------------


def path_length_m(path: Sequence[Sequence[float]]) -> float:
    """Return the geodesic length of *path* in metres (WGS 84).

    Paths with fewer than two points have length ``0.0``.
    """
    if len(path) < MIN_LINESTRING_POINTS:
        return 0.0

    from pyproj import Geod

    geod = Geod(ellps="WGS84")

    lats = [float(p[0]) for p in path]
    lons = [float(p[1]) for p in path]
    length_m = geod.line_length(lons, lats)

    logger.debug("Geodesic length of %d-point path: %.1f m", len(path), length_m)
    return float(length_m)
