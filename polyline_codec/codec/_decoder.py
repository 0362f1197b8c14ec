"""Coordinate-sequence decoder.

Signed deltas are pulled from the varint stream two at a time
(latitude, then longitude), accumulated, and scaled back to degrees.
The stream must end exactly on a point boundary: a dangling latitude
delta is reported as ``TruncatedPointPairError`` rather than dropped.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from polyline_codec.codec._varint import as_bytes, scan_values
from polyline_codec.core.config import validate_precision
from polyline_codec.core.constants import DEFAULT_PRECISION, scale_for
from polyline_codec.core.exceptions import TruncatedPointPairError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from polyline_codec.codec._varint import EncodedInput

logger = logging.getLogger("polyline_codec.codec")


def _iter_points(buf: bytes, scale: int) -> Iterator[tuple[float, float]]:
    values = scan_values(buf)
    lat = 0
    lng = 0
    for start, d_lat in values:
        pair = next(values, None)
        if pair is None:
            msg = (
                "Truncated: odd number of delta values "
                f"(latitude delta at offset {start} has no longitude delta)"
            )
            raise TruncatedPointPairError(msg, offset=start)
        lat += d_lat
        lng += pair[1]
        yield (lat / scale, lng / scale)


def iter_decode(
    data: EncodedInput, *, precision: int = DEFAULT_PRECISION
) -> Iterator[tuple[float, float]]:
    """Lazily decode *data* into ``(lat, lng)`` points.

    Points are yielded as they are decoded; a malformed tail raises
    once it is reached. Use :func:`decode` to get all-or-nothing
    behaviour.
    """
    scale = scale_for(validate_precision(precision))
    return _iter_points(as_bytes(data), scale)


def decode(data: EncodedInput, *, precision: int = DEFAULT_PRECISION) -> list[tuple[float, float]]:
    """Decode an encoded polyline into a list of ``(lat, lng)`` points.

    Args:
        data: The encoded polyline as ``bytes``-like or ASCII ``str``.
        precision: Decimal digits the polyline was encoded with.

    Returns:
        Points in degrees, in encoded order. Empty input gives ``[]``.

    Raises:
        TruncatedVarintError: If the input ends mid-integer.
        TruncatedPointPairError: If the input holds an odd number of
            integers.
        InvalidPolylineByteError: If a byte lies outside ``[63, 126]``.
        VarintOverflowError: If an integer is wider than signed 64 bits.
        ConfigValidationError: If *precision* is out of range.
    """
    buf = as_bytes(data)
    points = list(iter_decode(buf, precision=precision))
    logger.debug(
        "Decoded %d point(s) from %d byte(s) (precision=%d)", len(points), len(buf), precision
    )
    return points
