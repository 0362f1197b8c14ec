"""Coordinate-sequence encoder.

Each point is quantised, delta-coded against the previous point (the
first against ``(0, 0)``), and written as two varints: latitude delta
then longitude delta. Nothing separates points; the varints delimit
themselves.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from polyline_codec.codec._quantize import quantize_component
from polyline_codec.codec._varint import encode_value_into
from polyline_codec.core.config import validate_precision
from polyline_codec.core.constants import DEFAULT_PRECISION, scale_for
from polyline_codec.core.exceptions import InvalidCoordinateInputError, ValueOutOfRangeError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

logger = logging.getLogger("polyline_codec.codec")


def _unpack_point(point: Sequence[float], index: int) -> tuple[float, float]:
    try:
        lat, lng = point
    except (TypeError, ValueError) as exc:
        msg = f"Point {index} must be a (lat, lng) pair, got {point!r}"
        raise InvalidCoordinateInputError(msg, offset=index) from exc
    return lat, lng


def encode(path: Iterable[Sequence[float]], *, precision: int = DEFAULT_PRECISION) -> bytes:
    """Encode an ordered sequence of ``(lat, lng)`` points.

    Args:
        path: Points in degrees. Any 2-item sequences are accepted
            (tuples, lists, numpy rows).
        precision: Decimal digits kept per component (5 = polyline5,
            6 = polyline6).

    Returns:
        A freshly allocated ``bytes`` object. Empty input gives ``b""``.

    Raises:
        InvalidCoordinateInputError: If a point is not a pair or has a
            non-finite component. No output is produced.
        ValueOutOfRangeError: If a scaled component or delta does not fit
            in a signed 64-bit integer.
        ConfigValidationError: If *precision* is out of range.
    """
    scale = scale_for(validate_precision(precision))
    out = bytearray()
    last_lat = 0
    last_lng = 0
    count = 0

    for index, point in enumerate(path):
        lat, lng = _unpack_point(point, index)
        qlat = quantize_component(lat, scale, label=f"Point {index} latitude", index=index)
        qlng = quantize_component(lng, scale, label=f"Point {index} longitude", index=index)

        try:
            encode_value_into(qlat - last_lat, out)
            encode_value_into(qlng - last_lng, out)
        except ValueOutOfRangeError as exc:
            msg = f"Point {index}: {exc.message}"
            raise ValueOutOfRangeError(msg, offset=index) from exc

        last_lat, last_lng = qlat, qlng
        count += 1

    logger.debug("Encoded %d point(s) into %d byte(s) (precision=%d)", count, len(out), precision)
    return bytes(out)


def encode_str(path: Iterable[Sequence[float]], *, precision: int = DEFAULT_PRECISION) -> str:
    """Encode *path* and return the polyline as ASCII text."""
    return encode(path, precision=precision).decode("ascii")
