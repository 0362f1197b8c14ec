"""Fixed-point quantisation of coordinate components.

Degrees are scaled by ``10 ** precision`` and rounded to the nearest
integer with ties away from zero, the rounding of C's ``round()`` and of
the published algorithm description. Python's built-in ``round`` rounds
ties to even (``round(0.5) == 0``) and is not used.
"""

from __future__ import annotations

import math

from polyline_codec.core.config import validate_precision
from polyline_codec.core.constants import DEFAULT_PRECISION, scale_for
from polyline_codec.core.exceptions import InvalidCoordinateInputError, ValueOutOfRangeError


def round_half_away(scaled: float) -> int:
    """Round a finite float to the nearest integer, ties away from zero."""
    magnitude = abs(scaled)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return -whole if scaled < 0 else whole


def quantize_component(value: object, scale: int, *, label: str, index: int | None) -> int:
    """Scale and round one component, rejecting values that cannot be encoded.

    Args:
        value: The component in degrees.
        scale: ``10 ** precision``.
        label: Human-readable component name used in error messages.
        index: Point index used as the error ``offset``.

    Raises:
        InvalidCoordinateInputError: If *value* is not a finite real number.
        ValueOutOfRangeError: If the scaled value overflows a float.
    """
    try:
        degrees = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        msg = f"{label} must be a real number, got {value!r}"
        raise InvalidCoordinateInputError(msg, offset=index) from exc

    if not math.isfinite(degrees):
        msg = f"{label} must be finite, got {degrees!r}"
        raise InvalidCoordinateInputError(msg, offset=index)

    scaled = degrees * scale
    if not math.isfinite(scaled):
        msg = f"{label} {degrees!r} overflows at scale {scale}"
        raise ValueOutOfRangeError(msg, offset=index)

    return round_half_away(scaled)


def quantize(value: float, precision: int = DEFAULT_PRECISION) -> int:
    """Return *value* degrees as a fixed-point integer at *precision* digits.

    >>> quantize(-179.9832104)
    -17998321
    >>> quantize(2.5, precision=0)
    3
    """
    scale = scale_for(validate_precision(precision))
    return quantize_component(value, scale, label="value", index=None)
