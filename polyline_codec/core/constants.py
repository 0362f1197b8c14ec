"""Wire-format constants for the Encoded Polyline Algorithm Format.

Single source of truth for the byte offset, chunk width, and precision
limits shared by the varint codec, the coordinate encoder/decoder, the
configuration layer, and the payload schema.

References:
    https://developers.google.com/maps/documentation/utilities/polylinealgorithm
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Varint chunking
# ---------------------------------------------------------------------------

ASCII_OFFSET: int = 63
"""Added to every 6-bit chunk so encoded bytes are printable ASCII (``?``)."""

CHUNK_BITS: int = 5
"""Data bits carried per encoded byte."""

CHUNK_MASK: int = 0x1F
"""Mask selecting the data bits of a chunk."""

CONTINUATION_BIT: int = 0x20
"""Set on every chunk except the last one of an integer."""

MIN_ENCODED_BYTE: int = ASCII_OFFSET
"""Smallest byte value that can appear in an encoded polyline (``?``)."""

MAX_ENCODED_BYTE: int = ASCII_OFFSET + CONTINUATION_BIT + CHUNK_MASK
"""Largest byte value that can appear in an encoded polyline (``~``)."""

# ---------------------------------------------------------------------------
# Integer range
# ---------------------------------------------------------------------------

INT64_MIN: int = -(1 << 63)
"""Smallest value the varint codec accepts (signed 64-bit)."""

INT64_MAX: int = (1 << 63) - 1
"""Largest value the varint codec accepts (signed 64-bit)."""

MAX_VARINT_BYTES: int = 13
"""Longest encoding of a signed 64-bit value (64 folded bits in 5-bit chunks)."""

# ---------------------------------------------------------------------------
# Precision
# ---------------------------------------------------------------------------

DEFAULT_PRECISION: int = 5
"""Decimal digits kept by the standard format (1e-5 degrees, ~1.1 cm)."""

MIN_PRECISION: int = 0
"""Fewest decimal digits accepted (whole degrees)."""

MAX_PRECISION: int = 10
"""Most decimal digits accepted."""


def scale_for(precision: int) -> int:
    """Return the fixed-point scale factor ``10 ** precision``."""
    return 10**precision
