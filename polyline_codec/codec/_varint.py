"""Varint sign-fold integer codec.

Responsibilities:
- Sign folding (zig-zag) of signed integers into non-negative ones
- Chunking into 5-bit groups with a continuation flag, offset by 63
- The inverse: reading one self-delimiting integer at a byte cursor
- Normalising caller input (``bytes``/``bytearray``/``memoryview``/``str``)
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING

from polyline_codec.core.constants import (
    ASCII_OFFSET,
    CHUNK_BITS,
    CHUNK_MASK,
    CONTINUATION_BIT,
    INT64_MAX,
    INT64_MIN,
    MAX_ENCODED_BYTE,
    MAX_VARINT_BYTES,
    MIN_ENCODED_BYTE,
)
from polyline_codec.core.exceptions import (
    InvalidPolylineByteError,
    TruncatedVarintError,
    ValueOutOfRangeError,
    VarintOverflowError,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

EncodedInput = bytes | bytearray | memoryview | str


# ---------------------------------------------------------------------------
# Input normalisation
# ---------------------------------------------------------------------------


def as_bytes(data: EncodedInput) -> bytes:
    """Return *data* as immutable ``bytes``.

    Text input must be pure ASCII; anything else cannot be a polyline.

    Raises:
        InvalidPolylineByteError: If a ``str`` contains a non-ASCII character.
        TypeError: If *data* is not bytes-like or ``str``.
    """
    if isinstance(data, str):
        try:
            return data.encode("ascii")
        except UnicodeEncodeError as exc:
            msg = f"Non-ASCII character {data[exc.start]!r} at offset {exc.start}"
            raise InvalidPolylineByteError(msg, offset=exc.start) from exc
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    msg = f"Encoded polyline must be bytes or str, got {type(data).__name__}"
    raise TypeError(msg)


# ---------------------------------------------------------------------------
# Encode
# ---------------------------------------------------------------------------


def encode_value_into(value: int, out: bytearray) -> None:
    """Append the encoding of one signed integer to *out*.

    Raises:
        ValueOutOfRangeError: If *value* does not fit in a signed 64-bit integer.
        TypeError: If *value* is not an integer.
    """
    value = operator.index(value)
    if not INT64_MIN <= value <= INT64_MAX:
        msg = f"Value {value} does not fit in a signed 64-bit integer"
        raise ValueOutOfRangeError(msg)

    folded = ~(value << 1) if value < 0 else value << 1
    while folded >= CONTINUATION_BIT:
        out.append((CONTINUATION_BIT | (folded & CHUNK_MASK)) + ASCII_OFFSET)
        folded >>= CHUNK_BITS
    out.append(folded + ASCII_OFFSET)


def encode_value(value: int) -> bytes:
    """Encode one signed integer as a self-delimiting byte sequence.

    >>> encode_value(-17998321)
    b'`~oia@'
    """
    out = bytearray()
    encode_value_into(value, out)
    return bytes(out)


# ---------------------------------------------------------------------------
# Decode
# ---------------------------------------------------------------------------


def read_value(buf: bytes, pos: int) -> tuple[int, int]:
    """Read one integer from *buf* starting at *pos*.

    Returns:
        ``(value, next_pos)``.

    Raises:
        TruncatedVarintError: If *buf* ends before a terminal byte.
        InvalidPolylineByteError: If a byte lies outside ``[63, 126]``.
        VarintOverflowError: If the integer is wider than signed 64 bits.
    """
    start = pos
    end = len(buf)
    result = 0
    shift = 0
    while True:
        if pos >= end:
            msg = (
                f"Truncated varint: input ended after {end - start} byte(s) "
                f"of an integer starting at offset {start}"
            )
            raise TruncatedVarintError(msg, offset=start)

        byte = buf[pos]
        if not MIN_ENCODED_BYTE <= byte <= MAX_ENCODED_BYTE:
            msg = (
                f"Byte 0x{byte:02x} at offset {pos} is outside the polyline "
                f"alphabet [{MIN_ENCODED_BYTE}, {MAX_ENCODED_BYTE}]"
            )
            raise InvalidPolylineByteError(msg, offset=pos)

        chunk = byte - ASCII_OFFSET
        pos += 1
        result |= (chunk & CHUNK_MASK) << shift
        shift += CHUNK_BITS
        if not chunk & CONTINUATION_BIT:
            break
        if pos - start >= MAX_VARINT_BYTES:
            msg = (
                f"Varint starting at offset {start} runs past {MAX_VARINT_BYTES} bytes "
                "and cannot fit in a signed 64-bit integer"
            )
            raise VarintOverflowError(msg, offset=start)

    value = ~(result >> 1) if result & 1 else result >> 1
    if not INT64_MIN <= value <= INT64_MAX:
        msg = f"Varint starting at offset {start} decodes outside the signed 64-bit range"
        raise VarintOverflowError(msg, offset=start)
    return value, pos


def decode_value(data: EncodedInput, pos: int = 0) -> tuple[int, int]:
    """Decode one signed integer from *data* at byte offset *pos*.

    Returns:
        ``(value, next_pos)`` where ``next_pos - pos`` is the number of
        bytes consumed.

    Raises:
        TruncatedVarintError: If *data* ends mid-integer (including when
            *pos* is already at the end).
        InvalidPolylineByteError: If a byte lies outside the alphabet.
        VarintOverflowError: If the integer is wider than signed 64 bits.
        ValueError: If *pos* is negative or past the end of *data*.
    """
    buf = as_bytes(data)
    if not 0 <= pos <= len(buf):
        msg = f"Cursor {pos} is outside the input (length {len(buf)})"
        raise ValueError(msg)
    return read_value(buf, pos)


def scan_values(buf: bytes) -> Iterator[tuple[int, int]]:
    """Yield ``(start_offset, value)`` for every integer in *buf*."""
    pos = 0
    end = len(buf)
    while pos < end:
        start = pos
        value, pos = read_value(buf, pos)
        yield start, value


def iter_values(data: EncodedInput) -> Iterator[int]:
    """Yield every signed integer encoded in *data*, in order.

    Errors are raised when the offending integer is reached; values
    before it have already been yielded.
    """
    for _start, value in scan_values(as_bytes(data)):
        yield value
