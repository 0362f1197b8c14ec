"""Encoded Polyline Algorithm Format codec.

The codec is split into focused stages:
- **_varint**: sign-folded 5-bit varint primitive shared by both directions
- **_quantize**: degrees to fixed-point integers (ties away from zero)
- **_encoder**: quantise, delta-code, concatenate
- **_decoder**: read varints in pairs, accumulate, scale back to degrees

All functions are pure and reentrant; nothing is cached between calls.
"""

from __future__ import annotations

from polyline_codec.codec._decoder import decode, iter_decode
from polyline_codec.codec._encoder import encode, encode_str
from polyline_codec.codec._quantize import quantize, round_half_away
from polyline_codec.codec._varint import (
    EncodedInput,
    as_bytes,
    decode_value,
    encode_value,
    encode_value_into,
    iter_values,
)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "EncodedInput",
    "as_bytes",
    "decode",
    "decode_value",
    "encode",
    "encode_str",
    "encode_value",
    "encode_value_into",
    "iter_decode",
    "iter_values",
    "quantize",
    "round_half_away",
]
