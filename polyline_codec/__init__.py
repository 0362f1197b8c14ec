"""Encoded Polyline Algorithm Format codec.

Encodes ordered ``(lat, lng)`` paths into the compact, URL-safe ASCII
form used by Google Maps, OSRM, Valhalla and most directions APIs, and
decodes them back.

    >>> from polyline_codec import decode, encode
    >>> encode([(38.5, -120.2), (40.7, -120.95), (43.252, -126.453)])
    b'_p~iF~ps|U_ulLnnqC_mqNvxq`@'
    >>> decode("_p~iF~ps|U")
    [(38.5, -120.2)]
"""

from polyline_codec.codec import (
    decode,
    decode_value,
    encode,
    encode_str,
    encode_value,
    iter_decode,
    iter_values,
    quantize,
)
from polyline_codec.core.config import CodecConfig, ConfigValidationError
from polyline_codec.core.exceptions import (
    ContractError,
    InvalidCoordinateInputError,
    InvalidPolylineByteError,
    MalformedPolylineError,
    PolylineError,
    TruncatedPointPairError,
    TruncatedVarintError,
    ValidationError,
    ValueOutOfRangeError,
    VarintOverflowError,
)
from polyline_codec.models import Polyline, PolylinePayload

__version__ = "0.1.0"

__all__ = [
    "CodecConfig",
    "ConfigValidationError",
    "ContractError",
    "InvalidCoordinateInputError",
    "InvalidPolylineByteError",
    "MalformedPolylineError",
    "Polyline",
    "PolylineError",
    "PolylinePayload",
    "TruncatedPointPairError",
    "TruncatedVarintError",
    "ValidationError",
    "ValueOutOfRangeError",
    "VarintOverflowError",
    "decode",
    "decode_value",
    "encode",
    "encode_str",
    "encode_value",
    "iter_decode",
    "iter_values",
    "quantize",
]
