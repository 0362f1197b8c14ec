"""Data models and schemas.

- Polyline: Encoded path bytes plus the precision they were encoded at
- PolylinePayload: Validated JSON form ``{"points": ..., "precision": ...}``
"""

from polyline_codec.models.payload import PolylinePayload
from polyline_codec.models.polyline import Polyline

__all__ = [
    "Polyline",
    "PolylinePayload",
]
