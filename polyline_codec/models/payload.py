"""Pydantic schema for polylines exchanged as JSON.

Routing and directions APIs ship polylines inside JSON documents as
``{"points": "_p~iF~ps|U"}``. ``PolylinePayload`` validates such a
document at the boundary (alphabet and precision) before any decoding
happens, and converts to and from the ``Polyline`` value type.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from polyline_codec.core.constants import (
    DEFAULT_PRECISION,
    MAX_ENCODED_BYTE,
    MAX_PRECISION,
    MIN_ENCODED_BYTE,
    MIN_PRECISION,
)
from polyline_codec.models.polyline import Polyline


class PolylinePayload(BaseModel):
    """JSON payload carrying one encoded polyline.

    Attributes:
        points: Encoded polyline text. Every character must lie in the
            polyline alphabet (``?`` through ``~``).
        precision: Decimal digits the points were encoded with.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    points: str = ""
    precision: int = Field(default=DEFAULT_PRECISION, ge=MIN_PRECISION, le=MAX_PRECISION)

    @field_validator("points")
    @classmethod
    def check_alphabet(cls, value: str) -> str:
        for offset, char in enumerate(value):
            if not MIN_ENCODED_BYTE <= ord(char) <= MAX_ENCODED_BYTE:
                msg = f"character {char!r} at offset {offset} is outside the polyline alphabet"
                raise ValueError(msg)
        return value

    def to_polyline(self) -> Polyline:
        """Return the ``Polyline`` value carried by this payload."""
        return Polyline.from_text(self.points, precision=self.precision)

    @classmethod
    def from_polyline(cls, polyline: Polyline) -> PolylinePayload:
        """Build a payload from a ``Polyline``."""
        return cls(points=polyline.text, precision=polyline.precision)
