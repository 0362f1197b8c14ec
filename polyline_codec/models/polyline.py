"""Data model for an encoded polyline.

A Polyline holds the encoded bytes of a path together with the
precision they were encoded at, so a value can be passed around
(and serialised into API payloads) without losing how to decode it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from polyline_codec.codec import as_bytes, decode, encode
from polyline_codec.core.config import validate_precision
from polyline_codec.core.constants import DEFAULT_PRECISION

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from polyline_codec.codec import EncodedInput
    from polyline_codec.core.config import CodecConfig


@dataclass(frozen=True, slots=True)
class Polyline:
    """An encoded path.

    Attributes:
        points: Encoded polyline bytes (alphabet ``[63, 126]``).
        precision: Decimal digits the points were encoded with.
    """

    points: bytes = b""
    precision: int = DEFAULT_PRECISION

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", as_bytes(self.points))
        validate_precision(self.precision)

    def __len__(self) -> int:
        return len(self.points)

    def __str__(self) -> str:
        return self.text

    @property
    def text(self) -> str:
        """The encoded points as ASCII text."""
        return self.points.decode("ascii")

    @classmethod
    def from_path(
        cls,
        path: Iterable[Sequence[float]],
        *,
        precision: int | None = None,
        config: CodecConfig | None = None,
    ) -> Polyline:
        """Encode *path* into a new Polyline.

        Precision comes from the explicit argument, then *config*, then
        the standard default of 5.
        """
        if precision is None:
            precision = config.precision if config is not None else DEFAULT_PRECISION
        return cls(points=encode(path, precision=precision), precision=precision)

    @classmethod
    def from_text(cls, text: EncodedInput, *, precision: int = DEFAULT_PRECISION) -> Polyline:
        """Wrap already-encoded points. No decoding is attempted."""
        return cls(points=as_bytes(text), precision=precision)

    def decode(self) -> list[tuple[float, float]]:
        """Decode the points into ``(lat, lng)`` tuples."""
        return decode(self.points, precision=self.precision)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a JSON-ready dict.

        ``precision`` is only written when it differs from the standard
        default, so standard polylines serialise as ``{"points": "..."}``.
        """
        data: dict[str, object] = {"points": self.text}
        if self.precision != DEFAULT_PRECISION:
            data["precision"] = self.precision
        return data

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Polyline:
        """Deserialise from a dict payload.

        A missing ``precision`` defaults to 5; a missing ``points``
        defaults to the empty polyline.

        Raises:
            TypeError: If ``points`` is not a string or ``precision`` is
                not an integer.
        """
        points = data.get("points", "")
        if not isinstance(points, str):
            msg = f"points must be a str, got {type(points).__name__}"
            raise TypeError(msg)

        precision = data.get("precision", DEFAULT_PRECISION)
        if isinstance(precision, bool) or not isinstance(precision, int):
            msg = f"precision must be an int, got {type(precision).__name__}"
            raise TypeError(msg)

        return cls(points=as_bytes(points), precision=precision)
