"""Unified codec exception taxonomy.

Every codec exception inherits from ``PolylineError`` and carries
structured context fields so callers can tell malformed encoded input
apart from bad coordinates without parsing messages.

Taxonomy categories
-------------------
- ``ValidationError`` — caller-supplied coordinates or settings are
  unusable (non-finite, wrong shape, out of range). Never retryable.
- ``ContractError``   — encoded input does not follow the wire format
  (truncated or over-long integer, dangling latitude delta, foreign byte). Never
  retryable.

Pure computation has no transient failure mode, so nothing in the
taxonomy is retryable by default.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging and API error bodies.
"""

from __future__ import annotations


class PolylineError(Exception):
    """Base exception for all codec errors.

    Attributes:
        message: Human-readable error description.
        stage: Codec stage where the error occurred
            (``"encode"``, ``"decode"``, ``"config"``).
        code: Machine-readable error code (e.g. ``"TRUNCATED_VARINT"``).
        retryable: Whether repeating the call could succeed.
        offset: Byte offset (decode) or point index (encode) the error
            refers to, or ``None`` when not applicable.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
        offset: int | None = None,
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        self.offset = offset
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        return "transient" if self.retryable else "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
            "offset": self.offset,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(PolylineError):
    """Caller input failed validation. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class ContractError(PolylineError):
    """Encoded input violates the wire format. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Decode errors
# ---------------------------------------------------------------------------


class MalformedPolylineError(ContractError):
    """Raised when an encoded polyline cannot be decoded."""

    default_stage = "decode"
    default_code = "MALFORMED_POLYLINE"


class TruncatedVarintError(MalformedPolylineError):
    """Input ended while an integer still had its continuation bit set."""

    default_code = "TRUNCATED_VARINT"


class TruncatedPointPairError(MalformedPolylineError):
    """Input ended after a latitude delta with no longitude delta."""

    default_code = "TRUNCATED_POINT_PAIR"


class InvalidPolylineByteError(MalformedPolylineError):
    """A byte outside the encoded alphabet ``[63, 126]`` was found."""

    default_code = "INVALID_POLYLINE_BYTE"


class VarintOverflowError(MalformedPolylineError):
    """An encoded integer is wider than a signed 64-bit value."""

    default_code = "VARINT_OVERFLOW"


# ---------------------------------------------------------------------------
# Encode errors
# ---------------------------------------------------------------------------


class InvalidCoordinateInputError(ValidationError):
    """Raised when a coordinate cannot be encoded (non-finite or malformed)."""

    default_stage = "encode"
    default_code = "INVALID_COORDINATE_INPUT"


class ValueOutOfRangeError(InvalidCoordinateInputError):
    """Raised when a value does not fit in a signed 64-bit integer."""

    default_code = "VALUE_OUT_OF_RANGE"
