"""Codec configuration loaded from environment variables.

The codec functions take explicit keyword arguments; ``CodecConfig``
supplies defaults for callers that want the precision to be driven by
deployment settings (e.g. a service that talks to an OSRM backend
emitting polyline6).

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out
    of its valid range, so a bad setting is caught at startup rather
    than producing polylines no consumer can read.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from polyline_codec.core.constants import DEFAULT_PRECISION, MAX_PRECISION, MIN_PRECISION
from polyline_codec.core.exceptions import PolylineError

logger = logging.getLogger("polyline_codec.core.config")


class ConfigValidationError(PolylineError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class CodecConfig:
    """Immutable codec configuration.

    Attributes:
        precision: Decimal digits kept per coordinate component
            (5 for the standard format, 6 for polyline6).
    """

    precision: int = DEFAULT_PRECISION

    def __post_init__(self) -> None:
        _validate(self)

    @classmethod
    def from_env(cls) -> CodecConfig:
        """Load and validate configuration from environment variables.

        Reads ``POLYLINE_PRECISION``. A missing or blank value falls
        back to the default.

        Raises:
            ConfigValidationError: If a value is out of range or cannot
                be parsed as an integer.
        """
        return cls(precision=_int_env("POLYLINE_PRECISION", DEFAULT_PRECISION))


def _int_env(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        logger.debug("%s not set, using default %d", key, default)
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigValidationError(key, raw, "must be an integer") from exc


def validate_precision(precision: object, key: str = "precision") -> int:
    """Return *precision* if it is a usable digit count.

    Raises:
        ConfigValidationError: If *precision* is not an ``int`` in
            ``[MIN_PRECISION, MAX_PRECISION]``.
    """
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise ConfigValidationError(key, precision, "must be an integer")

    if not MIN_PRECISION <= precision <= MAX_PRECISION:
        raise ConfigValidationError(
            key,
            precision,
            f"must be between {MIN_PRECISION} and {MAX_PRECISION} (decimal digits)",
        )
    return precision


def _validate(config: CodecConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    validate_precision(config.precision, "POLYLINE_PRECISION")
