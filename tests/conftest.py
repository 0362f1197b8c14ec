"""Shared pytest fixtures for the polyline codec test suite."""

import pytest

# ---------------------------------------------------------------------------
# Reference data (published algorithm example)
# ---------------------------------------------------------------------------

REFERENCE_PATH = [(38.5, -120.2), (40.7, -120.95), (43.252, -126.453)]
REFERENCE_ENCODING = b"_p~iF~ps|U_ulLnnqC_mqNvxq`@"

# Deltas the reference path is made of, in stream order (lat, lng, lat, lng, ...)
REFERENCE_DELTAS = [3850000, -12020000, 220000, -75000, 255200, -550300]


@pytest.fixture()
def reference_path() -> list[tuple[float, float]]:
    """The three-point path from the published algorithm description."""
    return list(REFERENCE_PATH)


@pytest.fixture()
def reference_encoding() -> bytes:
    """Published encoding of ``reference_path``."""
    return REFERENCE_ENCODING


@pytest.fixture()
def descending_path() -> list[tuple[float, float]]:
    """A path whose latitude and longitude both decrease at every step."""
    return [
        (51.50722, -0.12750),
        (51.50412, -0.13001),
        (51.49833, -0.13789),
        (-33.86882, -151.20930),
    ]


@pytest.fixture()
def reference_deltas() -> list[int]:
    """Signed deltas making up ``reference_encoding``, in stream order."""
    return list(REFERENCE_DELTAS)
