"""Tests for shapely / numpy / pyproj interop helpers."""

from __future__ import annotations

import numpy as np
import pytest
from shapely.geometry import LineString

from polyline_codec.codec import encode
from polyline_codec.core.exceptions import InvalidCoordinateInputError
from polyline_codec.utils.geometry import (
    decode_array,
    from_linestring,
    path_length_m,
    to_array,
    to_linestring,
)

# One degree of longitude along the equator on the WGS 84 ellipsoid.
EQUATOR_DEGREE_M = 111_319.49


class TestLineString:
    """shapely conversion swaps to (x=lng, y=lat)."""

    def test_to_linestring_axis_order(self, reference_path: list[tuple[float, float]]) -> None:
        line = to_linestring(reference_path)
        assert list(line.coords)[0] == (-120.2, 38.5)
        assert len(line.coords) == 3

    def test_to_linestring_needs_two_points(self) -> None:
        with pytest.raises(InvalidCoordinateInputError, match="at least 2"):
            to_linestring([(0.0, 0.0)])

    def test_from_linestring(self) -> None:
        line = LineString([(-120.2, 38.5), (-120.95, 40.7)])
        assert from_linestring(line) == [(38.5, -120.2), (40.7, -120.95)]

    def test_from_linestring_drops_z(self) -> None:
        line = LineString([(1.0, 2.0, 100.0), (3.0, 4.0, 200.0)])
        assert from_linestring(line) == [(2.0, 1.0), (4.0, 3.0)]

    def test_round_trip(self, reference_path: list[tuple[float, float]]) -> None:
        assert from_linestring(to_linestring(reference_path)) == reference_path


class TestArrays:
    """numpy conversion."""

    def test_to_array_shape(self, reference_path: list[tuple[float, float]]) -> None:
        arr = to_array(reference_path)
        assert arr.shape == (3, 2)
        assert arr.dtype == np.float64

    def test_to_array_empty(self) -> None:
        assert to_array([]).shape == (0, 2)

    def test_to_array_bad_shape(self) -> None:
        with pytest.raises(InvalidCoordinateInputError, match="shape"):
            to_array([(1.0, 2.0, 3.0)])

    def test_to_array_ragged_path(self) -> None:
        with pytest.raises(InvalidCoordinateInputError, match="shape"):
            to_array([(1, 2), (3,)])

    def test_to_array_non_numeric(self) -> None:
        with pytest.raises(InvalidCoordinateInputError):
            to_array([("a", "b")])

    def test_decode_array(self, reference_encoding: bytes) -> None:
        arr = decode_array(reference_encoding)
        assert arr.shape == (3, 2)
        assert arr[0, 0] == 38.5
        assert arr[2, 1] == -126.453

    def test_encode_accepts_array(
        self, reference_path: list[tuple[float, float]], reference_encoding: bytes
    ) -> None:
        assert encode(np.array(reference_path)) == reference_encoding


class TestPathLength:
    """Geodesic length on WGS 84."""

    def test_empty_and_single_point(self) -> None:
        assert path_length_m([]) == 0.0
        assert path_length_m([(10.0, 10.0)]) == 0.0

    def test_one_degree_along_equator(self) -> None:
        assert path_length_m([(0.0, 0.0), (0.0, 1.0)]) == pytest.approx(EQUATOR_DEGREE_M, rel=1e-4)

    def test_length_is_additive(self) -> None:
        a = path_length_m([(0.0, 0.0), (0.0, 1.0)])
        b = path_length_m([(0.0, 1.0), (0.0, 2.0)])
        assert path_length_m([(0.0, 0.0), (0.0, 1.0), (0.0, 2.0)]) == pytest.approx(a + b)
