"""Tests for the PolylinePayload JSON schema."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError as PydanticValidationError

from polyline_codec.models import Polyline, PolylinePayload


class TestPolylinePayloadValidation:
    """Boundary validation of JSON documents."""

    def test_valid_document(self, reference_encoding: bytes) -> None:
        doc = json.dumps({"points": reference_encoding.decode("ascii")})
        payload = PolylinePayload.model_validate_json(doc)
        assert payload.points == "_p~iF~ps|U_ulLnnqC_mqNvxq`@"
        assert payload.precision == 5

    def test_extra_keys_ignored(self) -> None:
        payload = PolylinePayload.model_validate({"points": "??", "levels": "P"})
        assert payload.points == "??"

    def test_character_outside_alphabet(self) -> None:
        with pytest.raises(PydanticValidationError, match="offset 2"):
            PolylinePayload(points="??\x7f")

    def test_space_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            PolylinePayload(points="_p~iF ps|U")

    @pytest.mark.parametrize("precision", [-1, 11])
    def test_precision_range(self, precision: int) -> None:
        with pytest.raises(PydanticValidationError):
            PolylinePayload(points="??", precision=precision)

    def test_alphabet_check_does_not_decode(self) -> None:
        # Structurally truncated, but every character is in the alphabet.
        payload = PolylinePayload(points="_")
        assert payload.points == "_"


class TestPolylinePayloadConversion:
    """Conversion to and from Polyline."""

    def test_to_polyline(
        self, reference_path: list[tuple[float, float]], reference_encoding: bytes
    ) -> None:
        payload = PolylinePayload(points=reference_encoding.decode("ascii"))
        poly = payload.to_polyline()
        assert poly == Polyline(points=reference_encoding)
        assert poly.decode() == reference_path

    def test_from_polyline(self) -> None:
        payload = PolylinePayload.from_polyline(Polyline(points=b"A?", precision=6))
        assert payload.model_dump() == {"points": "A?", "precision": 6}
