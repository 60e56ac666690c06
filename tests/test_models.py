"""Tests for the button data models."""

import pytest

from calb.core.models import ButtonGeometry, RadiusPolicy, StyleConfig, coerce_radius_policy
from calb.utils.errors import CalbError, CalbGeometryError, CalbValidationError


class TestButtonGeometry:
    """Test derived geometry values."""

    def test_derived_values(self):
        """300x100: radius 50, straight edges 200."""
        g = ButtonGeometry(300.0, 100.0)
        assert g.ext_radius == 50.0
        assert g.segment_length == 200.0
        assert g.is_laid_out

    @pytest.mark.parametrize("size", [(0.0, 10.0), (10.0, 0.0), (-1.0, 10.0), (float("nan"), 10.0)])
    def test_not_laid_out(self, size):
        """Zero, negative or non-finite sizes mean the layout is not done yet."""
        assert not ButtonGeometry(*size).is_laid_out


class TestStyleConfig:
    """Test style validation."""

    def test_defaults(self):
        """Reference look: 12 px band, 30% of the perimeter lit."""
        s = StyleConfig()
        assert s.border_width == 12.0
        assert s.progression_percent == 0.3

    def test_values_are_normalized_to_float(self):
        """Integers are accepted and stored as floats."""
        s = StyleConfig(border_width=8, progression_percent=1)
        assert isinstance(s.border_width, float)
        assert s.progression_percent == 1.0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"border_width": -1.0},
            {"border_width": float("nan")},
            {"border_width": "wide"},
            {"border_width": True},
            {"progression_percent": 1.5},
            {"progression_percent": -0.1},
            {"progression_percent": float("inf")},
        ],
    )
    def test_invalid_values_raise(self, kwargs):
        """Out of range or non-numeric values are rejected."""
        with pytest.raises(CalbValidationError):
            StyleConfig(**kwargs)

    def test_dict_round_trip(self):
        """to_dict output is accepted by from_dict."""
        s = StyleConfig(border_width=6.0, progression_percent=0.25)
        assert StyleConfig.from_dict(s.to_dict()) == s

    def test_from_dict_defaults_and_type_check(self):
        """Missing keys take defaults; non-dicts are rejected."""
        assert StyleConfig.from_dict({}) == StyleConfig()
        with pytest.raises(CalbValidationError):
            StyleConfig.from_dict(["border_width", 3])  # type: ignore[arg-type]


class TestRadiusPolicy:
    """Test policy coercion."""

    @pytest.mark.parametrize(
        "value,expected",
        [("clamp", RadiusPolicy.CLAMP), (" REJECT ", RadiusPolicy.REJECT), (RadiusPolicy.REJECT, RadiusPolicy.REJECT)],
    )
    def test_known_values(self, value, expected):
        """Names are matched case-insensitively."""
        assert coerce_radius_policy(value) is expected

    @pytest.mark.parametrize("value", ["", None, "stretch", 3])
    def test_unknown_values_fall_back(self, value):
        """Anything else falls back to the default."""
        assert coerce_radius_policy(value) is RadiusPolicy.CLAMP


class TestErrors:
    """Test the error hierarchy."""

    def test_geometry_error_is_a_validation_error(self):
        """Callers can catch every project error with CalbError."""
        assert issubclass(CalbGeometryError, CalbValidationError)
        assert issubclass(CalbValidationError, CalbError)
