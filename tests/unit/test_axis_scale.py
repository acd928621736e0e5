"""
Tests for AxisScale model and build_axis_scale

Покрывает:
- Построение оси по данным (range inversion + pretty breaks + подписи)
- Валидацию модели (неубывающие breaks, labels той же длины)
- Immutability (frozen=True)
- Ошибки на пустых/вырожденных данных
"""

import pytest
from pydantic import ValidationError

from prettyscale.core.domain import AxisScale, build_axis_scale
from prettyscale.core.math import (
    DegenerateRangeError,
    InvalidBreakCountError,
    ScaleParams,
)


@pytest.fixture
def valid_axis_data():
    """Валидные данные оси [0, 10]."""
    return {
        "data_min": 0.0,
        "data_max": 10.0,
        "breaks": [0.0, 2.0, 4.0, 6.0, 8.0, 10.0, 10.0],
        "labels": ["0", "2", "4", "6", "8", "10", "10"],
        "new_min": 0.0,
        "new_max": 0.1,
        "scale_factor": 0.1,
    }


class TestBuildAxisScale:
    """Построение оси по данным."""

    def test_zero_to_ten(self):
        axis = build_axis_scale([0, 3, 10, 7])
        assert axis.data_min == 0.0
        assert axis.data_max == 10.0
        assert axis.breaks == [0, 2, 4, 6, 8, 10, 10]
        assert axis.labels == ["0", "2", "4", "6", "8", "10", "10"]
        assert axis.scale_factor == 0.1
        assert axis.new_max == 0.1

    def test_normalize(self):
        axis = build_axis_scale([2.0, 6.0])
        assert axis.normalize(2.0) == 0.0
        assert axis.normalize(4.0) == 0.5
        assert axis.normalize(6.0) == 1.0

    def test_scale_params(self):
        axis = build_axis_scale([2.0, 6.0])
        assert axis.scale_params == ScaleParams(-0.5, -0.25, 0.25)

    def test_scientific_labels(self):
        axis = build_axis_scale([0.0, 4e7], n=4)
        assert axis.breaks == [0.0, 1e7, 2e7, 3e7, 4e7, 4e7]
        assert axis.labels == ["0", "1×10⁷", "2×10⁷", "3×10⁷", "4×10⁷", "4×10⁷"]

    def test_custom_break_count(self):
        axis = build_axis_scale([0.0, 10.0], n=2)
        assert axis.breaks == [0.0, 5.0, 10.0, 10.0]

    def test_empty_data_raises(self):
        with pytest.raises(ValueError, match="at least one value"):
            build_axis_scale([])

    def test_constant_data_raises(self):
        with pytest.raises(DegenerateRangeError):
            build_axis_scale([5.0, 5.0, 5.0])

    def test_invalid_break_count(self):
        with pytest.raises(InvalidBreakCountError):
            build_axis_scale([0.0, 1.0], n=0)


class TestAxisScaleModel:
    """Валидация модели AxisScale."""

    def test_valid(self, valid_axis_data):
        axis = AxisScale(**valid_axis_data)
        assert len(axis.breaks) == len(axis.labels) == 7

    def test_frozen(self, valid_axis_data):
        axis = AxisScale(**valid_axis_data)
        with pytest.raises(ValidationError):
            axis.data_min = 1.0

    def test_decreasing_breaks_rejected(self, valid_axis_data):
        valid_axis_data["breaks"] = [0.0, 4.0, 2.0, 6.0, 8.0, 10.0, 10.0]
        with pytest.raises(ValidationError, match="non-decreasing"):
            AxisScale(**valid_axis_data)

    def test_rounding_noise_in_duplicate_tolerated(self, valid_axis_data):
        """Последний дубликат может отличаться на единицы ulp."""
        valid_axis_data["breaks"] = [0.0, 0.2, 0.4, 0.6000000000000001, 0.6]
        valid_axis_data["labels"] = ["0", "0.2", "0.4", "0.6", "0.6"]
        AxisScale(**valid_axis_data)

    def test_labels_length_mismatch(self, valid_axis_data):
        valid_axis_data["labels"] = ["0", "2"]
        with pytest.raises(ValidationError, match="equal length"):
            AxisScale(**valid_axis_data)

    def test_empty_breaks_rejected(self, valid_axis_data):
        valid_axis_data["breaks"] = []
        valid_axis_data["labels"] = []
        with pytest.raises(ValidationError):
            AxisScale(**valid_axis_data)

    def test_json_roundtrip(self, valid_axis_data):
        axis = AxisScale(**valid_axis_data)
        restored = AxisScale.model_validate_json(axis.model_dump_json())
        assert restored == axis
