"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и constraints (minItems/pattern/not)
- Интеграция с Pydantic моделью AxisScale
"""

import json

import pytest
from jsonschema import ValidationError

from prettyscale.core.contracts import (
    AXIS_SCALE_SCHEMA,
    axis_scale_payload,
    load_schema,
    validate_axis_scale,
)
from prettyscale.core.domain import build_axis_scale


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_axis_scale():
    """Валидный axis_scale для тестирования."""
    return {
        "data_min": 0.0,
        "data_max": 4e7,
        "breaks": [0.0, 1e7, 2e7, 3e7, 4e7, 4e7],
        "labels": ["0", "1×10⁷", "2×10⁷", "3×10⁷", "4×10⁷", "4×10⁷"],
        "new_min": 0.0,
        "new_max": 2.5e-8,
        "scale_factor": 2.5e-8,
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestLoadSchema:
    """Загрузка схем."""

    def test_load_axis_scale(self):
        schema = load_schema(AXIS_SCALE_SCHEMA)
        assert schema["title"] == "AxisScale"

    def test_cached(self):
        assert load_schema(AXIS_SCALE_SCHEMA) is load_schema(AXIS_SCALE_SCHEMA)

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            load_schema(AXIS_SCALE_SCHEMA, tmp_path / "absent")

    def test_invalid_schema(self, tmp_path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            load_schema("broken", tmp_path)


# =============================================================================
# AXIS SCALE CONTRACT
# =============================================================================


class TestAxisScaleContract:
    """Валидация axis_scale."""

    def test_valid(self, valid_axis_scale):
        validate_axis_scale(valid_axis_scale)

    @pytest.mark.parametrize("field", ["breaks", "labels", "scale_factor"])
    def test_missing_required_field(self, valid_axis_scale, field):
        del valid_axis_scale[field]
        with pytest.raises(ValidationError):
            validate_axis_scale(valid_axis_scale)

    def test_wrong_type(self, valid_axis_scale):
        valid_axis_scale["data_min"] = "zero"
        with pytest.raises(ValidationError):
            validate_axis_scale(valid_axis_scale)

    def test_empty_breaks(self, valid_axis_scale):
        valid_axis_scale["breaks"] = []
        with pytest.raises(ValidationError):
            validate_axis_scale(valid_axis_scale)

    @pytest.mark.parametrize("label", ["abc", "1.2e4", "1×10^4", "1×10⁺⁴"])
    def test_label_pattern(self, valid_axis_scale, label):
        valid_axis_scale["labels"][1] = label
        with pytest.raises(ValidationError):
            validate_axis_scale(valid_axis_scale)

    def test_zero_scale_factor(self, valid_axis_scale):
        valid_axis_scale["scale_factor"] = 0.0
        with pytest.raises(ValidationError):
            validate_axis_scale(valid_axis_scale)

    def test_additional_property(self, valid_axis_scale):
        valid_axis_scale["unit"] = 2.0
        with pytest.raises(ValidationError):
            validate_axis_scale(valid_axis_scale)

    def test_reports_label_that_breaks_pattern(self, valid_axis_scale):
        valid_axis_scale["labels"][2] = "2e+07"
        with pytest.raises(ValidationError, match="does not match") as exc_info:
            validate_axis_scale(valid_axis_scale)
        assert list(exc_info.value.path) == ["labels", 2]

    def test_payload_of_mapping_is_a_copy(self, valid_axis_scale):
        payload = axis_scale_payload(valid_axis_scale)
        assert payload == valid_axis_scale
        assert payload is not valid_axis_scale


# =============================================================================
# ИНТЕГРАЦИЯ С PYDANTIC
# =============================================================================


class TestPydanticIntegration:
    """Сериализованная AxisScale соответствует контракту."""

    @pytest.mark.parametrize(
        "values",
        [
            [0.0, 10.0],
            [-1.0, 1.0],
            [0.0, 4e7],
            [0.00001, 0.00009],
            [3.0, 97.0],
        ],
    )
    def test_model_dump_valid(self, values):
        axis = build_axis_scale(values)
        validate_axis_scale(axis.model_dump())

    def test_json_dump_valid(self):
        axis = build_axis_scale([0.0, 10.0])
        validate_axis_scale(json.loads(axis.model_dump_json()))

    def test_axis_scale_instance(self):
        """Модель проверяется напрямую, без ручного model_dump."""
        validate_axis_scale(build_axis_scale([0.0, 4e7]))

    def test_payload_of_model_is_json_mode_dump(self):
        axis = build_axis_scale([0.0, 10.0])
        assert axis_scale_payload(axis) == json.loads(axis.model_dump_json())

    @pytest.mark.parametrize(
        "values",
        [
            [999999.5, 1e6],
            [999999.9, 1000000.1],
            [12345.0, 12345.5],
            [0.00099, 0.001],
        ],
    )
    def test_labels_near_scientific_threshold(self, values):
        """Подписи около порога научной нотации соответствуют контракту."""
        axis = build_axis_scale(values)
        assert not any("e" in label for label in axis.labels)
        validate_axis_scale(axis)
