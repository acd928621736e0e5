"""
AxisScale JSON Contract

Проверка сериализованной оси (AxisScale) против JSON Schema контракта
schema/axis_scale.json, который поставляется вместе с пакетом.

Pydantic модель проверяет ось при создании; контракт проверяет то, что
уходит наружу: JSON-представление оси, включая формат подписей
("1.2", "1×10⁶", "5×10⁻⁵").
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Final, Mapping

import jsonschema
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from prettyscale.core.domain.axis import AxisScale

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"
AXIS_SCALE_SCHEMA: Final[str] = "axis_scale"


# =============================================================================
# SCHEMA LOADING
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> dict[str, Any]:
    """
    Загрузка и meta-validation JSON Schema.

    Результат кэшируется: повторная загрузка возвращает тот же объект.

    Args:
        schema_name: Имя схемы без расширения (например, 'axis_scale')
        schema_dir: Каталог схем (default: schema/ рядом с модулем)

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если схема не проходит meta-validation
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

    return schema


@lru_cache(maxsize=1)
def _axis_scale_validator() -> Draft202012Validator:
    return Draft202012Validator(load_schema(AXIS_SCALE_SCHEMA))


# =============================================================================
# AXIS SCALE CONTRACT
# =============================================================================


def axis_scale_payload(axis: AxisScale | Mapping[str, Any]) -> dict[str, Any]:
    """JSON-представление оси: модель сериализуется, mapping копируется как есть."""
    if isinstance(axis, AxisScale):
        return axis.model_dump(mode="json")
    return dict(axis)


def validate_axis_scale(axis: AxisScale | Mapping[str, Any]) -> None:
    """
    Проверка оси против контракта axis_scale.json.

    Args:
        axis: AxisScale или уже сериализованные данные (например, из JSON)

    Raises:
        ValidationError: Наиболее релевантное нарушение контракта
    """
    validator = _axis_scale_validator()
    error = best_match(validator.iter_errors(axis_scale_payload(axis)))
    if error is not None:
        raise error
