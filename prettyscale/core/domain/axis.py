"""
AxisScale — Модель числовой оси

Immutable Pydantic модель, объединяющая результаты трёх независимых
вычислений для набора данных:
- range inversion (коэффициенты нормализации [min, max] → [0, 1])
- pretty breaks (точки разметки)
- подписи точек разметки (с надстрочным показателем для научной нотации)

Полная совместимость с JSON Schema (core/contracts/schema/axis_scale.json).
"""

import logging
from typing import Iterable

from pydantic import BaseModel, Field, field_validator, model_validator

from prettyscale.core.format.superscript import format_tick_label
from prettyscale.core.math.numerical_safeguards import is_close, min_max
from prettyscale.core.math.pretty_breaks import DEFAULT_BREAK_COUNT, pretty_breaks
from prettyscale.core.math.range_inversion import ScaleParams, invert_range

logger = logging.getLogger(__name__)


# =============================================================================
# AXIS SCALE MODEL
# =============================================================================


class AxisScale(BaseModel):
    """
    Числовая ось, построенная по диапазону данных.

    Immutable модель (frozen=True).
    """

    # Диапазон данных
    data_min: float = Field(..., description="Минимум данных")
    data_max: float = Field(..., description="Максимум данных")

    # Разметка
    breaks: list[float] = Field(
        ..., min_length=1, description="Точки разметки (неубывающие, возможен дубликат в конце)"
    )
    labels: list[str] = Field(..., min_length=1, description="Подписи точек разметки")

    # Нормализация
    new_min: float = Field(..., description="Образ 0 под нормализацией данных")
    new_max: float = Field(..., description="Образ 1 под нормализацией данных")
    scale_factor: float = Field(..., description="1 / (data_max - data_min)")

    model_config = {"frozen": True}

    @field_validator("breaks")
    @classmethod
    def _breaks_non_decreasing(cls, v: list[float]) -> list[float]:
        for prev, nxt in zip(v, v[1:]):
            if nxt < prev and not is_close(nxt, prev):
                raise ValueError(f"breaks must be non-decreasing, got {prev} before {nxt}")
        return v

    @model_validator(mode="after")
    def _labels_match_breaks(self) -> "AxisScale":
        if len(self.labels) != len(self.breaks):
            raise ValueError(
                f"labels ({len(self.labels)}) and breaks ({len(self.breaks)}) "
                f"must have equal length"
            )
        return self

    @property
    def scale_params(self) -> ScaleParams:
        return ScaleParams(self.new_min, self.new_max, self.scale_factor)

    def normalize(self, value: float) -> float:
        """Положение значения на оси в долях [0, 1]."""
        return self.scale_params.normalize(value)


# =============================================================================
# BUILDER
# =============================================================================


def build_axis_scale(values: Iterable[float], n: int = DEFAULT_BREAK_COUNT) -> AxisScale:
    """
    Построение оси по данным.

    Args:
        values: Значения данных (непустые, конечные)
        n: Желаемое количество интервалов разметки

    Returns:
        AxisScale

    Raises:
        ValueError: Если данные пусты или содержат NaN/Inf
        DegenerateRangeError: Если все значения равны
        InvalidBreakCountError: Если n не положительное целое
    """
    data_min, data_max = min_max(values)
    params = invert_range(data_min, data_max)
    breaks = pretty_breaks(data_min, data_max, n)
    labels = [format_tick_label(b) for b in breaks]

    logger.debug("Axis [%r, %r]: %d breaks", data_min, data_max, len(breaks))

    return AxisScale(
        data_min=data_min,
        data_max=data_max,
        breaks=breaks,
        labels=labels,
        new_min=params.new_min,
        new_max=params.new_max,
        scale_factor=params.scale_factor,
    )
