"""
Range Inversion — Affine Rescaling of [min, max]

Модуль вычисляет коэффициенты аффинного отображения, обратного к линейной
шкале, заданной границами [min, max]:

    range_inverse = 1 / (max - min)
    new_min = -min * range_inverse
    new_max = range_inverse - min * range_inverse
    scale_factor = range_inverse

Свойства:
    normalize(v)   = v * scale_factor + new_min          (min → 0, max → 1)
    denormalize(t) = (t - new_min) / scale_factor         (0 → min, 1 → max)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Порядок арифметических операций фиксирован (float не ассоциативен)
2. min == max → DegenerateRangeError
3. Бесконечный range_inverse (переполнение) → DegenerateRangeError
4. min > max допустим: убывающая шкала, scale_factor < 0
"""

from typing import NamedTuple

from prettyscale.core.math.numerical_safeguards import (
    DegenerateRangeError,
    is_valid_float,
    validate_range,
)


# =============================================================================
# ТИПЫ
# =============================================================================


class ScaleParams(NamedTuple):
    """
    Коэффициенты обратного аффинного отображения диапазона.

    Это не исходные границы диапазона: new_min и new_max являются образами
    0 и 1 под нормализацией исходной шкалы.
    """

    new_min: float  # -min / (max - min)
    new_max: float  # (1 - min) / (max - min)
    scale_factor: float  # 1 / (max - min)

    def normalize(self, value: float) -> float:
        """Отображение исходного значения в [0, 1]: min → 0, max → 1."""
        return value * self.scale_factor + self.new_min

    def denormalize(self, t: float) -> float:
        """
        Обратное отображение: 0 → min, 1 → max.

        new_max - new_min == scale_factor алгебраически, но при |min| >> (max - min)
        разность теряет точность, поэтому делим на scale_factor.
        """
        return (t - self.new_min) / self.scale_factor


# =============================================================================
# RANGE INVERSION
# =============================================================================


def invert_range(min_value: float, max_value: float) -> ScaleParams:
    """
    Инвертирование числового диапазона.

    Возвращает новые границы такие, что масштабирование
    `(value - new_min) / (new_max - new_min)` переводит 0 в min_value
    и 1 в max_value.

    Args:
        min_value: Нижняя граница диапазона
        max_value: Верхняя граница диапазона

    Returns:
        ScaleParams(new_min, new_max, scale_factor)

    Raises:
        ValueError: Если границы содержат NaN/Inf или max - min переполняется
        DegenerateRangeError: Если min_value == max_value или ширина диапазона
            слишком мала для конечного 1 / (max - min)

    Examples:
        >>> invert_range(0.0, 10.0)
        ScaleParams(new_min=-0.0, new_max=0.1, scale_factor=0.1)
        >>> invert_range(0.0, 10.0).denormalize(1.0)
        10.0
    """
    validate_range(min_value, max_value)

    width = max_value - min_value
    if not is_valid_float(width):
        raise ValueError(
            f"Range [{min_value!r}, {max_value!r}] overflows: max - min = {width!r}"
        )

    range_inverse = 1 / width
    if not is_valid_float(range_inverse):
        raise DegenerateRangeError(
            f"Range [{min_value!r}, {max_value!r}] is too narrow to invert: "
            f"1 / (max - min) = {range_inverse!r}"
        )

    new_min = -min_value * range_inverse
    new_max = range_inverse - min_value * range_inverse

    return ScaleParams(
        new_min=new_min,
        new_max=new_max,
        scale_factor=range_inverse,
    )
