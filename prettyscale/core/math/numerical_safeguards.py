"""
Numerical Safeguards — Range Validation & Numeric Primitives

Модуль содержит общие проверки и примитивы для всех вычислений шкалы:
- Проверка float на NaN/Inf
- Epsilon-сравнения float с учётом машинной точности
- Валидация диапазона [min, max] (вырожденный диапазон → DegenerateRangeError)
- clamp / clamp_unit для ограничения значений
- min_max и seq для построения диапазонов из данных

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не принимаются молча (ValueError)
2. Вырожденный диапазон (min == max) всегда сообщается через DegenerateRangeError
3. Все операции детерминированы и не имеют побочных эффектов
"""

import math
from typing import Final, Iterable

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DegenerateRangeError(ValueError):
    """
    Вырожденный диапазон: min == max.

    Ширина диапазона равна нулю (или настолько мала, что 1 / (max - min)
    не представим как конечный float), поэтому ни нормализация, ни шаг
    разметки не определены.
    """

    pass


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Проверка, что значение конечное.

    Raises:
        ValueError: Если значение NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} contains NaN/Inf: {value}")


def validate_range(min_value: float, max_value: float) -> None:
    """
    Проверка диапазона [min_value, max_value].

    Порядок границ не проверяется: min_value > max_value допустим
    (убывающая ориентация шкалы).

    Args:
        min_value: Нижняя граница
        max_value: Верхняя граница

    Raises:
        ValueError: Если любая из границ NaN/Inf
        DegenerateRangeError: Если min_value == max_value
    """
    validate_finite(min_value, "min_value")
    validate_finite(max_value, "max_value")

    if min_value == max_value:
        raise DegenerateRangeError(
            f"Degenerate range: min_value == max_value == {min_value!r}"
        )


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(15.0, 0.0, 10.0)
        10.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


def clamp_unit(value: float) -> float:
    """Ограничение значения отрезком [0, 1]."""
    return clamp(value, 0.0, 1.0)


def min_max(values: Iterable[float]) -> tuple[float, float]:
    """
    Минимум и максимум за один проход.

    Args:
        values: Последовательность чисел (непустая, без NaN/Inf)

    Returns:
        (min, max)

    Raises:
        ValueError: Если последовательность пуста или содержит NaN/Inf

    Examples:
        >>> min_max([3.0, -1.0, 7.5])
        (-1.0, 7.5)
    """
    lo = math.inf
    hi = -math.inf
    count = 0

    for value in values:
        validate_finite(value, f"values[{count}]")
        lo = min(lo, value)
        hi = max(hi, value)
        count += 1

    if count == 0:
        raise ValueError("min_max() requires at least one value")

    return lo, hi


def seq(start: float, end: float, length: int | None = None) -> list[float]:
    """
    Равномерная последовательность от start до end (включительно).

    Если end < start, последовательность убывающая. Если length не задан,
    используется ceil(|end - start|) + 1, что для целых границ даёт
    последовательность целых с шагом 1.

    Args:
        start: Начало последовательности
        end: Конец последовательности
        length: Количество элементов (optional, >= 1)

    Returns:
        Список из length значений

    Raises:
        ValueError: Если length < 1 или границы NaN/Inf

    Examples:
        >>> seq(0, 3)
        [0.0, 1.0, 2.0, 3.0]
        >>> seq(1, 0, 3)
        [1.0, 0.5, 0.0]
    """
    validate_finite(start, "start")
    validate_finite(end, "end")

    span = abs(end - start)
    if length is None:
        length = math.ceil(span) + 1

    if length < 1:
        raise ValueError(f"length must be >= 1, got {length}")

    if length == 1:
        return [float(start)]

    step = span / (length - 1)
    sign = 1.0 if end >= start else -1.0
    return [start + sign * step * i for i in range(length)]
