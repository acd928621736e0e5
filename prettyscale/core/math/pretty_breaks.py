"""
Pretty Breaks — Human-Friendly Axis Tick Positions

Алгоритм выбирает "аккуратные" точки разметки (кратные 1, 2, 4, 5 или 10
× 10^k) для числового диапазона, по мотивам функции pretty() из base R.

АЛГОРИТМ:
    unit_gross = (max - min) / n
    base       = floor(log10(unit_gross))
    unit_neat  = 10^base × d, где d ∈ NEAT_UNITS ближе всего к unit_gross
                 (квадрат расстояния, первый минимум при равенстве)
    min_neat   = ceil(min / unit_neat) × unit_neat
    max_neat   = floor(max / unit_neat) × unit_neat
    new_n      = round((max_neat - min_neat) / unit_neat)
    breaks     = [min_neat + i × unit_neat for i in 0..new_n] + [max_neat]

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. n — ориентир, а не гарантия: длина результата = new_n + 2
2. Последнее значение (max_neat) добавляется всегда, даже если цикл уже
   выдал его: результат может заканчиваться дубликатом
3. Выбор шага детерминирован: строгое сравнение `<`, слева направо
4. min == max → DegenerateRangeError, n <= 0 → InvalidBreakCountError,
   max < min → RangeOrientationError
"""

import logging
import math
import numbers
from typing import Final, NamedTuple

from prettyscale.core.math.numerical_safeguards import (
    DegenerateRangeError,
    is_valid_float,
    validate_range,
)

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Допустимые множители шага (в порядке перебора)
NEAT_UNITS: Final[tuple[int, ...]] = (1, 2, 4, 5, 10)

# Желаемое количество интервалов по умолчанию
DEFAULT_BREAK_COUNT: Final[int] = 4


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidBreakCountError(ValueError):
    """Количество интервалов n не является положительным целым."""

    pass


class RangeOrientationError(ValueError):
    """
    Убывающий диапазон (max < min) для pretty_breaks.

    Разметка определена только для max >= min; вызывающий код должен
    передавать границы по возрастанию.
    """

    pass


# =============================================================================
# ТИПЫ
# =============================================================================


class NeatUnit(NamedTuple):
    """Шаг разметки вида multiplier × 10^exponent."""

    multiplier: int  # d ∈ NEAT_UNITS
    exponent: int  # порядок величины шага
    value: float  # 10^exponent × multiplier


# =============================================================================
# ВЫБОР ШАГА
# =============================================================================


def select_neat_unit(unit_gross: float) -> NeatUnit:
    """
    Выбор ближайшего к unit_gross "аккуратного" шага.

    Перебор NEAT_UNITS слева направо со строгим `<`: при точном равенстве
    расстояний побеждает первый найденный минимум (меньший множитель).

    Args:
        unit_gross: Грубая ширина одного интервала (конечная, > 0)

    Returns:
        NeatUnit с выбранным множителем

    Raises:
        ValueError: Если unit_gross не конечен или не положителен

    Examples:
        >>> select_neat_unit(2.5).value
        2.0
        >>> select_neat_unit(3.0).multiplier  # 2 и 4 равноудалены
        2
    """
    if not is_valid_float(unit_gross) or unit_gross <= 0:
        raise ValueError(f"unit_gross must be finite and positive, got {unit_gross}")

    base = math.floor(math.log10(unit_gross))
    magnitude = 10.0**base

    min_dist = math.inf
    neat_value = NEAT_UNITS[0]

    for candidate in NEAT_UNITS:
        dist = (candidate * magnitude - unit_gross) ** 2
        if dist < min_dist:
            min_dist = dist
            neat_value = candidate

    return NeatUnit(
        multiplier=neat_value,
        exponent=base,
        value=magnitude * neat_value,
    )


# =============================================================================
# PRETTY BREAKS
# =============================================================================


def _validate_break_count(n: int) -> int:
    # bool является Integral, но как количество интервалов не допустим
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidBreakCountError(
            f"n must be a positive integer, got {n!r} ({type(n).__name__})"
        )
    count = int(n)
    if count <= 0:
        raise InvalidBreakCountError(f"n must be a positive integer, got {count}")
    return count


def pretty_breaks(
    min_value: float,
    max_value: float,
    n: int = DEFAULT_BREAK_COUNT,
) -> list[float]:
    """
    "Аккуратные" точки разметки для диапазона [min_value, max_value].

    Границы разметки могут выходить за исходный диапазон не более чем на
    один шаг: все точки лежат в [min_value - unit_neat, max_value + unit_neat].
    Если шаг шире диапазона, цикл не выдаёт точек и остаётся только
    max_neat. Количество точек может отличаться от n.

    Args:
        min_value: Нижняя граница диапазона
        max_value: Верхняя граница диапазона
        n: Желаемое количество интервалов (ориентир, default: 4)

    Returns:
        Неубывающий список точек длиной new_n + 2; последний элемент
        всегда max_neat (возможен дубликат)

    Raises:
        ValueError: Если границы содержат NaN/Inf
        DegenerateRangeError: Если min_value == max_value
        RangeOrientationError: Если max_value < min_value
        InvalidBreakCountError: Если n не положительное целое

    Examples:
        >>> pretty_breaks(0, 10, 4)
        [0.0, 2.0, 4.0, 6.0, 8.0, 10.0, 10.0]
    """
    validate_range(min_value, max_value)
    n = _validate_break_count(n)

    if max_value < min_value:
        raise RangeOrientationError(
            f"pretty_breaks requires min_value <= max_value, "
            f"got [{min_value!r}, {max_value!r}]"
        )

    unit_gross = (max_value - min_value) / n
    unit = select_neat_unit(unit_gross)
    unit_neat = unit.value
    if unit_neat == 0.0:
        raise DegenerateRangeError(
            f"Range [{min_value!r}, {max_value!r}] is too narrow for a break step"
        )

    min_neat = math.ceil(min_value / unit_neat) * unit_neat
    max_neat = math.floor(max_value / unit_neat) * unit_neat

    # round half up
    new_n = math.floor((max_neat - min_neat) / unit_neat + 0.5)

    logger.debug(
        "pretty_breaks [%r, %r] n=%d: unit_gross=%r unit_neat=%r (%d×10^%d) new_n=%d",
        min_value,
        max_value,
        n,
        unit_gross,
        unit_neat,
        unit.multiplier,
        unit.exponent,
        new_n,
    )

    breaks = [min_neat + i * unit_neat for i in range(new_n + 1)]
    breaks.append(max_neat)

    return breaks
