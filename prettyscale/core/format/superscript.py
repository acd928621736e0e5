"""
Superscript Formatter — Scientific Notation for Axis Labels

Преобразует число в научной нотации ("1.2e4") в компактную форму с
надстрочным показателем ("1.2×10⁴").

Таблица символов:
    '-' → '⁻', '+' → '' (положительный показатель без знака), '0'..'9' → '⁰'..'⁹'

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Таблица неизменяема (MappingProxyType)
2. Символ вне таблицы → MalformedScientificStringError (без молчаливого пропуска)
3. Отсутствие разделителя "e" → MalformedScientificStringError
"""

import math
from types import MappingProxyType
from typing import Final, Mapping

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

SUPERSCRIPT_DIGITS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "-": "⁻",
        "+": "",
        "0": "⁰",
        "1": "¹",
        "2": "²",
        "3": "³",
        "4": "⁴",
        "5": "⁵",
        "6": "⁶",
        "7": "⁷",
        "8": "⁸",
        "9": "⁹",
    }
)

# Обратная таблица ('+' не восстанавливается: он отображается в пустую строку)
SUPERSCRIPT_REVERSE: Final[Mapping[str, str]] = MappingProxyType(
    {sup: char for char, sup in SUPERSCRIPT_DIGITS.items() if sup}
)

# Разделитель мантиссы и показателя
EXPONENT_SEPARATOR: Final[str] = "e"

# Пороги переключения подписи на научную нотацию
SCIENTIFIC_UPPER_THRESHOLD: Final[float] = 1e6
SCIENTIFIC_LOWER_THRESHOLD: Final[float] = 1e-3

# Те же пороги как десятичные показатели округлённого значения
_SCIENTIFIC_UPPER_EXPONENT: Final[int] = round(math.log10(SCIENTIFIC_UPPER_THRESHOLD))
_SCIENTIFIC_LOWER_EXPONENT: Final[int] = round(math.log10(SCIENTIFIC_LOWER_THRESHOLD))

DEFAULT_SIGNIFICANT_DIGITS: Final[int] = 6


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MalformedScientificStringError(ValueError):
    """
    Строка не соответствует форме "<base>e<exponent>".

    Причины: нет разделителя "e" (или он не единственный), пустая мантисса,
    показатель без цифр или символ вне {-, +, 0-9} в показателе.
    """

    pass


# =============================================================================
# ПРЕОБРАЗОВАНИЕ СИМВОЛОВ
# =============================================================================


def to_superscript(exponent: str) -> str:
    """
    Посимвольное преобразование показателя в надстрочные символы.

    Args:
        exponent: Строка из символов {-, +, 0-9} (может быть пустой)

    Returns:
        Строка надстрочных символов; '+' опускается

    Raises:
        MalformedScientificStringError: Если встречен символ вне таблицы

    Examples:
        >>> to_superscript("-5")
        '⁻⁵'
        >>> to_superscript("+12")
        '¹²'
    """
    try:
        return "".join(SUPERSCRIPT_DIGITS[char] for char in exponent)
    except KeyError as e:
        raise MalformedScientificStringError(
            f"Unsupported exponent character {e.args[0]!r} in {exponent!r}"
        ) from None


def from_superscript(text: str) -> str:
    """
    Обратное преобразование надстрочных символов в обычные.

    Examples:
        >>> from_superscript("⁻⁵")
        '-5'
    """
    try:
        return "".join(SUPERSCRIPT_REVERSE[char] for char in text)
    except KeyError as e:
        raise MalformedScientificStringError(
            f"Unsupported superscript character {e.args[0]!r} in {text!r}"
        ) from None


# =============================================================================
# НАУЧНАЯ НОТАЦИЯ
# =============================================================================


def format_scientific_superscript(value: str) -> str:
    """
    Научная нотация → форма с надстрочным показателем.

    Args:
        value: Строка вида "<base>e<exponent>", например "1.2e4" или "3.4e-5"

    Returns:
        base + "×10" + надстрочный показатель, например "1.2×10⁴"

    Raises:
        MalformedScientificStringError: Если строка не в научной нотации

    Examples:
        >>> format_scientific_superscript("1.2e4")
        '1.2×10⁴'
        >>> format_scientific_superscript("3.4e-5")
        '3.4×10⁻⁵'
    """
    parts = value.split(EXPONENT_SEPARATOR)
    if len(parts) != 2:
        raise MalformedScientificStringError(
            f"Expected exactly one {EXPONENT_SEPARATOR!r} separator in {value!r}"
        )

    base, exponent = parts
    if not base:
        raise MalformedScientificStringError(f"Missing base in {value!r}")
    if not any(char.isdigit() for char in exponent):
        raise MalformedScientificStringError(f"Missing exponent digits in {value!r}")

    return base + "×10" + to_superscript(exponent)


def format_tick_label(
    value: float,
    significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS,
) -> str:
    """
    Подпись для точки разметки.

    Большие (>= 1e6) и малые (< 1e-3) по модулю значения выводятся в научной
    нотации с надстрочным показателем, остальные в общем формате. Порог
    сравнивается с показателем значения после округления до significant_digits
    цифр: 999999.9 → "1×10⁶". Научная нотация выбирается и тогда, когда
    целая часть не помещается в significant_digits цифр (12345 при трёх
    цифрах → "1.23×10⁴"), поэтому подпись никогда не содержит "e".
    Показатель нормализуется: "1e-05" → "1×10⁻⁵".

    Args:
        value: Значение точки разметки (конечное)
        significant_digits: Число значащих цифр (>= 1)

    Returns:
        Строка подписи

    Raises:
        ValueError: Если value NaN/Inf или significant_digits < 1

    Examples:
        >>> format_tick_label(2.5)
        '2.5'
        >>> format_tick_label(12000000.0)
        '1.2×10⁷'
    """
    if not math.isfinite(value):
        raise ValueError(f"value contains NaN/Inf: {value}")
    if significant_digits < 1:
        raise ValueError(f"significant_digits must be >= 1, got {significant_digits}")

    if value == 0:
        return "0"

    mantissa, exponent = f"{value:.{significant_digits - 1}e}".split(EXPONENT_SEPARATOR)
    rounded_exponent = int(exponent)

    if (
        _SCIENTIFIC_LOWER_EXPONENT <= rounded_exponent < _SCIENTIFIC_UPPER_EXPONENT
        and rounded_exponent < significant_digits
    ):
        label = f"{value:.{significant_digits}g}"
        if EXPONENT_SEPARATOR not in label:
            return label

    if "." in mantissa:
        mantissa = mantissa.rstrip("0").rstrip(".")

    return format_scientific_superscript(f"{mantissa}{EXPONENT_SEPARATOR}{rounded_exponent}")
