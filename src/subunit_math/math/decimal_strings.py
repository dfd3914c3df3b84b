"""
DecimalStrings — Конверсия subunits ↔ десятичная строка units

Модуль переводит целые суммы в subunits (центы, сатоши) в человекочитаемые
строки и обратно. Вся арифметика строковая/целочисленная, float не
используется.

ПРАВИЛА:
- Число дробных знаков фиксировано: significant_digits валюты
- Лишние дробные знаки УСЕКАЮТСЯ, а не округляются
- Недостающие дробные знаки дополняются нулями
- Запятые (разделители тысяч) удаляются перед парсингом

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Для n >= 0 без потери точности:
   units_string_to_subunits(subunits_to_units_string(n, c), c) == str(n)
2. Целая часть = частное с усечением к нулю (не floor)
3. Результат парсинга — строка целого числа произвольной величины
"""

import logging
import re
from typing import Final

from subunit_math.domain.currency import lookup_currency
from subunit_math.math.numerical_safeguards import truncating_divmod

logger = logging.getLogger(__name__)

THOUSANDS_SEPARATOR: Final[str] = ","
DECIMAL_POINT: Final[str] = "."

# Допустимая склейка major+minor: необязательный знак и хотя бы одна цифра
_INTEGER_LITERAL: Final[re.Pattern] = re.compile(r"[+-]?[0-9]+")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MalformedDecimal(ValueError):
    """Строка суммы или цены не является корректным десятичным числом."""


# =============================================================================
# HELPERS
# =============================================================================


def strip_thousands_separators(value: str) -> str:
    """Удаление разделителей тысяч: '30,741.70' → '30741.70'."""
    return value.replace(THOUSANDS_SEPARATOR, "")


def _fit_fraction(digits: str, width: int, pad_left: bool) -> str:
    if len(digits) > width:
        return digits[:width]
    if pad_left:
        return digits.rjust(width, "0")
    return digits.ljust(width, "0")


# =============================================================================
# SUBUNITS → UNITS
# =============================================================================


def subunits_to_units_string(amount_subunits: int, currency_code: str) -> str:
    """
    Конверсия: subunits → строка units с десятичной точкой.

    Алгоритм:
        whole, remainder = деление с усечением к нулю
        remainder == 0        → significant_digits нулей
        len(remainder) < sig  → дополнение нулями слева
        len(remainder) > sig  → усечение до первых sig символов

    ВАЖНО: для отрицательных сумм остаток сохраняет знак делимого и
    попадает в дробную часть со знаком: -150 USD → '-1.-5', -50 USD → '0.-5'.
    Поведение воспроизводится как есть.

    Args:
        amount_subunits: Сумма в subunits валюты
        currency_code: Код валюты

    Returns:
        Строка вида '<whole>.<fraction>'

    Raises:
        UnknownCurrency: Если код валюты неизвестен

    Examples:
        >>> subunits_to_units_string(12311, "USD")
        '123.11'
        >>> subunits_to_units_string(100000000, "BTC")
        '1.00000000'
    """
    currency = lookup_currency(currency_code)

    whole, remainder = truncating_divmod(amount_subunits, currency.subunits_per_unit)

    if remainder == 0:
        fraction = "0" * currency.significant_digits
    else:
        fraction = _fit_fraction(str(remainder), currency.significant_digits, pad_left=True)

    return f"{whole}{DECIMAL_POINT}{fraction}"


# =============================================================================
# UNITS → SUBUNITS
# =============================================================================


def units_string_to_subunits(amount_units: str, currency_code: str) -> str:
    """
    Конверсия: строка units → строка subunits.

    Алгоритм:
        1. Удаление запятых
        2. Разбиение по '.' на major и minor (minor пустой, если точки нет)
        3. minor дополняется нулями справа / усекается до significant_digits
        4. Пустой major ('.5') трактуется как '0'
        5. major + minor парсится как целое

    Args:
        amount_units: Сумма в units (например, '1,234.56')
        currency_code: Код валюты

    Returns:
        Количество subunits как строка десятичного целого

    Raises:
        UnknownCurrency: Если код валюты неизвестен
        MalformedDecimal: Если строка не является числом или содержит
            больше одной десятичной точки ('1.2.3')

    Examples:
        >>> units_string_to_subunits("0.0050637", "BTC")
        '506370'
        >>> units_string_to_subunits(".5", "USD")
        '50'
    """
    currency = lookup_currency(currency_code)

    stripped = strip_thousands_separators(amount_units)
    major, point, minor = stripped.partition(DECIMAL_POINT)
    if point and DECIMAL_POINT in minor:
        raise MalformedDecimal(f"Multiple decimal points in amount: {amount_units!r}")

    if len(minor) > currency.significant_digits:
        logger.warning(
            "Amount %r exceeds %d fractional digits for %s, extra digits truncated",
            amount_units,
            currency.significant_digits,
            currency.code,
        )
    minor = _fit_fraction(minor, currency.significant_digits, pad_left=False)

    if major == "":
        major = "0"

    digits = major + minor
    if not _INTEGER_LITERAL.fullmatch(digits):
        raise MalformedDecimal(f"Invalid amount for {currency.code}: {amount_units!r}")

    try:
        return str(int(digits))
    except ValueError as e:
        # int_max_str_digits
        raise MalformedDecimal(f"Amount too long for {currency.code}: {len(digits)} digits") from e
