"""
SpotPrice — Расчёт payout по spot price

Модуль вычисляет, сколько subunits payout валюты покупается за
payin_amount_subunits payin валюты при заданной spot price.

Spot price всегда означает "цена одной целой unit валюты A в units
валюты B" и направлена: A и B не взаимозаменяемы без инверсии.
Поддерживаются оба соглашения котирования:

- PAYIN_PER_PAYOUT: payin units за 1 payout unit
  (USD → BTC при 30,741.70 USD/BTC передаётся '30,741.70')
- PAYOUT_PER_PAYIN: payout units за 1 payin unit
  (USD → BTC при 0.0000325291 BTC/USD передаётся '0.0000325291')

ФОРМУЛЫ:
    PAYIN_PER_PAYOUT:
        payin_subunits_per_payout_unit = price * payin.subunits_per_unit
        payout_units = payin_amount_subunits / payin_subunits_per_payout_unit

    PAYOUT_PER_PAYIN:
        payout_units_per_payin_unit = payin.subunits_per_unit / price
        payout_units = payin_amount_subunits / payout_units_per_payin_unit

    payout_amount_subunits = trunc(payout_units * payout.subunits_per_unit)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Промежуточный курс считается в binary float, порядок операций фиксирован
2. Финальное приведение к int — усечение к нулю, НЕ округление
3. Результат — int произвольной точности
4. Ошибка валюты/цены → exception, частичных результатов нет
"""

import logging
import re
from typing import Callable, Final, Mapping

from subunit_math.contracts import validate_payout_quote
from subunit_math.domain.currency import CurrencyMetadata, lookup_currency
from subunit_math.domain.quote import PayoutQuote, SpotPriceDirection
from subunit_math.math.decimal_strings import (
    MalformedDecimal,
    strip_thousands_separators,
    subunits_to_units_string,
)
from subunit_math.math.numerical_safeguards import is_valid_float, truncate_to_int

logger = logging.getLogger(__name__)

# Десятичный литерал: знак, цифры с необязательной точкой, экспонента.
# nan/inf, подчёркивания и hex-литералы не допускаются.
_DECIMAL_LITERAL: Final[re.Pattern] = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidSpotPrice(MalformedDecimal):
    """
    Цена распарсилась, но курс непригоден для расчёта.

    Нулевая цена (деление на ноль) или переполнение до Inf.
    """


# =============================================================================
# ПАРСИНГ ЦЕНЫ
# =============================================================================


def parse_spot_price(price: str) -> float:
    """
    Парсинг spot price в float.

    Args:
        price: Десятичная строка, допускаются запятые ('30,741.70')

    Returns:
        Цена как float

    Raises:
        MalformedDecimal: Если строка не является десятичным числом
        InvalidSpotPrice: Если значение переполняется до Inf ('1e400')

    Examples:
        >>> parse_spot_price("30,741.70")
        30741.7
    """
    stripped = strip_thousands_separators(price)
    if not _DECIMAL_LITERAL.fullmatch(stripped):
        raise MalformedDecimal(f"Invalid spot price: {price!r}")

    value = float(stripped)
    if not is_valid_float(value):
        raise InvalidSpotPrice(f"Spot price overflows float: {price!r}")
    return value


def _resolve_pair(
    payin_currency: str, payout_currency: str
) -> tuple[CurrencyMetadata, CurrencyMetadata]:
    return lookup_currency(payin_currency), lookup_currency(payout_currency)


def _payout_subunits(
    payin_amount_subunits: int,
    rate: float,
    payout: CurrencyMetadata,
    price: str,
) -> int:
    if rate == 0.0 or not is_valid_float(rate):
        raise InvalidSpotPrice(f"Spot price {price!r} yields unusable rate")

    try:
        payout_units = payin_amount_subunits / rate
    except OverflowError as e:
        bits = payin_amount_subunits.bit_length()
        raise InvalidSpotPrice(f"Payin amount of {bits} bits is out of float range") from e

    try:
        return truncate_to_int(payout_units * payout.subunits_per_unit)
    except ValueError as e:
        raise InvalidSpotPrice(f"Spot price {price!r} yields non-finite payout") from e


# =============================================================================
# PAYOUT CALCULATION
# =============================================================================


def payout_from_payin_quoted_price(
    payin_currency: str,
    payout_currency: str,
    payin_amount_subunits: int,
    price: str,
) -> int:
    """
    Расчёт payout при цене, выраженной в payin валюте.

    Args:
        payin_currency: Код исходной валюты
        payout_currency: Код целевой валюты
        payin_amount_subunits: Сумма payin в subunits
        price: Цена 1 целой payout unit в payin units.
            Payin USD, payout BTC: '30,741.70' (USD/BTC).
            Payin BTC, payout USD: '0.0000325291' (BTC/USD).

    Returns:
        Количество payout subunits (усечение к нулю)

    Raises:
        UnknownCurrency: Если хотя бы один код валюты неизвестен
        MalformedDecimal: Если price не является числом
        InvalidSpotPrice: Если курс нулевой или переполняется

    Examples:
        >>> payout_from_payin_quoted_price("USD", "BTC", 10000, "30,741.70")
        325291
    """
    payin, payout = _resolve_pair(payin_currency, payout_currency)
    price_value = parse_spot_price(price)

    payin_subunits_per_payout_unit = price_value * payin.subunits_per_unit
    result = _payout_subunits(payin_amount_subunits, payin_subunits_per_payout_unit, payout, price)

    logger.debug(
        "payout %s->%s amount=%d price=%s (payin per payout) rate=%r result=%d",
        payin.code,
        payout.code,
        payin_amount_subunits,
        price,
        payin_subunits_per_payout_unit,
        result,
    )
    return result


def payout_from_payout_quoted_price(
    payin_currency: str,
    payout_currency: str,
    payin_amount_subunits: int,
    price: str,
) -> int:
    """
    Расчёт payout при цене, выраженной в payout валюте.

    Args:
        payin_currency: Код исходной валюты
        payout_currency: Код целевой валюты
        payin_amount_subunits: Сумма payin в subunits
        price: Цена 1 целой payin unit в payout units.
            Payin USD, payout BTC: '0.0000325291' (BTC/USD).
            Payin BTC, payout USD: '30,741.70' (USD/BTC).

    Returns:
        Количество payout subunits (усечение к нулю)

    Raises:
        UnknownCurrency: Если хотя бы один код валюты неизвестен
        MalformedDecimal: Если price не является числом
        InvalidSpotPrice: Если цена нулевая или курс переполняется

    Examples:
        >>> payout_from_payout_quoted_price("BTC", "USD", 325291, "30,741.70")
        9999
    """
    payin, payout = _resolve_pair(payin_currency, payout_currency)
    price_value = parse_spot_price(price)

    try:
        payout_units_per_payin_unit = payin.subunits_per_unit / price_value
    except ZeroDivisionError:
        raise InvalidSpotPrice(f"Spot price cannot be zero: {price!r}") from None

    result = _payout_subunits(payin_amount_subunits, payout_units_per_payin_unit, payout, price)

    logger.debug(
        "payout %s->%s amount=%d price=%s (payout per payin) rate=%r result=%d",
        payin.code,
        payout.code,
        payin_amount_subunits,
        price,
        payout_units_per_payin_unit,
        result,
    )
    return result


_CALCULATORS: Final[Mapping[SpotPriceDirection, Callable[[str, str, int, str], int]]] = {
    SpotPriceDirection.PAYIN_PER_PAYOUT: payout_from_payin_quoted_price,
    SpotPriceDirection.PAYOUT_PER_PAYIN: payout_from_payout_quoted_price,
}


def calculate_payout_subunits(
    direction: SpotPriceDirection,
    payin_currency: str,
    payout_currency: str,
    payin_amount_subunits: int,
    price: str,
) -> int:
    """
    Расчёт payout с выбором соглашения котирования.

    Args:
        direction: В какой валюте выражена price
        payin_currency: Код исходной валюты
        payout_currency: Код целевой валюты
        payin_amount_subunits: Сумма payin в subunits
        price: Spot price (десятичная строка)

    Returns:
        Количество payout subunits

    Raises:
        ValueError: Если direction не является SpotPriceDirection
    """
    calculator = _CALCULATORS[SpotPriceDirection(direction)]
    return calculator(payin_currency, payout_currency, payin_amount_subunits, price)


# =============================================================================
# QUOTE
# =============================================================================


def quote_payout(
    direction: SpotPriceDirection,
    payin_currency: str,
    payout_currency: str,
    payin_amount_subunits: int,
    price: str,
) -> PayoutQuote:
    """
    Расчёт payout с полной фиксацией входов и результата.

    Quote проверяется по контракту payout_quote до возврата.

    Returns:
        PayoutQuote с суммами в subunits и в строковых units

    Raises:
        UnknownCurrency, MalformedDecimal, InvalidSpotPrice: Как у расчёта payout
        ValidationError: Если quote нарушает контракт payout_quote
    """
    direction = SpotPriceDirection(direction)
    payout_amount_subunits = calculate_payout_subunits(
        direction, payin_currency, payout_currency, payin_amount_subunits, price
    )

    quote = PayoutQuote(
        payin_currency=payin_currency,
        payout_currency=payout_currency,
        spot_price=price,
        price_direction=direction,
        payin_amount_subunits=payin_amount_subunits,
        payout_amount_subunits=payout_amount_subunits,
        payin_amount_units=subunits_to_units_string(payin_amount_subunits, payin_currency),
        payout_amount_units=subunits_to_units_string(payout_amount_subunits, payout_currency),
    )
    validate_payout_quote(quote.model_dump(mode="json"))
    return quote
