"""
CurrencyRegistry — Реестр валют и их fixed-point параметров

Единственный допустимый источник сведений о валюте:
- subunits_per_unit (сколько subunits в одной unit: центы, сатоши)
- significant_digits (сколько дробных знаков при форматировании/парсинге)

Набор валют закрыт: реестр — статический read-only mapping, а не цепочка
условий. Неизвестный код → UnknownCurrency. Это единственная проверка
идентичности валюты во всей библиотеке.

ЗАПРЕЩЕНО хардкодить масштаб валюты вне этого модуля.
"""

from types import MappingProxyType
from typing import Final, Mapping

from pydantic import BaseModel, Field


# =============================================================================
# FIXED-POINT ПАРАМЕТРЫ ВАЛЮТ
# =============================================================================
# BTC: 1 BTC = 100_000_000 satoshi
BTC_SUBUNITS_PER_UNIT: Final[int] = 100_000_000
BTC_SIGNIFICANT_DIGITS: Final[int] = 8

# USD: 1 USD = 100 cents
USD_SUBUNITS_PER_UNIT: Final[int] = 100
USD_SIGNIFICANT_DIGITS: Final[int] = 2

# KES: 1 KES = 100 cents
KES_SUBUNITS_PER_UNIT: Final[int] = 100
KES_SIGNIFICANT_DIGITS: Final[int] = 2

# MXN: 1 MXN = 100 centavos
MXN_SUBUNITS_PER_UNIT: Final[int] = 100
MXN_SIGNIFICANT_DIGITS: Final[int] = 2

# USDC: 6 знаков on-chain
USDC_SUBUNITS_PER_UNIT: Final[int] = 1_000_000
USDC_SIGNIFICANT_DIGITS: Final[int] = 6


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnknownCurrency(ValueError):
    """
    Код валюты отсутствует в реестре.

    Пробрасывается всеми конвертерами без частичных вычислений.
    """

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unknown currency: {code!r}")


# =============================================================================
# CURRENCY METADATA MODEL
# =============================================================================


class CurrencyMetadata(BaseModel):
    """
    Fixed-point параметры одной валюты.

    Immutable модель (frozen=True). Экземпляры создаются только при
    импорте модуля и никогда не изменяются.
    """

    code: str = Field(..., pattern="^[A-Z]{3,5}$", description="Код валюты (например, 'BTC')")
    subunits_per_unit: int = Field(
        ..., gt=0, description="Количество subunits в одной unit (масштаб)"
    )
    significant_digits: int = Field(
        ..., gt=0, description="Дробные знаки при форматировании и парсинге"
    )

    model_config = {"frozen": True}


# =============================================================================
# РЕЕСТР
# =============================================================================


def _build_registry(*entries: CurrencyMetadata) -> Mapping[str, CurrencyMetadata]:
    return MappingProxyType({entry.code: entry for entry in entries})


CURRENCY_REGISTRY: Final[Mapping[str, CurrencyMetadata]] = _build_registry(
    CurrencyMetadata(
        code="BTC",
        subunits_per_unit=BTC_SUBUNITS_PER_UNIT,
        significant_digits=BTC_SIGNIFICANT_DIGITS,
    ),
    CurrencyMetadata(
        code="USD",
        subunits_per_unit=USD_SUBUNITS_PER_UNIT,
        significant_digits=USD_SIGNIFICANT_DIGITS,
    ),
    CurrencyMetadata(
        code="KES",
        subunits_per_unit=KES_SUBUNITS_PER_UNIT,
        significant_digits=KES_SIGNIFICANT_DIGITS,
    ),
    CurrencyMetadata(
        code="MXN",
        subunits_per_unit=MXN_SUBUNITS_PER_UNIT,
        significant_digits=MXN_SIGNIFICANT_DIGITS,
    ),
    CurrencyMetadata(
        code="USDC",
        subunits_per_unit=USDC_SUBUNITS_PER_UNIT,
        significant_digits=USDC_SIGNIFICANT_DIGITS,
    ),
)


# =============================================================================
# LOOKUP
# =============================================================================


def lookup_currency(code: str) -> CurrencyMetadata:
    """
    Получение fixed-point параметров валюты.

    Сравнение кода точное (регистр учитывается): 'btc' не равно 'BTC'.

    Args:
        code: Код валюты (например, 'USD')

    Returns:
        CurrencyMetadata для кода

    Raises:
        UnknownCurrency: Если кода нет в реестре

    Examples:
        >>> lookup_currency("BTC").subunits_per_unit
        100000000
        >>> lookup_currency("ZZZ")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        UnknownCurrency: Unknown currency: 'ZZZ'
    """
    try:
        return CURRENCY_REGISTRY[code]
    except (KeyError, TypeError):
        raise UnknownCurrency(code) from None


def is_supported_currency(code: str) -> bool:
    """Проверка наличия кода в реестре без exception."""
    try:
        return code in CURRENCY_REGISTRY
    except TypeError:
        return False


def supported_currencies() -> tuple[str, ...]:
    """Отсортированный список поддерживаемых кодов."""
    return tuple(sorted(CURRENCY_REGISTRY))
