"""
Domain models and value objects.

Contains the currency registry and the payout quote model.
"""

from subunit_math.domain.currency import (
    BTC_SIGNIFICANT_DIGITS,
    BTC_SUBUNITS_PER_UNIT,
    CURRENCY_REGISTRY,
    KES_SIGNIFICANT_DIGITS,
    KES_SUBUNITS_PER_UNIT,
    MXN_SIGNIFICANT_DIGITS,
    MXN_SUBUNITS_PER_UNIT,
    USD_SIGNIFICANT_DIGITS,
    USD_SUBUNITS_PER_UNIT,
    USDC_SIGNIFICANT_DIGITS,
    USDC_SUBUNITS_PER_UNIT,
    CurrencyMetadata,
    UnknownCurrency,
    is_supported_currency,
    lookup_currency,
    supported_currencies,
)
from subunit_math.domain.quote import PayoutQuote, SpotPriceDirection

__all__ = [
    # Currency registry — constants
    "BTC_SUBUNITS_PER_UNIT",
    "BTC_SIGNIFICANT_DIGITS",
    "USD_SUBUNITS_PER_UNIT",
    "USD_SIGNIFICANT_DIGITS",
    "KES_SUBUNITS_PER_UNIT",
    "KES_SIGNIFICANT_DIGITS",
    "MXN_SUBUNITS_PER_UNIT",
    "MXN_SIGNIFICANT_DIGITS",
    "USDC_SUBUNITS_PER_UNIT",
    "USDC_SIGNIFICANT_DIGITS",
    "CURRENCY_REGISTRY",
    # Currency registry
    "CurrencyMetadata",
    "UnknownCurrency",
    "lookup_currency",
    "is_supported_currency",
    "supported_currencies",
    # Payout quote model
    "PayoutQuote",
    "SpotPriceDirection",
]
