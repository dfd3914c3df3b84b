"""
subunit-math: точные конверсии subunits ↔ units и расчёт payout по spot price.

Pure computation: без I/O, без состояния, безопасно для многопоточного вызова.
"""

from subunit_math.contracts import validate_payout_quote
from subunit_math.domain import (
    CURRENCY_REGISTRY,
    CurrencyMetadata,
    PayoutQuote,
    SpotPriceDirection,
    UnknownCurrency,
    is_supported_currency,
    lookup_currency,
    supported_currencies,
)
from subunit_math.math import (
    InvalidSpotPrice,
    MalformedDecimal,
    calculate_payout_subunits,
    parse_spot_price,
    payout_from_payin_quoted_price,
    payout_from_payout_quoted_price,
    quote_payout,
    subunits_to_units_string,
    units_string_to_subunits,
)

__version__ = "0.1.0"

__all__ = [
    # Registry
    "CURRENCY_REGISTRY",
    "CurrencyMetadata",
    "UnknownCurrency",
    "lookup_currency",
    "is_supported_currency",
    "supported_currencies",
    # Parser/Formatter
    "MalformedDecimal",
    "subunits_to_units_string",
    "units_string_to_subunits",
    # Spot Price Converter
    "InvalidSpotPrice",
    "SpotPriceDirection",
    "PayoutQuote",
    "parse_spot_price",
    "payout_from_payin_quoted_price",
    "payout_from_payout_quoted_price",
    "calculate_payout_subunits",
    "quote_payout",
    # Contracts
    "validate_payout_quote",
]
