"""
Core math modules для subunit-math

Конверсии subunits ↔ units и расчёт payout по spot price.
"""

# Numerical Safeguards
from subunit_math.math.numerical_safeguards import (
    is_valid_float,
    truncate_to_int,
    truncating_divmod,
)

# Decimal Strings
from subunit_math.math.decimal_strings import (
    DECIMAL_POINT,
    THOUSANDS_SEPARATOR,
    MalformedDecimal,
    strip_thousands_separators,
    subunits_to_units_string,
    units_string_to_subunits,
)

# Spot Price
from subunit_math.math.spot_price import (
    InvalidSpotPrice,
    calculate_payout_subunits,
    parse_spot_price,
    payout_from_payin_quoted_price,
    payout_from_payout_quoted_price,
    quote_payout,
)

__all__ = [
    # Numerical Safeguards
    "is_valid_float",
    "truncate_to_int",
    "truncating_divmod",
    # Decimal Strings — Constants
    "DECIMAL_POINT",
    "THOUSANDS_SEPARATOR",
    # Decimal Strings — Exceptions
    "MalformedDecimal",
    # Decimal Strings — Functions
    "strip_thousands_separators",
    "subunits_to_units_string",
    "units_string_to_subunits",
    # Spot Price — Exceptions
    "InvalidSpotPrice",
    # Spot Price — Functions
    "calculate_payout_subunits",
    "parse_spot_price",
    "payout_from_payin_quoted_price",
    "payout_from_payout_quoted_price",
    "quote_payout",
]
