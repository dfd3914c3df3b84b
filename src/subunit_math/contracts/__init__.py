"""
Contract Validation Module

Модуль для валидации JSON контрактов subunit-math.
"""

from .validators import (
    CURRENCY_FIELDS,
    PayoutQuoteValidator,
    bind_currency_registry,
    load_schema,
    validate_payout_quote,
)

__all__ = [
    # Constants
    "CURRENCY_FIELDS",
    # Classes
    "PayoutQuoteValidator",
    # Functions
    "load_schema",
    "bind_currency_registry",
    "validate_payout_quote",
]
