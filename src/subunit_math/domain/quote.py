"""
PayoutQuote — Модель рассчитанной конверсии

Immutable Pydantic модель, фиксирующая одну конверсию payin → payout:
исходные данные (валюты, сумма, spot price и её направление) и результат
в subunits и в строковых units.
Полная совместимость с JSON Schema (contracts/schema/payout_quote.json).
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from subunit_math.domain.currency import UnknownCurrency, is_supported_currency


# =============================================================================
# ENUMS
# =============================================================================


class SpotPriceDirection(str, Enum):
    """
    Соглашение котирования spot price.

    PAYIN_PER_PAYOUT: payin units за 1 payout unit
    PAYOUT_PER_PAYIN: payout units за 1 payin unit
    """

    PAYIN_PER_PAYOUT = "payin_per_payout"
    PAYOUT_PER_PAYIN = "payout_per_payin"


# =============================================================================
# PAYOUT QUOTE MODEL
# =============================================================================


class PayoutQuote(BaseModel):
    """
    Результат конверсии по spot price.

    Immutable модель (frozen=True). Строковые units заполняются
    форматтером и согласованы с соответствующими subunits.
    """

    # Пара
    payin_currency: str = Field(..., min_length=1, description="Код исходной валюты")
    payout_currency: str = Field(..., min_length=1, description="Код целевой валюты")

    # Котировка
    spot_price: str = Field(..., min_length=1, description="Spot price как передана")
    price_direction: SpotPriceDirection = Field(
        ..., description="В какой валюте выражена spot price"
    )

    # Суммы
    payin_amount_subunits: int = Field(..., description="Сумма payin в subunits")
    payout_amount_subunits: int = Field(..., description="Сумма payout в subunits (усечение)")
    payin_amount_units: str = Field(..., description="Сумма payin в units")
    payout_amount_units: str = Field(..., description="Сумма payout в units")

    model_config = {"frozen": True}

    @field_validator("payin_currency", "payout_currency")
    @classmethod
    def validate_currency_supported(cls, v: str) -> str:
        """Код валюты обязан присутствовать в реестре."""
        if not is_supported_currency(v):
            raise ValueError(str(UnknownCurrency(v)))
        return v
