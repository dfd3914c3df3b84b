"""
JSON Schema Contract Validators

Валидация JSON представления PayoutQuote (contracts/schema/payout_quote.json)
через jsonschema.

Схема не содержит списка валют: допустимые коды подставляются из
CURRENCY_REGISTRY при создании валидатора, реестр остаётся единственным
источником кодов.
"""

import copy
import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

from subunit_math.domain.currency import supported_currencies

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

# Поля payout_quote, значения которых обязаны быть кодами из реестра
CURRENCY_FIELDS: Final[tuple[str, ...]] = ("payin_currency", "payout_currency")


# =============================================================================
# SCHEMA LOADING
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Загрузка и meta-validation JSON Schema файла.

    Args:
        schema_name: Имя схемы без расширения (например, 'payout_quote')
        schema_dir: Каталог схем (по умолчанию schema/ рядом с модулем)

    Returns:
        Загруженная схема как dict (кэшируется, не изменять)

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной JSON Schema
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

    return schema


def bind_currency_registry(schema: Dict[str, Any]) -> Dict[str, Any]:
    """
    Копия схемы с enum кодов валют из реестра для CURRENCY_FIELDS.

    Args:
        schema: Исходная схема payout_quote

    Returns:
        Новая схема, исходная не изменяется
    """
    bound = copy.deepcopy(schema)
    codes = list(supported_currencies())
    for field in CURRENCY_FIELDS:
        bound["properties"][field]["enum"] = codes
    return bound


# =============================================================================
# PAYOUT QUOTE VALIDATOR
# =============================================================================


class PayoutQuoteValidator:
    """
    Валидатор JSON представления PayoutQuote.

    Схема связывается с реестром валют один раз, при создании.
    """

    def __init__(self):
        self.schema = bind_currency_registry(load_schema("payout_quote"))
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)


_PAYOUT_QUOTE_VALIDATOR = PayoutQuoteValidator()


def validate_payout_quote(data: Dict[str, Any]) -> None:
    """
    Валидация рассчитанной конверсии (model_dump(mode="json") от PayoutQuote).

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _PAYOUT_QUOTE_VALIDATOR.validate(data)
