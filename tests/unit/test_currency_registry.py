"""
Тесты для реестра валют

Проверяет:
1. Fixed-point параметры каждой валюты
2. Инвариант: subunits_per_unit > 0 и significant_digits > 0 для всех кодов
3. UnknownCurrency для неизвестных кодов
4. Immutability реестра и моделей (frozen=True)
"""

import pytest
from pydantic import ValidationError

from subunit_math.domain import (
    BTC_SIGNIFICANT_DIGITS,
    BTC_SUBUNITS_PER_UNIT,
    CURRENCY_REGISTRY,
    CurrencyMetadata,
    UnknownCurrency,
    is_supported_currency,
    lookup_currency,
    supported_currencies,
)


class TestLookupCurrency:
    """Тесты lookup_currency"""

    def test_btc(self) -> None:
        """BTC: 8 знаков, satoshi"""
        btc = lookup_currency("BTC")
        assert btc.code == "BTC"
        assert btc.subunits_per_unit == 100_000_000
        assert btc.significant_digits == 8
        assert btc.subunits_per_unit == BTC_SUBUNITS_PER_UNIT
        assert btc.significant_digits == BTC_SIGNIFICANT_DIGITS

    def test_two_digit_fiat(self) -> None:
        """USD, KES, MXN: 2 знака"""
        for code in ("USD", "KES", "MXN"):
            currency = lookup_currency(code)
            assert currency.subunits_per_unit == 100
            assert currency.significant_digits == 2

    def test_usdc(self) -> None:
        """USDC: 6 знаков"""
        usdc = lookup_currency("USDC")
        assert usdc.subunits_per_unit == 1_000_000
        assert usdc.significant_digits == 6

    def test_unknown_currency(self) -> None:
        """Неизвестный код → UnknownCurrency"""
        with pytest.raises(UnknownCurrency, match="ZZZ") as exc_info:
            lookup_currency("ZZZ")
        assert exc_info.value.code == "ZZZ"

    def test_unknown_currency_is_value_error(self) -> None:
        """UnknownCurrency ловится как ValueError"""
        with pytest.raises(ValueError):
            lookup_currency("")

    def test_lookup_is_case_sensitive(self) -> None:
        """Код сравнивается точно: 'btc' не найден"""
        with pytest.raises(UnknownCurrency):
            lookup_currency("btc")

    def test_same_instance_returned(self) -> None:
        """Повторный lookup возвращает тот же объект"""
        assert lookup_currency("USD") is lookup_currency("USD")


class TestRegistryInvariants:
    """Инварианты реестра"""

    def test_all_entries_positive(self) -> None:
        """Для всех кодов масштаб и точность положительны"""
        for code in supported_currencies():
            currency = lookup_currency(code)
            assert currency.subunits_per_unit > 0
            assert currency.significant_digits > 0

    def test_scale_matches_precision(self) -> None:
        """subunits_per_unit == 10 ** significant_digits для всех кодов"""
        for currency in CURRENCY_REGISTRY.values():
            assert currency.subunits_per_unit == 10**currency.significant_digits

    def test_keys_match_codes(self) -> None:
        """Ключ реестра совпадает с code записи"""
        for code, currency in CURRENCY_REGISTRY.items():
            assert code == currency.code

    def test_supported_currencies_sorted(self) -> None:
        """Список кодов отсортирован и полон"""
        assert supported_currencies() == ("BTC", "KES", "MXN", "USD", "USDC")

    def test_is_supported_currency(self) -> None:
        """Проверка кода без exception"""
        assert is_supported_currency("KES") is True
        assert is_supported_currency("ZZZ") is False
        assert is_supported_currency(["USD"]) is False  # type: ignore[arg-type]

    def test_registry_read_only(self) -> None:
        """Реестр нельзя изменить во время работы"""
        with pytest.raises(TypeError):
            CURRENCY_REGISTRY["ZZZ"] = lookup_currency("USD")  # type: ignore[index]


class TestCurrencyMetadataModel:
    """Тесты модели CurrencyMetadata"""

    def test_metadata_immutable(self) -> None:
        """CurrencyMetadata должна быть immutable (frozen=True)"""
        btc = lookup_currency("BTC")
        with pytest.raises(ValidationError):
            btc.subunits_per_unit = 1  # type: ignore

    def test_zero_scale_rejected(self) -> None:
        """subunits_per_unit = 0 невалиден"""
        with pytest.raises(ValidationError):
            CurrencyMetadata(code="XXX", subunits_per_unit=0, significant_digits=2)

    def test_negative_digits_rejected(self) -> None:
        """significant_digits < 0 невалиден"""
        with pytest.raises(ValidationError):
            CurrencyMetadata(code="XXX", subunits_per_unit=100, significant_digits=-2)

    def test_lowercase_code_rejected(self) -> None:
        """Код валюты — только заглавные буквы"""
        with pytest.raises(ValidationError):
            CurrencyMetadata(code="usd", subunits_per_unit=100, significant_digits=2)
