"""
Тесты для Numerical Safeguards

Проверяемые инварианты:
1. truncating_divmod: a == q * b + r, sign(r) == sign(a)
2. truncate_to_int усекает к нулю, не округляет
3. NaN/Inf не превращаются в число молча
"""

import pytest

from subunit_math.math.numerical_safeguards import (
    is_valid_float,
    truncate_to_int,
    truncating_divmod,
)


class TestTruncatingDivmod:
    """Тесты truncating_divmod"""

    def test_positive(self) -> None:
        """Положительные значения совпадают с divmod"""
        assert truncating_divmod(150, 100) == (1, 50)
        assert truncating_divmod(100, 100) == (1, 0)
        assert truncating_divmod(99, 100) == (0, 99)

    def test_negative_dividend(self) -> None:
        """Частное усекается к нулю, остаток получает знак делимого"""
        assert truncating_divmod(-150, 100) == (-1, -50)
        assert truncating_divmod(-50, 100) == (0, -50)
        assert truncating_divmod(-100, 100) == (-1, 0)

    def test_negative_divisor(self) -> None:
        """Отрицательный делитель"""
        assert truncating_divmod(150, -100) == (-1, 50)
        assert truncating_divmod(-150, -100) == (1, -50)

    def test_identity(self) -> None:
        """Инвариант: a == q * b + r, |r| < |b|"""
        for a in (-10**20 - 7, -12345, -1, 0, 1, 12345, 10**20 + 7):
            for b in (-100, -7, 3, 100, 100_000_000):
                q, r = truncating_divmod(a, b)
                assert q * b + r == a
                assert abs(r) < abs(b)
                assert r == 0 or (r < 0) == (a < 0)

    def test_zero_divisor(self) -> None:
        """Деление на ноль не маскируется"""
        with pytest.raises(ZeroDivisionError):
            truncating_divmod(1, 0)


class TestTruncateToInt:
    """Тесты truncate_to_int"""

    def test_truncation_toward_zero(self) -> None:
        """Дробная часть отбрасывается в сторону нуля"""
        assert truncate_to_int(9999.9999) == 9999
        assert truncate_to_int(-1.5) == -1
        assert truncate_to_int(0.999) == 0

    def test_large_value(self) -> None:
        """Результат произвольной точности"""
        assert truncate_to_int(1e30) == int(1e30)
        assert truncate_to_int(1e30) > 2**63

    def test_nan_inf_rejected(self) -> None:
        """NaN/Inf отвергаются"""
        for bad in (float("nan"), float("inf"), float("-inf")):
            with pytest.raises(ValueError, match="NaN/Inf"):
                truncate_to_int(bad)

    def test_is_valid_float(self) -> None:
        """Проверка finite"""
        assert is_valid_float(1.0) is True
        assert is_valid_float(float("nan")) is False
        assert is_valid_float(float("inf")) is False
