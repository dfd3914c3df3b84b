"""
Numerical Safeguards — Целочисленные и float примитивы конверсий

Модуль обеспечивает предсказуемость арифметики subunits:
- Целочисленное деление с усечением к нулю (а не floor, как `//` в Python)
- Проверка float на NaN/Inf перед приведением к int
- Усечение float к int (floor toward zero) с явной ошибкой для NaN/Inf

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. truncating_divmod(a, b): a == q * b + r, |r| < |b|, sign(r) == sign(a)
2. truncate_to_int никогда не округляет: 9999.9999 → 9999, -1.5 → -1
3. NaN/Inf никогда не превращаются в число молча
"""

import math


# =============================================================================
# ЦЕЛОЧИСЛЕННОЕ ДЕЛЕНИЕ
# =============================================================================


def truncating_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    """
    Деление с усечением частного к нулю.

    Python `divmod` округляет частное вниз (floor), из-за чего остаток
    получает знак делителя. Здесь остаток получает знак делимого.

    Args:
        dividend: Делимое
        divisor: Делитель (не ноль)

    Returns:
        (quotient, remainder)

    Raises:
        ZeroDivisionError: Если divisor == 0

    Examples:
        >>> truncating_divmod(150, 100)
        (1, 50)
        >>> truncating_divmod(-150, 100)
        (-1, -50)
        >>> truncating_divmod(-50, 100)
        (0, -50)
    """
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, dividend - quotient * divisor


# =============================================================================
# FLOAT → INT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def truncate_to_int(value: float) -> int:
    """
    Усечение float к int в сторону нуля.

    Args:
        value: Конечное float значение

    Returns:
        Целая часть value (произвольной точности)

    Raises:
        ValueError: Если value содержит NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"Cannot truncate NaN/Inf to int: {value}")
    return int(value)
