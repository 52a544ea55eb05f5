"""
Means — Arithmetic & Weighted Means in Decimal

Модуль вычисляет средние значения в высокоточной десятичной арифметике:
- Арифметическое среднее последовательности
- Взвешенное среднее двух значений
- Взвешенное среднее последовательности пар (value, weight)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустая последовательность → ровно Decimal(0) (определённый случай, не fallback)
2. Сумма весов == 0 → WeightSumZeroError (деление на ноль не маскируется)
3. round_digits округляет по ROUND_HALF_EVEN (см. numerical_safeguards)
4. Все операции выполняются в decimal_context(), независимо от контекста вызывающего

ФОРМУЛЫ:
    mean = Σ x_i / n
    weighted_mean = Σ (x_i * w_i) / Σ w_i
"""

from decimal import Decimal
from typing import Any, Iterable, Optional

from src.core.math.numerical_safeguards import (
    DecimalLike,
    policy_context,
    round_decimal,
    to_decimal,
    validate_round_digits,
)
from src.core.math.value_weight import ValueWeight

# =============================================================================
# EXCEPTIONS
# =============================================================================


class WeightSumZeroError(ZeroDivisionError):
    """
    Сумма весов равна нулю: взвешенное среднее не определено.

    Не обрабатывается внутри модуля, пробрасывается вызывающему.
    """

    pass


# =============================================================================
# HELPERS
# =============================================================================


def _finish(result: Decimal, round_digits: Optional[int]) -> Decimal:
    if round_digits is None:
        return result
    return round_decimal(result, round_digits)


def _divide_by_weight_sum(numerator: Decimal, weight_sum: Decimal) -> Decimal:
    if weight_sum == 0:
        raise WeightSumZeroError(
            f"Sum of weights is zero (numerator={numerator}): weighted mean is undefined"
        )
    return numerator / weight_sum


# =============================================================================
# ARITHMETIC MEAN
# =============================================================================


def get_mean(values: Iterable[DecimalLike]) -> Decimal:
    """
    Арифметическое среднее.

    Args:
        values: Последовательность чисел (Decimal, int, float, str)

    Returns:
        sum / count, либо Decimal(0) для пустой последовательности

    Raises:
        ValueError: Если values is None или содержит NaN/Inf

    Examples:
        >>> get_mean([10, 20])
        Decimal('15')
        >>> get_mean([])
        Decimal('0')
    """
    if values is None:
        raise ValueError("values must not be None")

    items = [to_decimal(v, "values[]") for v in values]
    if not items:
        return Decimal(0)

    with policy_context():
        return sum(items, Decimal(0)) / len(items)


# =============================================================================
# WEIGHTED MEAN
# =============================================================================


def get_weighted_mean(
    value_a: DecimalLike,
    weight_a: DecimalLike,
    value_b: DecimalLike,
    weight_b: DecimalLike,
    round_digits: Optional[int] = None,
) -> Decimal:
    """
    Взвешенное среднее двух значений.

    Формула: (value_a*weight_a + value_b*weight_b) / (weight_a + weight_b)

    Args:
        value_a: Первое значение
        weight_a: Вес первого значения
        value_b: Второе значение
        weight_b: Вес второго значения
        round_digits: Число знаков после запятой (None — без округления)

    Returns:
        Взвешенное среднее

    Raises:
        WeightSumZeroError: Если weight_a + weight_b == 0
        ValueError: Невалидные входы или round_digits

    Examples:
        >>> get_weighted_mean(100, 100, 10, 10, round_digits=2)
        Decimal('91.82')
    """
    if round_digits is not None:
        validate_round_digits(round_digits)

    a = to_decimal(value_a, "value_a")
    wa = to_decimal(weight_a, "weight_a")
    b = to_decimal(value_b, "value_b")
    wb = to_decimal(weight_b, "weight_b")

    with policy_context():
        numerator = a * wa + b * wb
        result = _divide_by_weight_sum(numerator, wa + wb)

    return _finish(result, round_digits)


def get_weighted_mean_of_pairs(
    value_weights: Iterable[Any],
    round_digits: Optional[int] = None,
) -> Decimal:
    """
    Взвешенное среднее последовательности пар.

    Элементы — ValueWeight или 2-элементные пары (value, weight).
    Итератор (в т.ч. генератор) потребляется один раз.

    Args:
        value_weights: Последовательность пар
        round_digits: Число знаков после запятой (None — без округления)

    Returns:
        Σ(value*weight) / Σweight, либо Decimal(0) для пустой последовательности

    Raises:
        ValueError: Если value_weights is None или элемент не является парой
        WeightSumZeroError: Если последовательность не пуста, а Σweight == 0
    """
    if value_weights is None:
        raise ValueError("value_weights must not be None")

    if round_digits is not None:
        validate_round_digits(round_digits)

    pairs = [ValueWeight.from_pair(item) for item in value_weights]
    if not pairs:
        return Decimal(0)

    with policy_context():
        numerator = sum((p.product for p in pairs), Decimal(0))
        weight_sum = sum((p.weight for p in pairs), Decimal(0))
        result = _divide_by_weight_sum(numerator, weight_sum)

    return _finish(result, round_digits)
