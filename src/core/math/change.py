"""
Change — Relative Change & Clipped Linear Slope

Модуль содержит две Decimal-функции, которые никогда не делят на ноль:
- get_relative_change: final == 0 заменяется на RELATIVE_CHANGE_FINAL_FLOOR
- get_linear_slope_value: first == 0 или second == 0 → 0 без деления

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. get_relative_change не поднимает деление на ноль (подстановка 0.00001)
2. get_linear_slope_value никогда не возвращает отрицательное значение
3. Все операции выполняются в decimal_context()
"""

from decimal import Decimal

from src.core.math.numerical_safeguards import (
    RELATIVE_CHANGE_FINAL_FLOOR,
    DecimalLike,
    normalize_zero,
    policy_context,
    to_decimal,
)

# =============================================================================
# RELATIVE CHANGE
# =============================================================================


def get_relative_change(initial: DecimalLike, final: DecimalLike) -> Decimal:
    """
    Относительное изменение от initial к final.

    Формула: (final - initial) / final

    Если final == 0, вместо него подставляется RELATIVE_CHANGE_FINAL_FLOOR
    (0.00001). Это сознательное приближение, а не ветка ошибки: вблизи нуля
    результат искажается без исключения, и его модуль очень велик.

    Args:
        initial: Начальное значение
        final: Конечное значение

    Returns:
        Относительное изменение (доля final)

    Examples:
        >>> get_relative_change(50, 100)
        Decimal('0.5')
        >>> get_relative_change(5, 0)
        Decimal('-499999')
    """
    initial_d = to_decimal(initial, "initial")
    final_d = to_decimal(final, "final")

    if final_d == 0:
        final_d = RELATIVE_CHANGE_FINAL_FLOOR

    with policy_context():
        return (final_d - initial_d) / final_d


# =============================================================================
# LINEAR SLOPE
# =============================================================================


def get_linear_slope_value(
    first: DecimalLike,
    second: DecimalLike,
    point: DecimalLike,
) -> Decimal:
    """
    Значение убывающей прямой в точке point, ограниченное снизу нулём.

    Прямая проходит через (0, second) с наклоном -second/first:
        slope = second / first
        y_intercept = slope * first  (= second)
        result = max(y_intercept - slope * point, 0)

    Если first == 0 или second == 0, возвращается 0 без деления.

    Args:
        first: Точка, в которой прямая достигает нуля
        second: Значение прямой в нуле
        point: Точка вычисления

    Returns:
        Неотрицательное значение прямой

    Examples:
        >>> get_linear_slope_value(Decimal("0.50"), Decimal("0.25"), Decimal("0.40"))
        Decimal('0.050')
        >>> get_linear_slope_value(Decimal("0.50"), Decimal("0.25"), Decimal("0.60"))
        Decimal('0')
    """
    first_d = to_decimal(first, "first")
    second_d = to_decimal(second, "second")
    point_d = to_decimal(point, "point")

    if first_d == 0 or second_d == 0:
        return Decimal(0)

    with policy_context():
        slope = second_d / first_d
        y_intercept = slope * first_d
        result = y_intercept - slope * point_d

    if result < 0:
        return Decimal(0)

    return normalize_zero(result)
