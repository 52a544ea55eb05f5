"""
Sigmoid — Logistic Function & Fast S-Curve

Float-функции насыщения (IEEE double, без Decimal):
- sigmoid: логистическая функция 1 / (1 + e^-x), диапазон (0, 1)
- sigmoid_fast: дешёвая S-образная аппроксимация x / (1 + |x|), диапазон (-1, 1)

ВАЖНО: sigmoid_fast НЕ является логистической функцией. Она монотонна и
насыщается, но её диапазон (-1, 1), а sigmoid_fast(0) == 0, а не 0.5.
Вызывающий код не должен подставлять её вместо sigmoid без пересчёта.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. exp() никогда не переполняется (ветвление по знаку x)
2. sigmoid(-x) == 1 - sigmoid(x), sigmoid_fast(-x) == -sigmoid_fast(x)
3. NaN/Inf на входе → ValueError
"""

import math

from src.core.math.numerical_safeguards import validate_finite


def sigmoid(x: float) -> float:
    """
    Логистическая функция с численно устойчивым ветвлением.

    x >= 0: 1 / (1 + e^-x)     (e^-x <= 1)
    x <  0: e^x / (1 + e^x)    (e^x < 1, без переполнения e^-x)

    Args:
        x: Аргумент (конечный float)

    Returns:
        Значение в (0, 1); для очень больших |x| насыщается до 0.0 / 1.0

    Raises:
        ValueError: Если x NaN/Inf

    Examples:
        >>> sigmoid(0.0)
        0.5
    """
    x = validate_finite(x, "x")

    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))

    exp_x = math.exp(x)
    return exp_x / (1.0 + exp_x)


def sigmoid_fast(x: float) -> float:
    """
    Быстрая S-образная аппроксимация: x / (1 + |x|).

    Диапазон (-1, 1), нечётная функция. Не логистическая.

    Raises:
        ValueError: Если x NaN/Inf

    Examples:
        >>> sigmoid_fast(1.0)
        0.5
        >>> sigmoid_fast(-3.0)
        -0.75
    """
    x = validate_finite(x, "x")
    return x / (1.0 + abs(x))
