"""
Numerical Safeguards — Decimal Policy & Input Guards

Модуль задаёт единую политику десятичной арифметики для всех числовых хелперов:
- Фиксированный decimal-контекст (точность, режим округления, ловушки)
- Приведение входов к Decimal без ошибок двоичного представления float
- Валидация float (NaN/Inf) для функций, работающих в IEEE double
- Округление до N знаков и до целого по единому правилу

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат не зависит от thread-local decimal-контекста вызывающего кода
2. Единственный режим округления — ROUND_HALF_EVEN (банковское)
3. NaN/Inf никогда не попадают в вычисления (ValueError на входе)
4. Все операции детерминированы и воспроизводимы
"""

import math
from decimal import (
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    localcontext,
)
from typing import ContextManager, Final, Union

# =============================================================================
# DECIMAL-ПОЛИТИКА
# =============================================================================

# Число значащих цифр (порядок 128-битного decimal)
DECIMAL_PRECISION: Final[int] = 28

# Режим округления для промежуточных результатов и round_digits.
# Совпадает с режимом по умолчанию модуля decimal.
DECIMAL_ROUNDING: Final[str] = ROUND_HALF_EVEN

# Максимально допустимое число знаков после запятой для round_decimal
MAX_ROUND_DIGITS: Final[int] = 28

# Подстановка вместо final == 0 в relative change
RELATIVE_CHANGE_FINAL_FLOOR: Final[Decimal] = Decimal("0.00001")

DecimalLike = Union[Decimal, int, float, str]


def decimal_context() -> Context:
    """
    Новый decimal-контекст по политике модуля.

    Ловушки DivisionByZero / InvalidOperation / Overflow включены,
    поэтому деление на ноль всегда поднимает исключение, а не Infinity.
    """
    return Context(
        prec=DECIMAL_PRECISION,
        rounding=DECIMAL_ROUNDING,
        traps=[DivisionByZero, InvalidOperation, Overflow],
    )


def policy_context() -> ContextManager[Context]:
    """Context manager: локальная копия decimal_context() на время вычисления."""
    return localcontext(decimal_context())


# =============================================================================
# ПРИВЕДЕНИЕ К DECIMAL
# =============================================================================


def to_decimal(value: DecimalLike, name: str = "value") -> Decimal:
    """
    Приведение числа к Decimal.

    float конвертируется через кратчайший repr, поэтому 0.1 → Decimal("0.1"),
    а не Decimal(0.1000000000000000055511151231257827...).

    Args:
        value: Decimal, int, float или строка с числом
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Конечное Decimal значение

    Raises:
        ValueError: bool, NaN/Inf или невалидная строка
        TypeError: неподдерживаемый тип

    Examples:
        >>> to_decimal(0.1)
        Decimal('0.1')
        >>> to_decimal("2.50")
        Decimal('2.50')
    """
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got bool {value}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        if not is_valid_float(value):
            raise ValueError(f"{name} must be finite (not NaN/Inf), got {value}")
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as exc:
            raise ValueError(f"{name} is not a valid decimal string: {value!r}") from exc
    else:
        raise TypeError(
            f"{name} must be Decimal, int, float or str, got {type(value).__name__}"
        )

    if not result.is_finite():
        raise ValueError(f"{name} must be finite (not NaN/Inf), got {result}")

    return result


# =============================================================================
# ВАЛИДАЦИЯ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """True если значение конечное (не NaN, не Inf)."""
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> float:
    """
    Валидация, что float конечный.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как float

    Raises:
        ValueError: Если value NaN/Inf или bool
        TypeError: Если value не int, float или Decimal
    """
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got bool {value}")

    if not isinstance(value, (int, float, Decimal)):
        raise TypeError(
            f"{name} must be int, float or Decimal, got {type(value).__name__}"
        )

    value = float(value)
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    return value


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def validate_round_digits(digits: int) -> None:
    """
    Валидация числа знаков для округления.

    Raises:
        ValueError: Если digits не int или вне [0, MAX_ROUND_DIGITS]
    """
    if isinstance(digits, bool) or not isinstance(digits, int):
        raise ValueError(f"round_digits must be an int, got {digits!r}")

    if digits < 0 or digits > MAX_ROUND_DIGITS:
        raise ValueError(
            f"round_digits must be in [0, {MAX_ROUND_DIGITS}], got {digits}"
        )


def round_decimal(value: Decimal, digits: int) -> Decimal:
    """
    Округление до digits знаков после запятой.

    Режим: ROUND_HALF_EVEN (банковское округление), т.е. ровно половина
    округляется к ближайшей чётной цифре.

    Точность контекста расширяется под результат, поэтому digits до
    MAX_ROUND_DIGITS допустим для значения любой величины.

    Examples:
        >>> round_decimal(Decimal("2.345"), 2)
        Decimal('2.34')
        >>> round_decimal(Decimal("2.355"), 2)
        Decimal('2.36')
        >>> round_decimal(Decimal("91.8181"), 0)
        Decimal('92')
    """
    validate_round_digits(digits)

    # Результат содержит adjusted() + 1 + digits значащих цифр
    context = decimal_context()
    context.prec = max(DECIMAL_PRECISION, value.adjusted() + digits + 2)

    exponent = Decimal(1).scaleb(-digits, context=context)
    return value.quantize(exponent, rounding=DECIMAL_ROUNDING, context=context)


def to_int(value: Decimal) -> int:
    """
    Конверсия Decimal в ближайший int (ROUND_HALF_EVEN).

    Examples:
        >>> to_int(Decimal("91.818"))
        92
        >>> to_int(Decimal("2.5"))
        2
    """
    return int(round_decimal(value, 0))


def normalize_zero(value: Decimal) -> Decimal:
    """Замена отрицательного нуля (-0, -0.00) на положительный с той же экспонентой."""
    if value.is_zero() and value.is_signed():
        return value.copy_abs()
    return value
