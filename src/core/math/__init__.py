"""
Core math modules

Чистые числовые хелперы: средние, относительное изменение, линейный наклон,
сигмоиды. Decimal-функции работают в едином decimal-контексте модуля
numerical_safeguards.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Decimal policy
    DECIMAL_PRECISION,
    DECIMAL_ROUNDING,
    MAX_ROUND_DIGITS,
    RELATIVE_CHANGE_FINAL_FLOOR,
    decimal_context,
    policy_context,
    # Coercion & validation
    is_valid_float,
    to_decimal,
    validate_finite,
    validate_round_digits,
    # Rounding
    normalize_zero,
    round_decimal,
    to_int,
)

# Value-weight pair
from src.core.math.value_weight import ValueWeight

# Means
from src.core.math.means import (
    WeightSumZeroError,
    get_mean,
    get_weighted_mean,
    get_weighted_mean_of_pairs,
)

# Change
from src.core.math.change import (
    get_linear_slope_value,
    get_relative_change,
)

# Sigmoid
from src.core.math.sigmoid import (
    sigmoid,
    sigmoid_fast,
)

__all__ = [
    # Numerical Safeguards — Decimal policy
    "DECIMAL_PRECISION",
    "DECIMAL_ROUNDING",
    "MAX_ROUND_DIGITS",
    "RELATIVE_CHANGE_FINAL_FLOOR",
    "decimal_context",
    "policy_context",
    # Numerical Safeguards — Coercion & validation
    "is_valid_float",
    "to_decimal",
    "validate_finite",
    "validate_round_digits",
    # Numerical Safeguards — Rounding
    "normalize_zero",
    "round_decimal",
    "to_int",
    # Types
    "ValueWeight",
    # Means — Exceptions
    "WeightSumZeroError",
    # Means — Functions
    "get_mean",
    "get_weighted_mean",
    "get_weighted_mean_of_pairs",
    # Change
    "get_linear_slope_value",
    "get_relative_change",
    # Sigmoid
    "sigmoid",
    "sigmoid_fast",
]
