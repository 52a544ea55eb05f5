"""
ValueWeight — Пара (значение, вес) для взвешенного среднего

Immutable Pydantic модель. Оба поля — Decimal; входы приводятся через
to_decimal, поэтому float 0.1 хранится как Decimal("0.1").
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from src.core.math.numerical_safeguards import to_decimal


class ValueWeight(BaseModel):
    """
    Значение и его вес.

    Порядок пар в последовательности не влияет на математический результат.
    """

    value: Decimal = Field(..., description="Значение")
    weight: Decimal = Field(..., description="Вес значения (может быть 0 или < 0)")

    model_config = {"frozen": True}

    @field_validator("value", "weight", mode="before")
    @classmethod
    def coerce_decimal(cls, v: Any, info: ValidationInfo) -> Decimal:
        """Приведение к конечному Decimal (bool/NaN/Inf запрещены)."""
        try:
            return to_decimal(v, info.field_name)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc

    @classmethod
    def from_pair(cls, item: Any) -> "ValueWeight":
        """
        Построение из ValueWeight или 2-элементной пары (value, weight).

        Raises:
            ValueError: Если item не пара из двух элементов или значения невалидны
        """
        if isinstance(item, cls):
            return item

        try:
            value, weight = item
        except (TypeError, ValueError) as exc:
            raise ValueError(
                f"Expected ValueWeight or (value, weight) pair, got {item!r}"
            ) from exc

        return cls(value=value, weight=weight)

    @property
    def product(self) -> Decimal:
        """value * weight."""
        return self.value * self.weight
