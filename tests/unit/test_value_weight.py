"""
Tests for ValueWeight Pydantic model

Покрывает:
- Приведение value/weight к Decimal
- Отклонение bool/NaN/Inf/неподдерживаемых типов
- Immutability (frozen=True)
- Построение из пары через from_pair
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.core.math.value_weight import ValueWeight


class TestValueWeightModel:
    """Тесты создания и валидации ValueWeight."""

    def test_coerces_to_decimal(self):
        """int/float/str приводятся к Decimal."""
        vw = ValueWeight(value=0.1, weight="2")
        assert vw.value == Decimal("0.1")
        assert vw.weight == Decimal("2")
        assert isinstance(vw.value, Decimal)

    def test_product(self):
        """product = value * weight."""
        assert ValueWeight(value=Decimal("1.5"), weight=4).product == Decimal("6.0")

    def test_negative_and_zero_weights_allowed(self):
        """Нулевые и отрицательные веса допустимы на уровне модели."""
        assert ValueWeight(value=1, weight=0).weight == 0
        assert ValueWeight(value=1, weight=-2).weight == -2

    def test_nan_rejected(self):
        """NaN → ValidationError."""
        with pytest.raises(ValidationError, match="finite"):
            ValueWeight(value=float("nan"), weight=1)

    def test_bool_rejected(self):
        """bool → ValidationError."""
        with pytest.raises(ValidationError, match="bool"):
            ValueWeight(value=1, weight=True)

    def test_unsupported_type_is_value_error(self):
        """Неподдерживаемый тип → ValidationError (подкласс ValueError)."""
        with pytest.raises(ValueError, match="weight must be Decimal"):
            ValueWeight(value=1, weight=[1])

    def test_missing_field(self):
        """Отсутствующее поле → ValidationError."""
        with pytest.raises(ValidationError):
            ValueWeight(value=1)

    def test_frozen(self):
        """Модель неизменяема."""
        vw = ValueWeight(value=1, weight=1)
        with pytest.raises(ValidationError):
            vw.value = Decimal(2)

    def test_equality_and_hash(self):
        """Одинаковые пары равны и хешируемы."""
        a = ValueWeight(value=1, weight=2)
        b = ValueWeight(value=Decimal("1"), weight=Decimal("2"))
        assert a == b
        assert hash(a) == hash(b)


class TestFromPair:
    """Тесты ValueWeight.from_pair."""

    def test_tuple(self):
        """Кортеж (value, weight)."""
        vw = ValueWeight.from_pair((10, 3))
        assert vw == ValueWeight(value=10, weight=3)

    def test_list_pair(self):
        """Список из двух элементов тоже пара."""
        assert ValueWeight.from_pair([Decimal("2.5"), 1]).value == Decimal("2.5")

    def test_model_returned_as_is(self):
        """ValueWeight возвращается без копирования."""
        vw = ValueWeight(value=1, weight=1)
        assert ValueWeight.from_pair(vw) is vw

    def test_wrong_length(self):
        """Не два элемента → ValueError."""
        with pytest.raises(ValueError, match="pair"):
            ValueWeight.from_pair((1,))

    def test_not_iterable(self):
        """Скаляр → ValueError."""
        with pytest.raises(ValueError, match="pair"):
            ValueWeight.from_pair(Decimal(1))
