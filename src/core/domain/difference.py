"""
Difference — Знаковая разница двух Decimalish значений

Результат сравнения двух опциональных значений для отображения изменений
(изменение цены, изменение баланса):
- sign ∈ {"", "+", "-"} и absolute_value: Decimal
- либо пустое состояние "не сравнимо" (печатается как "N/A")

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. sign == "" ⇒ absolute_value == Decimal.ZERO (операнды равны)
2. Экземпляры неизменяемы; mul возвращает новый Difference
3. INFINITY − INFINITY не определено → пустой Difference
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional

from pydantic import BaseModel, Field, InstanceOf, model_validator

from src.core.math.fixed_point import Decimal, Decimalish

# Представление пустого (несравнимого) Difference
NOT_AVAILABLE: Final[str] = "N/A"


# =============================================================================
# ENUMS
# =============================================================================


class Sign(str, Enum):
    """Знак разницы"""

    NONE = ""
    PLUS = "+"
    MINUS = "-"


# =============================================================================
# REPRESENTATION MODEL
# =============================================================================


class DifferenceRepresentation(BaseModel):
    """
    Непустое состояние Difference: знак и модуль разницы.

    Immutable модель (frozen=True).
    """

    sign: Sign = Field(..., description="Знак разницы ('', '+', '-')")
    absolute_value: InstanceOf[Decimal] = Field(..., description="Модуль разницы")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_zero_sign(self) -> "DifferenceRepresentation":
        """
        Пустой знак допустим только для нулевой разницы.
        """
        if self.sign is Sign.NONE and not self.absolute_value.is_zero:
            raise ValueError(
                f"empty sign requires zero absolute_value, got {self.absolute_value!r}"
            )
        return self


# =============================================================================
# DIFFERENCE
# =============================================================================


@dataclass(frozen=True)
class Difference:
    """
    Знаковая разница между двумя Decimalish.

    Создаётся через Difference.between; representation is None означает
    "не сравнимо".
    """

    representation: Optional[DifferenceRepresentation] = None

    @staticmethod
    def between(
        d1: Optional[Decimalish],
        d2: Optional[Decimalish],
    ) -> "Difference":
        """
        Разница d1 − d2.

        Args:
            d1: Уменьшаемое (None → "N/A")
            d2: Вычитаемое (None → "N/A")

        Returns:
            Difference со знаком "+" если d1 > d2, "-" если d1 < d2, "" если равны.
            Если ровно один операнд INFINITY, модулем служит сам INFINITY.

        Examples:
            >>> Difference.between(5, 3).prettify()
            '+2'
            >>> Difference.between(None, 5).to_string()
            'N/A'
        """
        if d1 is None or d2 is None:
            return Difference()

        d1 = Decimal.parse(d1)
        d2 = Decimal.parse(d2)

        if d1.infinite is not None and d2.infinite is not None:
            return Difference()
        elif d1.infinite is not None:
            return Difference(DifferenceRepresentation(sign=Sign.PLUS, absolute_value=d1))
        elif d2.infinite is not None:
            return Difference(DifferenceRepresentation(sign=Sign.MINUS, absolute_value=d2))
        elif d1.gt(d2):
            return Difference(
                DifferenceRepresentation(sign=Sign.PLUS, absolute_value=d1.sub(d2))
            )
        elif d2.gt(d1):
            return Difference(
                DifferenceRepresentation(sign=Sign.MINUS, absolute_value=d2.sub(d1))
            )
        else:
            return Difference(
                DifferenceRepresentation(sign=Sign.NONE, absolute_value=Decimal.ZERO)
            )

    def to_string(self, precision: Optional[int] = None) -> str:
        if self.representation is None:
            return NOT_AVAILABLE

        return self.representation.sign.value + self.representation.absolute_value.to_string(
            precision
        )

    def __str__(self) -> str:
        return self.to_string()

    def prettify(self, precision: Optional[int] = None) -> str:
        if self.representation is None:
            return NOT_AVAILABLE

        return self.representation.sign.value + self.representation.absolute_value.prettify(
            precision
        )

    def mul(self, multiplier: Decimalish) -> "Difference":
        """
        Масштабирование модуля с сохранением знака.

        Используется, например, чтобы перевести процентную разницу в сумму
        от principal. Пустой Difference остаётся пустым.
        Отрицательный множитель Decimal.parse приводит к ZERO, поэтому
        знак никогда не меняется: between(5, 3).mul(-1) печатается как "+0".
        """
        if self.representation is None:
            return Difference()

        return Difference(
            DifferenceRepresentation(
                sign=self.representation.sign,
                absolute_value=self.representation.absolute_value.mul(multiplier),
            )
        )

    # -------------------------------------------------------------------------
    # Аксессоры (filter-style: self или None)
    # -------------------------------------------------------------------------

    @property
    def sign(self) -> Optional[Sign]:
        if self.representation is None:
            return None
        return self.representation.sign

    @property
    def absolute_value(self) -> Optional[Decimal]:
        if self.representation is None:
            return None
        return self.representation.absolute_value

    @property
    def non_zero(self) -> Optional["Difference"]:
        if self.representation is None or self.representation.absolute_value.is_zero:
            return None
        return self

    @property
    def positive(self) -> Optional["Difference"]:
        return self if self.sign is Sign.PLUS else None

    @property
    def negative(self) -> Optional["Difference"]:
        return self if self.sign is Sign.MINUS else None

    @property
    def infinite(self) -> Optional["Difference"]:
        if self.representation is None or self.representation.absolute_value.infinite is None:
            return None
        return self

    @property
    def finite(self) -> Optional["Difference"]:
        if self.representation is None or self.representation.absolute_value.finite is None:
            return None
        return self
