"""
Fixed-Point Decimal — точная десятичная арифметика с 18 дробными знаками

Модуль реализует value type Decimal, через который проходят все балансы,
цены, комиссии и DAO-голосования приложения:
- Разбор строк/чисел (Decimal.parse) без исключений: невалидный ввод → ZERO + лог
- Печать: автоматическая точность, фиксированная точность, группировка разрядов,
  "умная" точность, денежная точность, сокращение K/M/B/T
- Арифметика: add/sub точные, mul/div с усечением, pow с округлением
- Деление на ноль → INFINITY (sentinel = MAX_UINT_256 как масштабированное целое)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. scaled_value всегда равен real_value × 10^18
2. Экземпляры неизменяемы: каждая операция возвращает новый Decimal
3. Decimal.parse никогда не бросает исключений
4. div / div_ceil / mul_div никогда не бросают при делении на ноль
5. pow — единственная арифметическая операция, бросающая ValueError

АСИММЕТРИЯ ОКРУГЛЕНИЯ:
    mul усекает: (x × y) / 10^18
    pow округляет на каждом шаге: (x × y + 0.5 × 10^18) / 10^18
"""

import decimal
import logging
import re
from dataclasses import dataclass
from typing import ClassVar, Final, Optional, Union

from src.core.math.scaled_integer import (
    DIGITS,
    MAX_UINT_256,
    PRECISION,
    div_ceil,
    div_trunc,
    get_digits,
    int_to_decimal_string,
    parse_big_number,
    rounded_mul,
    to_hex_string,
    validate_exponent,
    validate_non_negative_int,
)

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ФОРМАТИРОВАНИЯ
# =============================================================================

# Символ бесконечности (печатается любым строковым методом для INFINITY)
INFINITY_SYMBOL: Final[str] = "∞"

# Разделитель групп разрядов целой части
THOUSANDS_SEPARATOR: Final[str] = ","

# Суффиксы порядков для shorten(): 10^0, 10^3, 10^6, 10^9, 10^12
MAGNITUDES: Final[tuple[str, ...]] = ("", "K", "M", "B", "T")

# Значащих цифр после первой ненулевой при автоматической точности
AUTO_SIGNIFICANT_DIGITS: Final[int] = 3

# smart_prettify: знаков после запятой для значений < 1
SMART_PRECISION_BELOW_ONE: Final[int] = 8

# money_prettify: знаков после запятой для значений >= 1
MONEY_PRECISION: Final[int] = 2

# money_prettify: дополнительные знаки для значений < 1
MONEY_EXTRA_DIGITS_BELOW_ONE: Final[int] = 2


# =============================================================================
# ГРАНИЦЫ РАЗБОРА
# =============================================================================

# Максимальная длина строкового представления для Decimal.parse.
# Не больше CONVERSION_CHUNK_DIGITS: каждый int() при разборе укладывается
# в sys.get_int_max_str_digits
MAX_REPRESENTATION_LENGTH: Final[int] = 512

# Максимальный модуль показателя в экспоненциальной записи ("1e512")
MAX_EXPONENT_MAGNITUDE: Final[int] = 512

# Целые с модулем от 10^MAX_REPRESENTATION_LENGTH отклоняются до вызова str()
_NATIVE_INT_LIMIT: Final[int] = 10**MAX_REPRESENTATION_LENGTH


# =============================================================================
# РАЗБОР
# =============================================================================

# Целая часть, дробная часть, экспонента (сравнение без учёта регистра)
_STRING_REPRESENTATION_FORMAT = re.compile(r"[0-9]*(\.[0-9]*)?(e[-+]?[0-9]+)?")

# Вставка разделителя перед каждой группой из 3 цифр справа
_THOUSANDS_GROUPING = re.compile(r"(\d)(?=(\d{3})+(?!\d))")

# Нативные числа, которые печатаются через str() и разбираются как строка
_NATIVE_NUMBERS: Final[tuple[type, ...]] = (int, float, decimal.Decimal)


def _group_thousands(characteristic: str) -> str:
    return _THOUSANDS_GROUPING.sub(r"\1" + THOUSANDS_SEPARATOR, characteristic)


def _pad_mantissa(mantissa: int) -> str:
    return str(mantissa).zfill(PRECISION)


def _is_native_number(value: object) -> bool:
    # bool — подкласс int, но числом не считается
    return isinstance(value, _NATIVE_NUMBERS) and not isinstance(value, bool)


def _is_decimalish(value: object) -> bool:
    return isinstance(value, (Decimal, str)) or _is_native_number(value)


# =============================================================================
# DECIMAL
# =============================================================================


@dataclass(frozen=True, order=True, repr=False)
class Decimal:
    """
    Fixed-point десятичное число с 18 знаками после запятой.

    Единственное поле scaled_value — целое, равное real_value × 10^18.
    Конструктор принимает уже масштабированное значение; для разбора
    пользовательского ввода используйте Decimal.parse.

    Операторы ==, <, <=, >, >= и hash сравнивают scaled_value двух Decimal.
    Методы lt/eq/gt/gte/lte принимают любой Decimalish.
    """

    scaled_value: int

    ZERO: ClassVar["Decimal"]
    ONE: ClassVar["Decimal"]
    HALF: ClassVar["Decimal"]
    INFINITY: ClassVar["Decimal"]

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @staticmethod
    def from_big_number_string(big_number_string: Union[str, int]) -> "Decimal":
        """
        Создание Decimal из уже масштабированного целого без десятичного разбора.

        Args:
            big_number_string: Десятичная или 0x-hex строка (или int)

        Returns:
            Decimal с scaled_value == big_number_string

        Raises:
            ValueError: Если значение не является целым
        """
        return Decimal(parse_big_number(big_number_string))

    @staticmethod
    def _from_string(representation: str) -> "Decimal":
        if len(representation) > MAX_REPRESENTATION_LENGTH:
            logger.warning(
                "Decimal string representation too long: %d characters (max %d)",
                len(representation),
                MAX_REPRESENTATION_LENGTH,
            )
            return Decimal.ZERO

        text = representation.lower()

        if not text or not _STRING_REPRESENTATION_FORMAT.fullmatch(text):
            if representation:
                logger.warning("invalid Decimal string representation: %r", representation)
            else:
                logger.debug("empty Decimal string representation, using ZERO")
            return Decimal.ZERO

        if "e" in text:
            coefficient, exponent = text.split("e")
            power = int(exponent)

            if abs(power) > MAX_EXPONENT_MAGNITUDE:
                logger.warning(
                    "Decimal exponent out of range: %r (max magnitude %d)",
                    representation,
                    MAX_EXPONENT_MAGNITUDE,
                )
                return Decimal.ZERO

            scaled_coefficient = Decimal._from_string(coefficient).scaled_value

            if power < 0:
                return Decimal(div_trunc(scaled_coefficient, get_digits(-power)))

            return Decimal(scaled_coefficient * get_digits(power))

        if "." not in text:
            return Decimal(int(text) * DIGITS)

        characteristic, mantissa = text.split(".")
        mantissa = mantissa[:PRECISION].ljust(PRECISION, "0")

        return Decimal(int(characteristic or 0) * DIGITS + int(mantissa))

    @staticmethod
    def parse(decimalish: "Decimalish") -> "Decimal":
        """
        Приведение Decimalish к Decimal.

        Единственная граница разбора всего движка. Никогда не бросает:
        невалидный ввод даёт Decimal.ZERO и запись в лог.

        Args:
            decimalish: Decimal (возвращается как есть), int/float/decimal.Decimal
                (печатается через str) или строка вида "123", "0.5", "1.5e-7"

        Returns:
            Decimal

        Examples:
            >>> Decimal.parse("0.1").add("0.2").to_string()
            '0.3'
            >>> Decimal.parse("abc").is_zero
            True
        """
        if isinstance(decimalish, Decimal):
            return decimalish

        if isinstance(decimalish, str):
            return Decimal._from_string(decimalish)

        if _is_native_number(decimalish):
            if isinstance(decimalish, int) and abs(decimalish) >= _NATIVE_INT_LIMIT:
                logger.warning(
                    "integer out of Decimal range: %d bits", decimalish.bit_length()
                )
                return Decimal.ZERO
            return Decimal._from_string(str(decimalish))

        logger.error("invalid Decimalish value: %r", decimalish)
        return Decimal.ZERO

    # -------------------------------------------------------------------------
    # Raw accessors
    # -------------------------------------------------------------------------

    @property
    def hex(self) -> str:
        """Hex-строка масштабированного целого."""
        return to_hex_string(self.scaled_value)

    @property
    def big_number(self) -> str:
        """Десятичная строка масштабированного целого."""
        return int_to_decimal_string(self.scaled_value)

    # -------------------------------------------------------------------------
    # Печать
    # -------------------------------------------------------------------------

    def _split(self) -> tuple[str, str, int]:
        sign = "-" if self.scaled_value < 0 else ""
        characteristic, mantissa = divmod(abs(self.scaled_value), DIGITS)
        return sign, int_to_decimal_string(characteristic), mantissa

    def _to_string_with_automatic_precision(self) -> str:
        sign, characteristic, mantissa = self._split()

        if mantissa == 0:
            return f"{sign}{characteristic}"

        trimmed_mantissa = _pad_mantissa(mantissa).rstrip("0")
        first_non_zero_index = len(trimmed_mantissa) - len(trimmed_mantissa.lstrip("0"))
        significant = trimmed_mantissa[: first_non_zero_index + AUTO_SIGNIFICANT_DIGITS]

        return f"{sign}{characteristic}.{significant}"

    def _to_string_with_precision(self, precision: int) -> str:
        validate_non_negative_int(precision, "precision")

        value = abs(self.scaled_value)
        if precision < PRECISION:
            # round half up на позиции precision
            value += 5 * get_digits(PRECISION - 1 - precision)

        characteristic, mantissa = divmod(value, DIGITS)
        characteristic_digits = int_to_decimal_string(characteristic)

        if precision == 0:
            digits = characteristic_digits
        else:
            fraction = _pad_mantissa(mantissa)[:precision].ljust(precision, "0")
            digits = f"{characteristic_digits}.{fraction}"

        # -0.00 печатается как 0.00
        if self.scaled_value < 0 and digits.strip("0."):
            return f"-{digits}"
        return digits

    def to_string(self, precision: Optional[int] = None) -> str:
        """
        Строковое представление.

        Args:
            precision: None — автоматическая точность (3 значащие цифры после
                первой ненулевой дробной); иначе ровно precision дробных знаков
                с округлением половины вверх

        Returns:
            Строка; "∞" для INFINITY

        Raises:
            ValueError: Если precision < 0

        Examples:
            >>> Decimal.parse("0.000123456").to_string()
            '0.000123'
            >>> Decimal.parse("2.345").to_string(2)
            '2.35'
        """
        if self.infinite is not None:
            return INFINITY_SYMBOL

        if precision is not None:
            return self._to_string_with_precision(precision)

        return self._to_string_with_automatic_precision()

    def to_string_without_precision(self) -> str:
        """Все значащие дробные знаки, без ограничения в 3 цифры."""
        if self.infinite is not None:
            return INFINITY_SYMBOL

        sign, characteristic, mantissa = self._split()

        if mantissa == 0:
            return f"{sign}{characteristic}"

        return f"{sign}{characteristic}.{_pad_mantissa(mantissa).rstrip('0')}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Decimal('{self.to_string_without_precision()}')"

    def prettify(self, precision: Optional[int] = None) -> str:
        """
        to_string(precision) с разделителями групп разрядов в целой части.

        Examples:
            >>> Decimal.parse("1234567.89").prettify(2)
            '1,234,567.89'
        """
        characteristic, dot, mantissa = self.to_string(precision).partition(".")
        pretty_characteristic = _group_thousands(characteristic)

        if dot:
            return f"{pretty_characteristic}.{mantissa}"
        return pretty_characteristic

    def prettify_with_max_precision(self) -> str:
        """Группировка разрядов поверх to_string_without_precision()."""
        characteristic, dot, mantissa = self.to_string_without_precision().partition(".")
        pretty_characteristic = _group_thousands(characteristic)

        if dot:
            return f"{pretty_characteristic}.{mantissa}"
        return pretty_characteristic

    def _significant_fraction_digits(self) -> Optional[int]:
        # количество ненулевых цифр в дробной части автоматического представления
        _, dot, mantissa = self.to_string().partition(".")
        if not dot:
            return None
        return len(mantissa.replace("0", ""))

    def smart_prettify(self) -> str:
        """
        prettify с адаптивной точностью.

        Значения < 1 печатаются с 8 знаками; остальные — с числом ненулевых
        дробных цифр автоматического представления.
        """
        if self.lt(Decimal.ONE):
            return self.prettify(SMART_PRECISION_BELOW_ONE)

        return self.prettify(self._significant_fraction_digits())

    def money_prettify(self) -> str:
        """
        prettify для денежных сумм.

        Ноль → "0"; значения < 1 — (ненулевые дробные цифры + 2) знаков;
        остальные — 2 знака.
        """
        if self.is_zero:
            return "0"

        if self.lt(Decimal.ONE):
            decimal_count = self._significant_fraction_digits() or 0
            return self.prettify(decimal_count + MONEY_EXTRA_DIGITS_BELOW_ONE)

        return self.prettify(MONEY_PRECISION)

    def shorten(self) -> str:
        """
        Сокращённое представление с суффиксом порядка (K, M, B, T).

        Всегда около 3 значащих цифр перед суффиксом.

        Examples:
            >>> Decimal.parse(1500).shorten()
            '1.50K'
            >>> Decimal.parse("2345678").shorten()
            '2.35M'
        """
        if self.infinite is not None:
            return INFINITY_SYMBOL

        characteristic_length = len(self.to_string(0).lstrip("-"))
        magnitude = min((characteristic_length - 1) // 3, len(MAGNITUDES) - 1)
        precision = max(3 * (magnitude + 1) - characteristic_length, 0)

        normalized = self.div(Decimal(get_digits(PRECISION + 3 * magnitude)))

        return normalized.prettify(precision) + MAGNITUDES[magnitude]

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, addend: "Decimalish") -> "Decimal":
        return Decimal(self.scaled_value + Decimal.parse(addend).scaled_value)

    def sub(self, subtrahend: "Decimalish") -> "Decimal":
        return Decimal(self.scaled_value - Decimal.parse(subtrahend).scaled_value)

    def mul(self, multiplier: "Decimalish") -> "Decimal":
        """Умножение с усечением: (self × multiplier) / 10^18."""
        product = self.scaled_value * Decimal.parse(multiplier).scaled_value
        return Decimal(div_trunc(product, DIGITS))

    def div(self, divider: "Decimalish") -> "Decimal":
        """
        Деление с усечением: (self × 10^18) / divider.

        Returns:
            Частное или Decimal.INFINITY при divider == 0
        """
        divider = Decimal.parse(divider)

        if divider.is_zero:
            return Decimal.INFINITY

        return Decimal(div_trunc(self.scaled_value * DIGITS, divider.scaled_value))

    def div_ceil(self, divider: "Decimalish") -> "Decimal":
        """
        Деление с округлением частного вверх.

        Returns:
            Частное или Decimal.INFINITY при divider == 0
        """
        divider = Decimal.parse(divider)

        if divider.is_zero:
            return Decimal.INFINITY

        return Decimal(div_ceil(self.scaled_value * DIGITS, divider.scaled_value))

    def mul_div(self, multiplier: "Decimalish", divider: "Decimalish") -> "Decimal":
        """
        (self × multiplier) / divider одним делением.

        Не накапливает ошибку усечения, в отличие от mul(...).div(...).

        Returns:
            Результат или Decimal.INFINITY при divider == 0
        """
        multiplier = Decimal.parse(multiplier)
        divider = Decimal.parse(divider)

        if divider.is_zero:
            return Decimal.INFINITY

        return Decimal(
            div_trunc(self.scaled_value * multiplier.scaled_value, divider.scaled_value)
        )

    def pow(self, exponent: int) -> "Decimal":
        """
        Возведение в целую неотрицательную степень (square-and-multiply).

        Каждое промежуточное умножение округляет половину вверх.

        Args:
            exponent: 0 <= exponent <= 0xffffffff

        Returns:
            self^exponent

        Raises:
            ValueError: Если exponent не int, отрицательный или слишком большой
        """
        validate_exponent(exponent)

        if exponent == 0:
            return Decimal.ONE

        if exponent == 1:
            return self

        x = self.scaled_value
        y = DIGITS

        while exponent > 1:
            if exponent & 1:
                y = rounded_mul(x, y)

            x = rounded_mul(x, x)
            exponent >>= 1

        return Decimal(rounded_mul(x, y))

    def __add__(self, other: object) -> "Decimal":
        if not _is_decimalish(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Decimal":
        if not _is_decimalish(other):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> "Decimal":
        if not _is_decimalish(other):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: object) -> "Decimal":
        if not _is_decimalish(other):
            return NotImplemented
        return self.div(other)

    # -------------------------------------------------------------------------
    # Предикаты (filter-style: self или None)
    # -------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self.scaled_value == 0

    @property
    def zero(self) -> Optional["Decimal"]:
        return self if self.is_zero else None

    @property
    def non_zero(self) -> Optional["Decimal"]:
        return None if self.is_zero else self

    @property
    def infinite(self) -> Optional["Decimal"]:
        return self if self.scaled_value == MAX_UINT_256 else None

    @property
    def finite(self) -> Optional["Decimal"]:
        return None if self.scaled_value == MAX_UINT_256 else self

    @property
    def absolute_value(self) -> "Decimal":
        return self

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    def lt(self, that: "Decimalish") -> bool:
        return self.scaled_value < Decimal.parse(that).scaled_value

    def eq(self, that: "Decimalish") -> bool:
        return self.scaled_value == Decimal.parse(that).scaled_value

    def gt(self, that: "Decimalish") -> bool:
        return self.scaled_value > Decimal.parse(that).scaled_value

    def gte(self, that: "Decimalish") -> bool:
        return self.scaled_value >= Decimal.parse(that).scaled_value

    def lte(self, that: "Decimalish") -> bool:
        return self.scaled_value <= Decimal.parse(that).scaled_value

    @staticmethod
    def min(a: "Decimalish", b: "Decimalish") -> "Decimal":
        a = Decimal.parse(a)
        b = Decimal.parse(b)
        return a if a.lt(b) else b

    @staticmethod
    def max(a: "Decimalish", b: "Decimalish") -> "Decimal":
        a = Decimal.parse(a)
        b = Decimal.parse(b)
        return a if a.gt(b) else b


# Типы, приводимые к Decimal через Decimal.parse
Decimalish = Union[Decimal, int, float, decimal.Decimal, str]


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# INFINITY — сырое значение MAX_UINT_256, а не результат арифметики
Decimal.INFINITY = Decimal.from_big_number_string(to_hex_string(MAX_UINT_256))
Decimal.ZERO = Decimal(0)
Decimal.HALF = Decimal._from_string("0.5")
Decimal.ONE = Decimal._from_string("1")
