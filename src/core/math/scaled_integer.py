"""
Scaled Integer — примитивы целочисленной арифметики для fixed-point

Модуль содержит операции над Python int, на которых построен Decimal:
- Масштаб (PRECISION = 18 дробных знаков, DIGITS = 10^18)
- Деление с усечением к нулю (семантика big-number, НЕ floor division)
- Деление с округлением вверх и умножение с округлением
- Перевод int <-> десятичная строка без лимита длины интерпретатора
- Разбор и печать "сырых" (уже масштабированных) целых
- Валидация аргументов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. div_trunc всегда усекает к нулю: div_trunc(-7, 2) == -3 (а не -4)
2. int_to_decimal_string и decimal_string_to_int не зависят от
   sys.get_int_max_str_digits (перевод по кускам)
3. Все операции детерминированы и точны (без float)
"""

from typing import Final, Union

# =============================================================================
# ПАРАМЕТРЫ МАСШТАБА
# =============================================================================

# Количество дробных десятичных знаков
PRECISION: Final[int] = 18

# 10^PRECISION — масштабный множитель
DIGITS: Final[int] = 10**PRECISION

# 0.5 в масштабированном представлении (для округления половины вверх)
HALF_SCALED: Final[int] = 5 * 10 ** (PRECISION - 1)

# Максимальное беззнаковое 256-битное значение (sentinel для INFINITY)
MAX_UINT_256: Final[int] = 2**256 - 1

# Максимальная допустимая степень для pow
MAX_POW_EXPONENT: Final[int] = 0xFFFFFFFF

# Длина куска при переводе int <-> десятичная строка.
# Меньше минимально допустимого sys.get_int_max_str_digits (640)
CONVERSION_CHUNK_DIGITS: Final[int] = 512

_CONVERSION_CHUNK: Final[int] = 10**CONVERSION_CHUNK_DIGITS


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def get_digits(num_digits: int) -> int:
    """10^num_digits."""
    return 10**num_digits


def div_trunc(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Python `//` округляет к минус бесконечности; big-number библиотеки
    усекают к нулю. Масштабированная арифметика опирается на второе.

    Args:
        numerator: Делимое
        denominator: Делитель (не ноль)

    Returns:
        Частное, усечённое к нулю

    Raises:
        ZeroDivisionError: Если denominator == 0

    Examples:
        >>> div_trunc(7, 2)
        3
        >>> div_trunc(-7, 2)
        -3
        >>> div_trunc(7, -2)
        -3
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def div_ceil(numerator: int, denominator: int) -> int:
    """
    Деление с округлением частного вверх: (numerator + denominator - 1) / denominator.

    Предназначено для неотрицательных операндов.

    Raises:
        ZeroDivisionError: Если denominator == 0
    """
    return div_trunc(numerator + denominator - 1, denominator)


def rounded_mul(x: int, y: int) -> int:
    """
    Умножение масштабированных значений с округлением половины вверх.

    (x * y + HALF_SCALED) / DIGITS, усечение к нулю.
    """
    return div_trunc(x * y + HALF_SCALED, DIGITS)


# =============================================================================
# ДЕСЯТИЧНЫЕ СТРОКИ
# =============================================================================


def int_to_decimal_string(value: int) -> str:
    """
    Десятичная запись целого любой длины.

    str(int) бросает ValueError для значений длиннее
    sys.get_int_max_str_digits; здесь значение переводится кусками
    по CONVERSION_CHUNK_DIGITS цифр.

    Examples:
        >>> int_to_decimal_string(-42)
        '-42'
        >>> len(int_to_decimal_string(10**5000))
        5001
    """
    if value < 0:
        return "-" + int_to_decimal_string(-value)

    chunks = []
    while value >= _CONVERSION_CHUNK:
        value, low = divmod(value, _CONVERSION_CHUNK)
        chunks.append(str(low).zfill(CONVERSION_CHUNK_DIGITS))
    chunks.append(str(value))

    return "".join(reversed(chunks))


def decimal_string_to_int(digits: str) -> int:
    """
    Целое из строки десятичных цифр любой длины (без знака).

    Raises:
        ValueError: Если строка содержит не-цифры
    """
    value = 0
    for start in range(0, len(digits), CONVERSION_CHUNK_DIGITS):
        chunk = digits[start : start + CONVERSION_CHUNK_DIGITS]
        value = value * get_digits(len(chunk)) + int(chunk)
    return value


# =============================================================================
# RAW BIG-NUMBER ПРЕДСТАВЛЕНИЕ
# =============================================================================


def parse_big_number(raw: Union[int, str]) -> int:
    """
    Разбор "сырого" целого: десятичная строка, 0x-hex строка или int.

    Args:
        raw: Например "1000000000000000000", "0xff", "-0x10", 42

    Returns:
        Целое значение

    Raises:
        ValueError: Если raw не является целым в поддерживаемом формате
    """
    if isinstance(raw, bool):
        raise ValueError(f"invalid big number value: {raw!r}")
    if isinstance(raw, int):
        return raw
    if not isinstance(raw, str):
        raise ValueError(f"invalid big number value: {raw!r}")

    text = raw.strip()
    negative = text.startswith("-")
    body = text[1:] if negative else text

    try:
        if body[:2].lower() == "0x":
            value = int(body[2:], 16)
        else:
            if not body.isdigit():
                raise ValueError(body)
            value = decimal_string_to_int(body)
    except ValueError:
        raise ValueError(f"invalid big number value: {raw!r}") from None

    return -value if negative else value


def to_hex_string(value: int) -> str:
    """
    Hex-представление чётной длины: 0x05, 0x0100, -0x0a.
    """
    digits = format(abs(value), "x")
    if len(digits) % 2:
        digits = "0" + digits
    return f"-0x{digits}" if value < 0 else f"0x{digits}"


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative_int(value: int, name: str) -> None:
    """
    Валидация, что значение является неотрицательным int.

    Raises:
        ValueError: Если value не int или value < 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")

    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def validate_exponent(exponent: int) -> None:
    """
    Валидация показателя степени для pow.

    Raises:
        ValueError: Если exponent не int, отрицательный или > MAX_POW_EXPONENT
    """
    validate_non_negative_int(exponent, "exponent")

    if exponent > MAX_POW_EXPONENT:
        raise ValueError(
            f"exponent must be <= {MAX_POW_EXPONENT:#x}, got {exponent}"
        )
