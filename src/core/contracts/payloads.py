"""
Payloads — JSON представления Decimal и Difference

Кодирование в dict, совместимый со схемами пакета (schema/*.json), и строгое
декодирование с валидацией контракта.

В отличие от Decimal.parse, декодирование payload не прощает ошибок:
нарушение контракта — ошибка программиста, а не пользовательского ввода.
"""

from typing import Any, Dict

from src.core.contracts.validators import (
    validate_decimal_payload,
    validate_difference_payload,
)
from src.core.domain.difference import Difference, DifferenceRepresentation, Sign
from src.core.math.fixed_point import Decimal


def decimal_to_payload(value: Decimal) -> Dict[str, Any]:
    """
    Decimal → {"big_number": "<scaled integer>"}.

    Examples:
        >>> decimal_to_payload(Decimal.ONE)
        {'big_number': '1000000000000000000'}
    """
    return {"big_number": value.big_number}


def decimal_from_payload(data: Dict[str, Any]) -> Decimal:
    """
    {"big_number": ...} → Decimal.

    Raises:
        ValidationError: Если data не соответствует контракту decimal
    """
    validate_decimal_payload(data)
    return Decimal.from_big_number_string(data["big_number"])


def difference_to_payload(difference: Difference) -> Dict[str, Any]:
    """
    Difference → {"comparable": false} или
    {"comparable": true, "sign": ..., "absolute_value": {...}}.
    """
    if difference.representation is None:
        return {"comparable": False}

    return {
        "comparable": True,
        "sign": difference.representation.sign.value,
        "absolute_value": decimal_to_payload(difference.representation.absolute_value),
    }


def difference_from_payload(data: Dict[str, Any]) -> Difference:
    """
    Обратное к difference_to_payload.

    Raises:
        ValidationError: Если data не соответствует контракту difference
        pydantic.ValidationError: Если sign == "" при ненулевом модуле
    """
    validate_difference_payload(data)

    if not data["comparable"]:
        return Difference()

    return Difference(
        DifferenceRepresentation(
            sign=Sign(data["sign"]),
            absolute_value=decimal_from_payload(data["absolute_value"]),
        )
    )
