"""
Контракты payload'ов Decimal и Difference (JSON Schema 2020-12)

Схемы лежат внутри пакета (schema/*.json) и читаются через
importlib.resources, поэтому доступны и из установленного дистрибутива,
а не только из рабочей копии. Валидаторы собираются один раз при импорте.

API-слой передаёт суммы как "сырые" масштабированные целые
(real_value × 10^18) в виде строк, поэтому контракт фиксирует именно их.
"""

import json
from functools import lru_cache
from importlib.resources import files
from typing import Any, Dict, Final

from jsonschema import Draft202012Validator, SchemaError

# Каталог схем относительно пакета src.core.contracts
SCHEMA_DIRECTORY: Final[str] = "schema"

DECIMAL_SCHEMA: Final[str] = "decimal"
DIFFERENCE_SCHEMA: Final[str] = "difference"


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Чтение и meta-валидация схемы из ресурсов пакета.

    Результат кэшируется: повторный вызов возвращает тот же dict.

    Args:
        schema_name: Имя схемы без расширения ("decimal", "difference")

    Raises:
        FileNotFoundError: Если схема не поставляется с пакетом
        ValueError: Если файл не является валидной JSON Schema 2020-12
    """
    resource = files(__package__).joinpath(SCHEMA_DIRECTORY).joinpath(f"{schema_name}.json")
    if not resource.is_file():
        raise FileNotFoundError(f"Schema not found: {SCHEMA_DIRECTORY}/{schema_name}.json")

    schema = json.loads(resource.read_text(encoding="utf-8"))

    try:
        Draft202012Validator.check_schema(schema)
    except SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

    return schema


_DECIMAL_VALIDATOR: Final = Draft202012Validator(load_schema(DECIMAL_SCHEMA))
_DIFFERENCE_VALIDATOR: Final = Draft202012Validator(load_schema(DIFFERENCE_SCHEMA))


def validate_decimal_payload(data: Dict[str, Any]) -> None:
    """
    Raises:
        jsonschema.ValidationError: Если data не соответствует контракту decimal
    """
    _DECIMAL_VALIDATOR.validate(data)


def validate_difference_payload(data: Dict[str, Any]) -> None:
    """
    Raises:
        jsonschema.ValidationError: Если data не соответствует контракту difference
    """
    _DIFFERENCE_VALIDATOR.validate(data)
