"""
Integer Literal Contract

dict-представление литерала: {"datatype": IRI, "lexical": str}.

Форма описана в schema/integer_literal.json (JSON Schema draft 2020-12).
Перечисление допустимых datatype в файле не хранится: при загрузке оно
подставляется из XSDDatatype, так что словарь тегов определён в одном месте.
Валидатор строится один раз на процесс.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, List

import jsonschema
from jsonschema import Draft202012Validator

from xsd_integer.core.domain.datatypes import XSDDatatype

logger = logging.getLogger(__name__)

SCHEMA_PATH: Final[Path] = Path(__file__).parent / "schema" / "integer_literal.json"


def load_integer_literal_schema(path: Path = SCHEMA_PATH) -> Dict[str, Any]:
    """
    Загрузка схемы с подстановкой перечисления datatype.

    Args:
        path: Путь к файлу схемы

    Returns:
        Схема как dict

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если результат не является валидной JSON Schema
    """
    with open(path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    schema["properties"]["datatype"]["enum"] = [dt.value for dt in XSDDatatype]

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

    return schema


@lru_cache(maxsize=1)
def integer_literal_validator() -> Draft202012Validator:
    schema = load_integer_literal_schema()
    logger.debug("Built integer_literal validator from %s", SCHEMA_PATH)
    return Draft202012Validator(schema)


def validate_integer_literal(data: Dict[str, Any]) -> None:
    """
    Raises:
        jsonschema.ValidationError: Первое нарушение контракта
    """
    integer_literal_validator().validate(data)


def is_valid_integer_literal(data: Dict[str, Any]) -> bool:
    return integer_literal_validator().is_valid(data)


def contract_errors(data: Dict[str, Any]) -> List[str]:
    """
    Все нарушения контракта в виде '<json path>: <сообщение>', по порядку путей.

    Returns:
        Пустой список для валидных данных
    """
    errors = sorted(integer_literal_validator().iter_errors(data), key=lambda e: e.json_path)
    return [f"{e.json_path}: {e.message}" for e in errors]
