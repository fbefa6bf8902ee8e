"""
Lexical — разбор входного значения в (value, lexical)

Принимаемые формы ввода:
- str: разбирается как десятичное целое по грамматике xsd:integer,
  сама строка сохраняется как лексическая форма
- int: используется напрямую
- объект с __index__ (IntegerConvertible): преобразуется через operator.index
- прочее: разбирается str(value)

Ошибка разбора не выбрасывается: value = None, факт логируется на DEBUG.
bool не считается целым числом (value = None). float не реализует __index__
и не усекается: 3.7 и 3.0 дают value = None.
"""

import logging
import operator
import re
from dataclasses import dataclass
from typing import Any, Final, Optional, Protocol, runtime_checkable

from xsd_integer.core.domain.grammar import INTEGER_PATTERN

logger = logging.getLogger(__name__)

_DECIMAL_INTEGER: Final = re.compile(INTEGER_PATTERN)


@runtime_checkable
class IntegerConvertible(Protocol):
    """Объект, допускающий точное преобразование в int (numpy.int64, IntegerLiteral и т.п.)"""

    def __index__(self) -> int: ...


@dataclass(frozen=True)
class LexicalParseResult:
    """Результат разбора: числовое значение и сохраняемая лексическая форма"""

    value: Optional[int]
    lexical: Optional[str]

    @property
    def parsed(self) -> bool:
        return self.value is not None


def parse_integer_text(text: str) -> Optional[int]:
    """
    Разбор десятичной записи целого числа.

    Args:
        text: Лексическая форма (например, '007', '-12', '+3')

    Returns:
        int или None, если text не соответствует [+-]?[0-9]+
        или превышает лимит длины преобразования int
    """
    if _DECIMAL_INTEGER.fullmatch(text) is None:
        logger.debug("Unparsable integer lexical form: %r", text)
        return None

    try:
        return int(text, 10)
    except ValueError as e:
        # запись длиннее sys.get_int_max_str_digits()
        logger.debug("Integer lexical form rejected by int(): %s", e)
        return None


def _index_or_none(value: Any) -> Optional[int]:
    try:
        return operator.index(value)
    except Exception as e:
        logger.debug("Integer conversion of %s failed: %s", type(value).__name__, e)
        return None


def _text_or_none(value: Any) -> Optional[int]:
    try:
        text = str(value)
    except Exception as e:
        logger.debug("Text form of %s failed: %s", type(value).__name__, e)
        return None
    return parse_integer_text(text)


def parse_lexical(value: Any, lexical: Optional[str] = None) -> LexicalParseResult:
    """
    Разбор входного значения.

    Лексическая форма: lexical, если передана; иначе сам value, если это str;
    иначе None. Исключения из __index__ и __str__ ввода не пропускаются наружу.

    Args:
        value: Исходное значение
        lexical: Явная лексическая форма (override)

    Returns:
        LexicalParseResult; value = None при ошибке разбора
    """
    if lexical is None and isinstance(value, str):
        lexical = value

    if isinstance(value, str):
        parsed = parse_integer_text(value)
    elif isinstance(value, bool):
        parsed = None
    elif isinstance(value, int):
        parsed = int(value)
    elif isinstance(value, IntegerConvertible):
        parsed = _index_or_none(value)
    else:
        parsed = _text_or_none(value)

    return LexicalParseResult(value=parsed, lexical=lexical)
