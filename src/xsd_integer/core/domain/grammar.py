"""
Grammar — лексические грамматики integer-типов

Для каждого datatype, который сужает лексическое пространство родителя,
задано регулярное выражение (полное совпадение строки, только ASCII-цифры).
Остальные datatype наследуют грамматику ближайшего предка:
long/int/short/byte → integer, unsignedInt/Short/Byte → unsignedLong.

Грамматика проверяет только форму записи, но не домен:
"-0" допустим для negativeInteger лексически, хотя значение 0 вне домена.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from re import Pattern
from typing import Dict, Final

from xsd_integer.core.domain.datatypes import XSDDatatype, ancestors

# =============================================================================
# ПАТТЕРНЫ
# =============================================================================

# Необязательный знак, одна или более цифр
INTEGER_PATTERN: Final[str] = r"[+-]?[0-9]+"

# Ноль с любым знаком или "-" и цифры
NON_POSITIVE_INTEGER_PATTERN: Final[str] = r"[+-]?0|-[0-9]+"

# Строго "-" и цифры
NEGATIVE_INTEGER_PATTERN: Final[str] = r"-[0-9]+"

# Ноль с любым знаком или необязательный "+" и цифры
NON_NEGATIVE_INTEGER_PATTERN: Final[str] = r"[+-]?0|\+?[0-9]+"

# Только цифры, без знака
UNSIGNED_PATTERN: Final[str] = r"[0-9]+"

# Необязательный "+" и цифры
POSITIVE_INTEGER_PATTERN: Final[str] = r"\+?[0-9]+"


GRAMMAR_PATTERNS: Final[Dict[XSDDatatype, str]] = {
    XSDDatatype.INTEGER: INTEGER_PATTERN,
    XSDDatatype.NON_POSITIVE_INTEGER: NON_POSITIVE_INTEGER_PATTERN,
    XSDDatatype.NEGATIVE_INTEGER: NEGATIVE_INTEGER_PATTERN,
    XSDDatatype.NON_NEGATIVE_INTEGER: NON_NEGATIVE_INTEGER_PATTERN,
    XSDDatatype.UNSIGNED_LONG: UNSIGNED_PATTERN,
    XSDDatatype.POSITIVE_INTEGER: POSITIVE_INTEGER_PATTERN,
}


# =============================================================================
# GRAMMAR
# =============================================================================


@dataclass(frozen=True)
class Grammar:
    """Скомпилированная грамматика, объявленная на datatype declared_by"""

    declared_by: XSDDatatype
    pattern: Pattern[str]

    def matches(self, text: str) -> bool:
        """Является ли text допустимой лексической формой (без проверки домена)"""
        return self.pattern.fullmatch(text) is not None


@lru_cache(maxsize=None)
def grammar_for(datatype: XSDDatatype) -> Grammar:
    """
    Грамматика datatype с учётом наследования.

    Returns:
        Grammar ближайшего предка (или самого datatype), объявившего паттерн
    """
    for tag in ancestors(datatype):
        pattern = GRAMMAR_PATTERNS.get(tag)
        if pattern is not None:
            return Grammar(declared_by=tag, pattern=re.compile(pattern))
    raise LookupError(f"No grammar declared on the path from {datatype.curie} to the root")


def matches(datatype: XSDDatatype, text: str) -> bool:
    return grammar_for(datatype).matches(text)
