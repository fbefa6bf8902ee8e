"""
xsd_integer — integer-литералы XML Schema

Лексическая валидация, канонические формы и числовые домены для
xsd:integer и производных типов (long, int, short, byte, unsigned*,
nonPositive/negative/nonNegative/positiveInteger).
"""

from xsd_integer.core.domain import (
    CapabilityUnavailable,
    DomainViolation,
    GrammarViolation,
    IntegerLiteral,
    LiteralError,
    UnknownDatatype,
    ValueAbsent,
    XSDDatatype,
    literal,
)

__all__ = [
    "IntegerLiteral",
    "XSDDatatype",
    "literal",
    "LiteralError",
    "ValueAbsent",
    "DomainViolation",
    "GrammarViolation",
    "UnknownDatatype",
    "CapabilityUnavailable",
]
