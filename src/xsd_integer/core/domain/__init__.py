"""
Domain models and value objects.

Contains the integer-family datatype hierarchy, lexical grammars and IntegerLiteral.
"""

from xsd_integer.core.domain.datatypes import (
    DATATYPE_TABLE,
    UNBOUNDED,
    XSD_NAMESPACE,
    DatatypeSpec,
    Domain,
    XSDDatatype,
    ancestors,
    domain_for,
    is_derived_from,
    parent_of,
    resolve_datatype,
)
from xsd_integer.core.domain.errors import (
    CapabilityUnavailable,
    DomainViolation,
    GrammarViolation,
    LiteralError,
    UnknownDatatype,
    ValueAbsent,
)
from xsd_integer.core.domain.grammar import GRAMMAR_PATTERNS, Grammar, grammar_for, matches
from xsd_integer.core.domain.lexical import (
    IntegerConvertible,
    LexicalParseResult,
    parse_integer_text,
    parse_lexical,
)
from xsd_integer.core.domain.literal import IntegerLiteral, literal

__all__ = [
    # Datatypes
    "XSD_NAMESPACE",
    "XSDDatatype",
    "Domain",
    "DatatypeSpec",
    "DATATYPE_TABLE",
    "UNBOUNDED",
    "resolve_datatype",
    "parent_of",
    "ancestors",
    "is_derived_from",
    "domain_for",
    # Grammar
    "GRAMMAR_PATTERNS",
    "Grammar",
    "grammar_for",
    "matches",
    # Lexical
    "IntegerConvertible",
    "LexicalParseResult",
    "parse_integer_text",
    "parse_lexical",
    # Literal
    "IntegerLiteral",
    "literal",
    # Errors
    "LiteralError",
    "ValueAbsent",
    "DomainViolation",
    "GrammarViolation",
    "UnknownDatatype",
    "CapabilityUnavailable",
]
