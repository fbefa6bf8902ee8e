"""
Datatypes — иерархия integer-типов XML Schema

XML Schema Part 2, §3.3.13–3.3.25 (derived datatypes)

Вместо цепочки подклассов иерархия задана плоской таблицей:
каждый тег datatype → (родитель, числовой домен).
Наследование разрешается поиском по таблице.

Дерево с корнем xsd:integer:

    integer
    ├── nonPositiveInteger
    │   └── negativeInteger
    ├── long
    │   └── int
    │       └── short
    │           └── byte
    └── nonNegativeInteger
        ├── unsignedLong
        │   └── unsignedInt
        │       └── unsignedShort
        │           └── unsignedByte
        └── positiveInteger

ИНВАРИАНТЫ:
1. Таблица однокоренная: у каждого тега, кроме INTEGER, ровно один родитель
2. Домен потомка вложен в домен родителя
"""

from enum import Enum
from typing import Dict, Final, List, Optional, Union

from pydantic import BaseModel, Field

from xsd_integer.core.domain.errors import UnknownDatatype

XSD_NAMESPACE: Final[str] = "http://www.w3.org/2001/XMLSchema#"
XSD_PREFIX: Final[str] = "xsd:"


# =============================================================================
# ТЕГИ DATATYPE
# =============================================================================


class XSDDatatype(str, Enum):
    """IRI тегов integer-семейства"""

    INTEGER = XSD_NAMESPACE + "integer"
    NON_POSITIVE_INTEGER = XSD_NAMESPACE + "nonPositiveInteger"
    NEGATIVE_INTEGER = XSD_NAMESPACE + "negativeInteger"
    LONG = XSD_NAMESPACE + "long"
    INT = XSD_NAMESPACE + "int"
    SHORT = XSD_NAMESPACE + "short"
    BYTE = XSD_NAMESPACE + "byte"
    NON_NEGATIVE_INTEGER = XSD_NAMESPACE + "nonNegativeInteger"
    UNSIGNED_LONG = XSD_NAMESPACE + "unsignedLong"
    UNSIGNED_INT = XSD_NAMESPACE + "unsignedInt"
    UNSIGNED_SHORT = XSD_NAMESPACE + "unsignedShort"
    UNSIGNED_BYTE = XSD_NAMESPACE + "unsignedByte"
    POSITIVE_INTEGER = XSD_NAMESPACE + "positiveInteger"

    @property
    def local_name(self) -> str:
        """Имя без namespace (например, 'unsignedByte')"""
        return self.value[len(XSD_NAMESPACE):]

    @property
    def curie(self) -> str:
        """Сокращённая форма (например, 'xsd:unsignedByte')"""
        return XSD_PREFIX + self.local_name


# =============================================================================
# ЧИСЛОВОЙ ДОМЕН
# =============================================================================


class Domain(BaseModel):
    """
    Включающий числовой диапазон [min_value, max_value].

    None на любой из границ означает отсутствие ограничения с этой стороны.
    """

    min_value: Optional[int] = Field(None, description="Нижняя граница (включительно)")
    max_value: Optional[int] = Field(None, description="Верхняя граница (включительно)")

    model_config = {"frozen": True}

    def contains(self, value: int) -> bool:
        if self.min_value is not None and value < self.min_value:
            return False
        if self.max_value is not None and value > self.max_value:
            return False
        return True

    def describe(self) -> str:
        """Человекочитаемое представление, например '[-128, 127]' или '[1, +inf)'"""
        lower = "(-inf" if self.min_value is None else f"[{self.min_value}"
        upper = "+inf)" if self.max_value is None else f"{self.max_value}]"
        return f"{lower}, {upper}"


UNBOUNDED: Final[Domain] = Domain()


def signed_bits(bits: int) -> Domain:
    """Домен знакового целого шириной bits: [-2^(bits-1), 2^(bits-1) - 1]"""
    return Domain(min_value=-(2 ** (bits - 1)), max_value=2 ** (bits - 1) - 1)


def unsigned_bits(bits: int) -> Domain:
    """Домен беззнакового целого шириной bits: [0, 2^bits - 1]"""
    return Domain(min_value=0, max_value=2**bits - 1)


# =============================================================================
# ТАБЛИЦА ИЕРАРХИИ
# =============================================================================


class DatatypeSpec(BaseModel):
    """Строка таблицы иерархии: родитель и (опционально) собственный домен"""

    parent: Optional[XSDDatatype] = Field(None, description="Родительский тег (None для корня)")
    domain: Optional[Domain] = Field(None, description="Собственный домен (None: наследуется)")

    model_config = {"frozen": True}


DATATYPE_TABLE: Final[Dict[XSDDatatype, DatatypeSpec]] = {
    XSDDatatype.INTEGER: DatatypeSpec(parent=None, domain=UNBOUNDED),
    XSDDatatype.NON_POSITIVE_INTEGER: DatatypeSpec(
        parent=XSDDatatype.INTEGER, domain=Domain(max_value=0)
    ),
    XSDDatatype.NEGATIVE_INTEGER: DatatypeSpec(
        parent=XSDDatatype.NON_POSITIVE_INTEGER, domain=Domain(max_value=-1)
    ),
    XSDDatatype.LONG: DatatypeSpec(parent=XSDDatatype.INTEGER, domain=signed_bits(64)),
    XSDDatatype.INT: DatatypeSpec(parent=XSDDatatype.LONG, domain=signed_bits(32)),
    XSDDatatype.SHORT: DatatypeSpec(parent=XSDDatatype.INT, domain=signed_bits(16)),
    XSDDatatype.BYTE: DatatypeSpec(parent=XSDDatatype.SHORT, domain=signed_bits(8)),
    XSDDatatype.NON_NEGATIVE_INTEGER: DatatypeSpec(
        parent=XSDDatatype.INTEGER, domain=Domain(min_value=0)
    ),
    XSDDatatype.UNSIGNED_LONG: DatatypeSpec(
        parent=XSDDatatype.NON_NEGATIVE_INTEGER, domain=unsigned_bits(64)
    ),
    XSDDatatype.UNSIGNED_INT: DatatypeSpec(
        parent=XSDDatatype.UNSIGNED_LONG, domain=unsigned_bits(32)
    ),
    XSDDatatype.UNSIGNED_SHORT: DatatypeSpec(
        parent=XSDDatatype.UNSIGNED_INT, domain=unsigned_bits(16)
    ),
    XSDDatatype.UNSIGNED_BYTE: DatatypeSpec(
        parent=XSDDatatype.UNSIGNED_SHORT, domain=unsigned_bits(8)
    ),
    XSDDatatype.POSITIVE_INTEGER: DatatypeSpec(
        parent=XSDDatatype.NON_NEGATIVE_INTEGER, domain=Domain(min_value=1)
    ),
}


# =============================================================================
# РАЗРЕШЕНИЕ ТЕГОВ
# =============================================================================


def resolve_datatype(tag: Union[XSDDatatype, str]) -> XSDDatatype:
    """
    Приведение тега к XSDDatatype.

    Принимает XSDDatatype, полный IRI или CURIE с префиксом 'xsd:'.
    Синтаксис IRI не проверяется: тег либо известен, либо нет.

    Raises:
        UnknownDatatype: Если тег не относится к integer-семейству
    """
    if isinstance(tag, XSDDatatype):
        return tag

    text = str(tag)
    if text.startswith(XSD_PREFIX):
        text = XSD_NAMESPACE + text[len(XSD_PREFIX):]

    try:
        return XSDDatatype(text)
    except ValueError:
        raise UnknownDatatype(f"Not an XML Schema integer datatype: {tag!r}") from None


def parent_of(datatype: XSDDatatype) -> Optional[XSDDatatype]:
    return DATATYPE_TABLE[datatype].parent


def ancestors(datatype: XSDDatatype) -> List[XSDDatatype]:
    """
    Цепочка от datatype до корня включительно.

    Returns:
        [datatype, parent, ..., XSDDatatype.INTEGER]
    """
    chain = [datatype]
    parent = parent_of(datatype)
    while parent is not None:
        chain.append(parent)
        parent = parent_of(parent)
    return chain


def is_derived_from(datatype: XSDDatatype, base: XSDDatatype) -> bool:
    """True если base лежит на пути от datatype к корню (включая сам datatype)"""
    return base in ancestors(datatype)


def domain_for(datatype: XSDDatatype) -> Domain:
    """Ближайший объявленный домен на пути к корню"""
    for tag in ancestors(datatype):
        domain = DATATYPE_TABLE[tag].domain
        if domain is not None:
            return domain
    return UNBOUNDED
