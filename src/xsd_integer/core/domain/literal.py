"""
IntegerLiteral — типизированный integer-литерал XML Schema

Литерал хранит:
- datatype: тег из integer-семейства (неизменяем после создания)
- lexical: кэш лексической формы (явная, исходная строка или каноническая)
- value: разобранное целое (неизменяемо; None, если разбор не удался)

Каноникализация не выполняется при создании: canonicalize() вызывается явно
и заменяет lexical на минимальную десятичную запись value.

Политика проверок при создании (settings или аргумент strict):
- strict_domain: value вне домена datatype → DomainViolation
- strict_grammar: lexical не соответствует грамматике → GrammarViolation
Неразбираемый ввод ошибкой не является ни в каком режиме.

Примеры:
    >>> literal("007").canonicalize().lexical
    '7'
    >>> literal(40).successor().successor().value
    42
    >>> literal(-5, datatype=XSDDatatype.NEGATIVE_INTEGER).absolute_value().value
    5
"""

import logging
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

from xsd_integer.core.contracts import validate_integer_literal
from xsd_integer.core.domain.datatypes import Domain, XSDDatatype, domain_for, resolve_datatype
from xsd_integer.core.domain.errors import (
    DomainViolation,
    GrammarViolation,
    LiteralError,
    ValueAbsent,
)
from xsd_integer.core.domain.grammar import Grammar, grammar_for
from xsd_integer.core.domain.lexical import parse_lexical
from xsd_integer.core.math.bignum import BigIntFactory, to_big_integer
from xsd_integer.settings import settings

logger = logging.getLogger(__name__)

DatatypeTag = Union[XSDDatatype, str]


class IntegerLiteral(BaseModel):
    """
    Integer-литерал с тегом datatype, кэшем лексической формы и значением.

    Создание из произвольного ввода: через IntegerLiteral.from_value или literal().
    Результаты числовых операций (successor, predecessor, absolute_value)
    всегда имеют datatype xsd:integer, независимо от datatype получателя.
    """

    datatype: XSDDatatype = Field(
        XSDDatatype.INTEGER, frozen=True, description="Тег datatype"
    )
    lexical: Optional[str] = Field(None, description="Кэш лексической формы")
    value: Optional[int] = Field(
        None, strict=True, frozen=True, description="Разобранное значение"
    )

    model_config = {"extra": "forbid"}

    @field_validator("datatype", mode="before")
    @classmethod
    def resolve_datatype_tag(cls, v: Any) -> XSDDatatype:
        """IRI или 'xsd:'-имя → XSDDatatype (UnknownDatatype для чужих тегов)"""
        return resolve_datatype(v)

    @model_validator(mode="after")
    def check_domain_and_grammar(self, info: ValidationInfo) -> "IntegerLiteral":
        """
        Проверка домена и грамматики разобранного значения.

        Контекст валидации может содержать {"strict": bool}, переопределяющий
        settings.strict_domain и settings.strict_grammar.
        """
        if self.value is None:
            return self

        strict = (info.context or {}).get("strict")
        strict_domain = settings.strict_domain if strict is None else strict
        strict_grammar = settings.strict_grammar if strict is None else strict

        domain_violation = self._domain_violation()
        if domain_violation is not None and strict_domain:
            raise domain_violation

        grammar_violation = None
        if self.lexical is not None:
            grammar_violation = self._grammar_violation(self.lexical)
        if grammar_violation is not None and strict_grammar:
            raise grammar_violation

        for violation in (domain_violation, grammar_violation):
            if violation is not None:
                logger.debug("Accepting invalid literal %r: %s", self, violation)
        return self

    # -------------------------------------------------------------------------
    # Создание
    # -------------------------------------------------------------------------

    @classmethod
    def from_value(
        cls,
        value: Any,
        *,
        lexical: Optional[str] = None,
        datatype: Optional[DatatypeTag] = None,
        strict: Optional[bool] = None,
    ) -> "IntegerLiteral":
        """
        Создание литерала из str, int или объекта с __index__.

        Args:
            value: Исходное значение
            lexical: Явная лексическая форма (иначе сама строка value)
            datatype: Тег datatype (по умолчанию xsd:integer)
            strict: Переопределение политики проверок (None: из settings)

        Raises:
            DomainViolation: Значение вне домена (strict)
            GrammarViolation: Лексическая форма вне грамматики (strict)
            UnknownDatatype: Тег не из integer-семейства
        """
        parsed = parse_lexical(value, lexical)
        return cls.model_validate(
            {
                "datatype": XSDDatatype.INTEGER if datatype is None else datatype,
                "lexical": parsed.lexical,
                "value": parsed.value,
            },
            context={"strict": strict},
        )

    @classmethod
    def from_contract(
        cls, data: Dict[str, Any], strict: Optional[bool] = None
    ) -> "IntegerLiteral":
        """
        Создание из dict-представления {"datatype": IRI, "lexical": str}.

        Raises:
            jsonschema.ValidationError: Если data не соответствует integer_literal.json
        """
        validate_integer_literal(data)
        return cls.from_value(data["lexical"], datatype=data["datatype"], strict=strict)

    def to_contract(self) -> Dict[str, str]:
        """
        dict-представление литерала.

        Кэшированная лексическая форма сохраняется, если она соответствует
        грамматике datatype; иначе (литерал создан с strict=False)
        выводится каноническая запись value, чтобы результат проходил
        integer_literal.json.

        Raises:
            ValueAbsent: Если значение не разобрано
        """
        n = self._require_value()
        text = self.to_text()
        if self._grammar_violation(text) is not None:
            text = str(n)
        return {"datatype": self.datatype.value, "lexical": text}

    # -------------------------------------------------------------------------
    # Домен, грамматика, валидность
    # -------------------------------------------------------------------------

    @property
    def domain(self) -> Domain:
        return domain_for(self.datatype)

    @property
    def grammar(self) -> Grammar:
        return grammar_for(self.datatype)

    def _domain_violation(self) -> Optional[DomainViolation]:
        if self.value is None or self.domain.contains(self.value):
            return None
        return DomainViolation(
            f"{self.value} is outside the {self.datatype.curie} domain {self.domain.describe()}"
        )

    def _grammar_violation(self, text: str) -> Optional[GrammarViolation]:
        if self.grammar.matches(text):
            return None
        return GrammarViolation(
            f"{text!r} is not a valid {self.datatype.curie} lexical form"
        )

    def _violation(self) -> Optional[LiteralError]:
        if self.value is None:
            return ValueAbsent(f"{self.datatype.curie} literal {self.lexical!r} has no value")
        return self._domain_violation() or self._grammar_violation(self.to_text())

    def is_valid(self) -> bool:
        """
        Литерал валиден, если значение разобрано, лежит в домене datatype,
        а текстовая форма соответствует грамматике datatype.
        """
        return self._violation() is None

    def ensure_valid(self) -> "IntegerLiteral":
        """
        Raises:
            ValueAbsent / DomainViolation / GrammarViolation: первое найденное нарушение
        """
        violation = self._violation()
        if violation is not None:
            raise violation
        return self

    # -------------------------------------------------------------------------
    # Лексическая форма
    # -------------------------------------------------------------------------

    def canonicalize(self) -> "IntegerLiteral":
        """
        Замена lexical на каноническую форму value (без ведущих нулей и '+').

        Идемпотентна. Если value отсутствует, lexical не меняется.

        Returns:
            self
        """
        if self.value is not None:
            self.lexical = str(self.value)
        return self

    def to_text(self) -> str:
        """Кэшированная лексическая форма, иначе десятичная запись value (или '')"""
        if self.lexical is not None:
            return self.lexical
        if self.value is None:
            return ""
        return str(self.value)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_text()!r}, datatype={self.datatype.curie})"

    # -------------------------------------------------------------------------
    # Числовые операции
    # -------------------------------------------------------------------------

    def _require_value(self) -> int:
        if self.value is None:
            raise ValueAbsent(
                f"{self.datatype.curie} literal {self.lexical!r} has no parsed integer value"
            )
        return self.value

    def __int__(self) -> int:
        return self._require_value()

    def __index__(self) -> int:
        return self._require_value()

    def predecessor(self) -> "IntegerLiteral":
        """value - 1 как xsd:integer"""
        return IntegerLiteral(value=self._require_value() - 1)

    def successor(self) -> "IntegerLiteral":
        """value + 1 как xsd:integer"""
        return IntegerLiteral(value=self._require_value() + 1)

    next = successor

    def is_even(self) -> bool:
        return self._require_value() % 2 == 0

    def is_odd(self) -> bool:
        return self._require_value() % 2 == 1

    def absolute_value(self) -> "IntegerLiteral":
        """
        Модуль значения.

        Returns:
            self, если value > 0; иначе новый xsd:integer литерал с |value|
            (в том числе для нуля)
        """
        n = self._require_value()
        if n > 0:
            return self
        return IntegerLiteral(value=abs(n))

    __abs__ = absolute_value

    def is_zero(self) -> bool:
        return self._require_value() == 0

    def nonzero(self) -> Optional["IntegerLiteral"]:
        """self, если value != 0, иначе None"""
        return None if self.is_zero() else self

    def to_big_integer_backing(
        self, provider: Union[str, BigIntFactory, None] = None
    ) -> Any:
        """
        Значение как handle произвольной точности (по умолчанию gmpy2.mpz).

        Args:
            provider: Имя провайдера, вызываемый объект или None (settings.bigint_provider)

        Raises:
            ValueAbsent: Если значение не разобрано
            CapabilityUnavailable: Если провайдер недоступен
        """
        return to_big_integer(str(self._require_value()), provider)


def literal(
    value: Any,
    *,
    lexical: Optional[str] = None,
    datatype: Optional[DatatypeTag] = None,
    strict: Optional[bool] = None,
) -> IntegerLiteral:
    """
    Сокращение для IntegerLiteral.from_value.

    float не усекается до целого: literal(3.7) и literal(3.0) дают value = None.
    """
    return IntegerLiteral.from_value(value, lexical=lexical, datatype=datatype, strict=strict)
