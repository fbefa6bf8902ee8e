"""
Иерархия исключений для integer-литералов.

Исключения НЕ наследуют ValueError: pydantic оборачивает ValueError из
валидаторов в ValidationError, а нарушения домена и грамматики должны
доходить до вызывающего кода в исходном виде.
"""


class LiteralError(Exception):
    """Базовое исключение для ошибок integer-литералов."""


class ValueAbsent(LiteralError):
    """
    Операция требует числовое значение, но литерал его не содержит.

    Возникает, если исходный ввод не удалось разобрать как целое число
    (например, "abc"). Само создание такого литерала ошибкой не является.
    """


class DomainViolation(LiteralError):
    """Значение лежит вне числового домена datatype (например, 0 как positiveInteger)."""


class GrammarViolation(LiteralError):
    """Лексическая форма не соответствует грамматике datatype (например, "+5" как unsignedLong)."""


class UnknownDatatype(LiteralError):
    """Тег datatype не относится к семейству integer."""


class CapabilityUnavailable(LiteralError):
    """
    Опциональная возможность недоступна в текущем окружении.

    Используется для big-integer backing: ошибка возникает в момент
    обращения, а не при создании литерала.
    """
