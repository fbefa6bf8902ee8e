"""
Настройки библиотеки xsd_integer.

Читаются из переменных окружения с префиксом XSD_INTEGER_.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class LiteralSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="XSD_INTEGER_", extra="ignore")

    # Значение вне числового домена datatype → DomainViolation при создании
    strict_domain: bool = True

    # Лексическая форма не соответствует грамматике datatype → GrammarViolation
    strict_grammar: bool = True

    # Провайдер big-integer представления по умолчанию (см. core.math.bignum)
    bigint_provider: str = "gmpy2"


settings = LiteralSettings()
