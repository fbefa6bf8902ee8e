"""
BigNum — big-integer backing для integer-литералов

Провайдер: вызываемый объект str → handle произвольной точности.
Провайдеры регистрируются по имени в виде 'module:attribute' и
импортируются лениво, при первом обращении. Отсутствие модуля
(например, gmpy2 не установлен) → CapabilityUnavailable в момент вызова.

Встроенные провайдеры:
- gmpy2:   gmpy2.mpz (extra 'bignum')
- builtin: int
"""

import importlib
import logging
from typing import Any, Callable, Dict, Optional, Union

from xsd_integer.core.domain.errors import CapabilityUnavailable
from xsd_integer.settings import settings

logger = logging.getLogger(__name__)

BigIntFactory = Callable[[str], Any]

# Имя провайдера → 'module:attribute' или вызываемый объект
BIGINT_PROVIDERS: Dict[str, Union[str, BigIntFactory]] = {
    "gmpy2": "gmpy2:mpz",
    "builtin": "builtins:int",
}

# Кэш разрешённых провайдеров
_RESOLVED: Dict[str, BigIntFactory] = {}


def register_provider(name: str, target: Union[str, BigIntFactory]) -> None:
    """
    Регистрация провайдера.

    Args:
        name: Имя провайдера (используется в settings.bigint_provider)
        target: 'module:attribute' или готовый вызываемый объект
    """
    _RESOLVED.pop(name, None)
    BIGINT_PROVIDERS[name] = target


def resolve_provider(name: Optional[str] = None) -> BigIntFactory:
    """
    Разрешение провайдера по имени (по умолчанию settings.bigint_provider).

    Raises:
        CapabilityUnavailable: Если провайдер не зарегистрирован
            или его модуль не импортируется
    """
    if name is None:
        name = settings.bigint_provider

    if name in _RESOLVED:
        return _RESOLVED[name]

    target = BIGINT_PROVIDERS.get(name)
    if target is None:
        raise CapabilityUnavailable(f"Unknown big-integer provider: {name!r}")
    if callable(target):
        return target

    module_name, _, attribute = target.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise CapabilityUnavailable(
            f"Big-integer provider {name!r} requires module {module_name!r}: {e}"
        ) from e

    factory = getattr(module, attribute, None)
    if factory is None or not callable(factory):
        raise CapabilityUnavailable(f"{target!r} is not a callable big-integer factory")

    logger.debug("Resolved big-integer provider %s -> %s", name, target)
    _RESOLVED[name] = factory
    return factory


def to_big_integer(
    text: str, provider: Union[str, BigIntFactory, None] = None
) -> Any:
    """
    Преобразование десятичной записи в handle произвольной точности.

    Args:
        text: Каноническая десятичная запись
        provider: Имя провайдера, вызываемый объект или None (настройки)

    Returns:
        Объект провайдера (например, gmpy2.mpz)
    """
    factory = provider if callable(provider) else resolve_provider(provider)
    return factory(text)


def clear_cache() -> None:
    _RESOLVED.clear()
