"""
Core math modules для xsd_integer

Big-integer backing произвольной точности.
"""

from xsd_integer.core.math.bignum import (
    BIGINT_PROVIDERS,
    BigIntFactory,
    clear_cache,
    register_provider,
    resolve_provider,
    to_big_integer,
)

__all__ = [
    "BIGINT_PROVIDERS",
    "BigIntFactory",
    "clear_cache",
    "register_provider",
    "resolve_provider",
    "to_big_integer",
]
