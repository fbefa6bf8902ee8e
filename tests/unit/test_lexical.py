"""
Тесты разбора входных значений

Проверяет:
1. Выбор сохраняемой лексической формы (override → str → None)
2. Разбор строк по грамматике xsd:integer
3. Поддерживаемые формы ввода (int, __index__, произвольные объекты)
4. Отсутствие исключений при ошибке разбора
"""

import sys
from decimal import Decimal

import pytest

from xsd_integer.core.domain import IntegerConvertible, parse_integer_text, parse_lexical


class _Indexable:
    def __init__(self, n: int) -> None:
        self.n = n

    def __index__(self) -> int:
        return self.n


class _BrokenIndex:
    def __index__(self) -> int:
        raise TypeError("no integer view")


class _OverflowingIndex:
    def __index__(self) -> int:
        raise OverflowError("integer view too large")


class _BrokenText:
    def __str__(self) -> str:
        raise RuntimeError("no text form")


class TestParseIntegerText:
    """Тесты для parse_integer_text"""

    def test_decimal_forms(self) -> None:
        assert parse_integer_text("007") == 7
        assert parse_integer_text("+42") == 42
        assert parse_integer_text("-0") == 0
        assert parse_integer_text("-123456789012345678901234567890") == -123456789012345678901234567890

    def test_rejects_non_decimal(self) -> None:
        """Python-специфичные формы int() не принимаются"""
        for text in ("abc", "", " 5", "5 ", "1_000", "0x1A", "1.0", "١٢"):
            assert parse_integer_text(text) is None, text

    @pytest.mark.skipif(
        not hasattr(sys, "get_int_max_str_digits") or sys.get_int_max_str_digits() == 0,
        reason="int() digit limit not active",
    )
    def test_digit_limit_is_parse_failure(self) -> None:
        """Запись длиннее лимита int() → None, без исключения"""
        assert parse_integer_text("9" * (sys.get_int_max_str_digits() + 1)) is None


class TestParseLexical:
    """Тесты для parse_lexical"""

    def test_text_input_keeps_lexical(self) -> None:
        result = parse_lexical("007")
        assert result.value == 7
        assert result.lexical == "007"
        assert result.parsed

    def test_int_input_has_no_lexical(self) -> None:
        result = parse_lexical(42)
        assert result.value == 42
        assert result.lexical is None

    def test_explicit_lexical_wins(self) -> None:
        assert parse_lexical(5, "05").lexical == "05"
        result = parse_lexical("5", "+5")
        assert result.value == 5
        assert result.lexical == "+5"

    def test_unparsable_text(self) -> None:
        """Ошибка разбора не выбрасывается"""
        result = parse_lexical("abc")
        assert result.value is None
        assert result.lexical == "abc"
        assert not result.parsed

    def test_index_protocol(self) -> None:
        assert isinstance(_Indexable(9), IntegerConvertible)
        result = parse_lexical(_Indexable(9))
        assert result.value == 9
        assert result.lexical is None

    def test_failing_index_is_parse_failure(self) -> None:
        assert parse_lexical(_BrokenIndex()).value is None

    def test_any_index_error_is_parse_failure(self) -> None:
        """Исключение любого типа из __index__ даёт value = None"""
        result = parse_lexical(_OverflowingIndex())
        assert result.value is None
        assert result.lexical is None

    def test_failing_text_form_is_parse_failure(self) -> None:
        """Исключение из __str__ в ветке разбора текста даёт value = None"""
        assert parse_lexical(_BrokenText()).value is None

    def test_failing_text_form_keeps_explicit_lexical(self) -> None:
        result = parse_lexical(_BrokenText(), "12")
        assert result.value is None
        assert result.lexical == "12"

    def test_bool_is_not_integer(self) -> None:
        assert parse_lexical(True).value is None
        assert parse_lexical(False).value is None

    def test_float_is_not_integer(self) -> None:
        """float не реализует __index__; str(3.0) не является целой записью"""
        assert parse_lexical(3.7).value is None
        assert parse_lexical(3.0).value is None

    def test_other_objects_parsed_from_text(self) -> None:
        assert parse_lexical(Decimal("12")).value == 12
        assert parse_lexical(Decimal("12.5")).value is None
        assert parse_lexical(None).value is None
