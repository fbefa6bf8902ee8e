"""
Tests for JSON Schema Contract Validators

Тестирование контракта integer_literal:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей, типов, enum и pattern
- Интеграция с IntegerLiteral (to_contract / from_contract)
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from xsd_integer import DomainViolation, IntegerLiteral, XSDDatatype, literal
from xsd_integer.core.contracts import (
    SCHEMA_PATH,
    contract_errors,
    integer_literal_validator,
    is_valid_integer_literal,
    load_integer_literal_schema,
    validate_integer_literal,
)
from xsd_integer.core.contracts import validators


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_integer_literal():
    """Валидный integer_literal для тестирования."""
    return {
        "datatype": "http://www.w3.org/2001/XMLSchema#unsignedByte",
        "lexical": "0255",
    }


# =============================================================================
# SCHEMA LOADING
# =============================================================================


class TestSchemaLoading:
    """Тесты загрузки схемы integer_literal"""

    def test_load_schema(self) -> None:
        schema = load_integer_literal_schema()
        assert schema["title"] == "integer_literal"
        assert "datatype" in schema["required"]

    def test_datatype_enum_matches_vocabulary(self) -> None:
        """Перечисление datatype берётся из XSDDatatype"""
        schema = load_integer_literal_schema()
        assert schema["properties"]["datatype"]["enum"] == [dt.value for dt in XSDDatatype]

    def test_schema_file_has_no_datatype_enum(self) -> None:
        """В файле схемы перечисление не дублируется"""
        raw = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        assert "enum" not in raw["properties"]["datatype"]

    def test_missing_schema(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_integer_literal_schema(tmp_path / "no_such_schema.json")

    def test_invalid_schema(self, tmp_path: Path) -> None:
        broken = tmp_path / "broken.json"
        broken.write_text('{"properties": {"datatype": {"type": 12}}}', encoding="utf-8")
        with pytest.raises(ValueError):
            load_integer_literal_schema(broken)

    def test_validator_built_once(self) -> None:
        assert integer_literal_validator() is integer_literal_validator()

    def test_from_contract_reuses_validator(self, monkeypatch) -> None:
        """from_contract не перечитывает схему"""
        integer_literal_validator()

        def fail(*args, **kwargs):
            raise AssertionError("schema reloaded")

        monkeypatch.setattr(validators, "load_integer_literal_schema", fail)
        lit = IntegerLiteral.from_contract({"datatype": XSDDatatype.INT.value, "lexical": "7"})
        assert lit.value == 7


# =============================================================================
# VALIDATION
# =============================================================================


class TestIntegerLiteralContract:
    """Тесты валидации integer_literal"""

    def test_valid(self, valid_integer_literal) -> None:
        validate_integer_literal(valid_integer_literal)
        assert is_valid_integer_literal(valid_integer_literal)

    def test_missing_lexical(self, valid_integer_literal) -> None:
        del valid_integer_literal["lexical"]
        with pytest.raises(ValidationError):
            validate_integer_literal(valid_integer_literal)

    def test_extra_field(self, valid_integer_literal) -> None:
        valid_integer_literal["value"] = 255
        with pytest.raises(ValidationError):
            validate_integer_literal(valid_integer_literal)

    def test_lexical_must_be_string(self, valid_integer_literal) -> None:
        valid_integer_literal["lexical"] = 255
        with pytest.raises(ValidationError):
            validate_integer_literal(valid_integer_literal)

    def test_lexical_pattern(self, valid_integer_literal) -> None:
        for bad in ("1.5", "", " 1", "0x10", "abc"):
            valid_integer_literal["lexical"] = bad
            with pytest.raises(ValidationError):
                validate_integer_literal(valid_integer_literal)

    def test_foreign_datatype(self, valid_integer_literal) -> None:
        valid_integer_literal["datatype"] = "http://www.w3.org/2001/XMLSchema#decimal"
        with pytest.raises(ValidationError):
            validate_integer_literal(valid_integer_literal)

    def test_contract_errors(self) -> None:
        errors = contract_errors({"lexical": "x"})
        # отсутствует datatype + нарушение pattern
        assert len(errors) == 2
        assert errors[0].startswith("$:")
        assert errors[1].startswith("$.lexical:")

    def test_contract_errors_empty_for_valid(self, valid_integer_literal) -> None:
        assert contract_errors(valid_integer_literal) == []


# =============================================================================
# INTEGRATION
# =============================================================================


class TestLiteralContract:
    """Интеграция контракта с IntegerLiteral"""

    def test_to_contract(self) -> None:
        data = literal("+007", datatype=XSDDatatype.BYTE).to_contract()
        assert data == {"datatype": XSDDatatype.BYTE.value, "lexical": "+007"}
        validate_integer_literal(data)

    def test_to_contract_canonical(self) -> None:
        data = literal(-3).to_contract()
        assert data["lexical"] == "-3"

    def test_from_contract(self, valid_integer_literal) -> None:
        lit = IntegerLiteral.from_contract(valid_integer_literal)
        assert lit.value == 255
        assert lit.datatype is XSDDatatype.UNSIGNED_BYTE
        assert lit.lexical == "0255"

    def test_from_contract_domain_checked(self) -> None:
        data = {"datatype": XSDDatatype.UNSIGNED_BYTE.value, "lexical": "256"}
        with pytest.raises(DomainViolation):
            IntegerLiteral.from_contract(data)
        assert IntegerLiteral.from_contract(data, strict=False).value == 256

    def test_from_contract_rejects_invalid(self) -> None:
        with pytest.raises(ValidationError):
            IntegerLiteral.from_contract({"datatype": XSDDatatype.INTEGER.value, "lexical": "abc"})

    def test_round_trip(self) -> None:
        original = literal("-0042", datatype=XSDDatatype.SHORT)
        restored = IntegerLiteral.from_contract(original.to_contract())
        assert restored == original

    def test_permissive_literal_contract_is_valid(self) -> None:
        """Лексическая форма вне грамматики заменяется канонической записью"""
        lit = literal(5, lexical="five", strict=False)
        data = lit.to_contract()
        assert data == {"datatype": XSDDatatype.INTEGER.value, "lexical": "5"}
        assert IntegerLiteral.from_contract(data).value == 5
        assert lit.lexical == "five"

    def test_permissive_unsigned_contract(self) -> None:
        lit = literal("+5", datatype=XSDDatatype.UNSIGNED_LONG, strict=False)
        data = lit.to_contract()
        validate_integer_literal(data)
        assert IntegerLiteral.from_contract(data).value == 5
