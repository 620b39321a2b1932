"""
Тесты для доменных моделей: Base, Operator, TableKind, OperationRecord

Проверяет:
1. Разбор tagged variants из enum и строк
2. Создание и валидацию OperationRecord (Pydantic)
3. Immutability (frozen=True)
4. Сериализацию в JSON
"""

import json

import pytest
from pydantic import ValidationError

from src.core.domain import Base, OperationRecord, Operator, TableKind
from src.core.errors import InvalidArgumentError


# =============================================================================
# TAGGED VARIANTS
# =============================================================================


class TestBase:
    """Тесты для Base"""

    def test_parse_from_string(self) -> None:
        assert Base.parse("binary") is Base.BINARY
        assert Base.parse("hexadecimal") is Base.HEXADECIMAL

    def test_parse_enum_passthrough(self) -> None:
        assert Base.parse(Base.BINARY) is Base.BINARY

    def test_parse_invalid(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Base.parse("Binary")
        with pytest.raises(InvalidArgumentError):
            Base.parse(None)

    def test_properties(self) -> None:
        assert Base.BINARY.radix == 2
        assert Base.HEXADECIMAL.radix == 16
        assert not Base.BINARY.signed
        assert Base.HEXADECIMAL.signed
        assert Base.HEXADECIMAL.label == "Hexadecimal"


class TestOperator:
    """Тесты для Operator"""

    @pytest.mark.parametrize(
        "symbol, operator",
        [
            ("+", Operator.ADD),
            ("-", Operator.SUBTRACT),
            ("*", Operator.MULTIPLY),
            ("/", Operator.DIVIDE),
        ],
    )
    def test_parse_symbol(self, symbol: str, operator: Operator) -> None:
        assert Operator.parse(symbol) is operator
        assert operator.symbol == symbol

    def test_parse_invalid(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Not a valid operation"):
            Operator.parse("%")


class TestTableKind:
    """Тесты для TableKind"""

    def test_parse(self) -> None:
        assert TableKind.parse("size") is TableKind.SIZE
        assert TableKind.parse(TableKind.TIME) is TableKind.TIME

    def test_parse_invalid(self) -> None:
        with pytest.raises(InvalidArgumentError):
            TableKind.parse("length")


# =============================================================================
# OPERATION RECORD
# =============================================================================


class TestOperationRecord:
    """Тесты для модели OperationRecord"""

    @pytest.fixture
    def division_record(self) -> OperationRecord:
        """170 / 204 в binary"""
        return OperationRecord(
            operator=Operator.DIVIDE,
            base=Base.BINARY,
            left="10101010",
            right="11001100",
            left_decimal=170,
            right_decimal=204,
            result="0",
            remainder="10101010",
            decimal_result=0,
            decimal_remainder=170,
        )

    def test_creation_from_strings(self) -> None:
        """Enum поля принимают строковые значения"""
        record = OperationRecord(
            operator="+",
            base="hexadecimal",
            left="8AB",
            right="B78",
            left_decimal=2219,
            right_decimal=2936,
            result="1423",
            remainder="8AB",
            decimal_result=5155,
            decimal_remainder=2219,
        )
        assert record.operator is Operator.ADD
        assert record.base is Base.HEXADECIMAL
        assert not record.is_division

    def test_primary_text(self, division_record: OperationRecord) -> None:
        assert division_record.is_division
        assert division_record.primary_text() == "0 Remainder: 10101010"

    def test_expressions(self, division_record: OperationRecord) -> None:
        assert division_record.expression() == "10101010 / 11001100 = 0 Remainder: 10101010"
        assert division_record.decimal_expression() == "170 / 204 = 0 Remainder: 170"

    def test_immutable(self, division_record: OperationRecord) -> None:
        with pytest.raises(ValidationError):
            division_record.result = "1"  # type: ignore[misc]

    def test_empty_result_rejected(self, division_record: OperationRecord) -> None:
        data = division_record.model_dump()
        data["result"] = ""
        with pytest.raises(ValidationError):
            OperationRecord(**data)

    def test_unknown_operator_rejected(self, division_record: OperationRecord) -> None:
        data = division_record.model_dump()
        data["operator"] = "%"
        with pytest.raises(ValidationError):
            OperationRecord(**data)

    def test_json_roundtrip(self, division_record: OperationRecord) -> None:
        """Сериализация/десериализация JSON"""
        payload = division_record.model_dump_json()
        data = json.loads(payload)
        assert data["operator"] == "/"
        assert data["base"] == "binary"
        assert OperationRecord.model_validate_json(payload) == division_record
