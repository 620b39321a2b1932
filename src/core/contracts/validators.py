"""
JSON Schema Contract Validators

Модуль для валидации JSON-представления результатов ядра согласно
формальным JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (src/core/contracts/schema/):
- operation_record.json — результат арифметической операции
- website_bandwidth.json — результат расчёта bandwidth сайта
- size_conversions.json — размер, переведённый во все единицы
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.operation import OperationRecord
from src.core.domain.units import DEFAULT_TABLES, ConversionTables, convert_all_size_units


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'operation_record')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация JSON-представления результата против схемы.

        Args:
            data: Payload (например, из operation_record_payload)

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class OperationRecordValidator(ContractValidator):
    def __init__(self):
        super().__init__("operation_record")


class WebsiteBandwidthValidator(ContractValidator):
    def __init__(self):
        super().__init__("website_bandwidth")


class SizeConversionsValidator(ContractValidator):
    def __init__(self):
        super().__init__("size_conversions")


# =============================================================================
# PAYLOADS
# =============================================================================


def operation_record_payload(record: OperationRecord) -> Dict[str, Any]:
    """JSON-представление OperationRecord."""
    return record.model_dump(mode="json")


def size_conversions_payload(
    value: float,
    unit: str,
    tables: ConversionTables = DEFAULT_TABLES,
) -> Dict[str, Any]:
    """
    JSON-представление convert_all_size_units.

    Raises:
        UnknownUnitError: если unit не является единицей размера
    """
    return {
        "value": value,
        "unit": unit,
        "conversions": [
            {"unit": u, "value": v} for u, v in convert_all_size_units(value, unit, tables)
        ],
    }


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_operation_record(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    OperationRecordValidator().validate(data)


def validate_website_bandwidth(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    WebsiteBandwidthValidator().validate(data)


def validate_size_conversions(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    SizeConversionsValidator().validate(data)
