"""
Domain models and value objects.

Tagged variants (Base, Operator, TableKind), OperationRecord and the unit
conversion tables.
"""

from src.core.domain.operation import OperationRecord
from src.core.domain.radix import Base, Operator, TableKind
from src.core.domain.units import (
    BANDWIDTH_TABLE,
    BANDWIDTH_UNITS,
    BYTE_SIZE_UNITS,
    DEFAULT_TABLES,
    SIZE_TABLE,
    SIZE_UNITS,
    TIME_TABLE,
    TIME_UNITS,
    ConversionTables,
    UnitTable,
    build_conversion_tables,
    convert_all_size_units,
    convert_unit,
    describe_size_conversions,
    format_number,
)

__all__ = [
    # Tagged variants
    "Base",
    "Operator",
    "TableKind",
    # Operation record
    "OperationRecord",
    # Units module
    "SIZE_UNITS",
    "BYTE_SIZE_UNITS",
    "BANDWIDTH_UNITS",
    "TIME_UNITS",
    "DEFAULT_TABLES",
    "SIZE_TABLE",
    "BANDWIDTH_TABLE",
    "TIME_TABLE",
    "UnitTable",
    "ConversionTables",
    "build_conversion_tables",
    "convert_unit",
    "convert_all_size_units",
    "describe_size_conversions",
    "format_number",
]
