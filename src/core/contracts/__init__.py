"""
Contract Validation Module

Модуль для валидации JSON-представления результатов калькулятора.
"""

from .validators import (
    ContractValidator,
    OperationRecordValidator,
    SchemaLoader,
    SizeConversionsValidator,
    WebsiteBandwidthValidator,
    operation_record_payload,
    size_conversions_payload,
    validate_operation_record,
    validate_size_conversions,
    validate_website_bandwidth,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "OperationRecordValidator",
    "WebsiteBandwidthValidator",
    "SizeConversionsValidator",
    # Payloads
    "operation_record_payload",
    "size_conversions_payload",
    # Functions
    "validate_operation_record",
    "validate_website_bandwidth",
    "validate_size_conversions",
]
