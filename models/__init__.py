"""Record models for ABA bank files."""

from .fields import (
    FieldDefinition,
    RecordType,
    ValueType,
    PadSide,
    LINE_LENGTH,
    DESCRIPTIVE_LAYOUT,
    TRANSACTION_LAYOUT,
    FILE_TOTAL_LAYOUT,
    check_layout,
    get_layout,
    register_layout,
)
from .records import (
    Record,
    DescriptiveRecord,
    Transaction,
    FileTotalRecord,
    RECORD_CLASSES,
    record_class_for,
)

__all__ = [
    "FieldDefinition",
    "RecordType",
    "ValueType",
    "PadSide",
    "LINE_LENGTH",
    "DESCRIPTIVE_LAYOUT",
    "TRANSACTION_LAYOUT",
    "FILE_TOTAL_LAYOUT",
    "check_layout",
    "get_layout",
    "register_layout",
    "Record",
    "DescriptiveRecord",
    "Transaction",
    "FileTotalRecord",
    "RECORD_CLASSES",
    "record_class_for",
]
