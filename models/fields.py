"""
Field definitions and record layouts for the ABA format.

A layout is an ordered tuple of FieldDefinition objects. Layouts are
registered once at import time, checked to span positions 1..120 exactly,
and never modified afterwards.
"""

from enum import Enum
from typing import Dict, Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from errors import LayoutError
from validation.rules import RULES


# Every ABA record line is exactly this long
LINE_LENGTH = 120


class RecordType(str, Enum):
    """Record type marker found at position 1 of every line."""
    DESCRIPTIVE = "0"
    TRANSACTION = "1"
    FILE_TOTAL = "7"


class ValueType(str, Enum):
    NUMERIC = "numeric"
    ALPHANUMERIC = "alphanumeric"
    DATE = "date"


class PadSide(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class FieldDefinition(BaseModel):
    """Static metadata describing one positioned field of a record."""

    model_config = ConfigDict(frozen=True)

    name: str
    start_position: int = Field(ge=1, description="1-based offset within the line")
    width: int = Field(ge=1)
    value_type: ValueType = ValueType.ALPHANUMERIC
    pad_side: Optional[PadSide] = None
    pad_char: Optional[str] = None
    rules: Tuple[str, ...] = ()
    default: Optional[str] = None

    @field_validator("pad_char")
    @classmethod
    def check_pad_char(cls, v):
        if v is not None and len(v) != 1:
            raise ValueError("pad_char must be a single character")
        return v

    @model_validator(mode="after")
    def apply_padding_defaults(self):
        # Numbers and dates are zero filled on the left, text is space filled on the right
        if self.pad_side is None:
            side = PadSide.RIGHT if self.value_type == ValueType.ALPHANUMERIC else PadSide.LEFT
            object.__setattr__(self, "pad_side", side)
        if self.pad_char is None:
            char = " " if self.value_type == ValueType.ALPHANUMERIC else "0"
            object.__setattr__(self, "pad_char", char)
        return self

    @property
    def end_position(self) -> int:
        """Last position (inclusive) covered by this field."""
        return self.start_position + self.width - 1

    def pad(self, value: Optional[str]) -> str:
        """
        Pad a value out to the field width.

        Values longer than the width are returned unchanged; the caller
        detects the overflow from the length of the rendered line.
        """
        value = "" if value is None else value
        if self.pad_side == PadSide.LEFT:
            return value.rjust(self.width, self.pad_char)
        return value.ljust(self.width, self.pad_char)

    def extract(self, line: str) -> str:
        """Slice this field out of a rendered line and strip its padding."""
        raw = line[self.start_position - 1:self.end_position]

        # Dates are always six significant digits
        if self.value_type == ValueType.DATE:
            return raw
        if self.pad_side == PadSide.LEFT:
            return raw.lstrip(self.pad_char)
        return raw.rstrip(self.pad_char)


def check_layout(fields: Iterable[FieldDefinition]) -> None:
    """Ensure fields are contiguous, non-overlapping and span 1..LINE_LENGTH."""
    expected_start = 1
    names = set()

    for field in fields:
        if field.name in names:
            raise LayoutError(f"Duplicate field name: {field.name}")
        names.add(field.name)

        unknown = [rule for rule in field.rules if rule not in RULES]
        if unknown:
            raise LayoutError(f"Field {field.name} uses unknown rule(s): {', '.join(unknown)}")

        if field.start_position != expected_start:
            raise LayoutError(
                f"Field {field.name} starts at {field.start_position}, expected {expected_start}"
            )
        expected_start = field.end_position + 1

    if expected_start != LINE_LENGTH + 1:
        raise LayoutError(f"Layout covers {expected_start - 1} characters, expected {LINE_LENGTH}")


_LAYOUTS: Dict[RecordType, Tuple[FieldDefinition, ...]] = {}


def register_layout(record_type: RecordType, fields: Iterable[FieldDefinition]) -> Tuple[FieldDefinition, ...]:
    """Check and register the layout for a record type. Each type registers once."""
    layout = tuple(fields)

    if record_type in _LAYOUTS:
        raise LayoutError(f"Layout for record type {record_type.value} already registered")

    check_layout(layout)

    if layout[0].default != record_type.value:
        raise LayoutError(f"First field must default to record type {record_type.value}")

    _LAYOUTS[record_type] = layout
    return layout


def get_layout(record_type: RecordType) -> Tuple[FieldDefinition, ...]:
    return _LAYOUTS[record_type]


def _field(name, start, width, value_type=ValueType.ALPHANUMERIC, rules=(), default=None, **kwargs):
    return FieldDefinition(
        name=name,
        start_position=start,
        width=width,
        value_type=value_type,
        rules=tuple(rules),
        default=default,
        **kwargs,
    )


DESCRIPTIVE_LAYOUT = register_layout(RecordType.DESCRIPTIVE, [
    _field("recordType", 1, 1, default=RecordType.DESCRIPTIVE.value),
    _field("blank1", 2, 17),
    _field("reelSequenceNumber", 19, 2, ValueType.NUMERIC, ["numeric"], default="01"),
    _field("userFinancialInstitution", 21, 3),
    _field("blank2", 24, 7),
    _field("nameOfUserSupplyingFile", 31, 26),
    _field("numberOfUserSupplyingFile", 57, 6, ValueType.NUMERIC, ["numeric"]),
    _field("descriptionOfEntries", 63, 12),
    _field("dateToBeProcessed", 75, 6, ValueType.DATE, ["date"]),
    _field("blank3", 81, 40),
])

TRANSACTION_LAYOUT = register_layout(RecordType.TRANSACTION, [
    _field("recordType", 1, 1, default=RecordType.TRANSACTION.value),
    _field("bsbNumber", 2, 7, rules=["bsb"]),
    # Account numbers are right justified and blank filled
    _field("accountNumber", 9, 9, pad_side=PadSide.LEFT),
    _field("indicator", 18, 1, rules=["indicator"], default=""),
    _field("transactionCode", 19, 2, ValueType.NUMERIC, ["numeric", "transaction_code"]),
    _field("amount", 21, 10, ValueType.NUMERIC, ["numeric"]),
    _field("titleOfAccount", 31, 32),
    _field("lodgementReference", 63, 18),
    _field("traceRecord", 81, 7, rules=["bsb"]),
    _field("accountNumberOfRemitter", 88, 9, pad_side=PadSide.LEFT),
    _field("nameOfRemitter", 97, 16),
    _field("amountOfWithholdingTax", 113, 8, ValueType.NUMERIC, ["numeric"], default="0"),
])

FILE_TOTAL_LAYOUT = register_layout(RecordType.FILE_TOTAL, [
    _field("recordType", 1, 1, default=RecordType.FILE_TOTAL.value),
    _field("bsbFormatFiller", 2, 7, rules=["bsb"], default="999-999"),
    _field("blank1", 9, 12),
    _field("fileUserNetTotalAmount", 21, 10, ValueType.NUMERIC, ["numeric"], default="0"),
    _field("fileUserCreditTotalAmount", 31, 10, ValueType.NUMERIC, ["numeric"], default="0"),
    _field("fileUserDebitTotalAmount", 41, 10, ValueType.NUMERIC, ["numeric"], default="0"),
    _field("blank2", 51, 24),
    _field("fileUserCountOfRecordsType1", 75, 6, ValueType.NUMERIC, ["numeric"], default="0"),
    _field("blank3", 81, 40),
])
