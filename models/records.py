"""
Record model for ABA files.

A record is a set of attribute values laid over one of the three static
layouts. Values are stored as raw strings and only checked when validate()
is called, so a caller can set every field first and collect all errors
in a single pass.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type

from errors import InvalidArgumentException, UnknownRecordTypeException
from validation.rules import ValidationError, apply_rules
from .fields import FieldDefinition, RecordType, get_layout

logger = logging.getLogger(__name__)


class Record:
    """A single ABA line: a record type, its layout and the caller's values."""

    record_type: RecordType

    def __init__(self, attributes: Optional[Mapping[str, Any]] = None):
        self._attributes: Dict[str, Optional[str]] = {}
        self._fields = {field.name: field for field in self.layout}

        if attributes:
            self.set_attributes(attributes)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._attributes!r})"

    @property
    def layout(self) -> Tuple[FieldDefinition, ...]:
        return get_layout(self.record_type)

    def set_attribute(self, name: str, value: Any) -> "Record":
        """Store a raw value for a field. Returns the record for chaining."""
        if name not in self._fields:
            raise InvalidArgumentException(
                f"{type(self).__name__} has no attribute '{name}'"
            )

        self._attributes[name] = None if value is None else str(value)
        return self

    def set_attributes(self, attributes: Mapping[str, Any]) -> "Record":
        for name, value in attributes.items():
            self.set_attribute(name, value)
        return self

    def get_attribute(self, name: str) -> Optional[str]:
        """Current value of a field, falling back to the layout default."""
        if name not in self._fields:
            raise InvalidArgumentException(
                f"{type(self).__name__} has no attribute '{name}'"
            )

        if name in self._attributes:
            return self._attributes[name]
        return self._fields[name].default

    def get_attributes(self) -> Dict[str, Optional[str]]:
        """Effective value of every field, in layout order."""
        return {field.name: self.get_attribute(field.name) for field in self.layout}

    def validate(self) -> List[ValidationError]:
        """Run every rule of every field and return all failures, in layout order."""
        errors = []

        for field in self.layout:
            errors.extend(apply_rules(field.name, self.get_attribute(field.name), field.rules))

        if errors:
            logger.debug(f"{type(self).__name__} failed {len(errors)} rule check(s)")

        return errors

    def get_attributes_as_line(self) -> str:
        """
        Render the record as a fixed-width line.

        Each value is padded to its field width. Over-long values are kept
        whole, so the result is longer than 120 characters rather than
        silently truncated.
        """
        return "".join(field.pad(self.get_attribute(field.name)) for field in self.layout)


class DescriptiveRecord(Record):
    """Header line identifying the file submitter and processing date."""
    record_type = RecordType.DESCRIPTIVE


class Transaction(Record):
    """Detail line for one credit or debit instruction."""
    record_type = RecordType.TRANSACTION


class FileTotalRecord(Record):
    """Trailer line with net, credit and debit totals and the record count."""
    record_type = RecordType.FILE_TOTAL


RECORD_CLASSES: Dict[RecordType, Type[Record]] = {
    RecordType.DESCRIPTIVE: DescriptiveRecord,
    RecordType.TRANSACTION: Transaction,
    RecordType.FILE_TOTAL: FileTotalRecord,
}


def record_class_for(marker: str) -> Type[Record]:
    """Map a record type marker ("0", "1" or "7") to its record class."""
    try:
        return RECORD_CLASSES[RecordType(marker)]
    except ValueError:
        raise UnknownRecordTypeException(f"Unknown record type '{marker}'") from None
