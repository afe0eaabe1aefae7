"""
ABA file generator.
Composes a descriptive record, its transactions and an optional file total
record into file contents, validating everything before rendering.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from config import generator_config
from errors import (
    InvalidArgumentException,
    LengthMismatchesException,
    ValidationFailedException,
)
from models import (
    LINE_LENGTH,
    DescriptiveRecord,
    FileTotalRecord,
    Record,
    Transaction,
)
from validation import RecordValidator, ValidationError

logger = logging.getLogger(__name__)


class Generator:
    """
    Generate the contents of one ABA file.

    Generation runs in two passes over every record, in file order:

    1. Validation: every rule of every record is checked and all failures
       are raised together as a ValidationFailedException.
    2. Structure: every rendered line must be exactly 120 characters,
       otherwise a LengthMismatchesException is raised.

    Contents are only returned when both passes succeed.
    """

    def __init__(
        self,
        descriptive_record: DescriptiveRecord,
        transactions: Iterable[Transaction],
        file_total_record: Optional[FileTotalRecord] = None,
        line_separator: Optional[str] = None,
    ):
        if not isinstance(descriptive_record, DescriptiveRecord):
            raise InvalidArgumentException(
                f"Descriptive record must be a DescriptiveRecord, got {type(descriptive_record).__name__}"
            )

        if isinstance(transactions, (str, Record)) or transactions is None:
            raise InvalidArgumentException("Transactions must be a sequence of Transaction records")

        try:
            transactions = list(transactions)
        except TypeError:
            raise InvalidArgumentException("Transactions must be a sequence of Transaction records") from None

        if not transactions:
            raise InvalidArgumentException("At least one transaction is required")

        for index, transaction in enumerate(transactions):
            if not isinstance(transaction, Transaction):
                raise InvalidArgumentException(
                    f"Transaction {index} must be a Transaction, got {type(transaction).__name__}"
                )

        if file_total_record is not None and not isinstance(file_total_record, FileTotalRecord):
            raise InvalidArgumentException(
                f"File total record must be a FileTotalRecord, got {type(file_total_record).__name__}"
            )

        self.descriptive_record = descriptive_record
        self.transactions = transactions
        self.file_total_record = file_total_record
        self.line_separator = (
            generator_config.line_separator if line_separator is None else line_separator
        )

    @property
    def records(self) -> List[Record]:
        """All records in file order."""
        records = [self.descriptive_record, *self.transactions]
        if self.file_total_record is not None:
            records.append(self.file_total_record)
        return records

    def validate(self) -> List[ValidationError]:
        """Errors from the descriptive record, then each transaction, then the total."""
        return RecordValidator().collect_errors(self.records)

    def get_lines(self) -> List[str]:
        """Validate and render every record, returning the lines in file order."""
        records = self.records
        logger.info(f"Generating ABA contents for {len(self.transactions)} transaction(s)")

        errors = self.validate()
        if errors:
            logger.warning(f"Generation aborted: {len(errors)} validation error(s)")
            raise ValidationFailedException(errors)

        lines = []
        mismatches: List[Dict[str, Any]] = []

        for position, record in enumerate(records, start=1):
            line = record.get_attributes_as_line()
            if len(line) != LINE_LENGTH:
                mismatches.append({
                    "line": position,
                    "record_type": record.record_type.value,
                    "length": len(line),
                })
            lines.append(line)

        if mismatches:
            logger.warning(f"Generation aborted: {len(mismatches)} line length mismatch(es)")
            raise LengthMismatchesException(mismatches)

        return lines

    def get_contents(self) -> str:
        """Full file contents, lines joined by the line separator."""
        return self.line_separator.join(self.get_lines())
