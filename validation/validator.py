"""
Batch validation of ABA records.
Collects every rule failure across a set of records without stopping at the first.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from .rules import ValidationError

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of validation for a single record."""
    record_type: str
    errors: List[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


class RecordValidator:
    """Validator for ABA records."""

    def validate(self, record) -> ValidationResult:
        """
        Validate a single record.

        Args:
            record: DescriptiveRecord, Transaction or FileTotalRecord

        Returns:
            ValidationResult with every failed rule
        """
        return ValidationResult(
            record_type=record.record_type.value,
            errors=record.validate(),
        )

    def validate_batch(self, records: Iterable) -> List[ValidationResult]:
        """
        Validate records in order.

        Args:
            records: Records in file order

        Returns:
            List of ValidationResults, one per record
        """
        results = [self.validate(record) for record in records]

        invalid = sum(1 for r in results if not r.is_valid)
        if invalid:
            logger.info(f"{invalid} of {len(results)} records failed validation")

        return results

    def collect_errors(self, records: Iterable) -> List[ValidationError]:
        """Flatten the errors of every record into one ordered list."""
        errors = []
        for result in self.validate_batch(records):
            errors.extend(result.errors)
        return errors


def validate_record(record) -> ValidationResult:
    """Convenience function to validate a single record."""
    validator = RecordValidator()
    return validator.validate(record)


def validate_batch(records: Iterable) -> List[ValidationResult]:
    """Convenience function to validate a batch of records."""
    validator = RecordValidator()
    return validator.validate_batch(records)
