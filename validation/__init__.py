"""Validation module for ABA records."""

from .rules import (
    ValidationError,
    RULES,
    apply_rules,
    get_rule,
    numeric,
    date,
    bsb,
    alphanumeric,
    one_of,
)
from .validator import (
    RecordValidator,
    ValidationResult,
    validate_record,
    validate_batch,
)

__all__ = [
    "ValidationError",
    "RULES",
    "apply_rules",
    "get_rule",
    "numeric",
    "date",
    "bsb",
    "alphanumeric",
    "one_of",
    "RecordValidator",
    "ValidationResult",
    "validate_record",
    "validate_batch",
]
