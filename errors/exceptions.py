"""
Error kinds raised while building, generating and parsing ABA files.

Generation failures are split into three non-overlapping kinds:

- InvalidArgumentException: the API was called with the wrong shape of input
  (empty transaction list, wrong record type). Raised before any validation.
- ValidationFailedException: one or more attribute values failed a rule.
  Carries every failure across every record, in file order.
- LengthMismatchesException: a rendered line is not exactly 120 characters,
  meaning a value overflowed its field. Only raised once validation passed.
"""

from typing import Any, Dict, List, Optional


class BankFilesException(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentException(BankFilesException):
    """Structural misuse of the API."""


class LayoutError(BankFilesException):
    """A record layout does not describe a valid 120 character line."""


class ValidationFailedException(BankFilesException):
    """One or more attribute values failed validation."""

    def __init__(self, errors: List[Any], message: Optional[str] = None):
        self.errors = list(errors)
        super().__init__(message or f"Validation failed with {len(self.errors)} error(s)")

    def get_errors(self) -> List[Any]:
        return self.errors

    def to_list(self) -> List[Dict[str, Any]]:
        """Errors as plain dictionaries, for reporting."""
        return [error.to_dict() for error in self.errors]


class LengthMismatchesException(BankFilesException):
    """A rendered record line does not have the fixed line length."""

    def __init__(self, mismatches: List[Dict[str, Any]], message: Optional[str] = None):
        self.mismatches = list(mismatches)
        if message is None:
            summary = ", ".join(
                f"line {m['line']} ({m['record_type']}) is {m['length']} characters"
                for m in self.mismatches
            )
            message = f"Record length mismatch: {summary}"
        super().__init__(message)


class ParserException(BankFilesException):
    """Raw content could not be decoded into records."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)


class InvalidLineLengthException(ParserException):
    """A line is not exactly 120 characters long."""


class UnknownRecordTypeException(ParserException):
    """A line starts with a record type marker outside the standard."""


class InvalidFileStructureException(ParserException):
    """Records appear in an order the standard does not allow."""
