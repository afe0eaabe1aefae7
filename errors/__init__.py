"""Exceptions for ABA file generation and parsing."""

from .exceptions import (
    BankFilesException,
    InvalidArgumentException,
    LayoutError,
    ValidationFailedException,
    LengthMismatchesException,
    ParserException,
    InvalidLineLengthException,
    UnknownRecordTypeException,
    InvalidFileStructureException,
)

__all__ = [
    "BankFilesException",
    "InvalidArgumentException",
    "LayoutError",
    "ValidationFailedException",
    "LengthMismatchesException",
    "ParserException",
    "InvalidLineLengthException",
    "UnknownRecordTypeException",
    "InvalidFileStructureException",
]
