"""ABA file parsing."""

from .base import BaseParser
from .aba_parser import AbaParser, ParsedFile, parse_aba

__all__ = [
    "BaseParser",
    "AbaParser",
    "ParsedFile",
    "parse_aba",
]
