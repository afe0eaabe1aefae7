"""ABA file generation."""

from .generator import Generator
from .totals import calculate_totals, build_file_total_record
from .writer import AbaWriter, write_aba

__all__ = [
    "Generator",
    "calculate_totals",
    "build_file_total_record",
    "AbaWriter",
    "write_aba",
]
