"""
ABA file parser.
Decodes raw ABA contents back into records using the same field layouts the
generator renders with.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from config import parser_config
from errors import (
    InvalidFileStructureException,
    InvalidLineLengthException,
    UnknownRecordTypeException,
)
from models import (
    LINE_LENGTH,
    DescriptiveRecord,
    FileTotalRecord,
    Record,
    Transaction,
    record_class_for,
)
from .base import BaseParser

logger = logging.getLogger(__name__)

# Only CR and LF end a record; other control characters are field data
LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass
class ParsedFile:
    """Records decoded from one ABA file."""
    descriptive_record: DescriptiveRecord
    transactions: List[Transaction] = field(default_factory=list)
    file_total_record: Optional[FileTotalRecord] = None

    @property
    def records(self) -> List[Record]:
        records = [self.descriptive_record, *self.transactions]
        if self.file_total_record is not None:
            records.append(self.file_total_record)
        return records


class AbaParser(BaseParser):
    """
    Parser for ABA contents.

    Contents are decoded lazily on first access. Decoding does not run
    validation; call validate() on the returned records to check them.
    """

    def __init__(self, contents: str, strict: Optional[bool] = None):
        super().__init__(contents)
        self.strict = parser_config.strict_line_length if strict is None else strict
        self._parsed: Optional[ParsedFile] = None

    def parse(self) -> ParsedFile:
        """Decode every line and check the records appear in file order."""
        if self._parsed is not None:
            return self._parsed

        descriptive = None
        transactions = []
        total = None

        for line_number, line in self._lines():
            record = self.parse_line(line, line_number)

            if isinstance(record, DescriptiveRecord):
                if line_number != 1 or descriptive is not None:
                    raise InvalidFileStructureException(
                        "Descriptive record must be the first and only header line", line_number
                    )
                descriptive = record
            elif descriptive is None:
                raise InvalidFileStructureException("File must start with a descriptive record", line_number)
            elif total is not None:
                raise InvalidFileStructureException("No records may follow the file total record", line_number)
            elif isinstance(record, FileTotalRecord):
                total = record
            else:
                transactions.append(record)

        if descriptive is None:
            raise InvalidFileStructureException("File contains no records")

        logger.debug(
            f"Parsed ABA contents: {len(transactions)} transaction(s), "
            f"file total {'present' if total else 'absent'}"
        )

        self._parsed = ParsedFile(
            descriptive_record=descriptive,
            transactions=transactions,
            file_total_record=total,
        )
        return self._parsed

    def parse_line(self, line: str, line_number: Optional[int] = None) -> Record:
        """Decode a single 120 character line into a record of the matching type."""
        if len(line) != LINE_LENGTH:
            if self.strict or len(line) > LINE_LENGTH:
                raise InvalidLineLengthException(
                    f"Expected {LINE_LENGTH} characters, got {len(line)}", line_number
                )
            # Editors often strip trailing blanks
            line = line.ljust(LINE_LENGTH)

        marker = line[0]
        try:
            record_class = record_class_for(marker)
        except UnknownRecordTypeException:
            raise UnknownRecordTypeException(f"Unknown record type '{marker}'", line_number) from None

        record = record_class()
        for field_def in record.layout:
            record.set_attribute(field_def.name, field_def.extract(line))

        return record

    def get_descriptive_record(self) -> DescriptiveRecord:
        return self.parse().descriptive_record

    def get_transactions(self) -> List[Transaction]:
        return self.parse().transactions

    def get_file_total_record(self) -> Optional[FileTotalRecord]:
        return self.parse().file_total_record

    def get_records(self) -> List[Record]:
        return self.parse().records

    def _lines(self):
        """Yield (line_number, line) pairs, skipping blank trailing lines."""
        lines = LINE_BREAK.split(self.contents)

        while lines and not lines[-1].strip():
            lines.pop()

        for line_number, line in enumerate(lines, start=1):
            yield line_number, line


def parse_aba(contents: str) -> ParsedFile:
    """Convenience function to parse ABA contents."""
    return AbaParser(contents).parse()
