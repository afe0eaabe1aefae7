"""
Write generated ABA contents to disk.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from config import generator_config
from models import DescriptiveRecord, FileTotalRecord, Transaction
from .generator import Generator

logger = logging.getLogger(__name__)


class AbaWriter:
    """Write the contents of a Generator to a file, unchanged."""

    def __init__(self, encoding: Optional[str] = None):
        self.encoding = encoding or generator_config.encoding

    def write(self, generator: Generator, output_path: Path) -> Path:
        """
        Write ABA file.

        Args:
            generator: Generator holding the file's records
            output_path: Path for output ABA file

        Returns:
            Path to created file
        """
        output_path = Path(output_path)

        # Generate before touching the filesystem so failures leave nothing behind
        contents = generator.get_contents()

        logger.info(f"Writing {len(generator.records)} records to {output_path}")

        output_path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps the configured line separator byte for byte
        with open(output_path, "w", encoding=self.encoding, newline="") as f:
            f.write(contents)

        logger.info(f"ABA file saved: {output_path}")
        return output_path


def write_aba(
    descriptive_record: DescriptiveRecord,
    transactions: Iterable[Transaction],
    output_path: Path,
    file_total_record: Optional[FileTotalRecord] = None,
) -> Path:
    """Convenience function to generate and write an ABA file."""
    generator = Generator(descriptive_record, transactions, file_total_record)
    return AbaWriter().write(generator, output_path)
