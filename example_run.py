#!/usr/bin/env python3
"""
Example script to build a sample ABA file end to end.
This script demonstrates record building, validation, generation and parsing.

Usage:
    python example_run.py
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from config import app_config
from errors import ValidationFailedException
from generator import Generator, build_file_total_record, write_aba
from models import DescriptiveRecord, Transaction
from parsing import AbaParser
from validation import validate_batch


SAMPLE_PAYMENTS = [
    # (bsb, account, name, amount in cents, reference)
    ("082-001", "694251884", "Acme Supplies Pty Ltd", 12555, "INV-10023"),
    ("063-000", "12345678", "J Citizen", 250000, "PAYROLL OCT"),
    ("033-118", "448812", "Northside Plumbing", 98010, "INV-77"),
]


def build_records():
    descriptive = DescriptiveRecord({
        "userFinancialInstitution": "CBA",
        "nameOfUserSupplyingFile": "EXAMPLE COMPANY",
        "numberOfUserSupplyingFile": "301500",
        "descriptionOfEntries": "PAYMENTS",
        "dateToBeProcessed": "171026",
    })

    transactions = []
    for bsb, account, name, amount, reference in SAMPLE_PAYMENTS:
        transactions.append(Transaction({
            "bsbNumber": bsb,
            "accountNumber": account,
            "transactionCode": "53",
            "amount": amount,
            "titleOfAccount": name,
            "lodgementReference": reference,
            "traceRecord": "062-111",
            "accountNumberOfRemitter": "111111111",
            "nameOfRemitter": "EXAMPLE COMPANY",
        }))

    return descriptive, transactions


def main():
    print("=" * 60)
    print("ABA Bank File Generator - Example Run")
    print("=" * 60)
    print()

    descriptive, transactions = build_records()
    total = build_file_total_record(transactions)

    print(f"Built {len(transactions)} transactions:")
    for t in transactions:
        print(f"  - {t.get_attribute('bsbNumber')} {t.get_attribute('accountNumber'):>9} "
              f"{int(t.get_attribute('amount')) / 100:>12,.2f}  {t.get_attribute('titleOfAccount')}")
    print()

    # Validate records
    print("-" * 60)
    print("Validating records...")
    print()

    results = validate_batch([descriptive, *transactions, total])
    for result in results:
        status = "OK" if result.is_valid else "FLAG"
        print(f"  [{status}] record type {result.record_type}")
        for error in result.errors:
            print(f"       - {error.attribute}: {error.value!r} fails {error.rule}")
    print()

    # Generate
    generator = Generator(descriptive, transactions, total)
    try:
        contents = generator.get_contents()
    except ValidationFailedException as e:
        print(f"✗ Generation failed: {e}")
        sys.exit(1)

    output_path = app_config.output_dir / "sample.aba"
    write_aba(descriptive, transactions, output_path, total)

    print("-" * 60)
    print(f"✓ ABA file generated: {output_path}")
    print()
    for line in generator.get_lines():
        print(f"  |{line}|")
    print()

    # Parse it back
    print("-" * 60)
    print("Verifying round trip...")
    print()

    parser = AbaParser(output_path.read_text(encoding="ascii"))
    reparsed = [record.get_attributes_as_line() for record in parser.get_records()]

    if reparsed == generator.get_lines():
        print("✓ Parsed records render identically")
    else:
        print("✗ Parsed records differ from generated lines")
        sys.exit(1)

    print()
    print("=" * 60)
    print(f"Credit total: {int(total.get_attribute('fileUserCreditTotalAmount')) / 100:,.2f}")
    print(f"Output file:  {output_path.absolute()}")
    print("=" * 60)


if __name__ == "__main__":
    main()
