"""
File total calculation.
Derives the trailer record from a list of transactions.
"""

from typing import Dict, Iterable

from errors import ValidationFailedException
from models import FileTotalRecord, Transaction
from validation import RecordValidator

DEBIT_CODES = ("13",)
CREDIT_CODES = ("50", "51", "52", "53", "54", "55", "56", "57")


def calculate_totals(transactions: Iterable[Transaction]) -> Dict[str, int]:
    """
    Sum transaction amounts (in cents) by direction.

    The transactions are validated first, so an amount or code the numeric
    and transaction code rules reject fails here the same way it fails in
    the generator.

    Returns:
        Dict with credit, debit, net (absolute difference) and count

    Raises:
        ValidationFailedException: If any transaction fails its rules
    """
    transactions = list(transactions)

    errors = RecordValidator().collect_errors(transactions)
    if errors:
        raise ValidationFailedException(errors)

    credit = 0
    debit = 0

    for transaction in transactions:
        # An empty amount zero-fills when rendered
        amount = int(transaction.get_attribute("amount") or "0")

        code = transaction.get_attribute("transactionCode")
        if code in DEBIT_CODES:
            debit += amount
        elif code in CREDIT_CODES:
            credit += amount

    return {
        "credit": credit,
        "debit": debit,
        "net": abs(credit - debit),
        "count": len(transactions),
    }


def build_file_total_record(transactions: Iterable[Transaction]) -> FileTotalRecord:
    """Build a FileTotalRecord matching the given transactions."""
    totals = calculate_totals(transactions)

    return FileTotalRecord({
        "fileUserNetTotalAmount": totals["net"],
        "fileUserCreditTotalAmount": totals["credit"],
        "fileUserDebitTotalAmount": totals["debit"],
        "fileUserCountOfRecordsType1": totals["count"],
    })
