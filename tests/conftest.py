"""
Pytest configuration and fixtures for ABA bank file tests.
"""

import pytest
from pathlib import Path
import tempfile
import shutil

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from models import DescriptiveRecord, Transaction, FileTotalRecord


DESCRIPTIVE_ATTRIBUTES = {
    "reelSequenceNumber": "01",
    "userFinancialInstitution": "CBA",
    "nameOfUserSupplyingFile": "SAMPLE PAYMENTS PTY LTD",
    "numberOfUserSupplyingFile": "492627",
    "descriptionOfEntries": "PAYROLL",
    "dateToBeProcessed": "100817",
}

TRANSACTION_ATTRIBUTES = {
    "bsbNumber": "083-170",
    "accountNumber": "739827524",
    "indicator": "",
    "transactionCode": "53",
    "amount": "0000012555",
    "titleOfAccount": "Jane Smith",
    "lodgementReference": "Invoice 1001",
    "traceRecord": "062-184",
    "accountNumberOfRemitter": "123456789",
    "nameOfRemitter": "Sample Payments",
    "amountOfWithholdingTax": "0",
}

FILE_TOTAL_ATTRIBUTES = {
    "bsbFormatFiller": "999-999",
    "fileUserNetTotalAmount": "25110",
    "fileUserCreditTotalAmount": "25110",
    "fileUserDebitTotalAmount": "0",
    "fileUserCountOfRecordsType1": "2",
}


@pytest.fixture
def make_descriptive_record():
    """Factory for a valid descriptive record, with optional overrides."""
    def factory(**overrides) -> DescriptiveRecord:
        return DescriptiveRecord({**DESCRIPTIVE_ATTRIBUTES, **overrides})
    return factory


@pytest.fixture
def make_transaction():
    """Factory for a valid credit transaction, with optional overrides."""
    def factory(**overrides) -> Transaction:
        return Transaction({**TRANSACTION_ATTRIBUTES, **overrides})
    return factory


@pytest.fixture
def make_file_total_record():
    """Factory for a file total matching two fixture transactions."""
    def factory(**overrides) -> FileTotalRecord:
        return FileTotalRecord({**FILE_TOTAL_ATTRIBUTES, **overrides})
    return factory


@pytest.fixture
def descriptive_record(make_descriptive_record) -> DescriptiveRecord:
    return make_descriptive_record()


@pytest.fixture
def transaction(make_transaction) -> Transaction:
    return make_transaction()


@pytest.fixture
def file_total_record(make_file_total_record) -> FileTotalRecord:
    return make_file_total_record()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    temp = tempfile.mkdtemp()
    yield Path(temp)
    shutil.rmtree(temp, ignore_errors=True)
