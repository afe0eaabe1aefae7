"""
Tests for ABA file generation.
"""

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from errors import (
    InvalidArgumentException,
    LengthMismatchesException,
    ValidationFailedException,
)
from generator import Generator, build_file_total_record, calculate_totals
from models import LINE_LENGTH, FileTotalRecord
from validation import ValidationError


class TestGeneratorArguments:
    """Structural misuse is rejected at construction."""

    def test_empty_transactions(self, descriptive_record):
        with pytest.raises(InvalidArgumentException):
            Generator(descriptive_record, [])

    def test_empty_transactions_with_invalid_descriptive(self, make_descriptive_record):
        with pytest.raises(InvalidArgumentException):
            Generator(make_descriptive_record(dateToBeProcessed="bad"), [])

    def test_invalid_transaction(self, descriptive_record):
        with pytest.raises(InvalidArgumentException):
            Generator(descriptive_record, ["invalid"])

    def test_wrong_record_type_in_transactions(self, descriptive_record, transaction, file_total_record):
        with pytest.raises(InvalidArgumentException):
            Generator(descriptive_record, [transaction, file_total_record])

    def test_single_transaction_not_in_sequence(self, descriptive_record, transaction):
        with pytest.raises(InvalidArgumentException):
            Generator(descriptive_record, transaction)

    def test_invalid_descriptive_record(self, transaction):
        with pytest.raises(InvalidArgumentException):
            Generator(transaction, [transaction])

    def test_invalid_file_total_record(self, descriptive_record, transaction):
        with pytest.raises(InvalidArgumentException):
            Generator(descriptive_record, [transaction], transaction)

    def test_accepts_any_iterable(self, descriptive_record, transaction):
        generator = Generator(descriptive_record, (t for t in [transaction]))
        assert generator.transactions == [transaction]


class TestGeneratorContents:

    def test_should_return_contents(self, descriptive_record, transaction):
        generator = Generator(descriptive_record, [transaction])

        contents = generator.get_contents()
        assert contents
        assert descriptive_record.get_attributes_as_line() in contents

    def test_every_line_is_fixed_width(self, descriptive_record, make_transaction, file_total_record):
        transactions = [make_transaction(amount=str(n)) for n in (1, 20, 300)]
        contents = Generator(descriptive_record, transactions, file_total_record).get_contents()

        lines = contents.split("\r\n")
        assert len(lines) == 5
        assert all(len(line) == LINE_LENGTH for line in lines)

    def test_values_present_in_order(self, descriptive_record, make_transaction, file_total_record):
        first = make_transaction(titleOfAccount="First")
        second = make_transaction(titleOfAccount="Second")

        generator = Generator(descriptive_record, [first, second], file_total_record)
        contents = generator.get_contents()

        expected = [
            descriptive_record.get_attributes_as_line(),
            first.get_attributes_as_line(),
            second.get_attributes_as_line(),
            file_total_record.get_attributes_as_line(),
        ]
        assert contents == "\r\n".join(expected)

        positions = [contents.index(line) for line in expected]
        assert positions == sorted(positions)

    def test_total_is_optional(self, descriptive_record, transaction):
        lines = Generator(descriptive_record, [transaction]).get_lines()
        assert [line[0] for line in lines] == ["0", "1"]

    def test_custom_line_separator(self, descriptive_record, transaction):
        contents = Generator(descriptive_record, [transaction], line_separator="\n").get_contents()
        assert "\r" not in contents
        assert len(contents.split("\n")) == 2

    def test_generator_is_repeatable(self, descriptive_record, transaction):
        generator = Generator(descriptive_record, [transaction])
        assert generator.get_contents() == generator.get_contents()


class TestGeneratorValidation:

    def test_attributes_with_rules_are_required(self, descriptive_record, make_transaction):
        transaction = make_transaction(transactionCode=None)

        with pytest.raises(ValidationFailedException):
            Generator(descriptive_record, [transaction]).get_contents()

    def test_validation_errors_are_batched(self, make_descriptive_record, transaction):
        descriptive = make_descriptive_record()
        descriptive.set_attribute("numberOfUserSupplyingFile", "49262x").set_attribute("dateToBeProcessed", "10081Q")

        with pytest.raises(ValidationFailedException) as exc_info:
            Generator(descriptive, [transaction]).get_contents()

        assert exc_info.value.get_errors() == [
            ValidationError("numberOfUserSupplyingFile", "49262x", "numeric"),
            ValidationError("dateToBeProcessed", "10081Q", "date"),
        ]

    def test_wrong_bsb_format(self, descriptive_record, make_transaction):
        transaction = make_transaction(bsbNumber="1112333")

        with pytest.raises(ValidationFailedException) as exc_info:
            Generator(descriptive_record, [transaction]).get_contents()

        assert exc_info.value.to_list()[0] == {
            "attribute": "bsbNumber",
            "value": "1112333",
            "rule": "bsb",
        }

        transaction.set_attribute("bsbNumber", "111--33")
        with pytest.raises(ValidationFailedException):
            Generator(descriptive_record, [transaction]).get_contents()

        transaction.set_attribute("bsbNumber", "111-222")
        assert Generator(descriptive_record, [transaction]).get_contents()

    def test_trailing_newline_in_values_rejected(self, descriptive_record, make_transaction):
        # A newline would otherwise split the rendered record in two
        transaction = make_transaction(amount="12555\n", traceRecord="062-184\n")

        with pytest.raises(ValidationFailedException) as exc_info:
            Generator(descriptive_record, [transaction]).get_contents()

        assert exc_info.value.get_errors() == [
            ValidationError("amount", "12555\n", "numeric"),
            ValidationError("traceRecord", "062-184\n", "bsb"),
        ]

    def test_errors_ordered_across_records(self, make_descriptive_record, make_transaction, make_file_total_record):
        descriptive = make_descriptive_record(dateToBeProcessed="999999")
        transactions = [make_transaction(amount="1x"), make_transaction(traceRecord="062184")]
        total = make_file_total_record(fileUserCountOfRecordsType1="two")

        with pytest.raises(ValidationFailedException) as exc_info:
            Generator(descriptive, transactions, total).get_contents()

        assert [(e.attribute, e.rule) for e in exc_info.value.errors] == [
            ("dateToBeProcessed", "date"),
            ("amount", "numeric"),
            ("traceRecord", "bsb"),
            ("fileUserCountOfRecordsType1", "numeric"),
        ]

    def test_validation_reported_before_overflow(self, descriptive_record, make_transaction):
        # Invalid and too long: the validation failure wins
        transaction = make_transaction(amount="1234567890x")

        with pytest.raises(ValidationFailedException):
            Generator(descriptive_record, [transaction]).get_contents()

    def test_validate_without_rendering(self, descriptive_record, make_transaction):
        generator = Generator(descriptive_record, [make_transaction(bsbNumber="bad")])
        assert [e.rule for e in generator.validate()] == ["bsb"]


class TestGeneratorLengthMismatches:

    def test_descriptive_record_line_exceeds(self, make_descriptive_record, transaction):
        descriptive = make_descriptive_record(nameOfUserSupplyingFile=" " * 41)

        with pytest.raises(LengthMismatchesException):
            Generator(descriptive, [transaction]).get_contents()

    def test_transaction_line_exceeds(self, descriptive_record, make_transaction):
        transaction = make_transaction(amount="00000012555")

        with pytest.raises(LengthMismatchesException) as exc_info:
            Generator(descriptive_record, [transaction]).get_contents()

        assert exc_info.value.mismatches == [
            {"line": 2, "record_type": "1", "length": LINE_LENGTH + 1}
        ]

    def test_overflow_is_not_a_validation_failure(self, descriptive_record, make_transaction):
        transaction = make_transaction(amount="00000012555")

        with pytest.raises(Exception) as exc_info:
            Generator(descriptive_record, [transaction]).get_contents()

        assert not isinstance(exc_info.value, ValidationFailedException)

    def test_every_overflowing_record_reported(self, descriptive_record, make_transaction):
        transactions = [
            make_transaction(),
            make_transaction(titleOfAccount="x" * 33),
            make_transaction(lodgementReference="y" * 20),
        ]

        with pytest.raises(LengthMismatchesException) as exc_info:
            Generator(descriptive_record, transactions).get_contents()

        assert [m["line"] for m in exc_info.value.mismatches] == [3, 4]


class TestFileTotals:

    def test_calculate_totals(self, make_transaction):
        transactions = [
            make_transaction(transactionCode="53", amount="1000"),
            make_transaction(transactionCode="50", amount="250"),
            make_transaction(transactionCode="13", amount="400"),
        ]

        assert calculate_totals(transactions) == {
            "credit": 1250,
            "debit": 400,
            "net": 850,
            "count": 3,
        }

    def test_net_total_is_absolute(self, make_transaction):
        totals = calculate_totals([make_transaction(transactionCode="13", amount="700")])
        assert totals["net"] == 700

    def test_build_file_total_record(self, descriptive_record, make_transaction):
        transactions = [make_transaction(amount="12555"), make_transaction(amount="12555")]
        total = build_file_total_record(transactions)

        assert isinstance(total, FileTotalRecord)
        assert total.get_attribute("fileUserCreditTotalAmount") == "25110"
        assert total.get_attribute("fileUserCountOfRecordsType1") == "2"

        lines = Generator(descriptive_record, transactions, total).get_lines()
        assert lines[-1][20:30] == "0000025110"

    def test_empty_amount_counts_as_zero(self, make_transaction):
        totals = calculate_totals([make_transaction(amount=""), make_transaction(amount="300")])
        assert totals == {"credit": 300, "debit": 0, "net": 300, "count": 2}

    def test_non_numeric_amount_rejected(self, make_transaction):
        with pytest.raises(ValidationFailedException) as exc_info:
            calculate_totals([make_transaction(amount="12.50")])

        assert exc_info.value.get_errors() == [ValidationError("amount", "12.50", "numeric")]

    @pytest.mark.parametrize("amount", ["\u00b2", "\u0661\u0662", "12555\n"])
    def test_amount_the_numeric_rule_rejects(self, make_transaction, amount):
        with pytest.raises(ValidationFailedException) as exc_info:
            calculate_totals([make_transaction(amount=amount)])

        assert [e.rule for e in exc_info.value.get_errors()] == ["numeric"]

    def test_unknown_code_rejected(self, make_transaction):
        with pytest.raises(ValidationFailedException) as exc_info:
            calculate_totals([make_transaction(transactionCode="99")])

        assert exc_info.value.get_errors() == [ValidationError("transactionCode", "99", "transaction_code")]

    def test_every_invalid_transaction_reported(self, make_transaction):
        transactions = [
            make_transaction(amount="x"),
            make_transaction(),
            make_transaction(transactionCode="99", bsbNumber="1112333"),
        ]

        with pytest.raises(ValidationFailedException) as exc_info:
            build_file_total_record(transactions)

        assert [(e.attribute, e.rule) for e in exc_info.value.get_errors()] == [
            ("amount", "numeric"),
            ("bsbNumber", "bsb"),
            ("transactionCode", "transaction_code"),
        ]
