"""
Attribute rules for ABA record fields.

Each rule is a pure function taking the attribute name and its raw value and
returning a ValidationError when the value fails, or None when it passes.
A missing value (None) fails every rule, so any field carrying a rule is
effectively required.
"""

import re
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional


NUMERIC_PATTERN = re.compile(r"[0-9]*")
DATE_PATTERN = re.compile(r"[0-9]{6}")
BSB_PATTERN = re.compile(r"[0-9]{3}-[0-9]{3}")

# DDMMYY
DATE_FORMAT = "%d%m%y"

# 13 is the only debit code, 50-57 are credits
TRANSACTION_CODES = ("13", "50", "51", "52", "53", "54", "55", "56", "57")

# Blank, new/varied details, dividend, interest and withholding tax indicators
INDICATORS = ("", " ", "N", "W", "X", "Y")


@dataclass(frozen=True)
class ValidationError:
    """A single failed rule check."""
    attribute: str
    value: Optional[str]
    rule: str

    def to_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)


Rule = Callable[[str, Optional[str]], Optional[ValidationError]]


def numeric(name: str, value: Optional[str]) -> Optional[ValidationError]:
    if value is None or not NUMERIC_PATTERN.fullmatch(value):
        return ValidationError(attribute=name, value=value, rule="numeric")
    return None


def date(name: str, value: Optional[str]) -> Optional[ValidationError]:
    """Value must be a real calendar date written as DDMMYY."""
    if value is None or not DATE_PATTERN.fullmatch(value):
        return ValidationError(attribute=name, value=value, rule="date")

    try:
        datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        return ValidationError(attribute=name, value=value, rule="date")

    return None


def bsb(name: str, value: Optional[str]) -> Optional[ValidationError]:
    """Bank-State-Branch code, NNN-NNN."""
    if value is None or not BSB_PATTERN.fullmatch(value):
        return ValidationError(attribute=name, value=value, rule="bsb")
    return None


def alphanumeric(name: str, value: Optional[str]) -> Optional[ValidationError]:
    # Free text; width is enforced when the line is rendered
    return None


def one_of(rule_name: str, choices: Iterable[str]) -> Rule:
    """Build a rule accepting only values from a fixed set."""
    allowed = frozenset(choices)

    def check(name: str, value: Optional[str]) -> Optional[ValidationError]:
        if value is None or value not in allowed:
            return ValidationError(attribute=name, value=value, rule=rule_name)
        return None

    check.__name__ = rule_name
    return check


RULES: Dict[str, Rule] = {
    "numeric": numeric,
    "date": date,
    "bsb": bsb,
    "alphanumeric": alphanumeric,
    "transaction_code": one_of("transaction_code", TRANSACTION_CODES),
    "indicator": one_of("indicator", INDICATORS),
}


def get_rule(rule_name: str) -> Rule:
    """Look up a rule by id, raising KeyError for unknown ids."""
    return RULES[rule_name]


def apply_rules(name: str, value: Optional[str], rule_names: Iterable[str]) -> List[ValidationError]:
    """Run every named rule against a value and collect all failures."""
    errors = []

    for rule_name in rule_names:
        error = get_rule(rule_name)(name, value)
        if error is not None:
            errors.append(error)

    return errors
