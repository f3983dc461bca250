"""
GS1 Validation Functions

Advisory checks for decoded medication codes:
- GTIN-14 Mod10 check digit
- Calendar validity of an expanded expiry date

The parser itself never calls these. A GTIN with a wrong check digit or
an expiry such as 2025-02-31 is still returned as scanned; callers that
want stricter handling can run these checks on the parsed record.

Based on GS1 General Specifications.
"""

from __future__ import annotations

import re
from calendar import monthrange
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class ValidationResult:
    """Result of a validation operation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)


NUMERIC = frozenset('0123456789')

ISO_DATE_REGEX = re.compile(r'^(\d{4})-(\d{2})-(\d{2})$')


def calculate_check_digit_mod10(digits: str) -> int:
    """
    Calculate GS1 Mod10 check digit.

    Algorithm (GS1 General Specifications):
    1. From right to left, alternate multipliers 3 and 1
    2. Sum all products
    3. Check digit = (10 - (sum mod 10)) mod 10

    Args:
        digits: Numeric string without check digit

    Returns:
        Calculated check digit (0-9)
    """
    if not digits or not all(c in NUMERIC for c in digits):
        raise ValueError("Input must be a non-empty numeric string")

    total = 0
    for i, digit in enumerate(reversed(digits)):
        multiplier = 3 if i % 2 == 0 else 1
        total += int(digit) * multiplier

    return (10 - (total % 10)) % 10


def validate_gtin(value: str) -> ValidationResult:
    """
    Validate a GTIN-14 (AI 01).

    Format: N14 with check digit in position 14.
    """
    result = ValidationResult(valid=True)

    if not value or not all(c in NUMERIC for c in value):
        result.valid = False
        result.errors.append("GTIN must be numeric")
        return result

    if len(value) != 14:
        result.valid = False
        result.errors.append(f"GTIN must be exactly 14 digits, got {len(value)}")
        return result

    provided_check = int(value[-1])
    calculated_check = calculate_check_digit_mod10(value[:-1])

    result.meta['calculated_check_digit'] = calculated_check
    result.meta['provided_check_digit'] = provided_check
    result.meta['check_digit_valid'] = (provided_check == calculated_check)

    if provided_check != calculated_check:
        result.valid = False
        result.errors.append(
            f"Check digit mismatch: expected {calculated_check}, got {provided_check}"
        )

    return result


def validate_expiry(value: str) -> ValidationResult:
    """
    Validate an expanded expiry date (YYYY-MM-DD).

    GS1 allows day 00 in AI(17) meaning "end of month"; such dates are
    reported valid with `day_unspecified` set and the last day of the
    month in `iso_date`.
    """
    result = ValidationResult(valid=True)

    match = ISO_DATE_REGEX.match(value or '')
    if not match:
        result.valid = False
        result.errors.append("Expiry must be formatted YYYY-MM-DD")
        return result

    year, month, day = (int(part) for part in match.groups())

    if month < 1 or month > 12:
        result.valid = False
        result.errors.append(f"Invalid month: {month}")
        return result

    max_day = monthrange(year, month)[1]
    if day == 0:
        result.meta['day_unspecified'] = True
        day = max_day
    elif day > max_day:
        result.valid = False
        result.errors.append(f"Day {day} invalid for month {month} in year {year}")
        return result

    result.meta['year'] = year
    result.meta['month'] = month
    result.meta['day'] = day
    result.meta['iso_date'] = f"{year:04d}-{month:02d}-{day:02d}"

    return result
