"""
Validation modules for the medication GS1 parser.
"""

from .validators import (
    calculate_check_digit_mod10,
    validate_gtin,
    validate_expiry,
    ValidationResult,
    NUMERIC,
)

__all__ = [
    "calculate_check_digit_mod10",
    "validate_gtin",
    "validate_expiry",
    "ValidationResult",
    "NUMERIC",
]
