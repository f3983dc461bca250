"""
GS1 Medication Code Parser

Decodes GS1 element strings scanned from pharmaceutical packaging
(GS1-128, GS1 DataMatrix, GS1 QR Code) into GTIN, expiry date, lot,
serial number and ANVISA registration.

Based on GS1 General Specifications.
"""

from .core.parser import (
    parse_gs1,
    GS1ElementStringParser,
    ParseOptions,
    ParsedMedicationCode,
)
from .core.ai_table import AIEntry, SUPPORTED_AIS
from .validators.validators import (
    validate_gtin,
    validate_expiry,
    ValidationResult,
)
from .formatters.json_formatter import (
    parse_gs1_to_json,
    parse_gs1_to_dict,
    summarize,
)
from .medication import MedicationData, from_gs1
from .scan import ScanKind, ScanResult, classify_scan

__version__ = "1.0.0"
__all__ = [
    "parse_gs1",
    "GS1ElementStringParser",
    "ParseOptions",
    "ParsedMedicationCode",
    "AIEntry",
    "SUPPORTED_AIS",
    "validate_gtin",
    "validate_expiry",
    "ValidationResult",
    "parse_gs1_to_json",
    "parse_gs1_to_dict",
    "summarize",
    "MedicationData",
    "from_gs1",
    "ScanKind",
    "ScanResult",
    "classify_scan",
]
