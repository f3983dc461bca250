"""
Core parsing modules for the medication GS1 parser.
"""

from .parser import (
    parse_gs1,
    GS1ElementStringParser,
    ParseOptions,
    ParsedMedicationCode,
    strip_symbology,
    expand_expiry,
    GS,
)
from .ai_table import AIEntry, SUPPORTED_AIS, lookup_ai, match_prefix

__all__ = [
    "parse_gs1",
    "GS1ElementStringParser",
    "ParseOptions",
    "ParsedMedicationCode",
    "strip_symbology",
    "expand_expiry",
    "GS",
    "AIEntry",
    "SUPPORTED_AIS",
    "lookup_ai",
    "match_prefix",
]
