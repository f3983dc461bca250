"""
JSON Formatter for decoded medication codes

Output keeps the record's field names verbatim (gtin, expiry, lot,
serial, anvisa, raw) so downstream persistence can map them directly.
Fields that were not decoded are left out rather than set to null.
"""

from __future__ import annotations

import json
from typing import Any, Dict

from ..core.parser import DATA_FIELDS, ParsedMedicationCode, parse_gs1


# Field name to human-readable label
FIELD_LABELS = {
    "gtin": "GTIN",
    "expiry": "Expiry Date",
    "lot": "Batch/Lot Number",
    "serial": "Serial Number",
    "anvisa": "ANVISA Registration",
}


def format_parsed_json(
    parsed: ParsedMedicationCode,
    include_raw: bool = True
) -> str:
    """
    Format a parsed medication code as JSON.

    Args:
        parsed: Result of parse_gs1()
        include_raw: Include the original scan string (default: True)

    Returns:
        JSON string with the decoded fields
    """
    output = parsed.to_dict()
    if not include_raw:
        output.pop("raw", None)
    return json.dumps(output, ensure_ascii=False, indent=2)


def parse_gs1_to_json(barcode_data: str, include_raw: bool = True, **parse_options) -> str:
    """
    Parse a GS1 barcode and return JSON output.

    Example:
        >>> print(parse_gs1_to_json("(01)07898987654321(17)251231", include_raw=False))
        {
          "gtin": "07898987654321",
          "expiry": "2025-12-31"
        }
    """
    return format_parsed_json(
        parse_gs1(barcode_data, **parse_options),
        include_raw=include_raw,
    )


def parse_gs1_to_dict(barcode_data: str, **parse_options) -> Dict[str, Any]:
    """Parse a GS1 barcode and return the decoded fields as a dictionary."""
    return parse_gs1(barcode_data, **parse_options).to_dict()


def summarize(parsed: ParsedMedicationCode) -> str:
    """
    Build a short multi-line description of the decoded fields.

    One "Label: value" line per decoded field, used as the body of the
    timeline entry created after a scan. Falls back to the raw scan
    when nothing was decoded.
    """
    lines = []
    for name in DATA_FIELDS:
        value = getattr(parsed, name)
        if value is not None:
            lines.append(f"{FIELD_LABELS[name]}: {value}")
    if not lines:
        return parsed.raw
    return "\n".join(lines)
