"""
Output formatters for the medication GS1 parser.
"""

from .json_formatter import (
    FIELD_LABELS,
    format_parsed_json,
    parse_gs1_to_json,
    parse_gs1_to_dict,
    summarize,
)

__all__ = [
    "FIELD_LABELS",
    "format_parsed_json",
    "parse_gs1_to_json",
    "parse_gs1_to_dict",
    "summarize",
]
