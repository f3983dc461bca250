"""
GS1 Element String Parser for medication packaging

Decodes the Application Identifier data printed on pharmaceutical
packaging (GS1-128, GS1 DataMatrix, GS1 QR Code) into a flat record.

Two encodings are accepted:
- Bracketed human-readable notation: (01)07898987654321(17)251231(10)L123
- Concatenated scanner output, with variable-length fields delimited by
  <GS> (ASCII 29, 0x1D) and fixed-length fields running straight into
  the next AI

Key rules:
- The parser never raises. Noisy, partial or non-GS1 input simply
  yields a record with fewer fields set; `raw` is always kept.
- Only AIs 01, 17, 10, 21 and 713 are decoded. Others are ignored.
- YYMMDD years >= 50 are 19YY, otherwise 20YY.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from .ai_table import AIEntry, lookup_ai, match_prefix


GS = '\x1d'  # FNC1 as transmitted by scanners
BOM = '\ufeff'

# Symbology identifiers (ISO/IEC 15424) for GS1-128, GS1 DataMatrix and GS1 QR
SYMBOLOGY_REGEX = re.compile(r'^\](?:C1|d2|Q3)', re.IGNORECASE)

# (AI)value pairs in bracketed notation
BRACKETED_REGEX = re.compile(r'\((\d{2,4})\)([^()]+)')

DEFAULT_MAX_INPUT_LENGTH = 512
DEFAULT_CENTURY_PIVOT = 50


@dataclass
class ParseOptions:
    """
    Configuration options for parsing.

    Attributes:
        max_input_length: Element strings longer than this are truncated
            before parsing (raw is kept whole)
        century_pivot: YY >= pivot is 19YY, YY < pivot is 20YY
    """
    max_input_length: int = DEFAULT_MAX_INPUT_LENGTH
    century_pivot: int = DEFAULT_CENTURY_PIVOT


@dataclass
class ParsedMedicationCode:
    """
    Decoded identity and traceability data for one scanned unit.

    Attributes:
        gtin: GTIN-14 from AI(01), digits kept as scanned
        expiry: Expiry date from AI(17), as YYYY-MM-DD
        lot: Batch/lot number from AI(10)
        serial: Serial number from AI(21)
        anvisa: ANVISA registration number from AI(713)
        raw: Original input string, untouched
    """
    raw: str
    gtin: Optional[str] = None
    expiry: Optional[str] = None
    lot: Optional[str] = None
    serial: Optional[str] = None
    anvisa: Optional[str] = None

    @property
    def has_gs1_data(self) -> bool:
        """True if at least one Application Identifier was decoded."""
        return any(getattr(self, name) is not None for name in DATA_FIELDS)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, leaving out fields that were not decoded."""
        output: Dict[str, Any] = {}
        for name in DATA_FIELDS:
            value = getattr(self, name)
            if value is not None:
                output[name] = value
        output['raw'] = self.raw
        return output


DATA_FIELDS = tuple(f.name for f in fields(ParsedMedicationCode) if f.name != 'raw')


def trim(text: str) -> str:
    """Strip surrounding whitespace and byte order marks."""
    return text.strip().strip(BOM).strip()


def strip_symbology(text: str) -> str:
    """Strip a leading ]C1, ]d2 or ]Q3 symbology identifier."""
    return SYMBOLOGY_REGEX.sub('', text, count=1)


def expand_expiry(yymmdd: str, century_pivot: int = DEFAULT_CENTURY_PIVOT) -> str:
    """
    Expand a GS1 YYMMDD date to YYYY-MM-DD.

    Month and day are copied as-is; no calendar validation is done here.

    Examples:
        >>> expand_expiry("251231")
        '2025-12-31'
        >>> expand_expiry("500101")
        '1950-01-01'
    """
    yy, mm, dd = yymmdd[0:2], yymmdd[2:4], yymmdd[4:6]
    century = '19' if yy.isascii() and yy.isdigit() and int(yy) >= century_pivot else '20'
    return f"{century}{yy}-{mm}-{dd}"


class GS1ElementStringParser:
    """
    Parser for GS1 element strings found on medication packaging.

    Stateless: one instance can be shared between threads.
    """

    def __init__(self, options: Optional[ParseOptions] = None):
        self.options = options or ParseOptions()

    def parse(self, text: str) -> ParsedMedicationCode:
        """
        Parse a GS1 element string.

        Args:
            text: Raw barcode data

        Returns:
            ParsedMedicationCode; fields that could not be decoded are None
        """
        result = ParsedMedicationCode(raw=text if text is not None else '')

        normalized = strip_symbology(trim(result.raw))
        normalized = normalized[:self.options.max_input_length]

        if '(' in normalized:
            self._parse_bracketed(result, normalized)
        else:
            for chunk in normalized.split(GS):
                self._consume_chunk(result, chunk)

        return result

    def _parse_bracketed(self, result: ParsedMedicationCode, text: str) -> None:
        # Left to right, so a repeated AI overwrites the earlier value
        for ai, value in BRACKETED_REGEX.findall(text):
            entry = lookup_ai(ai)
            if entry is None:
                continue
            if entry.is_fixed and len(value) < entry.fixed_length:
                continue
            self._assign(result, entry, value)

    def _consume_chunk(self, result: ParsedMedicationCode, chunk: str) -> None:
        """
        Consume one GS-delimited chunk.

        A fixed-length AI may be followed directly by another AI, so
        whatever follows its value is consumed as a new chunk. A
        variable-length AI takes the rest of the chunk.
        """
        while chunk:
            entry = match_prefix(chunk)
            if entry is None:
                return

            data_start = len(entry.ai)
            if not entry.is_fixed:
                self._assign(result, entry, chunk[data_start:])
                return

            data_end = data_start + entry.fixed_length
            self._assign(result, entry, chunk[data_start:data_end])
            chunk = chunk[data_end:]

    def _assign(self, result: ParsedMedicationCode, entry: AIEntry, value: str) -> None:
        if entry.ai == '17':
            value = expand_expiry(value[:entry.fixed_length], self.options.century_pivot)
        elif entry.is_fixed:
            value = value[:entry.fixed_length]
        else:
            value = value.strip()
            if not value:
                return
        setattr(result, entry.field, value)


def parse_gs1(
    input_text: str,
    *,
    options: Optional[ParseOptions] = None
) -> ParsedMedicationCode:
    """
    Parse a GS1 element string from a medication barcode.

    Main entry point for the parser.

    Args:
        input_text: Raw barcode data string
        options: Optional parsing configuration

    Returns:
        ParsedMedicationCode with the decoded fields

    Examples:
        >>> result = parse_gs1("(01)07898987654321(17)251231(10)L123(21)ABC")
        >>> result.gtin
        '07898987654321'
        >>> result.expiry
        '2025-12-31'
    """
    return GS1ElementStringParser(options).parse(input_text)
