"""
Classification of raw scanner output.

A camera scan of a medicine box may yield a GS1 element string, a URL
(package inserts and manufacturer QR codes) or something else entirely.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .core.parser import ParseOptions, ParsedMedicationCode, parse_gs1


class ScanKind(str, Enum):
    """Kinds of scanned content."""
    GS1 = "gs1"
    URL = "url"
    UNKNOWN = "unknown"


@dataclass
class ScanResult:
    kind: ScanKind
    raw: str
    parsed: Optional[ParsedMedicationCode] = None
    url: Optional[str] = None


def classify_scan(
    raw_value: str,
    *,
    options: Optional[ParseOptions] = None
) -> ScanResult:
    """
    Decide what a scanned value is.

    URLs are returned untouched for the page extractor. Everything else
    goes through the GS1 parser and counts as GS1 only if at least one
    Application Identifier was decoded.
    """
    raw_value = raw_value if raw_value is not None else ""
    candidate = raw_value.strip()

    if candidate.startswith("http"):
        return ScanResult(kind=ScanKind.URL, raw=raw_value, url=candidate)

    parsed = parse_gs1(raw_value, options=options)
    kind = ScanKind.GS1 if parsed.has_gs1_data else ScanKind.UNKNOWN
    return ScanResult(kind=kind, raw=raw_value, parsed=parsed)
