"""
Application Identifier table for pharmaceutical GS1 element strings.

Only the five AIs used for medication traceability are known here:

    01   GTIN                 fixed, 14 characters
    17   Expiry date          fixed, 6 characters (YYMMDD)
    10   Batch/lot            variable
    21   Serial number        variable
    713  ANVISA registration  variable (Brazil NHRN)

Every other AI is ignored by the parser.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class AIEntry:
    """
    A supported Application Identifier.

    Attributes:
        ai: The Application Identifier code
        field: Name of the ParsedMedicationCode field it fills
        title: Human-readable title
        fixed_length: Value length for fixed-length AIs, None if variable
    """
    ai: str
    field: str
    title: str
    fixed_length: Optional[int] = None

    @property
    def is_fixed(self) -> bool:
        return self.fixed_length is not None

    @property
    def min_chunk_length(self) -> int:
        """Shortest chunk that can carry this AI and its full value."""
        return len(self.ai) + (self.fixed_length or 0)


SUPPORTED_AIS: Tuple[AIEntry, ...] = (
    AIEntry("01", "gtin", "GTIN", fixed_length=14),
    AIEntry("17", "expiry", "USE BY or EXPIRY", fixed_length=6),
    AIEntry("10", "lot", "BATCH/LOT"),
    AIEntry("21", "serial", "SERIAL"),
    AIEntry("713", "anvisa", "NHRN ANVISA"),
)

_BY_CODE: Dict[str, AIEntry] = {entry.ai: entry for entry in SUPPORTED_AIS}

# Longer codes first so 713 can never be shadowed by a two-digit AI;
# sorted() is stable, so 01 still precedes 17 precedes 10 precedes 21.
_PREFIX_ORDER: List[AIEntry] = sorted(
    SUPPORTED_AIS, key=lambda entry: len(entry.ai), reverse=True
)


def lookup_ai(code: str) -> Optional[AIEntry]:
    """Get AI entry by exact AI code."""
    return _BY_CODE.get(code)


def match_prefix(chunk: str) -> Optional[AIEntry]:
    """
    Find the AI a concatenated chunk starts with.

    Fixed-length AIs only match when the chunk is long enough to hold
    their whole value; a truncated fixed field falls through to the
    remaining candidates.

    Returns:
        The matching AIEntry, or None for an unrecognized chunk.
    """
    for entry in _PREFIX_ORDER:
        if not chunk.startswith(entry.ai):
            continue
        if entry.is_fixed and len(chunk) < entry.min_chunk_length:
            continue
        return entry
    return None
