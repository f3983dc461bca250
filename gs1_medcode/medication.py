"""
Mapping of decoded GS1 data onto the medication record.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .core.parser import ParsedMedicationCode


# Placeholder until the GTIN is matched against the medication catalogue
DEFAULT_MEDICATION_NAME = "Medicamento Escaneado"


@dataclass
class MedicationData:
    name: str
    gtin: Optional[str] = None
    active_ingredient: Optional[str] = None
    manufacturer: Optional[str] = None
    concentration: Optional[str] = None
    form: Optional[str] = None
    route: Optional[str] = None
    expiry_date: Optional[str] = None
    batch_number: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def from_gs1(parsed: ParsedMedicationCode, name: str = DEFAULT_MEDICATION_NAME) -> MedicationData:
    """
    Build a medication record from a decoded GS1 code.

    Only identity and traceability data come from the barcode; the
    descriptive fields stay empty until filled from another source.
    """
    return MedicationData(
        name=name,
        gtin=parsed.gtin,
        expiry_date=parsed.expiry,
        batch_number=parsed.lot,
    )
