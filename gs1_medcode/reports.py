"""
Tabular export of decoded scans (CSV).
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

import pandas as pd

from .core.parser import DATA_FIELDS, ParsedMedicationCode


COLUMNS: List[str] = ["raw", *DATA_FIELDS]


def records_to_dataframe(records: Iterable[ParsedMedicationCode]) -> pd.DataFrame:
    rows = []
    for record in records:
        row = {"raw": record.raw}
        for name in DATA_FIELDS:
            value = getattr(record, name)
            row[name] = value if value is not None else ""
        rows.append(row)
    return pd.DataFrame(rows, columns=COLUMNS)


def export_csv(df: pd.DataFrame, path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    return path
