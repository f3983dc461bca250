"""
CLI interface for the medication GS1 parser.

Usage:
    python -m gs1_medcode "<barcode text>" [options]
    python -m gs1_medcode --batch scans.txt [--csv decoded.csv]

Options:
    --json             Output as JSON
    --batch FILE       Parse one scan per line
    --csv OUT          Export batch results as CSV
    --gs TOKEN         Text standing in for the GS byte (default: <GS>)
    --near-months N    Months before expiry counted as "Near Expiry"
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from .core.parser import GS, ParsedMedicationCode, parse_gs1
from .formatters.json_formatter import FIELD_LABELS
from .reports import export_csv, records_to_dataframe
from .utils import expiry_status
from .validators.validators import validate_gtin


def format_result(result: ParsedMedicationCode, near_months: int = 6) -> str:
    """Format a parsed code for display."""
    lines = [
        "=" * 60,
        "GS1 Medication Code",
        "=" * 60,
        f"Raw Input: {result.raw!r}",
        "",
    ]

    if not result.has_gs1_data:
        lines.append("No GS1 data found.")
        return '\n'.join(lines)

    for name, label in FIELD_LABELS.items():
        value = getattr(result, name)
        if value is None:
            continue
        lines.append(f"  {label}: {value}")
        if name == "gtin":
            check = validate_gtin(value)
            lines.append(f"    Check Digit Valid: {check.valid}")
        elif name == "expiry":
            lines.append(f"    Status: {expiry_status(value, near_months)}")

    return '\n'.join(lines)


def read_batch(path: Path, gs_token: str) -> List[str]:
    text = path.read_text(encoding="utf-8")
    scans = []
    # splitlines() would also break on the GS byte itself
    for line in text.split('\n'):
        line = line.rstrip('\r')
        if not line.strip():
            continue
        scans.append(restore_gs(line, gs_token))
    return scans


def restore_gs(text: str, gs_token: str) -> str:
    """Replace the textual GS stand-in with the real separator byte."""
    if not gs_token:
        return text
    return text.replace(gs_token, GS)


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='gs1_medcode',
        description='Parse GS1 element strings from medication barcodes'
    )

    parser.add_argument(
        'barcode',
        nargs='?',
        help='Barcode data to parse'
    )

    parser.add_argument(
        '--batch',
        type=Path,
        default=None,
        help='File with one scanned barcode per line'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Output result as JSON'
    )

    parser.add_argument(
        '--csv',
        type=Path,
        default=None,
        help='Write batch results to this CSV file'
    )

    parser.add_argument(
        '--gs',
        default='<GS>',
        help='Text used in place of the GS (0x1D) separator'
    )

    parser.add_argument(
        '--near-months',
        type=int,
        default=6,
        help='Months before expiry reported as Near Expiry'
    )

    args = parser.parse_args(argv)

    if (args.barcode is None) == (args.batch is None):
        parser.error('give either a barcode or --batch FILE')
    if args.csv and args.batch is None:
        parser.error('--csv requires --batch')

    if args.batch is not None:
        try:
            scans = read_batch(args.batch, args.gs)
        except OSError as e:
            print(f"Cannot read {args.batch}: {e}", file=sys.stderr)
            return 1
    else:
        scans = [restore_gs(args.barcode, args.gs)]

    results = [parse_gs1(scan) for scan in scans]

    if args.csv:
        path = export_csv(records_to_dataframe(results), args.csv)
        print(f"Wrote {len(results)} rows to {path}", file=sys.stderr)

    if args.json:
        payload = [r.to_dict() for r in results]
        output = payload if args.batch is not None else payload[0]
        print(json.dumps(output, indent=2, ensure_ascii=False))
    else:
        print('\n\n'.join(format_result(r, args.near_months) for r in results))

    # Success if anything decoded
    return 0 if any(r.has_gs1_data for r in results) else 1


if __name__ == '__main__':
    sys.exit(main())
