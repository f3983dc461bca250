"""
Demo: Decoding medication barcodes

Shows the decoded record for the encodings a scanner can hand over.
"""

from gs1_medcode import classify_scan, parse_gs1, summarize
from gs1_medcode.core import GS
from gs1_medcode.formatters import format_parsed_json


def demo_parsing():
    print("=" * 80)
    print("  GS1 MEDICATION CODE DEMO")
    print("=" * 80)

    test_cases = [
        ("Bracketed notation", "(01)07898987654321(17)251231(10)L123(21)ABC"),
        ("DataMatrix with GS", f"]d20107898987654321{GS}17251231{GS}10L123"),
        ("Fixed fields, no separator", "01078989876543211725123110L123"),
        ("ANVISA registration", f"0107898987654321{GS}7131234567890123"),
        ("Not GS1", "not a barcode at all"),
    ]

    for title, barcode in test_cases:
        print(f"\n{title}")
        print("-" * 80)
        print(f"Input: {barcode!r}")
        print(format_parsed_json(parse_gs1(barcode), include_raw=False))


def demo_classification():
    print("\n\n" + "=" * 80)
    print("  SCAN CLASSIFICATION")
    print("=" * 80)

    for scan in ("(01)07898987654321(10)L123", "https://example.com/bula", "hello"):
        result = classify_scan(scan)
        print(f"\n{scan!r} -> {result.kind.value}")
        if result.parsed is not None and result.parsed.has_gs1_data:
            print(summarize(result.parsed))


if __name__ == "__main__":
    demo_parsing()
    demo_classification()
