"""
Tests for the command line interface and CSV export.
"""

import json

import pandas as pd
import pytest
from gs1_medcode import parse_gs1
from gs1_medcode.__main__ import main, format_result
from gs1_medcode.core import GS
from gs1_medcode.reports import COLUMNS, export_csv, records_to_dataframe


class TestSingleBarcode:
    """Tests for parsing one barcode from the command line."""

    def test_text_output(self, capsys):
        exit_code = main(["(01)06285096000842(17)491231(10)L123"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "GTIN: 06285096000842" in out
        assert "Check Digit Valid: True" in out
        assert "Expiry Date: 2049-12-31" in out
        assert "Batch/Lot Number: L123" in out

    def test_json_output(self, capsys):
        exit_code = main(["--json", "0106285096000842<GS>10L123"])

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert data["gtin"] == "06285096000842"
        assert data["lot"] == "L123"
        assert data["raw"] == f"0106285096000842{GS}10L123"

    def test_custom_gs_token(self, capsys):
        main(["--json", "--gs", "~", "0106285096000842~21SN9"])

        data = json.loads(capsys.readouterr().out)
        assert data["serial"] == "SN9"

    def test_no_gs1_data_exit_code(self, capsys):
        exit_code = main(["hello"])

        assert exit_code == 1
        assert "No GS1 data found." in capsys.readouterr().out

    def test_barcode_and_batch_conflict(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["(10)L1", "--batch", str(tmp_path / "scans.txt")])
        assert exc.value.code == 2

    def test_csv_requires_batch(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["(10)L1", "--csv", str(tmp_path / "out.csv")])


class TestBatch:
    """Tests for --batch and --csv."""

    def test_batch_json(self, tmp_path, capsys):
        scans = tmp_path / "scans.txt"
        scans.write_text(
            f"]d20106285096000842{GS}10L1\n\n(21)SN2\r\nnot a barcode\n",
            encoding="utf-8",
        )

        exit_code = main(["--batch", str(scans), "--json"])

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert len(data) == 3
        assert data[0]["lot"] == "L1"
        assert data[1]["serial"] == "SN2"
        assert data[2] == {"raw": "not a barcode"}

    def test_batch_csv_export(self, tmp_path, capsys):
        scans = tmp_path / "scans.txt"
        scans.write_text("(01)06285096000842(17)251231\n(10)L9\n", encoding="utf-8")
        out = tmp_path / "exports" / "decoded.csv"

        main(["--batch", str(scans), "--csv", str(out)])

        df = pd.read_csv(out, dtype=str, keep_default_na=False)
        assert list(df.columns) == COLUMNS
        assert df.loc[0, "gtin"] == "06285096000842"
        assert df.loc[0, "expiry"] == "2025-12-31"
        assert df.loc[1, "lot"] == "L9"
        assert df.loc[1, "gtin"] == ""

    def test_missing_batch_file(self, tmp_path, capsys):
        exit_code = main(["--batch", str(tmp_path / "missing.txt")])

        assert exit_code == 1
        assert "Cannot read" in capsys.readouterr().err


class TestReports:
    """Tests for the DataFrame helpers."""

    def test_records_to_dataframe(self):
        df = records_to_dataframe([parse_gs1("(10)L1"), parse_gs1("")])

        assert list(df.columns) == ["raw", "gtin", "expiry", "lot", "serial", "anvisa"]
        assert df["lot"].tolist() == ["L1", ""]

    def test_empty_records(self, tmp_path):
        path = export_csv(records_to_dataframe([]), tmp_path / "empty.csv")

        assert path.read_text(encoding="utf-8").strip() == ",".join(COLUMNS)

    def test_format_result_expiry_status(self):
        text = format_result(parse_gs1("(17)000101"), near_months=6)

        assert "Status: Expired" in text
