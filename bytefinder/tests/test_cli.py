from __future__ import annotations

from pathlib import Path

from bytefinder.cli import main

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


def test_cli_prints_best_five_overall(capsys):
    assert main(["--data-dir", str(DATA_DIR)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Best matched restaurants:"
    assert [line.split(" | ")[0] for line in out[1:]] == [
        "1).  Pho Real",
        "2).  Byte Cafe",
        "3).  Deliciousgenix",
        "4).  Burger Stack",
        "5).  Ramen Republic",
    ]


def test_cli_filters(capsys):
    assert main(["--data-dir", str(DATA_DIR), "--name", "delicious", "--price", "20"]) == 0
    out = capsys.readouterr().out
    assert "Deliciousgenix" in out
    assert "Herbed Delicious" in out
    assert "Deliciousscape" not in out


def test_cli_no_matches(capsys):
    assert main(["--data-dir", str(DATA_DIR), "--cuisine", "martian"]) == 0
    assert capsys.readouterr().out.strip() == "No matches found."


def test_cli_rejects_out_of_range_rating(capsys):
    assert main(["--data-dir", str(DATA_DIR), "--rating", "6"]) == 2
    assert "rating must be between 1 and 5" in capsys.readouterr().err


def test_cli_rejects_non_integer_distance(capsys):
    assert main(["--data-dir", str(DATA_DIR), "--distance", "far"]) == 2
    assert "Distance must be a whole number." in capsys.readouterr().err


def test_cli_reports_missing_catalog(tmp_path, capsys):
    assert main(["--data-dir", str(tmp_path)]) == 1
    assert "Error loading data" in capsys.readouterr().err


def test_cli_trims_text_criteria(capsys):
    assert main(["--data-dir", str(DATA_DIR), "--name", "  delicious  "]) == 0
    assert "Deliciousgenix" in capsys.readouterr().out
