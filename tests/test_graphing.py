import csv
import io
import sys
from pathlib import Path

import numpy as np
from rich.console import Console

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from config import custom_theme
from graphing import (
    build_breakdown_table,
    build_odds_table,
    export_csv,
    format_percent,
    plot_odds,
)
from probabilities import calc_odds


def render(table):
    console = Console(theme=custom_theme, width=120, record=True, file=io.StringIO())
    console.print(table)
    return console.export_text()


def test_format_percent_uses_two_decimals():
    assert format_percent(0.5) == "50.00%"
    assert format_percent(7 / 60) == "11.67%"
    assert format_percent(1.0) == "100.00%"
    assert format_percent(0.0) == "0.00%"


def test_odds_table_layout():
    odds = calc_odds(60, 1, 4, 2, 1)
    table = build_odds_table(odds, 1)

    headers = [column.header for column in table.columns]
    assert headers == ["Copies", "Mull 0", "Mull 1", "Mull 2"]
    assert table.row_count == 4

    text = render(table)
    assert "11.67%" in text
    rows = [line for line in text.splitlines() if "%" in line]
    assert [row.split("│")[1].strip() for row in rows] == ["1", "2", "3", "4"]


def test_odds_table_starts_rows_at_min_copies():
    odds = np.array([[0.25, 0.5], [0.4375, 0.75]])
    text = render(build_odds_table(odds, 3))

    assert "25.00%" in text
    assert "75.00%" in text
    rows = [line for line in text.splitlines() if "%" in line]
    assert rows[0].split("│")[1].strip() == "3"
    assert rows[1].split("│")[1].strip() == "4"


def test_breakdown_table_lists_each_attempt():
    odds = calc_odds(60, 1, 2, 2, 1)
    table = build_breakdown_table(odds, 1)

    # one row per attempt plus a total, for each copy count
    assert table.row_count == 2 * 4
    text = render(table)
    assert "No Mulligan" in text
    assert "Mulligan 2" in text
    assert "Total" in text


def test_export_csv(tmp_path):
    odds = calc_odds(60, 1, 1, 2, 1)
    path = tmp_path / "odds.csv"

    export_csv(odds, 1, path)

    with open(path, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[1] == ["Copies", "Mull 0", "Mull 1", "Mull 2"]
    assert rows[2][0] == "1"
    assert rows[2][1] == "11.67%"
    assert len(rows) == 3


def test_plot_odds_writes_image(tmp_path):
    odds = calc_odds(60, 1, 4, 3, 1)
    path = tmp_path / "odds.png"

    plot_odds(odds, 1, path)

    assert path.exists()
    assert path.stat().st_size > 0
