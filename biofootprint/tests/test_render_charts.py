# Pythia
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Tests for the ranked bar chart renderer."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from biofootprint.tools.render_charts import rank_metric, render_ranked_bars
from biofootprint.transform.records import IMPACT_COLUMNS, OUTPUT_COLUMNS


def _table() -> pd.DataFrame:
    table = pd.DataFrame(
        {
            "country_code": ["004", "040", "516", "999"],
            "alpha_2_code": ["AF", "AT", "NA", None],
            "production_quantity": [100.0, 50.0, None, 10.0],
            "area_sqkm": [2.0, 5.0, None, None],
        }
    )
    for offset, column in enumerate(IMPACT_COLUMNS):
        table[column] = pd.array([10 + offset, 30 + offset, None, 20 + offset], dtype="Int64")
    return table.loc[:, OUTPUT_COLUMNS]


def test_rank_metric_orders_and_drops_nulls() -> None:
    ranked = rank_metric(_table(), "static_impact")
    assert ranked["label"].tolist() == ["AT", "999", "AF"]
    assert ranked["static_impact"].tolist() == [30, 20, 10]


def test_rank_metric_top_n() -> None:
    assert len(rank_metric(_table(), "static_impact", top=2)) == 2


def test_render_writes_one_chart_per_metric(tmp_path: Path) -> None:
    paths = render_ranked_bars(_table(), tmp_path / "charts", top=3, title_prefix="Wheat 2019")
    assert [path.name for path in paths] == [f"{column}.png" for column in IMPACT_COLUMNS]
    for path in paths:
        assert path.stat().st_size > 0


def test_render_skips_all_null_metric(tmp_path: Path) -> None:
    table = _table()
    table["total_dynamic_impact"] = pd.array([None] * len(table), dtype="Int64")
    paths = render_ranked_bars(table, tmp_path)
    assert tmp_path / "total_dynamic_impact.png" not in paths
    assert len(paths) == len(IMPACT_COLUMNS) - 1


def test_render_empty_table(tmp_path: Path) -> None:
    assert render_ranked_bars(pd.DataFrame(columns=OUTPUT_COLUMNS), tmp_path / "charts") == []
    assert not (tmp_path / "charts").exists()
