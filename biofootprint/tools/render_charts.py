# Pythia
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Ranked bar charts of the footprint table, one PNG per impact metric."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402

from biofootprint.transform.records import COUNTRY_CODE, IMPACT_COLUMNS  # noqa: E402

LOG = logging.getLogger(__name__)

METRIC_LABELS: dict[str, str] = {
    "static_impact": "Static land-use impact",
    "total_static_impact": "Total static impact",
    "total_dynamic_impact": "Total dynamic impact",
    "static_impact_2020": "Static impact, following year",
}
UNIT_LABEL = "MSA·km²"


def _country_labels(frame: pd.DataFrame) -> pd.Series:
    codes = frame[COUNTRY_CODE].astype("string")
    if "alpha_2_code" not in frame.columns:
        return codes
    return frame["alpha_2_code"].astype("string").fillna(codes)


def rank_metric(table: pd.DataFrame, metric: str, top: int = 15) -> pd.DataFrame:
    """Return the ``top`` countries by ``metric``, largest first, nulls dropped."""

    if metric not in table.columns:
        raise KeyError(f"metric '{metric}' not in table")
    ranked = table.loc[table[metric].notna()].copy()
    ranked["label"] = _country_labels(ranked)
    ranked = ranked.sort_values(metric, ascending=False, kind="mergesort").head(top)
    return ranked.loc[:, ["label", metric]].reset_index(drop=True)


def render_ranked_bars(
    table: pd.DataFrame,
    out_dir: Path | str,
    *,
    top: int = 15,
    metrics: Iterable[str] = IMPACT_COLUMNS,
    title_prefix: str = "",
) -> List[Path]:
    """Write one horizontal ranked bar chart per metric into ``out_dir``.

    Metrics without any non-null value are skipped; an empty table yields no
    charts.
    """

    out_path = Path(out_dir)
    written: List[Path] = []
    if table.empty:
        LOG.info("Footprint table is empty; no charts rendered")
        return written

    out_path.mkdir(parents=True, exist_ok=True)
    for metric in metrics:
        ranked = rank_metric(table, metric, top=top)
        if ranked.empty:
            LOG.info("%s: no values to chart", metric)
            continue

        fig, ax = plt.subplots(figsize=(8, max(2.5, 0.35 * len(ranked) + 1)))
        ax.barh(ranked["label"].tolist()[::-1], ranked[metric].astype(float).tolist()[::-1])
        ax.set_xlabel(f"{METRIC_LABELS.get(metric, metric)} ({UNIT_LABEL})")
        title = METRIC_LABELS.get(metric, metric)
        ax.set_title(f"{title_prefix}: {title}" if title_prefix else title)
        fig.tight_layout()

        target = out_path / f"{metric}.png"
        fig.savefig(target, dpi=150, bbox_inches="tight")
        plt.close(fig)
        written.append(target)
        LOG.debug("%s: chart written to %s", metric, target)

    LOG.info("Rendered %s charts into %s", len(written), out_path)
    return written


__all__ = ["rank_metric", "render_ranked_bars", "METRIC_LABELS"]
