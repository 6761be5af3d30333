# Pythia
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Per-country biodiversity impact scores derived from the joined table.

Each score multiplies the sum of the relevant per-unit MSA factors by
``production_quantity`` and is rounded once, half to even (``Series.round``).
Null inputs give null scores; scores use the nullable ``Int64`` dtype.
"""

from __future__ import annotations

import logging
from typing import Sequence

import pandas as pd

from .records import (
    DYNAMIC_FACTORS,
    FACTOR_COLUMNS,
    IMPACT_COLUMNS,
    OUTPUT_COLUMNS,
    STATIC_FACTORS,
    require_columns,
)

LOG = logging.getLogger(__name__)

IMPACT_FORMULAS: dict[str, list[str]] = {
    "static_impact": ["land_use_static"],
    "total_static_impact": STATIC_FACTORS,
    "total_dynamic_impact": DYNAMIC_FACTORS,
}


def scaled_impact(frame: pd.DataFrame, factors: Sequence[str]) -> pd.Series:
    """Return ``round(sum(factors) * production_quantity)`` as ``Int64``.

    A null in any of ``factors`` or in ``production_quantity`` yields a null.
    """

    values = frame.loc[:, list(factors)].apply(pd.to_numeric, errors="coerce").astype(float)
    summed = values.sum(axis=1, skipna=False)
    quantity = pd.to_numeric(frame["production_quantity"], errors="coerce").astype(float)
    return (summed * quantity).round().astype("Int64")


def compute_impacts(joined: pd.DataFrame) -> pd.DataFrame:
    """Return ``joined`` with the impact score columns appended.

    ``static_impact_2020`` is the following year's static impact, the sum of
    the rounded ``total_static_impact`` and ``total_dynamic_impact`` columns.
    """

    require_columns(joined, [*FACTOR_COLUMNS, "production_quantity"], stage="impact")
    scored = joined.copy()
    for column, factors in IMPACT_FORMULAS.items():
        scored[column] = scaled_impact(scored, factors)
    scored["static_impact_2020"] = scored["total_static_impact"] + scored["total_dynamic_impact"]

    missing = int(scored["static_impact_2020"].isna().sum())
    if missing:
        LOG.info("%s of %s rows have no impact score (missing production or factors)", missing, len(scored))
    return scored


def to_output_table(scored: pd.DataFrame) -> pd.DataFrame:
    """Project a scored frame onto the published output columns."""

    require_columns(scored, OUTPUT_COLUMNS, stage="output")
    output = scored.loc[:, OUTPUT_COLUMNS].copy()
    for column in IMPACT_COLUMNS:
        output[column] = output[column].astype("Int64")
    return output.reset_index(drop=True)


__all__ = ["IMPACT_FORMULAS", "scaled_impact", "compute_impacts", "to_output_table"]
