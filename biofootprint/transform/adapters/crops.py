# Pythia
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""crops.csv (GLOBIO crop impact factors) → canonical normaliser."""

from __future__ import annotations

import pandas as pd

from biofootprint.transform.records import (
    FACTOR_COLUMNS,
    FACTOR_SOURCE_PREFIX,
    IMPACT_FACTOR_COLUMNS,
)

from .base import BaseAdapter, LOGGER

_FACTOR_RENAMES: dict[str, str] = {
    f"{FACTOR_SOURCE_PREFIX}{name}": name for name in FACTOR_COLUMNS
}


class CropFactorsAdapter(BaseAdapter):
    """Impact factors per (commodity, country), one column per MSA category."""

    source = "crops"

    def required_columns(self) -> list[str]:
        return [self.code_column, self.config.commodity_column, *_FACTOR_RENAMES]

    def canonical_columns(self) -> list[str]:
        return IMPACT_FACTOR_COLUMNS

    def map(self, frame: pd.DataFrame) -> pd.DataFrame:  # type: ignore[override]
        # Rows without a country code are kept; they match nothing on the join.
        df = super().map(frame)
        renames = dict(_FACTOR_RENAMES)
        renames[self.config.commodity_column] = "item_name"
        df = df.rename(columns=renames)

        df["item_name"] = df["item_name"].astype("string").str.strip()
        for col in FACTOR_COLUMNS:
            numeric = pd.to_numeric(df[col], errors="coerce")
            coerced = int(numeric.isna().sum() - df[col].isna().sum())
            if coerced:
                LOGGER.warning("crops: %s non-numeric values in %s treated as null", coerced, col)
            df[col] = numeric.astype(float)
        return df


__all__ = ["CropFactorsAdapter"]
