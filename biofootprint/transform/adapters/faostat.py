# Pythia
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""FAOSTAT production and area-harvested exports → canonical normalisers."""

from __future__ import annotations

import pandas as pd

from biofootprint.transform.records import COUNTRY_CODE

from .base import BaseAdapter, LOGGER


class _FAOStatAdapter(BaseAdapter):
    """FAOSTAT bulk download keyed by ``Area Code (M49)`` with a ``Value`` column."""

    def required_columns(self) -> list[str]:
        return [self.code_column, self.config.value_column]

    def canonical_columns(self) -> list[str]:
        return [COUNTRY_CODE, self.config.value_column]

    def map(self, frame: pd.DataFrame) -> pd.DataFrame:  # type: ignore[override]
        df = super().map(frame)
        value_col = self.config.value_column
        numeric = pd.to_numeric(df[value_col], errors="coerce")
        coerced = int(numeric.isna().sum() - df[value_col].isna().sum())
        if coerced:
            LOGGER.warning("%s: %s non-numeric %s cells treated as null", self.source, coerced, value_col)
        df[value_col] = numeric.astype(float)
        return df


class ProductionAdapter(_FAOStatAdapter):
    source = "production"


class AreaAdapter(_FAOStatAdapter):
    """Area harvested, reported in hectares."""

    source = "area"


__all__ = ["ProductionAdapter", "AreaAdapter"]
