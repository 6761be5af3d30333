# Pythia
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""country_specs.csv → canonical normaliser."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from biofootprint.transform.loader import load_table
from biofootprint.transform.records import COUNTRY_SPEC_COLUMNS

from .base import BaseAdapter


class CountrySpecAdapter(BaseAdapter):
    """Country metadata; supplies the two-letter display code."""

    source = "country_specs"

    def required_columns(self) -> list[str]:
        return [self.code_column, self.config.display_code_column]

    def canonical_columns(self) -> list[str]:
        return COUNTRY_SPEC_COLUMNS

    def load(self, raw_path: Path) -> pd.DataFrame:  # type: ignore[override]
        # Only blank cells are null: Namibia's alpha-2 code is "NA".
        return load_table(
            raw_path,
            dtype=str,
            required=self.required_columns(),
            keep_default_na=False,
            na_values=[""],
        )

    def map(self, frame: pd.DataFrame) -> pd.DataFrame:  # type: ignore[override]
        df = super().map(frame)
        df = df.rename(columns={self.config.display_code_column: "alpha_2_code"})
        df["alpha_2_code"] = df["alpha_2_code"].astype("string").str.strip().str.upper()
        return df


__all__ = ["CountrySpecAdapter"]
