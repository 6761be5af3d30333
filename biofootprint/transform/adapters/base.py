# Pythia
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Base classes for source table adapters."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

import pandas as pd

from biofootprint.common.config_loader import PipelineConfig
from biofootprint.common.errors import InputError
from biofootprint.transform.codes import normalize_country_codes
from biofootprint.transform.loader import load_table
from biofootprint.transform.records import COUNTRY_CODE

LOGGER = logging.getLogger(__name__)


class BaseAdapter(ABC):
    """Load one source CSV and normalise it to canonical column names."""

    source: str = ""

    def __init__(self, config: PipelineConfig) -> None:
        self.config = config

    # ------------------------------------------------------------------
    # Lifecycle hooks
    # ------------------------------------------------------------------
    @abstractmethod
    def required_columns(self) -> list[str]:
        """Return the raw columns that must be present in the source file."""

    @abstractmethod
    def canonical_columns(self) -> list[str]:
        """Return the columns guaranteed after :meth:`map`."""

    def load(self, raw_path: Path) -> pd.DataFrame:
        """Load the raw source table, keeping the code column as text."""

        return load_table(
            raw_path,
            dtype={self.code_column: str},
            required=self.required_columns(),
        )

    def map(self, frame: pd.DataFrame) -> pd.DataFrame:
        """Normalise the country code; subclasses extend for other labels."""

        return normalize_country_codes(frame, self.code_column)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @property
    def code_column(self) -> str:
        return self.config.code_columns[self.source]

    def resolve_raw_path(self, data_dir: Path) -> Path:
        """Return the expected raw CSV path for this adapter."""

        return self.config.input_path(Path(data_dir).expanduser(), self.source)

    def normalize(self, data_dir: Path) -> pd.DataFrame:
        """Run load and map for this source."""

        raw_path = self.resolve_raw_path(data_dir)
        LOGGER.info("%s: loading rows from %s", self.source, raw_path)
        frame = self.load(raw_path)
        canonical = self.map(frame)
        LOGGER.info("%s: loaded %s rows", self.source, len(canonical))
        return self._validate_canonical(canonical, raw_path)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def _validate_canonical(self, frame: pd.DataFrame, raw_path: Path | None = None) -> pd.DataFrame:
        missing = [col for col in self.canonical_columns() if col not in frame.columns]
        if missing:
            raise InputError(
                f"{self.source}: normalised table lacks column(s): {missing}",
                path=raw_path,
                column=missing[0],
            )
        if COUNTRY_CODE not in frame.columns:
            raise InputError(f"{self.source}: no country_code column after normalisation", path=raw_path)
        return frame


__all__ = ["BaseAdapter", "LOGGER"]
