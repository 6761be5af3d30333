# Pythia
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Structured logging helpers shared across biofootprint modules."""
from __future__ import annotations
import logging
import os

import pandas as pd

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_LEVEL_ENV = "BIOFOOTPRINT_LOG_LEVEL"


def _resolve_level() -> int:
    level_name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def configure_root_logger(*, level: str | int | None = None) -> None:
    """Configure the root logger with the shared formatter and level.

    ``level`` falls back to ``$BIOFOOTPRINT_LOG_LEVEL`` and then ``INFO``.
    """

    if level is None:
        resolved_level = _resolve_level()
    elif isinstance(level, int):
        resolved_level = level
    else:
        resolved_level = getattr(logging, str(level).upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(resolved_level)
    if not any(isinstance(handler, logging.StreamHandler) for handler in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)


def null_counts(frame: pd.DataFrame | None, columns: list[str] | None = None) -> dict[str, int]:
    """Return per-column null counts, skipping columns without nulls."""

    if frame is None or frame.empty:
        return {}
    subset = frame if columns is None else frame.loc[:, [c for c in columns if c in frame.columns]]
    counts = subset.isna().sum()
    return {str(col): int(count) for col, count in counts.items() if count}


def df_schema(frame: pd.DataFrame | None) -> dict[str, object]:
    """Return lightweight schema metadata for diagnostics."""

    if frame is None:
        return {"columns": [], "dtypes": {}, "rows": 0}
    return {
        "columns": list(frame.columns),
        "dtypes": {col: str(dtype) for col, dtype in frame.dtypes.items()},
        "rows": int(len(frame)),
    }
