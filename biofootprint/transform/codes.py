# Pythia
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Country-code normalisation to the shared fixed-width join key."""

from __future__ import annotations

import logging
import math
from typing import Any, Optional

import pandas as pd

from .records import CODE_WIDTH, COUNTRY_CODE

LOGGER = logging.getLogger(__name__)


def pad_code(value: Any, width: int = CODE_WIDTH) -> Optional[str]:
    """Return ``value`` as a ``'0'``-padded code of at least ``width`` characters.

    FAOSTAT exports prefix M49 codes with an apostrophe (``'004``) and numeric
    columns with blanks come back as floats (``4.0``); both collapse to
    ``004``. Longer codes pass through untouched. Blank input yields ``None``.
    """

    if value is None:
        return None
    if isinstance(value, float):
        if math.isnan(value):
            return None
        if value.is_integer():
            value = int(value)
    text = str(value).strip().lstrip("'")
    if not text or text.lower() == "nan":
        return None
    if text.endswith(".0") and text[:-2].isdigit():
        text = text[:-2]
    return text.rjust(width, "0")


def normalize_country_codes(frame: pd.DataFrame, source_column: str) -> pd.DataFrame:
    """Rename ``source_column`` to ``country_code`` and pad its values.

    Returns a new frame; ``frame`` is left unchanged.
    """

    if source_column not in frame.columns:
        raise KeyError(f"country code column '{source_column}' not in frame")

    normalized = frame.rename(columns={source_column: COUNTRY_CODE})
    normalized[COUNTRY_CODE] = (
        normalized[COUNTRY_CODE].map(pad_code, na_action="ignore").astype("object")
    )
    normalized[COUNTRY_CODE] = normalized[COUNTRY_CODE].where(normalized[COUNTRY_CODE].notna(), None)
    blanks = int(normalized[COUNTRY_CODE].isna().sum())
    if blanks:
        LOGGER.warning("%s: %s rows have a blank country code", source_column, blanks)
    return normalized


__all__ = ["pad_code", "normalize_country_codes"]
