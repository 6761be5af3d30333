# Pythia
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Load, normalise, join and score the footprint source tables."""

from .codes import normalize_country_codes, pad_code
from .impact import compute_impacts, to_output_table
from .join import (
    filter_commodity,
    join_tables,
    project_area,
    project_country_specs,
    project_production,
)
from .loader import load_table

__all__ = [
    "load_table",
    "pad_code",
    "normalize_country_codes",
    "filter_commodity",
    "project_country_specs",
    "project_production",
    "project_area",
    "join_tables",
    "compute_impacts",
    "to_output_table",
]
