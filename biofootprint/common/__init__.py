# Pythia
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Common utilities shared across biofootprint components."""

from .errors import InputError
from .logs import configure_root_logger, df_schema, null_counts

__all__ = [
    "InputError",
    "null_counts",
    "df_schema",
    "configure_root_logger",
]
