# Pythia
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""CSV loading with reportable input errors."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Mapping

import pandas as pd

from biofootprint.common.errors import InputError

LOGGER = logging.getLogger(__name__)


def load_table(
    path: Path | str,
    *,
    dtype: Mapping[str, Any] | str | None = None,
    required: Iterable[str] = (),
    **read_kwargs: Any,
) -> pd.DataFrame:
    """Read ``path`` into a dataframe, inferring column types from content.

    ``dtype`` pins individual columns (country codes are read as text so
    leading zeros survive). Raises :class:`InputError` naming the file when it
    is missing or cannot be parsed, and naming the column when one of
    ``required`` is absent.
    """

    target = Path(path)
    if not target.is_file():
        raise InputError(f"Input file not found: {target}", path=target)

    if isinstance(dtype, Mapping):
        dtype = dict(dtype)
    try:
        frame = pd.read_csv(target, dtype=dtype, **read_kwargs)
    except pd.errors.EmptyDataError as exc:
        raise InputError(f"Input file {target} is empty", path=target) from exc
    except (pd.errors.ParserError, UnicodeDecodeError, ValueError) as exc:
        raise InputError(f"Input file {target} could not be parsed as CSV: {exc}", path=target) from exc
    except OSError as exc:
        raise InputError(f"Input file {target} could not be read: {exc}", path=target) from exc

    frame.columns = [str(col).strip() for col in frame.columns]
    missing = [col for col in required if col not in frame.columns]
    if missing:
        raise InputError(
            f"Input file {target} is missing required column(s): {', '.join(missing)}",
            path=target,
            column=missing[0],
        )

    LOGGER.debug("%s: loaded %s rows, %s columns", target.name, len(frame), len(frame.columns))
    return frame


__all__ = ["load_table"]
