# Pythia
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Exception types raised by the footprint pipeline."""

from __future__ import annotations

from pathlib import Path


class InputError(RuntimeError):
    """Raised when a source table is missing, unreadable or lacks a column."""

    def __init__(self, message: str, *, path: Path | str | None = None, column: str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None
        self.column = column


__all__ = ["InputError"]
