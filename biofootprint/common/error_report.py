"""Helpers for writing run failure diagnostics payloads.

The CLI calls :func:`write_error_report` when an input table cannot be
loaded so that batch callers find a machine-readable ``error.json`` next to
where the report artifact would have been written.
"""

from __future__ import annotations

import json
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Mapping, MutableMapping

DEFAULT_ERROR_FILENAME = "error.json"


def _normalise_hints(hints: Iterable[str] | None) -> list[str]:
    if not hints:
        return []
    results: list[str] = []
    for hint in hints:
        text = str(hint).strip()
        if text:
            results.append(text)
    return results


def _normalise_extras(extras: Mapping[str, object] | None) -> dict[str, object]:
    if not isinstance(extras, Mapping):
        return {}
    normalised: MutableMapping[str, object] = {}
    for key, value in extras.items():
        if value is None:
            continue
        normalised[str(key)] = value if isinstance(value, (int, float, bool)) else str(value)
    return dict(normalised)


def write_error_report(
    directory: os.PathLike[str] | str,
    *,
    exit_code: int | None = None,
    message: str | None = None,
    hints: Iterable[str] | None = None,
    extras: Mapping[str, object] | None = None,
) -> str:
    """Serialise an error payload to ``directory / error.json``."""

    dest_dir = Path(directory)
    payload: dict[str, object | None] = {
        "exit_code": int(exit_code) if exit_code is not None else None,
        "message": message.strip() if isinstance(message, str) else None,
        "hints": _normalise_hints(hints),
        "written_at": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
    }

    extra_payload = _normalise_extras(extras)
    if extra_payload:
        payload["extras"] = extra_payload

    target = dest_dir / DEFAULT_ERROR_FILENAME
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, ensure_ascii=False, indent=2)
    return target.as_posix()


__all__ = ["write_error_report", "DEFAULT_ERROR_FILENAME"]
