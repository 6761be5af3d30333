# Pythia
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Pipeline configuration discovery and merging."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

log = logging.getLogger(__name__)

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = PACKAGE_ROOT / "config" / "pipeline.yml"

SOURCE_NAMES = ("crops", "country_specs", "production", "area")


@dataclass(frozen=True)
class PipelineConfig:
    """Resolved settings for one footprint run."""

    commodity: str = "Wheat"
    year: int = 2019
    files: Dict[str, str] = field(default_factory=dict)
    code_columns: Dict[str, str] = field(default_factory=dict)
    commodity_column: str = "item_name"
    display_code_column: str = "alpha_2_code"
    value_column: str = "Value"
    hectares_per_sqkm: float = 100.0
    chart_top: int = 15
    source_path: Optional[Path] = None

    def input_path(self, data_dir: Path, source: str) -> Path:
        """Return the CSV path for ``source`` under ``data_dir``."""

        if source not in self.files:
            raise ValueError(f"Unknown source '{source}'. Available: {sorted(self.files)}")
        return Path(data_dir) / self.files[source]

    def with_overrides(self, **overrides: Any) -> "PipelineConfig":
        """Return a copy with the non-``None`` ``overrides`` applied."""

        applied = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **applied) if applied else self


def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, Mapping):
        raise ValueError(f"Config {path} must be a mapping, got {type(loaded).__name__}")
    return dict(loaded)


def _merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _build_config(payload: Mapping[str, Any], source_path: Optional[Path]) -> PipelineConfig:
    known = {
        "commodity",
        "year",
        "files",
        "code_columns",
        "commodity_column",
        "display_code_column",
        "value_column",
        "hectares_per_sqkm",
        "charts",
    }
    unknown = sorted(set(payload) - known)
    if unknown:
        log.warning("Ignoring unknown config keys: %s", ", ".join(unknown))

    files = {str(k): str(v) for k, v in dict(payload.get("files") or {}).items()}
    code_columns = {str(k): str(v) for k, v in dict(payload.get("code_columns") or {}).items()}
    for label, mapping in (("files", files), ("code_columns", code_columns)):
        missing = [name for name in SOURCE_NAMES if name not in mapping]
        if missing:
            raise ValueError(f"Config '{label}' is missing entries for: {missing}")

    divisor = float(payload.get("hectares_per_sqkm", 100))
    if divisor <= 0:
        raise ValueError("hectares_per_sqkm must be positive")

    charts = dict(payload.get("charts") or {})
    return PipelineConfig(
        commodity=str(payload.get("commodity", "Wheat")).strip(),
        year=int(payload.get("year", 2019)),
        files=files,
        code_columns=code_columns,
        commodity_column=str(payload.get("commodity_column", "item_name")),
        display_code_column=str(payload.get("display_code_column", "alpha_2_code")),
        value_column=str(payload.get("value_column", "Value")),
        hectares_per_sqkm=divisor,
        chart_top=int(charts.get("top", 15)),
        source_path=source_path,
    )


def load_pipeline_config(path: Path | str | None = None) -> PipelineConfig:
    """Return the packaged defaults, overridden key by key by ``path``."""

    payload = _load_yaml(DEFAULT_CONFIG_PATH)
    source_path: Optional[Path] = DEFAULT_CONFIG_PATH
    if path is not None:
        override_path = Path(path).expanduser()
        if not override_path.is_file():
            raise FileNotFoundError(f"No config found at {override_path}")
        payload = _merge(payload, _load_yaml(override_path))
        source_path = override_path
        log.info("Loaded config overrides from %s", override_path)
    return _build_config(payload, source_path)


__all__ = [
    "PipelineConfig",
    "load_pipeline_config",
    "DEFAULT_CONFIG_PATH",
    "SOURCE_NAMES",
]
