# Pythia
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Tests for pipeline configuration loading."""

from __future__ import annotations

import logging
import textwrap
from pathlib import Path

import pytest

from biofootprint.common.config_loader import DEFAULT_CONFIG_PATH, load_pipeline_config


def test_packaged_defaults() -> None:
    config = load_pipeline_config()
    assert config.commodity == "Wheat"
    assert config.hectares_per_sqkm == 100
    assert config.code_columns["production"] == "Area Code (M49)"
    assert config.code_columns["crops"] == "globio_country_code"
    assert config.files["crops"] == "crops.csv"
    assert config.source_path == DEFAULT_CONFIG_PATH


def test_override_file_merges_nested_keys(tmp_path: Path) -> None:
    override = tmp_path / "override.yml"
    override.write_text(
        textwrap.dedent("""\
            commodity: Maize
            files:
              production: maize_production.csv
        """),
        encoding="utf-8",
    )
    config = load_pipeline_config(override)
    assert config.commodity == "Maize"
    assert config.files["production"] == "maize_production.csv"
    assert config.files["area"] == "area.csv"
    assert config.source_path == override


def test_unknown_keys_logged(tmp_path: Path, caplog) -> None:
    override = tmp_path / "override.yml"
    override.write_text("marine: true\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        load_pipeline_config(override)
    assert "marine" in caplog.text


def test_missing_override_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_pipeline_config(tmp_path / "missing.yml")


def test_non_positive_divisor_rejected(tmp_path: Path) -> None:
    override = tmp_path / "override.yml"
    override.write_text("hectares_per_sqkm: 0\n", encoding="utf-8")
    with pytest.raises(ValueError, match="hectares_per_sqkm"):
        load_pipeline_config(override)


def test_with_overrides_skips_none() -> None:
    config = load_pipeline_config()
    updated = config.with_overrides(commodity="Rice", chart_top=None)
    assert updated.commodity == "Rice"
    assert updated.chart_top == config.chart_top
    assert config.commodity == "Wheat"


def test_input_path_unknown_source(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Unknown source"):
        load_pipeline_config().input_path(tmp_path, "fisheries")
