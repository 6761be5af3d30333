# Pythia
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Shared fixtures for the footprint tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from biofootprint.common.config_loader import PipelineConfig, load_pipeline_config
from biofootprint.tests._sourcedata import write_sources


@pytest.fixture()
def source_dir(tmp_path: Path) -> Path:
    """Directory holding the four sample source tables."""

    return write_sources(tmp_path / "data")


@pytest.fixture()
def config() -> PipelineConfig:
    return load_pipeline_config()
