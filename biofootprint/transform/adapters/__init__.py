# Pythia
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Adapter registry for source table normalisation."""

from __future__ import annotations

from .base import BaseAdapter
from .country_specs import CountrySpecAdapter
from .crops import CropFactorsAdapter
from .faostat import AreaAdapter, ProductionAdapter

ADAPTER_REGISTRY: dict[str, type[BaseAdapter]] = {
    "crops": CropFactorsAdapter,
    "country_specs": CountrySpecAdapter,
    "production": ProductionAdapter,
    "area": AreaAdapter,
}

__all__ = [
    "ADAPTER_REGISTRY",
    "BaseAdapter",
    "CropFactorsAdapter",
    "CountrySpecAdapter",
    "ProductionAdapter",
    "AreaAdapter",
]
