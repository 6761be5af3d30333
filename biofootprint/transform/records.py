# Pythia
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Typed record models and canonical column sets for each pipeline stage.

The pydantic models are the schema of record: every canonical column list
below is read off a model's fields, so a renamed field changes the frame
checks at every stage boundary too.
"""
from __future__ import annotations

from typing import Final, Iterable, Optional, Type, TypeVar

import numpy as np
import pandas as pd
from pydantic import BaseModel, ConfigDict, field_validator

COUNTRY_CODE: Final[str] = "country_code"
CODE_WIDTH: Final[int] = 3

STATIC_FACTORS: Final[list[str]] = [
    "land_use_static",
    "fragmentation_static",
    "encroachment_static",
]
DYNAMIC_FACTORS: Final[list[str]] = [
    "land_use_dynamic",
    "fragmentation_dynamic",
    "encroachment_dynamic",
    "climate_change_terrestrial_dynamic",
]
# crops.csv carries the factor columns with this prefix.
FACTOR_SOURCE_PREFIX: Final[str] = "msa_"


class _StageRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    # Blank in impact-factor rows that carry no country.
    country_code: Optional[str] = None

    @field_validator("country_code")
    def _check_code_width(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and len(value) < CODE_WIDTH:
            raise ValueError(f"country_code '{value}' is narrower than {CODE_WIDTH} characters")
        return value


class ImpactFactorRecord(_StageRecord):
    """Per-unit MSA loss factors for one commodity in one country."""

    item_name: str
    land_use_static: Optional[float] = None
    land_use_dynamic: Optional[float] = None
    fragmentation_static: Optional[float] = None
    fragmentation_dynamic: Optional[float] = None
    encroachment_static: Optional[float] = None
    encroachment_dynamic: Optional[float] = None
    climate_change_terrestrial_dynamic: Optional[float] = None


class CountrySpecRecord(_StageRecord):
    alpha_2_code: Optional[str] = None


class ProductionRow(_StageRecord):
    production_quantity: Optional[float] = None


class AreaRow(_StageRecord):
    area_sqkm: Optional[float] = None


class ProductionRecord(_StageRecord):
    """One output row: joined inputs plus derived impact scores."""

    alpha_2_code: Optional[str] = None
    production_quantity: Optional[float] = None
    area_sqkm: Optional[float] = None
    static_impact: Optional[int] = None
    total_static_impact: Optional[int] = None
    total_dynamic_impact: Optional[int] = None
    static_impact_2020: Optional[int] = None


def columns_of(model: Type[BaseModel]) -> list[str]:
    """Return the field names of ``model`` in declaration order."""

    return list(model.model_fields)


IMPACT_FACTOR_COLUMNS: Final[list[str]] = columns_of(ImpactFactorRecord)
FACTOR_COLUMNS: Final[list[str]] = IMPACT_FACTOR_COLUMNS[2:]
COUNTRY_SPEC_COLUMNS: Final[list[str]] = columns_of(CountrySpecRecord)
PRODUCTION_COLUMNS: Final[list[str]] = columns_of(ProductionRow)
AREA_COLUMNS: Final[list[str]] = columns_of(AreaRow)
OUTPUT_COLUMNS: Final[list[str]] = columns_of(ProductionRecord)
IMPACT_COLUMNS: Final[list[str]] = OUTPUT_COLUMNS[4:]

RecordT = TypeVar("RecordT", bound=_StageRecord)


def require_columns(frame: pd.DataFrame, columns: Iterable[str], *, stage: str) -> pd.DataFrame:
    """Raise ``ValueError`` when ``frame`` lacks any of ``columns``."""

    missing = [col for col in columns if col not in frame.columns]
    if missing:
        raise ValueError(f"[{stage}] frame missing columns: {missing}")
    return frame


def _to_python(value: object) -> object:
    if isinstance(value, np.generic):
        return value.item()
    return value


def frame_to_records(frame: pd.DataFrame, model: Type[RecordT]) -> list[RecordT]:
    """Materialise ``frame`` rows as ``model`` instances with nulls as ``None``."""

    if frame.empty:
        return []
    cleaned = frame.astype(object).where(frame.notna(), None)
    records: list[RecordT] = []
    for row in cleaned.to_dict(orient="records"):
        plain = {key: _to_python(value) for key, value in row.items()}
        records.append(model.model_validate(plain))
    return records


__all__ = [
    "COUNTRY_CODE",
    "CODE_WIDTH",
    "FACTOR_COLUMNS",
    "STATIC_FACTORS",
    "DYNAMIC_FACTORS",
    "FACTOR_SOURCE_PREFIX",
    "IMPACT_FACTOR_COLUMNS",
    "COUNTRY_SPEC_COLUMNS",
    "PRODUCTION_COLUMNS",
    "AREA_COLUMNS",
    "IMPACT_COLUMNS",
    "OUTPUT_COLUMNS",
    "ImpactFactorRecord",
    "CountrySpecRecord",
    "ProductionRow",
    "AreaRow",
    "ProductionRecord",
    "columns_of",
    "require_columns",
    "frame_to_records",
]
