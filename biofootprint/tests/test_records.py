# Pythia
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Tests for the typed stage records."""

from __future__ import annotations

import pandas as pd
import pytest
from pydantic import ValidationError

from biofootprint.transform.records import (
    AREA_COLUMNS,
    COUNTRY_SPEC_COLUMNS,
    DYNAMIC_FACTORS,
    FACTOR_COLUMNS,
    IMPACT_COLUMNS,
    IMPACT_FACTOR_COLUMNS,
    OUTPUT_COLUMNS,
    PRODUCTION_COLUMNS,
    STATIC_FACTORS,
    CountrySpecRecord,
    ProductionRecord,
    frame_to_records,
    require_columns,
)


def test_frame_to_records_maps_nulls_to_none() -> None:
    frame = pd.DataFrame(
        {
            "country_code": ["004", "999"],
            "alpha_2_code": ["AF", None],
            "production_quantity": [100.0, None],
            "area_sqkm": [2.0, None],
            "static_impact": pd.array([10, None], dtype="Int64"),
            "total_static_impact": pd.array([17, None], dtype="Int64"),
            "total_dynamic_impact": pd.array([5, None], dtype="Int64"),
            "static_impact_2020": pd.array([22, None], dtype="Int64"),
        }
    )
    records = frame_to_records(frame, ProductionRecord)
    assert records[0] == ProductionRecord(
        country_code="004",
        alpha_2_code="AF",
        production_quantity=100.0,
        area_sqkm=2.0,
        static_impact=10,
        total_static_impact=17,
        total_dynamic_impact=5,
        static_impact_2020=22,
    )
    assert records[1].static_impact_2020 is None
    assert records[1].alpha_2_code is None


def test_empty_frame_gives_no_records() -> None:
    assert frame_to_records(pd.DataFrame(columns=["country_code"]), CountrySpecRecord) == []


def test_narrow_country_code_rejected() -> None:
    with pytest.raises(ValidationError):
        CountrySpecRecord(country_code="4", alpha_2_code="AF")


def test_records_are_frozen() -> None:
    record = CountrySpecRecord(country_code="004", alpha_2_code="AF")
    with pytest.raises(ValidationError):
        record.alpha_2_code = "XX"


def test_require_columns_names_stage() -> None:
    with pytest.raises(ValueError, match=r"\[area\].*area_sqkm"):
        require_columns(pd.DataFrame({"country_code": []}), ["country_code", "area_sqkm"], stage="area")


def test_column_sets_follow_record_fields() -> None:
    assert IMPACT_FACTOR_COLUMNS[:2] == ["country_code", "item_name"]
    assert FACTOR_COLUMNS == [
        "land_use_static",
        "land_use_dynamic",
        "fragmentation_static",
        "fragmentation_dynamic",
        "encroachment_static",
        "encroachment_dynamic",
        "climate_change_terrestrial_dynamic",
    ]
    assert sorted(FACTOR_COLUMNS) == sorted(STATIC_FACTORS + DYNAMIC_FACTORS)
    assert OUTPUT_COLUMNS == [
        "country_code",
        "alpha_2_code",
        "production_quantity",
        "area_sqkm",
        "static_impact",
        "total_static_impact",
        "total_dynamic_impact",
        "static_impact_2020",
    ]
    assert IMPACT_COLUMNS == OUTPUT_COLUMNS[4:]
    assert PRODUCTION_COLUMNS == ["country_code", "production_quantity"]
    assert AREA_COLUMNS == ["country_code", "area_sqkm"]
    assert COUNTRY_SPEC_COLUMNS == ["country_code", "alpha_2_code"]
