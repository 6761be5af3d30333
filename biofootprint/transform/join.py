# Pythia
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""Commodity filter, per-table projections and the country-code left joins.

Every function takes a canonical frame and returns a new frame; nothing is
mutated in place so each step can be exercised on its own.
"""

from __future__ import annotations

import logging

import pandas as pd

from .records import (
    AREA_COLUMNS,
    COUNTRY_CODE,
    COUNTRY_SPEC_COLUMNS,
    IMPACT_FACTOR_COLUMNS,
    PRODUCTION_COLUMNS,
    require_columns,
)

LOG = logging.getLogger(__name__)

DEFAULT_HECTARES_PER_SQKM = 100.0


def filter_commodity(factors: pd.DataFrame, commodity: str) -> pd.DataFrame:
    """Return the impact-factor rows whose ``item_name`` equals ``commodity``.

    An unmatched commodity is reported with a warning and yields an empty
    frame with the impact-factor columns.
    """

    require_columns(factors, IMPACT_FACTOR_COLUMNS, stage="filter")
    mask = (factors["item_name"] == commodity).fillna(False).astype(bool)
    filtered = factors.loc[mask, IMPACT_FACTOR_COLUMNS].reset_index(drop=True)
    if filtered.empty:
        available = sorted(str(item) for item in factors["item_name"].dropna().unique())
        LOG.warning(
            "No impact factors for commodity '%s' (%s commodities available)",
            commodity,
            len(available),
        )
        LOG.debug("Available commodities: %s", available)
    else:
        LOG.info("Filtered %s → %s rows for '%s'", len(factors), len(filtered), commodity)
    return filtered


def _drop_blank_codes(frame: pd.DataFrame, *, label: str) -> pd.DataFrame:
    blank = frame[COUNTRY_CODE].isna()
    if blank.any():
        LOG.info("%s: dropping %s rows without a country code", label, int(blank.sum()))
        return frame.loc[~blank]
    return frame


def project_country_specs(specs: pd.DataFrame) -> pd.DataFrame:
    """Project country specs down to ``country_code`` and ``alpha_2_code``."""

    require_columns(specs, COUNTRY_SPEC_COLUMNS, stage="country_specs")
    projected = specs.loc[:, COUNTRY_SPEC_COLUMNS]
    return _drop_blank_codes(projected, label="country_specs").reset_index(drop=True)


def project_production(production: pd.DataFrame, value_column: str = "Value") -> pd.DataFrame:
    """Project production to ``country_code`` and ``production_quantity``."""

    require_columns(production, [COUNTRY_CODE, value_column], stage="production")
    projected = production.rename(columns={value_column: "production_quantity"})
    projected["production_quantity"] = pd.to_numeric(
        projected["production_quantity"], errors="coerce"
    ).astype(float)
    projected = projected.loc[:, PRODUCTION_COLUMNS]
    return _drop_blank_codes(projected, label="production").reset_index(drop=True)


def project_area(
    area: pd.DataFrame,
    value_column: str = "Value",
    hectares_per_sqkm: float = DEFAULT_HECTARES_PER_SQKM,
) -> pd.DataFrame:
    """Convert harvested hectares to ``area_sqkm`` and project the area table."""

    require_columns(area, [COUNTRY_CODE, value_column], stage="area")
    projected = area.copy()
    hectares = pd.to_numeric(projected[value_column], errors="coerce").astype(float)
    projected["area_sqkm"] = hectares / hectares_per_sqkm
    projected = projected.loc[:, AREA_COLUMNS]
    return _drop_blank_codes(projected, label="area").reset_index(drop=True)


def _warn_duplicate_keys(frame: pd.DataFrame, *, label: str) -> None:
    duplicated = frame[COUNTRY_CODE].dropna().duplicated(keep=False)
    if duplicated.any():
        codes = sorted(frame.loc[duplicated[duplicated].index, COUNTRY_CODE].unique())
        LOG.warning(
            "%s: %s country codes appear more than once; the join will fan out: %s",
            label,
            len(codes),
            ", ".join(codes[:10]),
        )


def join_tables(
    factors: pd.DataFrame,
    production: pd.DataFrame,
    area: pd.DataFrame,
    specs: pd.DataFrame,
) -> pd.DataFrame:
    """Left-join factors ⋈ production ⋈ area ⋈ country specs on ``country_code``.

    All left-hand rows survive; unmatched right-hand columns are null and
    duplicated right-hand keys fan out the matching left row.
    """

    tables = {"factors": factors, "production": production, "area": area, "country_specs": specs}
    for label, table in tables.items():
        require_columns(table, [COUNTRY_CODE], stage=label)
        _warn_duplicate_keys(table, label=label)

    joined = factors
    for right in (production, area, specs):
        joined = joined.merge(right, on=COUNTRY_CODE, how="left")

    unmatched = {
        column: int(joined[column].isna().sum())
        for column in ("production_quantity", "area_sqkm", "alpha_2_code")
        if column in joined.columns
    }
    LOG.info("Joined %s rows → %s rows; nulls after join: %s", len(factors), len(joined), unmatched)
    return joined.reset_index(drop=True)


__all__ = [
    "DEFAULT_HECTARES_PER_SQKM",
    "filter_commodity",
    "project_country_specs",
    "project_production",
    "project_area",
    "join_tables",
]
