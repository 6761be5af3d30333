#!/usr/bin/env python3
# Pythia
# Copyright (c) 2025 Kevin Wyjad
# Licensed under the Pythia Non-Commercial Public License v1.0.
# See the LICENSE file in the project root for details.

"""
Biodiversity footprint pipeline orchestrator.

Loads the four source tables, normalises their country codes, filters the
impact factors to one commodity, left-joins production, area and country
specs, derives the impact scores and writes the report table.

Usage:
    python -m biofootprint.tools.run_pipeline --data-dir data
    python -m biofootprint.tools.run_pipeline --data-dir data --commodity Maize
    python -m biofootprint.tools.run_pipeline --data-dir data --out reports --charts
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pandas as pd
import yaml

from biofootprint.common.config_loader import PipelineConfig, load_pipeline_config
from biofootprint.common.error_report import write_error_report
from biofootprint.common.errors import InputError
from biofootprint.common.logs import LOG_LEVEL_ENV, configure_root_logger, df_schema, null_counts
from biofootprint.transform.adapters import ADAPTER_REGISTRY
from biofootprint.transform.impact import compute_impacts, to_output_table
from biofootprint.transform.join import (
    filter_commodity,
    join_tables,
    project_area,
    project_country_specs,
    project_production,
)
from biofootprint.transform.records import (
    IMPACT_COLUMNS,
    OUTPUT_COLUMNS,
    ProductionRecord,
    frame_to_records,
)

LOG = logging.getLogger(__name__)

EXIT_INPUT_ERROR = 2


# ---------------------------------------------------------------------------
# Pipeline result
# ---------------------------------------------------------------------------


@dataclass
class PipelineResult:
    commodity: str
    table: pd.DataFrame
    source_rows: Dict[str, int] = field(default_factory=dict)
    filtered_rows: int = 0
    output_path: Optional[Path] = None
    chart_paths: List[Path] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return self.table.empty

    def records(self) -> List[ProductionRecord]:
        """Return the output table as typed records."""
        return frame_to_records(self.table, ProductionRecord)


# ---------------------------------------------------------------------------
# Core pipeline
# ---------------------------------------------------------------------------


def load_sources(data_dir: Path, config: PipelineConfig) -> Dict[str, pd.DataFrame]:
    """Load and normalise every registered source table from ``data_dir``."""

    tables: Dict[str, pd.DataFrame] = {}
    for name, adapter_cls in ADAPTER_REGISTRY.items():
        adapter = adapter_cls(config)
        tables[name] = adapter.normalize(data_dir)
        LOG.debug("%s schema: %s", name, df_schema(tables[name]))
    return tables


def build_footprint(tables: Dict[str, pd.DataFrame], config: PipelineConfig) -> pd.DataFrame:
    """Filter, project, join and score normalised source tables."""

    factors = filter_commodity(tables["crops"], config.commodity)
    production = project_production(tables["production"], config.value_column)
    area = project_area(tables["area"], config.value_column, config.hectares_per_sqkm)
    specs = project_country_specs(tables["country_specs"])

    joined = join_tables(factors, production, area, specs)
    scored = compute_impacts(joined)
    return to_output_table(scored)


def run_pipeline(
    data_dir: Path | str,
    *,
    config: PipelineConfig | None = None,
    out_dir: Path | str | None = None,
    charts: bool = False,
) -> PipelineResult:
    """Run the footprint pipeline for ``config.commodity``.

    1. Load and normalise the four source tables
    2. Filter impact factors to the commodity
    3. Project production, area (ha → km²) and country specs
    4. Left-join on ``country_code``
    5. Derive impact scores
    6. Optionally write the CSV report and ranked bar charts
    """

    config = config or load_pipeline_config()
    data_dir = Path(data_dir)
    LOG.info("Footprint run: commodity=%s year=%s data=%s", config.commodity, config.year, data_dir)

    tables = load_sources(data_dir, config)
    table = build_footprint(tables, config)

    result = PipelineResult(
        commodity=config.commodity,
        table=table,
        source_rows={name: len(frame) for name, frame in tables.items()},
        filtered_rows=len(table),
    )

    if out_dir is not None:
        out_path = Path(out_dir)
        result.output_path = write_report_table(table, out_path / report_filename(config))
        if charts:
            from biofootprint.tools.render_charts import render_ranked_bars

            result.chart_paths = render_ranked_bars(
                table,
                out_path,
                top=config.chart_top,
                title_prefix=f"{config.commodity} {config.year}",
            )

    _log_summary(result)
    return result


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


def report_filename(config: PipelineConfig) -> str:
    slug = "_".join(config.commodity.lower().split()) or "commodity"
    return f"{slug}_footprint.csv"


def write_report_table(table: pd.DataFrame, output_path: Path) -> Path:
    """Write ``table`` to ``output_path``; header-only when empty."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    if table.empty:
        LOG.info("%s: writing header-only report", output_path.name)
        pd.DataFrame(columns=OUTPUT_COLUMNS).to_csv(output_path, index=False)
        return output_path
    table.loc[:, OUTPUT_COLUMNS].to_csv(output_path, index=False)
    LOG.info("Wrote %s rows to %s", len(table), output_path)
    return output_path


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def _log_summary(result: PipelineResult) -> None:
    LOG.info("--- Footprint Summary (%s) ---", result.commodity)
    for name, rows in result.source_rows.items():
        LOG.info("  %-16s %d rows", name, rows)
    LOG.info("  Output rows:     %d", result.filtered_rows)
    LOG.info("  Null cells:      %s", null_counts(result.table) or "none")
    if not result.table.empty:
        totals = {col: int(result.table[col].sum()) for col in IMPACT_COLUMNS}
        LOG.info("  Totals:          %s", totals)
    if result.output_path:
        LOG.info("  Report:          %s", result.output_path)
    if result.chart_paths:
        LOG.info("  Charts:          %d", len(result.chart_paths))


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Biodiversity footprint of crop production")
    parser.add_argument(
        "--data-dir",
        required=True,
        help="Directory holding crops.csv, country_specs.csv, production.csv and area.csv",
    )
    parser.add_argument("--config", default=None, help="YAML file overriding the packaged defaults")
    parser.add_argument("--commodity", default=None, help="Commodity to score (default from config: Wheat)")
    parser.add_argument("--out", dest="out_dir", default="reports", help="Output directory (default: reports)")
    parser.add_argument("--charts", action="store_true", help="Also render ranked bar charts per metric")
    parser.add_argument("--top", type=int, default=None, help="Countries per chart (default from config)")
    parser.add_argument(
        "--log-level",
        default=os.getenv(LOG_LEVEL_ENV, "INFO"),
        help="Logging level (default: $BIOFOOTPRINT_LOG_LEVEL or INFO)",
    )
    args = parser.parse_args(argv)

    configure_root_logger(level=args.log_level)

    if args.top is not None and args.top <= 0:
        parser.error("--top must be positive")

    commodity = args.commodity.strip() if args.commodity is not None else None
    if commodity == "":
        parser.error("--commodity must not be blank")

    try:
        base_config = load_pipeline_config(args.config)
    except FileNotFoundError as exc:
        parser.error(f"config file not found: {exc.filename or args.config}")
    except (yaml.YAMLError, ValueError) as exc:
        parser.error(f"invalid config {args.config}: {exc}")

    config = base_config.with_overrides(
        commodity=commodity,
        chart_top=args.top,
    )

    try:
        result = run_pipeline(
            args.data_dir,
            config=config,
            out_dir=args.out_dir,
            charts=args.charts,
        )
    except InputError as exc:
        LOG.error("%s", exc)
        hints = [f"Check {exc.path}" if exc.path else "Check --data-dir"]
        if exc.column:
            hints.append(f"Expected column '{exc.column}'")
        write_error_report(
            args.out_dir,
            exit_code=EXIT_INPUT_ERROR,
            message=str(exc),
            hints=hints,
            extras={"commodity": config.commodity, "data_dir": args.data_dir},
        )
        return EXIT_INPUT_ERROR

    if result.empty:
        LOG.warning("No rows produced for commodity '%s'", result.commodity)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    sys.exit(main())
