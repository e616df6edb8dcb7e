"""Estimate household footprints for the households declared in config.yaml.

Each household is evaluated with the configured emission-factor table; the
breakdown, ranked strategies and a one-row summary are written as CSV files
under ``<output_directory>/<household>/``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml

ROOT = Path(__file__).resolve().parents[1]

sys.path.insert(0, str(ROOT / "src"))

from config_paths import (  # noqa: E402
    get_config_path,
    get_results_run_directory,
    resolve_output_directory,
)
from footprint import FootprintReport, ReductionStrategy, run_from_config  # noqa: E402
from footprint.writers import summary_frame, write_reports  # noqa: E402

LOGGER = logging.getLogger("footprint.run")

DEFAULT_OUTPUT = "results/footprint"


def _load_settings(config_path: Path) -> tuple[str, str | None]:
    with config_path.open() as handle:
        config = yaml.safe_load(handle) or {}
    module_cfg = config.get("footprint", {}) or {}
    output = str(module_cfg.get("output_directory", DEFAULT_OUTPUT))
    return output, get_results_run_directory(config)


def strategies_to_print(report: FootprintReport, top: int | None = None) -> list[ReductionStrategy]:
    """Leading strategies for the console; ``top`` defaults to the report's combined top-N."""
    limit = report.top_n if top is None else top
    return list(report.strategies[: max(limit, 0)])


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(name)s: %(message)s")

    parser = argparse.ArgumentParser(
        description="Estimate household carbon footprints and rank reduction strategies"
    )
    parser.add_argument("--config", help="Path to a config file (defaults to config.yaml)")
    parser.add_argument(
        "--household",
        action="append",
        help="Household name to evaluate; repeat to select several (default: all).",
    )
    parser.add_argument("--output", help="Directory for CSV outputs (overrides config)")
    parser.add_argument(
        "--top",
        type=int,
        default=None,
        help="Number of strategies to print per household (default: footprint.combined_top_n).",
    )
    args = parser.parse_args(argv)

    config_path = Path(args.config) if args.config else get_config_path()
    output_setting, run_directory = _load_settings(config_path)
    output_root = resolve_output_directory(
        args.output or output_setting, run_directory, repo_root=ROOT
    )

    LOGGER.info("Running footprint estimates from %s", config_path)
    reports = run_from_config(config_path, households=args.household)
    write_reports(reports, output_root)
    LOGGER.info("Household results written under %s", output_root)

    for name, report in reports.items():
        LOGGER.info(
            "Household '%s' summary (kg CO2e/year):\n%s",
            name,
            summary_frame(report).to_string(index=False),
        )
        for rank, strategy in enumerate(strategies_to_print(report, args.top), start=1):
            LOGGER.info(
                "  %d. [%s/%s] %s - saves %.0f kg",
                rank,
                strategy.category,
                strategy.difficulty,
                strategy.action,
                strategy.savings,
            )


if __name__ == "__main__":
    main()
