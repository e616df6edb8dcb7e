from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Mapping, Sequence

import pandas as pd

from config_paths import safe_relative_path

from .constants import UNIT_LABEL
from .models import FootprintResult, ReductionStrategy
from .reporting import FootprintReport


def breakdown_frame(result: FootprintResult) -> pd.DataFrame:
    rows = [asdict(entry) for entry in result.breakdown]
    return pd.DataFrame(rows, columns=["category", "emissions", "percentage"])


def strategies_frame(strategies: Sequence[ReductionStrategy]) -> pd.DataFrame:
    columns = ["rank", "category", "action", "impact", "difficulty", "savings"]
    rows = [
        {"rank": rank, **asdict(strategy)}
        for rank, strategy in enumerate(strategies, start=1)
    ]
    return pd.DataFrame(rows, columns=columns)


def summary_frame(report: FootprintReport) -> pd.DataFrame:
    """One-row summary: totals, rating, combined top-N impact and benchmarks."""
    row: dict[str, object] = {"household": report.name}
    row.update({entry.category.lower(): entry.emissions for entry in report.result.breakdown})
    row["total"] = report.result.total
    row["rating"] = report.rating.rating
    row[f"top{report.top_n}_savings"] = report.combined_savings_kg
    row[f"top{report.top_n}_savings_percent"] = report.combined_savings_percent
    for label, value in report.benchmarks.items():
        if label == "Your Footprint":
            continue
        key = label.lower().replace(" ", "_")
        row[key] = value
    return pd.DataFrame([row])


def write_household_report(report: FootprintReport, destination: Path) -> None:
    dest_dir = Path(destination)
    dest_dir.mkdir(parents=True, exist_ok=True)
    frames = {
        "breakdown.csv": breakdown_frame(report.result),
        "strategies.csv": strategies_frame(report.displayed_strategies),
        "summary.csv": summary_frame(report),
    }
    for filename, df in frames.items():
        with (dest_dir / filename).open("w", encoding="utf-8", newline="") as fh:
            fh.write(f"# unit: {UNIT_LABEL}\n")
            df.to_csv(fh, index=False)


def household_directory_name(name: str) -> str:
    """Directory name for a household; never points outside the output root."""
    cleaned = safe_relative_path(str(name).replace(" ", "_"), "household name")
    if cleaned is None:
        raise ValueError(f"Household name {name!r} does not yield a usable directory name.")
    return cleaned


def write_reports(reports: Mapping[str, FootprintReport], destination_root: Path) -> None:
    """Write ``<dest>/<household>/{breakdown,strategies,summary}.csv``."""
    destination_root = Path(destination_root)
    for name, report in reports.items():
        write_household_report(report, destination_root / household_directory_name(name))
