"""Validation, freezing and loading of emission-factor tables.

A factor table is a two-level mapping ``category -> subtype -> kg CO2e per
unit``. Tables handed to the calculator are read-only
(:class:`types.MappingProxyType` at both levels) and every factor is a strictly
positive, finite number.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import numpy as np
import pandas as pd

from .constants import EMISSION_FACTORS, REQUIRED_FACTORS

LOGGER = logging.getLogger("footprint.factors")

FactorTable = Mapping[str, Mapping[str, float]]

FACTOR_COLUMNS = ("category", "subtype", "kg_co2e_per_unit")


def freeze_factors(table: Mapping[str, Mapping[str, float]]) -> FactorTable:
    """Validate ``table`` and return an immutable copy of it."""
    frozen: dict[str, MappingProxyType] = {}
    for category, subtypes in table.items():
        if not isinstance(subtypes, Mapping):
            raise ValueError(
                f"Emission factor category '{category}' must map subtypes to values."
            )
        entries: dict[str, float] = {}
        for subtype, value in subtypes.items():
            try:
                entries[str(subtype)] = float(value)
            except (TypeError, ValueError) as exc:
                raise ValueError(
                    f"Emission factor {category}.{subtype} is not numeric: {value!r}"
                ) from exc
        frozen[str(category)] = MappingProxyType(entries)
    _check_values(frozen)
    _check_required(frozen)
    return MappingProxyType(frozen)


def merge_factors(
    base: FactorTable,
    overrides: Mapping[str, Mapping[str, float]] | None,
) -> FactorTable:
    """Return ``base`` with per-subtype ``overrides`` applied."""
    if not overrides:
        return base
    merged: dict[str, dict[str, float]] = {
        category: dict(subtypes) for category, subtypes in base.items()
    }
    for category, subtypes in overrides.items():
        if not isinstance(subtypes, Mapping):
            raise ValueError(
                f"Emission factor override '{category}' must map subtypes to values."
            )
        merged.setdefault(str(category), {}).update(subtypes)
    return freeze_factors(merged)


def load_emission_factors(path: Path | str) -> FactorTable:
    """Read a factor table from CSV (``category, subtype, kg_co2e_per_unit``)."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Emission factors file not found: {path}")
    df = pd.read_csv(path, comment="#", skipinitialspace=True)
    missing = [column for column in FACTOR_COLUMNS if column not in df.columns]
    if missing:
        raise ValueError(
            f"Emission factors CSV '{path}' is missing columns {missing}. "
            f"Available columns: {', '.join(map(str, df.columns))}"
        )
    df["category"] = df["category"].astype(str).str.strip()
    df["subtype"] = df["subtype"].astype(str).str.strip()
    duplicated = df.duplicated(subset=["category", "subtype"])
    if duplicated.any():
        rows = df.loc[duplicated, ["category", "subtype"]].itertuples(index=False)
        raise ValueError(
            "Duplicate emission factors: "
            + ", ".join(f"{cat}.{sub}" for cat, sub in rows)
        )
    table: dict[str, dict[str, float]] = {}
    for row in df.itertuples(index=False):
        table.setdefault(row.category, {})[row.subtype] = row.kg_co2e_per_unit
    LOGGER.info("Loaded %d emission factors from %s", len(df), path)
    return freeze_factors(table)


def resolve_factors_path(setting: str, config_path: Path, repo_root: Path) -> Path:
    """Locate a factor CSV.

    Resolution order:
      1. ``setting`` as an absolute path.
      2. Relative to the directory of the config file.
      3. ``<repo>/data/footprint/emission_factors/<basename>``.
    """
    candidate = Path(setting)
    candidates: list[Path] = []
    if candidate.is_absolute():
        candidates.append(candidate)
    else:
        candidates.append((config_path.parent / candidate).resolve())
    candidates.append(repo_root / "data" / "footprint" / "emission_factors" / candidate.name)
    existing = next((path for path in candidates if path.exists()), None)
    if existing is None:
        raise FileNotFoundError(
            "Emission factors file not found. Checked absolute path, relative to the "
            f"config, and data/footprint/emission_factors/{candidate.name}"
        )
    return existing


def _check_values(table: Mapping[str, Mapping[str, float]]) -> None:
    labels = [f"{cat}.{sub}" for cat, subs in table.items() for sub in subs]
    values = np.array(
        [value for subs in table.values() for value in subs.values()], dtype=float
    )
    bad = ~np.isfinite(values) | (values <= 0)
    if bad.any():
        offenders = [label for label, flag in zip(labels, bad) if flag]
        raise ValueError(
            f"Emission factors must be positive and finite; offending entries: {offenders}"
        )


def _check_required(table: Mapping[str, Mapping[str, float]]) -> None:
    missing = [
        f"{category}.{subtype}"
        for category, subtypes in REQUIRED_FACTORS.items()
        for subtype in subtypes
        if subtype not in table.get(category, {})
    ]
    if missing:
        raise KeyError(f"Emission factor table is missing required entries: {missing}")


# The built-in table goes through the same checks as any loaded one.
DEFAULT_FACTORS: FactorTable = freeze_factors(EMISSION_FACTORS)
