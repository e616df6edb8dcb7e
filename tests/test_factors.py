from pathlib import Path

import pandas as pd
import pytest

from footprint.constants import EMISSION_FACTORS
from footprint.factors import (
    DEFAULT_FACTORS,
    freeze_factors,
    load_emission_factors,
    merge_factors,
    resolve_factors_path,
)

ROOT = Path(__file__).resolve().parents[1]
BUNDLED_CSV = ROOT / "data" / "footprint" / "emission_factors" / "us_average.csv"


def _as_dict(table):
    return {category: dict(subtypes) for category, subtypes in table.items()}


def _write_factors(path: Path, rows) -> Path:
    pd.DataFrame(rows, columns=["category", "subtype", "kg_co2e_per_unit"]).to_csv(
        path, index=False
    )
    return path


def test_default_factors_match_literal_table():
    assert _as_dict(DEFAULT_FACTORS) == _as_dict(EMISSION_FACTORS)
    assert DEFAULT_FACTORS["car"]["gasoline"] == 0.411
    assert DEFAULT_FACTORS["diet"]["meatHeavy"] == 3287.0


def test_bundled_csv_matches_builtin_table():
    loaded = load_emission_factors(BUNDLED_CSV)
    assert _as_dict(loaded) == _as_dict(DEFAULT_FACTORS)
    with pytest.raises(TypeError):
        loaded["car"]["gasoline"] = 0.0  # type: ignore[index]


@pytest.mark.parametrize("bad_value", [0.0, -1.0, float("inf"), float("nan")])
def test_freeze_factors_rejects_non_positive_or_non_finite(bad_value):
    table = _as_dict(DEFAULT_FACTORS)
    table["car"]["gasoline"] = bad_value
    with pytest.raises(ValueError, match="car.gasoline"):
        freeze_factors(table)


def test_freeze_factors_rejects_non_numeric():
    table = _as_dict(DEFAULT_FACTORS)
    table["heating"]["oil"] = "lots"
    with pytest.raises(ValueError, match="heating.oil"):
        freeze_factors(table)


def test_freeze_factors_requires_aggregator_entries():
    table = _as_dict(DEFAULT_FACTORS)
    del table["public_transport"]["bus"]
    with pytest.raises(KeyError, match="public_transport.bus"):
        freeze_factors(table)


def test_car_and_heating_entries_are_optional():
    table = _as_dict(DEFAULT_FACTORS)
    table["car"] = {"electric": 0.089}
    frozen = freeze_factors(table)
    assert "gasoline" not in frozen["car"]


def test_merge_factors_applies_overrides():
    merged = merge_factors(DEFAULT_FACTORS, {"electricity": {"grid": 0.2}, "car": {"cng": 0.3}})
    assert merged["electricity"]["grid"] == 0.2
    assert merged["car"]["cng"] == 0.3
    assert merged["car"]["gasoline"] == 0.411
    assert DEFAULT_FACTORS["electricity"]["grid"] == 0.424
    assert merge_factors(DEFAULT_FACTORS, None) is DEFAULT_FACTORS


def test_load_emission_factors_requires_columns(tmp_path: Path):
    path = tmp_path / "factors.csv"
    pd.DataFrame({"category": ["car"], "value": [1.0]}).to_csv(path, index=False)
    with pytest.raises(ValueError, match="missing columns"):
        load_emission_factors(path)


def test_load_emission_factors_rejects_duplicates(tmp_path: Path):
    rows = [[cat, sub, val] for cat, subs in DEFAULT_FACTORS.items() for sub, val in subs.items()]
    rows.append(["car", "gasoline", 0.5])
    path = _write_factors(tmp_path / "factors.csv", rows)
    with pytest.raises(ValueError, match="Duplicate"):
        load_emission_factors(path)


def test_load_emission_factors_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_emission_factors(tmp_path / "absent.csv")


def test_resolve_factors_path_prefers_config_relative(tmp_path: Path):
    config_path = tmp_path / "config.yaml"
    local = _write_factors(tmp_path / "local.csv", [["car", "gasoline", 0.4]])
    assert resolve_factors_path("local.csv", config_path, ROOT) == local.resolve()
    assert resolve_factors_path("us_average.csv", config_path, ROOT) == BUNDLED_CSV
    with pytest.raises(FileNotFoundError):
        resolve_factors_path("nowhere.csv", config_path, ROOT)
