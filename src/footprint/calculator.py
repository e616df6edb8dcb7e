"""Estimate household emissions from questionnaire answers.

:func:`compute_footprint` turns a :class:`FootprintInput` into annual totals for
transport, home energy, diet and consumption (kg CO₂e/year) plus a percentage
breakdown. :func:`run_from_config` evaluates every household declared in
``config.yaml`` and pairs each result with its ranked reduction strategies.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Mapping, Sequence

import yaml

from .constants import (
    CATEGORIES,
    CLOTHING_SPEND_UNIT,
    DEFAULT_COMBINED_TOP_N,
    DEFAULT_DIET,
    DEFAULT_DISPLAY_LIMIT,
    ELECTRICITY_SUBTYPE,
    FLIGHT_CLASS,
    FLIGHT_MILES_PER_HOUR,
    MONTHS_PER_YEAR,
    RECREATION_SPEND_UNIT,
    TRANSIT_MODE,
    WEEKS_PER_YEAR,
)
from .factors import (
    DEFAULT_FACTORS,
    FactorTable,
    load_emission_factors,
    merge_factors,
    resolve_factors_path,
)
from .models import BreakdownEntry, FootprintInput, FootprintResult

if TYPE_CHECKING:  # pragma: no cover
    from .reporting import FootprintReport

LOGGER = logging.getLogger("footprint")
if not LOGGER.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    LOGGER.addHandler(handler)
LOGGER.setLevel(logging.INFO)
LOGGER.propagate = False


def compute_footprint(
    data: FootprintInput,
    factors: FactorTable = DEFAULT_FACTORS,
) -> FootprintResult:
    """Return annual emissions per category for one household.

    Weekly figures are annualised with 52 and monthly electricity with 12.
    Heating usage is applied as given (no ×12). An unknown car or heating type
    contributes 0 to its term, whereas an unknown diet falls back to the
    average diet. Inputs are not validated.
    """
    transport = data.transport
    car_emissions = _lookup_or_zero(
        transport.miles_per_week * WEEKS_PER_YEAR,
        factors.get("car", {}),
        transport.car_type,
    )
    transit_emissions = (
        transport.public_transport_miles
        * WEEKS_PER_YEAR
        * factors["public_transport"][TRANSIT_MODE]
    )
    flight_emissions = (
        transport.flights_per_year
        * transport.avg_flight_hours
        * FLIGHT_MILES_PER_HOUR
        * factors["aviation"][FLIGHT_CLASS]
    )
    total_transport = car_emissions + transit_emissions + flight_emissions

    energy = data.energy
    electricity_emissions = (
        energy.electricity_kwh * MONTHS_PER_YEAR * factors["electricity"][ELECTRICITY_SUBTYPE]
    )
    heating_emissions = _lookup_or_zero(
        energy.heating_usage, factors.get("heating", {}), energy.heating_type
    )
    total_energy = electricity_emissions + heating_emissions

    diet_factors = factors["diet"]
    diet_emissions = diet_factors.get(data.diet.type, diet_factors[DEFAULT_DIET])

    consumption = data.consumption
    consumption_factors = factors["consumption"]
    total_consumption = (
        consumption.clothing_shopping / CLOTHING_SPEND_UNIT * consumption_factors["clothing"]
        + consumption.electronics_per_year * consumption_factors["electronics"]
        + consumption.recreation_spending / RECREATION_SPEND_UNIT * consumption_factors["recreation"]
    )

    total = total_transport + total_energy + diet_emissions + total_consumption
    totals = (total_transport, total_energy, diet_emissions, total_consumption)

    return FootprintResult(
        transport=total_transport,
        energy=total_energy,
        diet=diet_emissions,
        consumption=total_consumption,
        total=total,
        breakdown=_build_breakdown(totals, total),
    )


def unrecognized_keys(
    data: FootprintInput,
    factors: FactorTable = DEFAULT_FACTORS,
) -> list[tuple[str, str]]:
    """List ``(field, value)`` pairs whose enum value is missing from ``factors``."""
    checks = (
        ("transport.car_type", data.transport.car_type, "car"),
        ("energy.heating_type", data.energy.heating_type, "heating"),
        ("diet.type", data.diet.type, "diet"),
    )
    return [
        (label, value)
        for label, value, category in checks
        if value not in factors.get(category, {})
    ]


def run_from_config(
    config_path: Path | str | None = None,
    *,
    households: Sequence[str] | None = None,
) -> dict[str, FootprintReport]:
    """Evaluate the households declared under ``footprint`` in ``config.yaml``."""
    from config_paths import REPO_ROOT, get_config_path  # local import to avoid cycle

    from .household_io import load_households
    from .reporting import build_report

    config_path = Path(config_path) if config_path is not None else get_config_path()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    with config_path.open() as handle:
        config = yaml.safe_load(handle) or {}

    module_cfg = config.get("footprint")
    if not isinstance(module_cfg, Mapping) or not module_cfg:
        raise ValueError("'footprint' section missing from config.yaml")

    factors = DEFAULT_FACTORS
    factors_setting = module_cfg.get("emission_factors_file")
    if factors_setting:
        factors_path = resolve_factors_path(str(factors_setting), config_path, REPO_ROOT)
        factors = load_emission_factors(factors_path)
    factors = merge_factors(factors, module_cfg.get("emission_factors"))

    declared = load_households(module_cfg.get("households"))
    if households:
        requested = [str(name).strip() for name in households if str(name).strip()]
        missing = [name for name in requested if name not in declared]
        if missing:
            available = ", ".join(sorted(declared)) or "<none>"
            raise KeyError(f"Households not configured: {missing}. Available: {available}")
        declared = {name: declared[name] for name in requested}

    display_limit = int(module_cfg.get("display_limit", DEFAULT_DISPLAY_LIMIT))
    top_n = int(module_cfg.get("combined_top_n", DEFAULT_COMBINED_TOP_N))

    reports = {}
    for name, data in declared.items():
        LOGGER.info("Calculating footprint for household '%s'", name)
        for label, value in unrecognized_keys(data, factors):
            fallback = "the average diet" if label == "diet.type" else "0 kg CO2e"
            LOGGER.warning(
                "  • %s '%s' has no emission factor; using %s", label, value, fallback
            )
        report = build_report(
            data,
            name=name,
            factors=factors,
            display_limit=display_limit,
            top_n=top_n,
        )
        LOGGER.info(
            "  • total %.1f kg CO2e/year (%s)", report.result.total, report.rating.rating
        )
        reports[name] = report
    return reports


def _lookup_or_zero(quantity: float, table: Mapping[str, float], key: str) -> float:
    factor = table.get(key)
    if factor is None:
        return 0.0
    return quantity * factor


def _build_breakdown(totals: Sequence[float], total: float) -> list[BreakdownEntry]:
    # A zero total would make every share NaN; report 0% instead.
    if total == 0:
        return [
            BreakdownEntry(category=name, emissions=value, percentage=0.0)
            for name, value in zip(CATEGORIES, totals)
        ]
    return [
        BreakdownEntry(category=name, emissions=value, percentage=value / total * 100)
        for name, value in zip(CATEGORIES, totals)
    ]
