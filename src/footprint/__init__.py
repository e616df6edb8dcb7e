from .calculator import compute_footprint, run_from_config, unrecognized_keys
from .constants import EMISSION_FACTORS, STRATEGY_CATALOGUE
from .factors import DEFAULT_FACTORS, freeze_factors, load_emission_factors
from .models import (
    BreakdownEntry,
    ConsumptionInput,
    DietInput,
    EnergyInput,
    FootprintInput,
    FootprintResult,
    ReductionStrategy,
    TransportInput,
    default_input,
)
from .reporting import FootprintRating, FootprintReport, build_report, rate_footprint
from .strategies import combined_savings, generate_strategies, top_strategies

__all__ = [
    "DEFAULT_FACTORS",
    "EMISSION_FACTORS",
    "STRATEGY_CATALOGUE",
    "BreakdownEntry",
    "ConsumptionInput",
    "DietInput",
    "EnergyInput",
    "FootprintInput",
    "FootprintRating",
    "FootprintReport",
    "FootprintResult",
    "ReductionStrategy",
    "TransportInput",
    "build_report",
    "combined_savings",
    "compute_footprint",
    "default_input",
    "freeze_factors",
    "generate_strategies",
    "load_emission_factors",
    "rate_footprint",
    "run_from_config",
    "top_strategies",
    "unrecognized_keys",
]
