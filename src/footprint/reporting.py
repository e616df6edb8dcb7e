"""Bundle a footprint with its strategies, rating and reference benchmarks."""

from __future__ import annotations

from dataclasses import dataclass

from .calculator import compute_footprint
from .constants import (
    DEFAULT_COMBINED_TOP_N,
    DEFAULT_DISPLAY_LIMIT,
    GLOBAL_AVERAGE_KG,
    PARIS_TARGET_KG,
    RATING_BANDS,
    RATING_FALLBACK,
)
from .factors import DEFAULT_FACTORS, FactorTable
from .models import FootprintInput, FootprintResult, ReductionStrategy
from .strategies import combined_savings, generate_strategies, top_strategies


@dataclass(frozen=True)
class FootprintRating:
    rating: str
    description: str


@dataclass
class FootprintReport:
    """Everything the results screen needs for one household."""

    name: str
    input: FootprintInput
    result: FootprintResult
    strategies: list[ReductionStrategy]
    rating: FootprintRating
    benchmarks: dict[str, float]
    combined_savings_kg: float
    combined_savings_percent: float
    display_limit: int = DEFAULT_DISPLAY_LIMIT
    top_n: int = DEFAULT_COMBINED_TOP_N

    @property
    def displayed_strategies(self) -> list[ReductionStrategy]:
        return top_strategies(self.strategies, self.display_limit)


def rate_footprint(total: float) -> FootprintRating:
    for upper, rating, description in RATING_BANDS:
        if total < upper:
            return FootprintRating(rating, description)
    return FootprintRating(*RATING_FALLBACK)


def compare_to_benchmarks(result: FootprintResult) -> dict[str, float]:
    return {
        "Your Footprint": result.total,
        "Global Average": GLOBAL_AVERAGE_KG,
        "Paris Agreement Target": PARIS_TARGET_KG,
    }


def build_report(
    data: FootprintInput,
    *,
    name: str = "household",
    factors: FactorTable = DEFAULT_FACTORS,
    display_limit: int = DEFAULT_DISPLAY_LIMIT,
    top_n: int = DEFAULT_COMBINED_TOP_N,
) -> FootprintReport:
    result = compute_footprint(data, factors)
    strategies = generate_strategies(result)
    saved_kg, saved_percent = combined_savings(strategies, result.total, top_n)
    return FootprintReport(
        name=name,
        input=data,
        result=result,
        strategies=strategies,
        rating=rate_footprint(result.total),
        benchmarks=compare_to_benchmarks(result),
        combined_savings_kg=saved_kg,
        combined_savings_percent=saved_percent,
        display_limit=display_limit,
        top_n=top_n,
    )
