"""Rank candidate reduction actions for a computed footprint."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from .constants import (
    DEFAULT_COMBINED_TOP_N,
    DEFAULT_DISPLAY_LIMIT,
    STRATEGY_CATALOGUE,
)
from .models import FootprintResult, ReductionStrategy


def generate_strategies(
    result: FootprintResult,
    catalogue: Iterable[Mapping[str, object]] = STRATEGY_CATALOGUE,
) -> list[ReductionStrategy]:
    """Return strategies sorted by estimated savings, largest first.

    Each candidate saves ``category total × fraction``. Entries with a threshold
    are only offered when the category total is strictly above it. Ties keep
    catalogue order.
    """
    totals = result.category_totals()
    candidates: list[ReductionStrategy] = []
    for entry in catalogue:
        category = str(entry["category"])
        category_total = totals[category]
        threshold = entry.get("threshold")
        if threshold is not None and not category_total > threshold:
            continue
        candidates.append(
            ReductionStrategy(
                category=category,
                action=str(entry["action"]),
                impact=str(entry["impact"]),
                difficulty=entry["difficulty"],  # type: ignore[arg-type]
                savings=category_total * float(entry["fraction"]),
            )
        )
    # sorted() is stable with reverse=True, so equal savings keep insertion order.
    return sorted(candidates, key=lambda strategy: strategy.savings, reverse=True)


def top_strategies(
    strategies: Sequence[ReductionStrategy],
    limit: int = DEFAULT_DISPLAY_LIMIT,
) -> list[ReductionStrategy]:
    return list(strategies[: max(limit, 0)])


def combined_savings(
    strategies: Sequence[ReductionStrategy],
    total: float,
    top_n: int = DEFAULT_COMBINED_TOP_N,
) -> tuple[float, float]:
    """Savings of the first ``top_n`` strategies in kg and as % of ``total``."""
    saved = sum(strategy.savings for strategy in strategies[: max(top_n, 0)])
    if total == 0:
        return saved, 0.0
    return saved, saved / total * 100
