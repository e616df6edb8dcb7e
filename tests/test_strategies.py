import pytest

from footprint.calculator import compute_footprint
from footprint.models import FootprintResult, default_input
from footprint.strategies import combined_savings, generate_strategies, top_strategies


def _result(transport=0.0, energy=0.0, diet=0.0, consumption=0.0) -> FootprintResult:
    total = transport + energy + diet + consumption
    return FootprintResult(
        transport=transport,
        energy=energy,
        diet=diet,
        consumption=consumption,
        total=total,
        breakdown=[],
    )


def _actions(strategies):
    return [strategy.action for strategy in strategies]


def test_strategies_are_sorted_by_savings():
    strategies = generate_strategies(compute_footprint(default_input()))
    savings = [strategy.savings for strategy in strategies]
    assert all(a >= b for a, b in zip(savings, savings[1:]))


def test_worked_example_ranking():
    strategies = generate_strategies(compute_footprint(default_input()))

    assert _actions(strategies) == [
        "Install solar panels",
        "Improve home insulation",
        "Switch to electric or hybrid vehicle",
        "Switch to LED bulbs and efficient appliances",
        "Use public transport 2 days per week",
        "Work from home 1-2 days per week",
        "Choose local and seasonal produce",
        "Buy second-hand clothes and electronics",
        "Repair instead of replacing items",
    ]
    assert strategies[0].savings == pytest.approx(5374.2 * 0.8)
    assert strategies[0].difficulty == "Hard"
    assert strategies[0].category == "Energy"


def test_vehicle_switch_requires_transport_above_threshold():
    above = generate_strategies(_result(transport=2500.0))
    switch = [s for s in above if s.action == "Switch to electric or hybrid vehicle"]
    assert len(switch) == 1
    assert switch[0].savings == pytest.approx(1500.0)

    below = generate_strategies(_result(transport=1500.0))
    assert "Switch to electric or hybrid vehicle" not in _actions(below)


def test_thresholds_are_strict():
    strategies = generate_strategies(_result(transport=2000.0, energy=3000.0, diet=2500.0))
    actions = _actions(strategies)
    assert "Switch to electric or hybrid vehicle" not in actions
    assert "Install solar panels" not in actions
    assert "Reduce meat consumption by half" not in actions


def test_diet_above_threshold_unlocks_meat_reduction():
    strategies = generate_strategies(_result(diet=3287.0))
    meat = [s for s in strategies if s.action == "Reduce meat consumption by half"]
    assert meat and meat[0].savings == pytest.approx(3287.0 * 0.35)


def test_meat_heavy_household_is_offered_meat_reduction():
    result = compute_footprint(default_input().with_diet(type="meatHeavy"))
    meat = [s for s in generate_strategies(result) if s.action == "Reduce meat consumption by half"]

    assert result.diet == 3287.0
    assert len(meat) == 1
    assert meat[0].savings == pytest.approx(3287.0 * 0.35)


def test_unconditional_strategies_always_present():
    strategies = generate_strategies(_result())
    assert len(strategies) == 7
    assert all(strategy.savings == 0.0 for strategy in strategies)


def test_ties_keep_catalogue_order():
    strategies = generate_strategies(
        _result(transport=1000.0, energy=1000.0, diet=1000.0, consumption=1000.0)
    )
    assert [(s.category, s.action) for s in strategies] == [
        ("Consumption", "Buy second-hand clothes and electronics"),
        ("Transport", "Use public transport 2 days per week"),
        ("Energy", "Improve home insulation"),
        ("Consumption", "Repair instead of replacing items"),
        ("Transport", "Work from home 1-2 days per week"),
        ("Energy", "Switch to LED bulbs and efficient appliances"),
        ("Diet", "Choose local and seasonal produce"),
    ]


def test_top_strategies_and_combined_savings():
    result = compute_footprint(default_input())
    strategies = generate_strategies(result)

    assert len(top_strategies(strategies)) == 8
    assert top_strategies(strategies, 2) == strategies[:2]
    assert top_strategies(strategies, -1) == []

    saved, percent = combined_savings(strategies, result.total)
    expected = 5374.2 * 0.8 + 5374.2 * 0.3 + 2137.2 * 0.6
    assert saved == pytest.approx(expected)
    assert percent == pytest.approx(expected / 10269.4 * 100)


def test_combined_savings_with_zero_total():
    assert combined_savings([], 0.0) == (0.0, 0.0)
