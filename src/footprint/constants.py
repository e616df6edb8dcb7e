from __future__ import annotations

from types import MappingProxyType

# Annualisation and normalisation units used by the aggregator.
WEEKS_PER_YEAR = 52
MONTHS_PER_YEAR = 12
FLIGHT_MILES_PER_HOUR = 500
CLOTHING_SPEND_UNIT = 100.0
RECREATION_SPEND_UNIT = 1000.0

TRANSIT_MODE = "bus"
FLIGHT_CLASS = "domestic"
ELECTRICITY_SUBTYPE = "grid"
DEFAULT_DIET = "average"

CATEGORIES: tuple[str, ...] = ("Transport", "Energy", "Diet", "Consumption")

UNIT_LABEL = "kg CO2e/year"

# kg CO2e per unit of activity (US averages).
EMISSION_FACTORS = MappingProxyType(
    {
        "car": MappingProxyType(  # per mile
            {"gasoline": 0.411, "diesel": 0.457, "hybrid": 0.206, "electric": 0.089}
        ),
        "public_transport": MappingProxyType(  # per mile
            {"bus": 0.089, "train": 0.045, "subway": 0.056}
        ),
        "aviation": MappingProxyType(  # per mile
            {"domestic": 0.255, "international": 0.298}
        ),
        "electricity": MappingProxyType({"grid": 0.424}),  # per kWh
        "heating": MappingProxyType(  # per therm / gallon / kWh
            {"gas": 5.3, "oil": 10.15, "electric": 0.424}
        ),
        "diet": MappingProxyType(  # per year
            {"meatHeavy": 3287.0, "average": 2224.0, "vegetarian": 1608.0, "vegan": 1449.0}
        ),
        "consumption": MappingProxyType(
            {"clothing": 442.0, "electronics": 300.0, "furniture": 200.0, "recreation": 184.0}
        ),
    }
)

# Subtypes the aggregator reads unconditionally; a custom table must define them.
REQUIRED_FACTORS: dict[str, tuple[str, ...]] = {
    "public_transport": (TRANSIT_MODE,),
    "aviation": (FLIGHT_CLASS,),
    "electricity": (ELECTRICITY_SUBTYPE,),
    "diet": (DEFAULT_DIET,),
    "consumption": ("clothing", "electronics", "recreation"),
}

# Reduction strategies in emission order. ``threshold`` is the category total
# (kg CO2e/yr) that must be exceeded before the strategy is offered.
STRATEGY_CATALOGUE: tuple[dict[str, object], ...] = (
    {
        "category": "Transport",
        "action": "Switch to electric or hybrid vehicle",
        "impact": "Reduce transport emissions by 50-75%",
        "difficulty": "Hard",
        "fraction": 0.6,
        "threshold": 2000.0,
    },
    {
        "category": "Transport",
        "action": "Use public transport 2 days per week",
        "impact": "Reduce car emissions by 30%",
        "difficulty": "Medium",
        "fraction": 0.3,
        "threshold": None,
    },
    {
        "category": "Transport",
        "action": "Work from home 1-2 days per week",
        "impact": "Reduce commute emissions by 20-40%",
        "difficulty": "Easy",
        "fraction": 0.25,
        "threshold": None,
    },
    {
        "category": "Energy",
        "action": "Install solar panels",
        "impact": "Reduce electricity emissions by 80%",
        "difficulty": "Hard",
        "fraction": 0.8,
        "threshold": 3000.0,
    },
    {
        "category": "Energy",
        "action": "Switch to LED bulbs and efficient appliances",
        "impact": "Reduce electricity use by 20%",
        "difficulty": "Easy",
        "fraction": 0.2,
        "threshold": None,
    },
    {
        "category": "Energy",
        "action": "Improve home insulation",
        "impact": "Reduce heating emissions by 30%",
        "difficulty": "Medium",
        "fraction": 0.3,
        "threshold": None,
    },
    {
        "category": "Diet",
        "action": "Reduce meat consumption by half",
        "impact": "Lower diet emissions by 30-40%",
        "difficulty": "Medium",
        "fraction": 0.35,
        "threshold": 2500.0,
    },
    {
        "category": "Diet",
        "action": "Choose local and seasonal produce",
        "impact": "Reduce food transport emissions by 15%",
        "difficulty": "Easy",
        "fraction": 0.15,
        "threshold": None,
    },
    {
        "category": "Consumption",
        "action": "Buy second-hand clothes and electronics",
        "impact": "Reduce consumption emissions by 50%",
        "difficulty": "Easy",
        "fraction": 0.5,
        "threshold": None,
    },
    {
        "category": "Consumption",
        "action": "Repair instead of replacing items",
        "impact": "Extend product lifespan and reduce waste",
        "difficulty": "Easy",
        "fraction": 0.3,
        "threshold": None,
    },
)

DEFAULT_DISPLAY_LIMIT = 8
DEFAULT_COMBINED_TOP_N = 3

# Benchmarks shown next to a household total (kg CO2e/yr per person).
GLOBAL_AVERAGE_KG = 4800.0
PARIS_TARGET_KG = 2300.0

# Upper bounds (exclusive) for the footprint rating bands.
RATING_BANDS: tuple[tuple[float, str, str], ...] = (
    (3000.0, "Excellent", "Well below global average"),
    (5000.0, "Good", "Close to sustainable levels"),
    (8000.0, "Above Average", "Higher than global average"),
)
RATING_FALLBACK = ("High Impact", "Significantly above sustainable levels")
