from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Literal

Difficulty = Literal["Easy", "Medium", "Hard"]
CarType = Literal["gasoline", "diesel", "hybrid", "electric"]
HeatingType = Literal["gas", "electric", "oil"]
DietType = Literal["meatHeavy", "average", "vegetarian", "vegan"]


@dataclass
class TransportInput:
    """Weekly driving/transit miles and yearly flights."""

    car_type: str = "gasoline"
    miles_per_week: float = 0.0
    public_transport_miles: float = 0.0
    flights_per_year: int = 0
    avg_flight_hours: float = 0.0


@dataclass
class EnergyInput:
    """Monthly electricity (kWh) and heating usage in fuel-specific units.

    ``home_size`` (sq ft) is collected by the form but not used by the formula.
    """

    electricity_kwh: float = 0.0
    heating_type: str = "gas"
    heating_usage: float = 0.0
    home_size: float = 0.0


@dataclass
class DietInput:
    type: str = "average"


@dataclass
class ConsumptionInput:
    """Monthly clothing/recreation spend (currency units) and devices per year."""

    clothing_shopping: float = 0.0
    electronics_per_year: int = 0
    recreation_spending: float = 0.0


@dataclass
class FootprintInput:
    """Complete household questionnaire handed to :func:`compute_footprint`."""

    transport: TransportInput = field(default_factory=TransportInput)
    energy: EnergyInput = field(default_factory=EnergyInput)
    diet: DietInput = field(default_factory=DietInput)
    consumption: ConsumptionInput = field(default_factory=ConsumptionInput)

    def with_transport(self, **changes: object) -> FootprintInput:
        return replace(self, transport=replace(self.transport, **changes))

    def with_energy(self, **changes: object) -> FootprintInput:
        return replace(self, energy=replace(self.energy, **changes))

    def with_diet(self, **changes: object) -> FootprintInput:
        return replace(self, diet=replace(self.diet, **changes))

    def with_consumption(self, **changes: object) -> FootprintInput:
        return replace(self, consumption=replace(self.consumption, **changes))


def default_input() -> FootprintInput:
    """Starting values presented by the questionnaire before the user edits it."""
    return FootprintInput(
        transport=TransportInput(
            car_type="gasoline",
            miles_per_week=100.0,
            public_transport_miles=0.0,
            flights_per_year=0,
            avg_flight_hours=0.0,
        ),
        energy=EnergyInput(
            electricity_kwh=900.0,
            heating_type="gas",
            heating_usage=150.0,
            home_size=1500.0,
        ),
        diet=DietInput(type="average"),
        consumption=ConsumptionInput(
            clothing_shopping=100.0,
            electronics_per_year=0,
            recreation_spending=500.0,
        ),
    )


@dataclass(frozen=True)
class BreakdownEntry:
    category: str
    emissions: float
    percentage: float


@dataclass
class FootprintResult:
    """Annual emissions per category (kg CO2e/yr) with a percentage breakdown."""

    transport: float
    energy: float
    diet: float
    consumption: float
    total: float
    breakdown: list[BreakdownEntry]

    def category_totals(self) -> dict[str, float]:
        return {
            "Transport": self.transport,
            "Energy": self.energy,
            "Diet": self.diet,
            "Consumption": self.consumption,
        }


@dataclass(frozen=True)
class ReductionStrategy:
    """Candidate behavioural change with its estimated annual saving."""

    category: str
    action: str
    impact: str
    difficulty: Difficulty
    savings: float
