"""
Scenario parameters for the energy allocation process.

ScenarioParameters bundles costs, supply increments, reward weights, the
discount factor, discretization constants and the initial cities.  It is a
plain dataclass so presets and JSON files can fill it field by field;
``validate()`` is the single place configuration problems are detected.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields, asdict
from typing import Any, Dict, List

from .actions import Direction, EnergyKind
from .errors import ConfigurationError
from .state import CityRecord

_CITY_NUMERIC_FIELDS = ("demand", "renewable_supply", "nonrenewable_supply", "population")


def _city_from_dict(data: Dict[str, Any]) -> CityRecord:
    """CityRecord from JSON data; numeric fields written as strings are coerced."""
    values = dict(data)
    for name in _CITY_NUMERIC_FIELDS:
        if name in values:
            values[name] = float(values[name])
    return CityRecord(**values)


@dataclass
class ScenarioParameters:
    """Configuration for one energy allocation scenario."""
    # Cities
    number_of_cities: int = 2
    cities: List[CityRecord] = field(default_factory=list)
    initial_budget: float = 1000.0

    # Capital costs (one-time, per supply increment)
    cost_of_adding_re: float = 2.0
    cost_of_adding_nre: float = 1.5
    cost_of_removing_re: float = 1.2
    cost_of_removing_nre: float = 1.4

    # Operating costs per installed unit per epoch, one entry per city
    operating_cost_re: List[float] = field(default_factory=lambda: [0.0015, 0.002])
    operating_cost_nre: List[float] = field(default_factory=lambda: [0.001, 0.0015])

    # Capacity added or removed by a single action
    supply_of_re: float = 200.0
    supply_of_nre: float = 200.0

    # Reward weights
    weight_budget: float = 0.5                          # Remaining budget (+)
    weight_low_income_without_energy: float = -10.0     # Unserved low-income share (-)
    weight_population_with_re: float = 5.0              # Population served by RE alone (+)
    clamp_budget_reward: bool = False                   # Use max(0, budget) for the budget term

    discount_rate: float = 0.95

    # Discretization for tabular solvers
    budget_discretization: float = 250.0
    min_budget: float = 0.0
    max_budget: float = 1000.0
    energy_discretization: float = 4.0
    max_energy_per_city: float = 80.0

    # ------------------------------------------------------------------
    # Lookups used by the dynamics
    # ------------------------------------------------------------------

    def capital_cost(self, kind: EnergyKind, direction: Direction) -> float:
        if kind is EnergyKind.RENEWABLE:
            return self.cost_of_adding_re if direction is Direction.ADD else self.cost_of_removing_re
        return self.cost_of_adding_nre if direction is Direction.ADD else self.cost_of_removing_nre

    def supply_increment(self, kind: EnergyKind) -> float:
        return self.supply_of_re if kind is EnergyKind.RENEWABLE else self.supply_of_nre

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self) -> "ScenarioParameters":
        """
        Check the configuration and return ``self``.

        Raises ConfigurationError on the first problem found.  Called when a
        scenario is built so that nothing fails later during simulation.
        """
        if self.number_of_cities <= 0 or not self.cities:
            raise ConfigurationError("Scenario must contain at least one city")
        if len(self.cities) != self.number_of_cities:
            raise ConfigurationError(
                f"number_of_cities={self.number_of_cities} but {len(self.cities)} cities given"
            )

        for i, city in enumerate(self.cities):
            label = city.name or f"#{i}"
            if not city.demand > 0:
                raise ConfigurationError(f"City {label} has non-positive demand {city.demand}")
            if not city.population > 0:
                raise ConfigurationError(f"City {label} has non-positive population {city.population}")
            if city.renewable_supply < 0 or city.nonrenewable_supply < 0:
                raise ConfigurationError(f"City {label} has negative initial supply")
            if max(city.renewable_supply, city.nonrenewable_supply) > self.max_energy_per_city:
                raise ConfigurationError(
                    f"City {label} starts above max_energy_per_city={self.max_energy_per_city}"
                )

        for name in ("operating_cost_re", "operating_cost_nre"):
            costs = getattr(self, name)
            if len(costs) < self.number_of_cities:
                raise ConfigurationError(
                    f"{name} has {len(costs)} entries, need one per city ({self.number_of_cities})"
                )

        incomes = {city.is_high_income for city in self.cities}
        if incomes != {True, False}:
            raise ConfigurationError(
                "Scenario needs at least one high-income and one low-income city"
            )

        if not 0.0 < self.discount_rate <= 1.0:
            raise ConfigurationError(f"discount_rate must be in (0, 1], got {self.discount_rate}")
        if self.supply_of_re <= 0 or self.supply_of_nre <= 0:
            raise ConfigurationError("Supply increments must be positive")
        if self.budget_discretization <= 0 or self.energy_discretization <= 0:
            raise ConfigurationError("Discretization steps must be positive")
        if not (math.isfinite(self.min_budget) and math.isfinite(self.max_budget)):
            raise ConfigurationError("Budget bounds must be finite")
        if self.min_budget > self.max_budget:
            raise ConfigurationError(
                f"min_budget {self.min_budget} exceeds max_budget {self.max_budget}"
            )
        if self.max_energy_per_city <= 0:
            raise ConfigurationError("max_energy_per_city must be positive")

        return self

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScenarioParameters":
        """Build parameters from a plain dict (as produced by ``to_dict``)."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"Unknown scenario keys: {sorted(unknown)}")

        kwargs = dict(data)
        if "cities" in kwargs:
            try:
                kwargs["cities"] = [
                    c if isinstance(c, CityRecord) else _city_from_dict(c)
                    for c in kwargs["cities"]
                ]
            except (TypeError, ValueError) as exc:
                raise ConfigurationError(f"Invalid city entry: {exc}") from exc
        for name in ("operating_cost_re", "operating_cost_nre"):
            if name in kwargs:
                kwargs[name] = [float(v) for v in kwargs[name]]
        return cls(**kwargs)
