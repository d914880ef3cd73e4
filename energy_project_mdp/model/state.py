"""
City and world-state value types.

Both types are frozen: a transition never edits a city or a state in place,
it builds new values and shares every untouched city by reference.  A state
can therefore serve as the root of several hypothetical branches at once.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Tuple

from .actions import EnergyKind


@dataclass(frozen=True)
class CityRecord:
    """Energy profile of a single city."""
    name: str = ""
    demand: float = 1.0                  # Energy demand per epoch
    renewable_supply: float = 0.0        # Installed renewable capacity
    nonrenewable_supply: float = 0.0     # Installed non-renewable capacity
    population: float = 1.0
    is_high_income: bool = True

    @property
    def total_supply(self) -> float:
        return self.renewable_supply + self.nonrenewable_supply

    @property
    def unmet_demand(self) -> float:
        """Demand not covered by either source (never negative)."""
        return max(0.0, self.demand - self.total_supply)

    @property
    def is_served(self) -> bool:
        """Demand fully met by renewable and non-renewable supply combined."""
        return self.total_supply >= self.demand

    @property
    def is_renewable_served(self) -> bool:
        """Demand fully met by renewable supply alone."""
        return self.renewable_supply >= self.demand

    def supply_of(self, kind: EnergyKind) -> float:
        if kind is EnergyKind.RENEWABLE:
            return self.renewable_supply
        return self.nonrenewable_supply

    def with_supply_change(self, kind: EnergyKind, delta: float) -> "CityRecord":
        """Return a new record with ``delta`` added to the supply of ``kind``."""
        if kind is EnergyKind.RENEWABLE:
            return replace(self, renewable_supply=self.renewable_supply + delta)
        return replace(self, nonrenewable_supply=self.nonrenewable_supply + delta)


@dataclass(frozen=True)
class WorldState:
    """
    Budget plus the ordered list of cities.

    ``total_demand`` is a snapshot taken when the state is first built and is
    carried forward unchanged; demands are fixed after initialization.
    A city's position in ``cities`` is its identity for actions.
    """
    budget: float
    total_demand: float
    cities: Tuple[CityRecord, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any sequence but always store a tuple so states stay hashable
        if not isinstance(self.cities, tuple):
            object.__setattr__(self, "cities", tuple(self.cities))

    @classmethod
    def from_cities(cls, budget: float, cities: Iterable[CityRecord]) -> "WorldState":
        """Build a state, taking the total-demand snapshot from ``cities``."""
        cities = tuple(cities)
        return cls(budget=budget, total_demand=sum(c.demand for c in cities), cities=cities)

    @property
    def number_of_cities(self) -> int:
        return len(self.cities)

    def with_city(self, index: int, city: CityRecord) -> "WorldState":
        """New state with city ``index`` swapped out; other cities are shared."""
        cities = self.cities[:index] + (city,) + self.cities[index + 1:]
        return WorldState(budget=self.budget, total_demand=self.total_demand, cities=cities)

    def with_budget(self, budget: float) -> "WorldState":
        return WorldState(budget=budget, total_demand=self.total_demand, cities=self.cities)
