"""
State grid enumeration for tabular solvers.

The state space is continuous (budget and supplies are reals), so value
iteration style solvers get a finite, lossy covering instead of the true
reachable set:

- up to MAX_BUDGET_LEVELS evenly spaced budgets in [min_budget, max_budget]
- crossed with the initial city configuration plus single-step variants in
  which one of the first MAX_PERTURBED_CITIES cities gains one energy step
  of renewable or non-renewable supply.

Most states reached by ``transition`` do not land on this grid;
``StateIndexer`` snaps them to the nearest grid point.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

import numpy as np

from ..model import CityRecord, EnergyKind, ScenarioParameters, WorldState

logger = logging.getLogger(__name__)

MAX_BUDGET_LEVELS = 10
MAX_PERTURBED_CITIES = 3


def budget_levels(params: ScenarioParameters) -> List[float]:
    """Evenly spaced budget levels between the configured bounds, inclusive."""
    span = params.max_budget - params.min_budget
    n_levels = int(np.floor(span / params.budget_discretization + 1e-9)) + 1
    n_levels = max(1, min(MAX_BUDGET_LEVELS, n_levels))
    levels = np.linspace(params.min_budget, params.max_budget, n_levels)
    # linspace can overshoot the bounds by an ulp
    levels = np.clip(levels, params.min_budget, params.max_budget)
    return [float(b) for b in levels]


def city_configurations(params: ScenarioParameters) -> List[Tuple[CityRecord, ...]]:
    """Base configuration followed by its single-step supply perturbations."""
    base = tuple(params.cities)
    configs = [base]
    step = params.energy_discretization

    for i in range(min(MAX_PERTURBED_CITIES, len(base))):
        city = base[i]
        for kind in (EnergyKind.RENEWABLE, EnergyKind.NONRENEWABLE):
            if city.supply_of(kind) + step > params.max_energy_per_city:
                continue
            configs.append(base[:i] + (city.with_supply_change(kind, step),) + base[i + 1:])
    return configs


def enumerate_states(params: ScenarioParameters) -> List[WorldState]:
    """
    Finite, de-duplicated grid of world states in deterministic order.

    Budget levels vary slowest; within one budget the configurations follow
    ``city_configurations`` order.
    """
    total_demand = sum(c.demand for c in params.cities)
    grid = (
        WorldState(budget=budget, total_demand=total_demand, cities=config)
        for budget in budget_levels(params)
        for config in city_configurations(params)
    )
    states = list(dict.fromkeys(grid))
    logger.debug(f"Enumerated {len(states)} grid states for {len(params.cities)} cities")
    return states
