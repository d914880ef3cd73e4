"""
Deterministic transition function.

A capacity action changes one city's supply by one increment, then the budget
pays (or recovers) the capital cost and pays the operating cost of the whole
post-action fleet.  Operating cost is an ongoing expense billed once per
epoch, not only on the changed increment.

Feasibility is not checked here.  An infeasible action still produces a
state (negative supply, deeper debt); callers that honour ``valid_actions``
never hit that path.
"""

from __future__ import annotations

from typing import Sequence

from ..model import (
    Action, CityRecord, NoOp,
    ScenarioParameters, WorldState,
)


def operating_cost(params: ScenarioParameters, cities: Sequence[CityRecord]) -> float:
    """Per-epoch operating cost of all installed renewable and non-renewable supply."""
    return sum(
        city.renewable_supply * params.operating_cost_re[i]
        + city.nonrenewable_supply * params.operating_cost_nre[i]
        for i, city in enumerate(cities)
    )


def transition(params: ScenarioParameters, state: WorldState, action: Action) -> WorldState:
    """Return the successor of ``state`` under ``action`` as a fresh value."""
    if isinstance(action, NoOp):
        return WorldState(budget=state.budget, total_demand=state.total_demand, cities=state.cities)

    increment = params.supply_increment(action.kind)
    capital = params.capital_cost(action.kind, action.direction)
    sign = 1.0 if action.is_add else -1.0

    target = state.cities[action.city_index]
    next_state = state.with_city(
        action.city_index, target.with_supply_change(action.kind, sign * increment)
    )

    running = operating_cost(params, next_state.cities)
    if action.is_add:
        budget = state.budget - capital - running
    else:
        budget = state.budget + capital - running
    return next_state.with_budget(budget)
