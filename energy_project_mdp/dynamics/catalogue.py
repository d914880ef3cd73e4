"""
Action catalogue.

The full catalogue is NoOp followed by four actions per city, in city order:
add-renewable, remove-renewable, add-nonrenewable, remove-nonrenewable.
Its size is therefore ``1 + 4 * number_of_cities``.
"""

from __future__ import annotations

from typing import List

from ..model import (
    Action, Direction, EnergyKind, Modify, NoOp, NO_OP,
    ScenarioParameters, WorldState,
)

_PER_CITY_ORDER = (
    (EnergyKind.RENEWABLE, Direction.ADD),
    (EnergyKind.RENEWABLE, Direction.REMOVE),
    (EnergyKind.NONRENEWABLE, Direction.ADD),
    (EnergyKind.NONRENEWABLE, Direction.REMOVE),
)


def all_actions(params: ScenarioParameters) -> List[Action]:
    """Every admissible action for the scenario, feasible or not."""
    actions: List[Action] = [NO_OP]
    for city_index in range(params.number_of_cities):
        for kind, direction in _PER_CITY_ORDER:
            actions.append(Modify(kind=kind, direction=direction, city_index=city_index))
    return actions


def is_feasible(params: ScenarioParameters, state: WorldState, action: Action) -> bool:
    """
    Whether ``action`` may be taken in ``state``.

    Add needs the capital cost to be affordable and the target supply to stay
    within ``max_energy_per_city``; remove needs at least one increment of
    installed supply.  NoOp is always feasible.
    """
    if isinstance(action, NoOp):
        return True
    if not 0 <= action.city_index < len(state.cities):
        return False

    city = state.cities[action.city_index]
    increment = params.supply_increment(action.kind)
    supply = city.supply_of(action.kind)

    if action.is_add:
        cost = params.capital_cost(action.kind, action.direction)
        return state.budget >= cost and supply + increment <= params.max_energy_per_city
    return supply >= increment


def valid_actions(params: ScenarioParameters, state: WorldState) -> List[Action]:
    """Feasible subset of ``all_actions`` in catalogue order (always includes NoOp)."""
    return [a for a in all_actions(params) if is_feasible(params, state, a)]
