"""
Multi-objective reward.

The reward is the sum of three independently computable components:

budget
    ``budget * weight_budget`` (``max(0, budget)`` when the scenario sets
    ``clamp_budget_reward``).
equity_penalty
    Share of the low-income population whose demand is unmet by combined
    supply, times ``weight_low_income_without_energy`` (a negative weight).
renewable_bonus
    Share of the total population whose demand is met by renewable supply
    alone, times ``weight_population_with_re``.

Both shares are population-weighted.  The reward depends only on the state;
the action argument is kept so solvers can call it as R(s, a).
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict, Optional

from ..model import Action, ScenarioParameters, WorldState

# Guards the shares against empty populations
_EPSILON = 1e-6


@dataclass(frozen=True)
class RewardBreakdown:
    """Per-component reward values for one state."""
    budget: float
    equity_penalty: float
    renewable_bonus: float

    @property
    def total(self) -> float:
        return self.budget + self.equity_penalty + self.renewable_bonus

    def as_dict(self) -> Dict[str, float]:
        components = asdict(self)
        components["total"] = self.total
        return components


def budget_component(params: ScenarioParameters, state: WorldState) -> float:
    budget = max(0.0, state.budget) if params.clamp_budget_reward else state.budget
    return budget * params.weight_budget


def equity_component(params: ScenarioParameters, state: WorldState) -> float:
    low_income = [c for c in state.cities if not c.is_high_income]
    unserved = sum(c.population for c in low_income if not c.is_served)
    total = sum(c.population for c in low_income)
    return unserved / (total + _EPSILON) * params.weight_low_income_without_energy


def renewable_component(params: ScenarioParameters, state: WorldState) -> float:
    with_re = sum(c.population for c in state.cities if c.is_renewable_served)
    total = sum(c.population for c in state.cities)
    return with_re / (total + _EPSILON) * params.weight_population_with_re


def decompose_reward(
    params: ScenarioParameters,
    state: WorldState,
    action: Optional[Action] = None,
) -> RewardBreakdown:
    """Split the reward of ``state`` into its budget, equity and renewable parts."""
    return RewardBreakdown(
        budget=budget_component(params, state),
        equity_penalty=equity_component(params, state),
        renewable_bonus=renewable_component(params, state),
    )


def reward(params: ScenarioParameters, state: WorldState, action: Optional[Action] = None) -> float:
    """Scalar reward R(s, a); ``action`` does not affect the value."""
    return decompose_reward(params, state, action).total
