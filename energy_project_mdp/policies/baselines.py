"""
Rule-Based Allocation Baselines
===============================
Heuristic policies for comparison against grid-solver and search policies.
All implement a common ``action(params, state, rng)`` interface and only
ever return actions from ``valid_actions(params, state)``.  Scenario
parameters are passed on every call so a policy always scores actions
against the scenario actually being simulated.

Baselines
---------
RandomEnergyPolicy
    Uniform choice among valid actions.

GreedyREPolicy
    Add renewable capacity where unmet demand is largest, with low-income
    unmet demand counted double.

BalancedEnergyPolicy
    Serve unmet demand while steering each city's renewable share towards a
    target ratio.

EquityFirstPolicy
    Serve low-income cities first, with renewables, then anyone unmet.

PriorityBasedPolicy
    Weighted score over fulfilment, equity, renewables and cost efficiency.

OptimizationGreedyPolicy
    Best one-step reward improvement per unit of capital cost.

SmartSequentialPolicy
    Equity-first while the budget is plentiful, renewable efficiency after.
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from ..dynamics import reward, transition, valid_actions
from ..model import (
    Action, CityRecord, EnergyKind, Modify, NO_OP,
    ScenarioParameters, WorldState,
)


def _add_actions(actions: List[Action], kind: Optional[EnergyKind] = None) -> List[Modify]:
    """Add actions among ``actions``, optionally of one energy kind only."""
    return [
        a for a in actions
        if isinstance(a, Modify) and a.is_add
        and (kind is None or a.kind is kind)
    ]


class _BasePolicy:
    """Minimal shared interface for all heuristic policies."""

    def action(
        self,
        params: ScenarioParameters,
        state: WorldState,
        rng: Optional[np.random.Generator] = None,
    ) -> Action:
        """
        Choose an action for ``state``.

        Parameters
        ----------
        params : ScenarioParameters
            Scenario being simulated.
        state : WorldState
            Current state.
        rng : numpy.random.Generator, optional
            Random source; only stochastic policies use it.

        Returns
        -------
        Action
            A member of ``valid_actions(params, state)``; NoOp when nothing
            better applies.
        """
        raise NotImplementedError

    @property
    def name(self) -> str:
        return type(self).__name__


# ---------------------------------------------------------------------------
# RandomEnergyPolicy
# ---------------------------------------------------------------------------

class RandomEnergyPolicy(_BasePolicy):
    """Uniformly random valid action; the weakest comparison point."""

    def __init__(self, seed: Optional[int] = None):
        self._default_rng = np.random.default_rng(seed)

    def action(self, params, state, rng=None) -> Action:
        rng = rng if rng is not None else self._default_rng
        actions = valid_actions(params, state)
        return actions[int(rng.integers(len(actions)))]


# ---------------------------------------------------------------------------
# GreedyREPolicy
# ---------------------------------------------------------------------------

class GreedyREPolicy(_BasePolicy):
    """Add RE to the city with the largest (income-weighted) unmet demand."""

    def __init__(self, low_income_multiplier: float = 2.0):
        self.low_income_multiplier = low_income_multiplier

    def action(self, params, state, rng=None) -> Action:
        best_action: Action = NO_OP
        best_unmet = -np.inf

        for a in _add_actions(valid_actions(params, state), EnergyKind.RENEWABLE):
            city = state.cities[a.city_index]
            unmet = city.demand - city.total_supply
            if not city.is_high_income:
                unmet *= self.low_income_multiplier
            if unmet > best_unmet:
                best_unmet = unmet
                best_action = a
        return best_action


# ---------------------------------------------------------------------------
# BalancedEnergyPolicy
# ---------------------------------------------------------------------------

class BalancedEnergyPolicy(_BasePolicy):
    """
    Meet demand while keeping each city's RE share near ``re_target_ratio``.

    Score per add action:
      +10 if the city has unmet demand (+5 more for low-income cities)
      +5 * (1 - |new RE ratio - target|)
    """

    def __init__(self, re_target_ratio: float = 0.5):
        self.re_target_ratio = re_target_ratio

    def _ratio_after(self, params: ScenarioParameters, city: CityRecord, a: Modify) -> float:
        re = city.renewable_supply
        nre = city.nonrenewable_supply
        if a.is_renewable:
            re += params.supply_of_re
        else:
            nre += params.supply_of_nre
        total = re + nre
        return re / total if total > 0 else 0.0

    def action(self, params, state, rng=None) -> Action:
        best_action: Action = NO_OP
        best_score = -np.inf

        for a in _add_actions(valid_actions(params, state)):
            city = state.cities[a.city_index]
            score = 0.0
            if city.unmet_demand > 0:
                score += 10.0
                if not city.is_high_income:
                    score += 5.0
            new_ratio = self._ratio_after(params, city, a)
            score += 5.0 * (1.0 - abs(new_ratio - self.re_target_ratio))

            if score > best_score:
                best_score = score
                best_action = a
        return best_action


# ---------------------------------------------------------------------------
# EquityFirstPolicy
# ---------------------------------------------------------------------------

class EquityFirstPolicy(_BasePolicy):
    """
    Dispatch priority:
      1. Add RE to a low-income city with unmet demand.
      2. Add RE to any city with unmet demand.
      3. NoOp.
    """

    def action(self, params, state, rng=None) -> Action:
        candidates = _add_actions(valid_actions(params, state), EnergyKind.RENEWABLE)

        for a in candidates:
            city = state.cities[a.city_index]
            if not city.is_high_income and city.unmet_demand > 0:
                return a
        for a in candidates:
            if state.cities[a.city_index].unmet_demand > 0:
                return a
        return NO_OP


# ---------------------------------------------------------------------------
# PriorityBasedPolicy
# ---------------------------------------------------------------------------

class PriorityBasedPolicy(_BasePolicy):
    """Multi-objective add-action score, scaled up for larger populations."""

    def __init__(
        self,
        re_weight: float = 0.4,
        equity_weight: float = 0.4,
        efficiency_weight: float = 0.2,
    ):
        self.re_weight = re_weight
        self.equity_weight = equity_weight
        self.efficiency_weight = efficiency_weight

    def score(self, params: ScenarioParameters, state: WorldState, a: Modify) -> float:
        city = state.cities[a.city_index]
        increment = params.supply_increment(a.kind)
        cost = params.capital_cost(a.kind, a.direction)
        score = 0.0

        # Fulfilment
        if city.unmet_demand > 0:
            score += self.efficiency_weight * min(increment / city.unmet_demand, 1.0) * 10.0
        # Equity
        if not city.is_high_income:
            score += self.equity_weight * 8.0
        # Renewables
        if a.is_renewable:
            score += self.re_weight * 6.0
        # Supply per unit cost
        if cost > 0:
            score += increment / cost * 0.5

        population_millions = city.population / 1_000_000
        return score * (1.0 + population_millions * 0.2)

    def action(self, params, state, rng=None) -> Action:
        best_action: Action = NO_OP
        best_score = -np.inf
        for a in _add_actions(valid_actions(params, state)):
            s = self.score(params, state, a)
            if s > best_score:
                best_score = s
                best_action = a
        return best_action


# ---------------------------------------------------------------------------
# OptimizationGreedyPolicy
# ---------------------------------------------------------------------------

class OptimizationGreedyPolicy(_BasePolicy):
    """Add action with the highest reward improvement per unit capital cost."""

    def action(self, params, state, rng=None) -> Action:
        current = reward(params, state)
        best_action: Action = NO_OP
        best_roi = -np.inf

        for a in _add_actions(valid_actions(params, state)):
            improvement = reward(params, transition(params, state, a)) - current
            cost = params.capital_cost(a.kind, a.direction)
            roi = improvement / cost if cost > 0 else improvement
            if roi > best_roi:
                best_roi = roi
                best_action = a
        return best_action


# ---------------------------------------------------------------------------
# SmartSequentialPolicy
# ---------------------------------------------------------------------------

class SmartSequentialPolicy(_BasePolicy):
    """
    Two-phase policy keyed on the remaining budget ratio.

    Phase 1 (budget ratio above ``phase_threshold``): serve unmet low-income
    cities, preferring the cheaper non-renewable increment.
    Phase 2: add RE where it serves the most people per increment.
    """

    def __init__(self, phase_threshold: float = 0.7):
        self.phase_threshold = phase_threshold

    def action(self, params, state, rng=None) -> Action:
        actions = valid_actions(params, state)
        ratio = state.budget / params.initial_budget if params.initial_budget else 0.0
        if ratio > self.phase_threshold:
            return self._equity_action(state, actions)
        return self._efficiency_action(params, state, actions)

    def _equity_action(self, state: WorldState, actions: List[Action]) -> Action:
        adds = _add_actions(actions)
        for a in adds:
            city = state.cities[a.city_index]
            if not city.is_high_income and city.unmet_demand > 0 and a.kind is EnergyKind.NONRENEWABLE:
                return a
        for a in adds:
            if not state.cities[a.city_index].is_high_income:
                return a
        return NO_OP

    def _efficiency_action(self, params, state: WorldState, actions: List[Action]) -> Action:
        best_action: Action = NO_OP
        best_impact = -np.inf
        for a in _add_actions(actions, EnergyKind.RENEWABLE):
            city = state.cities[a.city_index]
            people_served = min(params.supply_of_re, city.unmet_demand) * city.population / city.demand
            impact = people_served + params.supply_of_re * 100
            if impact > best_impact:
                best_impact = impact
                best_action = a
        return best_action
