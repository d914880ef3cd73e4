"""
EnergyMDP – the decision-process interface consumed by solvers and policies.

Wraps a validated ScenarioParameters and exposes the usual MDP surface:
states, actions, transition, reward, terminal test, discount, indexing and
the initial state.  The state grid and its indexer are built lazily on first
use and then shared read-only.
"""

from __future__ import annotations

from typing import List, Optional

from .discretization import StateIndexer, action_index, enumerate_states
from .dynamics import (
    RewardBreakdown, all_actions, decompose_reward, is_terminal,
    reward, transition, valid_actions,
)
from .model import Action, ScenarioParameters, WorldState


# ---------------------------------------------------------------------------
# Functional interface (parameters first)
# ---------------------------------------------------------------------------

def states(params: ScenarioParameters) -> List[WorldState]:
    return enumerate_states(params)


def initial_state(params: ScenarioParameters) -> WorldState:
    """Configured budget and cities; total demand is the sum of city demands."""
    return WorldState.from_cities(params.initial_budget, params.cities)


def discount(params: ScenarioParameters) -> float:
    return params.discount_rate


def state_index(params: ScenarioParameters, state: WorldState) -> int:
    """Grid index of ``state``.  Rebuilds the grid; use EnergyMDP to reuse it."""
    return StateIndexer(enumerate_states(params)).index_of(state)


# ---------------------------------------------------------------------------
# Object interface
# ---------------------------------------------------------------------------

class EnergyMDP:
    """Deterministic energy allocation MDP over a fixed scenario."""

    def __init__(self, params: ScenarioParameters):
        self.params = params.validate()
        self._actions: List[Action] = all_actions(self.params)
        self._states: Optional[List[WorldState]] = None
        self._indexer: Optional[StateIndexer] = None

    # ------------------------------------------------------------------
    # Spaces
    # ------------------------------------------------------------------

    def states(self) -> List[WorldState]:
        """Enumerated state grid (approximate covering, built once)."""
        if self._states is None:
            self._states = enumerate_states(self.params)
            self._indexer = StateIndexer(self._states)
        return list(self._states)

    def actions(self, state: Optional[WorldState] = None) -> List[Action]:
        """Full catalogue, or only the actions feasible in ``state``."""
        if state is None:
            return list(self._actions)
        return valid_actions(self.params, state)

    # ------------------------------------------------------------------
    # Dynamics
    # ------------------------------------------------------------------

    def initial_state(self) -> WorldState:
        return initial_state(self.params)

    def transition(self, state: WorldState, action: Action) -> WorldState:
        return transition(self.params, state, action)

    def reward(self, state: WorldState, action: Optional[Action] = None) -> float:
        return reward(self.params, state, action)

    def decompose_reward(self, state: WorldState, action: Optional[Action] = None) -> RewardBreakdown:
        return decompose_reward(self.params, state, action)

    def is_terminal(self, state: WorldState) -> bool:
        return is_terminal(self.params, state)

    def discount(self) -> float:
        return discount(self.params)

    # ------------------------------------------------------------------
    # Indexing
    # ------------------------------------------------------------------

    @property
    def indexer(self) -> StateIndexer:
        if self._indexer is None:
            self.states()
        return self._indexer

    def state_index(self, state: WorldState) -> int:
        return self.indexer.index_of(state)

    def action_index(self, action: Action) -> int:
        return action_index(self.params, action)

    @property
    def n_states(self) -> int:
        return len(self.indexer)

    @property
    def n_actions(self) -> int:
        return len(self._actions)
