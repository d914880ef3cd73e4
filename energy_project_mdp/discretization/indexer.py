"""
State and action indexing.

StateIndexer maps any world state to an index into a fixed grid.  An exact
match (every numeric field within ``MATCH_TOLERANCE``) wins; otherwise the
state snaps to the grid point with the smallest summed absolute difference
over budget, renewable supplies and non-renewable supplies.  Snapping is the
usual case for states produced by ``transition``, so grid-solver values are a
coarse approximation of the continuous problem.

Indexing never raises: tabular solvers need a total function.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

import numpy as np

from ..dynamics import all_actions
from ..model import Action, ScenarioParameters, WorldState

logger = logging.getLogger(__name__)

MATCH_TOLERANCE = 1e-6


def _match_features(state: WorldState) -> np.ndarray:
    """Every numeric field of the state, used for exact matching."""
    values = [state.budget, state.total_demand]
    for city in state.cities:
        values.extend((city.demand, city.renewable_supply, city.nonrenewable_supply, city.population))
    return np.asarray(values, dtype=float)


def _distance_features(state: WorldState) -> np.ndarray:
    """Budget, then all renewable supplies, then all non-renewable supplies."""
    values = [state.budget]
    values.extend(city.renewable_supply for city in state.cities)
    values.extend(city.nonrenewable_supply for city in state.cities)
    return np.asarray(values, dtype=float)


class StateIndexer:
    """
    Read-only index over an enumerated state grid.

    Built once; the feature matrices are flagged non-writeable so the indexer
    can be shared between solvers without copying.
    """

    def __init__(self, states: Sequence[WorldState]):
        self.states: List[WorldState] = list(states)
        if not self.states:
            raise ValueError("StateIndexer needs a non-empty state grid")

        self.n_cities = len(self.states[0].cities)
        self._match = np.vstack([_match_features(s) for s in self.states])
        self._distance = np.vstack([_distance_features(s) for s in self.states])
        self._match.setflags(write=False)
        self._distance.setflags(write=False)

    def __len__(self) -> int:
        return len(self.states)

    def exact_index(self, state: WorldState) -> int:
        """Index of a grid state equal to ``state`` within tolerance, or -1."""
        if len(state.cities) != self.n_cities:
            return -1
        close = np.all(np.abs(self._match - _match_features(state)) <= MATCH_TOLERANCE, axis=1)
        hits = np.flatnonzero(close)
        return int(hits[0]) if hits.size else -1

    def nearest_index(self, state: WorldState) -> int:
        """Index of the grid state closest to ``state`` (first on ties)."""
        if len(state.cities) != self.n_cities:
            logger.warning(
                f"State has {len(state.cities)} cities, grid has {self.n_cities}; using index 0"
            )
            return 0
        distances = np.abs(self._distance - _distance_features(state)).sum(axis=1)
        return int(np.argmin(distances))

    def index_of(self, state: WorldState) -> int:
        idx = self.exact_index(state)
        if idx >= 0:
            return idx
        return self.nearest_index(state)


def action_index(params: ScenarioParameters, action: Action) -> int:
    """
    Position of ``action`` in ``all_actions(params)``.

    An action outside the catalogue (e.g. an out-of-range city index) maps to
    the NoOp slot, 0.
    """
    lookup: Dict[Action, int] = {a: i for i, a in enumerate(all_actions(params))}
    idx = lookup.get(action)
    if idx is None:
        logger.warning(f"Action {action!r} not in catalogue; using NoOp index")
        return 0
    return idx
