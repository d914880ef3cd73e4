"""discretization – finite state grid for tabular solvers and state/action indexing."""

from .enumerator import (
    MAX_BUDGET_LEVELS, MAX_PERTURBED_CITIES,
    budget_levels, city_configurations, enumerate_states,
)
from .indexer import MATCH_TOLERANCE, StateIndexer, action_index

__all__ = [
    "MAX_BUDGET_LEVELS", "MAX_PERTURBED_CITIES",
    "budget_levels", "city_configurations", "enumerate_states",
    "MATCH_TOLERANCE", "StateIndexer", "action_index",
]
