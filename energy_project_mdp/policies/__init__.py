"""policies – heuristic allocation policies; scenario parameters are passed on every call."""

from .baselines import (
    RandomEnergyPolicy, GreedyREPolicy, BalancedEnergyPolicy, EquityFirstPolicy,
    PriorityBasedPolicy, OptimizationGreedyPolicy, SmartSequentialPolicy,
)
from .lookahead import LookaheadPolicy, evaluate_action_lookahead

__all__ = [
    "RandomEnergyPolicy", "GreedyREPolicy", "BalancedEnergyPolicy", "EquityFirstPolicy",
    "PriorityBasedPolicy", "OptimizationGreedyPolicy", "SmartSequentialPolicy",
    "LookaheadPolicy", "evaluate_action_lookahead",
]
