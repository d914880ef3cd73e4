"""dynamics – action catalogue, transition function, decomposable reward and terminal test."""

from .catalogue import all_actions, valid_actions, is_feasible
from .transition import transition, operating_cost
from .reward import RewardBreakdown, reward, decompose_reward
from .terminal import is_terminal

__all__ = [
    "all_actions", "valid_actions", "is_feasible",
    "transition", "operating_cost",
    "RewardBreakdown", "reward", "decompose_reward",
    "is_terminal",
]
