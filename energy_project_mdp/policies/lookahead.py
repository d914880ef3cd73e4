"""
Depth-limited deterministic lookahead.

Because transitions are deterministic and states are immutable, the same
state can root every branch of the search without copying.
"""

from __future__ import annotations

from ..dynamics import is_terminal, reward, transition, valid_actions
from ..model import Action, NO_OP, ScenarioParameters, WorldState
from .baselines import _BasePolicy


def evaluate_action_lookahead(
    params: ScenarioParameters,
    state: WorldState,
    action: Action,
    depth: int,
) -> float:
    """Discounted value of ``action`` followed by the best actions for ``depth`` more steps."""
    immediate = reward(params, state, action)
    if depth <= 0 or is_terminal(params, state):
        return immediate

    next_state = transition(params, state, action)
    future = max(
        evaluate_action_lookahead(params, next_state, a, depth - 1)
        for a in valid_actions(params, next_state)
    )
    return immediate + params.discount_rate * future


class LookaheadPolicy(_BasePolicy):
    """Pick the valid action with the best ``depth``-step lookahead value."""

    def __init__(self, depth: int = 2):
        self.depth = depth

    def action(self, params, state, rng=None) -> Action:
        best_action: Action = NO_OP
        best_value = float("-inf")
        for a in valid_actions(params, state):
            value = evaluate_action_lookahead(params, state, a, self.depth)
            if value > best_value:
                best_value = value
                best_action = a
        return best_action
