"""
Policy rollouts and Monte-Carlo evaluation.

Each replicate runs from the scenario's initial state with its own random
generator (``base_seed + replicate``) and its own state chain, so batches are
reproducible and comparable across policies.  An episode ends at a terminal
state or after ``max_steps`` decisions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Mapping, Optional

import numpy as np
import pandas as pd

from ..dynamics import RewardBreakdown, decompose_reward, is_terminal, transition
from ..mdp import initial_state
from ..model import Action, ScenarioParameters, WorldState
from .metrics import calculate_comprehensive_metrics, unserved_breakdown

logger = logging.getLogger(__name__)

REWARD_COMPONENTS = ("budget", "equity_penalty", "renewable_bonus", "total")


class StopReason(Enum):
    """Why a rollout ended."""
    TERMINAL = auto()       # Debt or every city served
    MAX_STEPS = auto()      # Step budget exhausted


@dataclass(frozen=True)
class Step:
    """One decision: state, chosen action, its reward and the successor."""
    state: WorldState
    action: Action
    reward: float
    breakdown: RewardBreakdown
    next_state: WorldState


@dataclass
class Trajectory:
    """Sequence of steps from the initial state."""
    initial_state: WorldState
    steps: List[Step] = field(default_factory=list)
    stop_reason: StopReason = StopReason.MAX_STEPS

    @property
    def final_state(self) -> WorldState:
        return self.steps[-1].next_state if self.steps else self.initial_state

    @property
    def total_reward(self) -> float:
        return float(sum(s.reward for s in self.steps))

    def discounted_reward(self, discount_rate: float) -> float:
        return float(sum(discount_rate ** t * s.reward for t, s in enumerate(self.steps)))

    def __len__(self) -> int:
        return len(self.steps)


def simulate(
    params: ScenarioParameters,
    policy,
    max_steps: int = 15,
    rng: Optional[np.random.Generator] = None,
) -> Trajectory:
    """Roll ``policy`` out from the initial state for at most ``max_steps`` decisions."""
    state = initial_state(params)
    trajectory = Trajectory(initial_state=state)

    for _ in range(max_steps):
        if is_terminal(params, state):
            break
        action = policy.action(params, state, rng)
        breakdown = decompose_reward(params, state, action)
        next_state = transition(params, state, action)
        trajectory.steps.append(Step(
            state=state,
            action=action,
            reward=breakdown.total,
            breakdown=breakdown,
            next_state=next_state,
        ))
        state = next_state

    trajectory.stop_reason = StopReason.TERMINAL if is_terminal(params, state) else StopReason.MAX_STEPS
    return trajectory


def analyze_reward_trajectory(trajectory: Trajectory) -> Dict[str, Dict[str, float]]:
    """mean/std/min/max/sum of each reward component over the trajectory's steps."""
    if not trajectory.steps:
        return {}

    stats: Dict[str, Dict[str, float]] = {}
    for component in REWARD_COMPONENTS:
        values = np.array([step.breakdown.as_dict()[component] for step in trajectory.steps])
        stats[component] = {
            "mean": float(values.mean()),
            "std": float(values.std()),
            "min": float(values.min()),
            "max": float(values.max()),
            "sum": float(values.sum()),
        }
    return stats


def evaluate_policy(
    params: ScenarioParameters,
    policy,
    n_simulations: int = 50,
    max_steps: int = 15,
    base_seed: int = 1234,
) -> pd.DataFrame:
    """
    Run ``n_simulations`` independent replicates of ``policy``.

    Returns one row per replicate with total and discounted reward, per
    component reward sums and means, outcome metrics of the final state and
    the unserved-city breakdown per income group.
    """
    if n_simulations < 1:
        raise ValueError(f"n_simulations must be at least 1, got {n_simulations}")

    rows = []
    for i in range(n_simulations):
        rng = np.random.default_rng(base_seed + i)
        trajectory = simulate(params, policy, max_steps=max_steps, rng=rng)
        final_state = trajectory.final_state

        row: Dict[str, float] = {
            "simulation": i + 1,
            "n_steps": len(trajectory),
            "terminated": trajectory.stop_reason is StopReason.TERMINAL,
            "total_reward": trajectory.total_reward,
            "discounted_reward": trajectory.discounted_reward(params.discount_rate),
        }
        for component, stats in analyze_reward_trajectory(trajectory).items():
            row[f"{component}_reward_sum"] = stats["sum"]
            row[f"{component}_reward_mean"] = stats["mean"]
        row.update(calculate_comprehensive_metrics(params, final_state))
        row.update(unserved_breakdown(final_state))
        rows.append(row)

    return pd.DataFrame(rows)


def summarize_evaluation(runs: pd.DataFrame) -> Dict[str, float]:
    """``<metric>_mean/_std/_min/_max`` for every numeric column except the replicate id."""
    summary: Dict[str, float] = {}
    numeric = runs.drop(columns=["simulation"], errors="ignore").select_dtypes(include=[np.number, "bool"])
    for column in numeric.columns:
        values = numeric[column].astype(float)
        summary[f"{column}_mean"] = float(values.mean())
        summary[f"{column}_std"] = float(values.std(ddof=0))
        summary[f"{column}_min"] = float(values.min())
        summary[f"{column}_max"] = float(values.max())
    return summary


def compare_policies(
    params: ScenarioParameters,
    policies: Mapping[str, object],
    n_simulations: int = 30,
    max_steps: int = 15,
    base_seed: int = 1234,
) -> pd.DataFrame:
    """One summary row per policy, ranked by mean total reward (best first)."""
    if n_simulations < 1:
        raise ValueError(f"n_simulations must be at least 1, got {n_simulations}")
    if not policies:
        raise ValueError("compare_policies needs at least one policy")

    summaries = {}
    for name, policy in policies.items():
        runs = evaluate_policy(params, policy, n_simulations, max_steps, base_seed)
        summaries[name] = summarize_evaluation(runs)
        logger.info(
            f"{name}: reward {summaries[name]['total_reward_mean']:.1f} "
            f"± {summaries[name]['total_reward_std']:.1f} over {n_simulations} runs"
        )

    table = pd.DataFrame.from_dict(summaries, orient="index")
    table.index.name = "policy"
    return table.sort_values("total_reward_mean", ascending=False)
