"""analytics – outcome metrics, rollouts and per-component reward attribution."""

from .metrics import (
    UNSERVED_THRESHOLD, COMPOSITE_WEIGHTS,
    calculate_comprehensive_metrics, unserved_breakdown,
)
from .evaluation import (
    REWARD_COMPONENTS, StopReason, Step, Trajectory,
    simulate, analyze_reward_trajectory, evaluate_policy,
    summarize_evaluation, compare_policies,
)

__all__ = [
    "UNSERVED_THRESHOLD", "COMPOSITE_WEIGHTS",
    "calculate_comprehensive_metrics", "unserved_breakdown",
    "REWARD_COMPONENTS", "StopReason", "Step", "Trajectory",
    "simulate", "analyze_reward_trajectory", "evaluate_policy",
    "summarize_evaluation", "compare_policies",
]
