"""
Energy Project MDP - command line entry point.
Builds a scenario, runs the heuristic policies against it and prints a ranked
comparison table.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Dict, List, Optional

from .analytics import compare_policies
from .policies import (
    BalancedEnergyPolicy, EquityFirstPolicy, GreedyREPolicy, LookaheadPolicy,
    OptimizationGreedyPolicy, PriorityBasedPolicy, RandomEnergyPolicy,
    SmartSequentialPolicy,
)
from .scenario import (
    create_academic_scenario, create_comparison_scenario, create_tuned_scenario,
    initialize_scenario, load_scenario, save_scenario,
)

PRESETS = {
    "comparison": create_comparison_scenario,
    "tuned": create_tuned_scenario,
    "academic": create_academic_scenario,
}

POLICY_FACTORIES = {
    "random": lambda seed: RandomEnergyPolicy(seed=seed),
    "greedy_re": lambda seed: GreedyREPolicy(),
    "balanced": lambda seed: BalancedEnergyPolicy(),
    "equity_first": lambda seed: EquityFirstPolicy(),
    "priority": lambda seed: PriorityBasedPolicy(),
    "optimization_greedy": lambda seed: OptimizationGreedyPolicy(),
    "smart_sequential": lambda seed: SmartSequentialPolicy(),
    "lookahead": lambda seed: LookaheadPolicy(depth=2),
}

SUMMARY_COLUMNS = [
    "total_reward_mean", "total_reward_std", "composite_score_mean",
    "re_ratio_mean", "supply_disparity_mean", "terminated_mean",
]


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Compare energy allocation policies on a scenario",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    # Scenario selection
    parser.add_argument(
        "--scenario", type=str, default="tuned",
        choices=sorted(PRESETS) + ["random"],
        help="Preset scenario, or 'random' for a seeded randomized one"
    )
    parser.add_argument(
        "--scenario-file", type=str, default=None,
        help="JSON scenario file (overrides --scenario)"
    )
    parser.add_argument(
        "--save-scenario", type=str, default=None,
        help="Write the scenario used to this JSON file"
    )

    # Evaluation
    parser.add_argument(
        "--policies", type=str, nargs="+", default=sorted(POLICY_FACTORIES),
        choices=sorted(POLICY_FACTORIES),
        help="Policies to compare"
    )
    parser.add_argument(
        "--simulations", type=_positive_int, default=30,
        help="Replicates per policy"
    )
    parser.add_argument(
        "--max-steps", type=_positive_int, default=15,
        help="Decisions per episode"
    )
    parser.add_argument(
        "--seed", type=int, default=1234,
        help="Base seed for replicates and the random scenario"
    )

    # Output
    parser.add_argument(
        "--output", type=str, default=None,
        help="Write the full comparison table to this CSV file"
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Log per-policy progress"
    )

    return parser.parse_args(argv)


def build_scenario(args):
    if args.scenario_file:
        return load_scenario(args.scenario_file)
    if args.scenario == "random":
        return initialize_scenario(seed=args.seed)
    return PRESETS[args.scenario]()


def main(argv: Optional[List[str]] = None) -> int:
    """Run the policy comparison; returns the process exit code."""
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    params = build_scenario(args)
    if args.save_scenario:
        save_scenario(params, args.save_scenario)

    policies: Dict[str, object] = {
        name: POLICY_FACTORIES[name](args.seed) for name in args.policies
    }

    print("=" * 70)
    print("ENERGY ALLOCATION POLICY COMPARISON")
    print("=" * 70)
    print(f"Scenario: {args.scenario_file or args.scenario} "
          f"({params.number_of_cities} cities, budget {params.initial_budget:,.0f})")
    print(f"Policies: {', '.join(policies)}")
    print(f"Replicates: {args.simulations} x {args.max_steps} steps (seed {args.seed})")
    print("=" * 70)

    table = compare_policies(
        params, policies,
        n_simulations=args.simulations,
        max_steps=args.max_steps,
        base_seed=args.seed,
    )
    print(table[SUMMARY_COLUMNS].to_string(float_format=lambda v: f"{v:.3f}"))

    if args.output:
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(output)
        print(f"\nSaved comparison to {output}")

    return 0
