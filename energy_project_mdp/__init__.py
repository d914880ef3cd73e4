"""
Energy Project MDP
==================
Sequential energy-capacity allocation across cities as a deterministic
Markov decision process, with a discretized state grid for tabular solvers.

Package layout
--------------
energy_project_mdp/
    model/           – city records, world state, actions, scenario parameters
    dynamics/        – transition, decomposable reward, terminal test
    discretization/  – state grid enumeration, state/action indexing
    scenario/        – randomized initializer, presets, JSON loading
    mdp.py           – EnergyMDP facade (states, actions, transition, ...)
    policies/        – heuristic policies
    analytics/       – outcome metrics, rollouts, reward attribution
    rl/              – Gymnasium environment
    cli.py           – policy comparison command line
"""

from .model import (
    CityRecord, WorldState,
    EnergyKind, Direction, NoOp, Modify, NO_OP,
    ScenarioParameters, ConfigurationError,
)
from .mdp import EnergyMDP
from .scenario import (
    initialize_scenario,
    create_tuned_scenario, create_comparison_scenario, create_academic_scenario,
    load_scenario, save_scenario,
)

__all__ = [
    "CityRecord", "WorldState",
    "EnergyKind", "Direction", "NoOp", "Modify", "NO_OP",
    "ScenarioParameters", "ConfigurationError",
    "EnergyMDP",
    "initialize_scenario",
    "create_tuned_scenario", "create_comparison_scenario", "create_academic_scenario",
    "load_scenario", "save_scenario",
]
