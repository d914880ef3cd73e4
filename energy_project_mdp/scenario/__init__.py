"""scenario – randomized initializer, fixed presets and JSON loading."""

from .initializer import (
    DEMAND_LEVELS, RE_SUPPLY_LEVELS, NRE_SUPPLY_LEVELS, POPULATION_LEVELS,
    initialize_scenario,
)
from .presets import create_comparison_scenario, create_tuned_scenario, create_academic_scenario
from .loader import load_scenario, save_scenario

__all__ = [
    "DEMAND_LEVELS", "RE_SUPPLY_LEVELS", "NRE_SUPPLY_LEVELS", "POPULATION_LEVELS",
    "initialize_scenario",
    "create_comparison_scenario", "create_tuned_scenario", "create_academic_scenario",
    "load_scenario", "save_scenario",
]
