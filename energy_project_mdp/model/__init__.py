"""model – city records, world state, action variants and scenario parameters."""

from .errors import ConfigurationError
from .state import CityRecord, WorldState
from .actions import EnergyKind, Direction, NoOp, Modify, Action, NO_OP
from .parameters import ScenarioParameters

__all__ = [
    "ConfigurationError",
    "CityRecord", "WorldState",
    "EnergyKind", "Direction", "NoOp", "Modify", "Action", "NO_OP",
    "ScenarioParameters",
]
