"""
Action variants.

An action is either ``NoOp`` or ``Modify(kind, direction, city_index)``.
Both are frozen dataclasses so equality and hashing are structural, which the
catalogue lookup and the policies rely on.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class EnergyKind(Enum):
    """Energy source a capacity action targets."""
    RENEWABLE = auto()
    NONRENEWABLE = auto()


class Direction(Enum):
    """Whether capacity is installed or decommissioned."""
    ADD = auto()
    REMOVE = auto()


@dataclass(frozen=True)
class NoOp:
    """Leave every city and the budget unchanged."""

    def __repr__(self) -> str:
        return "NoOp()"


@dataclass(frozen=True)
class Modify:
    """Add or remove one supply increment of ``kind`` at ``city_index`` (0-based)."""
    kind: EnergyKind
    direction: Direction
    city_index: int

    @property
    def is_add(self) -> bool:
        return self.direction is Direction.ADD

    @property
    def is_renewable(self) -> bool:
        return self.kind is EnergyKind.RENEWABLE


Action = Union[NoOp, Modify]

NO_OP = NoOp()
