"""rl – Gymnasium environment over the energy allocation MDP.

Requires gymnasium (installed with the package).
"""

from .environment import EnergyAllocationEnv

__all__ = ["EnergyAllocationEnv"]
