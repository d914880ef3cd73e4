"""Terminal test: the process stops in debt or once every city is served."""

from __future__ import annotations

from ..model import ScenarioParameters, WorldState


def is_terminal(params: ScenarioParameters, state: WorldState) -> bool:
    # Strictly negative budget; a budget of exactly 0 keeps the episode alive
    if state.budget < 0:
        return True
    return all(city.is_served for city in state.cities)
