"""
Gymnasium environment over the energy allocation MDP.

Actions are catalogue indices (``Discrete(1 + 4 * n_cities)``); observations
are the budget followed by every city's renewable then non-renewable supply.
The dynamics are the deterministic MDP ones, so ``reset`` always returns the
scenario's initial state; the seed only matters to agents sampling from
``action_space``.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from ..dynamics import all_actions, decompose_reward, is_feasible, is_terminal, transition
from ..mdp import initial_state
from ..model import ScenarioParameters, WorldState


class EnergyAllocationEnv(gym.Env):
    """
    Single-agent environment: one capacity decision per step.

    Infeasible actions are applied as given (the MDP does not reject them);
    use ``action_masks()`` to restrict an agent to feasible ones.
    """

    metadata = {'render_modes': ['human']}

    def __init__(
        self,
        params: ScenarioParameters,
        max_steps: int = 15,
        render_mode: Optional[str] = None,
    ):
        super().__init__()

        self.params = params.validate()
        self.max_steps = max_steps
        self.render_mode = render_mode
        self.catalogue = all_actions(self.params)
        self.n_cities = self.params.number_of_cities

        # Spaces
        self.action_space = spaces.Discrete(len(self.catalogue))
        self.observation_space = spaces.Box(
            low=-np.inf, high=np.inf,
            shape=(1 + 2 * self.n_cities,),  # budget, RE per city, NRE per city
            dtype=np.float32,
        )

        # State
        self.state: WorldState = initial_state(self.params)
        self.step_count = 0
        self.episode_reward = 0.0

    def _get_observation(self) -> np.ndarray:
        obs = np.zeros(1 + 2 * self.n_cities, dtype=np.float32)
        obs[0] = self.state.budget
        for i, city in enumerate(self.state.cities):
            obs[1 + i] = city.renewable_supply
            obs[1 + self.n_cities + i] = city.nonrenewable_supply
        return obs

    def action_masks(self) -> np.ndarray:
        """Boolean mask over catalogue indices: True where the action is feasible."""
        return np.array(
            [is_feasible(self.params, self.state, a) for a in self.catalogue], dtype=bool
        )

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """Reset to the scenario's initial state."""
        super().reset(seed=seed)

        self.state = initial_state(self.params)
        self.step_count = 0
        self.episode_reward = 0.0

        return self._get_observation(), {'budget': self.state.budget}

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """Apply catalogue action ``action``; the reward is R(s, a) of the pre-step state."""
        mdp_action = self.catalogue[int(action)]
        breakdown = decompose_reward(self.params, self.state, mdp_action)

        self.state = transition(self.params, self.state, mdp_action)
        self.step_count += 1
        self.episode_reward += breakdown.total

        terminated = is_terminal(self.params, self.state)
        truncated = not terminated and self.step_count >= self.max_steps

        info = {
            'action': mdp_action,
            'reward_components': breakdown.as_dict(),
            'budget': self.state.budget,
            'episode_reward': self.episode_reward,
        }
        return self._get_observation(), float(breakdown.total), terminated, truncated, info

    def render(self):
        if self.render_mode == "human":
            print(f"Step {self.step_count}: budget={self.state.budget:.2f}")
            for city in self.state.cities:
                print(
                    f"  {city.name or '?':<15} demand={city.demand:7.2f} "
                    f"RE={city.renewable_supply:7.2f} NRE={city.nonrenewable_supply:7.2f}"
                )
        return None
