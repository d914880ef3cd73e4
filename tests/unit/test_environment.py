"""
Unit tests for the Gymnasium environment.

Covers:
- action/observation spaces sized from the scenario
- reset(): initial observation and info
- step(): reward of the pre-step state, termination and truncation
- action_masks(): agrees with valid_actions()
"""

import numpy as np
import pytest
from gymnasium import spaces

from energy_project_mdp.dynamics import all_actions, valid_actions
from energy_project_mdp.rl import EnergyAllocationEnv


@pytest.fixture
def env(two_city_params):
    return EnergyAllocationEnv(two_city_params, max_steps=5)


class TestSpaces:
    def test_action_space(self, env):
        assert isinstance(env.action_space, spaces.Discrete)
        assert env.action_space.n == 9

    def test_observation_space(self, env):
        assert env.observation_space.shape == (5,)
        assert env.observation_space.dtype == np.float32


class TestReset:
    def test_initial_observation(self, env):
        obs, info = env.reset(seed=0)
        np.testing.assert_allclose(obs, [1000.0, 0.0, 0.0, 8.0, 8.0])
        assert info["budget"] == 1000.0
        assert env.observation_space.contains(obs)

    def test_reset_clears_episode(self, env):
        env.reset()
        env.step(5)
        env.reset()
        assert env.step_count == 0
        assert env.episode_reward == 0.0


class TestStep:
    def test_add_renewable_to_low_income(self, env):
        env.reset()
        obs, reward, terminated, truncated, info = env.step(5)
        assert obs[0] == pytest.approx(849.76, rel=1e-6)
        assert obs[2] == pytest.approx(8.0)
        assert reward == pytest.approx(150.0)
        assert not terminated
        assert not truncated
        assert info["reward_components"]["total"] == pytest.approx(reward)

    def test_serving_everyone_terminates(self, env):
        env.reset()
        env.step(5)
        _, _, terminated, truncated, _ = env.step(1)
        assert terminated
        assert not truncated

    def test_truncation_at_max_steps(self, two_city_params):
        env = EnergyAllocationEnv(two_city_params, max_steps=1)
        env.reset()
        _, _, terminated, truncated, _ = env.step(0)
        assert not terminated
        assert truncated

    def test_episode_reward_accumulates(self, env):
        env.reset()
        _, r1, _, _, _ = env.step(0)
        _, r2, _, _, info = env.step(0)
        assert info["episode_reward"] == pytest.approx(r1 + r2)


class TestActionMasks:
    def test_mask_matches_valid_actions(self, env, two_city_params):
        env.reset()
        mask = env.action_masks()
        feasible = set(valid_actions(two_city_params, env.state))
        expected = [a in feasible for a in all_actions(two_city_params)]
        assert mask.tolist() == expected

    def test_reference_mask(self, env):
        env.reset()
        assert env.action_masks().tolist() == [True, True, False, True, True, True, False, True, True]
