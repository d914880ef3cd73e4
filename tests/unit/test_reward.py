"""
Unit tests for the decomposed reward.

Covers:
- components sum to the scalar reward
- budget term: linear in budget, optional clamping of debt
- equity penalty: population share of unserved low-income cities
- renewable bonus: population share of cities served by RE alone
- reward ignores its action argument
"""

import dataclasses

import pytest

from energy_project_mdp.dynamics import RewardBreakdown, decompose_reward, reward
from energy_project_mdp.model import (
    CityRecord, Direction, EnergyKind, Modify, NO_OP, WorldState,
)


def make_state(budget, cities):
    return WorldState.from_cities(budget, cities)


# ---------------------------------------------------------------------------
# Decomposition
# ---------------------------------------------------------------------------

class TestDecomposition:
    def test_components_sum_to_reward(self, two_city_params, two_city_state):
        parts = decompose_reward(two_city_params, two_city_state)
        total = parts.budget + parts.equity_penalty + parts.renewable_bonus
        assert abs(total - reward(two_city_params, two_city_state)) <= 1e-10

    def test_reference_state_values(self, two_city_params, two_city_state):
        parts = decompose_reward(two_city_params, two_city_state)
        assert parts.budget == pytest.approx(200.0)
        # B is low-income and short of demand
        assert parts.equity_penalty == pytest.approx(-50.0)
        assert parts.renewable_bonus == pytest.approx(0.0)
        assert parts.total == pytest.approx(150.0)

    def test_as_dict_includes_total(self):
        parts = RewardBreakdown(budget=1.0, equity_penalty=-2.0, renewable_bonus=3.0)
        assert parts.as_dict() == {
            "budget": 1.0, "equity_penalty": -2.0, "renewable_bonus": 3.0, "total": 2.0,
        }

    def test_decomposition_holds_on_tuned_scenario(self, tuned_params):
        state = WorldState.from_cities(tuned_params.initial_budget, tuned_params.cities)
        parts = decompose_reward(tuned_params, state)
        assert abs(parts.total - reward(tuned_params, state)) <= 1e-10


# ---------------------------------------------------------------------------
# Budget term
# ---------------------------------------------------------------------------

class TestBudgetComponent:
    def test_more_budget_more_reward(self, two_city_params, two_city_state):
        rich = two_city_state.with_budget(900.0)
        poor = two_city_state.with_budget(300.0)
        assert reward(two_city_params, rich) > reward(two_city_params, poor)

    def test_raw_budget_penalises_debt(self, two_city_params, two_city_state):
        debt = two_city_state.with_budget(-100.0)
        assert decompose_reward(two_city_params, debt).budget == pytest.approx(-20.0)

    def test_clamped_budget_floors_at_zero(self, two_city_params, two_city_state):
        params = dataclasses.replace(two_city_params, clamp_budget_reward=True)
        debt = two_city_state.with_budget(-100.0)
        assert decompose_reward(params, debt).budget == 0.0

    def test_clamping_leaves_positive_budget_alone(self, two_city_params, two_city_state):
        params = dataclasses.replace(two_city_params, clamp_budget_reward=True)
        assert decompose_reward(params, two_city_state).budget == pytest.approx(200.0)


# ---------------------------------------------------------------------------
# Equity penalty
# ---------------------------------------------------------------------------

class TestEquityPenalty:
    def test_unserved_low_income_strictly_worse(self, two_city_params):
        rich = CityRecord(name="R", demand=10.0, nonrenewable_supply=10.0,
                          population=50_000, is_high_income=True)
        poor_short = CityRecord(name="P", demand=10.0, nonrenewable_supply=4.0,
                                population=80_000, is_high_income=False)
        poor_served = dataclasses.replace(poor_short, nonrenewable_supply=10.0)

        short = decompose_reward(two_city_params, make_state(500.0, [rich, poor_short]))
        served = decompose_reward(two_city_params, make_state(500.0, [rich, poor_served]))
        assert short.equity_penalty < served.equity_penalty
        assert served.equity_penalty == 0.0

    def test_share_is_population_weighted(self, two_city_params):
        rich = CityRecord(name="R", demand=1.0, nonrenewable_supply=1.0,
                          population=1.0, is_high_income=True)
        small_short = CityRecord(name="S", demand=10.0, population=25_000, is_high_income=False)
        big_served = CityRecord(name="L", demand=10.0, nonrenewable_supply=10.0,
                                population=75_000, is_high_income=False)
        parts = decompose_reward(two_city_params, make_state(0.0, [rich, small_short, big_served]))
        assert parts.equity_penalty == pytest.approx(0.25 * -50.0)

    def test_high_income_shortfall_not_penalised(self, two_city_params):
        rich_short = CityRecord(name="R", demand=10.0, population=1_000, is_high_income=True)
        poor_served = CityRecord(name="P", demand=5.0, nonrenewable_supply=5.0,
                                 population=1_000, is_high_income=False)
        parts = decompose_reward(two_city_params, make_state(0.0, [rich_short, poor_served]))
        assert parts.equity_penalty == 0.0


# ---------------------------------------------------------------------------
# Renewable bonus
# ---------------------------------------------------------------------------

class TestRenewableBonus:
    def test_only_renewable_supply_counts(self, two_city_params):
        green = CityRecord(name="G", demand=10.0, renewable_supply=10.0,
                           population=30_000, is_high_income=True)
        mixed = CityRecord(name="M", demand=10.0, renewable_supply=5.0, nonrenewable_supply=5.0,
                           population=70_000, is_high_income=False)
        parts = decompose_reward(two_city_params, make_state(0.0, [green, mixed]))
        assert parts.renewable_bonus == pytest.approx(0.3 * 25.0)

    def test_all_renewable_gives_full_weight(self, two_city_params):
        a = CityRecord(name="A", demand=4.0, renewable_supply=8.0, population=10.0,
                       is_high_income=True)
        b = CityRecord(name="B", demand=4.0, renewable_supply=4.0, population=10.0,
                       is_high_income=False)
        parts = decompose_reward(two_city_params, make_state(0.0, [a, b]))
        assert parts.renewable_bonus == pytest.approx(25.0)


# ---------------------------------------------------------------------------
# Action argument
# ---------------------------------------------------------------------------

class TestActionIgnored:
    @pytest.mark.parametrize("action", [
        NO_OP,
        Modify(EnergyKind.RENEWABLE, Direction.ADD, 0),
        Modify(EnergyKind.NONRENEWABLE, Direction.REMOVE, 1),
    ])
    def test_same_value_for_every_action(self, two_city_params, two_city_state, action):
        assert reward(two_city_params, two_city_state, action) == reward(two_city_params, two_city_state)
