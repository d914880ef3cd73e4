"""
Shared pytest fixtures for the Energy Project MDP test suite.
"""

import pytest

from energy_project_mdp.model import CityRecord, ScenarioParameters, WorldState
from energy_project_mdp.scenario import create_comparison_scenario, create_tuned_scenario


@pytest.fixture
def city_a():
    """High-income city, demand 10, 8 units of NRE, no RE."""
    return CityRecord(name="A", demand=10.0, renewable_supply=0.0, nonrenewable_supply=8.0,
                      population=100_000, is_high_income=True)


@pytest.fixture
def city_b():
    """Low-income city, demand 12, 8 units of NRE, no RE."""
    return CityRecord(name="B", demand=12.0, renewable_supply=0.0, nonrenewable_supply=8.0,
                      population=100_000, is_high_income=False)


@pytest.fixture
def two_city_params(city_a, city_b):
    """Two-city scenario: budget 1000, add-RE cost 150, increments of 8, op costs 0.01."""
    return ScenarioParameters(
        number_of_cities=2,
        cities=[city_a, city_b],
        initial_budget=1000.0,
        cost_of_adding_re=150.0,
        cost_of_adding_nre=130.0,
        cost_of_removing_re=100.0,
        cost_of_removing_nre=160.0,
        operating_cost_re=[0.01, 0.01],
        operating_cost_nre=[0.01, 0.01],
        supply_of_re=8.0,
        supply_of_nre=8.0,
        weight_budget=0.2,
        weight_low_income_without_energy=-50.0,
        weight_population_with_re=25.0,
        discount_rate=0.95,
        budget_discretization=250.0,
        min_budget=0.0,
        max_budget=1000.0,
        energy_discretization=4.0,
        max_energy_per_city=80.0,
    ).validate()


@pytest.fixture
def two_city_state(two_city_params):
    """Initial state of ``two_city_params``."""
    return WorldState.from_cities(two_city_params.initial_budget, two_city_params.cities)


@pytest.fixture
def comparison_params():
    return create_comparison_scenario()


@pytest.fixture
def tuned_params():
    return create_tuned_scenario()
