"""
Fixed-literal scenario presets.

create_comparison_scenario
    Two cities, one per income group, small enough for exhaustive grid solves.
create_tuned_scenario
    Four cities with standardized demands for equity comparisons.
create_academic_scenario
    Six US cities with demand/supply figures in TWh and a multi-billion
    policy budget.
"""

from __future__ import annotations

from ..model import CityRecord, ScenarioParameters


def create_comparison_scenario() -> ScenarioParameters:
    """Two-city scenario for quick benchmarking."""
    cities = [
        CityRecord(name="HighIncome", demand=15.0, renewable_supply=1.0, nonrenewable_supply=6.0,
                   population=500_000, is_high_income=True),
        CityRecord(name="LowIncome", demand=15.0, renewable_supply=0.5, nonrenewable_supply=5.0,
                   population=500_000, is_high_income=False),
    ]
    return ScenarioParameters(
        number_of_cities=2,
        cities=cities,
        cost_of_adding_re=140.0,
        cost_of_adding_nre=135.0,
        cost_of_removing_re=90.0,
        cost_of_removing_nre=150.0,
        operating_cost_re=[0.008, 0.010],
        operating_cost_nre=[0.045, 0.050],
        supply_of_re=6.0,
        supply_of_nre=6.0,
        weight_budget=0.2,
        weight_low_income_without_energy=-35.0,
        weight_population_with_re=18.0,
        initial_budget=3000.0,
        discount_rate=0.93,
        budget_discretization=300.0,
        max_budget=4000.0,
        min_budget=-500.0,
        energy_discretization=3.0,
        max_energy_per_city=60.0,
    ).validate()


def create_tuned_scenario() -> ScenarioParameters:
    """Four cities: two high-income, two low-income, similar demands."""
    cities = [
        CityRecord(name="Atlanta", demand=20.0, renewable_supply=2.0, nonrenewable_supply=8.0,
                   population=600_000, is_high_income=True),
        CityRecord(name="Memphis", demand=20.0, renewable_supply=1.0, nonrenewable_supply=7.0,
                   population=650_000, is_high_income=False),
        CityRecord(name="Phoenix", demand=18.0, renewable_supply=0.5, nonrenewable_supply=12.0,
                   population=580_000, is_high_income=False),
        CityRecord(name="Seattle", demand=18.0, renewable_supply=8.0, nonrenewable_supply=4.0,
                   population=620_000, is_high_income=True),
    ]
    return ScenarioParameters(
        number_of_cities=4,
        cities=cities,
        # RE is cheaper to add and to remove than NRE
        cost_of_adding_re=150.0,
        cost_of_adding_nre=130.0,
        cost_of_removing_re=100.0,
        cost_of_removing_nre=160.0,
        operating_cost_re=[0.008, 0.010, 0.009, 0.007],
        operating_cost_nre=[0.045, 0.052, 0.048, 0.044],
        supply_of_re=8.0,
        supply_of_nre=8.0,
        weight_budget=0.2,
        weight_low_income_without_energy=-40.0,
        weight_population_with_re=15.0,
        initial_budget=4000.0,
        discount_rate=0.92,
        budget_discretization=250.0,
        max_budget=5000.0,
        min_budget=-1000.0,
        energy_discretization=4.0,
        max_energy_per_city=80.0,
    ).validate()


def create_academic_scenario() -> ScenarioParameters:
    """Six US cities calibrated on published energy figures."""
    cities = [
        # High-income
        CityRecord(name="San Francisco", demand=25.8, renewable_supply=3.2, nonrenewable_supply=15.1,
                   population=875_000, is_high_income=True),
        CityRecord(name="Seattle", demand=22.4, renewable_supply=18.7, nonrenewable_supply=2.1,
                   population=750_000, is_high_income=True),
        # Low-income
        CityRecord(name="Detroit", demand=28.6, renewable_supply=1.8, nonrenewable_supply=20.2,
                   population=670_000, is_high_income=False),
        CityRecord(name="Memphis", demand=24.1, renewable_supply=0.9, nonrenewable_supply=18.7,
                   population=650_000, is_high_income=False),
        # Mixed
        CityRecord(name="Austin", demand=26.3, renewable_supply=4.1, nonrenewable_supply=16.8,
                   population=965_000, is_high_income=True),
        CityRecord(name="Phoenix", demand=31.2, renewable_supply=2.4, nonrenewable_supply=22.1,
                   population=1_680_000, is_high_income=False),
    ]
    return ScenarioParameters(
        number_of_cities=len(cities),
        cities=cities,
        cost_of_adding_re=158.0,
        cost_of_adding_nre=142.0,
        cost_of_removing_re=95.0,
        cost_of_removing_nre=185.0,
        operating_cost_re=[12.5, 8.2, 11.8, 9.4, 10.6, 13.1],
        operating_cost_nre=[48.3, 52.1, 44.7, 46.8, 47.2, 45.9],
        supply_of_re=5.0,
        supply_of_nre=5.0,
        weight_budget=0.25,
        weight_low_income_without_energy=-45.0,
        weight_population_with_re=18.0,
        initial_budget=5000.0,
        discount_rate=0.94,
        budget_discretization=250.0,
        max_budget=6000.0,
        min_budget=-1000.0,
        energy_discretization=2.5,
        max_energy_per_city=100.0,
    ).validate()
