"""
Unit tests for scenario construction and persistence.

Covers:
- initialize_scenario(): reproducibility, level membership, income mix
- presets: validity and shape
- save_scenario() / load_scenario(): JSON round trip and error handling
"""

import json

import numpy as np
import pytest

from energy_project_mdp.model import ConfigurationError, ScenarioParameters
from energy_project_mdp.scenario import (
    DEMAND_LEVELS, NRE_SUPPLY_LEVELS, POPULATION_LEVELS, RE_SUPPLY_LEVELS,
    create_academic_scenario, create_comparison_scenario, create_tuned_scenario,
    initialize_scenario, load_scenario, save_scenario,
)


# ---------------------------------------------------------------------------
# Randomized initializer
# ---------------------------------------------------------------------------

class TestInitializeScenario:
    def test_same_seed_same_scenario(self):
        assert initialize_scenario(seed=7) == initialize_scenario(seed=7)

    def test_rng_and_seed_agree(self):
        assert initialize_scenario(rng=np.random.default_rng(11)) == initialize_scenario(seed=11)

    def test_six_named_cities(self):
        params = initialize_scenario(seed=0)
        assert params.number_of_cities == 6
        assert [c.name for c in params.cities] == [
            "Atlanta", "Memphis", "Phoenix", "Seattle", "Detroit", "San Francisco",
        ]

    @pytest.mark.parametrize("seed", range(10))
    def test_values_drawn_from_levels(self, seed):
        params = initialize_scenario(seed=seed)
        for city in params.cities:
            assert city.demand in DEMAND_LEVELS
            assert city.renewable_supply in RE_SUPPLY_LEVELS
            assert city.nonrenewable_supply in NRE_SUPPLY_LEVELS
            assert city.population in POPULATION_LEVELS

    @pytest.mark.parametrize("seed", range(10))
    def test_structural_guarantees(self, seed):
        params = initialize_scenario(seed=seed)
        assert all(c.demand > 0 for c in params.cities)
        assert {c.is_high_income for c in params.cities} == {True, False}
        assert len(params.operating_cost_re) == params.number_of_cities
        assert len(params.operating_cost_nre) == params.number_of_cities
        assert 0.0 < params.discount_rate <= 1.0

    def test_initial_budget_from_candidates(self):
        params = initialize_scenario(seed=3)
        assert params.initial_budget in (250.0, 500.0, 750.0, 1000.0)


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------

class TestPresets:
    @pytest.mark.parametrize("factory, n_cities", [
        (create_comparison_scenario, 2),
        (create_tuned_scenario, 4),
        (create_academic_scenario, 6),
    ])
    def test_preset_shape(self, factory, n_cities):
        params = factory()
        assert params.number_of_cities == n_cities
        assert len(params.cities) == n_cities
        assert params.validate() is params

    def test_presets_are_fresh_objects(self):
        assert create_tuned_scenario() is not create_tuned_scenario()
        assert create_tuned_scenario() == create_tuned_scenario()

    def test_tuned_renewable_cheaper(self, tuned_params):
        assert tuned_params.cost_of_removing_re < tuned_params.cost_of_removing_nre


# ---------------------------------------------------------------------------
# JSON persistence
# ---------------------------------------------------------------------------

class TestPersistence:
    def test_round_trip(self, tmp_path, tuned_params):
        path = tmp_path / "tuned.json"
        save_scenario(tuned_params, str(path))
        assert load_scenario(str(path)) == tuned_params

    def test_creates_parent_directories(self, tmp_path, comparison_params):
        path = tmp_path / "nested" / "dir" / "scenario.json"
        save_scenario(comparison_params, str(path))
        assert path.exists()

    def test_file_is_plain_json(self, tmp_path, comparison_params):
        path = tmp_path / "scenario.json"
        save_scenario(comparison_params, str(path))
        data = json.loads(path.read_text())
        assert data["number_of_cities"] == 2
        assert data["cities"][0]["name"] == "HighIncome"

    def test_invalid_json_rejected(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError, match="not valid JSON"):
            load_scenario(str(path))

    def test_non_object_rejected(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(ConfigurationError):
            load_scenario(str(path))

    def test_invalid_scenario_rejected(self, tmp_path, comparison_params):
        data = comparison_params.to_dict()
        data["discount_rate"] = 2.0
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(data))
        with pytest.raises(ConfigurationError, match="discount_rate"):
            load_scenario(str(path))

    def test_partial_file_uses_defaults(self, tmp_path, comparison_params):
        data = {
            "number_of_cities": 2,
            "cities": comparison_params.to_dict()["cities"],
        }
        path = tmp_path / "partial.json"
        path.write_text(json.dumps(data))
        params = load_scenario(str(path))
        assert params.initial_budget == ScenarioParameters().initial_budget
