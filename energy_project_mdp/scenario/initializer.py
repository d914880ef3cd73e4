"""
Randomized scenario initializer.

Each numeric field is drawn independently from a short list of discrete
candidate levels, so a scenario is fully determined by the random generator
it is given.  Cities draw from slices of the shared level lists that encode
their profile (e.g. Seattle starts renewable-heavy, Detroit fossil-heavy).
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np

from ..model import CityRecord, ScenarioParameters

logger = logging.getLogger(__name__)

DEMAND_LEVELS = [15.0, 18.0, 20.0, 22.0, 25.0, 28.0]
RE_SUPPLY_LEVELS = [0.0, 1.0, 2.0, 3.0, 4.0, 6.0, 8.0]
NRE_SUPPLY_LEVELS = [4.0, 6.0, 8.0, 10.0, 12.0, 15.0, 18.0, 20.0]
POPULATION_LEVELS = [500_000.0, 580_000.0, 620_000.0, 650_000.0, 700_000.0, 850_000.0]

# name, high income, then (start, stop) slices into the demand / RE / NRE /
# population level lists
_CITY_PROFILES = [
    ("Atlanta",       True,  (0, 6), (0, 4), (2, 6), (0, 6)),
    ("Memphis",       False, (1, 5), (0, 3), (1, 5), (1, 5)),
    ("Phoenix",       False, (0, 4), (0, 2), (3, 7), (0, 4)),
    ("Seattle",       True,  (0, 4), (4, 7), (0, 3), (1, 5)),
    ("Detroit",       False, (3, 6), (0, 3), (5, 8), (2, 6)),
    ("San Francisco", True,  (3, 6), (2, 6), (4, 8), (3, 6)),
]


def _pick(rng: np.random.Generator, levels: Sequence[float], bounds=None) -> float:
    if bounds is not None:
        levels = levels[bounds[0]:bounds[1]]
    return float(levels[int(rng.integers(len(levels)))])


def _random_cities(rng: np.random.Generator) -> List[CityRecord]:
    cities = []
    for name, high_income, demand, re, nre, population in _CITY_PROFILES:
        cities.append(CityRecord(
            name=name,
            demand=_pick(rng, DEMAND_LEVELS, demand),
            renewable_supply=_pick(rng, RE_SUPPLY_LEVELS, re),
            nonrenewable_supply=_pick(rng, NRE_SUPPLY_LEVELS, nre),
            population=_pick(rng, POPULATION_LEVELS, population),
            is_high_income=high_income,
        ))
    return cities


def initialize_scenario(
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> ScenarioParameters:
    """
    Build a six-city scenario with randomized costs, cities and budget.

    Args:
        rng: Generator to draw from.  Takes precedence over ``seed``.
        seed: Seed for a fresh ``numpy.random.default_rng`` when no ``rng`` is
            passed.  The same seed always yields the same scenario.
    """
    if rng is None:
        rng = np.random.default_rng(seed)

    cities = _random_cities(rng)
    n = len(cities)

    params = ScenarioParameters(
        number_of_cities=n,
        cities=cities,

        # Capital costs
        cost_of_adding_re=_pick(rng, [140.0, 150.0, 160.0, 170.0]),
        cost_of_adding_nre=_pick(rng, [120.0, 130.0, 140.0, 150.0]),
        cost_of_removing_re=_pick(rng, [90.0, 100.0, 110.0, 120.0]),
        cost_of_removing_nre=_pick(rng, [150.0, 160.0, 170.0, 180.0]),

        # Operating costs, drawn per city
        operating_cost_re=[_pick(rng, [0.006, 0.008, 0.010, 0.012]) for _ in range(n)],
        operating_cost_nre=[_pick(rng, [0.040, 0.045, 0.050, 0.055]) for _ in range(n)],

        supply_of_re=8.0,
        supply_of_nre=8.0,

        weight_budget=0.2,
        weight_low_income_without_energy=-50.0,
        weight_population_with_re=25.0,

        budget_discretization=250.0,
        max_budget=1000.0,
        min_budget=0.0,
        energy_discretization=4.0,
        max_energy_per_city=80.0,

        initial_budget=_pick(rng, [250.0, 500.0, 750.0, 1000.0]),
        discount_rate=_pick(rng, [0.90, 0.92, 0.95, 0.97]),
    )
    params.validate()

    logger.debug(
        f"Initialized scenario: {n} cities, budget={params.initial_budget}, "
        f"discount={params.discount_rate}"
    )
    return params
