"""
Outcome metrics for a final world state.

Supply, renewable share and unmet demand overall and per income group, the
disparity between groups, a fairness score, budget use and a composite
score combining the three planning objectives with demand fulfilment.
"""

from __future__ import annotations

from typing import Dict, Sequence

from ..model import CityRecord, ScenarioParameters, WorldState

# Cities with more than this share of demand unmet count as unserved
UNSERVED_THRESHOLD = 0.1

COMPOSITE_WEIGHTS = {
    "budget": 0.25,
    "equity": 0.35,
    "renewable": 0.25,
    "fulfillment": 0.15,
}


def _group_metrics(cities: Sequence[CityRecord], prefix: str) -> Dict[str, float]:
    if not cities:
        return {
            f"{prefix}_supply_ratio": 1.0,
            f"{prefix}_re_ratio": 0.0,
            f"{prefix}_unmet": 0.0,
        }
    demand = sum(c.demand for c in cities)
    supply = sum(c.total_supply for c in cities)
    re = sum(c.renewable_supply for c in cities)
    return {
        f"{prefix}_supply_ratio": supply / demand,
        f"{prefix}_re_ratio": re / supply if supply > 0 else 0.0,
        f"{prefix}_unmet": max(0.0, demand - supply),
    }


def unserved_breakdown(state: WorldState) -> Dict[str, float]:
    """Unserved city counts and unmet-share-weighted population, per income group."""
    result = {
        "low_income_cities_unserved": 0.0,
        "high_income_cities_unserved": 0.0,
        "low_income_pop_unserved": 0.0,
        "high_income_pop_unserved": 0.0,
    }
    for city in state.cities:
        unmet_ratio = city.unmet_demand / city.demand
        if unmet_ratio <= UNSERVED_THRESHOLD:
            continue
        group = "high_income" if city.is_high_income else "low_income"
        result[f"{group}_cities_unserved"] += 1
        result[f"{group}_pop_unserved"] += city.population * unmet_ratio
    return result


def calculate_comprehensive_metrics(params: ScenarioParameters, final_state: WorldState) -> Dict[str, float]:
    """Outcome metrics for ``final_state`` relative to the scenario's starting budget."""
    cities = final_state.cities
    total_demand = sum(c.demand for c in cities)
    total_supply = sum(c.total_supply for c in cities)
    total_re = sum(c.renewable_supply for c in cities)

    metrics: Dict[str, float] = {
        "total_demand": total_demand,
        "total_supply": total_supply,
        "supply_ratio": total_supply / total_demand,
        "re_ratio": total_re / total_supply if total_supply > 0 else 0.0,
        "unmet_demand": max(0.0, total_demand - total_supply),
    }
    metrics.update(_group_metrics([c for c in cities if not c.is_high_income], "low_income"))
    metrics.update(_group_metrics([c for c in cities if c.is_high_income], "high_income"))

    metrics["supply_disparity"] = abs(metrics["low_income_supply_ratio"] - metrics["high_income_supply_ratio"])
    metrics["re_disparity"] = abs(metrics["low_income_re_ratio"] - metrics["high_income_re_ratio"])
    # 1.0 = both groups identical, 0.0 = maximal disparity
    metrics["equity_fairness"] = 1.0 - (metrics["supply_disparity"] + 0.5 * metrics["re_disparity"]) / 1.5

    metrics["budget_used"] = params.initial_budget - final_state.budget
    metrics["budget_efficiency"] = total_supply / max(1.0, metrics["budget_used"])

    budget_score = max(0.0, final_state.budget / params.initial_budget) if params.initial_budget else 0.0
    fulfillment_score = min(1.0, metrics["supply_ratio"])
    metrics["composite_score"] = (
        COMPOSITE_WEIGHTS["budget"] * budget_score
        + COMPOSITE_WEIGHTS["equity"] * metrics["equity_fairness"]
        + COMPOSITE_WEIGHTS["renewable"] * metrics["re_ratio"]
        + COMPOSITE_WEIGHTS["fulfillment"] * fulfillment_score
    )
    return metrics
