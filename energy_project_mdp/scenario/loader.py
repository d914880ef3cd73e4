"""JSON persistence for ScenarioParameters."""

from __future__ import annotations

import json
import logging
import os

from ..model import ConfigurationError, ScenarioParameters

logger = logging.getLogger(__name__)


def load_scenario(path: str) -> ScenarioParameters:
    """Read and validate a scenario written by ``save_scenario``."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Scenario file '{path}' is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"Scenario file '{path}' must contain a JSON object")

    params = ScenarioParameters.from_dict(data).validate()
    logger.debug(f"Loaded scenario with {params.number_of_cities} cities from {path}")
    return params


def save_scenario(params: ScenarioParameters, path: str) -> None:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(params.to_dict(), f, indent=2)
