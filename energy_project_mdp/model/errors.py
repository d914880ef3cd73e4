"""errors – exceptions raised while building a scenario."""


class ConfigurationError(ValueError):
    """Scenario parameters or city data are unusable.

    Raised while a scenario is being built, never during simulation.
    """
