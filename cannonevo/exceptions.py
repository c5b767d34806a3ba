class CannonEvoError(Exception):
    """Base for all cannonevo exceptions."""

    pass


class ConfigurationError(CannonEvoError):
    """Invalid run configuration, detected before any generation runs."""

    pass


class DegenerateTrajectoryError(CannonEvoError):
    """Firing plan that does not define a trajectory (angle or velocity out of domain)."""

    pass


class EvolutionError(CannonEvoError):
    """Evolution process failures."""

    pass
