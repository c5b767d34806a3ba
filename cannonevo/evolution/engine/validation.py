from __future__ import annotations

from typing import Any, Mapping

from loguru import logger
from pydantic import ValidationError

from cannonevo.evolution.engine.config import EngineConfig
from cannonevo.exceptions import ConfigurationError
from cannonevo.physics.simulator import max_height_at


def validate_config(
    config: EngineConfig | Mapping[str, Any] | None = None, **overrides: Any
) -> EngineConfig:
    """Build and check an EngineConfig, raising ConfigurationError on any problem.

    Accepts a ready EngineConfig, a plain mapping (e.g. a resolved Hydra node),
    or nothing for defaults; keyword overrides are applied on top.
    """
    if isinstance(config, EngineConfig):
        config = config.model_dump()
    try:
        cfg = EngineConfig.model_validate({**dict(config or {}), **overrides})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid engine configuration: {exc}") from exc

    reachable = max_height_at(
        cfg.wall.distance,
        cfg.bounds.velocity_max,
        cfg.bounds.angle_min,
        cfg.bounds.angle_max,
        cfg.gravity,
    )
    if reachable < cfg.wall.height:
        raise ConfigurationError(
            f"Wall of height {cfg.wall.height} m at {cfg.wall.distance} m cannot be cleared: "
            f"highest reachable point there is {reachable:.3f} m "
            f"(velocity_max={cfg.bounds.velocity_max}, angles "
            f"[{cfg.bounds.angle_min}, {cfg.bounds.angle_max}])"
        )

    logger.debug(
        "[validate_config] OK | N={}, mutation_rate={}, wall=({}, {}), reachable={:.3f}",
        cfg.population_size,
        cfg.mutation_rate,
        cfg.wall.distance,
        cfg.wall.height,
        reachable,
    )
    return cfg
