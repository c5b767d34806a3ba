from datetime import datetime, timezone
import os
import time

import hydra
from hydra.core.hydra_config import HydraConfig
from loguru import logger
from omegaconf import DictConfig, OmegaConf

from cannonevo.evolution.engine import EvolutionEngine, RunResult
from cannonevo.exceptions import ConfigurationError
from cannonevo.utils.logger_setup import setup_logger
from cannonevo.utils.trackers import GenerationTracker, HistoryTracker, LoguruTracker


def run_experiment(cfg: DictConfig, output_dir: str) -> RunResult:
    start_time = time.time()

    logger.info("=" * 80)
    logger.info("cannonevo firing-plan search")
    logger.info("=" * 80)
    logger.info(f"Start time: {datetime.now(timezone.utc).isoformat()}")

    history = HistoryTracker()
    trackers: list[GenerationTracker] = [
        LoguruTracker(every=cfg.report.log_every),
        history,
    ]
    try:
        logger.info("Step 1/3: Validating configuration...")
        engine_cfg = OmegaConf.to_container(cfg.engine, resolve=True)
        engine = EvolutionEngine(engine_cfg, trackers=trackers)
        logger.info(
            f"  Wall: {engine.config.wall.distance} m away, {engine.config.wall.height} m high"
        )
        logger.info(f"  Population size: {engine.config.population_size}")
        logger.info(f"  Max generations: {engine.config.max_generations}")

        logger.info("Step 2/3: Evolving...")
        result = engine.run()

        logger.info("Step 3/3: Reporting...")
        best = result.best
        logger.info(f"  Termination: {result.reason.value} after {result.generations} generations")
        logger.info(f"  Best plan: {best.individual} (generation {best.generation})")
        logger.info(
            f"  Flight: {best.flight.outcome.value}, distance {best.flight.distance:.3f} m, "
            f"overshoot {best.flight.overshoot:.3f} m, fitness {best.fitness:.4f}"
        )
        if cfg.report.history_csv:
            history.to_csv(os.path.join(output_dir, cfg.report.history_csv))
        return result

    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        raise
    except KeyboardInterrupt:
        logger.info("Run interrupted by user")
        raise
    finally:
        for tracker in trackers:
            tracker.close()
        duration = time.time() - start_time
        logger.info(f"Total duration: {duration:.2f} seconds")
        logger.info(f"End time: {datetime.now(timezone.utc).isoformat()}")
        logger.info("=" * 80)


@hydra.main(version_base=None, config_path="config", config_name="config")
def main(cfg: DictConfig) -> None:
    """Main entrypoint with Hydra configuration management."""
    output_dir = HydraConfig.get().runtime.output_dir
    log_file_path = setup_logger(
        log_dir=os.path.join(output_dir, cfg.logging.log_dir),
        level=cfg.logging.level,
        rotation=cfg.logging.rotation,
        retention=cfg.logging.retention,
    )
    logger.info("Experiment working directory: {}.", output_dir)
    logger.info(f"Log file: {log_file_path}")
    run_experiment(cfg, output_dir)


if __name__ == "__main__":
    main()
