"""loguru sinks for a cannonevo run: the console plus one rotating file per run."""

from datetime import datetime, timezone
from pathlib import Path
import sys

from loguru import logger

# loguru strips the color tags itself for sinks that are not colorized
LOG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<yellow>{line}</yellow> | <level>{message}</level>"
)


def setup_logger(
    log_dir: str | Path,
    level: str = "INFO",
    rotation: str = "50 MB",
    retention: str = "30 days",
) -> Path:
    """Replace loguru's default handler with a console and a file sink.

    Mirrors the ``logging`` node of ``config/config.yaml``. Returns the log file.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"cannonevo_{datetime.now(timezone.utc):%Y%m%d_%H%M%S}.log"

    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    logger.add(
        log_file,
        level=level,
        format=LOG_FORMAT,
        rotation=rotation,
        retention=retention,
        compression="zip",
        encoding="utf-8",
    )
    logger.debug("[setup_logger] level={} file={}", level, log_file)
    return log_file
