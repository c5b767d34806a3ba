from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger
import pandas as pd

from cannonevo.utils.trackers.base import GenerationTracker

if TYPE_CHECKING:
    from cannonevo.evolution.engine.models import GenerationSnapshot


class LoguruTracker(GenerationTracker):
    """Logs one line every ``every`` generations."""

    def __init__(self, every: int = 1, level: str = "INFO"):
        if every < 1:
            raise ValueError(f"every must be at least 1, got {every}")
        self.every = every
        self.level = level

    def on_generation(self, snapshot: GenerationSnapshot) -> None:
        if snapshot.generation % self.every:
            return
        logger.log(
            self.level,
            "[Generation {:>4}] best v={:.3f} m/s angle={:.3f} deg | fitness={:.4f} "
            "(mean={:.4f}, std={:.4f}) | {} at {:.3f} m (overshoot={:.3f})",
            snapshot.generation,
            snapshot.best.velocity,
            snapshot.best.angle,
            snapshot.best_fitness,
            snapshot.mean_fitness,
            snapshot.std_fitness,
            snapshot.best_outcome.value,
            snapshot.best_distance,
            snapshot.best_overshoot,
        )


class HistoryTracker(GenerationTracker):
    """Keeps every snapshot for later analysis or plotting."""

    COLUMNS = [
        "generation",
        "velocity",
        "angle",
        "best_fitness",
        "mean_fitness",
        "std_fitness",
        "best_distance",
        "best_outcome",
        "best_overshoot",
    ]

    def __init__(self) -> None:
        self.snapshots: list[GenerationSnapshot] = []

    def on_generation(self, snapshot: GenerationSnapshot) -> None:
        self.snapshots.append(snapshot)

    def to_frame(self) -> pd.DataFrame:
        rows = [
            {
                "generation": s.generation,
                "velocity": s.best.velocity,
                "angle": s.best.angle,
                "best_fitness": s.best_fitness,
                "mean_fitness": s.mean_fitness,
                "std_fitness": s.std_fitness,
                "best_distance": s.best_distance,
                "best_outcome": s.best_outcome.value,
                "best_overshoot": s.best_overshoot,
            }
            for s in self.snapshots
        ]
        return pd.DataFrame(rows, columns=self.COLUMNS)

    def to_csv(self, path: str | Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.to_frame().to_csv(path, index=False)
        logger.info("[HistoryTracker] Wrote {} generations to {}", len(self.snapshots), path)
        return path
