from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cannonevo.evolution.engine.models import GenerationSnapshot


class GenerationTracker(ABC):
    """Consumer of per-generation snapshots (logging, history, plotting)."""

    @abstractmethod
    def on_generation(self, snapshot: GenerationSnapshot) -> None:
        pass

    def close(self) -> None:
        pass
