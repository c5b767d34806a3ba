from cannonevo.utils.trackers.base import GenerationTracker
from cannonevo.utils.trackers.core import HistoryTracker, LoguruTracker

__all__ = ["GenerationTracker", "HistoryTracker", "LoguruTracker"]
