from __future__ import annotations

from cannonevo.evolution.engine.config import EngineConfig, SelectionPolicy
from cannonevo.evolution.engine.core import EvolutionEngine
from cannonevo.evolution.engine.metrics import EngineMetrics
from cannonevo.evolution.engine.models import (
    BestSoFar,
    GenerationSnapshot,
    RunResult,
    TerminationReason,
    update_best,
)
from cannonevo.evolution.engine.validation import validate_config
