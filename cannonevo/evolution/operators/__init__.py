from cannonevo.evolution.operators.crossover import (
    BlendCrossover,
    CrossoverOperator,
    CrossoverPolicy,
    UniformCrossover,
    build_crossover,
)
from cannonevo.evolution.operators.mutation import BoundedMutation
from cannonevo.evolution.operators.selectors import (
    ParentSelector,
    RouletteWheelSelector,
    TournamentSelector,
)

__all__ = [
    "BlendCrossover",
    "BoundedMutation",
    "CrossoverOperator",
    "CrossoverPolicy",
    "ParentSelector",
    "RouletteWheelSelector",
    "TournamentSelector",
    "UniformCrossover",
    "build_crossover",
]
