"""
MOEA/D: Multi-Objective Evolutionary Algorithm based on Decomposition.

Weight vectors split the problem into scalar Tchebycheff subproblems that
are optimized together through neighbourhood-based mating and replacement,
while an unbounded Pareto archive collects the best front.
"""

from .algorithm import MOEAD
from .archive import ArchiveSnapshot, ParetoArchive
from .config import MOEADConfig, MOEADConfigData, load_config
from .decomposition import decomposed_single_objective, tchebycheff
from .dominance import dominance_matrix, dominates, nondominated_mask
from .exceptions import (
    BoundsError,
    ConfigurationError,
    EvaluationError,
    MOEADError,
    NeighbourhoodSizeError,
    NumericAnomalyError,
    ObjectiveCountError,
    OptimizationError,
    RunStateError,
)
from .hooks import MOEADCallback, RunContext
from .logging import configure_moead_logging
from .population import Population, evaluate_objectives
from .state import MOEADState, RunStatus
from .variation import GaussianMutation, UniformCrossover, VariationOperator, resolve_bounds
from .version import get_version
from .weights import WeightVectorSet, compute_neighbors, generate_weight_vectors, load_weight_vectors


def __getattr__(name: str):
    if name == "__version__":
        return get_version()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "MOEAD",
    "MOEADConfig",
    "MOEADConfigData",
    "load_config",
    "MOEADState",
    "RunStatus",
    "ArchiveSnapshot",
    "ParetoArchive",
    "Population",
    "evaluate_objectives",
    "WeightVectorSet",
    "compute_neighbors",
    "generate_weight_vectors",
    "load_weight_vectors",
    "GaussianMutation",
    "UniformCrossover",
    "VariationOperator",
    "resolve_bounds",
    "tchebycheff",
    "decomposed_single_objective",
    "dominance_matrix",
    "dominates",
    "nondominated_mask",
    "MOEADCallback",
    "RunContext",
    "configure_moead_logging",
    # Exceptions
    "MOEADError",
    "ConfigurationError",
    "BoundsError",
    "NeighbourhoodSizeError",
    "ObjectiveCountError",
    "OptimizationError",
    "EvaluationError",
    "NumericAnomalyError",
    "RunStateError",
    "get_version",
]
