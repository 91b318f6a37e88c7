from .state import InvalidLiteral, Literal, Clause, ProverState
from .order import clause_key, compare
from .collection import ClauseCollection
from .engine import saturation_round, run_saturation, initial_state, ResolutionEngine

__all__ = [
    "InvalidLiteral", "Literal", "Clause", "ProverState",
    "clause_key", "compare",
    "ClauseCollection",
    "saturation_round", "run_saturation", "initial_state", "ResolutionEngine",
]
