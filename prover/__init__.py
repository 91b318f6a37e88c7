"""
Prover: a saturation-based resolution prover for propositional CNF.

Clauses are resolved pairwise, round by round, with subsumption pruning
after each round, until the empty clause appears (unsatisfiable) or a
round yields nothing new (satisfiable).

Usage:
    python -m prover clauses.txt
    python -m prover < clauses.txt
    python -m prover --problem modus_ponens
    python -m prover --problem wet_lawn --save state.json
"""

from .core.state import InvalidLiteral, Literal, Clause, ProverState
from .core.order import clause_key, compare
from .core.collection import ClauseCollection
from .core.engine import saturation_round, run_saturation, initial_state, ResolutionEngine
from .inference.resolve import resolve_on, resolvents
from .inference.subsume import clause_subsumes, is_subsumed_by, subsumption
from .parsing import parse_literal, parse_clause, read_clauses
from .domains import PROBLEMS, make_problem

__all__ = [
    "InvalidLiteral", "Literal", "Clause", "ProverState",
    "clause_key", "compare",
    "ClauseCollection",
    "saturation_round", "run_saturation", "initial_state", "ResolutionEngine",
    "resolve_on", "resolvents",
    "clause_subsumes", "is_subsumed_by", "subsumption",
    "parse_literal", "parse_clause", "read_clauses",
    "PROBLEMS", "make_problem",
]
