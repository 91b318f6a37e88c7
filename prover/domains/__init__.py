"""
Problem registry.

Each problem is a dict:
    make_clauses:  () -> list[Clause]
    expected:      bool, the known satisfiability answer
    description:   str
"""

from .propositional import (
    make_modus_ponens_clauses,
    make_weak_disjunction_clauses,
    make_syllogism_clauses,
    make_chain_clauses,
    make_wet_lawn_clauses,
)


PROBLEMS = {
    "modus_ponens": {
        "make_clauses": make_modus_ponens_clauses,
        "expected":     False,
        "description":  "A, A implies B, not B: refuted in two rounds",
    },
    "weak_disjunction": {
        "make_clauses": make_weak_disjunction_clauses,
        "expected":     True,
        "description":  "A or B, not A or B: saturates with B",
    },
    "syllogism": {
        "make_clauses": make_syllogism_clauses,
        "expected":     False,
        "description":  "Socrates is mortal, proved by refutation",
    },
    "chain": {
        "make_clauses": make_chain_clauses,
        "expected":     False,
        "description":  "Multi-step implication chain",
    },
    "wet_lawn": {
        "make_clauses": make_wet_lawn_clauses,
        "expected":     True,
        "description":  "Rain or sprinkler, both wet the lawn: consistent",
    },
}


def make_problem(name: str) -> list:
    """Build the clauses of a registered problem."""
    if name not in PROBLEMS:
        raise ValueError(
            f"Unknown problem: {name!r}. "
            f"Choose from: {list(PROBLEMS.keys())}"
        )
    return PROBLEMS[name]["make_clauses"]()
