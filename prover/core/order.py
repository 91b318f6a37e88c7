"""
The total order over clauses.

Smaller clauses come first; clauses of the same size are compared
element-wise over their literals in canonical order. Two consequences
the rest of the system leans on:

    - the empty clause, if present, is always the first element
    - "each unordered pair once" is a scan over strictly greater clauses

The order is a pair of pure functions. Nothing here holds state, so any
number of collections can share it.
"""

from .state import Clause


def clause_key(clause: Clause) -> tuple:
    """Sort key: (cardinality, canonical literal sequence)."""
    return (len(clause.literals), tuple(lit.key for lit in clause.sorted_literals()))


def compare(a: Clause, b: Clause) -> int:
    """-1, 0 or 1 as a sorts before, equal to, or after b."""
    ka, kb = clause_key(a), clause_key(b)
    return (ka > kb) - (ka < kb)
