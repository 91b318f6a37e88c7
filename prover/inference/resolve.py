"""
Propositional resolution: the inference rule of the saturation loop.

Given two clauses and a literal l of the first, take the union of both
clauses and, if the complement of l is in that union, strike out l and
its complement. The result is the resolvent on l.

When the complement is absent nothing is struck out and the "resolvent"
is the plain union, a superset of both parents. Such clauses are
non-informative and subsumption discards them; generating them keeps
the rule a single uniform step per literal.

If a resolvent is empty, a contradiction has been found.
"""

from ..core.collection import ClauseCollection
from ..core.state import Clause, Literal


def resolve_on(literal: Literal, c1: Clause, c2: Clause) -> Clause:
    """Resolve c1 and c2 on `literal`, a literal of c1."""
    union = c1.literals | c2.literals
    complement = literal.complement()
    if complement in union:
        union = union - {literal, complement}
    return Clause(union)


def resolvents(c1: Clause, c2: Clause, strict: bool = False) -> ClauseCollection:
    """
    All resolvents of (c1, c2), one attempt per literal of c1.

    With strict=True a literal is only resolved on when its complement
    occurs in c2, so no plain unions are produced.
    """
    results = []
    for lit in c1.sorted_literals():
        if strict and lit.complement() not in c2.literals:
            continue
        results.append(resolve_on(lit, c1, c2))
    return ClauseCollection(results)
