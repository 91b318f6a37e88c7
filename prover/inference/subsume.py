"""
Subsumption: dropping clauses that say nothing new.

A clause D subsumes C when every literal of D is also in C. C is then
implied by D and can be removed without changing satisfiability.
"""

from ..core.collection import ClauseCollection
from ..core.state import Clause


def clause_subsumes(c1: Clause, c2: Clause) -> bool:
    """c1 subsumes c2 if c1's literals are a proper subset of c2's."""
    if len(c1.literals) >= len(c2.literals):
        return False
    return c1.literals.issubset(c2.literals)


def is_subsumed_by(clause: Clause, collection: ClauseCollection) -> bool:
    """Is `clause` already in `collection`, or subsumed by one of its members?"""
    if clause in collection:
        return True
    for known in collection:
        if len(known) >= len(clause):
            break
        if known.literals.issubset(clause.literals):
            return True
    return False


def subsumption(collection: ClauseCollection) -> ClauseCollection:
    """
    Remove every clause that is subsumed by another clause of the collection.

    A subsuming clause is never larger than what it subsumes, so for each
    clause only the clauses after it in order need scanning.
    """
    to_remove = set()
    for clause in collection:
        if clause in to_remove:
            # anything it subsumes is subsumed by its own subsumer too
            continue
        for bigger in collection.greater_than(clause):
            if clause_subsumes(clause, bigger):
                to_remove.add(bigger)
    if not to_remove:
        return collection
    return ClauseCollection(c for c in collection if c not in to_remove)
