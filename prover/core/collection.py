"""
ClauseCollection: an immutable ordered set of clauses.

Clauses are kept sorted under the clause order and deduplicated by
equality. Every operation returns a fresh collection, so a collection
handed to someone else never changes under them.
"""

from bisect import bisect_right
from typing import Iterable, Iterator

from .order import clause_key
from .state import Clause


class ClauseCollection:

    __slots__ = ("_clauses", "_keys", "_members")

    def __init__(self, clauses: Iterable[Clause] = ()):
        unique = {}
        for clause in clauses:
            # first occurrence wins
            unique.setdefault(clause, clause)
        ordered = sorted(unique.values(), key=clause_key)
        self._clauses = tuple(ordered)
        self._keys = [clause_key(c) for c in ordered]
        self._members = frozenset(ordered)

    def union(self, other: "ClauseCollection") -> "ClauseCollection":
        return ClauseCollection(list(self._clauses) + list(other))

    def difference(self, other: "ClauseCollection") -> "ClauseCollection":
        return ClauseCollection(c for c in self._clauses if c not in other)

    def first(self) -> Clause:
        """The smallest clause. Raises IndexError on an empty collection."""
        if not self._clauses:
            raise IndexError("first() on an empty ClauseCollection")
        return self._clauses[0]

    def contains_empty_clause(self) -> bool:
        """The empty clause sorts first, so only one element is inspected."""
        return bool(self._clauses) and self._clauses[0].is_empty

    def greater_than(self, clause: Clause) -> Iterator[Clause]:
        """Clauses strictly greater than `clause`, in ascending order."""
        start = bisect_right(self._keys, clause_key(clause))
        return iter(self._clauses[start:])

    def __contains__(self, clause):
        return clause in self._members

    def __iter__(self):
        return iter(self._clauses)

    def __len__(self):
        return len(self._clauses)

    def __bool__(self):
        return bool(self._clauses)

    def __eq__(self, other):
        return isinstance(other, ClauseCollection) and self._members == other._members

    def __hash__(self):
        return hash(self._members)

    def __repr__(self):
        return "ClauseCollection({" + ", ".join(c.name for c in self._clauses) + "})"
