"""
Core data structures: Literal, Clause, ProverState.

These are the atoms of the whole system. Nothing in here depends on
the resolution rule or the saturation loop.

Literals and clauses (propositional):
    Literal:  an atom name plus a polarity
              Literal("rain")                ->  rain
              Literal("rain", negated=True)  -> ~rain

    A Clause is a frozenset of literals (disjunction).
    The empty clause [] is a contradiction -> unsatisfiable.
"""

from dataclasses import dataclass, field
from typing import Optional
import json


class InvalidLiteral(ValueError):
    """A literal token that cannot name a propositional atom."""


@dataclass(frozen=True)
class Literal:
    """An atom or its negation. Immutable and hashable."""
    atom: str
    negated: bool = False

    def __post_init__(self):
        if not isinstance(self.atom, str) or not self.atom:
            raise InvalidLiteral(f"atom must be a non-empty string, got {self.atom!r}")
        if "~" in self.atom or any(ch.isspace() for ch in self.atom):
            raise InvalidLiteral(
                f"atom {self.atom!r} may not contain '~' or whitespace"
            )
        if not isinstance(self.negated, bool):
            raise InvalidLiteral(f"polarity must be a bool, got {self.negated!r}")

    def complement(self) -> "Literal":
        return Literal(self.atom, not self.negated)

    @property
    def key(self) -> tuple:
        """Canonical sort key: by atom, positive before negative."""
        return (self.atom, self.negated)

    def __str__(self):
        return f"~{self.atom}" if self.negated else self.atom

    def __repr__(self):
        return f"Literal({self})"


@dataclass
class Clause:
    """
    A disjunction of literals.

    The empty clause (literals = frozenset()) is contradiction.
    Equality and hashing look at the literals only; label and step
    are bookkeeping.
    """
    literals: frozenset
    step: int = 0
    label: str = ""

    def __post_init__(self):
        self.literals = frozenset(self.literals)

    def sorted_literals(self) -> list:
        return sorted(self.literals, key=lambda lit: lit.key)

    @property
    def name(self):
        if not self.literals:
            return "[]"
        name = " | ".join(str(lit) for lit in self.sorted_literals())
        if self.label:
            name = f"[{self.label}] {name}"
        return name

    @property
    def is_empty(self):
        return len(self.literals) == 0

    @property
    def is_tautology(self):
        return any(lit.complement() in self.literals for lit in self.literals)

    def union(self, other: "Clause") -> "Clause":
        return Clause(self.literals | other.literals)

    def difference(self, other: "Clause") -> "Clause":
        return Clause(self.literals - other.literals)

    def __contains__(self, literal):
        return literal in self.literals

    def __iter__(self):
        return iter(self.sorted_literals())

    def __len__(self):
        return len(self.literals)

    def __hash__(self):
        return hash(self.literals)

    def __eq__(self, other):
        return isinstance(other, Clause) and self.literals == other.literals

    def __repr__(self):
        return f"Clause({self.name})"


def _empty_collection():
    from .collection import ClauseCollection
    return ClauseCollection()


@dataclass
class ProverState:
    """
    Full state of the saturation loop, serializable for continuity.

    frontier:    clauses not yet cross-resolved (the set of support)
    seen:        clauses already resolved against each other
    history:     log of what happened in each round
    satisfiable: the decision once halted on a verdict, else None
    """
    frontier: "ClauseCollection" = field(default_factory=_empty_collection)
    seen: "ClauseCollection" = field(default_factory=_empty_collection)
    history: list = field(default_factory=list)
    round: int = 0
    halted: bool = False
    halt_reason: str = ""
    satisfiable: Optional[bool] = None

    def to_dict(self):
        def serialize(clause):
            return {"literals": [[lit.atom, lit.negated] for lit in clause.sorted_literals()],
                    "step": clause.step, "label": clause.label}

        return {
            "frontier": [serialize(c) for c in self.frontier],
            "seen": [serialize(c) for c in self.seen],
            "history": self.history,
            "round": self.round,
            "halted": self.halted,
            "halt_reason": self.halt_reason,
            "satisfiable": self.satisfiable,
        }

    @classmethod
    def from_dict(cls, d):
        from .collection import ClauseCollection

        def deserialize(data):
            lits = frozenset(Literal(atom, negated) for atom, negated in data["literals"])
            return Clause(lits, data.get("step", 0), data.get("label", ""))

        state = cls()
        state.frontier = ClauseCollection(deserialize(c) for c in d["frontier"])
        state.seen = ClauseCollection(deserialize(c) for c in d["seen"])
        state.history = d["history"]
        state.round = d["round"]
        state.halted = d.get("halted", False)
        state.halt_reason = d.get("halt_reason", "")
        state.satisfiable = d.get("satisfiable")
        return state

    def save(self, path="prover_state.json"):
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path="prover_state.json"):
        with open(path) as f:
            return cls.from_dict(json.load(f))
