"""
Sample propositional problems.

Each make_* function returns a fresh list of clauses. Refutation
problems contain the negated goal as their last clause; proving it
contradictory proves the goal.
"""

from ..core.state import Clause
from ..parsing import parse_literal


def _clause(*tokens, label=""):
    return Clause(frozenset(parse_literal(t) for t in tokens), label=label)


def make_modus_ponens_clauses() -> list:
    """
    A, A -> B, and not B.

    Resolving A with ~A | B gives B; B with ~B gives the empty clause.
    """
    return [
        _clause("A", label="A holds"),
        _clause("~A", "B", label="A implies B"),
        _clause("~B", label="negated goal: not B"),
    ]


def make_weak_disjunction_clauses() -> list:
    """
    A | B and ~A | B.

    The only real resolvent is B, which opens no further inferences.
    Satisfiable: B true.
    """
    return [
        _clause("A", "B"),
        _clause("~A", "B"),
    ]


def make_syllogism_clauses() -> list:
    """
    The Socrates syllogism, grounded to propositions.

    Axioms:
        all humans are mortal:  ~human_socrates | mortal_socrates
        socrates is human:       human_socrates

    Negated goal: ~mortal_socrates
    """
    return [
        _clause("~human_socrates", "mortal_socrates", label="all humans are mortal"),
        _clause("human_socrates", label="socrates is human"),
        _clause("~mortal_socrates", label="negated goal: socrates not mortal"),
    ]


def make_chain_clauses() -> list:
    """
    Multi-step implication chain.

    knows -> trusts -> cooperates -> builds_with, with knows given and
    builds_with denied. Four resolution steps reach the empty clause.
    """
    return [
        _clause("knows", label="alice knows bob"),
        _clause("~knows", "trusts", label="knowing implies trusting"),
        _clause("~trusts", "cooperates", label="trusting implies cooperating"),
        _clause("~cooperates", "builds_with", label="cooperating implies building with"),
        _clause("~builds_with", label="negated goal: alice doesn't build with bob"),
    ]


def make_wet_lawn_clauses() -> list:
    """
    Either it rained or the sprinkler ran; both wet the lawn.

    Saturation derives wet and then stops. Satisfiable.
    """
    return [
        _clause("rain", "sprinkler", label="rain or sprinkler"),
        _clause("~rain", "wet", label="rain wets the lawn"),
        _clause("~sprinkler", "wet", label="sprinkler wets the lawn"),
    ]
