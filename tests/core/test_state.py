"""
Unit and property-based tests for literals, clauses and prover state.

Core claims:
    - Literals are equal iff atom and polarity match; complement flips polarity
    - Malformed literals are rejected at construction with InvalidLiteral
    - A Clause is a set: repeated literals collapse, equality ignores metadata
    - Clause union / difference behave as set operations
    - to_dict() -> from_dict() and save() -> load() preserve the state
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from prover.core.state import InvalidLiteral, Literal, Clause, ProverState
from prover.core.collection import ClauseCollection
from prover.core.engine import initial_state, run_saturation
from prover.parsing import parse_literal


# ── Helpers ──────────────────────────────────────────────────────────────────

def lit(token):
    return parse_literal(token)


def clause(*tokens):
    return Clause(frozenset(lit(t) for t in tokens))


literals = st.builds(Literal, st.sampled_from(["A", "B", "C", "D"]), st.booleans())
clauses = st.frozensets(literals, max_size=4).map(Clause)


class TestLiteral:
    def test_equality(self):
        assert Literal("A") == Literal("A", False)
        assert Literal("A") != Literal("A", True)
        assert Literal("A") != Literal("B")

    def test_complement(self):
        assert Literal("A").complement() == Literal("A", True)
        assert Literal("A", True).complement() == Literal("A")

    def test_rendering(self):
        assert str(Literal("rain")) == "rain"
        assert str(Literal("rain", True)) == "~rain"

    def test_immutable(self):
        with pytest.raises(Exception):
            Literal("A").atom = "B"

    @pytest.mark.parametrize("atom", ["", "~A", "A B", "A\t", 3, None])
    def test_invalid_atom_rejected(self, atom):
        with pytest.raises(InvalidLiteral):
            Literal(atom)

    def test_invalid_polarity_rejected(self):
        with pytest.raises(InvalidLiteral):
            Literal("A", 1)

    def test_invalid_literal_is_value_error(self):
        with pytest.raises(ValueError):
            Literal("")

    @given(literals)
    def test_complement_is_involution(self, l):
        assert l.complement().complement() == l
        assert l.complement() != l


class TestClause:
    def test_duplicates_collapse(self):
        c = Clause([lit("A"), lit("A"), lit("~B")])
        assert len(c) == 2

    def test_empty_clause(self):
        c = Clause(frozenset())
        assert c.is_empty
        assert c.name == "[]"

    def test_membership(self):
        c = clause("A", "~B")
        assert lit("A") in c
        assert lit("~B") in c
        assert lit("B") not in c

    def test_equality_ignores_label_and_step(self):
        c1 = Clause(frozenset({lit("A")}), step=3, label="x")
        c2 = Clause(frozenset({lit("A")}))
        assert c1 == c2
        assert hash(c1) == hash(c2)

    def test_name_is_canonical(self):
        assert clause("~B", "A").name == "A | ~B"
        assert clause("~A", "A").name == "A | ~A"

    def test_label_in_name(self):
        c = Clause(frozenset({lit("A")}), label="given")
        assert c.name == "[given] A"

    def test_union_and_difference(self):
        a = clause("A", "B")
        b = clause("B", "~C")
        assert a.union(b) == clause("A", "B", "~C")
        assert a.difference(b) == clause("A")

    def test_tautology_detected_not_removed(self):
        c = clause("A", "~A", "B")
        assert c.is_tautology
        assert len(c) == 3

    @given(clauses, clauses)
    def test_union_is_set_union(self, a, b):
        assert a.union(b).literals == a.literals | b.literals
        assert a.difference(b).literals == a.literals - b.literals


class TestStateSerialization:
    def _state(self):
        return initial_state([clause("A", "B"), clause("~A", "B"), clause("C")])

    def test_dict_round_trip(self):
        state = self._state()
        restored = ProverState.from_dict(state.to_dict())
        assert restored.frontier == state.frontier
        assert restored.seen == state.seen
        assert restored.round == state.round

    def test_labels_survive(self):
        state = initial_state([Clause(frozenset({lit("A")}), label="given")])
        restored = ProverState.from_dict(state.to_dict())
        assert restored.frontier.first().label == "given"

    def test_json_round_trip(self, tmp_path):
        state = run_saturation(self._state(), max_rounds=1, verbose=False)
        path = str(tmp_path / "state.json")
        state.save(path)
        restored = ProverState.load(path)
        assert restored.frontier == state.frontier
        assert restored.seen == state.seen
        assert restored.history == state.history

    def test_decision_preserved(self, tmp_path):
        state = run_saturation(self._state(), verbose=False)
        assert state.halted
        path = str(tmp_path / "state.json")
        state.save(path)
        restored = ProverState.load(path)
        assert restored.halted
        assert restored.satisfiable == state.satisfiable
        assert restored.halt_reason == state.halt_reason

    @given(st.lists(clauses, max_size=5))
    def test_round_trip_property(self, cs):
        state = ProverState(frontier=ClauseCollection(cs))
        restored = ProverState.from_dict(state.to_dict())
        assert list(restored.frontier) == list(state.frontier)
