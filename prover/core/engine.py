"""
The saturation loop.

Each round resolves every frontier clause against the clauses after it
in the frontier and against everything already seen, keeps what is new
and not subsumed, and promotes the frontier into seen. The loop stops on
the empty clause (unsatisfiable) or when a round produces nothing new
(satisfiable).
"""

from typing import Callable, Iterable, Optional

from .collection import ClauseCollection
from .state import Clause, ProverState
from ..inference.resolve import resolvents
from ..inference.subsume import is_subsumed_by, subsumption


def _halt(state: ProverState, satisfiable: bool, reason: str) -> ProverState:
    state.halted = True
    state.satisfiable = satisfiable
    state.halt_reason = reason
    return state


def saturation_round(
    state: ProverState,
    strict: bool = False,
    verbose: bool = True,
) -> ProverState:
    """
    Execute one round of the saturation loop.

    Args:
        state:    current ProverState
        strict:   only resolve on literals whose complement is in the
                  other clause (see inference.resolve.resolvents)
        verbose:  print progress
    """
    if state.halted:
        return state

    frontier, seen = state.frontier, state.seen
    state.round += 1
    if verbose:
        print(f"\n--- Round {state.round}: {len(frontier)} frontier, {len(seen)} seen ---")

    if frontier.contains_empty_clause():
        if verbose:
            print("  [contradiction] empty clause in frontier")
        _record(state, pairs=0, produced=[], outcome="unsatisfiable")
        return _halt(state, False, "empty clause in frontier")

    known = seen.union(frontier)
    pairs = 0
    fresh = []

    for x in frontier:
        for y in _partners(x, frontier, seen):
            pairs += 1
            res = resolvents(x, y, strict=strict)
            if res.contains_empty_clause():
                if verbose:
                    print(f"  [contradiction] [] from {x.name} + {y.name}")
                _record(state, pairs=pairs, produced=["[]"], outcome="unsatisfiable")
                return _halt(state, False, "empty clause derived")
            for r in res:
                if is_subsumed_by(r, known):
                    continue
                r.step = state.round
                fresh.append(r)

    newest = ClauseCollection(fresh)
    filtered = subsumption(newest)
    if verbose:
        for c in newest:
            if c not in filtered:
                print(f"  [subsumed] {c.name}")
        for c in filtered:
            print(f"  [new] {c.name}")

    if not filtered:
        _record(state, pairs=pairs, produced=[], outcome="satisfiable")
        if verbose:
            print("  [saturated] no new clauses")
        return _halt(state, True, "saturated")

    state.seen = subsumption(known)
    state.frontier = filtered
    _record(state, pairs=pairs, produced=[c.name for c in filtered], outcome="continue")
    if verbose:
        print(f"  Frontier: {len(state.frontier)} | Seen: {len(state.seen)}")
    return state


def _partners(x: Clause, frontier: ClauseCollection, seen: ClauseCollection):
    yield from frontier.greater_than(x)
    yield from seen


def _record(state: ProverState, pairs: int, produced: list, outcome: str):
    state.history.append({
        "round": state.round,
        "frontier_size": len(state.frontier),
        "seen_size": len(state.seen),
        "pairs": pairs,
        "produced": produced,
        "outcome": outcome,
    })


def run_saturation(
    state: ProverState,
    max_rounds: Optional[int] = None,
    stop_fn: Optional[Callable] = None,
    save_path: Optional[str] = None,
    **kwargs,
) -> ProverState:
    """
    Run the saturation loop until halted, stop condition met, or max_rounds reached.

    Args:
        state:      initial state
        max_rounds: round limit; None runs to a decision
        stop_fn:    stop_fn(state) -> bool; halt early if True
        save_path:  if set, checkpoint state after each round
        **kwargs:   passed through to saturation_round
    """
    rounds = 0
    while not state.halted:
        if max_rounds is not None and rounds >= max_rounds:
            break
        if stop_fn and stop_fn(state):
            state.halted = True
            state.halt_reason = "stop condition met"
            break
        state = saturation_round(state, **kwargs)
        rounds += 1
        if save_path:
            state.save(save_path)
    return state


def initial_state(clauses: Iterable[Clause]) -> ProverState:
    """Filter the input once and make it the first frontier."""
    return ProverState(frontier=subsumption(ClauseCollection(clauses)))


class ResolutionEngine:
    """
    Decide satisfiability of a clause set by saturation.

        engine = ResolutionEngine(clauses)
        engine.is_satisfiable()  -> bool
    """

    def __init__(self, clauses: Iterable[Clause], strict: bool = False):
        self.strict = strict
        self.state = initial_state(clauses)

    @property
    def rounds(self) -> int:
        return self.state.round

    def is_satisfiable(self, verbose: bool = False) -> bool:
        if self.state.satisfiable is None:
            self.state.halted = False
            self.state = run_saturation(self.state, strict=self.strict, verbose=verbose)
        return self.state.satisfiable
