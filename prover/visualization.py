"""
Reporting utilities.
"""

from .core.state import ProverState


def decision_word(state: ProverState) -> str:
    if state.satisfiable is None:
        return "Undecided"
    return "Satisfiable" if state.satisfiable else "Unsatisfiable"


def print_state(state: ProverState):
    """Print a summary of the current prover state."""
    print(f"\n{'='*60}")
    print(f"Round: {state.round}")
    print(f"Frontier ({len(state.frontier)}):")
    for clause in state.frontier:
        print(f"  {clause.name}")
    print(f"Seen ({len(state.seen)}):")
    for clause in state.seen:
        print(f"  {clause.name}")
    if state.halted:
        print(f"Halted: {state.halt_reason}")
    print(f"{'='*60}")


def print_history(state: ProverState):
    """Print the per-round history."""
    print(f"\n{'='*60}")
    print("Saturation history:")
    print(f"{'='*60}")
    for entry in state.history:
        produced = ", ".join(entry["produced"]) if entry["produced"] else "(nothing new)"
        print(f"  Round {entry['round']}: {entry['pairs']} pairs -> {produced} [{entry['outcome']}]")
