"""
CLI entry point. Run as: python -m prover [FILE] [--problem <name>]
"""

import argparse
import sys

from .core.state import InvalidLiteral, ProverState
from .core.engine import initial_state, run_saturation
from .visualization import print_state, print_history, decision_word
from .domains import PROBLEMS, make_problem
from .parsing import read_clauses


def main(argv=None):
    parser = argparse.ArgumentParser(description="Propositional resolution prover")
    parser.add_argument("file", nargs="?", default=None,
                        help="Clause file, one clause per line (default: stdin)")
    parser.add_argument("--problem", choices=list(PROBLEMS.keys()), default=None,
                        help="Run a built-in sample problem instead of reading input")
    parser.add_argument("--strict", action="store_true",
                        help="Only resolve on literals whose complement is in the partner clause")
    parser.add_argument("--max-rounds", type=int, default=None, help="Round limit")
    parser.add_argument("--save",  type=str, default=None, help="Save state to file")
    parser.add_argument("--load",  type=str, default=None, help="Load state from file")
    parser.add_argument("--quiet", action="store_true",    help="Print only the decision")
    args = parser.parse_args(argv)

    # --- Load or build initial state ---
    try:
        if args.load:
            state = ProverState.load(args.load)
            if not args.quiet:
                print(f"Loaded state from {args.load} (round {state.round})")
        elif args.problem:
            state = initial_state(make_problem(args.problem))
        elif args.file:
            with open(args.file) as f:
                state = initial_state(read_clauses(f))
        else:
            state = initial_state(read_clauses(sys.stdin))
    except InvalidLiteral as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if not args.quiet:
        print_state(state)

    # --- Run ---
    try:
        state = run_saturation(
            state,
            max_rounds=args.max_rounds,
            save_path=args.save,
            strict=args.strict,
            verbose=not args.quiet,
        )
    except KeyboardInterrupt:
        print("\nInterrupted.")

    if not args.quiet:
        print_state(state)
        print_history(state)

    if args.save:
        state.save(args.save)
        if not args.quiet:
            print(f"State saved to {args.save}")

    print(decision_word(state))
    return 0


if __name__ == "__main__":
    sys.exit(main())
