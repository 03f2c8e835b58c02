"""
CLI entry point. Run as: python -m runelock [--puzzle rune_lock]
"""

import argparse

from .commands import execute, parse, HELP
from .core.errors import InputError, UnknownHandleError
from .core.explain import DEFAULT_EXPLAIN_DEPTH
from .puzzles import PUZZLES
from .solver import FactualSolver
from .visualization import print_state, export_dot


def read_commands(script_path=None):
    """Lines from a script file, or from the keyboard until EOF / 'q'."""
    if script_path:
        with open(script_path) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#"):
                    print(f"> {line}")
                    yield line
        return
    while True:
        try:
            line = input("> ").strip()
        except EOFError:
            return
        if line:
            yield line


def run_session(solver, lines, depth=DEFAULT_EXPLAIN_DEPTH):
    """Feed command lines to the solver. Input and lookup errors are reported, not fatal."""
    print_state(solver)
    for line in lines:
        try:
            if not execute(solver, parse(line), default_depth=depth):
                break
        except (InputError, UnknownHandleError) as err:
            print(f"Didn't understand command: {err}")
            continue
        print_state(solver)
        print("=" * 30)
    return solver


def main(argv=None):
    parser = argparse.ArgumentParser(description="Rune Lock deduction assistant")
    parser.add_argument(
        "--puzzle",
        choices=list(PUZZLES.keys()),
        default="rune_lock",
        help="Which puzzle to work on",
    )
    parser.add_argument("--depth",  type=int, default=DEFAULT_EXPLAIN_DEPTH,
                        help="Default explanation depth")
    parser.add_argument("--script", type=str, default=None,
                        help="Read commands from a file instead of the keyboard")
    parser.add_argument("--dot",    type=str, default=None,
                        help="Export the final node's justification graph to a DOT file")
    parser.add_argument("--quiet",  action="store_true", help="Less output")
    args = parser.parse_args(argv)

    puzzle = PUZZLES[args.puzzle]
    lock = puzzle["make_lock"]()
    solver = FactualSolver(lock, verbose=not args.quiet)

    print(f"Puzzle: {args.puzzle} -- {puzzle['description']}")
    if not args.quiet:
        print(lock.describe())
        print(HELP)

    try:
        run_session(solver, read_commands(args.script), depth=args.depth)
    except KeyboardInterrupt:
        print("\nInterrupted.")

    if args.dot:
        export_dot(solver.facts, args.dot)


if __name__ == "__main__":
    main()
