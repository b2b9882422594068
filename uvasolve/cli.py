"""Command line entry point that answers any known problem from its input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from . import digits, formulas, geometry, grid, numtheory, schedule, sequences, text, words

_MODULES = (digits, numtheory, formulas, geometry, text, words, sequences, grid, schedule)


def _registry() -> dict[str, Callable[[str], list[str]]]:
    solvers: dict[str, Callable[[str], list[str]]] = {}
    for module in _MODULES:
        solvers.update(module.problems())
    return solvers


def _sort_key(name: str) -> tuple[int, str]:
    return (int(name), name) if name.isdigit() else (sys.maxsize, name)


def run(problem: str, text: str) -> str:
    """Answer the input text of the named problem, one output line per line."""
    solver = _registry().get(str(problem))
    if solver is None:
        raise ValueError(f"unknown problem {problem!r}")
    return "".join(line + "\n" for line in solver(text))


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uvasolve",
        description="Answer a numbered programming problem from its input.",
    )
    parser.add_argument("problem", nargs="?", help="problem number, such as 100")
    parser.add_argument(
        "input",
        nargs="?",
        help="file holding the input; standard input when left out",
    )
    parser.add_argument(
        "--list", action="store_true", help="list the known problem numbers and stop"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = _parser().parse_args(argv)
    if args.list:
        for name in sorted(_registry(), key=_sort_key):
            sys.stdout.write(name + "\n")
        return 0
    if args.problem is None:
        sys.stderr.write("uvasolve: a problem number is needed\n")
        return 2
    if args.problem not in _registry():
        sys.stderr.write(f"uvasolve: unknown problem {args.problem!r}\n")
        return 1
    if args.input is None:
        data = sys.stdin.read()
    else:
        try:
            with open(args.input, encoding="utf-8", newline="") as handle:
                data = handle.read()
        except OSError as exc:
            sys.stderr.write(f"uvasolve: {exc}\n")
            return 1
    try:
        output = run(args.problem, data)
    except (ValueError, StopIteration) as exc:
        sys.stderr.write(f"uvasolve: bad input: {exc}\n")
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())