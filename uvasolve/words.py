"""Problems about whole words, excuses, anagrams and judged output."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Callable, Iterable
from itertools import takewhile

from .text import _Scanner

_NON_LETTER = re.compile(r"[^A-Za-z]")
_DIGITS = frozenset("0123456789")


def _words(line: str) -> list[str]:
    return _NON_LETTER.sub(" ", line).lower().split()


def worst_excuses(keywords: Iterable[str], excuses: Iterable[str]) -> list[str]:
    """Excuses holding the most keyword occurrences, in their original order."""
    key_counts = Counter(keywords)
    excuses = list(excuses)
    counts = [sum(key_counts[word] for word in _words(excuse)) for excuse in excuses]
    best = max(counts, default=0)
    return [excuse for excuse, count in zip(excuses, counts) if count == best]


def anagrams(words: Iterable[str], query: str) -> list[str]:
    """Words that are permutations of the query, in their original order."""
    key = sorted(query)
    return [word for word in words if sorted(word) == key]


def _digits(lines: Iterable[str]) -> str:
    return "".join(c for line in lines for c in line if c in _DIGITS)


def judge(expected: Iterable[str], submitted: Iterable[str]) -> str:
    """Verdict for a submitted output against the expected one."""
    expected, submitted = list(expected), list(submitted)
    if "".join(line + "\n" for line in expected) == "".join(
        line + "\n" for line in submitted
    ):
        return "Accepted"
    if _digits(expected) == _digits(submitted):
        return "Presentation Error"
    return "Wrong Answer"


def species_percentages(names: Iterable[str]) -> list[tuple[str, float]]:
    """Each species name with its share of all names in percent, by name."""
    counts = Counter(names)
    total = sum(counts.values())
    return [(name, count / total * 100) for name, count in sorted(counts.items())]


def _solve_409(text: str) -> list[str]:
    scanner = _Scanner(text)
    out: list[str] = []
    set_number = 0
    while True:
        k_token, e_token = scanner.token(), scanner.token()
        if k_token is None or e_token is None:
            break
        keywords = [scanner.token() or "" for _ in range(int(k_token))]
        scanner.line()
        excuses = [scanner.line() or "" for _ in range(int(e_token))]
        set_number += 1
        out.append(f"Excuse Set #{set_number}")
        out.extend(worst_excuses(keywords, excuses))
        out.append("")
    return out


def _solve_630(text: str) -> list[str]:
    tokens = iter(text.split())
    cases = int(next(tokens, "0"))
    out: list[str] = []
    for case in range(cases):
        count = int(next(tokens))
        words = [next(tokens) for _ in range(count)]
        for query in tokens:
            if query == "END":
                break
            out.append(f"Anagrams for: {query}")
            matches = anagrams(words, query)
            if matches:
                out.extend(f"  {i}) {word}" for i, word in enumerate(matches, 1))
            else:
                out.append(f"No anagrams for: {query}")
        if case < cases - 1:
            out.append("")
    return out


def _solve_10188(text: str) -> list[str]:
    scanner = _Scanner(text)
    out: list[str] = []
    run = 0
    while (token := scanner.token()) is not None:
        n = int(token)
        if n == 0:
            break
        scanner.line()
        expected = [scanner.line() or "" for _ in range(n)]
        m = int(scanner.token() or 0)
        scanner.line()
        submitted = [scanner.line() or "" for _ in range(m)]
        run += 1
        out.append(f"Run #{run}: {judge(expected, submitted)}")
    return out


def _solve_10226(text: str) -> list[str]:
    scanner = _Scanner(text)
    cases = int(scanner.token() or 0)
    scanner.line()
    scanner.line()
    out: list[str] = []
    for _ in range(cases):
        names = list(takewhile(lambda line: line != "", scanner.lines()))
        out.extend(f"{name} {share:.4f}" for name, share in species_percentages(names))
        out.append("")
    return out


def problems() -> dict[str, Callable[[str], list[str]]]:
    """Map each problem number to the function that answers its input."""
    return {
        "10188": _solve_10188,
        "10226": _solve_10226,
        "409": _solve_409,
        "630": _solve_630,
    }


def solve(problem: str, text: str) -> str:
    """Answer the input text of the named problem."""
    solver = problems().get(str(problem))
    if solver is None:
        raise ValueError(f"unknown problem {problem!r}")
    return "".join(line + "\n" for line in solver(text))