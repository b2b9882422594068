"""Problems about times of day, dice rolls and instrument fingering."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .text import _Scanner

_MINUTES_PER_DAY = 1440
_DAY_START = 480
_EVENING_START = 1080
_NIGHT_START = 1320
_WORK_START = 600
_WORK_END = 1080
_RATES = {
    "A": (0.10, 0.06, 0.02),
    "B": (0.25, 0.15, 0.05),
    "C": (0.53, 0.33, 0.13),
    "D": (0.87, 0.47, 0.17),
    "E": (1.44, 0.80, 0.30),
}
_FINGERS = {
    note: frozenset(10 if ch == "0" else int(ch) for ch in pattern)
    for note, pattern in zip(
        "cdefgabCDEFGAB",
        (
            "2347890", "234789", "23478", "2347", "234", "23", "2",
            "3", "1234789", "123478", "12347", "1234", "123", "12",
        ),
    )
}


def longest_nap(appointments: Iterable[tuple[int, int]]) -> tuple[int, int]:
    """Start minute and length of the longest free gap between 10:00 and 18:00.

    Appointments are (start, end) pairs in minutes since midnight.
    """
    slots = sorted(
        [(_WORK_START, _WORK_START), (_WORK_END, _WORK_END)]
        + [(int(s), int(e)) for s, e in appointments]
    )
    best = start = 0
    last = _WORK_START
    for begin, finish in slots:
        if begin - last > best:
            best = begin - last
            start = last
        last = max(last, finish)
    return start, best


def call_charge(step: str, start: int, end: int) -> tuple[int, int, int, float]:
    """Day, evening and night minutes of a call and its total charge.

    Times are minutes since midnight; an end not after the start means the
    call ran into the next day.
    """
    rates = _RATES.get(step)
    if rates is None:
        raise ValueError(f"unknown charging step {step!r}")
    if end <= start:
        end += _MINUTES_PER_DAY
    counts = [0, 0, 0]
    for minute in range(start, end):
        t = minute % _MINUTES_PER_DAY
        if _DAY_START <= t < _EVENING_START:
            counts[0] += 1
        elif _EVENING_START <= t < _NIGHT_START:
            counts[1] += 1
        else:
            counts[2] += 1
    total = counts[0] * rates[0] + counts[1] * rates[1] + counts[2] * rates[2]
    return counts[0], counts[1], counts[2], total


def roll_die(commands: Iterable[str]) -> int:
    """Face on top of a die rolled north, south, east or west from its start."""
    top, north, west = 1, 2, 3
    for command in commands:
        kind = command[:1]
        if kind == "n":
            top, north = 7 - north, top
        elif kind == "s":
            top, north = north, 7 - top
        elif kind == "e":
            top, west = west, 7 - top
        else:
            top, west = 7 - west, top
    return top


def finger_presses(notes: Iterable[str]) -> list[int]:
    """How often each of the ten fingers is pressed down while playing the notes."""
    counts = [0] * 10
    pressed: frozenset[int] = frozenset()
    for note in notes:
        now = _FINGERS.get(note, frozenset())
        for finger in now - pressed:
            counts[finger - 1] += 1
        pressed = now
    return counts


def _minutes(clock: str | None) -> int:
    if clock is None:
        raise ValueError("unexpected end of input")
    hours, sep, minutes = clock.partition(":")
    if not sep:
        raise ValueError(f"not a time of day: {clock!r}")
    return int(hours) * 60 + int(minutes)


def _solve_10191(text: str) -> list[str]:
    scanner = _Scanner(text)
    out = []
    day = 0
    while (token := scanner.token()) is not None:
        n = int(token)
        appointments = []
        for _ in range(n):
            start = _minutes(scanner.token())
            end = _minutes(scanner.token())
            scanner.line()
            appointments.append((start, end))
        start, length = longest_nap(appointments)
        day += 1
        hours = f"{length // 60} hours and " if length >= 60 else ""
        out.append(
            f"Day #{day}: the longest nap starts at {start // 60}:{start % 60:02d}"
            f" and will last for {hours}{length % 60} minutes."
        )
    return out


def _solve_145(text: str) -> list[str]:
    tokens = iter(text.split())
    out = []
    for kind in tokens:
        if kind == "#":
            break
        number = next(tokens)
        h1, m1, h2, m2 = (int(next(tokens)) for _ in range(4))
        day, evening, night, total = call_charge(kind, h1 * 60 + m1, h2 * 60 + m2)
        out.append(
            f"{number:>10}{day:6d}{evening:6d}{night:6d}{kind:>3}{total:8.2f}"
        )
    return out


def _solve_10409(text: str) -> list[str]:
    tokens = iter(text.split())
    out = []
    for token in tokens:
        k = int(token)
        if k == 0:
            break
        commands = [next(tokens) for _ in range(k)]
        out.append(str(roll_die(commands)))
    return out


def _solve_10415(text: str) -> list[str]:
    scanner = _Scanner(text)
    count = int(scanner.token() or 0)
    scanner.line()
    out = []
    for _ in range(count):
        line = scanner.line() or ""
        out.append(" ".join(map(str, finger_presses(line))))
    return out


def problems() -> dict[str, Callable[[str], list[str]]]:
    """Map each problem number to the function that answers its input."""
    return {
        "10191": _solve_10191,
        "10409": _solve_10409,
        "10415": _solve_10415,
        "145": _solve_145,
    }


def solve(problem: str, text: str) -> str:
    """Answer the input text of the named problem."""
    solver = problems().get(str(problem))
    if solver is None:
        raise ValueError(f"unknown problem {problem!r}")
    return "".join(line + "\n" for line in solver(text))