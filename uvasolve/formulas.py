"""Problems answered by a closed formula or a short counting rule."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from math import isqrt

_JOSEPH_TABLE = (
    2, 7, 5, 30, 169, 441, 1872, 7632, 1740, 93313, 459901, 1358657, 2504881,
)
_MONTH_DAYS_2011 = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_WEEK = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding towards zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def abs_difference(a: int, b: int) -> int:
    """The distance between two numbers."""
    return abs(a - b)


def displacement(v: int, t: int) -> int:
    """Distance covered in twice the time at the given velocity."""
    return 2 * v * t


def pizza_pieces(n: int) -> int:
    """Largest number of pieces a pizza can be cut into with n straight cuts."""
    if n < 0:
        raise ValueError("pizza_pieces needs a non-negative number of cuts")
    return n * (n + 1) // 2 + 1


def hotel_group(s: int, d: int) -> int:
    """Size of the group staying in the hotel on day d.

    The first group has s members and stays s days; each following group
    is one member larger and stays one day longer.
    """

    def total(k: int) -> int:
        return k * s + k * (k - 1) // 2

    if d <= 0:
        return s - 1
    b = 2 * s - 1
    k = max(0, (isqrt(b * b + 8 * d) - b) // 2)
    while total(k) < d:
        k += 1
    while k > 0 and total(k - 1) >= d:
        k -= 1
    return s + k - 1


def scores(s: int, d: int) -> tuple[int, int] | None:
    """Two scores with the given sum and absolute difference, larger first.

    Returns None when no such pair of non-negative integers exists.
    """
    if s < d or (s + d) % 2 != 0:
        return None
    return (s + d) // 2, (s - d) // 2


def cola_bottles(n: int) -> int:
    """Bottles drunk from n bought, trading three empties for a full one."""
    if n < 0:
        raise ValueError("cola_bottles needs a non-negative number")
    return n + n // 2


def _diagonal_position(x: int, y: int) -> int:
    layer = x + y
    return layer * (layer + 1) // 2 + x


def steps_between(x1: int, y1: int, x2: int, y2: int) -> int:
    """Steps along the diagonal walk from (x1, y1) to (x2, y2)."""
    return _diagonal_position(x2, y2) - _diagonal_position(x1, y1)


def odd_sum(a: int, b: int) -> int:
    """Sum of the odd numbers between a and b inclusive."""
    start = a if a % 2 else a + 1
    return sum(range(start, b + 1, 2))


def last_three_sum(n: int) -> int:
    """Sum of the last three numbers in the row of n odd numbers."""
    k = _trunc_div(n + 1, 2)
    return 6 * k * k - 9


def cantor_term(n: int) -> tuple[int, int]:
    """The n-th fraction of Cantor's zig-zag enumeration as (numerator, denominator)."""
    if n < 1:
        raise ValueError("cantor_term needs a positive index")
    k = (isqrt(8 * n + 1) - 1) // 2
    if k * (k + 1) // 2 < n:
        k += 1
    pos = n - (k - 1) * k // 2
    if k % 2 == 1:
        return k - pos + 1, pos
    return pos, k - pos + 1


def turtle_ages(s: int, p: int, y: int, j: int) -> tuple[int, int, int]:
    """Ages of Spot, Puff and Yertle from the age gaps and Jane's age."""
    total = 12 + j
    yertle = _trunc_div(total - p - y, 3)
    puff = yertle + p
    spot = yertle + y
    rem = total - yertle - puff - spot
    if rem == 1:
        if y == s + p:
            spot += 1
        else:
            puff += 1
    elif rem == 2:
        spot += 1
        puff += 1
    return spot, puff, yertle


def executes_bad_first(k: int, m: int) -> bool:
    """Tell whether counting by m removes the k bad people before any good one."""
    pos = 0
    length = 2 * k
    for _ in range(k):
        pos = (pos + m - 1) % length
        if pos < k:
            return False
        length -= 1
    return True


def joseph_min_m(k: int) -> int:
    """Smallest m for which the k bad people are executed first."""
    if k < 1:
        raise ValueError("joseph_min_m needs a positive k")
    if k <= len(_JOSEPH_TABLE):
        return _JOSEPH_TABLE[k - 1]
    m = k + 1
    while not executes_bad_first(k, m):
        m += 1
    return m


def hartal_days(days: int, parameters: Iterable[int]) -> int:
    """Working days lost to hartals, skipping Fridays and Saturdays."""
    params = list(parameters)
    if any(h < 1 for h in params):
        raise ValueError("hartal parameters must be positive")
    lost = {day for h in params for day in range(h, days + 1, h)}
    return sum(1 for day in lost if day % 7 not in (6, 0))


def weekday_2011(month: int, day: int) -> str:
    """Name of the weekday of a date in 2011."""
    if not 1 <= month <= 12:
        raise ValueError(f"no such month: {month}")
    total = sum(_MONTH_DAYS_2011[: month - 1]) + day
    return _WEEK[(total + 4) % 7]


def win_probability(n: int, p: float, k: int) -> float:
    """Chance that player k of n wins when each throw succeeds with chance p."""
    if p == 0:
        return 0.0
    first = (1.0 - p) ** (k - 1) * p
    ratio = (1.0 - p) ** n
    return first / (1.0 - ratio)


def _ints(text: str) -> Iterator[int]:
    return (int(token) for token in text.split())


def _counted_groups(text: str, size: int) -> Iterator[tuple[int, ...]]:
    numbers = _ints(text)
    count = next(numbers, 0)
    for _ in range(count):
        yield tuple(next(numbers) for _ in range(size))


def _solve_10055(text: str) -> list[str]:
    numbers = _ints(text)
    return [str(abs_difference(a, b)) for a, b in zip(numbers, numbers)]


def _solve_10071(text: str) -> list[str]:
    numbers = _ints(text)
    return [str(displacement(v, t)) for v, t in zip(numbers, numbers)]


def _solve_10079(text: str) -> list[str]:
    lines = []
    for n in _ints(text):
        if n < 0:
            break
        lines.append(str(pizza_pieces(n)))
    return lines


def _solve_10170(text: str) -> list[str]:
    numbers = _ints(text)
    return [str(hotel_group(s, d)) for s, d in zip(numbers, numbers)]


def _solve_10812(text: str) -> list[str]:
    lines = []
    for s, d in _counted_groups(text, 2):
        result = scores(s, d)
        lines.append("impossible" if result is None else f"{result[0]} {result[1]}")
    return lines


def _solve_11150(text: str) -> list[str]:
    return [str(cola_bottles(n)) for n in _ints(text)]


def _solve_10642(text: str) -> list[str]:
    return [
        f"Case {case}: {steps_between(*points)}"
        for case, points in enumerate(_counted_groups(text, 4), 1)
    ]


def _solve_10783(text: str) -> list[str]:
    return [
        f"Case {case}: {odd_sum(a, b)}"
        for case, (a, b) in enumerate(_counted_groups(text, 2), 1)
    ]


def _solve_913(text: str) -> list[str]:
    return [str(last_three_sum(n)) for n in _ints(text)]


def _solve_264(text: str) -> list[str]:
    lines = []
    for n in _ints(text):
        num, den = cantor_term(n)
        lines.append(f"TERM {n} IS {num}/{den}")
    return lines


def _solve_10257(text: str) -> list[str]:
    numbers = _ints(text)
    return [
        " ".join(map(str, turtle_ages(s, p, y, j)))
        for s, p, y, j in zip(numbers, numbers, numbers, numbers)
    ]


def _solve_305(text: str) -> list[str]:
    lines = []
    for k in _ints(text):
        if k == 0:
            break
        lines.append(str(joseph_min_m(k)))
    return lines


def _solve_10050(text: str) -> list[str]:
    numbers = _ints(text)
    count = next(numbers, 0)
    lines = []
    for _ in range(count):
        days = next(numbers)
        parties = next(numbers)
        params = [next(numbers) for _ in range(parties)]
        lines.append(str(hartal_days(days, params)))
    return lines


def _solve_12019(text: str) -> list[str]:
    return [weekday_2011(m, d) for m, d in _counted_groups(text, 2)]


def _solve_10056(text: str) -> list[str]:
    tokens = iter(text.split())
    count = int(next(tokens, "0"))
    lines = []
    for _ in range(count):
        n = int(next(tokens))
        p = float(next(tokens))
        k = int(next(tokens))
        lines.append(f"{win_probability(n, p, k):.4f}")
    return lines


def problems() -> dict[str, Callable[[str], list[str]]]:
    """Map each problem number to the function that answers its input."""
    return {
        "10050": _solve_10050,
        "10055": _solve_10055,
        "10056": _solve_10056,
        "10071": _solve_10071,
        "10079": _solve_10079,
        "10170": _solve_10170,
        "10257": _solve_10257,
        "10642": _solve_10642,
        "10783": _solve_10783,
        "10812": _solve_10812,
        "11150": _solve_11150,
        "12019": _solve_12019,
        "264": _solve_264,
        "305": _solve_305,
        "913": _solve_913,
    }


def solve(problem: str, text: str) -> str:
    """Answer the input text of the named problem."""
    solver = problems().get(str(problem))
    if solver is None:
        raise ValueError(f"unknown problem {problem!r}")
    return "".join(line + "\n" for line in solver(text))