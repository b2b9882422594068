"""Problems about lists of numbers: orderings, medians, sets and sums."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Callable, Iterable, Iterator, Sequence
from itertools import combinations, combinations_with_replacement, pairwise

_FIRST_FIELD = re.compile(r"\s*(\S+)")
_SPACE = re.compile(r"\s*")
_COST_COUNT = 36


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding towards zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _trunc_mod(a: int, m: int) -> int:
    """Remainder whose sign follows the dividend."""
    r = abs(a) % abs(m)
    return r if a >= 0 else -r


def is_jolly(values: Iterable[int]) -> bool:
    """Tell whether the gaps between neighbours cover every value 1 .. n-1."""
    values = list(values)
    gaps = {abs(b - a) for a, b in pairwise(values)}
    return all(d in gaps for d in range(1, len(values)))


def minimal_distance_sum(positions: Iterable[int]) -> int:
    """Smallest total distance from one house to all the given ones."""
    ordered = sorted(positions)
    if not ordered:
        raise ValueError("minimal_distance_sum needs at least one position")
    median = ordered[len(ordered) // 2]
    return sum(abs(p - median) for p in ordered)


def median_info(values: Iterable[int]) -> tuple[int, int, int]:
    """The lower median, how many values equal a median, and how many medians exist."""
    ordered = sorted(values)
    if not ordered:
        raise ValueError("median_info needs at least one value")
    n = len(ordered)
    low, high = ordered[(n - 1) // 2], ordered[n // 2]
    count = sum(1 for v in ordered if v in (low, high))
    return low, count, high - low + 1


def is_b2_sequence(values: Iterable[int]) -> bool:
    """Tell whether a positive, strictly increasing sequence has distinct pair sums."""
    values = list(values)
    if any(v < 1 for v in values):
        return False
    if any(b <= a for a, b in pairwise(values)):
        return False
    seen: set[int] = set()
    for a, b in combinations_with_replacement(values, 2):
        total = a + b
        if total in seen:
            return False
        seen.add(total)
    return True


def sort_mod(numbers: Iterable[int], m: int) -> list[int]:
    """Order by remainder, then odd before even, odd descending, even ascending.

    The remainder keeps the sign of the number, so negative numbers come first.
    """
    if m == 0:
        raise ValueError("sort_mod needs a non-zero modulus")

    def key(a: int) -> tuple[int, int, int]:
        odd = a % 2 != 0
        return _trunc_mod(a, m), 0 if odd else 1, -a if odd else a

    return sorted(numbers, key=key)


def is_symmetric_matrix(values: Sequence[int]) -> bool:
    """Tell whether a flattened matrix has no negatives and is centrally symmetric."""
    values = list(values)
    return all(v >= 0 for v in values) and values == values[::-1]


def swap_count(values: Iterable[int]) -> int:
    """Number of adjacent swaps needed to sort, that is the inversions."""
    return sum(1 for a, b in combinations(list(values), 2) if a > b)


def permute(indices: Sequence[int], values: Sequence[str]) -> list[str]:
    """Place each value at the position its index names."""
    if len(values) < len(indices):
        raise ValueError("fewer values than indices")
    return [value for _, value in sorted(zip(indices, values))]


def compare_sets(a: Iterable[int], b: Iterable[int]) -> str:
    """Describe how the two collections relate as sets."""
    ca, cb = Counter(a), Counter(b)
    a_in_b = not (ca - cb)
    b_in_a = not (cb - ca)
    if a_in_b and b_in_a:
        return "A equals B"
    if a_in_b:
        return "A is a proper subset of B"
    if b_in_a:
        return "B is a proper subset of A"
    if not (ca & cb):
        return "A and B are disjoint"
    return "I'm confused!"


def minimum_moves(heights: Iterable[int]) -> int:
    """Bricks to move so that every stack has the average height."""
    heights = list(heights)
    if not heights:
        raise ValueError("minimum_moves needs at least one stack")
    average = _trunc_div(sum(heights), len(heights))
    return sum(h - average for h in heights if h > average)


def derivative_at(x: int, coefficients: Sequence[int]) -> int:
    """Value at x of the derivative of the polynomial, highest power first."""
    coefficients = list(coefficients)
    degree = len(coefficients) - 1
    result = 0
    for i, a in enumerate(coefficients[:-1]):
        result = result * x + a * (degree - i)
    return result


def division_sequence(n: int, m: int) -> list[int] | None:
    """Repeated division of n by m down to 1, or None when it is boring."""
    if n < 2 or m < 2:
        return None
    sequence = [n]
    while n > 1:
        if n % m:
            return None
        n //= m
        sequence.append(n)
    return sequence


def cheapest_bases(number: int, costs: Sequence[int]) -> list[int]:
    """Bases 2..36 in which printing the number costs least."""
    costs = list(costs)
    if len(costs) != _COST_COUNT:
        raise ValueError(f"cheapest_bases needs {_COST_COUNT} digit costs")
    if number < 0:
        raise ValueError("cheapest_bases needs a non-negative number")

    def cost(base: int) -> int:
        if number == 0:
            return costs[0]
        total, n = 0, number
        while n:
            n, digit = divmod(n, base)
            total += costs[digit]
        return total

    prices = {base: cost(base) for base in range(2, 37)}
    lowest = min(prices.values())
    return [base for base, price in prices.items() if price == lowest]


def _ints(text: str) -> Iterator[int]:
    return (int(field) for field in text.split())


def _take(numbers: Iterator[int], count: int) -> list[int]:
    return [next(numbers) for _ in range(count)]


def _text_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def _solve_10038(text: str) -> list[str]:
    numbers = _ints(text)
    lines = []
    for n in numbers:
        values = _take(numbers, max(n, 1))
        lines.append("Jolly" if is_jolly(values) else "Not jolly")
    return lines


def _solve_10041(text: str) -> list[str]:
    numbers = _ints(text)
    count = next(numbers, 0)
    lines = []
    for _ in range(count):
        r = next(numbers)
        lines.append(str(minimal_distance_sum(_take(numbers, r))))
    return lines


def _solve_10057(text: str) -> list[str]:
    numbers = _ints(text)
    lines = []
    for n in numbers:
        low, count, span = median_info(_take(numbers, n))
        lines.append(f"{low} {count} {span}")
    return lines


def _solve_11063(text: str) -> list[str]:
    numbers = _ints(text)
    lines = []
    for case, n in enumerate(numbers, 1):
        verdict = "" if is_b2_sequence(_take(numbers, n)) else "not "
        lines.extend([f"Case #{case}: It is {verdict}a B2-Sequence.", ""])
    return lines


def _solve_11321(text: str) -> list[str]:
    numbers = _ints(text)
    lines = []
    for n, m in zip(numbers, numbers):
        lines.append(f"{n} {m}")
        if n == 0 and m == 0:
            break
        lines.extend(str(v) for v in sort_mod(_take(numbers, n), m))
    return lines


def _solve_11349(text: str) -> list[str]:
    fields = iter(text.replace("=", " = ").split())
    count = int(next(fields, "0"))
    lines = []
    for case in range(1, count + 1):
        next(fields)
        next(fields)
        n = int(next(fields))
        values = [int(next(fields)) for _ in range(n * n)]
        verdict = "Symmetric." if is_symmetric_matrix(values) else "Non-symmetric."
        lines.append(f"Test #{case}: {verdict}")
    return lines


def _solve_299(text: str) -> list[str]:
    numbers = _ints(text)
    count = next(numbers, 0)
    lines = []
    for _ in range(count):
        n = next(numbers)
        swaps = swap_count(_take(numbers, n))
        lines.append(f"Optimal train swapping takes {swaps} swaps.")
    return lines


def _solve_482(text: str) -> list[str]:
    lines = iter(text.split("\n"))
    header = next((line for line in lines if line.strip()), "0")
    cases = int(header.split()[0])
    out: list[str] = []
    for case in range(cases):
        index_line = next((line for line in lines if line.strip()), "")
        value_line = next(lines, "")
        indices = [int(field) for field in index_line.split()]
        out.extend(permute(indices, value_line.split()))
        if case < cases - 1:
            out.append("")
    return out


def _solve_496(text: str) -> list[str]:
    lines = iter(_text_lines(text))
    return [
        compare_sets(map(int, first.split()), map(int, second.split()))
        for first, second in zip(lines, lines)
    ]


def _solve_591(text: str) -> list[str]:
    numbers = _ints(text)
    lines = []
    for case, n in enumerate(numbers, 1):
        if n == 0:
            break
        moves = minimum_moves(_take(numbers, n))
        lines.extend(
            [f"Set #{case}", f"The minimum number of moves is {moves}.", ""]
        )
    return lines


def _solve_10268(text: str) -> list[str]:
    lines = []
    pos = 0
    while (match := _FIRST_FIELD.match(text, pos)) is not None:
        x = int(match.group(1))
        pos = _SPACE.match(text, match.end()).end()
        end = text.find("\n", pos)
        if end < 0:
            end = len(text)
        coefficients = [int(field) for field in text[pos:end].split()]
        pos = end + 1
        lines.append(str(derivative_at(x, coefficients)))
    return lines


def _solve_10190(text: str) -> list[str]:
    numbers = _ints(text)
    lines = []
    for n, m in zip(numbers, numbers):
        sequence = division_sequence(n, m)
        lines.append("Boring!" if sequence is None else " ".join(map(str, sequence)))
    return lines


def _solve_11005(text: str) -> list[str]:
    numbers = _ints(text)
    count = next(numbers, 0)
    lines = []
    for case in range(1, count + 1):
        costs = _take(numbers, _COST_COUNT)
        queries = next(numbers)
        if case > 1:
            lines.append("")
        lines.append(f"Case {case}:")
        for _ in range(queries):
            number = next(numbers)
            bases = " ".join(str(b) for b in cheapest_bases(number, costs))
            lines.append(f"Cheapest base(s) for number {number}: {bases}")
    return lines


def problems() -> dict[str, Callable[[str], list[str]]]:
    """Map each problem number to the function that answers its input."""
    return {
        "10038": _solve_10038,
        "10041": _solve_10041,
        "10057": _solve_10057,
        "10190": _solve_10190,
        "10268": _solve_10268,
        "11005": _solve_11005,
        "11063": _solve_11063,
        "11321": _solve_11321,
        "11349": _solve_11349,
        "299": _solve_299,
        "482": _solve_482,
        "496": _solve_496,
        "591": _solve_591,
    }


def solve(problem: str, text: str) -> str:
    """Answer the input text of the named problem."""
    solver = problems().get(str(problem))
    if solver is None:
        raise ValueError(f"unknown problem {problem!r}")
    return "".join(line + "\n" for line in solver(text))