"""Problems about primes, divisors and integer sequences."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from functools import lru_cache
from math import gcd, isqrt

_SIEVE_LIMIT = 1_000_005


def cycle_length(n: int) -> int:
    """Length of the 3n+1 sequence starting at n, counting both ends."""
    if n < 1:
        raise ValueError("cycle_length needs a positive number")
    count = 1
    while n != 1:
        n = 3 * n + 1 if n % 2 else n // 2
        count += 1
    return count


def max_cycle_length(i: int, j: int) -> int:
    """Largest cycle length for any number between i and j inclusive."""
    return max(
        (cycle_length(n) for n in range(min(i, j), max(i, j) + 1)),
        default=0,
    )


def love_pair(first: str, second: str) -> bool:
    """Tell whether two binary strings share a common divisor greater than 1."""
    return gcd(int(first, 2), int(second, 2)) > 1


def fibonacci_mod(n: int, m: int) -> int:
    """The n-th Fibonacci number modulo 2**m, by fast doubling."""
    if n < 0:
        raise ValueError("fibonacci_mod needs a non-negative index")
    if n == 0:
        return 0
    mod = 1 << m

    def doubling(k: int) -> tuple[int, int]:
        if k == 0:
            return 0, 1
        fk, fk1 = doubling(k >> 1)
        f2k = fk * ((2 * fk1 - fk) % mod) % mod
        f2k1 = (fk * fk + fk1 * fk1) % mod
        if k & 1:
            return f2k1, (f2k + f2k1) % mod
        return f2k, f2k1

    return doubling(n)[0]


def _matrix_product(a, b, mod):
    return tuple(
        tuple(sum(a[i][k] * b[k][j] for k in range(2)) % mod for j in range(2))
        for i in range(2)
    )


def fibonacci_mod_matrix(n: int, m: int) -> int:
    """The n-th Fibonacci number modulo 2**m, by matrix powers."""
    if n < 0:
        raise ValueError("fibonacci_mod_matrix needs a non-negative index")
    if n == 0:
        return 0
    mod = 1 << m
    result = ((1, 0), (0, 1))
    base = ((1, 1), (1, 0))
    power = n - 1
    while power > 0:
        if power & 1:
            result = _matrix_product(result, base, mod)
        base = _matrix_product(base, base, mod)
        power >>= 1
    return result[0][0] % mod


def prime_sieve(limit: int) -> list[bool]:
    """Primality of every number below limit, by the sieve of Eratosthenes."""
    sieve = [True] * limit
    for small in (0, 1):
        if small < limit:
            sieve[small] = False
    for i in range(2, isqrt(max(limit - 1, 0)) + 1):
        if sieve[i]:
            sieve[i * i::i] = [False] * len(range(i * i, limit, i))
    return sieve


@lru_cache(maxsize=1)
def _shared_sieve() -> list[bool]:
    return prime_sieve(_SIEVE_LIMIT)


def _is_prime(n: int) -> bool:
    if 0 <= n < _SIEVE_LIMIT:
        return _shared_sieve()[n]
    if n < 2:
        return False
    return all(n % d for d in range(2, isqrt(n) + 1))


def classify_emirp(n: int) -> str:
    """Return "not prime", "prime" or "emirp" for n."""
    if n < 0:
        raise ValueError("classify_emirp needs a non-negative number")
    if not _is_prime(n):
        return "not prime"
    rev = int(str(n)[::-1])
    if rev != n and _is_prime(rev):
        return "emirp"
    return "prime"


def gcd_sum(n: int) -> int:
    """Sum of gcd(i, j) over all pairs 1 <= i < j <= n."""
    return sum(gcd(i, j) for i in range(1, n) for j in range(i + 1, n + 1))


def count_squares(a: int, b: int) -> int:
    """How many perfect squares lie between a and b inclusive."""
    if a < 1:
        raise ValueError("count_squares needs a lower bound of at least 1")
    if b < 0:
        return -isqrt(a - 1)
    return isqrt(b) - isqrt(a - 1)


def ugly_number(index: int) -> int:
    """The index-th number (from 1) whose only prime factors are 2, 3 and 5."""
    if index < 1:
        raise ValueError("ugly_number needs a positive index")
    ugly = [1]
    p2 = p3 = p5 = 0
    while len(ugly) < index:
        nxt = min(ugly[p2] * 2, ugly[p3] * 3, ugly[p5] * 5)
        ugly.append(nxt)
        if nxt == ugly[p2] * 2:
            p2 += 1
        if nxt == ugly[p3] * 3:
            p3 += 1
        if nxt == ugly[p5] * 5:
            p5 += 1
    return ugly[index - 1]


def classify_perfection(n: int) -> str:
    """Return "PERFECT", "DEFICIENT" or "ABUNDANT" for a positive number."""
    if n < 1:
        raise ValueError("classify_perfection needs a positive number")
    total = 0
    for d in range(1, isqrt(n) + 1):
        if n % d == 0:
            total += d
            other = n // d
            if other != d:
                total += other
    total -= n
    if total == n:
        return "PERFECT"
    return "DEFICIENT" if total < n else "ABUNDANT"


def _fibonacci_weights(count_or_limit: int, *, by_value: bool) -> list[int]:
    fibs = [1, 2]
    if by_value:
        while fibs[-1] <= count_or_limit:
            fibs.append(fibs[-1] + fibs[-2])
    else:
        while len(fibs) < count_or_limit:
            fibs.append(fibs[-1] + fibs[-2])
    return fibs


def fibinary(n: int) -> str:
    """Zeckendorf representation of n in the 1, 2, 3, 5, ... base.

    Zero gives an empty string.
    """
    if n < 0:
        raise ValueError("fibinary needs a non-negative number")
    out = []
    for weight in reversed(_fibonacci_weights(n, by_value=True)):
        if weight <= n:
            out.append("1")
            n -= weight
        elif out:
            out.append("0")
    return "".join(out)


def _fibinary_value(s: str) -> int:
    if not s or not s.isdigit():
        raise ValueError(f"not a fibinary number: {s!r}")
    weights = _fibonacci_weights(len(s), by_value=False)
    return sum(int(d) * w for d, w in zip(reversed(s), weights))


def fibinary_sum(a: str, b: str) -> str:
    """Add two fibinary numbers and give the sum in normal form."""
    return fibinary(_fibinary_value(a) + _fibinary_value(b)) or "0"


def _ints(text: str) -> Iterator[int]:
    return (int(token) for token in text.split())


def _solve_100(text: str) -> list[str]:
    numbers = _ints(text)
    return [f"{i} {j} {max_cycle_length(i, j)}" for i, j in zip(numbers, numbers)]


def _solve_10193(text: str) -> list[str]:
    tokens = iter(text.split())
    count = int(next(tokens, "0"))
    lines = []
    for case in range(1, count + 1):
        first, second = next(tokens), next(tokens)
        verdict = (
            "All you need is love!"
            if love_pair(first, second)
            else "Love is not all you need!"
        )
        lines.append(f"Pair #{case}: {verdict}")
    return lines


def _solve_10229(text: str) -> list[str]:
    numbers = _ints(text)
    return [str(fibonacci_mod(n, m)) for n, m in zip(numbers, numbers)]


def _solve_10235(text: str) -> list[str]:
    return [f"{n} is {classify_emirp(n)}." for n in _ints(text)]


def _solve_11417(text: str) -> list[str]:
    lines = []
    for n in _ints(text):
        if n == 0:
            break
        lines.append(str(gcd_sum(n)))
    return lines


def _solve_11461(text: str) -> list[str]:
    lines = []
    numbers = _ints(text)
    for a, b in zip(numbers, numbers):
        if a == 0 and b == 0:
            break
        lines.append(str(count_squares(a, b)))
    return lines


def _solve_136(text: str) -> list[str]:
    return [f"The 1500'th ugly number is {ugly_number(1500)}."]


def _solve_382(text: str) -> list[str]:
    lines = ["PERFECTION OUTPUT"]
    for n in _ints(text):
        if n == 0:
            break
        lines.append(f"{n:5d}  {classify_perfection(n)}")
    lines.append("END OF OUTPUT")
    return lines


def _solve_948(text: str) -> list[str]:
    numbers = _ints(text)
    count = next(numbers, 0)
    lines = []
    for _ in range(count):
        x = next(numbers)
        lines.append(f"{x} = {fibinary(x)} (fib)")
    return lines


def _solve_763(text: str) -> list[str]:
    tokens = iter(text.split())
    lines = []
    for a, b in zip(tokens, tokens):
        if lines:
            lines.append("")
        lines.append(fibinary_sum(a, b))
    return lines


def problems() -> dict[str, Callable[[str], list[str]]]:
    """Map each problem number to the function that answers its input."""
    return {
        "100": _solve_100,
        "10193": _solve_10193,
        "10229": _solve_10229,
        "10235": _solve_10235,
        "11417": _solve_11417,
        "11461": _solve_11461,
        "136": _solve_136,
        "382": _solve_382,
        "763": _solve_763,
        "948": _solve_948,
    }


def solve(problem: str, text: str) -> str:
    """Answer the input text of the named problem."""
    solver = problems().get(str(problem))
    if solver is None:
        raise ValueError(f"unknown problem {problem!r}")
    return "".join(line + "\n" for line in solver(text))