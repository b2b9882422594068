"""Problems about the decimal, binary and positional digits of numbers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterator

_BANGLA_UNITS = (
    (10_000_000, "kuti"),
    (100_000, "lakh"),
    (1_000, "hajar"),
    (100, "shata"),
)


def reverse_and_add(n: int) -> tuple[int, int]:
    """Add a number to its reversal until it is a palindrome.

    Returns the number of additions and the palindrome reached.
    """
    if n < 0:
        raise ValueError("reverse_and_add needs a non-negative number")
    count = 0
    while True:
        rev = int(str(n)[::-1])
        if rev == n:
            return count, n
        n += rev
        count += 1


def bit_counts(n: int) -> tuple[int, int]:
    """Return the ones in n read as binary, and read as hexadecimal digits."""
    if n < 0:
        raise ValueError("bit_counts needs a non-negative number")
    as_binary = bin(n).count("1")
    as_decimal = sum(bin(int(d)).count("1") for d in str(n))
    return as_binary, as_decimal


def carry_operations(a: int, b: int) -> int:
    """Count the carries made when adding a and b column by column."""
    if a < 0 or b < 0:
        raise ValueError("carry_operations needs non-negative numbers")
    carry = count = 0
    while a or b:
        carry = 1 if a % 10 + b % 10 + carry > 9 else 0
        count += carry
        a //= 10
        b //= 10
    return count


def _digit_value(c: str) -> int | None:
    if "0" <= c <= "9":
        return ord(c) - ord("0")
    if "A" <= c <= "Z":
        return ord(c) - ord("A") + 10
    if "a" <= c <= "z":
        return ord(c) - ord("a") + 36
    return None


def smallest_base(digits: str) -> int | None:
    """Smallest base up to 62 in which the number is divisible by base - 1.

    Returns None when no such base exists.
    """
    values = [v for v in map(_digit_value, digits) if v is not None]
    total = sum(values)
    lowest = max(values, default=1)
    lowest = max(lowest, 1)
    return next(
        (base for base in range(lowest + 1, 63) if total % (base - 1) == 0),
        None,
    )


def _require_digits(number: str) -> None:
    if not number or not number.isdigit():
        raise ValueError(f"not a decimal number: {number!r}")


def nine_degree(number: str) -> int | None:
    """Return the 9-degree of a decimal number, or None if not a multiple of 9."""
    _require_digits(number)
    n = sum(int(c) for c in number)
    if n % 9:
        return None
    degree = 1
    while n > 9:
        n = sum(int(c) for c in str(n))
        degree += 1
    return degree


def is_multiple_of_11(number: str) -> bool:
    """Tell whether an arbitrarily long decimal number is divisible by 11."""
    _require_digits(number)
    rem = 0
    for c in number:
        rem = (rem * 10 + int(c)) % 11
    return rem == 0


def parity(n: int) -> tuple[str, int]:
    """Return the binary form of n and the number of ones in it."""
    if n < 1:
        raise ValueError("parity needs a positive number")
    binary = bin(n)[2:]
    return binary, binary.count("1")


def digital_root(n: int) -> int:
    """Repeatedly sum the digits of n until one digit remains."""
    while n >= 10:
        n = sum(int(c) for c in str(n))
    return n


def digit_counts(n: int) -> list[int]:
    """How often each digit 0..9 is written when counting from 1 to n."""
    counts = Counter(c for i in range(1, n + 1) for c in str(i))
    return [counts[str(d)] for d in range(10)]


def _bangla_tokens(n: int) -> list[str]:
    tokens: list[str] = []
    for unit, word in _BANGLA_UNITS:
        if n >= unit:
            tokens.extend(_bangla_tokens(n // unit))
            tokens.append(word)
            n %= unit
    if n:
        tokens.append(str(n))
    return tokens


def bangla(n: int) -> str:
    """Spell a number with the kuti, lakh, hajar and shata units."""
    if n < 0:
        raise ValueError("bangla needs a non-negative number")
    if n == 0:
        return "0"
    return " ".join(_bangla_tokens(n))


def quirksome_squares(digits: int) -> list[str]:
    """All numbers of the given width whose halves sum to its square root."""
    limit = 10 ** (digits // 2)
    result = []
    for i in range(limit):
        square = i * i
        if square // limit + square % limit == i:
            result.append(f"{square:0{digits}d}")
    return result


def _ints(text: str) -> Iterator[int]:
    return (int(token) for token in text.split())


def _counted(text: str) -> Iterator[int]:
    numbers = _ints(text)
    count = next(numbers, 0)
    for _ in range(count):
        yield next(numbers)


def _until_zero(text: str) -> Iterator[str]:
    for token in text.split():
        if token == "0":
            return
        yield token


def _solve_10018(text: str) -> list[str]:
    return [" ".join(map(str, reverse_and_add(n))) for n in _counted(text)]


def _solve_10019(text: str) -> list[str]:
    return [" ".join(map(str, bit_counts(n))) for n in _counted(text)]


def _solve_10035(text: str) -> list[str]:
    lines = []
    numbers = _ints(text)
    for a, b in zip(numbers, numbers):
        if a == 0 and b == 0:
            break
        count = carry_operations(a, b)
        if count == 0:
            lines.append("No carry operation.")
        elif count == 1:
            lines.append("1 carry operation.")
        else:
            lines.append(f"{count} carry operations.")
    return lines


def _solve_10093(text: str) -> list[str]:
    lines = []
    for token in text.split():
        base = smallest_base(token)
        lines.append(str(base) if base else "such number is impossible!")
    return lines


def _solve_10922(text: str) -> list[str]:
    lines = []
    for s in _until_zero(text):
        degree = nine_degree(s)
        if degree is None:
            lines.append(f"{s} is not a multiple of 9.")
        else:
            lines.append(f"{s} is a multiple of 9 and has 9-degree {degree}.")
    return lines


def _solve_10929(text: str) -> list[str]:
    return [
        f"{s} is {'' if is_multiple_of_11(s) else 'not '}a multiple of 11."
        for s in _until_zero(text)
    ]


def _solve_10931(text: str) -> list[str]:
    lines = []
    for s in _until_zero(text):
        binary, count = parity(int(s))
        lines.append(f"The parity of {binary} is {count} (mod 2).")
    return lines


def _solve_11332(text: str) -> list[str]:
    return [str(digital_root(int(s))) for s in _until_zero(text)]


def _solve_1225(text: str) -> list[str]:
    return [" ".join(map(str, digit_counts(n))) for n in _counted(text)]


def _solve_10101(text: str) -> list[str]:
    return [f"{case:4d}. {bangla(n)}" for case, n in enumerate(_ints(text), 1)]


def _solve_256(text: str) -> list[str]:
    return [square for n in _ints(text) for square in quirksome_squares(n)]


def problems() -> dict[str, Callable[[str], list[str]]]:
    """Map each problem number to the function that answers its input."""
    return {
        "10018": _solve_10018,
        "10019": _solve_10019,
        "10035": _solve_10035,
        "10093": _solve_10093,
        "10101": _solve_10101,
        "10922": _solve_10922,
        "10929": _solve_10929,
        "10931": _solve_10931,
        "11332": _solve_11332,
        "1225": _solve_1225,
        "256": _solve_256,
    }


def solve(problem: str, text: str) -> str:
    """Answer the input text of the named problem."""
    solver = problems().get(str(problem))
    if solver is None:
        raise ValueError(f"unknown problem {problem!r}")
    return "".join(line + "\n" for line in solver(text))