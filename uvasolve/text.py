"""Problems about letters, characters and lines of text."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Callable, Iterable, Iterator
from itertools import islice, takewhile
from string import ascii_lowercase

_KEYBOARD = "`1234567890-=QWERTYUIOP[]\\ASDFGHJKL;'ZXCVBNM,./"
_MIRROR = {
    c: m
    for c, m in zip(
        "ABCDEFGHIJKLMNOPQRSTUVWXYZ123456789",
        "A   3  HIL JM O   2TUVWXY51SE Z  8 ",
    )
    if m != " "
}
_PALINDROME_KINDS = (
    "not a palindrome",
    "a regular palindrome",
    "a mirrored string",
    "a mirrored palindrome",
)
_END_OF_TEXT = "endoftext"
_NO_WORD = "There is no such word."
_WORD = re.compile(r"[A-Za-z]+")


class _Scanner:
    """Reads a text by whitespace-separated tokens, whole lines or single characters."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def token(self) -> str | None:
        text, size = self._text, len(self._text)
        pos = self._pos
        while pos < size and text[pos].isspace():
            pos += 1
        end = pos
        while end < size and not text[end].isspace():
            end += 1
        self._pos = end
        return text[pos:end] if end > pos else None

    def line(self) -> str | None:
        if self._pos >= len(self._text):
            return None
        end = self._text.find("\n", self._pos)
        if end < 0:
            end = len(self._text)
        line = self._text[self._pos:end]
        self._pos = end + 1
        return line

    def char(self) -> str | None:
        if self._pos >= len(self._text):
            return None
        c = self._text[self._pos]
        self._pos += 1
        return c

    def lines(self) -> Iterator[str]:
        while (line := self.line()) is not None:
            yield line


def _is_letter(c: str) -> bool:
    return c.isascii() and c.isalpha()


def letter_frequencies(lines: Iterable[str]) -> list[tuple[str, int]]:
    """Upper-case letters with their counts, most frequent first, ties alphabetical."""
    counts = Counter(c.upper() for line in lines for c in line if _is_letter(c))
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))


def character_frequencies(line: str) -> list[tuple[int, int]]:
    """Character codes with their counts, rarest first, ties by larger code first."""
    for c in line:
        if ord(c) >= 128:
            raise ValueError(f"not an ASCII character: {c!r}")
    counts = Counter(map(ord, line))
    return sorted(counts.items(), key=lambda item: (item[1], -item[0]))


def unshift_wertyu(text: str) -> str:
    """Replace each keyboard character by the key to its left."""

    def shift(c: str) -> str:
        pos = _KEYBOARD.find(c)
        return _KEYBOARD[pos - 1] if pos >= 1 else c

    return "".join(map(shift, text))


def decode_shifted(line: str) -> str:
    """Replace each key by the one two places to its left, keeping spaces."""
    out = []
    for c in line:
        if c == " ":
            out.append(c)
            continue
        pos = _KEYBOARD.find(c.upper())
        if pos < 2:
            raise ValueError(f"cannot decode character {c!r}")
        shifted = _KEYBOARD[pos - 2]
        out.append(shifted.lower() if c.islower() else shifted)
    return "".join(out)


def _word_counts(scanner: _Scanner) -> Counter[str]:
    counts: Counter[str] = Counter()
    word: list[str] = []
    while (c := scanner.char()) is not None:
        if _is_letter(c):
            word.append(c.lower())
        elif word:
            finished = "".join(word)
            word.clear()
            if finished == _END_OF_TEXT:
                break
            counts[finished] += 1
    return counts


def _with_count(counts: Counter[str], n: int) -> list[str]:
    return sorted(word for word, count in counts.items() if count == n)


def frequent_words(text: str, n: int) -> list[str]:
    """Words occurring exactly n times before the end marker, in order."""
    return _with_count(_word_counts(_Scanner(text)), n)


def common_permutation(a: str, b: str) -> str:
    """Sorted lower-case letters common to both strings, with multiplicity."""
    ca, cb = Counter(a), Counter(b)
    return "".join(c * min(ca[c], cb[c]) for c in ascii_lowercase)


def tex_quotes(text: str) -> str:
    """Turn double quotes into alternating opening and closing TeX quotes."""
    parts = text.split('"')
    return parts[0] + "".join(
        ("``" if i % 2 == 0 else "''") + part for i, part in enumerate(parts[1:])
    )


def count_words(line: str) -> int:
    """Number of runs of letters in the line."""
    return len(_WORD.findall(line))


def most_frequent_letters(line: str) -> tuple[str, int]:
    """Letters sharing the highest count, in character order, and that count."""
    counts = Counter(c for c in line if _is_letter(c))
    top = max(counts.values(), default=0)
    return "".join(sorted(c for c, v in counts.items() if v == top)), top


def ox_score(s: str) -> int:
    """Score of a quiz result where each O scores its run length so far."""
    total = run = 0
    for c in s:
        run = run + 1 if c == "O" else 0
        total += run
    return total


def classify_palindrome(s: str) -> str:
    """Whether the string is a regular palindrome, a mirrored string, both or neither."""
    if not s:
        raise ValueError("classify_palindrome needs a non-empty string")
    is_palindrome = s == s[::-1]
    is_mirrored = all(_MIRROR.get(c) == r for c, r in zip(s, reversed(s)))
    return _PALINDROME_KINDS[2 * is_mirrored + is_palindrome]


def smallest_period(s: str) -> int:
    """Length of the shortest block that repeats to form the whole string."""
    if not s:
        raise ValueError("smallest_period needs a non-empty string")
    size = len(s)
    return next(
        k for k in range(1, size + 1) if size % k == 0 and s == s[:k] * (size // k)
    )


def rotate_lines(lines: Iterable[str]) -> list[str]:
    """Rotate the text a quarter turn clockwise, padding short lines with spaces."""
    lines = list(lines)
    width = max(map(len, lines), default=0)
    return [
        "".join(line[i] if i < len(line) else " " for line in reversed(lines))
        for i in range(width)
    ]


def substitute(plain: str, cipher: str, lines: Iterable[str]) -> list[str]:
    """Encode lines by mapping each plain-alphabet character to the cipher one."""
    if len(cipher) < len(plain):
        raise ValueError("the cipher alphabet is shorter than the plain one")
    table = {ord(p): c for p, c in zip(plain, cipher)}
    return [line.translate(table) for line in lines]


def country_counts(lines: Iterable[str]) -> list[tuple[str, int]]:
    """Countries, named by the first word of each line, with their counts."""
    counts = Counter(words[0] for words in map(str.split, lines) if words)
    return sorted(counts.items())


def _as_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def _count_then_tokens(text: str) -> Iterator[str]:
    tokens = iter(text.split())
    count = int(next(tokens, "0"))
    return islice(tokens, count)


def _solve_10008(text: str) -> list[str]:
    scanner = _Scanner(text)
    count = int(scanner.token() or 0)
    scanner.line()
    lines = islice(scanner.lines(), count)
    return [f"{letter} {count}" for letter, count in letter_frequencies(lines)]


def _solve_10062(text: str) -> list[str]:
    out: list[str] = []
    for i, line in enumerate(_Scanner(text).lines()):
        if i:
            out.append("")
        out.extend(f"{code} {count}" for code, count in character_frequencies(line))
    return out


def _solve_10082(text: str) -> list[str]:
    return _as_lines(unshift_wertyu(text))


def _solve_10222(text: str) -> list[str]:
    return [decode_shifted(line) for line in _Scanner(text).lines()]


def _solve_10126(text: str) -> list[str]:
    scanner = _Scanner(text)
    out: list[str] = []
    while (token := scanner.token()) is not None:
        n = int(token)
        if out:
            out.append("")
        out.extend(_with_count(_word_counts(scanner), n) or [_NO_WORD])
    return out


def _solve_10252(text: str) -> list[str]:
    lines = _Scanner(text).lines()
    return [common_permutation(a, b) for a, b in zip(lines, lines)]


def _solve_272(text: str) -> list[str]:
    return _as_lines(tex_quotes(text))


def _solve_494(text: str) -> list[str]:
    return [str(count_words(line)) for line in _Scanner(text).lines()]


def _solve_499(text: str) -> list[str]:
    out = []
    for line in _Scanner(text).lines():
        letters, top = most_frequent_letters(line)
        out.append(f"{letters} {top}")
    return out


def _solve_1585(text: str) -> list[str]:
    return [str(ox_score(s)) for s in _count_then_tokens(text)]


def _solve_401(text: str) -> list[str]:
    out = []
    for s in text.split():
        out.extend([f"{s} -- is {classify_palindrome(s)}.", ""])
    return out


def _solve_455(text: str) -> list[str]:
    strings = list(_count_then_tokens(text))
    out = []
    for i, s in enumerate(strings):
        if i:
            out.append("")
        out.append(str(smallest_period(s)))
    return out


def _solve_490(text: str) -> list[str]:
    return rotate_lines(_Scanner(text).lines())


def _solve_865(text: str) -> list[str]:
    scanner = _Scanner(text)
    first = scanner.line()
    if first is None:
        return []
    cases = int(first)
    scanner.line()
    out: list[str] = []
    for case in range(cases):
        plain = scanner.line() or ""
        cipher = scanner.line() or ""
        out.extend([cipher, plain])
        body = takewhile(lambda line: line != "", scanner.lines())
        out.extend(substitute(plain, cipher, body))
        if case < cases - 1:
            out.append("")
    return out


def _solve_10420(text: str) -> list[str]:
    scanner = _Scanner(text)
    count = int(scanner.token() or 0)
    scanner.line()
    lines = islice((line for line in scanner.lines() if line.split()), count)
    return [f"{country} {n}" for country, n in country_counts(lines)]


def problems() -> dict[str, Callable[[str], list[str]]]:
    """Map each problem number to the function that answers its input."""
    return {
        "10008": _solve_10008,
        "10062": _solve_10062,
        "10082": _solve_10082,
        "10126": _solve_10126,
        "10222": _solve_10222,
        "10252": _solve_10252,
        "10420": _solve_10420,
        "1585": _solve_1585,
        "272": _solve_272,
        "401": _solve_401,
        "455": _solve_455,
        "490": _solve_490,
        "494": _solve_494,
        "499": _solve_499,
        "865": _solve_865,
    }


def solve(problem: str, text: str) -> str:
    """Answer the input text of the named problem."""
    solver = problems().get(str(problem))
    if solver is None:
        raise ValueError(f"unknown problem {problem!r}")
    return "".join(line + "\n" for line in solver(text))