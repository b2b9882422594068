"""Problems played out on grids, boards and character displays."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field

_HEADINGS = "NESW"
_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))
_LCD = {
    "0": ("010", "101", "000", "101", "010"),
    "1": ("000", "001", "000", "001", "000"),
    "2": ("010", "001", "010", "100", "010"),
    "3": ("010", "001", "010", "001", "010"),
    "4": ("000", "101", "010", "001", "000"),
    "5": ("010", "100", "010", "001", "010"),
    "6": ("010", "100", "010", "101", "010"),
    "7": ("010", "001", "000", "001", "000"),
    "8": ("010", "101", "010", "101", "010"),
    "9": ("010", "101", "010", "001", "010"),
}

Board = frozenset[tuple[int, int]]


@dataclass
class MarsGrid:
    """A rectangular plateau that remembers where robots fell off its edge."""

    width: int
    height: int
    scents: set[tuple[int, int]] = field(default_factory=set)

    def move(self, x: int, y: int, heading: str,
             commands: Iterable[str]) -> tuple[int, int, str, bool]:
        """Run a robot's commands; return its final x, y, heading and whether it was lost."""
        if len(heading) != 1 or heading not in _HEADINGS:
            raise ValueError(f"unknown heading {heading!r}")
        d = _HEADINGS.index(heading)
        lost = False
        for op in commands:
            if op == "L":
                d = (d + 3) % 4
            elif op == "R":
                d = (d + 1) % 4
            else:
                dx, dy = _STEPS[d]
                nx, ny = x + dx, y + dy
                if 0 <= nx <= self.width and 0 <= ny <= self.height:
                    x, y = nx, ny
                elif (x, y) not in self.scents:
                    self.scents.add((x, y))
                    lost = True
                    break
        return x, y, _HEADINGS[d], lost


def minesweeper(rows: Iterable[str]) -> list[str]:
    """Replace each safe cell by the number of mines around it."""
    rows = list(rows)
    height = len(rows)

    def cell(i: int, j: int) -> str:
        if rows[i][j] == "*":
            return "*"
        mines = sum(
            1
            for y in range(max(i - 1, 0), min(i + 2, height))
            for x in range(max(j - 1, 0), min(j + 2, len(rows[y])))
            if rows[y][x] == "*"
        )
        return str(mines)

    return ["".join(cell(i, j) for j in range(len(row))) for i, row in enumerate(rows)]


def largest_square(grid: Sequence[str], r: int, c: int) -> int:
    """Side of the largest square of equal characters centred on (r, c)."""
    grid = list(grid)
    rows = len(grid)
    cols = min(map(len, grid), default=0)
    if not (0 <= r < rows and 0 <= c < len(grid[r])):
        raise ValueError(f"({r}, {c}) lies outside the grid")
    centre = grid[r][c]
    radius = 1
    while True:
        top, bottom, left, right = r - radius, r + radius, c - radius, c + radius
        if top < 0 or bottom >= rows or left < 0 or right >= cols:
            break
        ring = [grid[top][j] for j in range(left, right + 1)]
        ring += [grid[bottom][j] for j in range(left, right + 1)]
        ring += [grid[i][left] for i in range(top, bottom + 1)]
        ring += [grid[i][right] for i in range(top, bottom + 1)]
        if any(ch != centre for ch in ring):
            break
        radius += 1
    return 2 * radius - 1


def max_submatrix_sum(matrix: Iterable[Iterable[int]]) -> int:
    """Largest sum of any rectangular block of the matrix."""
    rows = [list(row) for row in matrix]
    if not rows or not rows[0]:
        raise ValueError("max_submatrix_sum needs a non-empty matrix")
    cols = len(rows[0])
    if any(len(row) != cols for row in rows):
        raise ValueError("max_submatrix_sum needs rows of equal length")
    prefix = [[0] * cols]
    for row in rows:
        prefix.append([p + v for p, v in zip(prefix[-1], row)])
    best: int | None = None
    for top in range(len(rows)):
        for bottom in range(top + 1, len(rows) + 1):
            run = 0
            for low, high in zip(prefix[top], prefix[bottom]):
                value = high - low
                run = max(value, run + value)
                best = run if best is None else max(best, run)
    assert best is not None
    return best


def skyline(buildings: Iterable[Sequence[int]]) -> list[tuple[int, int]]:
    """Points where the outline height changes, from buildings given as (left, height, right)."""
    buildings = [tuple(b) for b in buildings]
    right_edge = max((right for _, _, right in buildings), default=0)
    right_edge = max(right_edge, 0)
    heights = [0] * (right_edge + 1)
    for left, height, right in buildings:
        for i in range(max(left, 0), right):
            heights[i] = max(heights[i], height)
    outline = []
    current = 0
    for i in range(1, right_edge + 1):
        if heights[i] != current:
            outline.append((i, heights[i]))
            current = heights[i]
    return outline


def rotate_board(board: Iterable[tuple[int, int]], n: int) -> Board:
    """Turn the set of occupied squares of an n by n board a quarter clockwise."""
    return frozenset((c, n - r + 1) for r, c in board)


def spot_game(n: int, moves: Iterable[tuple[int, int, str]]) -> tuple[int, int] | None:
    """Winner and deciding move of the game of Spot, or None for a draw.

    A player loses by producing a board seen before, in any rotation.
    """
    board: Board = frozenset()
    history = {board}
    for number, (r, c, op) in enumerate(moves, 1):
        board = board | {(r, c)} if op == "+" else board - {(r, c)}
        if board in history:
            return (2 if number % 2 else 1), number
        state = board
        for _ in range(4):
            history.add(state)
            state = rotate_board(state, n)
    return None


def lcd_display(size: int, digits: str) -> list[str]:
    """Draw the digits as a seven-segment display with segments of the given size."""
    if size < 0:
        raise ValueError("lcd_display needs a non-negative size")
    try:
        patterns = [_LCD[d] for d in digits]
    except KeyError as exc:
        raise ValueError(f"not a digit: {exc.args[0]!r}") from None
    lines: list[str] = []
    for part in range(5):
        if part % 2 == 0:
            lines.append(" ".join(
                " " + ("-" if p[part][1] == "1" else " ") * size + " " for p in patterns
            ))
        else:
            line = " ".join(
                ("|" if p[part][0] == "1" else " ")
                + " " * size
                + ("|" if p[part][2] == "1" else " ")
                for p in patterns
            )
            lines.extend([line] * size)
    return lines


def _ints(text: str) -> Iterator[int]:
    return (int(token) for token in text.split())


def _solve_10189(text: str) -> list[str]:
    tokens = iter(text.split())
    out: list[str] = []
    case = 0
    for n_token, m_token in zip(tokens, tokens):
        n, m = int(n_token), int(m_token)
        if n == 0 and m == 0:
            break
        rows = [next(tokens)[:m] for _ in range(n)]
        case += 1
        if case > 1:
            out.append("")
        out.append(f"Field #{case}:")
        out.extend(minesweeper(rows))
    return out


def _solve_10908(text: str) -> list[str]:
    tokens = iter(text.split())
    count = int(next(tokens, "0"))
    out: list[str] = []
    for _ in range(count):
        m, n, q = (int(next(tokens)) for _ in range(3))
        out.append(f"{m} {n} {q}")
        grid = [next(tokens)[:n] for _ in range(m)]
        for _ in range(q):
            r, c = int(next(tokens)), int(next(tokens))
            out.append(str(largest_square(grid, r, c)))
    return out


def _solve_108(text: str) -> list[str]:
    numbers = _ints(text)
    out = []
    for n in numbers:
        matrix = [[next(numbers) for _ in range(n)] for _ in range(n)]
        out.append(str(max_submatrix_sum(matrix)))
    return out


def _solve_105(text: str) -> list[str]:
    numbers = _ints(text)
    outline = skyline(zip(numbers, numbers, numbers))
    return [" ".join(f"{x} {h}" for x, h in outline)]


def _solve_118(text: str) -> list[str]:
    tokens = iter(text.split())
    width, height = int(next(tokens)), int(next(tokens))
    grid = MarsGrid(width, height)
    out = []
    for x, y, heading, commands in zip(tokens, tokens, tokens, tokens):
        fx, fy, fh, lost = grid.move(int(x), int(y), heading, commands)
        out.append(f"{fx} {fy} {fh}" + (" LOST" if lost else ""))
    return out


def _solve_141(text: str) -> list[str]:
    tokens = iter(text.split())
    out = []
    for token in tokens:
        n = int(token)
        if n == 0:
            break
        moves = [
            (int(next(tokens)), int(next(tokens)), next(tokens)) for _ in range(2 * n)
        ]
        result = spot_game(n, moves)
        if result is None:
            out.append("Draw")
        else:
            out.append(f"Player {result[0]} wins on move {result[1]}")
    return out


def _solve_706(text: str) -> list[str]:
    tokens = iter(text.split())
    out: list[str] = []
    for size_token, digits in zip(tokens, tokens):
        size = int(size_token)
        if size == 0:
            break
        out.extend(lcd_display(size, digits))
        out.append("")
    return out


def problems() -> dict[str, Callable[[str], list[str]]]:
    """Map each problem number to the function that answers its input."""
    return {
        "105": _solve_105,
        "108": _solve_108,
        "10189": _solve_10189,
        "10908": _solve_10908,
        "118": _solve_118,
        "141": _solve_141,
        "706": _solve_706,
    }


def solve(problem: str, text: str) -> str:
    """Answer the input text of the named problem."""
    solver = problems().get(str(problem))
    if solver is None:
        raise ValueError(f"unknown problem {problem!r}")
    return "".join(line + "\n" for line in solver(text))