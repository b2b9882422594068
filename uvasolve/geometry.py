"""Problems about points, shapes, angles and areas."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass

_EARTH_RADIUS = 6440.0
_END_POINT = 9999.9

Point = tuple[float, float]


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its upper-left and lower-right corners."""

    x1: float
    y1: float
    x2: float
    y2: float

    def contains(self, x: float, y: float) -> bool:
        """Tell whether the point lies strictly inside the rectangle."""
        return self.x1 < x < self.x2 and self.y2 < y < self.y1


def shaded_areas(a: float) -> tuple[float, float, float]:
    """Areas of the striped, dotted and hatched regions of a square of side a."""
    a2 = a * a
    grid = a2 - 2.0 * (math.pi * a2 / 12.0) - (math.sqrt(3.0) / 4.0 * a2)
    dotted = (a2 - math.pi * a2 / 4.0) - 2.0 * grid
    center = a2 - 4.0 * grid - 4.0 * dotted
    return center, 4.0 * dotted, 4.0 * grid


def box_cuts(length: float, width: float) -> tuple[float, float, float]:
    """Cut sizes giving the largest box, and the two giving the smallest."""
    max_x = (length + width - math.sqrt(length * length - length * width + width * width)) / 6.0
    return max_x, 0.0, min(length, width) / 2.0


def satellite_distances(s: float, a: float, unit: str) -> tuple[float, float]:
    """Arc and chord distance between two satellites at height s, angle a apart.

    The angle is in degrees, or in minutes when unit is "min".
    """
    radius = s + _EARTH_RADIUS
    if unit == "min":
        a /= 60.0
    if a >= 360.0:
        a = math.fmod(a, 360.0)
    if a > 180.0:
        a = 360.0 - a
    rad = a * math.pi / 180.0
    return radius * rad, 2.0 * radius * math.sin(rad / 2.0)


def fourth_vertex(p1: Sequence[float], p2: Sequence[float],
                  p3: Sequence[float], p4: Sequence[float]) -> Point:
    """Fourth corner of the parallelogram with sides p1-p2 and p3-p4 sharing a point."""
    p1, p2, p3, p4 = (tuple(p) for p in (p1, p2, p3, p4))
    if p1 == p3:
        shared, a, b = p1, p2, p4
    elif p1 == p4:
        shared, a, b = p1, p2, p3
    elif p2 == p3:
        shared, a, b = p2, p1, p4
    else:
        shared, a, b = p2, p1, p3
    return a[0] + b[0] - shared[0], a[1] + b[1] - shared[1]


def clock_angle(h: float, m: float) -> float:
    """Smaller angle in degrees between the hands of a clock at h:m."""
    angle = abs(30 * h - 5.5 * m)
    if angle > 180:
        angle = 360 - angle
    return angle


def cube_overlap(cubes: Iterable[Sequence[int]]) -> int:
    """Volume shared by all cubes, each given as (x, y, z, side)."""
    cubes = [tuple(c) for c in cubes]
    if not cubes:
        raise ValueError("cube_overlap needs at least one cube")
    volume = 1
    for axis in range(3):
        low = max(c[axis] for c in cubes)
        high = min(c[axis] + c[3] for c in cubes)
        volume *= max(0, high - low)
    return volume


def containing_figures(x: float, y: float, rectangles: Iterable[Rectangle]) -> list[int]:
    """One-based numbers of the rectangles that contain the point."""
    return [i for i, rect in enumerate(rectangles, 1) if rect.contains(x, y)]


def is_box(faces: Iterable[Sequence[int]]) -> bool:
    """Tell whether six rectangles, given as (w, h), fold into a box."""
    p = sorted(tuple(sorted(face)) for face in faces)
    if len(p) != 6:
        raise ValueError("is_box needs exactly six faces")
    return (
        p[0] == p[1]
        and p[2] == p[3]
        and p[4] == p[5]
        and p[0][0] == p[2][0]
        and p[0][1] == p[4][0]
        and p[2][1] == p[4][1]
    )


def _floats(text: str) -> Iterator[float]:
    return (float(token) for token in text.split())


def _ints(text: str) -> Iterator[int]:
    return (int(token) for token in text.split())


def _solve_10209(text: str) -> list[str]:
    return [
        "{:.3f} {:.3f} {:.3f}".format(*shaded_areas(a)) for a in _floats(text)
    ]


def _solve_10215(text: str) -> list[str]:
    numbers = _floats(text)
    lines = []
    for length, width in zip(numbers, numbers):
        max_x, _, min_x = box_cuts(length, width)
        lines.append(f"{max_x + 1e-9:.3f} 0.000 {min_x + 1e-9:.3f}")
    return lines


def _solve_10221(text: str) -> list[str]:
    tokens = iter(text.split())
    lines = []
    for s, a, unit in zip(tokens, tokens, tokens):
        arc, chord = satellite_distances(float(s), float(a), unit)
        lines.append(f"{arc:.6f} {chord:.6f}")
    return lines


def _solve_10242(text: str) -> list[str]:
    numbers = _floats(text)
    lines = []
    for values in zip(*[numbers] * 8):
        x, y = fourth_vertex(values[0:2], values[2:4], values[4:6], values[6:8])
        lines.append(f"{x:.3f} {y:.3f}")
    return lines


def _solve_579(text: str) -> list[str]:
    numbers = _floats(text.replace(":", " "))
    lines = []
    for h, m in zip(numbers, numbers):
        if h == 0 and m == 0:
            break
        lines.append(f"{clock_angle(h, m):.3f}")
    return lines


def _solve_737(text: str) -> list[str]:
    numbers = _ints(text)
    lines = []
    for n in numbers:
        if n == 0:
            break
        cubes = [tuple(next(numbers) for _ in range(4)) for _ in range(n)]
        lines.append(str(cube_overlap(cubes)))
    return lines


def _solve_476(text: str) -> list[str]:
    tokens = iter(text.split())
    rectangles = []
    for kind in tokens:
        if kind == "*":
            break
        rectangles.append(Rectangle(*(float(next(tokens)) for _ in range(4))))
    lines = []
    points = (float(token) for token in tokens)
    for number, (x, y) in enumerate(zip(points, points), 1):
        if x == _END_POINT and y == _END_POINT:
            break
        figures = containing_figures(x, y, rectangles)
        if figures:
            lines.extend(
                f"Point {number} is contained in figure {figure}" for figure in figures
            )
        else:
            lines.append(f"Point {number} is not contained in any figure")
    return lines


def _solve_1587(text: str) -> list[str]:
    numbers = _ints(text)
    lines = []
    for values in zip(*[numbers] * 12):
        faces = [values[i:i + 2] for i in range(0, 12, 2)]
        lines.append("POSSIBLE" if is_box(faces) else "IMPOSSIBLE")
    return lines


def problems() -> dict[str, Callable[[str], list[str]]]:
    """Map each problem number to the function that answers its input."""
    return {
        "10209": _solve_10209,
        "10215": _solve_10215,
        "10221": _solve_10221,
        "10242": _solve_10242,
        "1587": _solve_1587,
        "476": _solve_476,
        "579": _solve_579,
        "737": _solve_737,
    }


def solve(problem: str, text: str) -> str:
    """Answer the input text of the named problem."""
    solver = problems().get(str(problem))
    if solver is None:
        raise ValueError(f"unknown problem {problem!r}")
    return "".join(line + "\n" for line in solver(text))